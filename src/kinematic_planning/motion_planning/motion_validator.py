"""Define a class that checks whether straight-line motions between configurations are valid."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from kinematic_planning.motion_planning.difference import find_difference_step

if TYPE_CHECKING:
    from kinematic_planning.kinematics import Configuration
    from kinematic_planning.motion_planning.paths import ConfigurationPath
    from kinematic_planning.spaces import PlanningSpace


@dataclass(frozen=True)
class MotionCheckResult:
    """The outcome of checking a motion, including where the motion stopped being valid."""

    valid: bool

    last_valid_state: Configuration | None = None
    """Last valid configuration before the first invalid point (None if the end is invalid)."""

    last_valid_fraction: float | None = None
    """Fraction of the motion (in [0, 1)) completed at the last valid configuration."""

    def __bool__(self) -> bool:
        """Evaluate the result as True exactly when the motion is valid."""
        return self.valid


class MotionValidator:
    """Checks motions within a planning space at the resolution of its components.

    All checks assume that a motion's first configuration is already known to be valid,
    so it is never re-evaluated.
    """

    def __init__(self, space: PlanningSpace) -> None:
        """Initialize the validator for motions in the given planning space."""
        self.space = space

    def check_motion(self, s1: Configuration, s2: Configuration) -> bool:
        """Check whether the motion from `s1` to `s2` is valid (using bisection)."""
        return self.check_motion_subdivision(s1, s2)

    def check_motion_subdivision(self, s1: Configuration, s2: Configuration) -> bool:
        """Check a motion by repeatedly testing the middle of its unchecked index ranges.

        Ranges are processed breadth-first, so large invalid regions are typically found after
        few evaluations. The check finds some invalid point when one exists, but not necessarily
        the first along the motion.

        :param s1: Valid configuration the motion starts from
        :param s2: Configuration the motion ends at
        :return: True if every discretized point of the motion is valid, otherwise False
        """
        if not self.space.is_valid(s2):
            return False

        difference = find_difference_step(self.space, s1, s2, factor=1.0)
        nd = difference.num_steps

        pending: deque[tuple[int, int]] = deque()  # Closed ranges [lo, hi] of unchecked indices
        if nd >= 2:
            pending.append((1, nd - 1))

        test_state = self.space.new_configuration()  # Scratch storage for checked points

        while pending:
            lo, hi = pending.popleft()
            mid = (lo + hi) // 2

            difference.fill_state(test_state, s1, mid)
            if not self.space.is_valid(test_state):
                return False

            if lo < mid:
                pending.append((lo, mid - 1))
            if hi > mid:
                pending.append((mid + 1, hi))

        return True

    def check_motion_incremental(self, s1: Configuration, s2: Configuration) -> MotionCheckResult:
        """Check a motion by testing its discretized points in order, from `s1` toward `s2`.

        :param s1: Valid configuration the motion starts from
        :param s2: Configuration the motion ends at
        :return: Result of the check; if the end configuration is valid, an invalid result
            reports the last valid configuration before the first invalid point and the
            fraction of the motion completed there
        """
        if not self.space.is_valid(s2):
            return MotionCheckResult(valid=False)

        difference = find_difference_step(self.space, s1, s2, factor=1.0)
        nd = difference.num_steps
        test_state = self.space.new_configuration()

        for j in range(1, nd):
            difference.fill_state(test_state, s1, j)
            if not self.space.is_valid(test_state):
                return MotionCheckResult(
                    valid=False,
                    last_valid_state=difference.state_at(s1, j - 1),
                    last_valid_fraction=(j - 1) / nd,
                )

        return MotionCheckResult(valid=True)

    def check_path(self, path: ConfigurationPath | Sequence[Configuration] | None) -> bool:
        """Check whether a path is valid: its first configuration and every motion along it.

        :param path: Path to be checked (None is never valid; an empty path always is)
        :return: True if the path is valid, otherwise False
        """
        if path is None:
            return False

        states = list(path)
        if not states:
            return True

        if not self.space.is_valid(states[0]):
            return False

        return all(self.check_motion_subdivision(a, b) for a, b in zip(states, states[1:]))
