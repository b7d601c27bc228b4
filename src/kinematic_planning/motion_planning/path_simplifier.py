"""Define a class that shortens valid paths by removing unnecessary vertices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from kinematic_planning.io.logging import log_info
from kinematic_planning.motion_planning.difference import configuration_distance
from kinematic_planning.motion_planning.motion_validator import MotionValidator
from kinematic_planning.motion_planning.resampling import interpolate_path

if TYPE_CHECKING:
    from kinematic_planning.io.pydantic_schemata import SimplifierSchema
    from kinematic_planning.motion_planning.paths import ConfigurationPath
    from kinematic_planning.spaces import PlanningSpace

LENGTH_TOLERANCE = 1e-9
"""Smallest decrease in path length counted as progress by a simplification round."""


@dataclass(frozen=True)
class SimplifierSettings:
    """Parameters controlling how aggressively paths are simplified."""

    max_steps: int = 0
    """Shortcut attempts per pass (0 means one attempt per vertex of the path)."""

    max_empty_steps: int = 5
    """Consecutive unsuccessful attempts ending a pass (0 means one per vertex of the path)."""

    range_ratio: float = 0.2
    """Largest index gap of attempted shortcuts, as a fraction of the number of vertices."""

    interpolation_factor: float = 1.0
    """Resolution factor used to densify the path between rounds."""

    max_rounds: int = 10
    """Maximum number of densify-and-shortcut rounds."""

    @classmethod
    def from_schema(cls, schema: SimplifierSchema) -> SimplifierSettings:
        """Construct simplifier settings from validated configuration data."""
        return SimplifierSettings(
            max_steps=schema.max_steps,
            max_empty_steps=schema.max_empty_steps,
            range_ratio=schema.range_ratio,
            interpolation_factor=schema.interpolation_factor,
            max_rounds=schema.max_rounds,
        )


class PathSimplifier:
    """Shortens paths by replacing sub-paths with direct motions that remain valid.

    Vertices are only removed when the motion replacing them passes the validator's check, so
    any motion that was valid before simplification remains valid afterward.
    """

    def __init__(
        self,
        space: PlanningSpace,
        rng: np.random.Generator | None = None,
        settings: SimplifierSettings | None = None,
    ) -> None:
        """Initialize the simplifier for paths in the given planning space.

        :param space: Planning space containing the simplified paths
        :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
        :param settings: Optional parameters used by `simplify_max` (defaults if None)
        """
        self.space = space
        self.validator = MotionValidator(space)
        self.rng = np.random.default_rng() if rng is None else rng
        self.settings = SimplifierSettings() if settings is None else settings

    def reduce_vertices(
        self,
        path: ConfigurationPath,
        max_steps: int = 0,
        max_empty_steps: int = 5,
        range_ratio: float = 0.2,
    ) -> bool:
        """Shortcut the path between random pairs of non-consecutive vertices.

        Each step picks two vertices at most `range_ratio` of the path apart. If the direct
        motion between them is valid, the vertices between them are removed.

        :param path: Path modified in place
        :param max_steps: Maximum number of shortcut attempts (0 means the number of vertices)
        :param max_empty_steps: Consecutive failed attempts after which to stop (0 means the
            number of vertices)
        :param range_ratio: Largest index gap between the picked vertices, as a fraction of
            the number of vertices (between 0 and 1)
        :return: True if any vertex was removed, otherwise False
        """
        if len(path) < 3:
            return False

        max_steps = max_steps if max_steps > 0 else len(path)
        max_empty_steps = max_empty_steps if max_empty_steps > 0 else len(path)

        removed = 0
        steps = 0
        empty_steps = 0
        while steps < max_steps and empty_steps < max_empty_steps:
            steps += 1
            empty_steps += 1

            count = len(path)
            if count < 3:
                break

            max_index = count - 1
            window = 1 + int(np.floor(0.5 + count * range_ratio))
            p1 = int(self.rng.integers(0, max_index, endpoint=True))
            p2 = int(
                self.rng.integers(max(p1 - window, 0), min(max_index, p1 + window), endpoint=True),
            )

            if abs(p1 - p2) < 2:  # Widen picks that leave nothing to remove
                if p1 < max_index - 1:
                    p2 = p1 + 2
                elif p1 > 1:
                    p2 = p1 - 2
                else:
                    continue

            p1, p2 = min(p1, p2), max(p1, p2)
            if self.validator.check_motion(path[p1], path[p2]):
                removed += path.remove_between(p1, p2)
                empty_steps = 0

        if removed:
            log_info(f"Shortcutting removed {removed} vertices ({len(path)} remain).")
        return removed > 0

    def collapse_close_vertices(
        self,
        path: ConfigurationPath,
        max_steps: int = 0,
        max_empty_steps: int = 5,
    ) -> bool:
        """Shortcut the path between the closest pairs of non-consecutive vertices.

        Each step picks the closest pair of vertices (with at least one vertex between them)
        not yet found to be unconnectable. If the direct motion between them is valid, the
        vertices between them are removed.

        :param path: Path modified in place
        :param max_steps: Maximum number of shortcut attempts (0 means the number of vertices)
        :param max_empty_steps: Consecutive failed attempts after which to stop (0 means the
            number of vertices)
        :return: True if any vertex was removed, otherwise False
        """
        if len(path) < 3:
            return False

        max_steps = max_steps if max_steps > 0 else len(path)
        max_empty_steps = max_empty_steps if max_empty_steps > 0 else len(path)

        # Distances between non-consecutive vertices, keyed by the identities of the vertices
        states = path.states
        distances: dict[tuple[int, int], float] = {}
        for i, s_i in enumerate(states):
            for s_j in states[i + 2 :]:
                distances[(id(s_i), id(s_j))] = configuration_distance(self.space, s_i, s_j)

        removed = 0
        steps = 0
        empty_steps = 0
        while steps < max_steps and empty_steps < max_empty_steps:
            steps += 1
            empty_steps += 1

            closest = self._find_closest_pair(path, distances)
            if closest is None:
                break

            p1, p2 = closest
            if self.validator.check_motion(path[p1], path[p2]):
                removed += path.remove_between(p1, p2)
                empty_steps = 0
            else:
                distances[(id(path[p1]), id(path[p2]))] = np.inf

        if removed:
            log_info(f"Collapsing close vertices removed {removed} vertices ({len(path)} remain).")
        return removed > 0

    def _find_closest_pair(
        self,
        path: ConfigurationPath,
        distances: dict[tuple[int, int], float],
    ) -> tuple[int, int] | None:
        """Find the indices of the closest non-consecutive vertices not yet rejected.

        :param path: Path whose vertices are compared
        :param distances: Cached distances between vertex pairs (rejected pairs map to inf)
        :return: Pair of path indices (p1 < p2 - 1), or None if no candidate pair remains
        """
        states = path.states
        closest: tuple[int, int] | None = None
        min_distance = np.inf

        for i, s_i in enumerate(states):
            for j in range(i + 2, len(states)):
                d = distances[(id(s_i), id(states[j]))]
                if d < min_distance:
                    min_distance = d
                    closest = (i, j)

        return closest

    def shortcut(self, path: ConfigurationPath) -> bool:
        """Run one pass of random shortcutting followed by close-vertex collapsing.

        :param path: Path modified in place
        :return: True if any vertex was removed, otherwise False
        """
        s = self.settings
        reduced = self.reduce_vertices(path, s.max_steps, s.max_empty_steps, s.range_ratio)
        collapsed = self.collapse_close_vertices(path, s.max_steps, s.max_empty_steps)
        return reduced or collapsed

    def simplify_max(self, path: ConfigurationPath) -> None:
        """Shorten the path as much as possible through repeated densify-and-shortcut rounds.

        Densifying the path exposes shortcuts between points that were not vertices before.
        A round is kept only if it shortens the path; the first round that does not ends the
        simplification (as does reaching the configured maximum number of rounds).

        :param path: Path modified in place
        """
        if len(path) < 2:
            return

        self.shortcut(path)

        for round_idx in range(self.settings.max_rounds):
            previous_states = path.states
            previous_length = path.length(self.space)

            interpolate_path(self.space, path, self.settings.interpolation_factor)
            self.shortcut(path)

            new_length = path.length(self.space)
            if new_length >= previous_length - LENGTH_TOLERANCE:
                path.replace_states(previous_states)  # Discard the unproductive round
                log_info(f"Path simplification converged after {round_idx} rounds.")
                return

            log_info(f"Simplification round {round_idx + 1}: path length {new_length:.4f}.")
