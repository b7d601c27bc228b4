"""Define functions to compare configurations and discretize the motions between them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from kinematic_planning.kinematics import Configuration
from kinematic_planning.kinematics.rotations import quaternion_chordal_distance
from kinematic_planning.math.angles import shortest_angular_distance
from kinematic_planning.spaces import ComponentKind

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from kinematic_planning.spaces import PlanningSpace


@dataclass(frozen=True)
class DifferenceStep:
    """The discretization of a straight-line motion between two configurations."""

    delta: NDArray[np.float64]
    """Per-dimension signed difference from the first configuration to the second."""

    num_steps: int
    """Number of equal steps (at least 1) splitting the motion."""

    @property
    def step(self) -> NDArray[np.float64]:
        """Retrieve the per-dimension increment between consecutive discretized points."""
        return self.delta / self.num_steps

    def state_at(self, origin: Configuration, j: float) -> Configuration:
        """Construct the configuration reached after `j` steps from the given origin."""
        return Configuration(origin.values + j * self.step)

    def fill_state(self, out: Configuration, origin: Configuration, j: float) -> None:
        """Overwrite `out` with the configuration reached after `j` steps from the origin."""
        out.values[:] = origin.values + j * self.step


def compute_difference(
    space: PlanningSpace,
    s1: Configuration,
    s2: Configuration,
) -> NDArray[np.float64]:
    """Compute the per-dimension signed difference from one configuration to another.

    Wrapping angles use the signed shortest angular distance (magnitude at most pi).
    Quaternion blocks are differenced component-wise; planners rely on the step counts
    this produces, so no rotation-aware difference is used.

    :param space: Planning space containing both configurations
    :param s1: Configuration the motion starts from
    :param s2: Configuration the motion ends at
    :return: Array `delta` such that `s1 + delta` is equivalent to `s2`
    """
    space.check_dimension(s1, s2)

    delta = s2.values - s1.values
    for i, component in enumerate(space.components):
        if component.kind is ComponentKind.WRAPPING_ANGLE:
            delta[i] = shortest_angular_distance(s1[i], s2[i])

    return delta


def find_difference_step(
    space: PlanningSpace,
    s1: Configuration,
    s2: Configuration,
    factor: float = 1.0,
) -> DifferenceStep:
    """Compute how finely a motion must be divided to respect every dimension's resolution.

    :param space: Planning space containing both configurations
    :param s1: Configuration the motion starts from
    :param s2: Configuration the motion ends at
    :param factor: Scale on the resolution; values below 1 produce finer subdivision
    :return: Difference vector and number of steps (at least 1) for the motion
    """
    if not factor > 0.0:
        raise ValueError(f"Discretization factor must be positive, got {factor}.")

    delta = compute_difference(space, s1, s2)

    num_steps = 1
    for i, component in enumerate(space.components):
        if component.resolution <= 0.0:
            continue  # Only quaternion components may leave their resolution unset
        d = 1 + int(abs(delta[i]) / (factor * component.resolution))
        num_steps = max(num_steps, d)

    return DifferenceStep(delta=delta, num_steps=num_steps)


def configuration_distance(space: PlanningSpace, s1: Configuration, s2: Configuration) -> float:
    """Compute the distance between two configurations.

    Non-quaternion dimensions contribute their (wrapping-aware) differences; each quaternion
    block contributes the chordal distance between its two orientations.

    :param space: Planning space containing both configurations
    :param s1: First configuration
    :param s2: Second configuration
    :return: Non-negative distance between the configurations
    """
    delta = compute_difference(space, s1, s2)
    is_rotation = np.array([c.kind is ComponentKind.QUATERNION for c in space.components])
    squared = float(np.dot(delta[~is_rotation], delta[~is_rotation]))

    for start in space.quaternion_starts:
        d = quaternion_chordal_distance(s1.quaternion_block(start), s2.quaternion_block(start))
        squared += d * d

    return float(np.sqrt(squared))
