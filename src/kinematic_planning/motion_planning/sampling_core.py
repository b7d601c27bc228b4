"""Define a class that samples random configurations from a planning space."""

from __future__ import annotations

from numbers import Real
from typing import TYPE_CHECKING, Sequence

import numpy as np

from kinematic_planning.kinematics import Quaternion
from kinematic_planning.math.sampling import RealRange, sample_unit_quaternion
from kinematic_planning.spaces import ComponentKind

if TYPE_CHECKING:
    from kinematic_planning.kinematics import Configuration
    from kinematic_planning.spaces import PlanningSpace


class SamplingCore:
    """Draws uniformly random configurations, globally or near a reference configuration.

    Each instance owns its random number generator; instances are not thread-safe.
    """

    def __init__(self, space: PlanningSpace, rng: np.random.Generator | None = None) -> None:
        """Initialize the sampler for a planning space.

        :param space: Planning space from which configurations are sampled
        :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
        """
        self.space = space
        self.rng = np.random.default_rng() if rng is None else rng

    def sample(self, out: Configuration) -> None:
        """Overwrite `out` with a configuration drawn uniformly from the whole space."""
        self.space.check_dimension(out)

        for i, component in enumerate(self.space.components):
            if component.kind is not ComponentKind.QUATERNION:
                out[i] = component.bounds.sample(self.rng)

        self._sample_orientations(out)

    def sample_near(
        self,
        out: Configuration,
        near: Configuration,
        rho: float | Sequence[float],
    ) -> None:
        """Overwrite `out` with a configuration drawn uniformly around a reference configuration.

        Each non-quaternion component is drawn from [near - rho, near + rho] intersected with
        its bounds (or clamped into its bounds if the two are disjoint). Orientations have no
        notion of nearness here, so quaternion blocks are drawn uniformly at random.

        :param out: Configuration receiving the sample
        :param near: Configuration around which the sample is drawn
        :param rho: Search radius, either shared by all dimensions or given per dimension
        """
        self.space.check_dimension(out, near)
        margins = self._expand_margins(rho)

        for i, component in enumerate(self.space.components):
            if component.kind is ComponentKind.QUATERNION:
                continue

            neighborhood = RealRange(near[i] - margins[i], near[i] + margins[i])
            window = component.bounds.intersect(neighborhood)
            if window is None:
                out[i] = component.bounds.clamp(near[i])
            else:
                out[i] = window.sample(self.rng)

        self._sample_orientations(out)

    def _sample_orientations(self, out: Configuration) -> None:
        """Overwrite every quaternion block of `out` with a uniformly random orientation."""
        for start in self.space.quaternion_starts:
            out.set_quaternion(start, Quaternion.from_array(sample_unit_quaternion(self.rng)))

    def _expand_margins(self, rho: float | Sequence[float]) -> list[float]:
        """Convert a scalar or per-dimension search radius into one radius per dimension."""
        if isinstance(rho, Real):
            return [float(rho)] * self.space.dimension

        margins = [float(r) for r in rho]
        if len(margins) != self.space.dimension:
            raise ValueError(
                f"Expected {self.space.dimension} margins for sampling, got {len(margins)}.",
            )
        return margins
