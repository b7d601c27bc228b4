"""Define per-dimension descriptors of a planning space."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from kinematic_planning.math.sampling import RealRange


class ComponentKind(Enum):
    """The kind of value stored in one dimension of a configuration."""

    LINEAR = "linear"
    """A plain real value (e.g., a prismatic joint or a position)."""

    WRAPPING_ANGLE = "wrapping_angle"
    """An angle (radians) for which -pi and pi coincide (e.g., a continuous revolute joint)."""

    QUATERNION = "quaternion"
    """One of four consecutive components storing an orientation as (x, y, z, w)."""


@dataclass(frozen=True)
class StateComponent:
    """Metadata describing a single dimension of a planning space."""

    bounds: RealRange
    """Closed interval of values allowed in this dimension."""

    resolution: float
    """Maximum step size between consecutive checked points along a motion."""

    kind: ComponentKind = ComponentKind.LINEAR

    def __post_init__(self) -> None:
        """Verify that the component's resolution is usable for discretization."""
        if self.kind is not ComponentKind.QUATERNION and not self.resolution > 0.0:
            raise ValueError(f"Component resolution must be positive, got {self.resolution}.")

    @classmethod
    def linear(cls, min_value: float, max_value: float, resolution: float) -> StateComponent:
        """Construct a component storing a plain real value within [min_value, max_value]."""
        return StateComponent(RealRange(min_value, max_value), resolution, ComponentKind.LINEAR)

    @classmethod
    def wrapping_angle(
        cls,
        resolution: float,
        min_value: float = -np.pi,
        max_value: float = np.pi,
    ) -> StateComponent:
        """Construct a component storing an angle (radians) that wraps around."""
        bounds = RealRange(min_value, max_value)
        return StateComponent(bounds, resolution, ComponentKind.WRAPPING_ANGLE)

    @classmethod
    def quaternion_block(cls, resolution: float) -> list[StateComponent]:
        """Construct the four consecutive components that store an orientation."""
        return [
            StateComponent(RealRange(-1.0, 1.0), resolution, ComponentKind.QUATERNION)
            for _ in range(4)
        ]

    @property
    def min_value(self) -> float:
        """Retrieve the smallest value allowed in this dimension."""
        return self.bounds.low

    @property
    def max_value(self) -> float:
        """Retrieve the largest value allowed in this dimension."""
        return self.bounds.high
