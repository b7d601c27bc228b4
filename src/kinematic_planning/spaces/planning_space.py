"""Define a class describing the space in which kinematic motions are planned."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

import numpy as np

from kinematic_planning.kinematics import Configuration
from kinematic_planning.kinematics.configuration import QUATERNION_BLOCK_SIZE
from kinematic_planning.spaces.components import ComponentKind, StateComponent

if TYPE_CHECKING:
    from kinematic_planning.io.pydantic_schemata import PlanningConfigSchema

ValidityChecker = Callable[[Configuration], bool]
"""A predicate deciding whether a configuration is valid (e.g., collision-free)."""


@dataclass
class PlanningSpace:
    """A configuration space: per-dimension bounds, resolutions, and a validity predicate."""

    components: list[StateComponent]
    validity_checker: ValidityChecker

    _quaternion_starts: tuple[int, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Verify that quaternion components form complete 4-wide blocks."""
        if not self.components:
            raise ValueError("Cannot construct a PlanningSpace without any components.")

        starts: list[int] = []
        i = 0
        while i < self.dimension:
            if self.components[i].kind is not ComponentKind.QUATERNION:
                i += 1
                continue

            block = self.components[i : i + QUATERNION_BLOCK_SIZE]
            if len(block) < QUATERNION_BLOCK_SIZE or any(
                c.kind is not ComponentKind.QUATERNION for c in block
            ):
                raise ValueError(f"Incomplete quaternion block starting at component {i}.")
            starts.append(i)
            i += QUATERNION_BLOCK_SIZE

        self._quaternion_starts = tuple(starts)

    @classmethod
    def from_schema(
        cls,
        schema: PlanningConfigSchema,
        validity_checker: ValidityChecker,
    ) -> PlanningSpace:
        """Construct a planning space from validated configuration data.

        :param schema: Validated configuration listing the space's components
        :param validity_checker: Predicate deciding whether configurations are valid
        :return: Constructed PlanningSpace instance
        """
        components: list[StateComponent] = []
        for c in schema.components:
            if c.kind == "quaternion":
                components.extend(StateComponent.quaternion_block(c.resolution))
            elif c.kind == "wrapping_angle":
                components.append(
                    StateComponent.wrapping_angle(c.resolution, c.min_value, c.max_value),
                )
            else:
                components.append(StateComponent.linear(c.min_value, c.max_value, c.resolution))

        return PlanningSpace(components, validity_checker)

    @property
    def dimension(self) -> int:
        """Retrieve the number of components of configurations in the space."""
        return len(self.components)

    @property
    def quaternion_starts(self) -> tuple[int, ...]:
        """Retrieve the index of the first component of each quaternion block."""
        return self._quaternion_starts

    def component(self, index: int) -> StateComponent:
        """Retrieve the descriptor of the component with the given index."""
        if not 0 <= index < self.dimension:
            raise IndexError(f"Invalid component index {index} (dimension={self.dimension}).")
        return self.components[index]

    def new_configuration(self) -> Configuration:
        """Allocate an all-zero configuration with the dimension of this space."""
        return Configuration.zeros(self.dimension)

    def check_dimension(self, *states: Configuration) -> None:
        """Verify that the given configurations have the dimension of this space."""
        for state in states:
            if state.dimension != self.dimension:
                raise ValueError(
                    f"Configuration {state} does not match the space's dimension {self.dimension}.",
                )

    def is_valid(self, state: Configuration) -> bool:
        """Evaluate the validity predicate on the given configuration."""
        return bool(self.validity_checker(state))

    def satisfies_bounds(self, state: Configuration) -> bool:
        """Check whether every component of the configuration lies within its bounds."""
        self.check_dimension(state)
        return all(c.bounds.contains(v) for c, v in zip(self.components, state))

    def enforce_bounds(self, state: Configuration) -> None:
        """Clamp every out-of-bounds component of the configuration to its nearest bound."""
        self.check_dimension(state)
        for i, c in enumerate(self.components):
            state[i] = c.bounds.clamp(state[i])

    def format_state(self, state: Configuration) -> str:
        """Create a compact human-readable description of a configuration."""
        return np.array2string(state.values, precision=4, separator=" ")
