"""Define Pydantic models for validating planning configuration YAML files."""

from __future__ import annotations

import math
from pathlib import Path
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from typing_extensions import Annotated

from kinematic_planning.io.yaml_utils import load_yaml_data

# =============================================================================
# Component Schemata
# =============================================================================


class LinearComponentSchema(BaseModel):
    """Schema for a dimension storing a plain real value."""

    kind: Literal["linear"]
    min_value: float
    max_value: float
    resolution: float = Field(gt=0, description="Maximum step between checked points")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_bounds(self) -> LinearComponentSchema:
        """Validate that the component's bounds form a nonempty interval."""
        if self.max_value < self.min_value:
            raise ValueError(f"Invalid bounds: max ({self.max_value}) < min ({self.min_value}).")
        return self


class WrappingAngleComponentSchema(BaseModel):
    """Schema for a dimension storing an angle (radians) that wraps around."""

    kind: Literal["wrapping_angle"]
    min_value: float = -math.pi
    max_value: float = math.pi
    resolution: float = Field(gt=0, description="Maximum angular step (radians)")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_bounds(self) -> WrappingAngleComponentSchema:
        """Validate that the component's bounds form a nonempty interval."""
        if self.max_value < self.min_value:
            raise ValueError(f"Invalid bounds: max ({self.max_value}) < min ({self.min_value}).")
        return self


class QuaternionComponentSchema(BaseModel):
    """Schema for an orientation, stored as four consecutive (x, y, z, w) dimensions."""

    kind: Literal["quaternion"]
    resolution: float = Field(gt=0, description="Maximum step per quaternion component")

    model_config = ConfigDict(extra="forbid")


ComponentSchema = Annotated[
    Union[LinearComponentSchema, WrappingAngleComponentSchema, QuaternionComponentSchema],
    Field(discriminator="kind"),
]

# =============================================================================
# Path Refinement Schemata
# =============================================================================


class SimplifierSchema(BaseModel):
    """Schema for the parameters of path simplification."""

    max_steps: int = Field(default=0, ge=0, description="Shortcut attempts (0: one per vertex)")
    max_empty_steps: int = Field(
        default=5,
        ge=0,
        description="Consecutive failed attempts before stopping (0: one per vertex)",
    )
    range_ratio: float = Field(default=0.2, gt=0, le=1, description="Shortcut window fraction")
    interpolation_factor: float = Field(default=1.0, gt=0, description="Densification factor")
    max_rounds: int = Field(default=10, ge=1, description="Maximum densify-and-shortcut rounds")

    model_config = ConfigDict(extra="forbid")


class RepairSchema(BaseModel):
    """Schema for the parameters used to repair invalid start and goal configurations."""

    attempts: int = Field(default=100, ge=0, description="Random draws per repaired state")
    rho_start: Optional[List[float]] = None
    rho_goal: Optional[List[float]] = None

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Planning Configuration Schema
# =============================================================================


class PlanningConfigSchema(BaseModel):
    """Schema for a planning space along with the settings used to refine its paths."""

    components: List[ComponentSchema] = Field(min_length=1)
    simplifier: SimplifierSchema = Field(default_factory=SimplifierSchema)
    repair: RepairSchema = Field(default_factory=RepairSchema)

    model_config = ConfigDict(extra="forbid")

    @property
    def dimension(self) -> int:
        """Compute the dimension of the described space (quaternions use four dimensions)."""
        return sum(4 if c.kind == "quaternion" else 1 for c in self.components)

    @model_validator(mode="after")
    def check_margins(self) -> PlanningConfigSchema:
        """Validate that any repair margins specify one non-negative value per dimension."""
        for name, rho in (("rho_start", self.repair.rho_start), ("rho_goal", self.repair.rho_goal)):
            if rho is None:
                continue
            if len(rho) != self.dimension:
                raise ValueError(f"Expected {self.dimension} values in {name}, got {len(rho)}.")
            if any(r < 0 for r in rho):
                raise ValueError(f"Margins in {name} must be non-negative: {rho}")
        return self

    @classmethod
    def validate_yaml(cls, yaml_path: Path) -> PlanningConfigSchema:
        """Validate a planning configuration YAML file and return the resulting schema.

        :param yaml_path: Path to a YAML file to be validated by the schema
        :return: Validated PlanningConfigSchema instance
        """
        yaml_data = load_yaml_data(yaml_path)

        try:
            return PlanningConfigSchema.model_validate(yaml_data)
        except ValidationError as v_err:
            raise RuntimeError(f"Validation error in {yaml_path}: {v_err}") from v_err
