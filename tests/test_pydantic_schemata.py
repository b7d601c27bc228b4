"""Unit tests for validating planning configuration YAML files."""

from __future__ import annotations

from pathlib import Path

import pytest

from kinematic_planning.io.pydantic_schemata import PlanningConfigSchema
from kinematic_planning.meta import KINEMATIC_PLANNING_ROOT
from kinematic_planning.motion_planning import SimplifierSettings
from kinematic_planning.spaces import ComponentKind, PlanningSpace

ROBOT_CONFIG = """
components:
  - kind: linear
    min_value: -2.0
    max_value: 2.0
    resolution: 0.05
  - kind: wrapping_angle
    resolution: 0.1
  - kind: quaternion
    resolution: 0.1
simplifier:
  max_empty_steps: 0
  max_rounds: 3
repair:
  attempts: 20
  rho_start: [0.1, 0.2, 0.0, 0.0, 0.0, 0.0]
"""


def write_yaml(directory: Path, text: str) -> Path:
    """Write the given YAML text into a file within the given directory."""
    yaml_path = directory / "planning.yaml"
    yaml_path.write_text(text)
    return yaml_path


def test_validate_example_config() -> None:
    """Verify that the configuration shipped with the package is valid."""
    # Arrange/Act - Validate the example configuration file
    schema = PlanningConfigSchema.validate_yaml(KINEMATIC_PLANNING_ROOT / "config/square_2d.yaml")

    # Assert - Expect a 2D space with the default simplifier parameters
    assert schema.dimension == 2
    assert schema.simplifier.range_ratio == pytest.approx(0.2)
    assert schema.repair.rho_start == [1.0, 1.0]


def test_construct_space_from_config(tmp_path: Path) -> None:
    """Verify that a planning space is constructed from a configuration of every component kind."""
    # Arrange - Write a configuration with linear, angular, and orientation components
    yaml_path = write_yaml(tmp_path, ROBOT_CONFIG)

    # Act - Validate the file and construct the described space
    schema = PlanningConfigSchema.validate_yaml(yaml_path)
    space = PlanningSpace.from_schema(schema, validity_checker=lambda _: True)
    settings = SimplifierSettings.from_schema(schema.simplifier)

    # Assert - Expect a 6D space whose orientation block starts at index 2
    assert schema.dimension == 6
    assert space.dimension == 6
    assert space.quaternion_starts == (2,)
    assert space.component(0).resolution == pytest.approx(0.05)
    assert space.component(1).kind is ComponentKind.WRAPPING_ANGLE
    assert space.component(5).kind is ComponentKind.QUATERNION
    assert schema.repair.attempts == 20
    assert schema.repair.rho_goal is None
    assert settings.max_empty_steps == 0
    assert settings.max_rounds == 3
    assert settings.max_steps == 0


def test_mismatched_margins_are_rejected(tmp_path: Path) -> None:
    """Verify that repair margins must provide one value per dimension."""
    # Arrange - Write a 6D configuration with only two start margins
    yaml_path = write_yaml(
        tmp_path,
        ROBOT_CONFIG.replace("[0.1, 0.2, 0.0, 0.0, 0.0, 0.0]", "[0.1, 0.2]"),
    )

    # Act/Assert - Expect validation to fail
    with pytest.raises(RuntimeError):
        PlanningConfigSchema.validate_yaml(yaml_path)


def test_inverted_bounds_are_rejected(tmp_path: Path) -> None:
    """Verify that a component's maximum cannot be below its minimum."""
    # Arrange - Write a configuration with inverted bounds
    yaml_path = write_yaml(
        tmp_path,
        "components:\n  - {kind: linear, min_value: 1.0, max_value: 0.0, resolution: 0.1}\n",
    )

    # Act/Assert - Expect validation to fail
    with pytest.raises(RuntimeError):
        PlanningConfigSchema.validate_yaml(yaml_path)


def test_unknown_component_kind_is_rejected(tmp_path: Path) -> None:
    """Verify that every component must declare one of the supported kinds."""
    # Arrange - Write a configuration with an unsupported component kind
    yaml_path = write_yaml(tmp_path, "components:\n  - {kind: helical, resolution: 0.1}\n")

    # Act/Assert - Expect validation to fail
    with pytest.raises(RuntimeError):
        PlanningConfigSchema.validate_yaml(yaml_path)


def test_missing_file_is_rejected(tmp_path: Path) -> None:
    """Verify that validating a nonexistent file raises a FileNotFoundError."""
    # Act/Assert - Expect loading to fail before validation
    with pytest.raises(FileNotFoundError):
        PlanningConfigSchema.validate_yaml(tmp_path / "missing.yaml")


def test_malformed_yaml_is_rejected(tmp_path: Path) -> None:
    """Verify that a file which is not valid YAML raises a RuntimeError naming the file."""
    # Arrange - Write a file with an unterminated flow sequence
    yaml_path = write_yaml(tmp_path, "components: [\n")

    # Act/Assert - Expect loading to fail with the file's path in the message
    with pytest.raises(RuntimeError, match="planning.yaml"):
        PlanningConfigSchema.validate_yaml(yaml_path)
