"""Demonstrate motion checking, input repair, and path simplification in a 2D square.

The space is loaded from a YAML configuration file and contains a single square obstacle
centered at (5, 5). The demo repairs an out-of-bounds start, checks two motions, and simplifies
an L-shaped path around the obstacle.

To run this script, use the commands:

    uv venv --clear && uv sync
    uv run scripts/path_simplification_demo.py

"""

from __future__ import annotations

import logging
from pathlib import Path

import click
import numpy as np
from rich.logging import RichHandler

from kinematic_planning.io import console
from kinematic_planning.io.pydantic_schemata import PlanningConfigSchema
from kinematic_planning.kinematics import Configuration
from kinematic_planning.meta import KINEMATIC_PLANNING_ROOT
from kinematic_planning.motion_planning import (
    ConfigurationPath,
    MotionValidator,
    PathSimplifier,
    SimplifierSettings,
    fix_invalid_input_states,
)
from kinematic_planning.spaces import GoalState, PlanningProblem, PlanningSpace

DEFAULT_CONFIG = KINEMATIC_PLANNING_ROOT / "config" / "square_2d.yaml"

OBSTACLE_CENTER = np.array([5.0, 5.0])
OBSTACLE_HALF_WIDTH = 0.5


def outside_obstacle(state: Configuration) -> bool:
    """Check whether a 2D configuration lies outside the square obstacle."""
    return bool(np.max(np.abs(state.values - OBSTACLE_CENTER)) >= OBSTACLE_HALF_WIDTH)


def l_shaped_path() -> ConfigurationPath:
    """Create a path from (0, 0) up to (0, 10) and then across to (10, 10)."""
    up = [Configuration([0.0, float(y)]) for y in range(11)]
    across = [Configuration([float(x), 10.0]) for x in range(1, 11)]
    return ConfigurationPath(up + across)


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG,
    help="YAML file describing the planning space and refinement settings",
)
@click.option("--seed", type=int, default=0, help="Seed for the random number generator")
def path_simplification_demo(config_path: Path, seed: int) -> None:
    """Run the motion checking and path simplification demo."""
    logging.basicConfig(level=logging.INFO, handlers=[RichHandler(console=console)])

    config = PlanningConfigSchema.validate_yaml(config_path)
    space = PlanningSpace.from_schema(config, validity_checker=outside_obstacle)
    rng = np.random.default_rng(seed)

    # Repair a start configuration that lies outside the space bounds
    problem = PlanningProblem(
        start_states=[Configuration([-1.0, 3.0])],
        goal=GoalState(Configuration([10.0, 10.0])),
    )
    rho_start = config.repair.rho_start or [1.0] * space.dimension
    rho_goal = config.repair.rho_goal or [1.0] * space.dimension
    fix_invalid_input_states(space, problem, rho_start, rho_goal, config.repair.attempts, rng)
    console.print(f"[cyan]Repaired start:[/] {space.format_state(problem.start_states[0])}")

    validator = MotionValidator(space)
    origin = Configuration([0.0, 0.0])
    for target in (Configuration([10.0, 10.0]), Configuration([4.0, 4.0])):
        subdivision = validator.check_motion_subdivision(origin, target)
        incremental = validator.check_motion_incremental(origin, target)
        console.print(
            f"[cyan]Motion to {space.format_state(target)}:[/] subdivision={subdivision}, "
            f"incremental={incremental.valid}, "
            f"last valid fraction={incremental.last_valid_fraction}",
        )

    path = l_shaped_path()
    settings = SimplifierSettings.from_schema(config.simplifier)
    simplifier = PathSimplifier(space, rng=rng, settings=settings)

    console.print(f"[cyan]Original path:[/] {len(path)} states, length {path.length(space):.3f}")
    simplifier.simplify_max(path)
    console.print(f"[cyan]Simplified path:[/] {len(path)} states, length {path.length(space):.3f}")
    console.print(f"[cyan]Simplified path is valid:[/] {validator.check_path(path)}")


if __name__ == "__main__":
    path_simplification_demo()
