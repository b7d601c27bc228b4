"""Define functions that repair configurations which are invalid or outside the space bounds."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

from kinematic_planning.io.logging import DiagnosticSink, LoggingDiagnostics, log_info
from kinematic_planning.motion_planning.sampling_core import SamplingCore
from kinematic_planning.spaces import GoalState

if TYPE_CHECKING:
    from kinematic_planning.kinematics import Configuration
    from kinematic_planning.spaces import PlanningProblem, PlanningSpace


def _check_margins(space: PlanningSpace, rho: Sequence[float]) -> list[float]:
    """Verify that the given margins specify one search radius per dimension of the space."""
    margins = [float(r) for r in rho]
    if margins and len(margins) != space.dimension:
        raise ValueError(f"Expected {space.dimension} margins, got {len(margins)}: {margins}")
    return margins


def search_valid_nearby(
    space: PlanningSpace,
    near: Configuration,
    rho: Sequence[float],
    attempts: int,
    sampler: SamplingCore | None = None,
) -> Configuration | None:
    """Search for a valid configuration close to the given (possibly invalid) configuration.

    The configuration is first clamped into the space bounds. If that is not enough, up to
    `attempts` configurations are drawn independently within the margins around the clamped
    configuration, and the first valid one is returned.

    :param space: Planning space in which to search
    :param near: Configuration around which to search (left unmodified)
    :param rho: Search radius for each dimension (an empty sequence disables random search)
    :param attempts: Maximum number of random configurations drawn
    :param sampler: Optional sampler used for random draws; defaults to a new SamplingCore
    :return: New valid configuration near `near`, or None if none was found
    """
    margins = _check_margins(space, rho)

    state = near.copy()
    if not space.satisfies_bounds(state):
        space.enforce_bounds(state)

    if space.is_valid(state):
        return state

    if not margins or attempts <= 0:
        return None

    sampler = SamplingCore(space) if sampler is None else sampler
    center = state.copy()  # Every attempt is drawn around the same clamped configuration

    for _ in range(attempts):
        sampler.sample_near(state, center, margins)
        if space.is_valid(state):
            return state

    return None


def _fix_state(
    space: PlanningSpace,
    state: Configuration,
    label: str,
    rho: list[float],
    attempts: int,
    sampler: SamplingCore,
    diagnostics: DiagnosticSink,
) -> bool:
    """Repair a single start or goal configuration in place, if it needs repair.

    :return: True if the state is now valid and within bounds, otherwise False
    """
    in_bounds = space.satisfies_bounds(state)
    valid = False
    if in_bounds:
        valid = space.is_valid(state)
        if not valid:
            diagnostics.message(f"{label.capitalize()} state is not valid")
    else:
        diagnostics.message(f"{label.capitalize()} state is not within space bounds")

    if in_bounds and valid:
        return True

    margins_text = " ".join(str(r) for r in rho)
    diagnostics.message(
        f"Attempting to fix {label} state {space.format_state(state)} "
        f"within margins [ {margins_text} ]",
    )

    fixed = search_valid_nearby(space, state, rho, attempts, sampler)
    if fixed is None:
        return False

    state.copy_from(fixed)
    return True


def fix_invalid_input_states(
    space: PlanningSpace,
    problem: PlanningProblem,
    rho_start: Sequence[float],
    rho_goal: Sequence[float],
    attempts: int,
    rng: np.random.Generator | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> None:
    """Repair the start configurations and fixed goal configuration of a planning problem.

    Every configuration that is out of bounds or invalid is replaced (in place) by a valid
    configuration found nearby. Configurations that cannot be repaired are left unmodified and
    a warning is reported, so callers must check validity afterward. Only fixed-state goals
    are repaired; other kinds of goal are left as they are.

    :param space: Planning space of the problem
    :param problem: Planning problem whose input configurations are repaired
    :param rho_start: Search radius for each dimension when repairing start configurations
    :param rho_goal: Search radius for each dimension when repairing the goal configuration
    :param attempts: Maximum number of random configurations drawn per repaired configuration
    :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
    :param diagnostics: Optional destination for diagnostics; defaults to the package logger
    """
    start_margins = _check_margins(space, rho_start)
    goal_margins = _check_margins(space, rho_goal)

    diagnostics = LoggingDiagnostics() if diagnostics is None else diagnostics
    sampler = SamplingCore(space, rng)

    for i, start in enumerate(problem.start_states):
        if not _fix_state(space, start, "initial", start_margins, attempts, sampler, diagnostics):
            diagnostics.warn(f"Unable to fix start state {i}")

    goal = problem.goal
    if isinstance(goal, GoalState):
        if not _fix_state(space, goal.state, "goal", goal_margins, attempts, sampler, diagnostics):
            diagnostics.warn("Unable to fix goal state")
    elif goal is not None:
        log_info(f"Goal of type {type(goal).__name__} is not a fixed state; left unchanged.")
