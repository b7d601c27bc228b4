"""Define a class representing a motion planning problem instance."""

from __future__ import annotations

from dataclasses import dataclass, field

from kinematic_planning.kinematics import Configuration
from kinematic_planning.spaces.goals import Goal


@dataclass
class PlanningProblem:
    """A set of start configurations and the goal a planner should reach from them."""

    start_states: list[Configuration] = field(default_factory=list)
    goal: Goal | None = None
