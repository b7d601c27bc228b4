"""Define the kinds of goals a planning problem may specify."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from kinematic_planning.kinematics import Configuration


@dataclass
class GoalState:
    """A goal given by a single fixed configuration."""

    state: Configuration


@dataclass
class GoalRegion:
    """A goal given by a set of configurations, described by a membership test."""

    is_satisfied: Callable[[Configuration], bool]


Goal = Union[GoalState, GoalRegion]
"""A goal is either a fixed goal configuration or a region of goal configurations."""
