"""Import classes describing planning spaces and planning problems."""

from .components import ComponentKind as ComponentKind
from .components import StateComponent as StateComponent
from .goals import Goal as Goal
from .goals import GoalRegion as GoalRegion
from .goals import GoalState as GoalState
from .planning_space import PlanningSpace as PlanningSpace
from .planning_space import ValidityChecker as ValidityChecker
from .problem import PlanningProblem as PlanningProblem
