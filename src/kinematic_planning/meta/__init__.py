"""Import definitions used for metaprogramming."""

from .paths import KINEMATIC_PLANNING_ROOT as KINEMATIC_PLANNING_ROOT
