"""Import classes and functions for checking, resampling, repairing, and simplifying motions."""

from .difference import DifferenceStep as DifferenceStep
from .difference import configuration_distance as configuration_distance
from .difference import find_difference_step as find_difference_step
from .motion_validator import MotionCheckResult as MotionCheckResult
from .motion_validator import MotionValidator as MotionValidator
from .path_simplifier import PathSimplifier as PathSimplifier
from .path_simplifier import SimplifierSettings as SimplifierSettings
from .paths import ConfigurationPath as ConfigurationPath
from .repair import fix_invalid_input_states as fix_invalid_input_states
from .repair import search_valid_nearby as search_valid_nearby
from .resampling import get_motion_states as get_motion_states
from .resampling import interpolate_path as interpolate_path
from .resampling import materialize_motion as materialize_motion
from .sampling_core import SamplingCore as SamplingCore
