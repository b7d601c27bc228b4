"""Import classes and definitions for robot kinematics."""

from .configuration import Configuration as Configuration
from .rotations import Quaternion as Quaternion
