"""Import definitions relating to general mathematical operations."""

from .angles import normalize_angle as normalize_angle
from .angles import shortest_angular_distance as shortest_angular_distance
from .sampling import RealRange as RealRange
from .sampling import sample_unit_quaternion as sample_unit_quaternion
