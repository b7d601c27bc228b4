"""Define utility functions for computations involving angles."""

import math


def normalize_angle(angle_rad: float) -> float:
    """Normalize the given angle (in radians) into the range [-pi, pi].

    The remainder is computed exactly, so arbitrarily large angles normalize in constant time.
    """
    return math.remainder(angle_rad, 2 * math.pi)


def shortest_angular_distance(from_rad: float, to_rad: float) -> float:
    """Compute the signed shortest rotation (radians) taking one angle onto another.

    :param from_rad: Angle (radians) the rotation starts from
    :param to_rad: Angle (radians) the rotation ends at
    :return: Signed angle in [-pi, pi] such that `from_rad + result` is equivalent to `to_rad`
    """
    return normalize_angle(normalize_angle(to_rad) - normalize_angle(from_rad))
