"""Define a class to represent 3D orientations as unit quaternions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from pyquaternion import Quaternion as Q

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass
class Quaternion:
    """A unit quaternion representing a 3D orientation."""

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        """Normalize the quaternion after it is initialized."""
        self.normalize()

    def normalize(self) -> None:
        """Normalize the quaternion to ensure it is a unit quaternion."""
        norm = float(np.linalg.norm(self.to_array()))
        if norm == 0:
            raise ValueError(f"Cannot normalize a zero-valued quaternion: {self}")

        self.x /= norm
        self.y /= norm
        self.z /= norm
        self.w /= norm

    @classmethod
    def identity(cls) -> Quaternion:
        """Construct a Quaternion corresponding to the identity rotation."""
        return Quaternion(0, 0, 0, 1)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Quaternion:
        """Construct a quaternion from a NumPy array of the form [x,y,z,w]."""
        if arr.shape != (4,):
            raise ValueError(f"Quaternion expects a 4-vector, got {arr.shape}")

        return cls(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert the quaternion to a NumPy array of the form [x,y,z,w]."""
        return np.array([self.x, self.y, self.z, self.w])

    def chordal_distance(self, other: Quaternion) -> float:
        """Compute the chordal distance between this orientation and another, in [0, sqrt(2)]."""
        return quaternion_chordal_distance(self.to_array(), other.to_array())

    def approx_equal(self, other: Quaternion, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another Quaternion is approximately equal to this one.

        Note: A quaternion is considered equal to its negation, as they express the same rotation.
        """
        self_array = self.to_array()
        other_array = other.to_array()

        return np.allclose(self_array, other_array, rtol=rtol, atol=atol) or np.allclose(
            -self_array,
            other_array,
            rtol=rtol,
            atol=atol,
        )


def quaternion_chordal_distance(xyzw_a: NDArray, xyzw_b: NDArray) -> float:
    """Compute the chordal distance between two quaternions stored as [x,y,z,w] arrays.

    The distance accounts for the sign ambiguity of quaternions, so a quaternion and its
    negation (which express the same rotation) are at distance zero. Inputs are not normalized,
    so the distance remains defined for the non-unit blocks produced by linear interpolation.

    Reference: https://kieranwynn.github.io/pyquaternion/#distance-computation
    """
    q_a = Q(xyzw_a[3], xyzw_a[0], xyzw_a[1], xyzw_a[2])  # Note: pyquaternion puts w first
    q_b = Q(xyzw_b[3], xyzw_b[0], xyzw_b[1], xyzw_b[2])
    return float(Q.absolute_distance(q_a, q_b))
