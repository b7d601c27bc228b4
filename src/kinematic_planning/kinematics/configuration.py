"""Define a class to represent robot configurations (points in a planning space)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

import numpy as np

from kinematic_planning.kinematics.rotations import Quaternion

if TYPE_CHECKING:
    from numpy.typing import NDArray

QUATERNION_BLOCK_SIZE = 4
"""Number of consecutive components used to store a quaternion (x, y, z, w)."""


class Configuration:
    """A point in a planning space, storing one real value per dimension.

    Each configuration owns its values: constructing a configuration from an array copies it,
    so no two configurations ever share storage.
    """

    __slots__ = ("values",)

    def __init__(self, values: Iterable[float] | NDArray[np.floating]) -> None:
        """Initialize the configuration from a sequence of component values.

        :param values: Real value of each dimension of the configuration (copied)
        """
        self.values: NDArray[np.float64] = np.array(values, dtype=np.float64)
        if self.values.ndim != 1:
            raise ValueError(f"Configuration expects a 1D sequence, got shape {self.values.shape}")

    @classmethod
    def zeros(cls, dimension: int) -> Configuration:
        """Construct an all-zero configuration of the given dimension."""
        return cls(np.zeros(dimension))

    @property
    def dimension(self) -> int:
        """Retrieve the number of components in the configuration."""
        return int(self.values.shape[0])

    def __len__(self) -> int:
        return self.dimension

    def __getitem__(self, index: int) -> float:
        return float(self.values[index])

    def __setitem__(self, index: int, value: float) -> None:
        self.values[index] = value

    def __iter__(self) -> Iterator[float]:
        """Provide an iterator over the component values."""
        yield from self.values.tolist()

    def __repr__(self) -> str:
        return f"Configuration({self.values.tolist()})"

    def copy(self) -> Configuration:
        """Create a new configuration owning a copy of this configuration's values."""
        return Configuration(self.values)

    def copy_from(self, other: Configuration) -> None:
        """Overwrite this configuration's values with those of another configuration.

        :param other: Configuration (of the same dimension) whose values are copied
        """
        if other.dimension != self.dimension:
            raise ValueError(f"Cannot copy a {other.dimension}-D configuration into {self}.")
        self.values[:] = other.values

    def to_array(self) -> NDArray[np.float64]:
        """Convert the configuration into a (copied) NumPy array."""
        return self.values.copy()

    def get_quaternion(self, start: int) -> Quaternion:
        """Retrieve the orientation stored in the 4-wide block beginning at the given index.

        :param start: Index of the first (x) component of the quaternion block
        :return: Unit quaternion read from components [start, start + 4)
        """
        return Quaternion.from_array(self.quaternion_block(start))

    def quaternion_block(self, start: int) -> NDArray[np.float64]:
        """Retrieve a copy of the raw (possibly non-unit) 4-wide block at the given index."""
        self._check_quaternion_block(start)
        return self.values[start : start + QUATERNION_BLOCK_SIZE].copy()

    def set_quaternion(self, start: int, quaternion: Quaternion) -> None:
        """Write an orientation into the 4-wide block beginning at the given index."""
        self._check_quaternion_block(start)
        self.values[start : start + QUATERNION_BLOCK_SIZE] = quaternion.to_array()

    def _check_quaternion_block(self, start: int) -> None:
        """Verify that a quaternion block starting at the given index fits in the configuration."""
        if start < 0 or start + QUATERNION_BLOCK_SIZE > self.dimension:
            raise IndexError(f"No quaternion block starts at index {start} of {self}.")

    def approx_equal(self, other: Configuration, rtol: float = 1e-05, atol: float = 1e-08) -> bool:
        """Evaluate whether another configuration has approximately the same values."""
        if other.dimension != self.dimension:
            return False
        return bool(np.allclose(self.values, other.values, rtol=rtol, atol=atol))
