"""Define classes and functions to simplify sampling from common spaces."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class RealRange:
    """A closed interval [low, high] on the real line."""

    low: float  # Inclusive
    high: float  # Inclusive

    def __post_init__(self) -> None:
        """Verify that any constructed RealRange defines a valid range."""
        if self.high < self.low:
            raise ValueError(f"Invalid RealRange: high ({self.high}) < low ({self.low}).")

    @classmethod
    def from_tuple(cls, t: tuple[float, float]) -> RealRange:
        """Construct a RealRange from a (low, high) tuple."""
        return RealRange(t[0], t[1])

    @property
    def length(self) -> float:
        """Retrieve the length of the interval."""
        return self.high - self.low

    def contains(self, x: float) -> bool:
        """Check whether the given value is inside the interval [low, high]."""
        return self.low <= x <= self.high

    def clamp(self, x: float) -> float:
        """Clamp the given value into the interval [low, high]."""
        return float(np.clip(x, a_min=self.low, a_max=self.high))

    def intersect(self, other: RealRange) -> RealRange | None:
        """Compute the intersection of this interval with another (None if they are disjoint)."""
        low = max(self.low, other.low)
        high = min(self.high, other.high)
        return RealRange(low, high) if low <= high else None

    def sample(self, rng: np.random.Generator | None = None) -> float:
        """Sample a value uniformly from the interval [low, high].

        :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
        :return: Float drawn uniformly from [low, high]
        """
        rng = np.random.default_rng() if rng is None else rng

        if self.length == 0.0:
            return self.low
        return float(rng.uniform(self.low, self.high))


def sample_uniform_hypersphere(n: int, num_samples: int, rng: np.random.Generator) -> NDArray:
    """Sample uniform positions on an n-dimensional unit sphere.

    Note: Here, "n-sphere" is used in the topological sense, meaning a sphere with a surface
        dimension of n. In this terminology, the "usual sphere" is called the 2-sphere.

    Reference:
        Sphere Point Picking (Wolfram MathWorld).
        https://mathworld.wolfram.com/SpherePointPicking.html

    :param n: Topological dimension of the hypersphere on which samples are generated
    :param num_samples: Number of samples to be generated
    :param rng: NumPy random number generator used to draw the samples
    :return: NumPy array of uniform (n + 1)-dim. samples on the unit n-sphere (# samples, n + 1)
    """
    sample_dim = n + 1  # Generate (n + 1)-dimensional samples to produce an n-sphere
    samples = rng.normal(size=(num_samples, sample_dim))
    sample_norms = np.linalg.norm(samples, axis=1, keepdims=True)  # Shape (num_samples, 1)
    return np.divide(samples, sample_norms)


def sample_unit_quaternion(rng: np.random.Generator | None = None) -> NDArray[np.float64]:
    """Sample a unit quaternion uniformly over the space of 3D orientations.

    Unit quaternions live on the 3-sphere, so a uniform point on the 3-sphere is a
    uniformly distributed orientation.

    :param rng: Optional NumPy random number generator; defaults to np.random.default_rng()
    :return: Array of the form [x, y, z, w] with unit norm
    """
    rng = np.random.default_rng() if rng is None else rng
    return sample_uniform_hypersphere(n=3, num_samples=1, rng=rng)[0]
