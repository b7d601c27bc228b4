"""Unit tests for the SamplingCore class."""

from __future__ import annotations

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from kinematic_planning.kinematics import Configuration, Quaternion
from kinematic_planning.motion_planning import SamplingCore
from kinematic_planning.spaces import PlanningSpace, StateComponent

from .strategies.planning_strategies import configurations_in, linear_spaces


def space_with_orientation() -> PlanningSpace:
    """Create a space holding a 2D position followed by a quaternion orientation."""
    components = [StateComponent.linear(0.0, 10.0, 1.0), StateComponent.linear(-5.0, 5.0, 1.0)]
    components.extend(StateComponent.quaternion_block(resolution=0.1))
    return PlanningSpace(components, validity_checker=lambda _: True)


@given(linear_spaces(), st.integers(min_value=0, max_value=2**32 - 1))
def test_samples_lie_within_bounds(space: PlanningSpace, seed: int) -> None:
    """Verify that uniformly sampled configurations lie within the bounds of the space."""
    # Arrange - Create a seeded sampler and storage for its output
    sampler = SamplingCore(space, np.random.default_rng(seed))
    out = space.new_configuration()

    # Act - Sample a configuration
    sampler.sample(out)

    # Assert - Expect every component to be within bounds
    assert space.satisfies_bounds(out)


def test_sampled_quaternion_blocks_have_unit_norm() -> None:
    """Verify that quaternion blocks are sampled as unit quaternions."""
    # Arrange - Create a sampler for a space with an orientation block
    space = space_with_orientation()
    sampler = SamplingCore(space, np.random.default_rng(7))
    out = space.new_configuration()

    for _ in range(20):
        # Act - Sample a configuration, and sample another near it
        sampler.sample(out)
        near = out.copy()
        sampler.sample_near(out, near, 0.5)

        # Assert - Expect unit-norm orientations and in-bounds positions
        assert np.linalg.norm(out.values[2:6]) == pytest.approx(1.0)
        assert space.satisfies_bounds(out)


@given(st.data(), linear_spaces(), st.floats(min_value=0.0, max_value=50.0))
def test_sample_near_stays_within_margin(
    data: st.DataObject,
    space: PlanningSpace,
    rho: float,
) -> None:
    """Verify that nearby samples lie within the margin of the reference and the space bounds."""
    # Arrange - Create a sampler and a reference configuration within the space
    sampler = SamplingCore(space, np.random.default_rng(0))
    near = data.draw(configurations_in(space))
    out = space.new_configuration()

    # Act - Sample near the reference using a shared margin
    sampler.sample_near(out, near, rho)

    # Assert - Expect each component to lie within both the margin and the bounds
    assert space.satisfies_bounds(out)
    assert np.all(np.abs(out.values - near.values) <= rho + 1e-9)


def test_sample_near_with_per_dimension_margins() -> None:
    """Verify that per-dimension margins bound each component separately."""
    # Arrange - Create a sampler for a 2D space and a reference near a corner
    space = PlanningSpace(
        [StateComponent.linear(0.0, 10.0, 1.0), StateComponent.linear(0.0, 10.0, 1.0)],
        validity_checker=lambda _: True,
    )
    sampler = SamplingCore(space, np.random.default_rng(3))
    near = Configuration([0.5, 5.0])
    out = space.new_configuration()

    for _ in range(50):
        # Act - Sample with a wide margin in x and no margin in y
        sampler.sample_near(out, near, [2.0, 0.0])

        # Assert - Expect x clipped to [0, 2.5] and y fixed at the reference value
        assert 0.0 <= out[0] <= 2.5
        assert out[1] == 5.0


def test_sample_near_rejects_mismatched_margins() -> None:
    """Verify that margins must provide exactly one radius per dimension."""
    # Arrange - Create a sampler for a 6D space
    space = space_with_orientation()
    sampler = SamplingCore(space)
    out = space.new_configuration()
    near = space.new_configuration()

    # Act/Assert - Expect a ValueError for two margins in a 6D space
    with pytest.raises(ValueError):
        sampler.sample_near(out, near, [1.0, 1.0])


def test_seeded_samplers_are_reproducible() -> None:
    """Verify that samplers with identically seeded generators produce identical samples."""
    # Arrange - Create two samplers with the same seed
    space = space_with_orientation()
    sampler_a = SamplingCore(space, np.random.default_rng(42))
    sampler_b = SamplingCore(space, np.random.default_rng(42))
    out_a = space.new_configuration()
    out_b = space.new_configuration()

    # Act - Draw one sample from each
    sampler_a.sample(out_a)
    sampler_b.sample(out_b)

    # Assert - Expect identical values
    assert np.array_equal(out_a.values, out_b.values)


def test_sample_near_accepts_numpy_scalar_margin() -> None:
    """Verify that a NumPy scalar is accepted as a margin shared by all dimensions."""
    # Arrange - Create a sampler for a space with a position and an orientation
    space = space_with_orientation()
    sampler = SamplingCore(space, np.random.default_rng(2))
    near = space.new_configuration()
    near.set_quaternion(2, Quaternion.identity())
    out = space.new_configuration()

    # Act - Sample near the reference using a 32-bit NumPy scalar margin
    sampler.sample_near(out, near, np.float32(0.5))

    # Assert - Expect both positions within the margin of the reference
    assert abs(out[0] - near[0]) <= 0.5
    assert abs(out[1] - near[1]) <= 0.5
    assert out.get_quaternion(2).to_array() == pytest.approx(out.quaternion_block(2))


def test_sample_near_clamps_when_neighborhood_misses_bounds() -> None:
    """Verify that a reference too far outside the bounds yields the nearest bound."""
    # Arrange - Create a 1D space [0, 10] and a reference far below it
    space = PlanningSpace([StateComponent.linear(0.0, 10.0, 1.0)], lambda _: True)
    sampler = SamplingCore(space, np.random.default_rng(0))
    out = space.new_configuration()

    # Act - Sample within 1 of -5, a neighborhood disjoint from the bounds
    sampler.sample_near(out, Configuration([-5.0]), 1.0)

    # Assert - Expect the lower bound
    assert out[0] == 0.0
