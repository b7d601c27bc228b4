"""Unit tests for the class representing 3D orientations as unit quaternions."""

import numpy as np
import pytest
from hypothesis import given

from kinematic_planning.kinematics.rotations import Quaternion

from .strategies.planning_strategies import quaternions


@given(quaternions())
def test_quaternion_is_normalized(quat: Quaternion) -> None:
    """Verify that any constructed Quaternion has unit norm."""
    # Arrange/Act - Given any quaternion, compute its norm
    norm = np.linalg.norm(quat.to_array())

    # Assert - Expect a unit quaternion
    assert norm == pytest.approx(1.0)


@given(quaternions())
def test_quaternion_chordal_distance_ignores_sign(quat: Quaternion) -> None:
    """Verify that a quaternion and its negation (the same rotation) are at distance zero."""
    # Arrange - Construct the negation of the quaternion
    negated = Quaternion.from_array(-quat.to_array())

    # Act - Compute distances from the quaternion to itself and to its negation
    self_distance = quat.chordal_distance(quat)
    negated_distance = quat.chordal_distance(negated)

    # Assert - Expect both distances to be zero, and the quaternions to compare as equal
    assert self_distance == pytest.approx(0.0, abs=1e-9)
    assert negated_distance == pytest.approx(0.0, abs=1e-9)
    assert quat.approx_equal(negated)


def test_quaternion_chordal_distance_of_half_turn() -> None:
    """Verify the chordal distance between the identity and a 180-degree rotation."""
    # Arrange - Construct the identity and a half turn about the z-axis
    identity = Quaternion.identity()
    half_turn = Quaternion(0.0, 0.0, 1.0, 0.0)

    # Act - Compute the distance between the two orientations
    distance = identity.chordal_distance(half_turn)

    # Assert - Expect the largest possible chordal distance, sqrt(2)
    assert distance == pytest.approx(np.sqrt(2.0))


def test_zero_quaternion_raises_error() -> None:
    """Verify that attempting to construct an all-zero Quaternion raises a ValueError."""
    # Arrange/Act/Assert - Expect that constructing an all-zero Quaternion will raise an error
    with pytest.raises(ValueError, match="zero"):
        _ = Quaternion(0.0, 0.0, 0.0, 0.0)
