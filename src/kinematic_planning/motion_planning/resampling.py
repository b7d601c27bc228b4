"""Define functions that rebuild motions and paths at a target discretization density."""

from __future__ import annotations

from typing import TYPE_CHECKING

from kinematic_planning.motion_planning.difference import find_difference_step

if TYPE_CHECKING:
    from kinematic_planning.kinematics import Configuration
    from kinematic_planning.motion_planning.paths import ConfigurationPath
    from kinematic_planning.spaces import PlanningSpace


def interpolate_path(space: PlanningSpace, path: ConfigurationPath, factor: float = 1.0) -> None:
    """Insert intermediate configurations into a path at the resolution of the space.

    Every original configuration is kept, in order, as an anchor of the new sequence, and the
    motion between each pair of anchors gains `nd - 1` new interior configurations.

    :param space: Planning space containing the path
    :param path: Path modified in place by the interpolation
    :param factor: Scale on the resolution; values below 1 produce denser paths
    """
    anchors = path.states
    if len(anchors) < 2:
        return

    new_states: list[Configuration] = []
    for s1, s2 in zip(anchors, anchors[1:]):
        new_states.append(s1)

        difference = find_difference_step(space, s1, s2, factor)
        new_states.extend(difference.state_at(s1, j) for j in range(1, difference.num_steps))

    new_states.append(anchors[-1])

    path.replace_states(new_states)


def get_motion_states(
    space: PlanningSpace,
    s1: Configuration,
    s2: Configuration,
    states: list[Configuration],
    allocate: bool,
) -> int:
    """Compute the discretized configurations along the motion from `s1` to `s2`.

    Configurations are written in order: `s1`, then interior points of the motion, then `s2`,
    stopping once the available slots are exhausted.

    :param space: Planning space containing the motion
    :param s1: Configuration the motion starts from
    :param s2: Configuration the motion ends at
    :param states: List of configurations receiving the motion's points
    :param allocate: If True, `states` is resized to fit the whole motion using newly created
        configurations; otherwise its existing configurations are overwritten (up to its length)
    :return: Number of configurations written into `states`
    """
    difference = find_difference_step(space, s1, s2, factor=1.0)
    nd = difference.num_steps

    if allocate:
        states[:] = [space.new_configuration() for _ in range(nd + 1)]
    capacity = len(states)

    added = 0
    if capacity > 0:
        states[0].copy_from(s1)
        added += 1

    j = 1
    while j < nd and added < capacity:
        difference.fill_state(states[added], s1, j)
        added += 1
        j += 1

    if added < capacity:
        states[added].copy_from(s2)
        added += 1

    return added


def materialize_motion(
    space: PlanningSpace,
    s1: Configuration,
    s2: Configuration,
) -> list[Configuration]:
    """Create new configurations for every discretized point of the motion from `s1` to `s2`."""
    states: list[Configuration] = []
    get_motion_states(space, s1, s2, states, allocate=True)
    return states
