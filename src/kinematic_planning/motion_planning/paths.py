"""Define a class representing a path as an ordered sequence of owned configurations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator

from kinematic_planning.motion_planning.difference import configuration_distance

if TYPE_CHECKING:
    from kinematic_planning.kinematics import Configuration
    from kinematic_planning.spaces import PlanningSpace


class ConfigurationPath:
    """An ordered sequence of configurations, each owned exclusively by the path.

    A configuration object may appear at most once in a path. Empty and single-configuration
    paths are allowed; most path operations treat them as trivial.
    """

    def __init__(self, states: Iterable[Configuration] = ()) -> None:
        """Initialize the path from a sequence of configurations (taking ownership of them)."""
        self._states: list[Configuration] = []
        self.replace_states(states)

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[Configuration]:
        return iter(self._states)

    def __getitem__(self, index: int) -> Configuration:
        return self._states[index]

    def __repr__(self) -> str:
        return f"ConfigurationPath({self._states})"

    @property
    def states(self) -> list[Configuration]:
        """Retrieve a shallow copy of the list of configurations along the path."""
        return list(self._states)

    def replace_states(self, states: Iterable[Configuration]) -> None:
        """Replace the path's entire sequence of configurations in a single swap.

        :param states: New sequence of configurations (no configuration may repeat)
        """
        new_states = list(states)
        if len({id(s) for s in new_states}) != len(new_states):
            raise ValueError("A configuration cannot appear more than once in a path.")

        self._states = new_states

    def remove_between(self, first: int, last: int) -> int:
        """Remove the configurations strictly between two indices of the path.

        :param first: Index of the configuration kept before the removed run
        :param last: Index of the configuration kept after the removed run
        :return: Number of configurations removed from the path
        """
        if not 0 <= first < last < len(self._states):
            msg = f"Invalid index pair ({first}, {last}) for a path of length {len(self)}"
            raise IndexError(msg)

        del self._states[first + 1 : last]
        return last - first - 1

    def length(self, space: PlanningSpace) -> float:
        """Compute the total length of the path (sum of distances between neighbors)."""
        return sum(
            configuration_distance(space, a, b) for a, b in zip(self._states, self._states[1:])
        )
