"""The Building: topology snapshot, connector graph and direction queries.

Example with a single hallway::

    building = Building([
        Hallway([
            Room("A", Direction.LEFT),
            Room("B", Direction.RIGHT),
            Turn(Direction.RIGHT),
            Room("C", Direction.LEFT),
            Room("D", Direction.LEFT),
        ]),
    ])
    print(building.get_directions("A", "C"))

outputs::

    Turn left out of room A
    Continue, then turn right (after passing room B on your right)
    Continue, then turn left into room C
"""
from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import networkx as nx

from .config import get_default_capitalize, get_default_periods
from .graph import Graph, allow_all, build_graph, to_digraph, shortest_path
from .model import Hallway, StairNode, NodeId, node_to_string, node_from_string, is_left_or_right
from .narration import hallway_leg, stair_phrase, format_directions
from .registry import RoomRegistry, Location

__all__ = ["Building", "AllowedConnections"]

AllowedConnections = Union[None, Iterable[str], Callable[[str], bool]]

def _as_predicate(allowed: AllowedConnections) -> Callable[[str], bool]:
    if allowed is None:
        return allow_all
    if callable(allowed):
        return allowed
    if isinstance(allowed, str):
        allowed = (allowed,)
    names = frozenset(allowed)
    return lambda name: name in names

class Building:
    """An ordered collection of hallways plus an allowed-connector filter.

    Hallways are frozen, so the room index and connector graph are derived
    once here and never go stale. Use ``with_allowed_connections`` for an
    accessibility variant: it returns a new Building over the same hallways.
    """

    def __init__(self, hallways: Sequence[Hallway], allowed_connections: AllowedConnections = None):
        self._hallways: Tuple[Hallway, ...] = tuple(hallways)
        self._allowed = _as_predicate(allowed_connections)
        self._registry = RoomRegistry(self._hallways)
        self._graph: Graph = build_graph(self._hallways, self._allowed)
        self._digraph = nx.freeze(to_digraph(self._graph))
        self._node_locations: Dict[str, Location] = {}
        for h_ind, hallway in enumerate(self._hallways):
            for ind in hallway.node_indices(self._allowed):
                key = node_to_string(hallway.elements[ind].node_id)
                self._node_locations.setdefault(key, (h_ind, ind))

    # --- Snapshot access ---
    @property
    def hallways(self) -> Tuple[Hallway, ...]:
        return self._hallways

    @property
    def graph(self) -> Graph:
        """A copy of the connector graph."""
        return {key: dict(edges) for key, edges in self._graph.items()}

    @property
    def digraph(self) -> nx.DiGraph:
        """The connector graph as a frozen networkx DiGraph."""
        return self._digraph

    @property
    def registry(self) -> RoomRegistry:
        return self._registry

    @property
    def rooms_list(self) -> List[str]:
        """Every room name and alias, sorted."""
        return self._registry.sorted_names()

    def allows(self, connection_name: str) -> bool:
        return bool(self._allowed(connection_name))

    def with_allowed_connections(self, allowed_connections: AllowedConnections) -> "Building":
        return Building(self._hallways, allowed_connections)

    # --- Lookups ---
    def get_hallway_index_and_index(self, name: str) -> Optional[Location]:
        """(hallway index, element index) of a room name or alias, or None."""
        return self._registry.locate(name)

    def is_valid_room_name(self, name: str) -> bool:
        return self.get_hallway_index_and_index(name) is not None

    def node_location(self, key: str) -> Location:
        """Where the first declaration of a connector node key sits."""
        return self._node_locations[key]

    # --- Directions ---
    def get_directions(
        self,
        from_name: str,
        to_name: str,
        capitalize: Optional[bool] = None,
        periods: Optional[bool] = None,
    ) -> Optional[str]:
        """Directions from room ``from_name`` to room ``to_name``.

        Returns None if either name is not a room or alias in this building.
        """
        if capitalize is None:
            capitalize = get_default_capitalize()
        if periods is None:
            periods = get_default_periods()
        start = self.get_hallway_index_and_index(from_name)
        end = self.get_hallway_index_and_index(to_name)
        if start is None or end is None:
            return None
        return format_directions(self._raw_directions(start, end), capitalize=capitalize, periods=periods)

    def _raw_directions(self, start: Location, end: Location) -> str:
        from_h, from_ind = start
        to_h, to_ind = end

        # Same hallway: no connector hop needed
        if from_h == to_h and self._hallways[from_h].permits(from_ind, to_ind):
            return hallway_leg(
                self._hallways[from_h], from_ind, to_ind,
                is_beginning=True, is_end=True, entrance_was_straight=False,
            )

        source_ind = self._hallways[from_h].closest_node_index(from_ind, self._allowed, leaving=True)
        target_ind = self._hallways[to_h].closest_node_index(to_ind, self._allowed, leaving=False)
        if source_ind is None or target_ind is None:
            raise nx.NetworkXNoPath(f"No allowed connector links hallway {from_h} to hallway {to_h}")
        source = node_to_string(self._hallways[from_h].elements[source_ind].node_id)
        target = node_to_string(self._hallways[to_h].elements[target_ind].node_id)
        path = shortest_path(self._digraph, source, target)
        logging.debug("Route %s -> %s via %s", start, end, path)

        directions = ""
        current_h, current_ind = from_h, from_ind
        entrance_was_straight = False
        fresh_start = True
        for prev_key, key in zip(path, path[1:]):
            hallway_ind, ind = self.node_location(key)
            _, prev_ind = self.node_location(prev_key)
            prev_node: NodeId = node_from_string(prev_key)
            node: NodeId = node_from_string(key)
            if isinstance(prev_node, StairNode) and isinstance(node, StairNode) and prev_node.name == node.name:
                directions += hallway_leg(
                    self._hallways[current_h], current_ind, prev_ind,
                    is_beginning=fresh_start or not directions, is_end=False, entrance_was_straight=entrance_was_straight,
                )
                directions += stair_phrase(prev_node, node)
                current_h, current_ind = hallway_ind, ind
                # Out of the stairs the walker picks a direction from scratch
                fresh_start = True
                entrance_was_straight = False
            elif hallway_ind != current_h:
                directions += hallway_leg(
                    self._hallways[current_h], current_ind, prev_ind,
                    is_beginning=fresh_start or not directions, is_end=False, entrance_was_straight=entrance_was_straight,
                )
                exit_side = self._hallways[current_h].elements[prev_ind].side
                entrance_was_straight = not is_left_or_right(exit_side)
                fresh_start = False
                current_h, current_ind = hallway_ind, ind

        directions += hallway_leg(
            self._hallways[current_h], current_ind, to_ind,
            is_beginning=fresh_start or not directions, is_end=True, entrance_was_straight=entrance_was_straight,
        )
        return directions

    def __repr__(self) -> str:
        return f"Building(hallways={len(self._hallways)}, nodes={len(self._graph)})"
