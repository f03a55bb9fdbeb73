"""Data model definitions for building topology.

Pure frozen dataclasses: rooms, forks, stairs and turns laid out in ordered
hallways. Narration and graph logic live elsewhere; these classes only hold
structure and answer simple index questions about a hallway.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Optional, Tuple, Union

from .nodes import ForkNode, StairNode, get_connection

__all__ = [
    "Direction",
    "dir_to_string",
    "dir_to_turn_string",
    "is_left_or_right",
    "Room",
    "Fork",
    "Stairs",
    "Turn",
    "HallwayElement",
    "Element",
    "Hallway",
    "simple_hallway",
    "ONE_WAY_VALUES",
]

class Direction(IntEnum):
    """LEFT/RIGHT for elements along a hallway; FRONT/BACK at its ends.

    Multiplying a side by the travel sign (+1 forward, -1 backward) gives the
    direction as seen by someone walking.
    """
    LEFT = -1
    RIGHT = 1
    BACK = -2
    FRONT = 2

def dir_to_string(direction: int) -> str:
    direction = Direction(direction)
    if direction is Direction.LEFT:
        return "left"
    if direction is Direction.RIGHT:
        return "right"
    if direction is Direction.FRONT:
        return "front"
    return "back"

def dir_to_turn_string(direction: int) -> str:
    """'turn left', 'turn right', or 'go straight' for FRONT/BACK."""
    if not is_left_or_right(direction):
        return "go straight"
    return "turn " + dir_to_string(direction)

def is_left_or_right(direction: int) -> bool:
    return direction in (Direction.LEFT, Direction.RIGHT)

def _frozen_tuple(obj, attr: str) -> None:
    object.__setattr__(obj, attr, tuple(getattr(obj, attr)))

@dataclass(frozen=True)
class Room:
    name: Optional[str] = None
    side: Direction = Direction.LEFT
    prefix: str = "room"
    aliases: Tuple[str, ...] = ()
    node_id: Optional[ForkNode] = None
    edge_length: Optional[float] = None

    def __post_init__(self):
        _frozen_tuple(self, "aliases")
        object.__setattr__(self, "side", Direction(self.side))
        if self.node_id is not None:
            object.__setattr__(self, "node_id", get_connection(self.node_id))

    @property
    def full_name(self) -> Optional[str]:
        if self.name is None:
            return None
        if not self.prefix:
            return self.name
        return f"{self.prefix} {self.name}"

@dataclass(frozen=True)
class Fork:
    """Where two hallways on the same floor meet.

    ``destination_name`` is what the walker is told they are entering, e.g.
    "the second hallway". The regular and reversed declarations of one base
    name are the two ends of the same junction; the reversed side may carry
    ``connection_weight`` to make the junction more or less attractive.
    """
    side: Direction
    node_id: ForkNode
    destination_name: str
    edge_length: Optional[float] = None
    connection_weight: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "side", Direction(self.side))
        object.__setattr__(self, "node_id", get_connection(self.node_id))

    name = None
    prefix = ""
    aliases = ()

    @property
    def full_name(self) -> str:
        return self.destination_name

@dataclass(frozen=True)
class Stairs:
    """One floor's entrance to a staircase (or elevator)."""
    side: Direction
    node_id: StairNode
    label: Optional[str] = None
    edge_length: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "side", Direction(self.side))
        if not isinstance(self.node_id, StairNode):
            raise ValueError(f"Stairs need a StairNode (see on_floor), got {self.node_id!r}")

    name = None
    prefix = ""
    aliases = ()

    @property
    def full_name(self) -> str:
        return self.label or "the stairs"

@dataclass(frozen=True)
class Turn:
    direction: Direction

    def __post_init__(self):
        direction = Direction(self.direction)
        if not is_left_or_right(direction):
            raise ValueError("A Turn must be LEFT or RIGHT")
        object.__setattr__(self, "direction", direction)

HallwayElement = Union[Room, Fork, Stairs]
Element = Union[Room, Fork, Stairs, Turn]

ONE_WAY_VALUES = (None, "forward", "backward")

@dataclass(frozen=True)
class Hallway:
    """An ordered, linear run of elements.

    Pick either end as the start; sides and turns must then be declared
    consistently with that direction of travel.
    """
    elements: Tuple[Element, ...]
    name: Optional[str] = None
    allow_front_connections_in_middle: bool = False
    one_way: Optional[str] = None
    simple: bool = False

    def __post_init__(self):
        _frozen_tuple(self, "elements")
        if self.one_way not in ONE_WAY_VALUES:
            raise ValueError(f"one_way must be 'forward', 'backward' or None, got {self.one_way!r}")

    def __len__(self) -> int:
        return len(self.elements)

    def node_indices(self, allowed: Callable[[str], bool]) -> List[int]:
        return [
            ind for ind, elem in enumerate(self.elements)
            if not isinstance(elem, Turn)
            and elem.node_id is not None
            and allowed(elem.node_id.name)
        ]

    def permits(self, start: int, end: int) -> bool:
        """Can someone walk from index ``start`` to ``end`` in this hallway?"""
        if self.one_way == "forward":
            return end >= start
        if self.one_way == "backward":
            return end <= start
        return True

    def closest_node_index(self, index: int, allowed: Callable[[str], bool], leaving: bool = True) -> Optional[int]:
        """Index of the nearest allowed connector to ``index``.

        With ``leaving`` the walk goes from ``index`` to the connector,
        otherwise from the connector to ``index``; one-way hallways only
        offer connectors reachable in the permitted direction. Ties go to
        the earlier element.
        """
        best: Optional[int] = None
        for ind in self.node_indices(allowed):
            ok = self.permits(index, ind) if leaving else self.permits(ind, index)
            if not ok:
                continue
            if best is None or abs(ind - index) < abs(best - index):
                best = ind
        return best

def simple_hallway(node_id: Union[str, ForkNode], rooms: List[Room], hallway_name: str) -> Hallway:
    """A room that contains other rooms, reached through a single fork.

    Directions inside it are not worth narrating turn by turn; see
    ``narration.simple_leg``.
    """
    return Hallway(
        (Fork(Direction.LEFT, node_id, ""),) + tuple(rooms),
        name=hallway_name,
        allow_front_connections_in_middle=True,
        simple=True,
    )
