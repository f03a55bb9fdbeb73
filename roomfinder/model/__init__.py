"""Facade for the topology model and node identities.

Re-exports the dataclasses and helpers from the internal modules to provide
a stable import surface.
"""
from .base import (
    Direction,
    dir_to_string,
    dir_to_turn_string,
    is_left_or_right,
    Room,
    Fork,
    Stairs,
    Turn,
    HallwayElement,
    Element,
    Hallway,
    simple_hallway,
)
from .nodes import (
    ForkNode,
    StairNode,
    NodeId,
    reverse_connection,
    get_connection,
    on_floor,
    node_to_string,
    node_from_string,
)

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
    "ForkNode",
    "StairNode",
    "NodeId",
    "reverse_connection",
    "get_connection",
    "on_floor",
    "node_to_string",
    "node_from_string",
]
