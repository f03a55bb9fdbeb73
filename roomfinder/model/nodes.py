"""Connector node identities (forks and staircases).

A node id is what links a hallway element to the cross-hallway graph. The
graph itself is keyed by strings, so every node has a lossless string form.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Union
from urllib.parse import quote, unquote

__all__ = [
    "ForkNode",
    "StairNode",
    "NodeId",
    "reverse_connection",
    "get_connection",
    "on_floor",
    "node_to_string",
    "node_from_string",
]

@dataclass(frozen=True)
class ForkNode:
    name: str
    reversed: bool = False

@dataclass(frozen=True)
class StairNode:
    name: str
    floor: int

NodeId = Union[ForkNode, StairNode]

def reverse_connection(node: Union[str, ForkNode]) -> ForkNode:
    """Return the mirror declaration of a fork.

    A plain string is a regular fork, so its mirror is the reversed node.
    """
    if isinstance(node, str):
        return ForkNode(node, True)
    return ForkNode(node.name, not node.reversed)

def get_connection(node: Union[str, ForkNode]) -> ForkNode:
    if isinstance(node, ForkNode):
        return node
    return ForkNode(node, False)

def on_floor(name: str, floor: int) -> StairNode:
    return StairNode(name, floor)

_FORK_TAG = "fork"
_STAIR_TAG = "stairs"

def node_to_string(node: NodeId) -> str:
    # The name is percent-encoded, so ':' only ever appears as a separator.
    name = quote(node.name, safe="")
    if isinstance(node, ForkNode):
        return f"{_FORK_TAG}:{name}:{'reversed' if node.reversed else 'regular'}"
    return f"{_STAIR_TAG}:{name}:{node.floor}"

def node_from_string(key: str) -> NodeId:
    parts = key.split(":")
    if len(parts) != 3:
        raise ValueError(f"Malformed node key: {key!r}")
    tag, raw_name, discriminant = parts
    name = unquote(raw_name)
    if tag == _FORK_TAG:
        if discriminant not in {"regular", "reversed"}:
            raise ValueError(f"Malformed fork key: {key!r}")
        return ForkNode(name, discriminant == "reversed")
    if tag == _STAIR_TAG:
        try:
            floor = int(discriminant)
        except ValueError:
            raise ValueError(f"Malformed stair key: {key!r}")
        return StairNode(name, floor)
    raise ValueError(f"Unknown node kind in key: {key!r}")
