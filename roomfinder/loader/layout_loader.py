"""Building loading utilities.

Separates construction logic from raw JSON (dict) into model dataclasses.
``load_building`` is the only function here that touches the disk.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List, Union

import jsonschema

from ..building import Building
from ..model import (
    Direction,
    Room,
    Fork,
    Stairs,
    Turn,
    Element,
    Hallway,
    ForkNode,
    StairNode,
    simple_hallway,
)
from .schema import LAYOUT_SCHEMA

__all__ = ["validate_layout", "build_building_from_dict", "load_building"]

_SIDES = {
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "front": Direction.FRONT,
    "back": Direction.BACK,
}

def validate_layout(data: Dict[str, Any]) -> bool:
    """Validate layout data against the layout schema.

    Raises:
        jsonschema.ValidationError: If the data doesn't match the schema
    """
    jsonschema.validate(data, LAYOUT_SCHEMA)
    return True

def _fork_node(raw: Union[str, Dict[str, Any]]) -> ForkNode:
    if isinstance(raw, str):
        return ForkNode(raw)
    return ForkNode(raw["fork"], raw.get("reversed", False))

def _room(e: Dict[str, Any]) -> Room:
    return Room(
        name=e["name"],
        side=_SIDES[e.get("side", "left")],
        prefix=e.get("prefix", "room"),
        aliases=e.get("aliases", []),
        node_id=_fork_node(e["node"]) if "node" in e else None,
        edge_length=e.get("edge_length"),
    )

def _element(e: Dict[str, Any]) -> Element:
    kind = e["type"]
    if kind == "room":
        return _room(e)
    if kind == "fork":
        return Fork(
            side=_SIDES[e["side"]],
            node_id=_fork_node(e["node"]),
            destination_name=e["destination"],
            edge_length=e.get("edge_length"),
            connection_weight=e.get("connection_weight"),
        )
    if kind == "stairs":
        return Stairs(
            side=_SIDES[e["side"]],
            node_id=StairNode(e["node"]["stairs"], e["node"]["floor"]),
            label=e.get("label"),
            edge_length=e.get("edge_length"),
        )
    if kind == "turn":
        return Turn(_SIDES[e["direction"]])
    raise ValueError(f"Unknown element type: {kind!r}")

def _hallway(h: Dict[str, Any]) -> Hallway:
    if h.get("simple"):
        return simple_hallway(_fork_node(h["node"]), [_room(r) for r in h["rooms"]], h["name"])
    return Hallway(
        [_element(e) for e in h["elements"]],
        name=h.get("name"),
        allow_front_connections_in_middle=h.get("allow_front_connections_in_middle", False),
        one_way=h.get("one_way"),
    )

def build_building_from_dict(data: Dict[str, Any]) -> Building:
    validate_layout(data)
    hallways: List[Hallway] = [_hallway(h) for h in data["hallways"]]
    return Building(hallways, data.get("allowed_connections"))

def load_building(layout_file_path: Union[str, Path]) -> Building:
    """Load a building from a JSON layout file.

    Args:
        layout_file_path: Path to the layout JSON file

    Returns:
        The Building described by the file (not yet validated)

    Raises:
        FileNotFoundError: If the layout file doesn't exist
        ValueError: If the file is not valid JSON
        jsonschema.ValidationError: If the layout doesn't match the schema
    """
    layout_path = Path(layout_file_path)
    if not layout_path.exists():
        raise FileNotFoundError(f"Layout file not found: {layout_file_path}")

    try:
        with open(layout_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in layout file: {e}")

    return build_building_from_dict(data)
