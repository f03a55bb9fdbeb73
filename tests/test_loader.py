"""Test the layout loader."""

import sys
import os
import tempfile
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import jsonschema
import pytest

from roomfinder import Building, Direction, Fork, ForkNode, StairNode, Stairs, Turn, is_valid_building
from roomfinder.config import DEFAULT_LAYOUT_FILE
from roomfinder.loader import build_building_from_dict, load_building, validate_layout

TWO_WINGS = {
    "name": "Two wings",
    "hallways": [
        {
            "elements": [
                {"type": "room", "name": "A", "side": "right", "aliases": ["Lobby"]},
                {"type": "turn", "direction": "left"},
                {"type": "room", "name": "B", "prefix": ""},
                {"type": "fork", "side": "left", "node": "x", "destination": "the east wing"},
            ]
        },
        {
            "name": "east wing",
            "one_way": None,
            "elements": [
                {"type": "fork", "side": "front", "node": {"fork": "x", "reversed": True},
                 "destination": "the west wing", "connection_weight": 2},
                {"type": "room", "name": "C"},
            ]
        },
    ],
}

def test_build_from_dict():
    building = build_building_from_dict(TWO_WINGS)
    assert isinstance(building, Building)
    assert len(building.hallways) == 2
    first = building.hallways[0]
    assert first.elements[0].side == Direction.RIGHT
    assert first.elements[0].aliases == ("Lobby",)
    assert isinstance(first.elements[1], Turn)
    assert first.elements[2].full_name == "B"
    assert isinstance(first.elements[3], Fork)
    assert building.hallways[1].elements[0].node_id == ForkNode("x", True)
    assert building.hallways[1].name == "east wing"
    assert building.graph["fork:x:regular"] == {"fork:x:reversed": 2}
    assert is_valid_building(building).valid
    assert building.get_directions("lobby", "C") == (
        "Turn right out of room A\n"
        "Continue, then turn left (after passing room A on your right)\n"
        "Continue, then turn left into the east wing\n"
        "Continue, then turn left into room C"
    )

def test_stairs_and_simple_hallway():
    data = {
        "allowed_connections": ["elevator", "suite"],
        "hallways": [
            {"elements": [
                {"type": "room", "name": "101"},
                {"type": "stairs", "side": "left", "node": {"stairs": "elevator", "floor": 1}, "label": "the elevator"},
                {"type": "stairs", "side": "right", "node": {"stairs": "stairs", "floor": 1}},
                {"type": "fork", "side": "right", "node": "suite", "destination": "the suite"},
            ]},
            {"elements": [
                {"type": "stairs", "side": "left", "node": {"stairs": "elevator", "floor": 2}, "label": "the elevator"},
                {"type": "stairs", "side": "left", "node": {"stairs": "stairs", "floor": 2}},
                {"type": "room", "name": "201"},
            ]},
            {"simple": True, "node": {"fork": "suite", "reversed": True}, "name": "the suite",
             "rooms": [{"type": "room", "name": "102"}]},
        ],
    }
    building = build_building_from_dict(data)
    stairs = building.hallways[0].elements[1]
    assert isinstance(stairs, Stairs)
    assert stairs.node_id == StairNode("elevator", 1)
    assert building.hallways[2].simple
    assert not building.allows("stairs")
    assert "stairs:stairs:1" not in building.graph
    assert "Go to floor 2" in building.get_directions("101", "201")

@pytest.mark.parametrize("data", [
    {},
    {"hallways": []},
    {"hallways": [{"elements": [{"type": "room"}]}]},
    {"hallways": [{"elements": [{"type": "room", "name": "A", "side": "up"}]}]},
    {"hallways": [{"elements": [{"type": "turn", "direction": "front"}]}]},
    {"hallways": [{"elements": [{"type": "stairs", "side": "left", "node": "s"}]}]},
    {"hallways": [{"elements": [], "one_way": "sideways"}]},
    {"hallways": [{"elements": []}], "extra": 1},
])
def test_schema_rejects(data):
    with pytest.raises(jsonschema.ValidationError):
        validate_layout(data)
    with pytest.raises(jsonschema.ValidationError):
        build_building_from_dict(data)

def test_load_building_from_file():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "layout.json")
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(TWO_WINGS, f)
        building = load_building(path)
        assert building.is_valid_room_name("C")

def test_load_building_missing_file():
    with tempfile.TemporaryDirectory() as temp_dir:
        with pytest.raises(FileNotFoundError):
            load_building(os.path.join(temp_dir, "nope.json"))

def test_load_building_invalid_json():
    with tempfile.TemporaryDirectory() as temp_dir:
        path = os.path.join(temp_dir, "broken.json")
        with open(path, 'w', encoding='utf-8') as f:
            f.write("{ not json")
        with pytest.raises(ValueError):
            load_building(path)

def test_bundled_example():
    building = load_building(DEFAULT_LAYOUT_FILE)
    assert is_valid_building(building).valid
    assert building.get_directions("102", "203") == (
        "Turn right out of room 102\n"
        "Continue, then turn left into the stairs\n"
        "Go up 1 floor of stairs\n"
        "Turn left out of the stairs\n"
        "Continue, then turn left into room 203"
    )
    assert building.get_directions("office", "101") == (
        "Turn left out of room 104\n"
        "Continue, then turn left (after passing room 103 on your right)\n"
        "Continue, then turn right into room 101"
    )
    assert building.get_directions("112A", "112B") == (
        "Exit room 112A and enter room 112B (both of which are in suite 112)"
    )
