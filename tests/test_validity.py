import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from roomfinder import (
    Building,
    Hallway,
    Room,
    Fork,
    Stairs,
    Turn,
    Direction,
    reverse_connection,
    on_floor,
    is_valid_building,
    assert_valid_building,
    InvalidBuildingError,
)

RIGHT, LEFT, FRONT = Direction.RIGHT, Direction.LEFT, Direction.FRONT

def two_wings(x_weight=None):
    return [
        Hallway([Room("A"), Fork(LEFT, "x", "the x wing")]),
        Hallway([Fork(FRONT, reverse_connection("x"), "the a wing", connection_weight=x_weight), Room("B")]),
    ]

def test_single_room_only_hallway_is_valid():
    validity = is_valid_building(Building([Hallway([Room("1"), Room("2", RIGHT)])]))
    assert validity.valid
    assert validity
    assert validity.reason is None
    assert validity.connected_sections == []

def test_matched_fork_pair_is_valid():
    validity = is_valid_building(Building(two_wings()))
    assert validity.valid
    assert validity.connected_sections == [["fork:x:regular", "fork:x:reversed"]]

def test_duplicate_names():
    building = Building([Hallway([Room("A"), Room("B", aliases=["a"])])])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason == "There's more than one room with the name 'A'"

def test_negative_weight():
    validity = is_valid_building(Building(two_wings(x_weight=-2)))
    assert not validity.valid
    assert validity.reason == (
        "The edge from node 'fork:x:regular' to node 'fork:x:reversed' has a negative weight"
    )

def test_negative_edge_length_in_disconnected_building():
    building = Building([
        Hallway([Stairs(LEFT, on_floor("s", 1)), Room("A"), Stairs(LEFT, on_floor("t", 1), edge_length=-1)]),
        Hallway([Stairs(LEFT, on_floor("s", 2)), Room("B")]),
        Hallway([Room("C"), Stairs(LEFT, on_floor("t", 2))]),
        Hallway([Room("D"), Fork(LEFT, "lonely", "nowhere")]),
        Hallway([Fork(FRONT, reverse_connection("lonely"), "D's hallway"), Room("E")]),
    ])
    validity = is_valid_building(building)
    assert not validity.valid
    assert "has a negative weight" in validity.reason
    assert len(validity.connected_sections) == 2

def test_unmatched_fork():
    building = Building([
        Hallway([Room("A"), Fork(LEFT, "x", "the x wing")]),
        Hallway([Fork(FRONT, "x", "the a wing"), Room("B")]),
    ])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason == (
        "Found an unmatched Fork 'x' (2 regular and 0 reversed declarations; "
        "expected exactly one of each)"
    )

def test_removing_reversed_fork_invalidates():
    building = Building([
        Hallway([Room("A"), Fork(LEFT, "x", "the x wing")]),
        Hallway([Room("B")]),
    ])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason.startswith("Found an unmatched Fork 'x'")

def test_staircase_on_one_floor():
    building = Building([Hallway([Room("A"), Stairs(LEFT, on_floor("s", 1))])])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason == (
        "The staircase 's' only reaches floor 1; a staircase needs at least 2 distinct floors"
    )

def test_staircase_with_second_floor():
    building = Building([
        Hallway([Room("A"), Stairs(LEFT, on_floor("s", 1))]),
        Hallway([Stairs(RIGHT, on_floor("s", 2)), Room("B")]),
    ])
    assert is_valid_building(building).valid
    assert "Go up 1 floor of stairs" in building.get_directions("A", "B")
    assert "Go down 1 floor of stairs" in building.get_directions("B", "A")

def test_staircase_repeats_floor():
    building = Building([
        Hallway([Room("A"), Stairs(LEFT, on_floor("s", 1))]),
        Hallway([Stairs(RIGHT, on_floor("s", 1)), Room("B")]),
    ])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason == "The staircase 's' declares floor 1 more than once"

def test_front_element_in_middle():
    building = Building([Hallway([Room("A"), Room("B", FRONT), Room("C")])])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason == (
        "The element at index 1 of the hallway at index 0 faces front "
        "but is not at either end of the hallway"
    )

def test_front_element_in_middle_allowed():
    building = Building([
        Hallway([Room("A"), Room("B", FRONT), Room("C")], allow_front_connections_in_middle=True),
    ])
    assert is_valid_building(building).valid

def test_orphan_hallway():
    building = Building(two_wings() + [Hallway([Room("C")])])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason == (
        "The hallway at index 2 has no connector nodes (Forks or Stairs) "
        "to connect it to the rest of the building."
    )

def test_disconnected_sections():
    building = Building([
        Hallway([Room("A"), Fork(LEFT, "x", "the x wing")]),
        Hallway([Fork(FRONT, reverse_connection("x"), "the a wing"), Room("B")]),
        Hallway([Room("C"), Fork(LEFT, "y", "the y wing")]),
        Hallway([Fork(FRONT, reverse_connection("y"), "the c wing"), Room("D")]),
    ])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason.startswith("Not all nodes are connected")
    assert validity.connected_sections == [
        ["fork:x:regular", "fork:x:reversed"],
        ["fork:y:regular", "fork:y:reversed"],
    ]

def test_one_way_hallways_can_disconnect():
    building = Building([
        Hallway([Stairs(RIGHT, on_floor("b", 1)), Room("101"), Fork(RIGHT, "a", "the 11s")], one_way="backward"),
        Hallway([Fork(FRONT, reverse_connection("a"), "the 10s"), Room("111"), Stairs(RIGHT, on_floor("c", 1))], one_way="forward"),
        Hallway([Stairs(RIGHT, on_floor("b", 2)), Room("201"), Fork(RIGHT, "e", "the 21s")]),
        Hallway([Fork(FRONT, reverse_connection("e"), "the 20s"), Room("211"), Stairs(RIGHT, on_floor("c", 2))]),
    ])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason.startswith("Not all nodes are connected")

@pytest.mark.parametrize("elements,where", [
    ([Turn(LEFT), Room("A")], "begins"),
    ([Room("A"), Turn(RIGHT)], "ends"),
])
def test_stray_turn(elements, where):
    validity = is_valid_building(Building([Hallway(elements)]))
    assert not validity.valid
    assert validity.reason == f"The hallway at index 0 {where} with a Turn"

def test_assert_valid_building():
    assert_valid_building(Building(two_wings()))
    with pytest.raises(InvalidBuildingError) as excinfo:
        assert_valid_building(Building([Hallway([Room("A"), Room("a")])]))
    assert str(excinfo.value) == (
        "This building is invalid. There's more than one room with the name 'A'"
    )

def test_validity_is_frozen():
    validity = is_valid_building(Building(two_wings()))
    with pytest.raises(Exception):
        validity.valid = False

def test_one_way_single_hallway_is_a_dead_end():
    building = Building([Hallway([Room("1"), Room("2")], one_way="forward")])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason == (
        "'room 1' in the one-way hallway at index 0 has no connector ahead of it to walk to"
    )
    with pytest.raises(InvalidBuildingError):
        assert_valid_building(building)

def test_one_way_room_that_cannot_be_reached():
    building = Building([
        Hallway([Room("A"), Fork(LEFT, "x", "the x wing")], one_way="forward"),
        Hallway([Fork(FRONT, reverse_connection("x"), "the a wing"), Room("B")]),
    ])
    validity = is_valid_building(building)
    assert not validity.valid
    assert validity.reason == (
        "'room A' in the one-way hallway at index 0 has no connector behind it to be reached from"
    )

def test_one_way_room_between_connectors_is_valid():
    building = Building([
        Hallway([Stairs(RIGHT, on_floor("s", 1)), Room("A"), Stairs(LEFT, on_floor("t", 1))], one_way="forward"),
        Hallway([Stairs(RIGHT, on_floor("s", 2)), Room("B"), Stairs(LEFT, on_floor("t", 2))]),
    ])
    assert is_valid_building(building).valid
    assert building.get_directions("B", "A").endswith("Continue, then turn left into room A")
