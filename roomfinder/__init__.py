"""room-finder: walking directions between rooms of a modelled building."""

from .model import (
    Direction,
    dir_to_string,
    dir_to_turn_string,
    is_left_or_right,
    Room,
    Fork,
    Stairs,
    Turn,
    Hallway,
    simple_hallway,
    ForkNode,
    StairNode,
    reverse_connection,
    on_floor,
    node_to_string,
    node_from_string,
)
from .building import Building
from .validity import BuildingValidity, InvalidBuildingError, is_valid_building, assert_valid_building
from .loader import build_building_from_dict, load_building, validate_layout

__all__ = [
    'Direction', 'dir_to_string', 'dir_to_turn_string', 'is_left_or_right',
    'Room', 'Fork', 'Stairs', 'Turn', 'Hallway', 'simple_hallway',
    'ForkNode', 'StairNode', 'reverse_connection', 'on_floor',
    'node_to_string', 'node_from_string',
    'Building',
    'BuildingValidity', 'InvalidBuildingError', 'is_valid_building', 'assert_valid_building',
    'build_building_from_dict', 'load_building', 'validate_layout',
]
