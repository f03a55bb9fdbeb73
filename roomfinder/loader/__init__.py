"""Building layouts from JSON data."""

from .schema import LAYOUT_SCHEMA
from .layout_loader import validate_layout, build_building_from_dict, load_building

__all__ = ["LAYOUT_SCHEMA", "validate_layout", "build_building_from_dict", "load_building"]
