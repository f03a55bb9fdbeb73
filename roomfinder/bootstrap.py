"""Bootstrap utilities: load a layout JSON and check the resulting Building."""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from .building import Building
from .config import get_layout_file
from .loader import load_building
from .validity import BuildingValidity, is_valid_building

def load_building_and_validity(path: Optional[Union[str, Path]] = None) -> Tuple[Building, BuildingValidity]:
    layout_path = Path(path) if path else get_layout_file()
    building = load_building(layout_path)
    validity = is_valid_building(building)
    if not validity.valid:
        # Still usable for rooms in the connected part; callers decide
        logging.warning("[LAYOUT WARNING] %s: %s", layout_path.name, validity.reason)
        for section in validity.connected_sections:
            logging.info("[LAYOUT] connected section: %s", ", ".join(section))
    else:
        logging.info("Loaded %s: %d hallways, %d connector nodes",
                     layout_path.name, len(building.hallways), len(building.graph))
    return building, validity
