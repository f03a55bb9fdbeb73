"""Room-name index for a building.

Acts as an in-memory lookup so queries don't have to walk every hallway.
Lookups ignore case and surrounding whitespace.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
from .model import Hallway, Turn

Location = Tuple[int, int]

def normalize_name(name: str) -> str:
    return name.strip().upper()

class RoomRegistry:
    def __init__(self, hallways: Sequence[Hallway]):
        self.hallways = hallways
        # Every name and alias in declaration order (duplicates kept)
        self.names: List[str] = []
        self.index: Dict[str, Location] = {}
        for h_ind, hallway in enumerate(hallways):
            for ind, elem in enumerate(hallway.elements):
                if isinstance(elem, Turn) or elem.name is None:
                    continue
                for label in (elem.name, *elem.aliases):
                    self.names.append(label)
                    # First declaration wins, like a linear search would
                    self.index.setdefault(normalize_name(label), (h_ind, ind))

    def locate(self, name: str) -> Optional[Location]:
        if not isinstance(name, str):
            return None
        return self.index.get(normalize_name(name))

    def duplicates(self) -> List[str]:
        """Names (as first written) that occur more than once."""
        seen: Dict[str, str] = {}
        dups: List[str] = []
        for label in self.names:
            key = normalize_name(label)
            if key in seen:
                if seen[key] not in dups:
                    dups.append(seen[key])
            else:
                seen[key] = label
        return dups

    def sorted_names(self) -> List[str]:
        return sorted(self.names)
