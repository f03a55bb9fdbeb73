"""Structural validity checks for a Building.

``is_valid_building`` runs the checks in a fixed order and stops at the first
failure. The connected sections of the graph are always computed, since they
are what you need to debug a disconnected building.

There are several reasons a building can be invalid:

1. More than one room shares a name or alias.
2. An edge of the graph has a negative weight.
3. A Fork base name lacks exactly one regular and one reversed declaration,
   or a staircase reaches fewer than 2 floors or repeats a floor.
4. A FRONT/BACK element sits in the middle of a hallway that doesn't allow it.
5. In a building with several hallways, a hallway has no connector nodes.
   A room in a one-way hallway needs a connector it can walk on to and one
   it can be reached from.
6. Not every node can reach every other node.
7. A hallway begins or ends with a Turn (which would never be walked past).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .building import Building
from .graph import connected_sections as _connected_sections
from .model import ForkNode, StairNode, Turn, is_left_or_right, dir_to_string

__all__ = [
    "BuildingValidity",
    "InvalidBuildingError",
    "is_valid_building",
    "assert_valid_building",
]

@dataclass(frozen=True)
class BuildingValidity:
    valid: bool
    reason: Optional[str] = None
    connected_sections: List[List[str]] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

class InvalidBuildingError(Exception):
    """Raised by assert_valid_building for a structurally broken building."""
    pass

def _duplicate_names(b: Building) -> Optional[str]:
    dups = b.registry.duplicates()
    if dups:
        return f"There's more than one room with the name '{dups[0]}'"
    return None

def _negative_edges(b: Building) -> Optional[str]:
    for id1, edges in b.graph.items():
        for id2, weight in edges.items():
            if weight < 0:
                return f"The edge from node '{id1}' to node '{id2}' has a negative weight"
    return None

def _connector_pairing(b: Building) -> Optional[str]:
    forks: Dict[str, List[int]] = defaultdict(lambda: [0, 0])
    floors: Dict[str, List[int]] = defaultdict(list)
    for hallway in b.hallways:
        for ind in hallway.node_indices(b.allows):
            node = hallway.elements[ind].node_id
            if isinstance(node, ForkNode):
                forks[node.name][1 if node.reversed else 0] += 1
            elif isinstance(node, StairNode):
                floors[node.name].append(node.floor)

    for name, (regular, reversed_) in forks.items():
        if regular != 1 or reversed_ != 1:
            return (
                f"Found an unmatched Fork '{name}' ({regular} regular and {reversed_} "
                f"reversed declarations; expected exactly one of each)"
            )
    for name, declared in floors.items():
        seen = set()
        for floor in declared:
            if floor in seen:
                return f"The staircase '{name}' declares floor {floor} more than once"
            seen.add(floor)
        if len(seen) < 2:
            return (
                f"The staircase '{name}' only reaches floor {declared[0]}; "
                f"a staircase needs at least 2 distinct floors"
            )
    return None

def _front_back_placement(b: Building) -> Optional[str]:
    for h_ind, hallway in enumerate(b.hallways):
        if hallway.allow_front_connections_in_middle:
            continue
        last = len(hallway.elements) - 1
        for ind, elem in enumerate(hallway.elements):
            if isinstance(elem, Turn) or is_left_or_right(elem.side):
                continue
            if ind not in (0, last):
                return (
                    f"The element at index {ind} of the hallway at index {h_ind} faces "
                    f"{dir_to_string(elem.side)} but is not at either end of the hallway"
                )
    return None

def _orphan_hallways(b: Building) -> Optional[str]:
    if len(b.hallways) <= 1:
        return None
    for h_ind, hallway in enumerate(b.hallways):
        if not hallway.node_indices(b.allows):
            return (
                f"The hallway at index {h_ind} has no connector nodes (Forks or Stairs) "
                f"to connect it to the rest of the building."
            )
    return None

def _one_way_dead_ends(b: Building) -> Optional[str]:
    for h_ind, hallway in enumerate(b.hallways):
        if hallway.one_way is None:
            continue
        for ind, elem in enumerate(hallway.elements):
            if isinstance(elem, Turn) or elem.name is None:
                continue
            if hallway.closest_node_index(ind, b.allows, leaving=True) is None:
                return (
                    f"'{elem.full_name}' in the one-way hallway at index {h_ind} "
                    f"has no connector ahead of it to walk to"
                )
            if hallway.closest_node_index(ind, b.allows, leaving=False) is None:
                return (
                    f"'{elem.full_name}' in the one-way hallway at index {h_ind} "
                    f"has no connector behind it to be reached from"
                )
    return None

def _stray_turns(b: Building) -> Optional[str]:
    for h_ind, hallway in enumerate(b.hallways):
        if not hallway.elements:
            continue
        if isinstance(hallway.elements[0], Turn):
            return f"The hallway at index {h_ind} begins with a Turn"
        if isinstance(hallway.elements[-1], Turn):
            return f"The hallway at index {h_ind} ends with a Turn"
    return None

def is_valid_building(b: Building) -> BuildingValidity:
    """Check a building; see the module docstring for the list of checks.

    ``connected_sections`` lists the groups of node keys that can all reach
    each other. More than one group means part of the building can't be
    reached from the rest.
    """
    sections = _connected_sections(b.digraph)

    checks = (
        _duplicate_names,
        _negative_edges,
        _connector_pairing,
        _front_back_placement,
        _orphan_hallways,
        _one_way_dead_ends,
    )
    for check in checks:
        reason = check(b)
        if reason is not None:
            return BuildingValidity(False, reason, sections)

    if len(sections) > 1:
        return BuildingValidity(
            False,
            "Not all nodes are connected; see is_valid_building(building).connected_sections "
            "to find which node groups are separated.",
            sections,
        )

    reason = _stray_turns(b)
    if reason is not None:
        return BuildingValidity(False, reason, sections)

    return BuildingValidity(True, None, sections)

def assert_valid_building(b: Building) -> None:
    validity = is_valid_building(b)
    if not validity.valid:
        logging.warning("Invalid building: %s", validity.reason)
        raise InvalidBuildingError(f"This building is invalid. {validity.reason}")
