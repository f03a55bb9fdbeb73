"""Connector graph: derivation from hallways, shortest paths, connectivity.

The graph is a plain ``{node_key: {neighbour_key: weight}}`` mapping keyed by
``node_to_string``; only forks and stairs are nodes. Routing and
reachability go through a networkx DiGraph built from that mapping.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from itertools import combinations
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import networkx as nx

from .config import get_stair_discount
from .model import Hallway, ForkNode, StairNode, node_to_string

__all__ = [
    "Graph",
    "allow_all",
    "stair_weight",
    "build_graph",
    "to_digraph",
    "shortest_path",
    "connected_sections",
    "is_connected_graph",
]

Graph = Dict[str, Dict[str, float]]

def allow_all(name: str) -> bool:
    return True

def stair_weight(floors: int, discount: Optional[float] = None) -> float:
    """Weight of a stair edge spanning ``floors`` floors.

    Slightly less than the floor count, so going up several floors at once
    is preferred over going up one flight and walking to other stairs.
    """
    if discount is None:
        discount = get_stair_discount()
    return floors * (1 - discount * floors)

def _link(graph: Graph, a: str, b: str, weight: float) -> None:
    graph[a][b] = weight
    graph[b][a] = weight

def build_graph(hallways: Sequence[Hallway], allowed: Callable[[str], bool] = allow_all) -> Graph:
    graph: Graph = {}
    # base name -> reversed flag -> declaring elements
    forks: Dict[str, Dict[bool, list]] = defaultdict(lambda: {False: [], True: []})
    staircases: Dict[str, List[StairNode]] = defaultdict(list)

    for hallway in hallways:
        prev_key: Optional[str] = None
        for ind in hallway.node_indices(allowed):
            elem = hallway.elements[ind]
            node = elem.node_id
            key = node_to_string(node)
            graph.setdefault(key, {})
            if prev_key is not None and prev_key != key:
                weight = 1 if elem.edge_length is None else elem.edge_length
                if hallway.one_way != "backward":
                    graph[prev_key][key] = weight
                if hallway.one_way != "forward":
                    graph[key][prev_key] = weight
            prev_key = key
            if isinstance(node, ForkNode):
                forks[node.name][node.reversed].append(elem)
            elif node not in staircases[node.name]:
                staircases[node.name].append(node)

    for name, sides in forks.items():
        weight = 1
        for elem in sides[True]:
            override = getattr(elem, "connection_weight", None)
            if override is not None:
                weight = override
        for regular in sides[False]:
            for rev in sides[True]:
                _link(graph, node_to_string(regular.node_id), node_to_string(rev.node_id), weight)

    discount = get_stair_discount()
    for name, nodes in staircases.items():
        for lower, upper in combinations(nodes, 2):
            if lower.floor == upper.floor:
                continue
            _link(graph, node_to_string(lower), node_to_string(upper),
                  stair_weight(abs(lower.floor - upper.floor), discount))

    logging.debug(
        "Built connector graph: %d nodes, %d forks, %d staircases",
        len(graph), len(forks), len(staircases),
    )
    return graph

def to_digraph(graph: Graph) -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_nodes_from(graph)
    for a, edges in graph.items():
        for b, weight in edges.items():
            g.add_edge(a, b, weight=weight)
    return g

def shortest_path(graph: Union[Graph, nx.DiGraph], source: str, target: str) -> List[str]:
    """Node keys along the minimum-weight path from ``source`` to ``target``.

    The graph must already be validated: no negative weights, and ``target``
    reachable (otherwise networkx raises ``NetworkXNoPath``).
    """
    if not isinstance(graph, nx.DiGraph):
        graph = to_digraph(graph)
    return nx.dijkstra_path(graph, source, target, weight="weight")

def connected_sections(graph: Union[Graph, nx.DiGraph]) -> List[List[str]]:
    """Partition the nodes into maximal mutually-reachable groups.

    Seeds are taken in key order from the nodes not yet assigned; a section
    is everything the seed reaches that can also reach the seed back. For
    an undirected graph that is just its connected component.
    """
    g = graph if isinstance(graph, nx.DiGraph) else to_digraph(graph)
    order = list(g.nodes)
    assigned: set = set()
    sections: List[List[str]] = []
    for seed in order:
        if seed in assigned:
            continue
        reach = nx.descendants(g, seed) | {seed}
        members = reach & (nx.ancestors(g, seed) | {seed})
        sections.append([n for n in order if n in members])
        assigned |= members
    return sections

def is_connected_graph(graph: Union[Graph, nx.DiGraph]) -> Tuple[bool, List[List[str]]]:
    sections = connected_sections(graph)
    return len(sections) <= 1, sections
