"""
Topology Analysis
=================

Read-only annotations over a dungeon graph, used by the rendering layer:

1. Bridge connections: a connection is a bridge when removing it leaves
   its two endpoints disconnected.
2. Entrance depths: multi-source BFS from every entrance at once; each
   room gets its minimum hop count to any entrance.

Both work on a room-id collection plus connections so that callers can
analyze partial graphs. Connections whose endpoints are not in the room
set are ignored.

Also provides catalog validation (``validate_layout``/``validate_catalog``)
backed by NetworkX.

Usage:
    from bitesized.evaluation.topology import find_bridge_connections_in, compute_depths_in

    bridges = find_bridge_connections_in(graph)   # {("room-a", "room-b"), ...}
    depths = compute_depths_in(graph)             # {"room-a": 0, "room-b": 1, ...}
"""

import logging
from collections import deque
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

import networkx as nx

from bitesized.constants.dungeon_constants import CONNECTIONS_PER_UNIT, ROOMS_PER_UNIT
from bitesized.core.definitions import Connection, DungeonGraph, EdgeKey
from bitesized.generation.layouts import LAYOUTS, LayoutEdges

logger = logging.getLogger(__name__)


def _adjacency(
    room_ids: Iterable[str],
    connections: Iterable[Connection],
    skip: Optional[int] = None,
) -> Dict[str, List[str]]:
    """Undirected adjacency lists, optionally leaving out connection ``skip``."""
    adjacency: Dict[str, List[str]] = {room_id: [] for room_id in room_ids}
    for index, link in enumerate(connections):
        if index == skip:
            continue
        if link.source not in adjacency or link.target not in adjacency:
            continue
        adjacency[link.source].append(link.target)
        if link.target != link.source:
            adjacency[link.target].append(link.source)
    return adjacency


def _reachable(adjacency: Dict[str, List[str]], start: str) -> Set[str]:
    visited = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbor in adjacency.get(current, []):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


# ==========================================
# BRIDGE DETECTION
# ==========================================

def find_bridge_connections(
    room_ids: Iterable[str],
    connections: Sequence[Connection],
) -> Set[EdgeKey]:
    """
    Find connections whose removal disconnects their endpoints.

    For each connection, rebuild adjacency without that single connection
    and BFS from one endpoint. O(E * (V + E)), which is fine for graphs of
    a few dozen rooms.

    A self-loop is never a bridge. When two stored connections join the
    same pair, neither is a bridge (each is the other's alternate path).

    Returns:
        Set of normalized endpoint keys (see ``edge_key``)
    """
    room_ids = list(room_ids)
    known = set(room_ids)
    bridges: Set[EdgeKey] = set()

    for index, link in enumerate(connections):
        if link.source == link.target:
            continue
        if link.source not in known or link.target not in known:
            continue
        adjacency = _adjacency(room_ids, connections, skip=index)
        if link.target not in _reachable(adjacency, link.source):
            bridges.add(link.key)

    return bridges


def find_bridge_connections_in(graph: DungeonGraph) -> Set[EdgeKey]:
    return find_bridge_connections(graph.room_ids(), graph.connections)


# ==========================================
# ENTRANCE DEPTHS
# ==========================================

def compute_entrance_depths(
    room_ids: Iterable[str],
    connections: Iterable[Connection],
    entrance_ids: Iterable[str],
) -> Dict[str, int]:
    """
    Multi-source BFS depth labeling.

    All entrances start at depth 0 in the same frontier, so each room's
    depth is its true minimum distance to any entrance regardless of the
    order entrances are listed. With no (known) entrances, the first room
    is used as the single root.

    Rooms unreachable from every root are absent from the result; treat
    a missing key as "undefined depth", not 0.
    """
    room_ids = list(room_ids)
    adjacency = _adjacency(room_ids, connections)

    roots = [room_id for room_id in dict.fromkeys(entrance_ids) if room_id in adjacency]
    if not roots:
        roots = room_ids[:1]

    depths: Dict[str, int] = {room_id: 0 for room_id in roots}
    frontier = list(roots)
    while frontier:
        next_frontier: List[str] = []
        for current in frontier:
            depth = depths[current] + 1
            for neighbor in adjacency[current]:
                if neighbor not in depths:
                    depths[neighbor] = depth
                    next_frontier.append(neighbor)
        frontier = next_frontier

    return depths


def compute_depths_in(graph: DungeonGraph) -> Dict[str, int]:
    return compute_entrance_depths(graph.room_ids(), graph.connections, graph.entrance_ids())


# ==========================================
# LAYOUT VALIDATION
# ==========================================

def validate_layout(edges: LayoutEdges) -> Tuple[bool, List[str]]:
    """
    Check one catalog layout.

    Requirements:
        - exactly six edges
        - no self-loops, no duplicate pairs
        - uses every position 0..5 and nothing else
        - connected
        - contains at least one cycle

    Returns:
        (is_valid, errors)
    """
    errors: List[str] = []

    if len(edges) != CONNECTIONS_PER_UNIT:
        errors.append(f"Expected {CONNECTIONS_PER_UNIT} edges, got {len(edges)}")

    normalized = [tuple(sorted(pair)) for pair in edges]
    if len(set(normalized)) != len(normalized):
        errors.append("Duplicate edge pair")
    if any(a == b for a, b in normalized):
        errors.append("Self-loop edge")

    used = {index for pair in edges for index in pair}
    if used != set(range(ROOMS_PER_UNIT)):
        errors.append(f"Positions used {sorted(used)} != 0..{ROOMS_PER_UNIT - 1}")

    G = nx.Graph()
    G.add_nodes_from(range(ROOMS_PER_UNIT))
    G.add_edges_from(pair for pair in normalized if pair[0] != pair[1])
    if not nx.is_connected(G):
        errors.append("Layout is not connected")
    if not nx.cycle_basis(G):
        errors.append("Layout has no cycle")

    return len(errors) == 0, errors


def validate_catalog(layouts: Sequence[LayoutEdges] = LAYOUTS) -> Dict[int, List[str]]:
    """
    Validate every catalog layout.

    Returns:
        Mapping of layout index -> errors, only for invalid layouts
    """
    problems: Dict[int, List[str]] = {}
    for index, edges in enumerate(layouts):
        is_valid, errors = validate_layout(edges)
        if not is_valid:
            logger.warning(f"Layout {index} invalid: {errors}")
            problems[index] = errors
    return problems


def is_connected(graph: DungeonGraph) -> bool:
    """True when every room is reachable from every other (empty graph counts)."""
    if not graph.rooms:
        return True
    return nx.is_connected(graph.to_networkx())
