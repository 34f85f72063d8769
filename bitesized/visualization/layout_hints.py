"""
Layout Hints for the Graph View
===============================

The renderer draws a dungeon in one of two modes:

- ``force``: force-directed. Bridge connections are drawn short and stiff
  so attached sub-dungeons stay close to the room they hang from.
- ``tree``: layered by entrance depth. Every connection is oriented from
  the shallower room to the deeper one.

This module only computes numbers and orientations; it never draws.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from bitesized.constants.dungeon_constants import (
    CONNECTION_DISPLAY_LABELS,
    FORCE_BRIDGE_LINK_DISTANCE,
    FORCE_BRIDGE_LINK_STRENGTH,
    FORCE_CHARGE_STRENGTH,
    FORCE_LINK_DISTANCE,
    FORCE_LINK_STRENGTH,
    TREE_CHARGE_STRENGTH,
    TREE_LEVEL_DISTANCE,
    TREE_LINK_DISTANCE,
)
from bitesized.core.definitions import Connection, ConnectionType, DungeonGraph
from bitesized.evaluation.topology import compute_depths_in, find_bridge_connections_in

logger = logging.getLogger(__name__)


class LayoutMode(str, Enum):
    FORCE = "force"
    TREE = "tree"


@dataclass
class LayoutHintConfig:
    """Force-simulation constants for both layout modes."""
    link_distance: float = FORCE_LINK_DISTANCE
    bridge_link_distance: float = FORCE_BRIDGE_LINK_DISTANCE
    link_strength: float = FORCE_LINK_STRENGTH
    bridge_link_strength: float = FORCE_BRIDGE_LINK_STRENGTH
    charge_strength: float = FORCE_CHARGE_STRENGTH
    tree_link_distance: float = TREE_LINK_DISTANCE
    tree_charge_strength: float = TREE_CHARGE_STRENGTH
    tree_level_distance: float = TREE_LEVEL_DISTANCE


@dataclass(frozen=True)
class LinkHint:
    """Rendering parameters for one connection."""
    source: str
    target: str
    connection_type: ConnectionType
    label: str
    distance: float
    strength: Optional[float] = None
    is_bridge: bool = False
    clue_room_id: Optional[str] = None


@dataclass(frozen=True)
class LayoutHints:
    mode: LayoutMode
    charge_strength: float
    links: List[LinkHint]
    depths: Dict[str, int]
    bridges: frozenset
    level_distance: Optional[float] = None


def connection_label(connection_type: ConnectionType) -> str:
    return CONNECTION_DISPLAY_LABELS.get(connection_type.value, connection_type.value)


def orient_for_tree(link: Connection, depths: Dict[str, int]) -> tuple:
    """
    Return (source, target) with the shallower room first.

    Rooms without a depth count as 0 here. Ties go to the smaller id.
    """
    a, b = link.source, link.target
    depth_a = depths.get(a, 0)
    depth_b = depths.get(b, 0)
    if depth_a < depth_b:
        return a, b
    if depth_b < depth_a:
        return b, a
    return (a, b) if a < b else (b, a)


def compute_layout_hints(
    graph: DungeonGraph,
    mode: LayoutMode = LayoutMode.FORCE,
    config: Optional[LayoutHintConfig] = None,
) -> LayoutHints:
    """Compute per-link distances/strengths (force) or orientations (tree)."""
    config = config or LayoutHintConfig()
    mode = LayoutMode(mode)

    if mode is LayoutMode.TREE:
        depths = compute_depths_in(graph) if graph.rooms else {}
        links = []
        for link in graph.connections:
            source, target = orient_for_tree(link, depths)
            links.append(LinkHint(
                source=source,
                target=target,
                connection_type=link.connection_type,
                label=connection_label(link.connection_type),
                distance=config.tree_link_distance,
                clue_room_id=link.clue_room_id,
            ))
        return LayoutHints(
            mode=mode,
            charge_strength=config.tree_charge_strength,
            links=links,
            depths=depths,
            bridges=frozenset(),
            level_distance=config.tree_level_distance,
        )

    bridges = find_bridge_connections_in(graph)
    links = []
    for link in graph.connections:
        is_bridge = link.key in bridges
        links.append(LinkHint(
            source=link.source,
            target=link.target,
            connection_type=link.connection_type,
            label=connection_label(link.connection_type),
            distance=config.bridge_link_distance if is_bridge else config.link_distance,
            strength=config.bridge_link_strength if is_bridge else config.link_strength,
            is_bridge=is_bridge,
            clue_room_id=link.clue_room_id,
        ))
    logger.debug(f"Force hints: {len(bridges)} bridge(s) among {len(links)} link(s)")
    return LayoutHints(
        mode=mode,
        charge_strength=config.charge_strength,
        links=links,
        depths={},
        bridges=frozenset(bridges),
    )

