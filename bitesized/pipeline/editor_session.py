"""
Editor Session
==============

Holds the "current" dungeon for a single author and applies edits with
read-modify-write semantics. The graph itself is immutable; the session
only swaps which graph value is current and tracks the selection.

Usage:
    session = EditorSession(seed=7)
    session.select_room(session.graph.rooms[0].id)
    bridge = session.replace_with_dungeon(session.selected_room_id)
    assert session.selected_room_id == bridge
"""

import logging
from typing import Optional

from bitesized.core.definitions import ConnectionType, DungeonGraph, EdgeKey, edge_key
from bitesized.generation.generator import BiteSizedGenerator
from bitesized.utils.graph_utils import (
    add_connection,
    attach_dungeon,
    replace_room_with_dungeon,
    update_connection,
    update_room,
)

logger = logging.getLogger(__name__)


class EditorSession:
    """
    Single-author editing state.

    Args:
        seed: Seed for the session's generator (None for unseeded)
        graph: Starting graph; a fresh unit is generated when omitted
    """

    def __init__(self, seed: Optional[int] = None, graph: Optional[DungeonGraph] = None):
        self.generator = BiteSizedGenerator(seed=seed)
        self.graph: DungeonGraph = graph if graph is not None else self.generator.generate()
        self.selected_room_id: Optional[str] = None
        self.selected_connection: Optional[EdgeKey] = None

    # Selection

    def select_room(self, room_id: Optional[str]) -> None:
        if room_id is not None and not self.graph.has_room(room_id):
            logger.debug(f"Ignoring selection of unknown room {room_id}")
            return
        self.selected_room_id = room_id

    def select_connection(self, source: Optional[str], target: Optional[str] = None) -> None:
        if source is None or target is None:
            self.selected_connection = None
            return
        if self.graph.find_connection(source, target) is None:
            logger.debug(f"Ignoring selection of unknown connection {source}-{target}")
            return
        self.selected_connection = edge_key(source, target)

    # Whole-graph operations

    def new_dungeon(self, layout_index: Optional[int] = None) -> DungeonGraph:
        self.graph = self.generator.generate(layout_index)
        self.selected_room_id = None
        self.selected_connection = None
        logger.info("Started a new dungeon")
        return self.graph

    def attach_dungeon(self, room_id: str) -> DungeonGraph:
        self.graph = attach_dungeon(self.graph, room_id, self.generator)
        self.selected_room_id = None
        return self.graph

    def replace_with_dungeon(self, room_id: str) -> str:
        """Explode ``room_id`` and select the bridge room that replaced it."""
        result = replace_room_with_dungeon(self.graph, room_id, self.generator)
        self.graph = result.graph
        self.selected_room_id = result.bridge_room_id
        if self.selected_connection and room_id in self.selected_connection:
            self.selected_connection = None
        return result.bridge_room_id

    # Field edits

    def update_room(self, room_id: str, **fields) -> DungeonGraph:
        self.graph = update_room(self.graph, room_id, **fields)
        return self.graph

    def update_connection(self, source: str, target: str, **fields) -> DungeonGraph:
        self.graph = update_connection(self.graph, source, target, **fields)
        return self.graph

    def add_connection(
        self,
        source: str,
        target: str,
        connection_type: ConnectionType = ConnectionType.OPEN,
    ) -> DungeonGraph:
        self.graph = add_connection(self.graph, source, target, connection_type)
        return self.graph
