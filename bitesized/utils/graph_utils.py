"""
Dungeon Graph Utilities
=======================

Editing operations over ``DungeonGraph`` values.

This module provides:
- Field updates for rooms and connections
- Manual connection adding (idempotent, no self-connections)
- Sub-dungeon attach (room stays, one new corridor)
- Sub-dungeon explode/replace (room swapped for a six-room unit)
- Direction-agnostic connection lookup for export

All functions are pure: the input graph is never modified, a new graph is
returned. Unknown room ids and degenerate requests are silent no-ops that
return the input graph unchanged.

Usage:
    from bitesized.utils.graph_utils import attach_dungeon, replace_room_with_dungeon

    graph = attach_dungeon(graph, "room-abc")
    result = replace_room_with_dungeon(graph, "room-xyz")
    graph, selected = result.graph, result.bridge_room_id
"""

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional

from bitesized.constants.dungeon_constants import BRIDGE_ROOM_INDEX
from bitesized.core.definitions import (
    Connection,
    ConnectionType,
    DungeonGraph,
    Room,
    edge_key,
)
from bitesized.generation.generator import BiteSizedGenerator

logger = logging.getLogger(__name__)

# Marks a keyword argument the caller did not pass
_UNSET: Any = object()


def _changes(**fields: Any) -> Dict[str, Any]:
    return {name: value for name, value in fields.items() if value is not _UNSET}


# ==========================================
# FIELD UPDATES
# ==========================================

def update_room(
    graph: DungeonGraph,
    room_id: str,
    *,
    label: str = _UNSET,
    content: str = _UNSET,
    entrance: bool = _UNSET,
) -> DungeonGraph:
    """
    Replace label/content/entrance on the room with ``room_id``.

    Only the fields actually passed are changed. Returns the input graph
    when the room does not exist.

    Example:
        >>> g = update_room(g, rid, label="Crypt")
        >>> g.get_room(rid).label
        'Crypt'
    """
    if not graph.has_room(room_id):
        logger.warning(f"update_room: unknown room {room_id}")
        return graph
    changes = _changes(label=label, content=content, entrance=entrance)
    if not changes:
        return graph
    rooms = tuple(
        dataclasses.replace(room, **changes) if room.id == room_id else room
        for room in graph.rooms
    )
    return dataclasses.replace(graph, rooms=rooms)


def update_connection(
    graph: DungeonGraph,
    source: str,
    target: str,
    *,
    connection_type: ConnectionType = _UNSET,
    description: Optional[str] = _UNSET,
    clue_room_id: Optional[str] = _UNSET,
) -> DungeonGraph:
    """
    Update the connection between two rooms, matched in either direction.

    Returns the input graph when no such connection exists. A plain string
    connection type is converted to ``ConnectionType`` (ValueError when it
    names no type).
    """
    key = edge_key(source, target)
    if graph.find_connection(source, target) is None:
        logger.warning(f"update_connection: no connection between {source} and {target}")
        return graph
    changes = _changes(
        connection_type=connection_type,
        description=description,
        clue_room_id=clue_room_id,
    )
    if "connection_type" in changes:
        changes["connection_type"] = ConnectionType(changes["connection_type"])
    if not changes:
        return graph
    connections = tuple(
        dataclasses.replace(link, **changes) if link.key == key else link
        for link in graph.connections
    )
    return dataclasses.replace(graph, connections=connections)


def add_connection(
    graph: DungeonGraph,
    source: str,
    target: str,
    connection_type: ConnectionType = ConnectionType.OPEN,
) -> DungeonGraph:
    """
    Append a connection between two existing rooms.

    No-op for a self-connection, a pair that is already connected (in
    either direction) or an endpoint that is not in the graph.
    """
    if source == target:
        logger.debug(f"add_connection: ignoring self-connection on {source}")
        return graph
    if not (graph.has_room(source) and graph.has_room(target)):
        logger.warning(f"add_connection: unknown endpoint in {source} -> {target}")
        return graph
    if graph.find_connection(source, target) is not None:
        logger.debug(f"add_connection: {source} and {target} already connected")
        return graph
    link = Connection(
        source=source,
        target=target,
        connection_type=ConnectionType(connection_type),
    )
    return dataclasses.replace(graph, connections=graph.connections + (link,))


# ==========================================
# SUB-DUNGEON SPLICING
# ==========================================

class ReplaceResult(NamedTuple):
    """Graph after explode/replace plus the room that took the old room's place."""
    graph: DungeonGraph
    bridge_room_id: str


def _generate_fresh_unit(graph: DungeonGraph, generator: BiteSizedGenerator) -> DungeonGraph:
    """Generate a unit whose room ids are all absent from ``graph``."""
    existing = set(graph.room_ids())
    while True:
        unit = generator.generate()
        clashes = existing.intersection(unit.room_ids())
        if not clashes:
            return unit
        logger.debug(f"Regenerating unit: ids {sorted(clashes)} already in graph")


def attach_dungeon(
    graph: DungeonGraph,
    room_id: str,
    generator: Optional[BiteSizedGenerator] = None,
) -> DungeonGraph:
    """
    Attach a new six-room unit to ``room_id``.

    The existing room is left untouched. The new rooms carry ``room_id``
    as provenance, are never entrances, and the unit's first room is
    joined to ``room_id`` by one freshly rolled corridor.
    """
    if not graph.has_room(room_id):
        logger.warning(f"attach_dungeon: unknown room {room_id}")
        return graph

    generator = generator or BiteSizedGenerator()
    unit = _generate_fresh_unit(graph, generator)
    bridge_id = unit.rooms[BRIDGE_ROOM_INDEX].id

    new_rooms = tuple(
        dataclasses.replace(room, parent_room_id=room_id, entrance=False)
        for room in unit.rooms
    )
    corridor = Connection(
        source=room_id,
        target=bridge_id,
        connection_type=generator.roll_connection_type(),
    )

    logger.debug(f"Attached unit to {room_id} via bridge room {bridge_id}")
    return DungeonGraph(
        rooms=graph.rooms + new_rooms,
        connections=graph.connections + unit.connections + (corridor,),
    )


def replace_room_with_dungeon(
    graph: DungeonGraph,
    room_id: str,
    generator: Optional[BiteSizedGenerator] = None,
) -> ReplaceResult:
    """
    Explode ``room_id`` into a six-room unit.

    The unit's first room becomes the bridge room: it takes over the old
    room's label, content and entrance flag, and every connection that
    touched the old room is re-created on the bridge room with the same
    type, description and clue room. The old room and its connections are
    removed.

    Returns:
        ReplaceResult(graph, bridge_room_id). When ``room_id`` is unknown
        the input graph and ``room_id`` itself are returned.
    """
    old_room = graph.get_room(room_id)
    if old_room is None:
        logger.warning(f"replace_room_with_dungeon: unknown room {room_id}")
        return ReplaceResult(graph, room_id)

    external = graph.connections_touching(room_id)

    generator = generator or BiteSizedGenerator()
    unit = _generate_fresh_unit(graph, generator)
    bridge_id = unit.rooms[BRIDGE_ROOM_INDEX].id

    new_rooms: List[Room] = []
    for room in unit.rooms:
        if room.id == bridge_id:
            room = dataclasses.replace(
                room,
                label=old_room.label,
                content=old_room.content,
                entrance=old_room.entrance,
            )
        else:
            room = dataclasses.replace(room, entrance=False)
        new_rooms.append(dataclasses.replace(room, parent_room_id=room_id))

    reattached = tuple(
        Connection(
            source=bridge_id,
            target=link.other_end(room_id),
            connection_type=link.connection_type,
            description=link.description,
            clue_room_id=link.clue_room_id,
        )
        for link in external
        # A stored self-loop has no outside room to reattach to
        if link.other_end(room_id) != room_id
    )

    kept_rooms = tuple(room for room in graph.rooms if room.id != room_id)
    kept_connections = tuple(link for link in graph.connections if not link.touches(room_id))

    logger.debug(
        f"Replaced {room_id} with unit; bridge room {bridge_id} "
        f"inherits {len(reattached)} connection(s)"
    )
    new_graph = DungeonGraph(
        rooms=kept_rooms + tuple(new_rooms),
        connections=kept_connections + unit.connections + reattached,
    )
    return ReplaceResult(new_graph, bridge_id)


# ==========================================
# READ-ONLY LOOKUPS
# ==========================================

@dataclass(frozen=True)
class ConnectionInfo:
    """One exit of a room, as seen from that room."""
    other_room: Room
    connection_type: ConnectionType
    description: Optional[str] = None
    clue_room_id: Optional[str] = None


def get_connections_for_room(graph: DungeonGraph, room_id: str) -> List[ConnectionInfo]:
    """
    Every connection touching ``room_id``, whichever endpoint stored it.

    Sorted by the neighbouring room's display name. Connections whose
    other end is missing from the graph are skipped.
    """
    result: List[ConnectionInfo] = []
    for link in graph.connections_touching(room_id):
        other = graph.get_room(link.other_end(room_id))
        if other is None:
            continue
        result.append(ConnectionInfo(
            other_room=other,
            connection_type=link.connection_type,
            description=link.description,
            clue_room_id=link.clue_room_id,
        ))
    result.sort(key=lambda info: _name_sort_key(info.other_room))
    return result


def sorted_rooms_for_export(graph: DungeonGraph) -> List[Room]:
    """Entrances first, then alphabetical by display name."""
    return sorted(graph.rooms, key=lambda room: (not room.entrance,) + _name_sort_key(room))


def _name_sort_key(room: Room):
    name = room.display_name
    return (name.casefold(), name)
