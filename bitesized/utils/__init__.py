"""Editing and lookup helpers for dungeon graphs."""

from bitesized.utils.graph_utils import (
    ConnectionInfo,
    ReplaceResult,
    add_connection,
    attach_dungeon,
    get_connections_for_room,
    replace_room_with_dungeon,
    sorted_rooms_for_export,
    update_connection,
    update_room,
)

__all__ = [
    'ConnectionInfo',
    'ReplaceResult',
    'add_connection',
    'attach_dungeon',
    'get_connections_for_room',
    'replace_room_with_dungeon',
    'sorted_rooms_for_export',
    'update_connection',
    'update_room',
]
