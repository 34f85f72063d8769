"""
Bite-Sized Core Module
======================

Data model shared by generation, editing, analysis and export.

Usage:
    from bitesized.core import DungeonGraph, Room, Connection, edge_key
"""

from bitesized.core.definitions import (
    Connection,
    ConnectionType,
    DungeonGraph,
    EdgeKey,
    LayoutConsistencyError,
    Room,
    RoomType,
    edge_key,
    new_room_id,
)

__all__ = [
    'Connection',
    'ConnectionType',
    'DungeonGraph',
    'EdgeKey',
    'LayoutConsistencyError',
    'Room',
    'RoomType',
    'edge_key',
    'new_room_id',
]
