"""
Bite-Sized Dungeon Definitions
==============================
Central data model for six-room dungeon graphs.

This file is the SINGLE SOURCE OF TRUTH for:
- Room and connection type enums
- Room / Connection / DungeonGraph value types
- Edge key normalization (unordered endpoint pairs)
- Room identifier minting

Graph values are immutable. Every editing operation in
``bitesized.utils.graph_utils`` returns a new ``DungeonGraph``.

Usage:
    from bitesized.core.definitions import DungeonGraph, edge_key

    graph = DungeonGraph.from_dict(data)
    link = graph.find_connection("room-a", "room-b")
    assert link is graph.find_connection("room-b", "room-a")
"""

import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from bitesized.constants.dungeon_constants import ROOM_ID_LENGTH, ROOM_ID_PREFIX

logger = logging.getLogger(__name__)

EdgeKey = Tuple[str, str]


class LayoutConsistencyError(RuntimeError):
    """A catalog layout produced an invalid unit (e.g. a duplicate edge)."""


# ==========================================
# ENUMS
# ==========================================

class RoomType(str, Enum):
    """Room content categories."""
    MONSTER_TREASURE = "monster_treasure"
    MONSTER = "monster"
    TREASURE = "treasure"
    SPECIAL = "special"
    EMPTY = "empty"


class ConnectionType(str, Enum):
    """How a connection between two rooms is traversed."""
    OPEN = "open"
    CLOSED = "closed"
    TRAPPED = "trapped"
    HAZARDOUS = "hazardous"
    SECRET = "secret"


# ==========================================
# HELPERS
# ==========================================

def edge_key(a: str, b: str) -> EdgeKey:
    """
    Normalize an endpoint pair so that (a, b) and (b, a) compare equal.

    Every endpoint match in the project goes through this helper.
    """
    return (a, b) if a <= b else (b, a)


_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def new_room_id() -> str:
    """Mint an opaque room identifier such as ``room-0k3j9xqa``."""
    value = uuid.uuid4().int
    chars = []
    for _ in range(ROOM_ID_LENGTH):
        value, digit = divmod(value, 36)
        chars.append(_BASE36[digit])
    return ROOM_ID_PREFIX + "".join(chars)


# ==========================================
# GRAPH DATA STRUCTURES
# ==========================================

@dataclass(frozen=True)
class Room:
    """Node in the dungeon graph."""
    id: str
    label: str
    room_type: RoomType
    content: str = ""
    entrance: bool = False
    parent_room_id: Optional[str] = None  # Room this room's unit was spliced from (provenance only)

    @property
    def display_name(self) -> str:
        return self.label or self.id

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "label": self.label,
            "room_type": self.room_type.value,
            "content": self.content,
            "entrance": self.entrance,
        }
        if self.parent_room_id is not None:
            data["parent_room_id"] = self.parent_room_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Room":
        entrance = data.get("entrance", False)
        if not isinstance(entrance, bool):
            raise ValueError(f"Room entrance must be a boolean, got {entrance!r}")
        try:
            return cls(
                id=str(data["id"]),
                label=str(data.get("label", "")),
                room_type=RoomType(data["room_type"]),
                content=str(data.get("content", "")),
                entrance=entrance,
                parent_room_id=data.get("parent_room_id"),
            )
        except KeyError as exc:
            raise ValueError(f"Room is missing required field {exc}") from exc


@dataclass(frozen=True)
class Connection:
    """
    Edge in the dungeon graph.

    Connections are logically unordered; ``source``/``target`` is only the
    stored order. Compare connections by ``key``.
    """
    source: str
    target: str
    connection_type: ConnectionType = ConnectionType.OPEN
    description: Optional[str] = None
    clue_room_id: Optional[str] = None  # Only meaningful for SECRET

    @property
    def key(self) -> EdgeKey:
        return edge_key(self.source, self.target)

    def touches(self, room_id: str) -> bool:
        return self.source == room_id or self.target == room_id

    def other_end(self, room_id: str) -> str:
        """Return the endpoint opposite ``room_id``."""
        return self.target if self.source == room_id else self.source

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "source": self.source,
            "target": self.target,
            "connection_type": self.connection_type.value,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.clue_room_id is not None:
            data["clue_room_id"] = self.clue_room_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Connection":
        try:
            return cls(
                source=str(data["source"]),
                target=str(data["target"]),
                connection_type=ConnectionType(data.get("connection_type", "open")),
                description=data.get("description"),
                clue_room_id=data.get("clue_room_id"),
            )
        except KeyError as exc:
            raise ValueError(f"Connection is missing required field {exc}") from exc


@dataclass(frozen=True)
class DungeonGraph:
    """Ordered rooms plus ordered connections."""
    rooms: Tuple[Room, ...] = field(default_factory=tuple)
    connections: Tuple[Connection, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept lists from callers but always store tuples
        object.__setattr__(self, "rooms", tuple(self.rooms))
        object.__setattr__(self, "connections", tuple(self.connections))

    def room_ids(self) -> List[str]:
        return [room.id for room in self.rooms]

    def get_room(self, room_id: str) -> Optional[Room]:
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    def has_room(self, room_id: str) -> bool:
        return self.get_room(room_id) is not None

    def find_connection(self, a: str, b: str) -> Optional[Connection]:
        """Find the connection between two rooms in either stored direction."""
        key = edge_key(a, b)
        for link in self.connections:
            if link.key == key:
                return link
        return None

    def connections_touching(self, room_id: str) -> List[Connection]:
        return [link for link in self.connections if link.touches(room_id)]

    def entrance_ids(self) -> List[str]:
        return [room.id for room in self.rooms if room.entrance]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rooms": [room.to_dict() for room in self.rooms],
            "connections": [link.to_dict() for link in self.connections],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DungeonGraph":
        """
        Build a graph from plain dicts, enforcing the structural invariants.

        Raises:
            ValueError: duplicate room ids, parallel connections, or
                connections referencing unknown rooms.
        """
        rooms = [Room.from_dict(r) for r in data.get("rooms", [])]
        connections = [Connection.from_dict(c) for c in data.get("connections", [])]
        _check_invariants(rooms, connections)
        return cls(rooms=tuple(rooms), connections=tuple(connections))

    def to_networkx(self) -> nx.Graph:
        """
        Convert to an undirected NetworkX graph.

        Node attributes mirror Room fields; edge attributes mirror Connection
        fields (``source``/``target`` keep the stored direction).
        """
        G = nx.Graph()
        for room in self.rooms:
            G.add_node(
                room.id,
                label=room.label,
                room_type=room.room_type.value,
                entrance=room.entrance,
                parent_room_id=room.parent_room_id,
            )
        for link in self.connections:
            G.add_edge(
                link.source,
                link.target,
                connection_type=link.connection_type.value,
                description=link.description,
                clue_room_id=link.clue_room_id,
                source=link.source,
                target=link.target,
            )
        return G


def _check_invariants(rooms: Iterable[Room], connections: Iterable[Connection]) -> None:
    seen_ids = set()
    for room in rooms:
        if room.id in seen_ids:
            raise ValueError(f"Duplicate room id: {room.id}")
        seen_ids.add(room.id)

    seen_keys = set()
    for link in connections:
        if link.source not in seen_ids or link.target not in seen_ids:
            raise ValueError(
                f"Connection {link.source} -> {link.target} references an unknown room"
            )
        if link.key in seen_keys:
            raise ValueError(f"Parallel connection between {link.source} and {link.target}")
        seen_keys.add(link.key)
