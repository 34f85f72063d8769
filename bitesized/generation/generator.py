"""
Bite-Sized Dungeon Generator
============================

Builds one six-room, six-connection unit:

1. Choose a layout from the catalog (explicit index or uniform random)
2. Mint six fresh room ids
3. Stock the rooms (room types + entrances)
4. Map each layout edge onto the minted ids and roll its connection type

Usage:
    generator = BiteSizedGenerator(seed=42)
    graph = generator.generate()
    assert len(graph.rooms) == 6 and len(graph.connections) == 6

    # Explicit layout
    graph = generator.generate(layout_index=4)
"""

import logging
import random
from typing import List, Optional, Set

from bitesized.constants.dungeon_constants import (
    DEFAULT_ROOM_CONTENT,
    ROOM_LABEL_TEMPLATE,
    ROOMS_PER_UNIT,
)
from bitesized.core.definitions import (
    Connection,
    DungeonGraph,
    EdgeKey,
    LayoutConsistencyError,
    Room,
    RoomType,
    edge_key,
    new_room_id,
)
from bitesized.generation.connection_roll import roll_connection_type
from bitesized.generation.layouts import choose_layout
from bitesized.generation.stocking import stock_unit

logger = logging.getLogger(__name__)


def default_content(room_type: RoomType) -> str:
    """Markdown prompt shown in a freshly generated room."""
    return DEFAULT_ROOM_CONTENT[room_type.value]


class BiteSizedGenerator:
    """
    Generator for six-room dungeon units.

    Owns a single ``random.Random`` so that every draw (layout, stocking,
    connection rolls) is replayable from ``seed``. Room ids are always
    fresh and are not part of the replayable state.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)

    def roll_connection_type(self):
        return roll_connection_type(self.rng)

    def generate(self, layout_index: Optional[int] = None) -> DungeonGraph:
        """
        Generate a fresh unit.

        Args:
            layout_index: Catalog index, or None for a random layout

        Returns:
            DungeonGraph with six rooms and six connections

        Raises:
            IndexError: explicit layout index outside the catalog
            LayoutConsistencyError: the layout maps two edges onto the
                same room pair
        """
        layout_index, edges = choose_layout(layout_index, self.rng)
        room_ids = [new_room_id() for _ in range(ROOMS_PER_UNIT)]
        stocking = stock_unit(self.rng)

        rooms: List[Room] = []
        for position, room_id in enumerate(room_ids):
            room_type = stocking.room_types[position]
            rooms.append(Room(
                id=room_id,
                label=ROOM_LABEL_TEMPLATE.format(index=position + 1),
                room_type=room_type,
                content=default_content(room_type),
                entrance=stocking.is_entrance(position),
            ))

        seen: Set[EdgeKey] = set()
        connections: List[Connection] = []
        for a, b in edges:
            source, target = room_ids[a], room_ids[b]
            key = edge_key(source, target)
            if key in seen:
                raise LayoutConsistencyError(
                    f"Layout {layout_index} maps two edges onto rooms {a} and {b}"
                )
            seen.add(key)
            connections.append(Connection(
                source=source,
                target=target,
                connection_type=self.roll_connection_type(),
            ))

        logger.debug(
            f"Generated unit from layout {layout_index}: "
            f"entrances at positions {sorted(stocking.entrances)}"
        )
        return DungeonGraph(rooms=tuple(rooms), connections=tuple(connections))


def generate_bite_sized_dungeon(
    layout_index: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> DungeonGraph:
    """One-shot helper around ``BiteSizedGenerator``."""
    return BiteSizedGenerator(rng=rng).generate(layout_index)
