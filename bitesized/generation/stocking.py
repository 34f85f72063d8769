"""
Stocking Assigner
=================

Assigns room types and entrance flags to the six positions of a unit.

Algorithm:
1. Shuffle the canonical multiset
   {monster+treasure, monster, treasure, empty, empty, empty}
2. With probability 1/2, upgrade ONE empty room to special. The upgraded
   room is chosen uniformly among the empty positions, so no position is
   favoured.
3. Draw two entrance positions uniformly with replacement. When both
   draws land on the same position the unit has a single entrance.
"""

import logging
import random
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from bitesized.constants.dungeon_constants import (
    CANONICAL_ROOM_TYPES,
    ENTRANCE_DRAWS,
    ROOMS_PER_UNIT,
    SPECIAL_UPGRADE_CHANCE,
)
from bitesized.core.definitions import RoomType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stocking:
    """Room types by position plus the set of entrance positions."""
    room_types: Tuple[RoomType, ...]
    entrances: FrozenSet[int]

    def is_entrance(self, position: int) -> bool:
        return position in self.entrances


def assign_room_types(rng: random.Random) -> Tuple[RoomType, ...]:
    types = [RoomType(name) for name in CANONICAL_ROOM_TYPES]
    rng.shuffle(types)

    if rng.random() < SPECIAL_UPGRADE_CHANCE:
        empties = [i for i, t in enumerate(types) if t is RoomType.EMPTY]
        upgraded = rng.choice(empties)
        types[upgraded] = RoomType.SPECIAL
        logger.debug(f"Upgraded position {upgraded} to special")

    return tuple(types)


def assign_entrances(rng: random.Random, positions: int = ROOMS_PER_UNIT) -> FrozenSet[int]:
    return frozenset(rng.randrange(positions) for _ in range(ENTRANCE_DRAWS))


def stock_unit(rng: Optional[random.Random] = None) -> Stocking:
    """Produce room types and entrances for one six-room unit."""
    rng = rng or random.Random()
    room_types = assign_room_types(rng)
    entrances = assign_entrances(rng, len(room_types))
    return Stocking(room_types=room_types, entrances=entrances)
