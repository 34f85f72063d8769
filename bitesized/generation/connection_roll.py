"""
Connection Roller
=================

Weighted roll for a connection's traversal type:

    open       ~44.7%
    closed     ~22.3%
    trapped    ~11.0%
    hazardous  ~11.0%
    secret     ~11.0%

The table is a design constant (see ``CONNECTION_ROLL_TABLE``); callers
only control the random source.
"""

import random
from typing import Optional

from bitesized.constants.dungeon_constants import (
    CONNECTION_ROLL_SIDES,
    CONNECTION_ROLL_TABLE,
)
from bitesized.core.definitions import ConnectionType


def roll_connection_type(rng: Optional[random.Random] = None) -> ConnectionType:
    """Roll one connection type from the fixed distribution."""
    rng = rng or random.Random()
    roll = rng.randrange(CONNECTION_ROLL_SIDES)
    for name, upper in CONNECTION_ROLL_TABLE:
        if roll < upper:
            return ConnectionType(name)
    # Table upper bound equals CONNECTION_ROLL_SIDES
    return ConnectionType(CONNECTION_ROLL_TABLE[-1][0])
