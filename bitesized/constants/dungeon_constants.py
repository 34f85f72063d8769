"""
Bite-Sized Dungeon Constants
============================

Design constants for six-room dungeon generation. These values define the
shape of every generated unit and the probability of each connection type.

**CRITICAL**: The room-type multiset and the connection roll table are part
of the generator contract. Tests check generated units against them directly.

Sources:
- Six-room dungeon stocking procedure (1 monster+treasure, 1 monster,
  1 treasure, 3 empty, one empty optionally upgraded to special)
- Connection roll table (open/closed/trapped/hazardous/secret)

"""

from typing import Dict, Tuple

# ==========================================
# UNIT SHAPE
# ==========================================

ROOMS_PER_UNIT: int = 6
CONNECTIONS_PER_UNIT: int = 6

# Index of the room that carries identity when a unit is spliced in
BRIDGE_ROOM_INDEX: int = 0

# Prefix and length of minted room identifiers ("room-k3j9x0aa")
ROOM_ID_PREFIX: str = "room-"
ROOM_ID_LENGTH: int = 8

# Default labels are "Room 1" .. "Room 6"
ROOM_LABEL_TEMPLATE: str = "Room {index}"

# ==========================================
# STOCKING
# ==========================================

# Canonical room-type multiset, shuffled across the six positions.
# Values match RoomType enum values.
CANONICAL_ROOM_TYPES: Tuple[str, ...] = (
    "monster_treasure",
    "monster",
    "treasure",
    "empty",
    "empty",
    "empty",
)

# Chance that one empty room is upgraded to special
SPECIAL_UPGRADE_CHANCE: float = 0.5

# Independent entrance draws (with replacement, may coincide)
ENTRANCE_DRAWS: int = 2

DEFAULT_ROOM_CONTENT: Dict[str, str] = {
    "monster_treasure": "**Monster + Treasure**\n\nDescribe the encounter and the treasure here.",
    "monster": "**Monster**\n\nDescribe the encounter.",
    "treasure": "**Treasure** (hidden or trapped)\n\nDescribe how it's hidden or the trap.",
    "special": "**Special**\n\nPuzzle, trick, or unusual feature.",
    "empty": "**Empty**\n\nSet dressing and any minor details.",
}

# ==========================================
# CONNECTION ROLL
# ==========================================

# Integer roll in [0, CONNECTION_ROLL_SIDES). Each entry is the exclusive
# upper bound for its type; the last type takes the remainder.
# Source weights 50 / 25 / 12.3 / 12.3 / 12.3 normalized to 1000.
CONNECTION_ROLL_SIDES: int = 1000
CONNECTION_ROLL_TABLE: Tuple[Tuple[str, int], ...] = (
    ("open", 447),
    ("closed", 670),
    ("trapped", 780),
    ("hazardous", 890),
    ("secret", 1000),
)

CONNECTION_PROBABILITIES: Dict[str, float] = {
    "open": 0.447,
    "closed": 0.223,
    "trapped": 0.110,
    "hazardous": 0.110,
    "secret": 0.110,
}

# Short labels used on rendered edges
CONNECTION_DISPLAY_LABELS: Dict[str, str] = {
    "open": "Open",
    "closed": "Closed",
    "trapped": "Trap",
    "hazardous": "Hazard",
    "secret": "Secret",
}

# ==========================================
# LAYOUT HINTS (rendering collaborator)
# ==========================================

# Force layout: bridge edges are pulled short and stiff so that
# sub-dungeons hang close to the room they were attached to.
FORCE_LINK_DISTANCE: float = 28.0
FORCE_BRIDGE_LINK_DISTANCE: float = 10.0
FORCE_BRIDGE_LINK_STRENGTH: float = 1.0
FORCE_LINK_STRENGTH: float = 0.55
FORCE_CHARGE_STRENGTH: float = -400.0

# Tree layout
TREE_LINK_DISTANCE: float = 22.0
TREE_CHARGE_STRENGTH: float = -90.0
TREE_LEVEL_DISTANCE: float = 38.0

# ==========================================
# EXPORT
# ==========================================

DEFAULT_EXPORT_TITLE: str = "Bite-Sized Dungeon"
DEFAULT_MARKDOWN_FILENAME: str = "dungeon.md"
DEFAULT_IMAGE_FILENAME: str = "dungeon.png"
