"""
Bite-Sized Generation Module
============================

- layouts: fixed catalog of six-edge topologies
- connection_roll: weighted connection-type roll
- stocking: room types and entrance flags
- generator: composes the three into one six-room unit
"""

from bitesized.generation.connection_roll import roll_connection_type
from bitesized.generation.generator import (
    BiteSizedGenerator,
    default_content,
    generate_bite_sized_dungeon,
)
from bitesized.generation.layouts import LAYOUTS, choose_layout, get_layout, layout_count
from bitesized.generation.stocking import Stocking, stock_unit

__all__ = [
    'BiteSizedGenerator',
    'LAYOUTS',
    'Stocking',
    'choose_layout',
    'default_content',
    'generate_bite_sized_dungeon',
    'get_layout',
    'layout_count',
    'roll_connection_type',
    'stock_unit',
]
