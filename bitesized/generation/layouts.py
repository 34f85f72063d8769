"""
Layout Catalog
==============

Fixed topologies for a six-room unit. Each layout is six edges over room
positions 0..5, written as ``(min, max)`` index pairs.

Every layout:
    - uses all six positions
    - is connected
    - contains at least one small loop (triangle, square or pentagon)
      and is never a plain path or one big six-room ring
    - has no duplicate pairs

``bitesized.evaluation.topology.validate_catalog`` checks these properties.
"""

import random
from typing import List, Optional, Tuple

LayoutEdges = Tuple[Tuple[int, int], ...]

LAYOUTS: Tuple[LayoutEdges, ...] = (
    ((0, 1), (1, 2), (0, 2), (0, 3), (1, 4), (2, 5)),  # triangle + 3 legs
    ((0, 1), (1, 2), (0, 2), (0, 3), (0, 4), (4, 5)),  # triangle + 2 on 0, then 4-5 leg
    ((0, 1), (1, 2), (0, 2), (0, 3), (1, 4), (1, 5)),  # triangle + 3 distributed
    ((0, 1), (1, 2), (0, 2), (0, 3), (0, 4), (0, 5)),  # triangle + all 3 on 0
    ((0, 1), (1, 2), (2, 3), (0, 3), (0, 4), (2, 5)),  # square + 2 separated
    ((0, 1), (1, 2), (2, 3), (0, 3), (0, 4), (4, 5)),  # square + 2 in line
    ((0, 1), (1, 2), (2, 3), (0, 3), (0, 4), (0, 5)),  # square + 2 on same corner
    ((0, 1), (1, 2), (2, 3), (3, 4), (0, 4), (0, 5)),  # pentagon + 1
    ((0, 1), (1, 2), (2, 3), (0, 3), (3, 4), (4, 5)),  # square + leg 3-4-5
    ((0, 1), (1, 2), (0, 2), (2, 3), (0, 4), (1, 5)),  # triangle variant
)


def layout_count() -> int:
    return len(LAYOUTS)


def get_layout(index: int) -> LayoutEdges:
    """
    Return the layout at ``index``.

    Raises:
        IndexError: if ``index`` is outside the catalog (negative indices
            are rejected as well).
    """
    if not 0 <= index < len(LAYOUTS):
        raise IndexError(f"Layout index {index} out of range 0..{len(LAYOUTS) - 1}")
    return LAYOUTS[index]


def choose_layout(
    index: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[int, LayoutEdges]:
    """
    Pick a layout explicitly or uniformly at random.

    Returns:
        (layout_index, edges)
    """
    if index is None:
        rng = rng or random.Random()
        index = rng.randrange(len(LAYOUTS))
    return index, get_layout(index)


def all_layouts() -> List[LayoutEdges]:
    return list(LAYOUTS)
