"""
Bite-Sized Visualization Support
================================

Layout hints consumed by the interactive graph view (force/tree modes).
"""

from .layout_hints import (
    LayoutHintConfig,
    LayoutHints,
    LayoutMode,
    LinkHint,
    compute_layout_hints,
    connection_label,
    orient_for_tree,
)

__all__ = [
    'LayoutHintConfig',
    'LayoutHints',
    'LayoutMode',
    'LinkHint',
    'compute_layout_hints',
    'connection_label',
    'orient_for_tree',
]
