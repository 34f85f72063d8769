"""
Bite-Sized Evaluation Module
============================

Topology analysis for rendering decisions:
- Bridge connection detection
- Multi-source entrance depths
- Layout catalog validation
"""

from .topology import (
    compute_depths_in,
    compute_entrance_depths,
    find_bridge_connections,
    find_bridge_connections_in,
    is_connected,
    validate_catalog,
    validate_layout,
)

__all__ = [
    'compute_depths_in',
    'compute_entrance_depths',
    'find_bridge_connections',
    'find_bridge_connections_in',
    'is_connected',
    'validate_catalog',
    'validate_layout',
]
