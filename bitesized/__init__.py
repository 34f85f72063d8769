"""
Bite-Sized Dungeons
===================

Procedural six-room dungeon graphs for tabletop game prep.

Submodules:
- core: Room / Connection / DungeonGraph data model
- generation: Layout catalog, connection roll, stocking, unit generator
- utils: Graph editing (update, add connection, attach, explode/replace)
- evaluation: Topology analysis (bridge connections, entrance depths)
- visualization: Layout hints for the graph view
- export: Markdown handout
- pipeline: Single-author editing session

Usage:
    from bitesized.generation import BiteSizedGenerator
    from bitesized.utils import attach_dungeon

    graph = BiteSizedGenerator(seed=42).generate()
    graph = attach_dungeon(graph, graph.rooms[0].id)
"""

__version__ = "1.0.0"

__all__ = ['core', 'generation', 'utils', 'evaluation', 'visualization', 'export', 'pipeline']
