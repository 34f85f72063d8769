"""
Markdown Export
===============

Read-only traversal of a dungeon graph into a markdown handout:

    # <title>
    ## Dungeon map          (only when an image reference is given)
    ## Rooms
    ### <room>             (entrances first, then by name)
    *Entrance*
    <content>
    **Exits**
    - **To <room>** (<type>)
    - **To <room> (secret (clue in: <room>)):** <description>

Rooms sharing a display name get " (2)", " (3)" ... suffixes on their
headings.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from bitesized.constants.dungeon_constants import (
    DEFAULT_EXPORT_TITLE,
    DEFAULT_IMAGE_FILENAME,
    DEFAULT_MARKDOWN_FILENAME,
)
from bitesized.core.definitions import ConnectionType, DungeonGraph
from bitesized.utils.graph_utils import (
    ConnectionInfo,
    get_connections_for_room,
    sorted_rooms_for_export,
)

logger = logging.getLogger(__name__)


@dataclass
class ExportConfig:
    """Settings for a markdown export."""
    title: str = DEFAULT_EXPORT_TITLE
    image_ref: Optional[str] = None
    markdown_filename: str = DEFAULT_MARKDOWN_FILENAME
    image_filename: str = DEFAULT_IMAGE_FILENAME


def _exit_line(graph: DungeonGraph, conn: ConnectionInfo) -> str:
    type_label = conn.connection_type.value
    other_name = conn.other_room.display_name

    clue = ""
    if conn.connection_type is ConnectionType.SECRET and conn.clue_room_id:
        clue_room = graph.get_room(conn.clue_room_id)
        if clue_room is not None:
            clue = f" (clue in: {clue_room.display_name})"

    if conn.description:
        return f"- **To {other_name} ({type_label}{clue}):** {conn.description}"
    return f"- **To {other_name}** ({type_label}{clue})"


def build_markdown(
    graph: DungeonGraph,
    title: str = DEFAULT_EXPORT_TITLE,
    image_ref: Optional[str] = None,
) -> str:
    """Render the graph as a markdown document."""
    lines: List[str] = [f"# {title}\n"]
    if image_ref:
        lines.append("## Dungeon map\n")
        lines.append(f"![Dungeon map]({image_ref})\n")
    lines.append("## Rooms\n")

    label_count: Dict[str, int] = {}
    for room in sorted_rooms_for_export(graph):
        base = room.display_name
        label_count[base] = label_count.get(base, 0) + 1
        count = label_count[base]
        heading = base if count == 1 else f"{base} ({count})"

        lines.append(f"### {heading}")
        if room.entrance:
            lines.append("*Entrance*")
        lines.append("")
        lines.append(room.content or "*No description.*")

        connections = get_connections_for_room(graph, room.id)
        if connections:
            lines.append("")
            lines.append("**Exits**")
            for conn in connections:
                lines.append(_exit_line(graph, conn))
        lines.append("")

    return "\n".join(lines)


def write_markdown(
    path: Union[str, Path],
    graph: DungeonGraph,
    config: Optional[ExportConfig] = None,
) -> Path:
    """Write ``build_markdown`` output to ``path`` (UTF-8)."""
    config = config or ExportConfig()
    path = Path(path)
    if path.is_dir():
        path = path / config.markdown_filename
    path.write_text(build_markdown(graph, config.title, config.image_ref), encoding="utf-8")
    logger.info(f"Wrote {len(graph.rooms)} rooms to {path}")
    return path
