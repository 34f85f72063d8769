"""
Bite-Sized Dungeon Generator - Command Line
===========================================

Generate a six-room dungeon, optionally grow it by attaching or exploding
rooms, and print it as markdown or JSON.

Usage:
    python -m bitesized.generate --seed 42

    # Grow the dungeon and write a handout
    python -m bitesized.generate --seed 42 --attach 1 --explode 2 --output dungeon.md

    # Raw graph data
    python -m bitesized.generate --layout 4 --json
"""

import argparse
import json
import logging
import random
import sys
from typing import List, Optional

from bitesized import __version__
from bitesized.export.markdown_export import ExportConfig, build_markdown, write_markdown
from bitesized.generation.layouts import layout_count
from bitesized.pipeline.editor_session import EditorSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitesized",
        description="Generate and grow six-room dungeons.",
    )
    parser.add_argument("--seed", type=int, help="Seed for the random number generator.")
    parser.add_argument(
        "--layout",
        type=int,
        choices=range(layout_count()),
        metavar=f"0..{layout_count() - 1}",
        help="Use a specific layout for the starting unit.",
    )
    parser.add_argument(
        "--attach", type=int, default=0, metavar="N",
        help="Attach N sub-dungeons to randomly chosen rooms.",
    )
    parser.add_argument(
        "--explode", type=int, default=0, metavar="N",
        help="Replace N randomly chosen rooms with sub-dungeons.",
    )
    parser.add_argument("--title", default=ExportConfig.title, help="Document title.")
    parser.add_argument("--image", help="Image reference to embed as the dungeon map.")
    parser.add_argument("--output", "-o", help="Write markdown to this path instead of stdout.")
    parser.add_argument("--json", action="store_true", help="Print graph data as JSON.")
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging.")
    return parser


def grow_dungeon(session: EditorSession, attach: int, explode: int, rng: random.Random) -> None:
    """Apply random attach/explode operations to the session's graph."""
    for _ in range(attach):
        room = rng.choice(session.graph.rooms)
        session.attach_dungeon(room.id)
        logger.info(f"Attached sub-dungeon to {room.display_name}")
    for _ in range(explode):
        room = rng.choice(session.graph.rooms)
        session.replace_with_dungeon(room.id)
        logger.info(f"Exploded {room.display_name} into a sub-dungeon")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.attach < 0 or args.explode < 0:
        parser.error("--attach and --explode must be non-negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    seed = args.seed if args.seed is not None else random.randint(0, 2**32)
    logger.info(f"Using random seed {seed}")

    session = EditorSession(seed=seed)
    if args.layout is not None:
        session.new_dungeon(args.layout)
    grow_dungeon(session, args.attach, args.explode, session.generator.rng)

    if args.json:
        print(json.dumps(session.graph.to_dict(), indent=2))
        return 0

    config = ExportConfig(title=args.title, image_ref=args.image)
    if args.output:
        path = write_markdown(args.output, session.graph, config)
        print(f"Wrote {path}")
    else:
        print(build_markdown(session.graph, config.title, config.image_ref))
    return 0


if __name__ == "__main__":
    sys.exit(main())
