"""Command that loads the first level and shows it."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from dungeoncrawl.game_map import DEFAULT_LEVEL_DIR, GameMap, LevelFormatError

__all__ = ["main"]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dungeoncrawl", description="Load the first dungeon level and display it."
    )
    parser.add_argument(
        "--levels",
        default=str(DEFAULT_LEVEL_DIR),
        help="directory holding level1.json, level2.json, ... (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Load the first level, print it and return the exit status."""
    args = _parser().parse_args(argv)
    try:
        game_map = GameMap(args.levels)
    except (OSError, json.JSONDecodeError, LevelFormatError, ValueError) as error:
        print(f"dungeoncrawl: {error}", file=sys.stderr)
        return 1
    game_map.display_map()
    return 0


if __name__ == "__main__":
    sys.exit(main())