# gridpath/app/cli.py
#!/usr/bin/env python3
"""
gridpath — load a board, run A*, print the annotated grid.

    gridpath boards/1.board --start 0,0 --goal 4,5
    gridpath boards/02_small_astar.json --view

Exit codes: 0 path found, 1 no path, 2 bad input.
"""

from typing import List, Optional
import argparse
import logging
import sys

from gridpath.app.config import GLYPH_CHOICES, LOG_LEVELS, override, resolve_settings
from gridpath.app.render import GLYPH_SETS, render_board
from gridpath.core.astar import search
from gridpath.core.board_io import MapSpec, load_any
from gridpath.core.errors import GridPathError
from gridpath.core.types import Cell

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def parse_cell(text: str) -> Cell:
    parts = text.replace(" ", "").split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {text!r}")
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {text!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gridpath", description="A* search over a grid board.")
    p.add_argument("board", help="path to a .board text file or a .json map")
    p.add_argument("--start", type=parse_cell, help="start cell as ROW,COL")
    p.add_argument("--goal", type=parse_cell, help="goal cell as ROW,COL")
    p.add_argument("--glyphs", choices=GLYPH_CHOICES, help="console glyph set")
    p.add_argument("--route", dest="path_mode", action="store_const", const="route",
                   help="mark only the reconstructed route instead of every expanded cell")
    p.add_argument("--trail", dest="path_mode", action="store_const", const="trail",
                   help="mark every expanded cell (default; overrides GRIDPATH_PATH_MODE)")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS)
    p.add_argument("--view", action="store_true", help="animate the search in a pygame window")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = override(resolve_settings(), glyphs=args.glyphs,
                        path_mode=args.path_mode, log_level=args.log_level)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING),
                        format=LOG_FORMAT)

    try:
        loaded = load_any(args.board)
    except (OSError, GridPathError) as ex:
        logger.error("Failed to load board %s: %s", args.board, ex)
        return 2

    if isinstance(loaded, MapSpec):
        board, start, goal = loaded.board, loaded.start, loaded.goal
    else:
        board, start, goal = loaded, None, None
    start = args.start or start
    goal = args.goal or goal
    if start is None or goal is None:
        logger.error("--start and --goal are required for %s", args.board)
        return 2

    if args.view:
        from gridpath.app.viewer import run_viewer
        try:
            run_viewer(board, start, goal, settings)
        except GridPathError as ex:
            logger.error("%s", ex)
            return 2
        return 0

    try:
        result = search(board, start, goal, path_mode=settings.path_mode)
    except GridPathError as ex:
        logger.error("%s", ex)
        return 2

    if result.status == "no_path":
        print("No path found!")
        return 1
    print(render_board(result.board, GLYPH_SETS[settings.glyphs]))
    logger.info("path length %d, %d cells expanded", result.goal_g, len(result.expanded))
    return 0


if __name__ == "__main__":
    sys.exit(main())
