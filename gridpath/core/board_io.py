# gridpath/core/board_io.py
#!/usr/bin/env python3
"""
Board loaders.

- ``.board`` text: one row per line, comma-separated ints, 0 = empty,
  anything else = obstacle. A line is read up to its first malformed token.
- ``.json`` map: {"width", "height", "cells", "start": [row, col], "goal": [row, col]}.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union
import json
import logging

from gridpath.core.errors import BoardFormatError, OutOfBoundsCoordinate
from gridpath.core.types import Board, Cell, CellState

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class MapSpec:
    board: Board
    start: Cell
    goal: Cell


def parse_line(line: str) -> List[CellState]:
    row: List[CellState] = []
    tokens = line.strip().split(",")
    for i, tok in enumerate(tokens):
        tok = tok.strip()
        if not tok and i == len(tokens) - 1:
            break  # trailing comma
        try:
            n = int(tok)
        except ValueError:
            logger.debug("stopped parsing %r at token %d (%r)", line, i, tok)
            break
        row.append(CellState.EMPTY if n == 0 else CellState.OBSTACLE)
    return row


def parse_board(text: str) -> Board:
    return Board(parse_line(line) for line in text.splitlines() if line.strip())


def read_board_file(path: PathLike) -> Board:
    path = Path(path)
    board = parse_board(path.read_text(encoding="utf-8"))
    logger.info("loaded %s (%dx%d)", path, board.height, board.width)
    return board


def load_map(path: PathLike) -> MapSpec:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        width = int(data["width"])
        height = int(data["height"])
        start = tuple(int(v) for v in data["start"])
        goal = tuple(int(v) for v in data["goal"])
        cells = data["cells"]
    except (KeyError, TypeError, ValueError) as ex:
        raise BoardFormatError(f"{path}: {ex}") from ex

    if len(cells) != height:
        raise BoardFormatError(f"{path}: {len(cells)} rows, expected {height}")
    board = Board.from_values(cells)
    if board.height and board.width != width:
        raise BoardFormatError(f"{path}: {board.width} columns, expected {width}")
    for label, c in (("start", start), ("goal", goal)):
        if len(c) != 2 or not board.in_bounds(c):
            raise OutOfBoundsCoordinate(label, c, height, width)
    logger.info("loaded map %s (%dx%d)", path, height, width)
    return MapSpec(board, start, goal)


def load_any(path: PathLike) -> Union[Board, MapSpec]:
    """JSON maps carry their own endpoints; everything else is a text board."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        return load_map(path)
    return read_board_file(path)
