# gridpath/app/render.py
#!/usr/bin/env python3
"""Console rendering of a Board, one glyph per cell."""

from typing import Dict

from gridpath.core.types import Board, CellState

EMOJI_GLYPHS: Dict[CellState, str] = {
    CellState.EMPTY:    "0   ",
    CellState.VISITED:  "0   ",
    CellState.OBSTACLE: "⛰️   ",
    CellState.PATH:     "🚗   ",
    CellState.START:    "🚦   ",
    CellState.FINISH:   "🏁   ",
}

ASCII_GLYPHS: Dict[CellState, str] = {
    CellState.EMPTY:    ". ",
    CellState.VISITED:  ". ",
    CellState.OBSTACLE: "# ",
    CellState.PATH:     "* ",
    CellState.START:    "S ",
    CellState.FINISH:   "G ",
}

GLYPH_SETS = {"emoji": EMOJI_GLYPHS, "ascii": ASCII_GLYPHS}


def cell_string(state: CellState, glyphs: Dict[CellState, str] = EMOJI_GLYPHS) -> str:
    return glyphs.get(state, glyphs[CellState.EMPTY])


def render_board(board: Board, glyphs: Dict[CellState, str] = EMOJI_GLYPHS) -> str:
    lines = ["".join(cell_string(s, glyphs) for s in row).rstrip() for row in board.rows()]
    return "\n".join(lines)
