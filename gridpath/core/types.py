# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Optional, Dict, Any, Iterable, Iterator, Sequence

from gridpath.core.errors import MalformedBoardRow

Cell = Tuple[int, int]  # (row, col)


class CellState(Enum):
    EMPTY = "empty"
    OBSTACLE = "obstacle"
    VISITED = "visited"
    PATH = "path"
    START = "start"
    FINISH = "finish"


class Board:
    """Rectangular grid of CellState, indexed by (row, col)."""

    def __init__(self, rows: Iterable[Iterable[CellState]]):
        self._cells: List[List[CellState]] = [list(r) for r in rows]
        if self._cells:
            expected = len(self._cells[0])
            for i, r in enumerate(self._cells):
                if len(r) != expected:
                    raise MalformedBoardRow(i, len(r), expected)

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]]) -> "Board":
        """0 is empty, anything else is an obstacle."""
        return cls(
            [CellState.EMPTY if v == 0 else CellState.OBSTACLE for v in row]
            for row in values
        )

    @property
    def height(self) -> int:
        return len(self._cells)

    @property
    def width(self) -> int:
        return len(self._cells[0]) if self._cells else 0

    @property
    def area(self) -> int:
        return self.height * self.width

    def in_bounds(self, c: Cell) -> bool:
        r, col = c
        return 0 <= r < self.height and 0 <= col < self.width

    def __getitem__(self, c: Cell) -> CellState:
        r, col = c
        return self._cells[r][col]

    def __setitem__(self, c: Cell, state: CellState) -> None:
        r, col = c
        self._cells[r][col] = state

    def rows(self) -> List[List[CellState]]:
        return [list(r) for r in self._cells]

    def cells(self) -> Iterator[Tuple[Cell, CellState]]:
        for r, row in enumerate(self._cells):
            for col, state in enumerate(row):
                yield (r, col), state

    def count(self, state: CellState) -> int:
        return sum(1 for _, s in self.cells() if s is state)

    def copy(self) -> "Board":
        return Board(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.height}x{self.width})"


@dataclass(frozen=True)
class Node:
    row: int
    col: int
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)


@dataclass
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path" | "cancelled"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None
    metrics: Dict[str, Any] = field(default_factory=dict)


@dataclass
class SearchResult:
    status: str                   # "done" | "no_path" | "cancelled"
    board: Optional[Board] = None  # annotated board, only when done
    goal_g: Optional[int] = None
    route: List[Cell] = field(default_factory=list)
    expanded: List[Cell] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def succeeded(self) -> bool:
        return self.status == "done"
