# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* over a Board — one expansion per step() for animation, or search() to run
it to completion.

Implements the Algorithm API expected by the viewer:
- init(board, start, goal) - reset() - step() -> StepResult

Heuristic:
- Manhattan, 4-connected, unit cost per move.

Visitation:
- A cell is marked VISITED the moment it is pushed, and only EMPTY cells can be
  pushed, so every coordinate enters the frontier at most once. Every popped
  node is painted PATH, which is the trail the console renderer shows.

Tie-breaking in the frontier: lower f, then most recently pushed.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple
import logging

from gridpath.core.errors import BlockedCoordinate, OutOfBoundsCoordinate
from gridpath.core.frontier import Frontier
from gridpath.core.heuristic import manhattan
from gridpath.core.types import Board, Cell, CellState, Node, SearchResult, StepResult

logger = logging.getLogger(__name__)

# up, left, down, right as (drow, dcol)
MOVES: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))

PATH_MODES = ("trail", "route")


def is_expandable(board: Board, c: Cell) -> bool:
    """On the board and still EMPTY."""
    return board.in_bounds(c) and board[c] is CellState.EMPTY


def add_to_open(node: Node, frontier: Frontier, board: Board) -> None:
    frontier.push(node)
    board[node.cell] = CellState.VISITED


def expand_neighbors(node: Node, goal: Cell, board: Board, frontier: Frontier,
                     moves: Tuple[Tuple[int, int], ...] = MOVES) -> List[Cell]:
    """Push every expandable neighbor of ``node``; return the cells opened."""
    opened: List[Cell] = []
    for dr, dc in moves:
        cand = (node.row + dr, node.col + dc)
        if is_expandable(board, cand):
            add_to_open(Node(cand[0], cand[1], node.g + 1, manhattan(cand, goal)), frontier, board)
            opened.append(cand)
    return opened


def annotate(board: Board, start: Cell, goal: Cell, route: List[Cell], path_mode: str = "trail") -> Board:
    """Mark the endpoints; in route mode, only cells on ``route`` stay PATH."""
    if path_mode == "route":
        on_route = set(route)
        for c, state in list(board.cells()):
            if state is CellState.PATH and c not in on_route:
                board[c] = CellState.VISITED
    board[start] = CellState.START
    board[goal] = CellState.FINISH
    return board


def validate_endpoints(board: Board, start: Cell, goal: Cell) -> None:
    for label, c in (("start", start), ("goal", goal)):
        if not board.in_bounds(c):
            raise OutOfBoundsCoordinate(label, c, board.height, board.width)
    if board[start] is CellState.OBSTACLE:
        raise BlockedCoordinate("start", start)


@dataclass
class AStarAlgo:
    name: str = "A*"
    path_mode: str = "trail"
    moves: Tuple[Tuple[int, int], ...] = MOVES

    # Internal state
    source: Optional[Board] = None
    board: Optional[Board] = None
    start: Optional[Cell] = None
    goal: Optional[Cell] = None
    frontier: Frontier = field(default_factory=Frontier)
    parent: Dict[Cell, Cell] = field(default_factory=dict)
    expanded: List[Cell] = field(default_factory=list)
    route: List[Cell] = field(default_factory=list)
    goal_g: Optional[int] = None
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    cancelled: bool = False

    # -------------------- lifecycle --------------------

    def init(self, board: Board, start: Cell, goal: Cell) -> None:
        """Validate endpoints and seed the search on a copy of ``board``."""
        if self.path_mode not in PATH_MODES:
            raise ValueError(f"unknown path mode {self.path_mode!r}")
        start, goal = tuple(start), tuple(goal)
        validate_endpoints(board, start, goal)
        self.source = board
        self.start = start
        self.goal = goal
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed with the start node."""
        if self.source is None:
            return
        self.board = self.source.copy()
        self.frontier = Frontier()
        self.parent.clear()
        self.expanded.clear()
        self.route = []
        self.goal_g = None
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.cancelled = False

        s = self.start
        add_to_open(Node(s[0], s[1], 0, manhattan(s, self.goal)), self.frontier, self.board)
        logger.debug("A* seeded at %s towards %s on %r", s, self.goal, self.board)

    def cancel(self) -> None:
        if not (self.done or self.no_path):
            self.cancelled = True
            logger.debug("A* cancelled after %d expansions", self.popped_count)

    # -------------------- helpers --------------------

    def _reconstruct_route(self, end: Cell) -> List[Cell]:
        route = [end]
        cur = end
        while cur != self.start:
            cur = self.parent[cur]
            route.append(cur)
        route.reverse()
        return route

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Run ONE A* expansion step:
          - Pop the lowest-f node and paint it PATH.
          - If goal, annotate and finish.
          - Else open its neighbors.
        """
        if self.board is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            return StepResult(status="done", path=list(self.route),
                              metrics=self.metrics())

        if self.no_path:
            return StepResult(status="no_path", metrics=self.metrics())

        if self.cancelled:
            return StepResult(status="cancelled", metrics=self.metrics())

        if not self.frontier:
            self.no_path = True
            logger.debug("A* exhausted the frontier after %d expansions", self.popped_count)
            return StepResult(status="no_path", metrics=self.metrics())

        node = self.frontier.pop()
        u = node.cell
        self.popped_count += 1
        self.board[u] = CellState.PATH
        self.expanded.append(u)

        if u == self.goal:
            self.done = True
            self.goal_g = node.g
            self.route = self._reconstruct_route(u)
            annotate(self.board, self.start, self.goal, self.route, self.path_mode)
            logger.debug("A* reached %s with g=%d after %d expansions", u, node.g, self.popped_count)
            return StepResult(status="done", closed=[u], current=u, path=list(self.route),
                              metrics=self.metrics())

        opened = expand_neighbors(node, self.goal, self.board, self.frontier, self.moves)
        for v in opened:
            self.parent[v] = u

        return StepResult(status="running", opened=opened, closed=[u], current=u,
                          metrics=self.metrics())

    def result(self) -> SearchResult:
        if self.done:
            status = "done"
        elif self.no_path:
            status = "no_path"
        elif self.cancelled:
            status = "cancelled"
        else:
            raise RuntimeError("search has not finished")
        return SearchResult(
            status=status,
            board=self.board if self.done else None,
            goal_g=self.goal_g,
            route=list(self.route),
            expanded=list(self.expanded),
            metrics=self.metrics(),
        )

    # -------------------- metrics --------------------

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.frontier),
            "visited_count": self.frontier.pushes,
            "path_len": len(self.route),
            "goal_g": self.goal_g,
        }


def search(board: Board, start: Cell, goal: Cell, *,
           path_mode: str = "trail",
           should_cancel: Optional[Callable[[], bool]] = None,
           max_steps: Optional[int] = None) -> SearchResult:
    """
    Run A* from ``start`` to ``goal``. The caller's board is left untouched;
    the annotated copy is returned on ``SearchResult.board`` when a path exists.

    Raises OutOfBoundsCoordinate / BlockedCoordinate before searching.
    A missing path is reported as status "no_path".
    """
    algo = AStarAlgo(path_mode=path_mode)
    algo.init(board, start, goal)
    steps = 0
    while True:
        if (should_cancel is not None and should_cancel()) or \
           (max_steps is not None and steps >= max_steps):
            algo.cancel()
            break
        res = algo.step()
        steps += 1
        if res.status in ("done", "no_path"):
            break
    return algo.result()
