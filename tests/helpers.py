from collections import deque

from gridpath.core.types import Board, CellState

# 5x6, wall in column 1 rows 0-3
WALL_BOARD = [
    [0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0],
    [0, 1, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0],
]


def bfs_distance(board: Board, start, goal):
    """Reference shortest 4-directional distance, None when unreachable."""
    if board[start] is CellState.OBSTACLE or board[goal] is CellState.OBSTACLE:
        return None
    dist = {start: 0}
    q = deque([start])
    while q:
        r, c = q.popleft()
        if (r, c) == goal:
            return dist[(r, c)]
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            n = (r + dr, c + dc)
            if board.in_bounds(n) and n not in dist and board[n] is not CellState.OBSTACLE:
                dist[n] = dist[(r, c)] + 1
                q.append(n)
    return None


# 5x4, a late-pushed cell on row 2 forces the legacy search into a detour
DETOUR_BOARD = [
    [0, 0, 0, 1],
    [0, 1, 0, 1],
    [0, 0, 0, 1],
    [1, 0, 1, 1],
    [1, 0, 0, 0],
]
