# gridpath/core/heuristic.py
#!/usr/bin/env python3
from gridpath.core.types import Cell


def manhattan(a: Cell, b: Cell) -> int:
    """Admissible heuristic for a 4-connected unit-cost grid."""
    (r1, c1) = a
    (r2, c2) = b
    return abs(r2 - r1) + abs(c2 - c1)
