# gridpath/core/errors.py
#!/usr/bin/env python3
"""Errors raised before a search can start. A missing path is not one of them."""


class GridPathError(ValueError):
    """Base class for invalid boards and coordinates."""


class MalformedBoardRow(GridPathError):
    def __init__(self, row: int, length: int, expected: int):
        super().__init__(f"row {row} has {length} cells, expected {expected}")
        self.row = row
        self.length = length
        self.expected = expected


class OutOfBoundsCoordinate(GridPathError):
    def __init__(self, label: str, coord, height: int, width: int):
        super().__init__(f"{label} {tuple(coord)} is outside the {height}x{width} board")
        self.label = label
        self.coord = tuple(coord)


class BlockedCoordinate(GridPathError):
    def __init__(self, label: str, coord):
        super().__init__(f"{label} {tuple(coord)} is an obstacle")
        self.label = label
        self.coord = tuple(coord)


class BoardFormatError(GridPathError):
    """Map file could not be turned into a board."""
