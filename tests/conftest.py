# tests/conftest.py
from pathlib import Path

import pytest

from gridpath.core.types import Board
from tests.helpers import WALL_BOARD

BOARDS_DIR = Path(__file__).resolve().parents[1] / "boards"


@pytest.fixture
def wall_board() -> Board:
    return Board.from_values(WALL_BOARD)


@pytest.fixture
def boards_dir() -> Path:
    return BOARDS_DIR
