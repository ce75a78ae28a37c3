import json

import pytest

from gridpath.core.board_io import MapSpec, load_any, load_map, parse_board, parse_line, read_board_file
from gridpath.core.errors import BoardFormatError, MalformedBoardRow, OutOfBoundsCoordinate
from gridpath.core.types import Board, CellState

E, O = CellState.EMPTY, CellState.OBSTACLE


@pytest.mark.parametrize("line,expected", [
    ("0,1,0,", [E, O, E]),
    ("0,1,0", [E, O, E]),
    ("0, 2 ,0,", [E, O, E]),
    ("0,1,x,0,", [E, O]),
    ("0,,1,", [E]),
    ("", []),
])
def test_parse_line(line, expected):
    assert parse_line(line) == expected


def test_parse_board_skips_blank_lines():
    board = parse_board("0,1,\n\n1,0,\n")
    assert (board.height, board.width) == (2, 2)
    assert board[(0, 1)] is O
    assert board[(1, 0)] is O


def test_ragged_rows_rejected():
    with pytest.raises(MalformedBoardRow) as exc:
        parse_board("0,0,0,\n0,0,\n")
    assert exc.value.row == 1
    assert exc.value.expected == 3


def test_read_board_file(boards_dir):
    board = read_board_file(boards_dir / "1.board")
    assert (board.height, board.width) == (5, 6)
    assert board.count(O) == 4


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_board_file(tmp_path / "nope.board")


def test_load_map(boards_dir):
    loaded = load_map(boards_dir / "02_small_astar.json")
    assert isinstance(loaded, MapSpec)
    assert loaded.start == (0, 0)
    assert loaded.goal == (5, 7)
    assert (loaded.board.height, loaded.board.width) == (6, 8)


def _write_map(tmp_path, **data):
    path = tmp_path / "m.json"
    path.write_text(json.dumps(data))
    return path


def test_load_map_missing_key(tmp_path):
    path = _write_map(tmp_path, width=2, height=1, cells=[[0, 0]], start=[0, 0])
    with pytest.raises(BoardFormatError):
        load_map(path)


def test_load_map_size_mismatch(tmp_path):
    path = _write_map(tmp_path, width=3, height=1, cells=[[0, 0]], start=[0, 0], goal=[0, 1])
    with pytest.raises(BoardFormatError):
        load_map(path)


def test_load_map_goal_out_of_bounds(tmp_path):
    path = _write_map(tmp_path, width=2, height=1, cells=[[0, 0]], start=[0, 0], goal=[1, 1])
    with pytest.raises(OutOfBoundsCoordinate):
        load_map(path)


def test_load_any_dispatches_on_suffix(boards_dir):
    assert isinstance(load_any(boards_dir / "1.board"), Board)
    assert isinstance(load_any(boards_dir / "02_small_astar.json"), MapSpec)
