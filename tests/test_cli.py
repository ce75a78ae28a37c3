import pytest

from gridpath.app import cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("GRIDPATH_GLYPHS", "GRIDPATH_PATH_MODE", "GRIDPATH_LOG_LEVEL", "GRIDPATH_STEPS_PER_SEC"):
        monkeypatch.delenv(key, raising=False)


def test_parse_cell():
    assert cli.parse_cell("4,5") == (4, 5)
    assert cli.parse_cell(" 1 , 2 ") == (1, 2)


def test_text_board_prints_solution(boards_dir, capsys):
    code = cli.main([str(boards_dir / "1.board"), "--start", "0,0", "--goal", "4,5", "--glyphs", "ascii"])
    out = capsys.readouterr().out
    assert code == 0
    lines = out.splitlines()
    assert len(lines) == 5
    assert lines[0].startswith("S #")
    assert lines[4].endswith("G")


def test_json_map_supplies_endpoints(boards_dir, capsys):
    code = cli.main([str(boards_dir / "02_small_astar.json"), "--glyphs", "ascii", "--route"])
    assert code == 0
    assert "G" in capsys.readouterr().out


def test_no_path_exit_code(tmp_path, capsys):
    board = tmp_path / "walled.board"
    board.write_text("0,1,0,\n1,1,0,\n0,0,0,\n")
    code = cli.main([str(board), "--start", "0,0", "--goal", "2,2"])
    assert code == 1
    assert "No path found!" in capsys.readouterr().out


def test_missing_endpoints_for_text_board(boards_dir):
    assert cli.main([str(boards_dir / "1.board")]) == 2


def test_out_of_bounds_goal(boards_dir):
    assert cli.main([str(boards_dir / "1.board"), "--start", "0,0", "--goal", "9,9"]) == 2


def test_missing_file(tmp_path):
    assert cli.main([str(tmp_path / "missing.board"), "--start", "0,0", "--goal", "0,0"]) == 2


def test_bad_cell_argument(boards_dir):
    with pytest.raises(SystemExit):
        cli.main([str(boards_dir / "1.board"), "--start", "zero", "--goal", "4,5"])


def test_view_flag_hands_off_to_viewer(boards_dir, monkeypatch):
    import gridpath.app.viewer as viewer

    seen = {}

    def fake_run_viewer(board, start, goal, settings):
        seen.update(start=start, goal=goal, path_mode=settings.path_mode)

    monkeypatch.setattr(viewer, "run_viewer", fake_run_viewer)
    code = cli.main([str(boards_dir / "1.board"), "--start", "0,0", "--goal", "4,5", "--view", "--route"])
    assert code == 0
    assert seen == {"start": (0, 0), "goal": (4, 5), "path_mode": "route"}


def test_trail_flag_overrides_route_env(boards_dir, monkeypatch):
    import gridpath.app.viewer as viewer

    seen = {}
    monkeypatch.setenv("GRIDPATH_PATH_MODE", "route")
    monkeypatch.setattr(viewer, "run_viewer", lambda board, start, goal, settings: seen.update(mode=settings.path_mode))

    args = [str(boards_dir / "1.board"), "--start", "0,0", "--goal", "4,5", "--view"]
    assert cli.main(args) == 0
    assert seen["mode"] == "route"
    assert cli.main(args + ["--trail"]) == 0
    assert seen["mode"] == "trail"
