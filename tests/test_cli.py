import io
import re

import pytest

from gridpath.cli import main


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "map.CSV"
    path.write_text("1,1,1\n1,x,1\n1,1,1\n")
    return path


def run(capsys, *args):
    status = main(list(args))
    out, err = capsys.readouterr()
    return status, out, err


def test_finds_path_and_lists_coordinates(map_file, capsys):
    status, out, _ = run(
        capsys, str(map_file), "--no-pause", "--start", "0/0", "--goal", "2/2"
    )
    assert status == 0
    assert "WIDTH: 3\t HEIGHT: 3" in out
    assert "Loaded map with 3 lines." in out
    assert "Using algorithm aStar" in out
    steps = int(re.search(r"Path found with (\d+) steps\.", out).group(1))
    coords = re.findall(r"^(\d+): (\d+)/(\d+)$", out, flags=re.MULTILINE)
    assert len(coords) == steps
    assert coords[0] == ("0", "0", "0")
    assert coords[-1] == (str(steps - 1), "2", "2")


def test_depth_first_algorithm(map_file, capsys):
    _, out, _ = run(
        capsys,
        str(map_file),
        "--no-pause",
        "--algorithm",
        "depth-first",
        "--start",
        "0,0",
        "--goal",
        "2,0",
    )
    assert "Using algorithm depthFirst" in out
    assert "Path found with" in out


def test_probe_position_reported(map_file, capsys):
    _, out, _ = run(
        capsys, str(map_file), "--no-pause", "--probe", "2/1", "--goal", "2/2",
        "--start", "0/0",
    )
    assert "Current position of map iterator: 2/1" in out


def test_goal_on_obstacle_reports_no_path(map_file, capsys):
    status, out, _ = run(
        capsys, str(map_file), "--no-pause", "--start", "0/0", "--goal", "1/1"
    )
    assert status == 0
    assert "No path found." in out
    assert "Path found with" not in out


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.CSV"
    status, out, err = run(capsys, str(missing), "--no-pause")
    assert status == 0
    assert f"Error: Could not open file {missing}" in err
    assert "WIDTH: 0\t HEIGHT: 0" in out
    assert "No path found." in out


def test_pauses_read_stdin(map_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n\n\n"))
    _, out, _ = run(capsys, str(map_file), "--start", "0/0", "--goal", "2/0")
    assert out.count("Press any key to continue...") == 3


def test_bad_coordinate_rejected(map_file, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(map_file), "--start", "nowhere"])
    assert info.value.code == 2