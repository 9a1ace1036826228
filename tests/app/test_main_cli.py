# tests/app/test_main_cli.py
import json

import pytest

import main


@pytest.fixture
def files(tmp_path, campus, campus_buildings):
    paths = tmp_path / "paths.json"
    buildings = tmp_path / "buildings.json"
    paths.write_text(json.dumps(campus))
    buildings.write_text(json.dumps(campus_buildings))
    return ["--features", str(paths), "--buildings", str(buildings)]


def test_prints_stats_and_directions(capsys, files):
    assert main.main(["MC|1", "DC|2", *files]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Time: ") and ", Distance: " in out[0]
    assert out[1] == "Up 1 floors, down 0 floors"
    assert out[2].startswith("1. Take the tunnel to DC floor 1 (")
    assert out[3] == "2. Go up 1 floor to DC floor 2"


def test_no_route_exit_code(capsys, tmp_path, files, campus_buildings):
    campus_buildings["features"][0]["properties"]["building"]["floors"].append("4")
    buildings = tmp_path / "buildings-4.json"
    buildings.write_text(json.dumps(campus_buildings))
    argv = ["MC|4", "E7|1", "--features", files[1], "--buildings", str(buildings)]
    assert main.main(argv) == 1
    assert "No route could be found between MC|4 and E7|1" in capsys.readouterr().err


def test_prefer_choices(files):
    with pytest.raises(SystemExit):
        main.main(["MC|1", "DC|2", *files, "--prefer", "COMPARE_BY_COLOUR"])


def test_defaults_prefer_staying_inside(monkeypatch, files):
    seen = []

    def run(*args):
        seen.append(args)
        return 0

    monkeypatch.setattr(main, "run", run)
    assert main.main(["MC|1", "DC|2", *files]) == 0
    *_, prefer, level = seen[0]
    assert prefer == "COMPARE_BY_TIME_OUTSIDE_THEN_TIME"
    assert level == "WARNING"


def test_log_level_choices(capsys, files):
    with pytest.raises(SystemExit) as exc:
        main.main(["MC|1", "DC|2", *files, "--log-level", "warning"])
    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err
