import csv
import json

import pytest

from main import run


@pytest.fixture
def hexagon_file(tmp_path, hexagon):
    path = tmp_path / "hex.json"
    path.write_text(json.dumps(hexagon.to_dict()), encoding="utf-8")
    return path


def test_prints_faces(hexagon_file, capsys):
    assert run([str(hexagon_file)]) == 0
    out = capsys.readouterr().out
    assert "Number of faces = 6" in out
    assert "Polygon #0: [0, 1, 6]" in out


def test_point_query_and_layers(hexagon_file, capsys):
    assert run([str(hexagon_file), "--point", "0", "0.577"]) == 0
    out = capsys.readouterr().out
    assert "Point is inside Face 1" in out
    assert "Layer 0: [1]" in out
    assert out.count("has neighbors:") == 6


def test_point_outside(hexagon_file, capsys):
    assert run([str(hexagon_file), "--point", "10", "10", "--method", "winding"]) == 0
    assert "Point is outside" in capsys.readouterr().out


def test_outputs(hexagon_file, tmp_path, capsys):
    out_json = tmp_path / "out" / "faces.json"
    out_png = tmp_path / "out" / "faces.png"
    code = run([str(hexagon_file), "--layers", "0", "--out-json", str(out_json),
                "--out-png", str(out_png), "--timings"])
    assert code == 0
    assert json.loads(out_json.read_text(encoding="utf-8"))["faces"][0]["neighbors"]
    assert out_png.read_bytes().startswith(b"\x89PNG")
    assert "TIME REPORT" in capsys.readouterr().out


def test_timings_csv(hexagon_file, tmp_path, capsys):
    path = tmp_path / "prof" / "timings.csv"
    assert run([str(hexagon_file), "--timings-csv", str(path)]) == 0
    out = capsys.readouterr().out
    assert "TIME REPORT" not in out
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["name", "dt_sec"]
    names = {r[0] for r in rows[1:]}
    assert {"load", "build_matrix", "trace", "filter_external"} <= names


def test_bad_input_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"vertices": [[0, 0]], "edges": [[0, 3]]}), encoding="utf-8")
    assert run([str(path)]) == 2
    assert "bad input" in capsys.readouterr().err


def test_unknown_layer_start(hexagon_file, capsys):
    assert run([str(hexagon_file), "--layers", "42"]) == 2
