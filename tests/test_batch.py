"""Tests for loading and evaluating batch query files."""

import json
import logging
import math
import pytest

from pathcalc import Arc, Curvature, Query, Straight, evaluate, load_csv, load_json
from pathcalc.geometry import compute_arc_point, compute_arc_point_from_curvature


CSV_TEXT = """\
# collinear and boomerang checks
id,x,y,theta_deg,distance,mode,radius,curvature
a,0,0,0,10,straight,,
b,0,0,0,1.5707963267948966,arc,1,
c,1,1,90,2,curvature,,-0.5
"""


def test_load_csv(tmp_path):
    path = tmp_path / "queries.csv"
    path.write_text(CSV_TEXT)
    queries = load_csv(str(path))
    assert [q.id for q in queries] == ["a", "b", "c"]
    assert [q.mode for q in queries] == ["straight", "arc", "curvature"]
    assert queries[0].radius is None
    assert queries[2].curvature == -0.5
    assert queries[2].pose.theta == pytest.approx(math.pi / 2)


def test_evaluate_csv(tmp_path):
    path = tmp_path / "queries.csv"
    path.write_text(CSV_TEXT)
    rows = evaluate(load_csv(str(path)))
    assert rows[0] == {"id": "a", "mode": "straight", "x": 10.0, "y": 0.0}
    assert rows[1]["x"] == pytest.approx(1.0)
    assert rows[1]["y"] == pytest.approx(1.0)
    expected = compute_arc_point_from_curvature(1.0, 1.0, math.pi / 2, 2.0, -0.5)
    assert rows[2]["x"] == pytest.approx(expected.x)
    assert rows[2]["y"] == pytest.approx(expected.y)


def test_load_json_defaults(tmp_path):
    path = tmp_path / "queries.json"
    path.write_text(json.dumps({"queries": [
        {"x": 0, "y": 0, "theta_deg": 0, "distance": 3},
        {"x": 2, "y": 0, "theta_deg": 45, "distance": 1, "mode": "arc", "radius": 2},
    ]}))
    queries = load_json(str(path))
    assert [q.id for q in queries] == ["q000", "q001"]
    assert queries[0].mode == "straight"
    assert queries[1].model() == Arc(2.0)


def test_models():
    assert Query(0, 0, 0, 1).model() == Straight()
    assert Query(0, 0, 0, 1, mode="arc").model() == Arc(None)
    assert Query(0, 0, 0, 1, mode="curvature", curvature=0.2).model() == Curvature(0.2)


def test_non_positive_radius_warns_and_uses_default(caplog):
    q = Query(0, 0, 0, 1.0, mode="arc", radius=-3.0, id="neg")
    with caplog.at_level(logging.WARNING, logger="pathcalc.batch"):
        model = q.model()
    assert model == Arc(1.0)
    assert "radius" in caplog.text
    p = evaluate([q])[0]
    assert (p["x"], p["y"]) == tuple(compute_arc_point(0.0, 0.0, 0.0, 1.0, 1.0))


def test_unknown_mode_rejected(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("x,y,theta_deg,distance,mode\n0,0,0,1,spiral\n")
    with pytest.raises(ValueError, match="spiral"):
        load_csv(str(path))


def test_missing_field_rejected(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("x,y,distance\n0,0,1\n")
    with pytest.raises(ValueError, match="theta_deg"):
        load_csv(str(path))


def test_non_numeric_field_rejected(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"queries": [{"x": "left", "y": 0, "theta_deg": 0, "distance": 1}]}))
    with pytest.raises(ValueError, match="'x'"):
        load_json(str(path))


def test_curvature_mode_needs_curvature():
    with pytest.raises(ValueError):
        Query(0, 0, 0, 1, mode="curvature")


@pytest.mark.parametrize("text", ["not json", "[]", '{"queries": [1]}'])
def test_bad_json_rejected(tmp_path, text):
    path = tmp_path / "bad.json"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_json(str(path))


def test_boolean_field_rejected(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"queries": [{"x": True, "y": 0, "theta_deg": 0, "distance": 1}]}))
    with pytest.raises(ValueError, match="'x'"):
        load_json(str(path))


def test_zero_id_is_kept(tmp_path):
    path = tmp_path / "ids.json"
    path.write_text(json.dumps({"queries": [
        {"id": 0, "x": 0, "y": 0, "theta_deg": 0, "distance": 1},
        {"id": "", "x": 0, "y": 0, "theta_deg": 0, "distance": 1},
    ]}))
    queries = load_json(str(path))
    assert [q.id for q in queries] == [0, "q001"]
