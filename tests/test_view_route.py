import pytest

from route_picker.candidates import CandidateRoute
from route_picker.geo import Point
from route_picker.view_route import save_candidates_map

START = Point(40.7128, -74.006)


def test_save_candidates_map(tmp_path):
    routes = [
        CandidateRoute(0, "red", (START, Point(40.72, -74.006), START)),
        CandidateRoute(45, "blue", (START, Point(40.72, -74.0), START)),
    ]
    out = save_candidates_map(routes, START, str(tmp_path / "map.html"))
    html = (tmp_path / "map.html").read_text(encoding="utf-8")
    assert out == str((tmp_path / "map.html").resolve())
    assert "Bearing: 0°, Color: red" in html
    assert "Bearing: 45°, Color: blue" in html
    assert '"color": "blue"' in html
    assert "L.polyline" in html


def test_save_candidates_map_nothing_to_draw(tmp_path):
    with pytest.raises(ValueError):
        save_candidates_map([CandidateRoute(0, "red", ())], START, str(tmp_path / "map.html"))
