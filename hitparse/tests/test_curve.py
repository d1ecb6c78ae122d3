import pytest

from hitparse import DefaultFactories, parse_hit_object
from hitparse.curve import pack_curve_path, parse_curve_path
from hitparse.errors import FormatError
from hitparse.position import Position
from hitparse.types import CurveType


origin = Position(0, 0)


def test_parse_bezier_path():
    curve_type, points = parse_curve_path("B|100:100|200:200", origin)

    assert curve_type is CurveType.Bezier
    assert points == [Position(0, 0), Position(100, 100), Position(200, 200)]


def test_default_curve_type_is_catmull():
    curve_type, points = parse_curve_path("1:1|2:2", Position(5, 5))

    assert curve_type is CurveType.Catmull
    assert points == [Position(5, 5), Position(1, 1), Position(2, 2)]


@pytest.mark.parametrize(
    "data, expected",
    [
        ("C|1:1", CurveType.Catmull),
        ("B|1:1", CurveType.Bezier),
        ("L|1:1", CurveType.Linear),
        ("P|1:1|2:0", CurveType.PerfectCurve),
        ("B|X|1:1", CurveType.Bezier),
        ("b|1:1", CurveType.Catmull),
        ("B|1:1|L|2:2", CurveType.Linear),
    ],
)
def test_curve_type_tokens(data, expected):
    curve_type, _ = parse_curve_path(data, origin)
    assert curve_type is expected


def test_curve_type_tokens_are_not_points():
    _, points = parse_curve_path("B|1:1|L|2:2", origin)
    assert points == [origin, Position(1, 1), Position(2, 2)]


def test_coordinates_are_truncated():
    _, points = parse_curve_path("L|1.9:-2.7|3.5e1:0.0", origin)
    assert points[1:] == [Position(1, -2), Position(35, 0)]


def test_extra_coordinates_are_ignored():
    _, points = parse_curve_path("L|1:2:3", origin)
    assert points[1:] == [Position(1, 2)]


@pytest.mark.parametrize(
    "data",
    ["B|1:1|", "B|12", "B|1:", "B|x:1", "B|inf:0", "B|nan:0"],
)
def test_bad_points(data):
    with pytest.raises(FormatError):
        parse_curve_path(data, origin)


def test_pack_curve_path():
    points = [origin, Position(100, 100), Position(200, 200)]
    assert pack_curve_path(CurveType.Bezier, points) == "B|100:100|200:200"


def test_slider_curve_survives_repacking():
    factories = DefaultFactories()
    slider = parse_hit_object("32,48,0,2,0,P|64:96|-12:400,7,120", factories)

    path = pack_curve_path(slider.curve_type, slider.control_points)
    repacked = parse_hit_object(
        f"32,48,0,2,0,{path},{slider.repeat_count},120",
        factories,
    )

    assert repacked.curve_type is slider.curve_type
    assert repacked.repeat_count == slider.repeat_count
    assert repacked.control_points == slider.control_points
