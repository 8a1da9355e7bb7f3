"""
Tests for simulator configuration records and loading.
"""

import json
import math

import pytest

from automouse.config import (
    BezierCurveConfig,
    ReplayConfig,
    UniformMotionConfig,
    WindMouseConfig,
    load_config,
    resolve_range,
)
from automouse.errors import ValidationError
from automouse.vector import EmittedPoint, Point


def test_defaults():
    config = WindMouseConfig()
    assert config.report_rate == 100.0
    assert config.interval == 10.0
    assert (config.gravity, config.wind, config.max_step, config.damping_distance) == (9.0, 3.0, 15.0, 12.0)


def test_from_dict_accepts_camel_case():
    config = WindMouseConfig.from_dict({"reportRate": 60, "maxStep": 10, "dampingDistance": 5})
    assert config.report_rate == 60
    assert config.max_step == 10
    assert config.damping_distance == 5


def test_from_dict_accepts_snake_case():
    config = UniformMotionConfig.from_dict({"duration": 500, "report_rate": 125})
    assert config.interval == 8.0


def test_from_dict_unknown_key():
    with pytest.raises(ValidationError):
        UniformMotionConfig.from_dict({"duration": 500, "speed": 3})


def test_from_dict_missing_required_field():
    with pytest.raises(ValidationError):
        UniformMotionConfig.from_dict({"reportRate": 100})


@pytest.mark.parametrize("kwargs", [
    {"duration": 0},
    {"duration": -10},
    {"duration": 100, "report_rate": 0},
    {"duration": math.inf},
    {"duration": math.nan},
    {"duration": 100, "report_rate": math.inf},
])
def test_invalid_uniform_motion_config(kwargs):
    with pytest.raises(ValidationError):
        UniformMotionConfig(**kwargs)


def test_invalid_wind_mouse_config():
    with pytest.raises(ValidationError):
        WindMouseConfig(gravity=-1)
    with pytest.raises(ValidationError):
        WindMouseConfig(report_rate=math.inf)
    with pytest.raises(ValidationError):
        WindMouseConfig(wind=math.inf)
    with pytest.raises(ValidationError):
        WindMouseConfig(max_iterations=0)


def test_bezier_control_points_are_coerced():
    config = BezierCurveConfig.from_dict({
        "duration": 300,
        "controlPoint1": {"x": 1, "y": 2},
        "controlPoint2": [3, 4],
    })
    assert config.explicit
    assert config.control_point1 == Point(1.0, 2.0)
    assert config.control_point2 == Point(3.0, 4.0)


@pytest.mark.parametrize("kwargs", [
    {"duration": math.inf},
    {"duration": 300, "report_rate": math.inf},
    {"duration": 300, "control_point1": {"x": 1}},
    {"duration": 300, "control_point1": (1, 2), "control_point2": (1, 2, 3)},
])
def test_invalid_bezier_config(kwargs):
    with pytest.raises(ValidationError):
        BezierCurveConfig(**kwargs)


def test_bezier_second_control_point_needs_first():
    with pytest.raises(ValidationError):
        BezierCurveConfig(duration=300, control_point2=(3, 4))


@pytest.mark.parametrize("radius", [-1, [5, 2], [1, 2, 3], "wide"])
def test_bezier_invalid_ranges(radius):
    with pytest.raises(ValidationError):
        BezierCurveConfig(duration=300, control_point_radius=radius)


def test_resolve_range():
    assert resolve_range(None, (0.0, 1.0)) == (0.0, 1.0)
    assert resolve_range(2, (0.0, 1.0)) == (0.0, 2.0)
    assert resolve_range([1, math.pi], (0.0, 1.0)) == (1.0, math.pi)


def test_replay_config_coerces_records():
    config = ReplayConfig(data=[
        {"x": 0, "y": 0, "timestamp": 0},
        (5, 5, 10),
        EmittedPoint(10.0, 0.0, 20.0),
    ])
    assert config.data[1] == EmittedPoint(5.0, 5.0, 10.0)
    assert all(isinstance(p, EmittedPoint) for p in config.data)


@pytest.mark.parametrize("data", [
    [],
    [(0, 0, 0)],
    [(0, 0, 0), (5, 5, 0)],
    [(0, 0, 10), (5, 5, 0)],
    [(0, 0, 0), (5, 5, 10), (0, 0, 20)],
    [{"x": 0, "y": 0}, {"x": 1, "y": 1}],
    [(0, 0), (5, 5)],
    [(0, 0, 0), (5, 5, math.nan)],
    5,
])
def test_invalid_replay_config(data):
    with pytest.raises(ValidationError):
        ReplayConfig(data=data)


def test_load_config_from_dict():
    config = load_config("uniformMotion", {"duration": 250})
    assert isinstance(config, UniformMotionConfig)
    assert config.duration == 250


def test_load_config_from_json_string():
    config = load_config("windMouse", '{"gravity": 5, "reportRate": 50}')
    assert isinstance(config, WindMouseConfig)
    assert config.gravity == 5
    assert config.interval == 20.0


def test_load_config_from_file(tmp_path):
    path = tmp_path / "bezier.json"
    path.write_text(json.dumps({"config": {"duration": 400, "controlPointAngle": 0.5}}))
    for source in (path, str(path)):
        config = load_config("bezierCurve", source)
        assert isinstance(config, BezierCurveConfig)
        assert config.duration == 400
        assert config.control_point_angle == 0.5


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config("windMouse", str(tmp_path / "missing.json"))


def test_load_config_passes_instances_through():
    config = WindMouseConfig(gravity=4)
    assert load_config("windMouse", config) is config
    with pytest.raises(ValidationError):
        load_config("uniformMotion", config)


@pytest.mark.parametrize("name, source", [
    ("teleport", {}),
    ("windMouse", "not json"),
    ("windMouse", "[1, 2]"),
])
def test_load_config_errors(name, source):
    with pytest.raises(ValidationError):
        load_config(name, source)
