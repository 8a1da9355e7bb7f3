"""Typed configuration records for the trajectory simulators."""

import json
import math
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type, Union

from .errors import ValidationError
from .utils import is_ascending
from .vector import EmittedPoint, Point, as_point

DEFAULT_REPORT_RATE = 100.0

Range = Union[float, Sequence[float]]


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def resolve_range(value: Optional[Range], default: Tuple[float, float]) -> Tuple[float, float]:
    """``None`` -> ``default``, a number ``m`` -> ``(0, m)``, a pair -> itself."""
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return 0.0, float(value)
    lo, hi = value
    return float(lo), float(hi)


def _positive(value: float) -> bool:
    return value > 0 and math.isfinite(value)


def _check_range(name: str, value: Optional[Range]) -> None:
    if value is None:
        return
    try:
        lo, hi = resolve_range(value, (0.0, 0.0))
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a number or a [min, max] pair, got {value!r}") from None
    if lo < 0 or hi < lo:
        raise ValidationError(f"{name} must satisfy 0 <= min <= max, got {value!r}")


@dataclass(kw_only=True)
class SimulatorConfig:
    """Options shared by every simulator."""
    report_rate: float = DEFAULT_REPORT_RATE  # Hz

    def __post_init__(self):
        if not _positive(self.report_rate):
            raise ValidationError(f"report_rate must be positive and finite, got {self.report_rate}")

    @property
    def interval(self) -> float:
        """Milliseconds between two reports."""
        return 1000.0 / self.report_rate

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimulatorConfig":
        """
        Build from a JSON-style record.

        Keys may be camelCase (``reportRate``) or snake_case (``report_rate``).
        Unknown keys and missing required fields raise ``ValidationError``.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name not in known:
                raise ValidationError(f"unknown {cls.__name__} option: {key!r}")
            kwargs[name] = value
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ValidationError(f"invalid {cls.__name__}: {e}") from None


@dataclass(kw_only=True)
class UniformMotionConfig(SimulatorConfig):
    """Straight line at constant speed."""
    duration: float  # ms

    def __post_init__(self):
        super().__post_init__()
        if not _positive(self.duration):
            raise ValidationError(f"duration must be positive and finite, got {self.duration}")


@dataclass(kw_only=True)
class BezierCurveConfig(SimulatorConfig):
    """
    Bezier curve from source to destination.

    - control_point1 (+ optional control_point2): explicit control points,
      quadratic with one, cubic with two
    - otherwise two control points are drawn at random using
      control_point_radius (default [0, |dest - source| / 3]) and
      control_point_angle (default [0, pi/4]); a number ``m`` means [0, m]
    """
    duration: float  # ms
    control_point1: Optional[Point] = None
    control_point2: Optional[Point] = None
    control_point_radius: Optional[Range] = None
    control_point_angle: Optional[Range] = None

    def __post_init__(self):
        super().__post_init__()
        if not _positive(self.duration):
            raise ValidationError(f"duration must be positive and finite, got {self.duration}")
        if self.control_point2 is not None and self.control_point1 is None:
            raise ValidationError("control_point2 requires control_point1")
        try:
            if self.control_point1 is not None:
                self.control_point1 = as_point(self.control_point1)
            if self.control_point2 is not None:
                self.control_point2 = as_point(self.control_point2)
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"control points must be {{x, y}} records or [x, y] pairs: {e!r}") from None
        _check_range("control_point_radius", self.control_point_radius)
        _check_range("control_point_angle", self.control_point_angle)

    @property
    def explicit(self) -> bool:
        return self.control_point1 is not None


@dataclass(kw_only=True)
class WindMouseConfig(SimulatorConfig):
    """
    WindMouse integrator settings.

    https://ben.land/post/2021/04/25/windmouse-human-mouse-movement/
    """
    gravity: float = 9.0  # pull towards the destination
    wind: float = 3.0  # magnitude of the random wind fluctuations
    max_step: float = 15.0  # velocity clip threshold
    damping_distance: float = 12.0  # below this distance wind is damped
    max_iterations: int = 10000

    def __post_init__(self):
        super().__post_init__()
        for name in ("gravity", "wind", "max_step", "damping_distance"):
            value = getattr(self, name)
            if not (value >= 0 and math.isfinite(value)):
                raise ValidationError(f"{name} must be non-negative and finite, got {value}")
        if self.max_iterations < 1:
            raise ValidationError(f"max_iterations must be at least 1, got {self.max_iterations}")


@dataclass(kw_only=True)
class ReplayConfig(SimulatorConfig):
    """A recorded trajectory to re-project onto a new source/destination."""
    data: List[EmittedPoint]

    def __post_init__(self):
        super().__post_init__()
        try:
            self.data = [_as_emitted(p) for p in self.data]
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"replay records must be {{x, y, timestamp}} or [x, y, timestamp]: {e!r}") from None
        if not all(math.isfinite(v) for p in self.data for v in p):
            raise ValidationError("replay records must be finite")
        if len(self.data) < 2:
            raise ValidationError(f"replay needs at least 2 recorded points, got {len(self.data)}")
        if not is_ascending([p.timestamp for p in self.data]):
            raise ValidationError("replay timestamps must increase strictly")
        first, last = self.data[0], self.data[-1]
        if (first.x, first.y) == (last.x, last.y):
            raise ValidationError("replay recording must not end where it starts")


def _as_emitted(obj: Any) -> EmittedPoint:
    if isinstance(obj, Mapping):
        return EmittedPoint(float(obj["x"]), float(obj["y"]), float(obj["timestamp"]))
    if hasattr(obj, "timestamp"):
        return EmittedPoint(float(obj.x), float(obj.y), float(obj.timestamp))
    x, y, timestamp = obj
    return EmittedPoint(float(x), float(y), float(timestamp))


CONFIG_CLASSES: Dict[str, Type[SimulatorConfig]] = {
    "uniformMotion": UniformMotionConfig,
    "bezierCurve": BezierCurveConfig,
    "windMouse": WindMouseConfig,
    "replay": ReplayConfig,
}


def load_config(name: str, source: Union[Mapping[str, Any], str, Path, SimulatorConfig]) -> SimulatorConfig:
    """
    Load the config record of simulator ``name``.

    Args:
        name: Simulator name (a key of ``CONFIG_CLASSES``)
        source: Can be
            - a config instance (returned as is)
            - a dictionary with the options
            - a path to a JSON file
            - a JSON string
            A nested ``{"config": {...}}`` record is unwrapped.
    """
    if name not in CONFIG_CLASSES:
        raise ValidationError(f"unknown simulator: {name!r}")
    config_cls = CONFIG_CLASSES[name]
    if isinstance(source, SimulatorConfig):
        if not isinstance(source, config_cls):
            raise ValidationError(f"{name} expects {config_cls.__name__}, got {type(source).__name__}")
        return source

    if isinstance(source, (str, Path)):
        path = Path(source)
        if isinstance(source, Path) or source.strip().endswith(".json"):
            if not path.exists():
                raise FileNotFoundError(f"Config file not found: {source}")
            with open(path, "r") as f:
                data = json.load(f)
        else:
            try:
                data = json.loads(source)
            except json.JSONDecodeError as e:
                raise ValidationError(f"config is neither a JSON file nor a JSON string: {e}") from None
    else:
        data = source

    if not isinstance(data, Mapping):
        raise ValidationError(f"config must be a JSON object, got {type(data).__name__}")
    if "config" in data and isinstance(data["config"], Mapping):
        data = data["config"]
    return config_cls.from_dict(data)
