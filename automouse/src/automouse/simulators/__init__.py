"""Trajectory simulators and the registry used to look them up by name."""

from typing import Any, Callable, Dict, Mapping, Tuple, Type, Union

from ..config import (
    BezierCurveConfig,
    ReplayConfig,
    SimulatorConfig,
    UniformMotionConfig,
    WindMouseConfig,
    load_config,
)
from ..utils import RandomSource
from .base import Trajectory
from .bezier_curve import BezierCurve, bezier_curve, random_control_points
from .replay import Replay, replay
from .uniform_motion import UniformMotion, uniform_motion
from .wind_mouse import WindMouse, wind_mouse

SIMULATORS: Dict[str, Tuple[Callable[..., Trajectory], Type[SimulatorConfig]]] = {
    "uniformMotion": (uniform_motion, UniformMotionConfig),
    "bezierCurve": (bezier_curve, BezierCurveConfig),
    "windMouse": (wind_mouse, WindMouseConfig),
    "replay": (replay, ReplayConfig),
}


def simulate(
    name: str,
    source: Any,
    dest: Any,
    config: Union[SimulatorConfig, Mapping[str, Any], str],
    rng: RandomSource = None,
) -> Trajectory:
    """
    Start the trajectory of simulator ``name``.

    ``config`` is anything ``load_config`` accepts (record, JSON string, path).
    """
    config = load_config(name, config)
    factory, _ = SIMULATORS[name]
    return factory(source, dest, config, rng)


__all__ = [
    "SIMULATORS",
    "simulate",
    "Trajectory",
    "UniformMotion",
    "uniform_motion",
    "BezierCurve",
    "bezier_curve",
    "random_control_points",
    "WindMouse",
    "wind_mouse",
    "Replay",
    "replay",
]
