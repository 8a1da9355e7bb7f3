"""
automouse - 2D pointer motion analysis and synthesis.

This package reconstructs continuous kinematics (position, velocity,
acceleration, jerk) from recorded pointer samples, and synthesizes
human-like pointer trajectories between two points for automation drivers.
"""

__version__ = "0.1.0"

from .config import (
    BezierCurveConfig,
    ReplayConfig,
    SimulatorConfig,
    UniformMotionConfig,
    WindMouseConfig,
    load_config,
)
from .errors import AutomouseError, DomainError, NonConvergence, ValidationError
from .kinetics import Kinetics, KineticsParameters, normalize_recording
from .simulators import SIMULATORS, bezier_curve, replay, simulate, uniform_motion, wind_mouse
from .spline import KnotStrategy, Spline
from .vector import EmittedPoint, MutableVector, Point, Vector

__all__ = [
    "Vector",
    "MutableVector",
    "Point",
    "EmittedPoint",
    "Spline",
    "KnotStrategy",
    "Kinetics",
    "KineticsParameters",
    "normalize_recording",
    "SimulatorConfig",
    "UniformMotionConfig",
    "BezierCurveConfig",
    "WindMouseConfig",
    "ReplayConfig",
    "load_config",
    "SIMULATORS",
    "simulate",
    "uniform_motion",
    "bezier_curve",
    "wind_mouse",
    "replay",
    "AutomouseError",
    "ValidationError",
    "DomainError",
    "NonConvergence",
]
