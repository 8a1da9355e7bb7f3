"""
Continuous kinematics of a recorded pointer trace.

A recording is a list of ``(timestamp, x, y)`` samples (timestamps in ms).
``Kinetics`` fits one spline per axis over time and answers position,
velocity, acceleration and jerk queries anywhere inside the recorded span.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Union

import numpy as np

from .errors import DomainError, ValidationError
from .spline import KnotStrategy, Spline
from .vector import MutableVector, Vector

logger = logging.getLogger(__name__)

Sample = Tuple[float, float, float]
Recording = Union[Sequence[Sequence[float]], np.ndarray]


@dataclass(frozen=True)
class KineticsParameters:
    """Kinematic state at one instant; derivatives are per ms."""
    position: Vector
    velocity: Vector
    acceleration: Vector
    jerk: Vector

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            "position": self.position.to_dict(),
            "velocity": self.velocity.to_dict(),
            "acceleration": self.acceleration.to_dict(),
            "jerk": self.jerk.to_dict(),
        }


def _as_samples(samples: Recording) -> np.ndarray:
    arr = np.array(samples, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValidationError(f"samples must be (timestamp, x, y) triples, got shape {arr.shape}")
    if arr.shape[0] < 2:
        raise ValidationError(f"need at least 2 samples, got {arr.shape[0]}")
    return arr


class Kinetics:
    """
    Per-axis splines ``x(t)`` and ``y(t)`` built from one recording.

    Example:
        >>> kinetics = Kinetics([(0, 0, 0), (10, 4, 1), (20, 9, 3)])
        >>> kinetics.get_parameters(15).velocity.length
    """

    def __init__(self, samples: Recording, strategy: Union[KnotStrategy, str] = KnotStrategy.LOCAL):
        """
        Args:
            samples: ``(timestamp, x, y)`` triples, in any order
            strategy: Knot slope policy for both axes

        Raises:
            ValidationError: On malformed samples or repeated timestamps
        """
        arr = _as_samples(samples)
        if not np.all(np.diff(arr[:, 0]) >= 0):
            logger.warning("recording of %d samples is not sorted by timestamp, sorting", arr.shape[0])
            arr = arr[np.argsort(arr[:, 0], kind="stable")]
        if not np.all(np.diff(arr[:, 0]) > 0):
            raise ValidationError("sample timestamps must be distinct")

        arr.setflags(write=False)
        self.samples = arr
        self.x_spline = Spline(arr[:, 0], arr[:, 1], strategy)
        self.y_spline = Spline(arr[:, 0], arr[:, 2], strategy)
        logger.debug("kinetics over %d samples, t in [%g, %g]", arr.shape[0], self.start, self.end)

    @property
    def start(self) -> float:
        return float(self.samples[0, 0])

    @property
    def end(self) -> float:
        return float(self.samples[-1, 0])

    @property
    def duration(self) -> float:
        return self.end - self.start

    def get_parameters(self, t: float) -> KineticsParameters:
        """Position and its first three time derivatives at ``t`` (``DomainError`` outside the recording)."""
        if not self.start <= t <= self.end:
            raise DomainError(f"t={t} is outside the recorded span [{self.start}, {self.end}]")
        x, dx, ddx, dddx = self.x_spline.at(t)
        y, dy, ddy, dddy = self.y_spline.at(t)
        return KineticsParameters(
            position=Vector(x, y),
            velocity=Vector(dx, dy),
            acceleration=Vector(ddx, ddy),
            jerk=Vector(dddx, dddy),
        )

    def series(self, interval: float) -> List[Tuple[float, KineticsParameters]]:
        """
        Sample the parameters every ``interval`` ms from the first timestamp.

        Produces ``floor(duration / interval)`` entries, the sampling used to
        draw velocity/acceleration/jerk charts.
        """
        if not interval > 0:
            raise ValidationError(f"interval must be positive, got {interval}")
        size = math.floor(self.duration / interval)
        if size == 0:
            return []
        times = self.start + np.arange(size) * interval
        xs = self.x_spline.evaluate(times)
        ys = self.y_spline.evaluate(times)
        return [
            (float(t), KineticsParameters(
                position=Vector(float(xs[0, i]), float(ys[0, i])),
                velocity=Vector(float(xs[1, i]), float(ys[1, i])),
                acceleration=Vector(float(xs[2, i]), float(ys[2, i])),
                jerk=Vector(float(xs[3, i]), float(ys[3, i])),
            ))
            for i, t in enumerate(times)
        ]


def normalize_recording(samples: Recording) -> List[Sample]:
    """
    Move a recording to a common frame for comparison.

    Time starts at 0, the first sample sits at the origin and the
    first-to-last displacement points along +x. Sample order is preserved.
    """
    arr = _as_samples(samples)
    source = Vector(arr[0, 1], arr[0, 2])
    target = Vector(arr[-1, 1], arr[-1, 2])
    angle = target.sub(source).angle
    normalized = []
    for t, x, y in arr:
        v = MutableVector(x, y).isub(source).irotate(-angle)
        normalized.append((float(t - arr[0, 0]), float(v.x), float(v.y)))
    return normalized
