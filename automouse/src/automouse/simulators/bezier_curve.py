"""Bezier-curve trajectories, with explicit or randomized control points."""

import logging
import math
from typing import Any, List, Optional

from ..bezier import bernstein_curve
from ..config import BezierCurveConfig, resolve_range
from ..utils import RandomSource, random_sign, round_to, uniform
from ..vector import EmittedPoint, Vector, VectorLike
from .base import Trajectory

logger = logging.getLogger(__name__)


def random_control_points(source: VectorLike, dest: VectorLike, config: BezierCurveConfig, rng) -> List[Vector]:
    """
    Draw the two inner control points of a cubic stroke.

    Each one starts as the displacement (reversed for the destination side),
    gets a random length in the radius range and a random rotation in the
    angle range with a random sign, and is then anchored at source / dest.
    """
    displacement = Vector.of(dest).sub(source)
    radius = resolve_range(config.control_point_radius, (0.0, displacement.length / 3))
    angle = resolve_range(config.control_point_angle, (0.0, math.pi / 4))

    cp1 = displacement.to_mutable()
    cp2 = cp1.reverse()
    cp1.length = uniform(rng, *radius)
    cp2.length = uniform(rng, *radius)
    cp1.irotate(uniform(rng, *angle) * random_sign(rng))
    cp2.irotate(uniform(rng, *angle) * random_sign(rng))
    cp1.iadd(source)
    cp2.iadd(dest)
    return [cp1.freeze(), cp2.freeze()]


class BezierCurve(Trajectory):
    """
    Samples ``B(t)`` at ``t = i * step`` with ``step = 1000 / duration / report_rate``,
    i.e. one point per report interval, then emits ``dest`` at ``duration``.

    Randomized curves are rounded to 0.1 px / 0.1 ms. A sample whose rounded
    time does not fall strictly between the previous one and ``duration`` is
    dropped.
    """

    def __init__(self, source: Any, dest: Any, config: BezierCurveConfig, rng: RandomSource = None):
        super().__init__(source, dest, config, rng)
        if config.explicit:
            inner = [config.control_point1]
            if config.control_point2 is not None:
                inner.append(config.control_point2)
        else:
            inner = random_control_points(self.source, self.dest, config, self.rng)
        self.control_points = [self.source, *inner, self.dest]
        self.curve = bernstein_curve(self.control_points)
        self.step = 1000.0 / config.duration / config.report_rate
        self.intermediate = math.ceil(round(1.0 / self.step, 9)) - 1
        self.rounded = not config.explicit
        self.index = 0
        self.last_timestamp = 0.0
        logger.debug("bezier curve of degree %d, %d intermediate points",
                     len(self.control_points) - 1, self.intermediate)

    def _advance(self) -> Optional[EmittedPoint]:
        while self.index < self.intermediate:
            self.index += 1
            t = self.index * self.step
            point = self.curve(t)
            timestamp = t * self.config.duration
            if not self.rounded:
                return EmittedPoint(point.x, point.y, timestamp)
            timestamp = round_to(timestamp, 1)
            if self.last_timestamp < timestamp < self.config.duration:
                self.last_timestamp = timestamp
                return EmittedPoint(round_to(point.x, 1), round_to(point.y, 1), timestamp)
        if self.index == self.intermediate:
            self.index += 1
            return EmittedPoint(self.dest.x, self.dest.y, float(self.config.duration))
        return None


def bezier_curve(source: Any, dest: Any, config: BezierCurveConfig, rng: RandomSource = None) -> BezierCurve:
    """Bezier trajectory; ``rng`` only matters for randomized control points."""
    return BezierCurve(source, dest, config, rng)
