"""
WindMouse: a gravity + wind integrator producing human-like strokes.

https://ben.land/post/2021/04/25/windmouse-human-mouse-movement/
"""

import logging
import math
from typing import Any, Optional

from ..config import WindMouseConfig
from ..errors import NonConvergence
from ..utils import RandomSource, round_to, uniform
from ..vector import EmittedPoint, MutableVector, Point, Vector
from .base import Trajectory

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3)
SQRT5 = math.sqrt(5)


class WindMouse(Trajectory):
    """
    Integration state: position ``cur``, velocity ``v``, wind ``w`` and the
    current step cap. Each integration step advances the clock by one report
    interval; only steps landing on a new integer pixel are emitted.
    """

    def __init__(self, source: Any, dest: Any, config: WindMouseConfig, rng: RandomSource = None):
        super().__init__(source, dest, config, rng)
        self.target = Vector.of(self.dest)
        self.cur = MutableVector.of(self.source)
        self.v = MutableVector.origin()
        self.w = MutableVector.origin()
        self.max_step = config.max_step
        self.dist = self.target.sub(self.cur).length
        self.time = 0.0
        self.iterations = 0
        self.prev = Point(self.source.x, self.source.y)
        self.last_timestamp = 0.0
        self.moved = False

    def _integrate(self) -> None:
        config = self.config
        self.iterations += 1
        if self.iterations > config.max_iterations:
            raise NonConvergence(
                f"wind mouse still {self.dist:.2f} px from {tuple(self.dest)} "
                f"after {config.max_iterations} steps"
            )

        self.w.idiv(SQRT3)
        if self.dist >= config.damping_distance:
            w_mag = min(config.wind, self.dist)
            self.w.x += uniform(self.rng, -1, 1) * w_mag / SQRT5
            self.w.y += uniform(self.rng, -1, 1) * w_mag / SQRT5
        elif self.max_step < 3:
            self.max_step = uniform(self.rng, 3, 6)
        else:
            self.max_step /= SQRT5

        self.v.iadd(self.w).iadd(self.target.sub(self.cur).mul(config.gravity / self.dist))
        v_mag = self.v.length
        if v_mag > self.max_step:
            v_clip = self.max_step / 2 + uniform(self.rng, self.max_step / 2)
            self.v.imul(v_clip / v_mag)

        self.cur.iadd(self.v)
        self.dist = self.target.sub(self.cur).length
        self.time += config.interval

    def _advance(self) -> Optional[EmittedPoint]:
        while self.dist >= 1:
            self._integrate()
            self.moved = True
            point = Point(round_to(self.cur.x), round_to(self.cur.y))
            if point != self.prev:
                self.prev = point
                self.last_timestamp = self.time
                return EmittedPoint(point.x, point.y, self.time)

        # Converged: make sure the stroke ends exactly on the destination
        if self.moved and self.prev != self.dest:
            self.prev = self.dest
            if self.time <= self.last_timestamp:
                self.time += self.config.interval
            logger.debug("wind mouse converged after %d steps", self.iterations)
            return EmittedPoint(self.dest.x, self.dest.y, self.time)
        return None


def wind_mouse(source: Any, dest: Any, config: Optional[WindMouseConfig] = None, rng: RandomSource = None) -> WindMouse:
    """WindMouse trajectory; default settings when ``config`` is omitted."""
    return WindMouse(source, dest, config or WindMouseConfig(), rng)
