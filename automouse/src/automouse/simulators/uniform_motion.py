"""Constant-velocity straight line from source to destination."""

import logging
import math
from typing import Any, Optional

from ..config import UniformMotionConfig
from ..utils import RandomSource
from ..vector import EmittedPoint, MutableVector, Vector
from .base import Trajectory

logger = logging.getLogger(__name__)


class UniformMotion(Trajectory):
    """
    ``report_rate * duration / 1000`` equal steps; the last one is snapped
    onto ``dest`` at exactly ``duration`` to absorb accumulated float error.
    """

    def __init__(self, source: Any, dest: Any, config: UniformMotionConfig, rng: RandomSource = None):
        super().__init__(source, dest, config, rng)
        step_count = config.report_rate * config.duration / 1000.0
        self.step = Vector.of(self.dest).sub(Vector.of(self.source)).div(step_count)
        self.intermediate = math.ceil(round(step_count, 9)) - 1
        self.cur = MutableVector.of(self.source)
        self.index = 0
        logger.debug("uniform motion: %d intermediate points over %g ms", self.intermediate, config.duration)

    def _advance(self) -> Optional[EmittedPoint]:
        if self.index < self.intermediate:
            self.index += 1
            self.cur.iadd(self.step)
            return EmittedPoint(self.cur.x, self.cur.y, self.index * self.config.interval)
        if self.index == self.intermediate:
            self.index += 1
            return EmittedPoint(self.dest.x, self.dest.y, float(self.config.duration))
        return None


def uniform_motion(source: Any, dest: Any, config: UniformMotionConfig, rng: RandomSource = None) -> UniformMotion:
    """Uniform motion trajectory (deterministic; ``rng`` is ignored)."""
    return UniformMotion(source, dest, config, rng)
