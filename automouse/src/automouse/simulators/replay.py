"""Replay a recorded trajectory between a new source and destination."""

import logging
from typing import Any, Optional

from ..config import ReplayConfig
from ..utils import RandomSource, round_to
from ..vector import EmittedPoint, MutableVector, Vector
from .base import Trajectory

logger = logging.getLogger(__name__)


class Replay(Trajectory):
    """
    Re-projects ``config.data`` so its first point lands on ``source`` and its
    last on ``dest``: every recorded point is taken relative to the first one,
    rotated by the change of heading, scaled by the change of distance and
    translated to ``source``. Elapsed time is rescaled by
    ``sample_count / recorded_duration_s / report_rate``.

    The first recorded point maps onto ``source`` and is not emitted. Output
    is rounded to 0.1 px / 0.1 ms; the last point is exactly ``dest``. Samples
    whose rescaled times round to the same value are spread 0.1 ms apart.
    """

    def __init__(self, source: Any, dest: Any, config: ReplayConfig, rng: RandomSource = None):
        super().__init__(source, dest, config, rng)
        data = config.data
        first, last = data[0], data[-1]
        recorded = Vector(last.x - first.x, last.y - first.y)
        wanted = Vector.of(self.dest).sub(self.source)
        self.scale_factor = wanted.length / recorded.length
        self.rotation_delta = wanted.angle - recorded.angle
        duration_s = (last.timestamp - first.timestamp) / 1000.0
        self.time_factor = len(data) / duration_s / config.report_rate
        self.index = 1
        self.last_timestamp = 0.0
        logger.debug("replaying %d points: scale %.3f, rotation %.3f rad, time factor %.3f",
                     len(data), self.scale_factor, self.rotation_delta, self.time_factor)

    def _advance(self) -> Optional[EmittedPoint]:
        data = self.config.data
        if self.index >= len(data):
            return None
        first, sample = data[0], data[self.index]
        self.index += 1
        timestamp = round_to((sample.timestamp - first.timestamp) * self.time_factor, 1)
        if timestamp <= self.last_timestamp:
            timestamp = round_to(self.last_timestamp + 0.1, 1)
        self.last_timestamp = timestamp
        if self.index == len(data):
            return EmittedPoint(self.dest.x, self.dest.y, timestamp)
        v = (MutableVector(sample.x, sample.y)
             .isub(first)
             .irotate(self.rotation_delta)
             .imul(self.scale_factor)
             .iadd(self.source))
        return EmittedPoint(round_to(v.x, 1), round_to(v.y, 1), timestamp)


def replay(source: Any, dest: Any, config: ReplayConfig, rng: RandomSource = None) -> Replay:
    """Replay trajectory (deterministic; ``rng`` is ignored)."""
    return Replay(source, dest, config, rng)
