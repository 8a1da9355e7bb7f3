"""
Production contract shared by all trajectory simulators.

A trajectory is a finite, single-pass iterator of ``EmittedPoint``: the
consumer pulls one point at a time (``next(trajectory)``) and stops whenever
it likes; there is nothing to release afterwards. Timestamps increase
strictly and the last point is exactly the destination.

Example (pacing against wall-clock time):
    >>> start = time.monotonic()
    >>> for point in wind_mouse(source, dest, WindMouseConfig()):
    ...     delay = point.timestamp / 1000 - (time.monotonic() - start)
    ...     if delay > 0:
    ...         time.sleep(delay)
    ...     page.mouse.move(point.x, point.y)
"""

from typing import Any, Dict, List, Optional

from ..config import SimulatorConfig
from ..utils import RandomSource, make_rng
from ..vector import EmittedPoint, Point, as_point


class Trajectory:
    """
    Pull-based trajectory state machine.

    Subclasses implement ``_advance``, which returns the next point or
    ``None`` once the destination has been emitted.
    """

    def __init__(self, source: Any, dest: Any, config: SimulatorConfig, rng: RandomSource = None):
        self.source: Point = as_point(source)
        self.dest: Point = as_point(dest)
        self.config = config
        self.rng = make_rng(rng)
        self.done = False

    def __iter__(self):
        return self

    def __next__(self) -> EmittedPoint:
        if self.done:
            raise StopIteration
        point = self._advance()
        if point is None:
            self.done = True
            raise StopIteration
        return point

    def _advance(self) -> Optional[EmittedPoint]:
        raise NotImplementedError

    def to_list(self) -> List[Dict[str, float]]:
        """Drain the remaining points as JSON-compatible records."""
        return [point.to_dict() for point in self]
