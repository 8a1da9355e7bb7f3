"""
Small numeric helpers shared by the splines and simulators.

Random draws always go through an explicit ``numpy.random.Generator`` so that
stochastic trajectories can be reproduced from a seed.
"""

import math
from typing import Optional, Sequence, Union

import numpy as np

RandomSource = Union[None, int, np.random.Generator]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return a Generator: pass one through, or seed a fresh one (None = OS entropy)."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def uniform(rng: np.random.Generator, low: float, high: Optional[float] = None) -> float:
    """Uniform float in [low, high); with one bound, in [0, low)."""
    if high is None:
        low, high = 0.0, low
    return float(rng.uniform(low, high))


def random_sign(rng: np.random.Generator) -> int:
    """+1 or -1 with equal probability."""
    return 1 if rng.random() < 0.5 else -1


def round_to(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves going up (towards +inf)."""
    factor = 10.0 ** digits
    return math.floor(value * factor + 0.5) / factor


def is_ascending(values: Sequence[float], strict: bool = True) -> bool:
    """Check that ``values`` never decreases (strictly increases when ``strict``)."""
    arr = np.asarray(values, dtype=float)
    if arr.size < 2:
        return True
    diffs = np.diff(arr)
    return bool(np.all(diffs > 0) if strict else np.all(diffs >= 0))
