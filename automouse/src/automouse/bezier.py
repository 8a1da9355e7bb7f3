"""Bezier curves of any degree, evaluated in Bernstein form."""

from typing import Callable, Sequence

import numpy as np
from scipy.special import comb

from .vector import Point, VectorLike


def bernstein_curve(control_points: Sequence[VectorLike]) -> Callable[[float], Point]:
    """
    Build ``B(t)`` for ``t`` in [0, 1] from ``control_points``.

    Two points give a line, three a quadratic, four a cubic:
        B(t) = sum_i C(n, i) t^i (1-t)^(n-i) P_i
    """
    points = np.array([[p.x, p.y] for p in control_points], dtype=float)
    if points.shape[0] < 2:
        raise ValueError(f"a Bezier curve needs at least 2 control points, got {points.shape[0]}")
    n = points.shape[0] - 1
    i = np.arange(n + 1)
    coefficients = comb(n, i)

    def curve(t: float) -> Point:
        weights = coefficients * t ** i * (1.0 - t) ** (n - i)
        x, y = weights @ points
        return Point(float(x), float(y))

    return curve
