"""
Piecewise cubic Hermite splines over a strictly ascending abscissa.

The curve between two knots is fixed by the knot values and the slope
assigned to each knot. Two slope policies are available and they produce
different curves:

- ``KnotStrategy.GLOBAL`` ("standard"): slopes from the tridiagonal system
  that makes the curve C2 at every interior knot, with one-sided quadratic
  closure at both ends.
  https://en.wikipedia.org/wiki/Spline_interpolation#Algorithm_to_find_the_interpolating_cubic_spline
- ``KnotStrategy.LOCAL`` ("estimate"): each interior slope is half the
  difference of the two adjacent secant slopes; each boundary slope comes
  from a small cubic fitted at that end.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Sequence, Tuple, Union

import numpy as np
from scipy.linalg import solve_banded

from .errors import DomainError, ValidationError

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


class KnotStrategy(str, Enum):
    """How knot slopes are assigned."""
    GLOBAL = "standard"
    LOCAL = "estimate"


def global_knot_slopes(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """
    Solve the (n+1)x(n+1) tridiagonal system for C2-continuous knot slopes.

    Interior row i:
        k[i-1]/ldx + 2(1/ldx + 1/rdx) k[i] + k[i+1]/rdx
            = 3 (dy_left/ldx^2 + dy_right/rdx^2)
    Boundary rows use a one-sided quadratic closure:
        2/dx0 k[0] + 1/dx0 k[1] = 3 dy0/dx0^2
        1/dxn k[n-1] + 2/dxn k[n] = 3 dyn/dxn^2
    """
    dx = np.diff(xs)
    dy = np.diff(ys)
    inv = 1.0 / dx
    size = xs.size

    # Banded storage: row 0 = super-diagonal, row 1 = diagonal, row 2 = sub-diagonal
    ab = np.zeros((3, size))
    rhs = np.empty(size)

    ab[1, 0] = 2.0 * inv[0]
    ab[0, 1] = inv[0]
    rhs[0] = 3.0 * dy[0] * inv[0] ** 2

    ab[1, 1:-1] = 2.0 * (inv[:-1] + inv[1:])
    ab[2, :-2] = inv[:-1]
    ab[0, 2:] = inv[1:]
    rhs[1:-1] = 3.0 * (dy[:-1] * inv[:-1] ** 2 + dy[1:] * inv[1:] ** 2)

    ab[2, -2] = inv[-1]
    ab[1, -1] = 2.0 * inv[-1]
    rhs[-1] = 3.0 * dy[-1] * inv[-1] ** 2

    return solve_banded((1, 1), ab, rhs)


def _boundary_slope(secant: float, neighbour_slope: float) -> float:
    # Cubic through the boundary knot and its neighbour, with zero curvature at
    # the boundary and ``neighbour_slope`` at the neighbour, differentiated at
    # the boundary.
    return (3.0 * secant - neighbour_slope) / 2.0


def local_knot_slopes(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Central estimate for interior knots, local cubic fit for the two ends."""
    secants = np.diff(ys) / np.diff(xs)
    ks = np.zeros(xs.size)
    ks[1:-1] = (secants[1:] - secants[:-1]) / 2.0
    ks[0] = _boundary_slope(secants[0], ks[1])
    ks[-1] = _boundary_slope(secants[-1], ks[-2])
    return ks


KNOT_SLOPES: Dict[KnotStrategy, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    KnotStrategy.GLOBAL: global_knot_slopes,
    KnotStrategy.LOCAL: local_knot_slopes,
}


def _frozen(values: np.ndarray) -> np.ndarray:
    values.setflags(write=False)
    return values


class Spline:
    """Cubic Hermite spline ``y(x)``; immutable once built."""

    def __init__(
        self,
        xs: ArrayLike,
        ys: ArrayLike,
        strategy: Union[KnotStrategy, str] = KnotStrategy.LOCAL,
    ):
        """
        Args:
            xs: Strictly ascending knot positions (at least 2)
            ys: Knot values, same length as ``xs``
            strategy: Knot slope policy (``KnotStrategy`` or its string value)

        Raises:
            ValidationError: On mismatched lengths, too few knots, non-finite
                values or a non-ascending ``xs``
        """
        xs = np.array(xs, dtype=float)
        ys = np.array(ys, dtype=float)
        if xs.ndim != 1 or ys.ndim != 1:
            raise ValidationError("xs and ys must be one-dimensional")
        if xs.size != ys.size:
            raise ValidationError(f"xs and ys must be of same size, got {xs.size} and {ys.size}")
        if xs.size < 2:
            raise ValidationError(f"need at least 2 knots, got {xs.size}")
        if not (np.isfinite(xs).all() and np.isfinite(ys).all()):
            raise ValidationError("knots must be finite")
        if not np.all(np.diff(xs) > 0):
            raise ValidationError("xs must increase strictly monotonically")

        try:
            self.strategy = KnotStrategy(strategy)
        except ValueError:
            raise ValidationError(f"unknown knot strategy: {strategy!r}") from None

        self.xs = _frozen(xs)
        self.ys = _frozen(ys)
        self.ks = _frozen(KNOT_SLOPES[self.strategy](xs, ys))
        logger.debug("built %s spline over %d knots [%g, %g]",
                     self.strategy.name, xs.size, xs[0], xs[-1])

    def __len__(self):
        return self.xs.size

    @property
    def domain(self) -> Tuple[float, float]:
        return float(self.xs[0]), float(self.xs[-1])

    def _check_domain(self, x: np.ndarray) -> None:
        lo, hi = self.xs[0], self.xs[-1]
        if np.any(np.isnan(x)) or np.any(x < lo) or np.any(x > hi):
            raise DomainError(f"out of bounds: spline is defined on [{lo}, {hi}]")

    def evaluate(self, x: ArrayLike) -> np.ndarray:
        """
        Vectorised evaluation.

        Returns an array of shape ``(4, n)``: value, first, second and third
        derivative at every requested position.
        """
        x = np.atleast_1d(np.asarray(x, dtype=float))
        self._check_domain(x)

        # Right end of the containing interval, clamped so x == xs[0] uses the first one
        idx = np.maximum(1, np.searchsorted(self.xs, x, side="left"))
        x0 = self.xs[idx - 1]
        y0 = self.ys[idx - 1]
        dx = self.xs[idx] - x0
        dy = self.ys[idx] - y0
        t = (x - x0) / dx

        # y(t) = (1-t) y0 + t y1 + t (1-t) (a (1-t) + b t), expanded in powers of t
        a = self.ks[idx - 1] * dx - dy
        b = -self.ks[idx] * dx + dy
        c3 = a - b
        c2 = b - 2.0 * a
        c1 = a + dy

        value = ((c3 * t + c2) * t + c1) * t + y0
        d1 = ((3.0 * c3 * t + 2.0 * c2) * t + c1) / dx
        d2 = (6.0 * c3 * t + 2.0 * c2) / dx ** 2
        d3 = 6.0 * c3 / dx ** 3
        return np.vstack([value, d1, d2, d3])

    def at(self, x: float) -> Tuple[float, float, float, float]:
        """Value and first three derivatives at ``x``; ``DomainError`` outside the knots."""
        value, d1, d2, d3 = self.evaluate(x)[:, 0]
        return float(value), float(d1), float(d2), float(d3)

    def __call__(self, x: float) -> float:
        return self.at(x)[0]
