"""
2D points and displacement vectors.

Two value types share one read-only surface (``VectorLike``):

- ``Vector``: immutable; every operation allocates a new value.
- ``MutableVector``: same operations, plus chained in-place mutation
  (``iadd``, ``isub``, ...) and settable ``length`` / ``angle``.

Angles are radians in (-pi, pi], as returned by ``math.atan2``.
"""

import math
from dataclasses import dataclass
from typing import Any, NamedTuple, Protocol, Tuple


class Point(NamedTuple):
    """Plain coordinate pair."""
    x: float
    y: float


class VectorLike(Protocol):
    """Anything exposing read-only ``x`` / ``y`` coordinates."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


def as_point(obj: Any) -> Point:
    """
    Coerce ``obj`` into a ``Point``.

    Accepts ``(x, y)`` sequences, ``{"x": .., "y": ..}`` mappings and any
    object with ``x`` / ``y`` attributes (including both vector types).
    """
    if isinstance(obj, Point):
        return obj
    if isinstance(obj, dict):
        return Point(float(obj["x"]), float(obj["y"]))
    if hasattr(obj, "x") and hasattr(obj, "y"):
        return Point(float(obj.x), float(obj.y))
    x, y = obj
    return Point(float(x), float(y))


# Polar helpers shared by both vector types

def _length(x: float, y: float) -> float:
    return math.hypot(x, y)


def _angle(x: float, y: float) -> float:
    return math.atan2(y, x)


def _rotated(x: float, y: float, angle: float) -> Tuple[float, float]:
    cos, sin = math.cos(angle), math.sin(angle)
    return x * cos - y * sin, x * sin + y * cos


def _divided(x: float, y: float, k: float) -> Tuple[float, float]:
    if k == 0:
        raise ZeroDivisionError("cannot divide a vector by zero")
    return x / k, y / k


def _rescaled(x: float, y: float, length: float) -> Tuple[float, float]:
    current = _length(x, y)
    if current == 0:
        if length == 0:
            return x, y
        raise ArithmeticError("cannot set a non-zero length on a zero vector: direction is undefined")
    k = length / current
    return x * k, y * k


@dataclass(frozen=True)
class Vector:
    """Immutable 2D vector."""
    x: float
    y: float

    @classmethod
    def origin(cls) -> "Vector":
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, obj: Any) -> "Vector":
        """Build from anything ``as_point`` understands."""
        return cls(*as_point(obj))

    @property
    def length(self) -> float:
        return _length(self.x, self.y)

    @property
    def angle(self) -> float:
        return _angle(self.x, self.y)

    def add(self, v: VectorLike) -> "Vector":
        return Vector(self.x + v.x, self.y + v.y)

    def sub(self, v: VectorLike) -> "Vector":
        return Vector(self.x - v.x, self.y - v.y)

    def mul(self, k: float) -> "Vector":
        return Vector(self.x * k, self.y * k)

    def div(self, k: float) -> "Vector":
        return Vector(*_divided(self.x, self.y, k))

    def rotate(self, angle: float) -> "Vector":
        return Vector(*_rotated(self.x, self.y, angle))

    def reverse(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def with_length(self, length: float) -> "Vector":
        return Vector(*_rescaled(self.x, self.y, length))

    def with_angle(self, angle: float) -> "Vector":
        length = self.length
        return Vector(length * math.cos(angle), length * math.sin(angle))

    def dot(self, v: VectorLike) -> float:
        return self.x * v.x + self.y * v.y

    def cross(self, v: VectorLike) -> float:
        return self.x * v.y - self.y * v.x

    def to_mutable(self) -> "MutableVector":
        return MutableVector(self.x, self.y)

    def to_point(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div
    __neg__ = reverse

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class MutableVector:
    """
    Mutable 2D vector.

    The ``i*`` methods mutate in place and return ``self`` so calls can be
    chained: ``v.isub(a).irotate(t).imul(k)``. The plain methods still return
    new ``MutableVector`` instances.
    """
    x: float
    y: float

    @classmethod
    def origin(cls) -> "MutableVector":
        return cls(0.0, 0.0)

    @classmethod
    def of(cls, obj: Any) -> "MutableVector":
        return cls(*as_point(obj))

    @property
    def length(self) -> float:
        return _length(self.x, self.y)

    @length.setter
    def length(self, value: float) -> None:
        # Direction is kept; a zero vector only accepts a zero length.
        self.x, self.y = _rescaled(self.x, self.y, value)

    @property
    def angle(self) -> float:
        return _angle(self.x, self.y)

    @angle.setter
    def angle(self, value: float) -> None:
        length = self.length
        self.x = length * math.cos(value)
        self.y = length * math.sin(value)

    def add(self, v: VectorLike) -> "MutableVector":
        return MutableVector(self.x + v.x, self.y + v.y)

    def sub(self, v: VectorLike) -> "MutableVector":
        return MutableVector(self.x - v.x, self.y - v.y)

    def mul(self, k: float) -> "MutableVector":
        return MutableVector(self.x * k, self.y * k)

    def div(self, k: float) -> "MutableVector":
        return MutableVector(*_divided(self.x, self.y, k))

    def rotate(self, angle: float) -> "MutableVector":
        return MutableVector(*_rotated(self.x, self.y, angle))

    def reverse(self) -> "MutableVector":
        return MutableVector(-self.x, -self.y)

    def dot(self, v: VectorLike) -> float:
        return self.x * v.x + self.y * v.y

    def cross(self, v: VectorLike) -> float:
        return self.x * v.y - self.y * v.x

    def iadd(self, v: VectorLike) -> "MutableVector":
        self.x += v.x
        self.y += v.y
        return self

    def isub(self, v: VectorLike) -> "MutableVector":
        self.x -= v.x
        self.y -= v.y
        return self

    def imul(self, k: float) -> "MutableVector":
        self.x *= k
        self.y *= k
        return self

    def idiv(self, k: float) -> "MutableVector":
        self.x, self.y = _divided(self.x, self.y, k)
        return self

    def irotate(self, angle: float) -> "MutableVector":
        self.x, self.y = _rotated(self.x, self.y, angle)
        return self

    def ireverse(self) -> "MutableVector":
        self.x, self.y = -self.x, -self.y
        return self

    def freeze(self) -> Vector:
        return Vector(self.x, self.y)

    def to_point(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __rmul__ = mul
    __truediv__ = div
    __neg__ = reverse
    __iadd__ = iadd
    __isub__ = isub
    __imul__ = imul
    __itruediv__ = idiv

    def __iter__(self):
        yield self.x
        yield self.y


class EmittedPoint(NamedTuple):
    """One trajectory sample; ``timestamp`` is ms since the trajectory started."""
    x: float
    y: float
    timestamp: float

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "timestamp": self.timestamp}
