"""
Tests for the immutable and mutable 2D vector types.
"""

import dataclasses
import math

import pytest

from automouse.vector import EmittedPoint, MutableVector, Point, Vector, as_point


@pytest.mark.parametrize("vector_cls", [Vector, MutableVector])
@pytest.mark.parametrize("angle", [0.0, 0.3, -1.2, math.pi, 2.5 * math.pi])
def test_rotate_round_trip(vector_cls, angle):
    """Rotating by a and then by -a gives back the original vector."""
    v = vector_cls(3.0, -4.5)
    back = v.rotate(angle).rotate(-angle)
    assert back.x == pytest.approx(v.x, abs=1e-12)
    assert back.y == pytest.approx(v.y, abs=1e-12)


@pytest.mark.parametrize("target", [0.5, 1.0, 7.0, 1234.5])
def test_set_length_on_non_zero_vector(target):
    v = MutableVector(-2.0, 5.0)
    angle = v.angle
    v.length = target
    assert v.length == pytest.approx(target)
    assert v.angle == pytest.approx(angle)


def test_set_length_on_zero_vector():
    v = MutableVector.origin()
    v.length = 0
    assert (v.x, v.y) == (0.0, 0.0)
    with pytest.raises(ArithmeticError):
        v.length = 3.0


def test_with_length_on_zero_vector():
    assert Vector.origin().with_length(0) == Vector(0.0, 0.0)
    with pytest.raises(ArithmeticError):
        Vector.origin().with_length(1)


@pytest.mark.parametrize("vector_cls", [Vector, MutableVector])
def test_divide_by_zero(vector_cls):
    with pytest.raises(ArithmeticError):
        vector_cls(1.0, 2.0).div(0)
    with pytest.raises(ZeroDivisionError):
        vector_cls(1.0, 2.0) / 0


def test_in_place_divide_by_zero_leaves_vector_unchanged():
    v = MutableVector(1.0, 2.0)
    with pytest.raises(ZeroDivisionError):
        v.idiv(0)
    assert (v.x, v.y) == (1.0, 2.0)


def test_set_angle_keeps_length():
    v = MutableVector(3.0, 4.0)
    v.angle = math.pi / 2
    assert v.length == pytest.approx(5.0)
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(5.0)


def test_angle_range():
    assert Vector(-1.0, 0.0).angle == pytest.approx(math.pi)
    assert Vector(0.0, -1.0).angle == pytest.approx(-math.pi / 2)
    assert Vector(1.0, 1.0).angle == pytest.approx(math.pi / 4)


def test_immutable_operations_allocate():
    v = Vector(1.0, 2.0)
    w = Vector(3.0, -1.0)
    assert v.add(w) == Vector(4.0, 1.0)
    assert v.sub(w) == Vector(-2.0, 3.0)
    assert v.mul(2) == Vector(2.0, 4.0)
    assert v.div(2) == Vector(0.5, 1.0)
    assert v.reverse() == Vector(-1.0, -2.0)
    assert v == Vector(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0


def test_operators():
    v = Vector(1.0, 2.0)
    w = Vector(3.0, -1.0)
    assert v + w == Vector(4.0, 1.0)
    assert v - w == Vector(-2.0, 3.0)
    assert 3 * v == Vector(3.0, 6.0)
    assert v / 2 == Vector(0.5, 1.0)
    assert -v == Vector(-1.0, -2.0)


def test_dot_and_cross():
    v = Vector(2.0, 3.0)
    w = MutableVector(-1.0, 4.0)
    assert v.dot(w) == 10.0
    assert v.cross(w) == 11.0
    assert w.cross(v) == -11.0


def test_chained_mutation_returns_self():
    v = MutableVector(1.0, 0.0)
    result = v.iadd(Vector(1.0, 0.0)).imul(3).irotate(math.pi / 2).isub(Point(0.0, 1.0)).idiv(5)
    assert result is v
    assert v.x == pytest.approx(0.0, abs=1e-12)
    assert v.y == pytest.approx(1.0)
    assert v.ireverse() is v
    assert v.y == pytest.approx(-1.0)


def test_augmented_assignment_mutates_in_place():
    v = MutableVector(1.0, 1.0)
    alias = v
    v += Vector(1.0, 2.0)
    v *= 2
    assert alias is v
    assert (v.x, v.y) == (4.0, 6.0)


def test_mutable_plain_operations_do_not_mutate():
    v = MutableVector(1.0, 2.0)
    w = v.add(Vector(1.0, 1.0))
    assert (v.x, v.y) == (1.0, 2.0)
    assert isinstance(w, MutableVector)
    assert w is not v


def test_conversions():
    v = Vector(1.5, -2.0)
    m = v.to_mutable()
    m.x = 7.0
    assert v.x == 1.5
    assert m.freeze() == Vector(7.0, -2.0)
    assert tuple(v) == (1.5, -2.0)
    assert v.to_dict() == {"x": 1.5, "y": -2.0}


@pytest.mark.parametrize("obj", [
    (1, 2),
    [1.0, 2.0],
    {"x": 1, "y": 2},
    Vector(1.0, 2.0),
    MutableVector(1.0, 2.0),
    EmittedPoint(1.0, 2.0, 30.0),
])
def test_as_point(obj):
    assert as_point(obj) == Point(1.0, 2.0)
