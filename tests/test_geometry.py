import math

import pytest
from pytest import approx

from printmail.util.geometry import Vector, BoundingBox, Quaternion, Transformation

quaternions_to_test = [
    (Quaternion.from_degrees((0, 0, 1), 90), (1, 1, 1), (-1, 1, 1)),
    (Quaternion.from_degrees((1, 0, 0), 90), (0, 1, 0), (0, 0, 1)),
    (Quaternion.from_degrees((0, 1, 0), -45) * Quaternion.from_degrees((0, 0, 1), 45),
        (1, 0, 0), (0.5, math.sqrt(0.5), 0.5)),
    ]

transformations_to_test = [
    (Transformation.zero(), (9, 8, 7), (9, 8, 7)),
    (Transformation.from_degrees((0, 0, 1), 90, (5, 5, 5)), (1, 1, 1), (4, 6, 6)),
    (Transformation.from_degrees((1, 0, 0), 0, (1, 0, 0)) * Transformation.from_degrees((0, 0, 1), 90, (0, 0, 0)),
        (0, 0, 0), (1, 0, 0)),
    (Transformation.from_degrees((0, 0, 1), 90, (0, 0, 0)) * Transformation.from_degrees((1, 0, 0), 0, (1, 0, 0)),
        (0, 0, 0), (0, 1, 0)),
]

all_to_test = [(t, Vector(*a), Vector(*b)) for (t, a, b) in quaternions_to_test + transformations_to_test]


@pytest.mark.parametrize("transformation, v, target", all_to_test)
def test_vector_transformation(transformation, v, target):
    assert transformation.transform_vector(v) == approx(target)


@pytest.mark.parametrize("transformation, v, target", all_to_test)
def test_vector_transformation_inverse(transformation, v, target):
    assert transformation.inverse().transform_vector(target) == approx(v)


@pytest.mark.parametrize("axis, angle", [((0, 0, 1), 90), ((1, 0, 0), -45), ((1, 1, 0), 120)])
def test_axis_angle(axis, angle):
    q = Quaternion.from_degrees(axis, angle)
    got_axis, got_angle = q.axis_angle()
    rebuilt = Quaternion.from_degrees(got_axis, got_angle)
    v = Vector(0.3, -2, 5)
    assert rebuilt.transform_vector(v) == approx(q.transform_vector(v))


def test_identity_axis_angle():
    assert Quaternion.identity().axis_angle() == (Vector(0, 0, 1), 0)


def test_empty_bounding_box():
    empty = BoundingBox.empty()
    assert empty.is_empty()

    box = BoundingBox(Vector(-1, -2, -3), Vector(1, 2, 3))
    assert empty.union(box) == box
    assert not box.is_empty()


def test_bounding_box_contains():
    outer = BoundingBox(Vector(-2, -2, -2), Vector(2, 2, 2))
    inner = BoundingBox(Vector(-1, 0, 0), Vector(2, 1, 1))
    assert outer.contains(inner)
    assert not inner.contains(outer)
