import functools
import math

import numpy

from .. import util
from . import base

_INDENT = "    "


def _number(value):
    return "{:.9g}".format(value)


def _vector(v):
    return "[{}]".format(", ".join(_number(x) for x in v))


class Torus(base.Shape3D):
    """ Ring lying in the XY plane, centered at origin.

    `d` is the inner (hole) diameter, `wire` the diameter of the wire, so
    the major radius is (d + wire) / 2 and the minor radius wire / 2. """

    def __init__(self, d, wire):
        if d <= 0 or wire <= 0:
            raise ValueError("Ring diameter and wire diameter must be positive")
        self.d = d
        self.wire = wire
        self.major_r = (d + wire) / 2
        self.minor_r = wire / 2

    def bounding_box(self):
        outer = self.major_r + self.minor_r
        v = util.Vector(outer, outer, self.minor_r)
        return util.BoundingBox(-v, v)

    def distance(self, point):
        radial = numpy.sqrt(point.x * point.x + point.y * point.y) - self.major_r
        return numpy.sqrt(radial * radial + point.z * point.z) - self.minor_r

    def scad_lines(self):
        return ["rotate_extrude() translate([{}, 0]) circle(r={});".format(_number(self.major_r),
                                                                           _number(self.minor_r))]


class Cylinder(base.Shape3D):
    """ Cylinder along the Z axis, centered at origin. """

    def __init__(self, h=1, d=1, r=None):
        if r is not None:
            d = 2 * r
        if h <= 0 or d <= 0:
            raise ValueError("Cylinder height and diameter must be positive")
        self.h = h
        self.r = d / 2

    def bounding_box(self):
        v = util.Vector(self.r, self.r, self.h / 2)
        return util.BoundingBox(-v, v)

    def distance(self, point):
        infinite_cylinder = numpy.sqrt(point.x * point.x + point.y * point.y) - self.r
        return numpy.maximum(infinite_cylinder, abs(point.z) - self.h / 2)

    def scad_lines(self):
        return ["cylinder(h={}, r={}, center=true);".format(_number(self.h), _number(self.r))]


class Box(base.Shape3D):
    """ Rectangular solid centered at origin. """

    def __init__(self, x=1, y=None, z=None):
        if y is None:
            y = x
        if z is None:
            z = x
        if min(x, y, z) <= 0:
            raise ValueError("Box dimensions must be positive")
        self.half_size = util.Vector(x, y, z) / 2

    def bounding_box(self):
        return util.BoundingBox(-self.half_size, self.half_size)

    def distance(self, point):
        v = point.elementwise_abs() - self.half_size
        return v.max()

    def scad_lines(self):
        return ["cube({}, center=true);".format(_vector(self.half_size * 2))]


class Empty(base.Shape3D):
    """ Shape containing no material at all. """

    def bounding_box(self):
        return util.BoundingBox.empty()

    def distance(self, point):
        return numpy.full(numpy.shape(point.x), numpy.inf)

    def scad_lines(self):
        return []


class Union(base.Shape3D):
    def __init__(self, shapes):
        self.shapes = []
        for shape in shapes:
            if isinstance(shape, Union):
                self.shapes.extend(shape.shapes)
            elif not isinstance(shape, Empty):
                self.shapes.append(shape)

    def bounding_box(self):
        return functools.reduce(lambda a, b: a.union(b),
                                (s.bounding_box() for s in self.shapes),
                                util.BoundingBox.empty())

    def distance(self, point):
        if not self.shapes:
            return Empty().distance(point)
        return functools.reduce(numpy.minimum, (s.distance(point) for s in self.shapes))

    def scad_lines(self):
        lines = ["union() {"]
        for shape in self.shapes:
            lines.extend(_INDENT + line for line in shape.scad_lines())
        lines.append("}")
        return lines


class Transformation(base.Shape3D):
    """ Rigid transformation (rotation followed by translation) of a shape.
    Nested transformations are merged into a single node. """

    def __init__(self, s, transformation):
        if isinstance(s, Transformation):
            transformation = transformation * s.transformation
            s = s.s
        self.s = s
        self.transformation = transformation
        self._inverse = transformation.inverse()

    def bounding_box(self):
        b = self.s.bounding_box()
        if b.is_empty():
            return b
        if any(math.isinf(x) for x in b.a) or any(math.isinf(x) for x in b.b):
            inf = util.Vector.splat(float("inf"))
            return util.BoundingBox(-inf, inf)
        return util.BoundingBox.containing(self.transformation.transform_vector(v) for v in b.vertices())

    def distance(self, point):
        return self.s.distance(self._inverse.transform_vector(point))

    def scad_lines(self):
        inner = self.s.scad_lines()
        if not inner:
            return []
        axis, angle = self.transformation.quaternion.axis_angle()
        header = "translate({}) rotate(a={}, v={})".format(_vector(self.transformation.offset),
                                                          _number(angle),
                                                          _vector(axis))
        return [header + " " + inner[0]] + inner[1:]
