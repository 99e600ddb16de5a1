import math
import collections
import functools
import itertools
import numpy


class Vector(collections.namedtuple("Vector", "x y z")):
    """ 3D vector. Components may also be numpy arrays, which makes every
    operation here work elementwise over a whole grid of points. """
    __slots__ = ()

    def __new__(cls, x, y, z=0):
        return super().__new__(cls, x, y, z)

    @classmethod
    def splat(cls, value):
        return cls(value, value, value)

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        return Vector(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, other):
        return Vector(self.x / other, self.y / other, self.z / other)

    def __neg__(self):
        return Vector(-self.x, -self.y, -self.z)

    def __pos__(self):
        return self

    def __abs__(self):
        return numpy.sqrt(self.abs_squared())

    def abs_squared(self):
        return self.dot(self)

    def elementwise_abs(self):
        return Vector(abs(self.x), abs(self.y), abs(self.z))

    def max(self, other=None):
        return self._minmax(other, max, numpy.maximum)

    def min(self, other=None):
        return self._minmax(other, min, numpy.minimum)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector(self.y * other.z - self.z * other.y,
                      self.z * other.x - self.x * other.z,
                      self.x * other.y - self.y * other.x)

    def normalized(self):
        return self / abs(self)

    def _minmax(self, other, op, array_op):
        if other is None:
            return functools.reduce(array_op, (self.x, self.y, self.z))
        else:
            return Vector(op(self.x, other.x),
                          op(self.y, other.y),
                          op(self.z, other.z))

    def applyfunc(self, f):
        return Vector(f(self.x), f(self.y), f(self.z))


class BoundingBox(collections.namedtuple("BoundingBox", "a b")):
    __slots__ = ()

    def vertices(self):
        for selector in itertools.product((0, 1), repeat=3):
            yield Vector(*(self[x][i] for i, x in enumerate(selector)))

    @classmethod
    def containing(cls, vector_iterable):
        a = Vector(float("inf"), float("inf"), float("inf"))
        b = -a

        for v in vector_iterable:
            a = a.min(v)
            b = b.max(v)

        return cls(a, b)

    @classmethod
    def empty(cls):
        return cls.containing([])

    def is_empty(self):
        return any(a > b for a, b in zip(self.a, self.b))

    def union(self, other):
        return BoundingBox(self.a.min(other.a), self.b.max(other.b))

    def expanded_additive(self, expansion):
        """ Expand the bounding box by a given distance on each side """
        expansion_vector = Vector.splat(expansion)
        return BoundingBox(self.a - expansion_vector,
                           self.b + expansion_vector)

    def contains(self, other):
        """ Return True if other box is completely inside this one. """
        return all(sa <= oa for sa, oa in zip(self.a, other.a)) and \
            all(sb >= ob for sb, ob in zip(self.b, other.b))

    def size(self):
        return self.b - self.a

    def midpoint(self):
        return (self.a + self.b) / 2


class Quaternion(collections.namedtuple("Quaternion", "v w")):
    # http://www.cs.ucr.edu/~vbz/resources/quatut.pdf
    __slots__ = ()

    @classmethod
    def from_degrees(cls, axis, angle):
        phi = math.radians(angle) / 2
        axis = Vector(*axis)
        return cls(axis.normalized() * math.sin(phi),
                   math.cos(phi))

    @classmethod
    def identity(cls):
        return cls(Vector(0, 0, 0), 1)

    def __mul__(self, other):
        return Quaternion(self.v * other.w + other.v * self.w + self.v.cross(other.v),
                          self.w * other.w - self.v.dot(other.v))

    def abs_squared(self):
        return self.w * self.w + self.v.abs_squared()

    def inverse(self):
        abs_squared = self.abs_squared()
        return Quaternion(-self.v / abs_squared, self.w / abs_squared)

    def transform_vector(self, vector):
        return (self.v * self.v.dot(vector) + self.v.cross(vector) * self.w) * 2 + \
            vector * (self.w * self.w - self.v.abs_squared())

    def axis_angle(self):
        """ Return (axis, angle in degrees) of this rotation. """
        sin_half = math.sqrt(self.v.abs_squared())
        if sin_half == 0:
            return Vector(0, 0, 1), 0
        angle = math.degrees(2 * math.atan2(sin_half, self.w))
        return self.v / sin_half, angle


class Transformation(collections.namedtuple("Transformation", "quaternion offset")):
    """ Quaternion and a vector offset """
    __slots__ = ()

    @classmethod
    def from_degrees(cls, axis, angle, offset):
        return cls(Quaternion.from_degrees(axis, angle),
                   Vector(*offset))

    @classmethod
    def zero(cls):
        return cls(Quaternion.identity(), Vector(0, 0, 0))

    def __mul__(self, other):
        """ Combines two transformations into one,
        order is "second * first" """
        return Transformation(self.quaternion * other.quaternion,
                              self.offset + self.quaternion.transform_vector(other.offset))

    def inverse(self):
        inverse_quaternion = self.quaternion.inverse()
        return Transformation(inverse_quaternion,
                              -inverse_quaternion.transform_vector(self.offset))

    def transform_vector(self, vector):
        return self.quaternion.transform_vector(vector) + self.offset
