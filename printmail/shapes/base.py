import abc

from .. import util

# simple3d is imported in functions to break circular dependencies


class Shape3D(metaclass=abc.ABCMeta):
    """ Abstract base class for 3D shapes.

    Shapes are immutable nodes of a CSG tree. Every operation returns a new
    shape and leaves the original untouched, so subtrees can be freely shared. """

    @abc.abstractmethod
    def bounding_box(self):
        """ Returns a box that contains the whole shape.
        Must be overridden by subclasses. """

    @abc.abstractmethod
    def distance(self, point):
        """ Returns signed distance (or its lower bound) between the point and
        surface of the shape. Negative inside.

        `point` is a util.Vector whose components may be numpy arrays, the
        result then has the same shape as the components.
        Must be overridden by subclasses. """

    @abc.abstractmethod
    def scad_lines(self):
        """ Returns a list of lines of OpenSCAD source describing this shape.
        Must be overridden by subclasses. """

    def __add__(self, second):
        """ Returns union of the two shapes """
        from . import simple3d

        return simple3d.Union([self, second])

    def __or__(self, second):
        """ Return union of the two shapes """
        return self.__add__(second)

    def translated(self, x, y=None, z=None):
        """ Returns current shape translated by a given offset.
        Arguments are either a single vector-like or three numbers. """
        if y is None and z is None:
            v = util.wrap_vector_like(x)
        elif y is not None and z is not None:
            v = util.Vector(x, y, z)
        else:
            raise ValueError("If y is specified, then z has to be too.")
        return self.transformed(util.Transformation(util.Quaternion.identity(), v))

    def translated_x(self, distance):
        return self.translated(distance, 0, 0)

    def translated_y(self, distance):
        return self.translated(0, distance, 0)

    def translated_z(self, distance):
        return self.translated(0, 0, distance)

    def rotated(self, axis, angle):
        """ Returns current shape rotated by an angle (in degrees) around the vector. """
        return self.transformed(util.Transformation.from_degrees(axis, angle, (0, 0, 0)))

    def rotated_x(self, angle):
        return self.rotated((1, 0, 0), angle)

    def rotated_y(self, angle):
        return self.rotated((0, 1, 0), angle)

    def rotated_z(self, angle):
        return self.rotated((0, 0, 1), angle)

    def transformed(self, transformation):
        """ Returns the current shape transformed by a given rigid transformation. """
        from . import simple3d

        return simple3d.Transformation(self, transformation)

    def scad(self):
        """ Returns OpenSCAD source of this shape as a single string. """
        return "\n".join(self.scad_lines()) + "\n"
