""" User facing constructors for basic shapes.

Names from this module may optionally be imported as "from printmail.shapes import *".

Basic shape interface is composed of functions defined here and of methods on
Shape3D objects (transformations, union). All shapes are centered at the origin
until they are placed. """

from . import simple3d as _s3


def ring(d=1, wire=0.1):
    """ Torus lying in the XY plane with inner diameter `d` made of wire of diameter `wire`. """
    return _s3.Torus(d, wire)


def box(x=1, y=None, z=None):
    if (y is None) != (z is None):
        raise ValueError("y and z must either both be None, or both be number")
    return _s3.Box(x, y, z)


def cylinder(h=1, d=1, r=None):
    return _s3.Cylinder(h, d, r)


def empty():
    return _s3.Empty()


def union(shapes):
    """ Union of an iterable of shapes. Union of no shapes is the empty shape. """
    shapes = list(shapes)
    if len(shapes) == 0:
        return empty()
    elif len(shapes) == 1:
        return shapes[0]
    else:
        return _s3.Union(shapes)
