import numpy
import PIL.Image

from .. import util


def slice_pixels(obj, resolution, z=None):
    """ Return a 2D uint8 array of a horizontal cross-section of the shape.
    Material is white, rows go from +Y (top) to -Y. """
    box = obj.bounding_box()
    if box.is_empty():
        return numpy.zeros((1, 1), dtype=numpy.uint8)

    if z is None:
        z = box.midpoint().z

    box = box.expanded_additive(resolution)
    xs = numpy.arange(box.a.x, box.b.x + resolution, resolution)
    ys = numpy.arange(box.a.y, box.b.y + resolution, resolution)
    x, y = numpy.meshgrid(xs, ys)

    inside = obj.distance(util.Vector(x, y, numpy.full_like(x, z))) <= 0
    return numpy.where(inside[::-1], 255, 0).astype(numpy.uint8)


def render_slice(obj, filename, resolution, z=None):
    PIL.Image.fromarray(slice_pixels(obj, resolution, z)).save(filename)
