import concurrent.futures
import math

import numpy
import mcubes

from .. import util


def _axis(start, count, resolution):
    return start + numpy.arange(count) * resolution


def _evaluate_slab(obj, xs, ys, zs, resolution):
    """ Evaluate the distance field on a slab of the grid and run marching cubes on it. """
    x, y, z = numpy.meshgrid(xs, ys, zs, indexing="ij")
    values = obj.distance(util.Vector(x, y, z))

    vertices, triangles = mcubes.marching_cubes(values, 0)
    if len(triangles) == 0:
        return None

    vertices *= resolution
    vertices += (xs[0], ys[0], zs[0])
    return vertices, triangles


def triangular_mesh(obj, resolution, slab_size=32, workers=None):
    """ Generate a triangular mesh representing a surface of 3D shape.

    The distance field is sampled on a regular grid with `resolution` spacing,
    split into slabs along Z that share their boundary layer. Slabs are
    independent and can be evaluated by `workers` threads, results always
    come out in slab order.
    Yields tuples (vertices, indices). """

    box = obj.bounding_box()
    if box.is_empty():
        return

    box = box.expanded_additive(2 * resolution)
    counts = box.size().applyfunc(lambda s: int(math.ceil(s / resolution)) + 1)

    xs = _axis(box.a.x, counts.x, resolution)
    ys = _axis(box.a.y, counts.y, resolution)
    zs = _axis(box.a.z, counts.z, resolution)

    slabs = [zs[k:k + slab_size + 1] for k in range(0, counts.z - 1, slab_size)]

    def evaluate(slab_zs):
        return _evaluate_slab(obj, xs, ys, slab_zs, resolution)

    if workers is not None and workers > 1:
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(evaluate, slabs))
    else:
        results = map(evaluate, slabs)

    for result in results:
        if result is not None:
            yield result
