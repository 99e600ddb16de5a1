""" Extents of tilted rings and of the whole lattice.

A ring tilted by angle theta around a horizontal axis reaches
R * |sin(theta)| + r above and below its center, where R is the major radius
(to the middle of the wire) and r the wire radius. The lowest point of the
ring lies R * cos(theta) off its center, on the side that tilts downward;
that is where the ring rests on a support. """

import collections
import functools
import logging
import math

from . import util
from . import lattice

logger = logging.getLogger(__name__)


def torus_radii(inner_diameter, wire_diameter):
    """ Return (major radius, minor radius) of a ring. """
    return (inner_diameter + wire_diameter) / 2, wire_diameter / 2


def highest_z(angle, inner_diameter, wire_diameter):
    """ Height of the topmost point of a ring tilted by `angle` degrees,
    relative to its center. """
    major_r, minor_r = torus_radii(inner_diameter, wire_diameter)
    return major_r * abs(math.sin(math.radians(angle))) + minor_r


def lowest_z(angle, inner_diameter, wire_diameter):
    return -highest_z(angle, inner_diameter, wire_diameter)


def contact_y_offset(angle, inner_diameter, wire_diameter):
    """ Y offset of the lowest point of a ring tilted by `angle` degrees around X. """
    major_r, _ = torus_radii(inner_diameter, wire_diameter)
    theta = math.radians(angle)
    sin = math.sin(theta)
    if sin > 0:
        return -major_r * math.cos(theta)
    elif sin < 0:
        return major_r * math.cos(theta)
    else:
        return 0


def z_range(placement):
    """ Return (lowest, highest) Z of the ring material of a placement. """
    top = highest_z(placement.tilt, placement.major_diameter, placement.wire_diameter)
    return placement.center.z - top, placement.center.z + top


def contact_point(placement):
    """ World coordinates of the lowest point of a placed ring.

    The offset is derived in the ring's tilted frame and turned by the
    placement's heading. Rotation around Y is not taken into account,
    the lattice never uses it. """
    offset = util.Vector(0,
                         contact_y_offset(placement.tilt, placement.major_diameter, placement.wire_diameter),
                         lowest_z(placement.tilt, placement.major_diameter, placement.wire_diameter))
    heading = util.Quaternion.from_degrees((0, 0, 1), placement.heading)
    return placement.center + heading.transform_vector(offset)


class ExtentEnvelope(collections.namedtuple("ExtentEnvelope",
                                            "min_x max_x min_y max_y lowest_z highest_z")):
    """ Axis aligned box enclosing all ring material of a lattice. """
    __slots__ = ()

    @classmethod
    def of_placement(cls, placement):
        c = placement.center
        outer = placement.outer_radius
        low, high = z_range(placement)
        return cls(c.x - outer, c.x + outer, c.y - outer, c.y + outer, low, high)

    def union(self, other):
        return ExtentEnvelope(min(self.min_x, other.min_x), max(self.max_x, other.max_x),
                              min(self.min_y, other.min_y), max(self.max_y, other.max_y),
                              min(self.lowest_z, other.lowest_z), max(self.highest_z, other.highest_z))

    def footprint(self, margin=0):
        """ Return (min x, max x, min y, max y) inflated by a margin on each side. """
        return (self.min_x - margin, self.max_x + margin,
                self.min_y - margin, self.max_y + margin)

    def bounding_box(self):
        return util.BoundingBox(util.Vector(self.min_x, self.min_y, self.lowest_z),
                                util.Vector(self.max_x, self.max_y, self.highest_z))


@functools.lru_cache()
def envelope(config):
    """ Return the ExtentEnvelope of all rings of the lattice, or None for an empty lattice. """
    placements = lattice.ring_placements(config)
    if not placements:
        return None
    ret = functools.reduce(ExtentEnvelope.union, (ExtentEnvelope.of_placement(p) for p in placements))
    logger.debug("lattice envelope %s", ret)
    return ret
