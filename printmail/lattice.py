""" Placement of every ring of the lattice.

A lattice is a cols x rows x stacks grid of cell units. Each cell unit is a
pair of rings tilted in opposite directions, which together with the
neighbouring cells form a 4-in-1 weave. Layers alternate between primary and
mirrored orientation so that rings of successive layers hook into each other,
and linker rings thread through each pair of adjacent layers at the row
boundaries, alternating between the minimum-X and maximum-X edge.

All functions here are pure functions of a Config; results of the expensive
ones are memoized. """

import collections
import enum
import functools
import logging

from . import util
from . import shapes

logger = logging.getLogger(__name__)

CELL_TILT = 45  # Degrees around X, ring A positive, ring B negative
SPACING_WIRE_FACTOR = 3  # Column spacing is ring_id + this * wire_d
WEAVE_WIRE_FACTOR = 0.5  # Ring B sits ring_id / 2 - this * wire_d along Y from ring A
LINKER_TILT = 20  # Degrees off vertical
LINKER_Y_FACTOR = 0.75  # Linker Y offset in multiples of ring_id


class Orientation(enum.Enum):
    """ Orientation of a layer of cells. Odd layers are mirrored through the
    XY plane at the cell's local origin. """
    PRIMARY = 1
    MIRRORED = -1

    @classmethod
    def for_layer(cls, z):
        return cls.MIRRORED if z % 2 else cls.PRIMARY

    @property
    def sign(self):
        return self.value

    def apply(self, offset, rotation):
        """ Return local offset and rotation of a ring placed in a cell with this orientation.

        Mirroring negates the Z of every local point. For a torus (which is
        symmetric about its own plane) that is the same as negating its
        rotation angles around X and Y. """
        if self is Orientation.PRIMARY:
            return offset, rotation
        rx, ry, rz = rotation
        return util.Vector(offset.x, offset.y, -offset.z), (-rx, -ry, rz)


class Side(enum.Enum):
    """ Edge of the lattice a linker is anchored to. """
    MIN_X = -1
    MAX_X = 1

    @classmethod
    def for_layer(cls, z):
        return cls.MAX_X if z % 2 else cls.MIN_X

    @property
    def direction(self):
        """ Sign of the X direction pointing from the lattice towards this side. """
        return self.value


GridIndex = collections.namedtuple("GridIndex", "x y z")
Spacing = collections.namedtuple("Spacing", "x y z")


class RingPlacement(collections.namedtuple("RingPlacement",
                                           "center rotation major_diameter wire_diameter")):
    """ Position and orientation of a single ring.

    `rotation` is (rx, ry, rz) in degrees, applied around X first, then Y, then Z.
    `major_diameter` is the inner diameter of the ring. """
    __slots__ = ()

    @property
    def tilt(self):
        return self.rotation[0]

    @property
    def heading(self):
        return self.rotation[2]

    @property
    def outer_radius(self):
        return self.major_diameter / 2 + self.wire_diameter

    def shape(self):
        rx, ry, rz = self.rotation
        return shapes.ring(d=self.major_diameter, wire=self.wire_diameter) \
            .rotated_x(rx) \
            .rotated_y(ry) \
            .rotated_z(rz) \
            .translated(self.center)


class CellUnit(collections.namedtuple("CellUnit", "index orientation a b")):
    __slots__ = ()
    kind = "cell"

    def rings(self):
        return (self.a, self.b)


class LinkerUnit(collections.namedtuple("LinkerUnit", "index side ring")):
    """ Ring bridging layer index.z to layer index.z + 1.
    index.x is the column the linker is anchored next to. """
    __slots__ = ()
    kind = "linker"

    def rings(self):
        return (self.ring,)


@functools.lru_cache()
def spacing(config):
    x = config.ring_id + SPACING_WIRE_FACTOR * config.wire_d
    ret = Spacing(x, x / 2, config.ring_id)
    logger.debug("lattice spacing %s", ret)
    return ret


def _placement(config, origin, offset, rotation, orientation=Orientation.PRIMARY):
    offset, rotation = orientation.apply(offset, rotation)
    return RingPlacement(origin + offset, rotation, config.ring_id, config.wire_d)


def cell(config, x, y, z):
    """ Return the cell unit at grid position (x, y, z). """
    s = spacing(config)
    origin = util.Vector(x * s.x, y * s.y, z * s.z)
    orientation = Orientation.for_layer(z)

    b_offset = util.Vector(s.x / 2, config.ring_id / 2 - WEAVE_WIRE_FACTOR * config.wire_d, 0)

    a = _placement(config, origin, util.Vector(0, 0, 0), (CELL_TILT, 0, 0), orientation)
    b = _placement(config, origin, b_offset, (-CELL_TILT, 0, 0), orientation)
    return CellUnit(GridIndex(x, y, z), orientation, a, b)


def linker(config, y, z):
    """ Return the linker connecting layer z to layer z + 1 at the boundary
    between rows y and y + 1, or None if there is no such linker. """
    if config.cols <= 0:
        return None
    if not (0 <= y < config.rows - 1 and 0 <= z < config.stacks - 1):
        return None

    s = spacing(config)
    side = Side.for_layer(z)

    # Nearly vertical ring, turned so that it spans the row boundary along Y
    rotation = (-side.direction * (90 - LINKER_TILT), 0, 90)

    if side is Side.MIN_X:
        x = -config.wire_d
        column = 0
    else:
        # Across the full row width, past the last ring B
        x = (config.cols - 0.5) * s.x + config.wire_d
        column = config.cols - 1

    center = util.Vector(x,
                         y * s.y + LINKER_Y_FACTOR * config.ring_id,
                         z * s.z + config.ring_id / 2)
    return LinkerUnit(GridIndex(column, y, z), side,
                      RingPlacement(center, rotation, config.ring_id, config.wire_d))


@functools.lru_cache()
def cells(config):
    """ All cell units of the lattice, ordered by z, y, x. """
    if config.is_empty():
        return ()
    return tuple(cell(config, x, y, z)
                 for z in range(config.stacks)
                 for y in range(config.rows)
                 for x in range(config.cols))


@functools.lru_cache()
def linkers(config):
    """ All linker units of the lattice, ordered by z, y. """
    if config.is_empty():
        return ()
    ret = []
    for z in range(config.stacks - 1):
        for y in range(config.rows - 1):
            ret.append(linker(config, y, z))
    return tuple(ret)


def units(config):
    return cells(config) + linkers(config)


@functools.lru_cache()
def ring_placements(config):
    """ Placements of all rings, cell rings first, then linkers. """
    ret = tuple(ring for unit in units(config) for ring in unit.rings())
    logger.debug("%d rings in a %dx%dx%d lattice",
                 len(ret), config.cols, config.rows, config.stacks)
    return ret
