""" Print-time scaffolding derived from the lattice geometry.

Everything here is computed from the ring placements and their extents:

- base plate below the whole lattice,
- vertical pillars from the plate to the lowest point of every ring of the
  bottom layer (and of every bottom layer linker),
- 45 degree braces from the upper linkers out to the side boundary,
  where pillars can't reach the plate through the layers below,
- joiner tabs bridging the gap between vertically adjacent cell layers,
- side walls at both X ends of the lattice.

Pillars and braces shorter than config.tolerance are dropped instead of
generating degenerate geometry. """

import collections
import functools
import logging
import math

from . import util
from . import shapes
from . import lattice
from . import extents

logger = logging.getLogger(__name__)


class BasePlate(collections.namedtuple("BasePlate", "center size")):
    __slots__ = ()
    kind = "base_plate"

    def shape(self):
        return shapes.box(*self.size).translated(self.center)


class Pillar(collections.namedtuple("Pillar", "base height diameter")):
    """ Vertical cylinder standing on `base` (center of its bottom face). """
    __slots__ = ()
    kind = "pillar"

    @property
    def top(self):
        return self.base + util.Vector(0, 0, self.height)

    def shape(self):
        return shapes.cylinder(h=self.height, d=self.diameter) \
            .translated(self.base + util.Vector(0, 0, self.height / 2))


class AngledBrace(collections.namedtuple("AngledBrace", "start end diameter")):
    """ Round beam between two points, inclined 45 degrees from vertical. """
    __slots__ = ()
    kind = "angled_brace"

    @property
    def drop(self):
        return self.start.z - self.end.z

    @property
    def length(self):
        return abs(self.end - self.start)

    def shape(self):
        direction = self.start - self.end
        angle = math.degrees(math.atan2(direction.x, direction.z))
        return shapes.cylinder(h=self.length, d=self.diameter) \
            .rotated_y(angle) \
            .translated((self.start + self.end) / 2)


class JoinerTab(collections.namedtuple("JoinerTab", "center size")):
    __slots__ = ()
    kind = "joiner_tab"

    def shape(self):
        return shapes.box(*self.size).translated(self.center)


class Wall(collections.namedtuple("Wall", "center size")):
    __slots__ = ()
    kind = "wall"

    def shape(self):
        return shapes.box(*self.size).translated(self.center)


def plate_top(config):
    """ Z coordinate of the top face of the base plate, or None for an empty lattice. """
    env = extents.envelope(config)
    if env is None:
        return None
    return env.lowest_z - config.plate_gap


def base_plate(config):
    env = extents.envelope(config)
    if env is None:
        return None
    min_x, max_x, min_y, max_y = env.footprint(config.margin)
    top = plate_top(config)
    return BasePlate(util.Vector((min_x + max_x) / 2,
                                 (min_y + max_y) / 2,
                                 top - config.plate_thickness / 2),
                     util.Vector(max_x - min_x, max_y - min_y, config.plate_thickness))


def pillar(config, placement):
    """ Pillar from the plate to the lowest point of a ring, or None if
    the ring is not above the plate. """
    contact = extents.contact_point(placement)
    bottom = plate_top(config)
    height = contact.z - bottom
    if height <= config.tolerance:
        return None
    return Pillar(util.Vector(contact.x, contact.y, bottom), height, config.pillar_d)


def brace(config, linker):
    """ 45 degree brace from the lowest point of a linker towards the side
    boundary the linker is anchored to. Never reaches below the plate top. """
    env = extents.envelope(config)
    contact = extents.contact_point(linker.ring)
    min_x, max_x, _, _ = env.footprint(config.margin)

    if linker.side is lattice.Side.MIN_X:
        run = contact.x - min_x
    else:
        run = max_x - contact.x

    drop = min(run, contact.z - plate_top(config))
    length = math.sqrt(2) * drop
    if drop <= config.tolerance or length <= config.tolerance:
        return None

    end = contact + util.Vector(linker.side.direction * drop, 0, -drop)
    return AngledBrace(contact, end, config.brace_d)


@functools.lru_cache()
def pillars(config):
    if config.is_empty():
        return ()
    bottom_units = [unit for unit in lattice.units(config) if unit.index.z == 0]
    candidates = (pillar(config, ring) for unit in bottom_units for ring in unit.rings())
    return tuple(p for p in candidates if p is not None)


@functools.lru_cache()
def braces(config):
    candidates = (brace(config, linker)
                  for linker in lattice.linkers(config)
                  if linker.index.z >= 1)
    return tuple(b for b in candidates if b is not None)


@functools.lru_cache()
def joiners(config):
    """ Tabs between every pair of vertically adjacent cells, one per ring.

    A tab sits halfway between the two layers, under the contact point of
    the ring in the upper layer. The upper layer has the opposite
    orientation, so its contact point is exactly where the ring below it
    reaches highest. """
    if config.is_empty():
        return ()
    s = lattice.spacing(config)
    size = util.Vector(config.joiner_length, config.joiner_width, config.joiner_height)
    ret = []
    for z in range(config.stacks - 1):
        for y in range(config.rows):
            for x in range(config.cols):
                upper = lattice.cell(config, x, y, z + 1)
                for ring in upper.rings():
                    offset = extents.contact_y_offset(ring.tilt, ring.major_diameter, ring.wire_diameter)
                    center = util.Vector(ring.center.x, ring.center.y + offset, (z + 0.5) * s.z)
                    ret.append(JoinerTab(center, size))
    return tuple(ret)


def walls(config):
    env = extents.envelope(config)
    if env is None:
        return ()
    min_x, max_x, min_y, max_y = env.footprint(config.margin)
    bottom = plate_top(config)
    top = env.highest_z + config.wall_extension
    size = util.Vector(config.wall_thickness, max_y - min_y, top - bottom)
    return tuple(Wall(util.Vector(x, (min_y + max_y) / 2, (bottom + top) / 2), size)
                 for x in (min_x, max_x))


@functools.lru_cache()
def supports(config):
    """ All enabled support elements of the lattice. """
    ret = []
    if config.add_base_plate_and_supports:
        plate = base_plate(config)
        if plate is not None:
            ret.append(plate)
        ret.extend(pillars(config))
        ret.extend(braces(config))
    if config.add_side_walls:
        ret.extend(walls(config))
    if config.add_support_joiners:
        ret.extend(joiners(config))
    logger.debug("%d support elements", len(ret))
    return tuple(ret)
