import collections
import logging

from . import shapes
from . import lattice
from . import supports

logger = logging.getLogger(__name__)


def lattice_shape(config):
    """ Union of all rings of the lattice. Independent of the support toggles. """
    return shapes.union(ring.shape() for ring in lattice.ring_placements(config))


def supports_shape(config):
    """ Union of all enabled support elements. """
    return shapes.union(element.shape() for element in supports.supports(config))


def summary(config):
    """ Count rings and support elements of the assembly by kind. """
    counter = collections.Counter()
    for unit in lattice.units(config):
        counter[unit.kind + "_ring"] += len(unit.rings())
    for element in supports.supports(config):
        counter[element.kind] += 1
    return counter


def assemble(config):
    """ Return the complete printable shape for the given configuration. """
    counts = summary(config)
    logger.info("assembling %s", ", ".join("{} {}".format(count, kind)
                                           for kind, count in sorted(counts.items())))
    return shapes.union([lattice_shape(config), supports_shape(config)])
