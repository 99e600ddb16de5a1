""" Parameters of a printable ring lattice.

Config is the only input of the whole pipeline; everything else is derived
from it by pure functions. All lengths are in millimeters. """

import argparse
import collections
import numbers

_FIELDS = collections.OrderedDict([
    # Ring geometry
    ("ring_id", 10.0),  # Inner diameter of a ring
    ("wire_d", 1.5),  # Thickness of the ring wire

    # Lattice dimensions
    ("cols", 3),
    ("rows", 3),
    ("stacks", 3),

    # Feature toggles
    ("add_base_plate_and_supports", True),
    ("add_side_walls", False),
    ("add_support_joiners", False),

    # Base plate, pillars and braces
    ("plate_gap", 0.5),  # Distance between the lowest ring and top of the plate
    ("plate_thickness", 1.0),
    ("margin", 2.0),  # Footprint inflation for plate and walls
    ("pillar_d", 1.0),
    ("brace_d", 1.0),

    # Side walls
    ("wall_thickness", 1.0),
    ("wall_extension", 1.0),  # How far the walls reach above the highest ring

    # Joiner tabs
    ("joiner_length", 1.0),
    ("joiner_width", 1.0),
    ("joiner_height", 2.0),

    # Shortest pillar or brace worth generating
    ("tolerance", 0.001),
])

_POSITIVE_FIELDS = ["ring_id", "wire_d",
                    "plate_thickness", "pillar_d", "brace_d",
                    "wall_thickness",
                    "joiner_length", "joiner_width", "joiner_height",
                    "tolerance"]

_NON_NEGATIVE_FIELDS = ["plate_gap", "margin", "wall_extension"]


class Config(collections.namedtuple("Config", list(_FIELDS), defaults=list(_FIELDS.values()))):
    """ Immutable record of lattice dimensions, ring sizes and feature toggles.

    Use `_replace` to derive modified configurations. Lattice dimensions are
    not validated, non-positive counts simply give an empty lattice. """

    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        self = super().__new__(cls, *args, **kwargs)
        for name in _POSITIVE_FIELDS:
            if not getattr(self, name) > 0:
                raise ValueError("{} must be positive, got {!r}".format(name, getattr(self, name)))
        for name in _NON_NEGATIVE_FIELDS:
            if not getattr(self, name) >= 0:
                raise ValueError("{} must not be negative, got {!r}".format(name, getattr(self, name)))
        for name in ("cols", "rows", "stacks"):
            if not isinstance(getattr(self, name), numbers.Integral):
                raise ValueError("{} must be an integer, got {!r}".format(name, getattr(self, name)))
        return self

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    def _replace(self, **kwargs):
        fields = self._asdict()
        fields.update(kwargs)
        return type(self)(**fields)

    def is_empty(self):
        """ True if the lattice has no rings at all. """
        return self.cols <= 0 or self.rows <= 0 or self.stacks <= 0


def defaults():
    """ Return a mapping of field names to their default values. """
    return collections.OrderedDict(_FIELDS)


def add_arguments(parser):
    """ Add an option for every Config field to an argparse parser. """
    group = parser.add_argument_group("lattice")
    for name, default in _FIELDS.items():
        option = "--" + name.replace("_", "-")
        if isinstance(default, bool):
            group.add_argument(option, dest=name, action=argparse.BooleanOptionalAction, default=None)
        else:
            group.add_argument(option, dest=name, type=type(default), default=None,
                               help="default {}".format(default))
    return parser


def from_arguments(args, base=None):
    """ Build a Config from parsed arguments, fields not given on the command line
    are taken from `base` (or the defaults). """
    if base is None:
        base = Config()
    overrides = {name: getattr(args, name) for name in _FIELDS
                 if getattr(args, name, None) is not None}
    return base._replace(**overrides)
