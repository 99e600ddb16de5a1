from . import util
from . import shapes
from . import lattice
from . import extents
from . import supports

from .config import Config
from .assembler import assemble
from .rendering import commandline_render

# pylama:ignore=W0611
