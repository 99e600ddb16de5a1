from .geometry import *
from .misc import *
from .types import wrap_number_like, wrap_vector_like

# pylama:ignore=W0401
