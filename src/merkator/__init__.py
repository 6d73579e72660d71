import logging
from importlib.metadata import version, PackageNotFoundError

from . import conf
from . import coordinate
from . import errors
from . import frame
from . import geo
from .coordinate import Coordinate, parse, from_numbers

try:
    __version__ = version("merkator")
except PackageNotFoundError:
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())
