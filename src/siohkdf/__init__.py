import importlib.metadata
import logging

__version__ = importlib.metadata.version(__name__)

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

class HKDFError(ValueError):
    pass


class UnsupportedHashError(HKDFError):
    pass


class InvalidLengthError(HKDFError):
    pass


class LengthTooLongError(HKDFError):
    pass


from .hashes import HashFunction
from .engine import HKDF, new, new_with_hash
from .reader import HKDFReader
from .configuration import HKDFConfiguration

# don't bloat dir(siohkdf) with useless stuff
del importlib.metadata
del logging
