"""dctkit - DCT-II / IDCT-II engine over fixed-size float32 buffers."""

from .errors import DctError, InvalidArgumentError, IndexOutOfRangeError
from .transform import Dct2

__all__ = [
    'Dct2',
    'DctError',
    'InvalidArgumentError',
    'IndexOutOfRangeError',
]

__version__ = '0.1.0'
