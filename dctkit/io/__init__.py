"""I/O modules for dctkit."""

from .signal_reader import read_signal, get_signal_info
from .signal_writer import write_signal

__all__ = [
    'read_signal',
    'get_signal_info',
    'write_signal',
]
