"""Error types raised by dctkit."""


class DctError(Exception):
    """Base class for dctkit errors."""


class InvalidArgumentError(DctError, ValueError):
    """Raised for a bad transform size or a malformed buffer/argument."""


class IndexOutOfRangeError(DctError, IndexError):
    """Raised when a buffer is longer than the engine's transform size."""
