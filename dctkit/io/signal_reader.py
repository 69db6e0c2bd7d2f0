"""Signal reader supporting NumPy, raw float32 and text formats."""

import numpy as np
from pathlib import Path

from ..constants import COEFF_DTYPE, RAW_DTYPE
from ..errors import InvalidArgumentError


def read_signal(path: str) -> np.ndarray:
    """
    Read a real-valued signal from various formats.

    Args:
        path: Path to the signal file (.npy, .raw or .txt)

    Returns:
        float32 numpy array, 1D for a single signal or 2D for a stack of frames

    Raises:
        InvalidArgumentError: If format is unsupported or the data has the wrong shape
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == '.npy':
        data = np.load(str(path))
    elif suffix == '.raw':
        data = _read_raw(path)
    elif suffix == '.txt':
        data = _read_text(path)
    else:
        raise InvalidArgumentError(f"Unsupported file format: {suffix}")

    if data.ndim not in (1, 2):
        raise InvalidArgumentError(f"Expected 1D or 2D array, got {data.ndim}D")

    if not np.issubdtype(data.dtype, np.number) or np.iscomplexobj(data):
        raise InvalidArgumentError(f"Expected real-valued data, got {data.dtype}")

    return data.astype(COEFF_DTYPE)


def _read_text(path: Path) -> np.ndarray:
    """Read a whitespace separated text file, restoring a `# shape:` header if present."""
    with open(path, 'r', encoding='utf-8') as f:
        first = f.readline().strip()

    data = np.loadtxt(str(path), dtype=np.float64, ndmin=1)

    if first.startswith('# shape:'):
        try:
            shape = tuple(int(d) for d in first[len('# shape:'):].split())
        except ValueError:
            raise InvalidArgumentError(f"Malformed shape header: {first}")
        if int(np.prod(shape)) != data.size:
            raise InvalidArgumentError(
                f"Shape header {shape} does not match {data.size} values")
        data = data.reshape(shape)

    return data


def _read_raw(path: Path) -> np.ndarray:
    """Read a headerless little-endian float32 file."""
    with open(path, 'rb') as f:
        raw = f.read()

    itemsize = np.dtype(RAW_DTYPE).itemsize
    if len(raw) % itemsize != 0:
        raise InvalidArgumentError(
            f"Raw file size {len(raw)} is not a multiple of {itemsize} bytes")

    return np.frombuffer(raw, dtype=RAW_DTYPE)


def get_signal_info(path: str) -> dict:
    """
    Get information about a signal file.

    Returns:
        Dictionary with 'shape', 'length' and 'dtype'
    """
    data = read_signal(path)
    return {
        'shape': data.shape,
        'length': data.shape[-1],
        'dtype': str(data.dtype),
    }
