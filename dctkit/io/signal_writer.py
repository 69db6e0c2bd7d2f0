"""Signal writer supporting NumPy, raw float32 and text formats."""

import numpy as np
from pathlib import Path

from ..constants import COEFF_DTYPE, RAW_DTYPE, SIGNAL_SUFFIXES
from ..errors import InvalidArgumentError


def write_signal(signal: np.ndarray, path: str, format: str = None) -> Path:
    """
    Write a signal (or a stack of frames) to file.

    Args:
        signal: 1D or 2D numpy array
        path: Output file path
        format: Output format ('npy', 'raw' or 'txt'). Auto-detected from extension if None.

    Returns:
        The path actually written

    Raises:
        InvalidArgumentError: If format is unsupported or the array shape is invalid
    """
    path = Path(path)
    signal = np.asarray(signal, dtype=COEFF_DTYPE)

    if format is None:
        suffix = path.suffix.lower()
        if suffix in SIGNAL_SUFFIXES:
            format = suffix[1:]
        else:
            # Default to npy
            format = 'npy'
            path = path.with_suffix('.npy')

    if signal.ndim not in (1, 2):
        raise InvalidArgumentError(f"Expected 1D or 2D array, got {signal.ndim}D")

    if format == 'npy':
        np.save(str(path), signal)
    elif format == 'raw':
        if signal.ndim != 1:
            raise InvalidArgumentError("Raw format only stores 1D signals")
        with open(path, 'wb') as f:
            f.write(signal.astype(RAW_DTYPE).tobytes())
    elif format == 'txt':
        # Text loses the array shape, so record it in a comment header
        header = 'shape: ' + ' '.join(str(d) for d in signal.shape)
        np.savetxt(str(path), signal, fmt='%.9g', header=header)
    else:
        raise InvalidArgumentError(f"Unsupported format: {format}")

    return path
