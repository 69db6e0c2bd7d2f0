"""Constants for dctkit."""

import numpy as np

# Default transform size (matches the classic 8-sample block)
DEFAULT_SIZE = 8

# All basis matrices and transform buffers are single precision
COEFF_DTYPE = np.float32

# Signal file formats understood by dctkit.io
SIGNAL_SUFFIXES = ('.npy', '.raw', '.txt')

# Raw files are headerless little-endian float32
RAW_DTYPE = '<f4'

# Relative error accepted for a normalized forward/inverse round trip
ROUNDTRIP_TOLERANCE = 1e-3
