"""Frame processing utilities for long 1D signals."""

import logging

import numpy as np
from typing import Tuple

from ..constants import COEFF_DTYPE, DEFAULT_SIZE
from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def split_into_frames(signal, frame_size: int = DEFAULT_SIZE) -> Tuple[np.ndarray, dict]:
    """
    Split a 1D signal into non-overlapping frames, padding the tail if necessary.

    Args:
        signal: 1D input signal
        frame_size: Length of each frame (default: 8)

    Returns:
        Tuple of (frames array of shape (n_frames, frame_size), padding info dict)
    """
    signal = np.asarray(signal, dtype=COEFF_DTYPE)
    if signal.ndim != 1:
        raise InvalidArgumentError(f"Expected 1D signal, got {signal.ndim}D")
    if frame_size <= 0:
        raise InvalidArgumentError(f"Frame size must be positive, got {frame_size}")

    length = len(signal)
    pad = (frame_size - length % frame_size) % frame_size

    # Replicate the last sample into the tail
    if pad > 0 and length > 0:
        padded = np.pad(signal, (0, pad), mode='edge')
    else:
        padded = signal

    n_frames = len(padded) // frame_size
    frames = padded.reshape(n_frames, frame_size)

    pad_info = {
        'original_length': length,
        'pad': pad,
        'n_frames': n_frames,
        'frame_size': frame_size,
    }

    logger.debug("Split %d samples into %d frames of %d", length, n_frames, frame_size)
    return frames, pad_info


def merge_frames(frames, pad_info: dict) -> np.ndarray:
    """
    Merge frames back into a 1D signal.

    Args:
        frames: 2D array of frames in order
        pad_info: Padding info from split_into_frames

    Returns:
        Reconstructed signal with the original length
    """
    frames = np.asarray(frames, dtype=COEFF_DTYPE)
    if frames.ndim != 2:
        raise InvalidArgumentError(f"Expected 2D frames array, got {frames.ndim}D")

    return frames.reshape(-1)[:pad_info['original_length']]


def transform_frames(frames, transform) -> np.ndarray:
    """
    Apply a transform method (e.g. ``Dct2.direct_norm``) to every frame.

    Args:
        frames: 2D array of shape (n_frames, frame_size)
        transform: Bound engine method taking (input, output)

    Returns:
        2D float32 array of transformed frames
    """
    frames = np.asarray(frames, dtype=COEFF_DTYPE)
    if frames.ndim != 2:
        raise InvalidArgumentError(f"Expected 2D frames array, got {frames.ndim}D")

    result = np.zeros_like(frames)
    for frame, out in zip(frames, result):
        transform(frame, out)
    return result
