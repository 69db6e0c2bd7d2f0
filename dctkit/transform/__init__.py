"""Transform modules for dctkit."""

from .base import BaseDct
from .dct2 import Dct2, create_forward_basis, create_inverse_basis
from .framing import split_into_frames, merge_frames, transform_frames
from .scaling import rescale_normalized, unnormalized_gain

__all__ = [
    'BaseDct',
    'Dct2',
    'create_forward_basis',
    'create_inverse_basis',
    'split_into_frames',
    'merge_frames',
    'transform_frames',
    'rescale_normalized',
    'unnormalized_gain',
]
