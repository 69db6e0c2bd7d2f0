"""Abstract interface shared by DCT engines."""

import numpy as np
from abc import ABC, abstractmethod


class BaseDct(ABC):
    """
    Base class for DCT engines.

    All engines must implement:
    - size: the transform size fixed at construction
    - direct(): forward transform without normalization
    - direct_norm(): forward transform with orthonormal scaling
    - inverse(): inverse transform without normalization

    Each transform reads ``samples``/``coeffs`` and fills ``output`` in
    place. When ``output`` is None a buffer of length ``size`` is allocated.
    The filled buffer is returned.
    """

    @property
    @abstractmethod
    def size(self) -> int:
        """Transform size."""

    @abstractmethod
    def direct(self, samples, output=None) -> np.ndarray:
        """Forward transform (no normalization)."""

    @abstractmethod
    def direct_norm(self, samples, output=None) -> np.ndarray:
        """Forward transform (orthonormal scaling)."""

    @abstractmethod
    def inverse(self, coeffs, output=None) -> np.ndarray:
        """Inverse transform (no normalization)."""
