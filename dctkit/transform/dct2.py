"""DCT-II / IDCT-II implementation using precomputed basis matrices."""

import logging

import numpy as np

from ..constants import COEFF_DTYPE
from ..errors import InvalidArgumentError, IndexOutOfRangeError
from .base import BaseDct

logger = logging.getLogger(__name__)


def _validate_size(size) -> int:
    """Return size as a plain int, rejecting non-integers and non-positive values."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidArgumentError(
            f"Transform size must be an integer, got {type(size).__name__}")
    if size <= 0:
        raise InvalidArgumentError(f"Transform size must be positive, got {size}")
    return int(size)


def create_forward_basis(size: int) -> np.ndarray:
    """
    Generate the forward DCT-II basis matrix of size N x N.

    The matrix F has elements:
        F[k, n] = 2 * cos((2n + 1) * k * pi / (2N))

    The cosine is evaluated in double precision and stored as float32.

    Args:
        size: Size of the transform

    Returns:
        N x N float32 forward basis
    """
    size = _validate_size(size)
    m = np.pi / (2 * size)

    k = np.arange(size).reshape(-1, 1)
    n = np.arange(size).reshape(1, -1)

    return 2 * np.cos((2 * n + 1) * k * m).astype(COEFF_DTYPE)


def create_inverse_basis(size: int) -> np.ndarray:
    """
    Generate the inverse DCT-II basis matrix of size N x N.

    The matrix G has elements:
        G[k, n] = 2 * cos((2k + 1) * n * pi / (2N))    for n >= 1
        G[k, 0] = 0

    Column 0 is left empty: the inverse transform seeds every output
    sample with the DC coefficient instead of reading it from the matrix.

    Args:
        size: Size of the transform

    Returns:
        N x N float32 inverse basis
    """
    size = _validate_size(size)
    m = np.pi / (2 * size)

    k = np.arange(size).reshape(-1, 1)
    n = np.arange(1, size).reshape(1, -1)

    basis = np.zeros((size, size), dtype=COEFF_DTYPE)
    basis[:, 1:] = 2 * np.cos((2 * k + 1) * n * m).astype(COEFF_DTYPE)
    return basis


class Dct2(BaseDct):
    """
    Discrete Cosine Transform of type II.

    Both basis matrices are computed once in the constructor and frozen
    (read-only numpy arrays), so one engine can be shared between threads
    as long as every thread writes to its own output buffer.

    Buffer lengths are taken from the buffers themselves: an input of
    length N and an output of length M use the top-left M x N corner of
    the basis. Neither may exceed ``size``.

    Usage:
        dct = Dct2(64)
        coeffs = dct.direct_norm(frame)
    """

    def __init__(self, size: int):
        self._size = _validate_size(size)

        self._forward = create_forward_basis(self._size)
        self._inverse = create_inverse_basis(self._size)
        self._forward.setflags(write=False)
        self._inverse.setflags(write=False)

        # Orthonormal scaling: all terms by norm, DC term additionally by norm0
        self._norm = COEFF_DTYPE(np.sqrt(0.5 / self._size))
        self._norm0 = COEFF_DTYPE(np.sqrt(0.5))

        logger.debug("Precomputed DCT-II bases for size %d", self._size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def forward_basis(self) -> np.ndarray:
        """Read-only forward basis (size x size)."""
        return self._forward

    @property
    def inverse_basis(self) -> np.ndarray:
        """Read-only inverse basis (size x size), column 0 is zero."""
        return self._inverse

    def __repr__(self):
        return f"{self.__class__.__name__}(size={self._size})"

    def direct(self, samples, output=None) -> np.ndarray:
        """
        DCT-II without normalization.

            output[k] = sum_n samples[n] * F[k, n]

        Args:
            samples: 1D input of length N <= size
            output: 1D mutable buffer of length M <= size (allocated if None)

        Returns:
            The filled output buffer

        Raises:
            IndexOutOfRangeError: If N or M exceeds the transform size
        """
        x = self._as_vector(samples, 'input')
        output = self._prepare_output(output)
        n, m = len(x), len(output)
        self._check_lengths('direct', n, m)

        output[:] = self._forward[:m, :n] @ x
        return output

    def direct_norm(self, samples, output=None) -> np.ndarray:
        """
        DCT-II with orthonormal normalization.

        The raw sum is scaled by sqrt(0.5 / size) and then the DC term
        alone is scaled again by sqrt(0.5). The two multiplies are kept
        separate so results match the unfused reference bit for bit.

        Args:
            samples: 1D input of length N <= size
            output: 1D mutable buffer of length M <= size (allocated if None)

        Returns:
            The filled output buffer
        """
        x = self._as_vector(samples, 'input')
        output = self._prepare_output(output)
        n, m = len(x), len(output)
        self._check_lengths('direct_norm', n, m)

        if m == 0:
            return output

        result = self._forward[:m, :n] @ x
        result *= self._norm
        result[0] *= self._norm0

        output[:] = result
        return output

    def inverse(self, coeffs, output=None) -> np.ndarray:
        """
        IDCT-II without normalization.

            output[k] = coeffs[0] + sum_{n>=1} coeffs[n] * G[k, n]

        The DC coefficient is added unscaled to every sample. Undo a
        ``direct`` call by dividing the result by 2 * size.

        Args:
            coeffs: 1D coefficients of length N <= size
            output: 1D mutable buffer of length M <= size (allocated if None)

        Returns:
            The filled output buffer

        Raises:
            IndexOutOfRangeError: If N or M exceeds the transform size, or
                if the input is empty while the output is not
        """
        x = self._as_vector(coeffs, 'input')
        output = self._prepare_output(output)
        n, m = len(x), len(output)
        self._check_lengths('inverse', n, m)

        if m == 0:
            return output
        if n == 0:
            raise IndexOutOfRangeError(
                "inverse: empty input has no DC coefficient to seed the output")

        output[:] = x[0] + self._inverse[:m, 1:n] @ x[1:]
        return output

    def _as_vector(self, data, name: str) -> np.ndarray:
        x = np.asarray(data, dtype=COEFF_DTYPE)
        if x.ndim != 1:
            raise InvalidArgumentError(f"Expected 1D {name} buffer, got {x.ndim}D")
        return x

    def _prepare_output(self, output):
        if output is None:
            return np.zeros(self._size, dtype=COEFF_DTYPE)
        if np.ndim(output) != 1:
            raise InvalidArgumentError(
                f"Expected 1D output buffer, got {np.ndim(output)}D")
        if isinstance(output, np.ndarray) and not np.issubdtype(output.dtype, np.floating):
            raise InvalidArgumentError(
                f"Expected a floating-point output buffer, got {output.dtype}")
        return output

    def _check_lengths(self, op: str, n: int, m: int) -> None:
        if n > self._size:
            raise IndexOutOfRangeError(
                f"{op}: input length {n} exceeds transform size {self._size}")
        if m > self._size:
            raise IndexOutOfRangeError(
                f"{op}: output length {m} exceeds transform size {self._size}")
