"""Scale factors that pair the forward transforms with the unnormalized inverse."""

import numpy as np

from ..constants import COEFF_DTYPE
from ..errors import InvalidArgumentError


def rescale_normalized(coeffs, size: int) -> np.ndarray:
    """
    Prepare ``direct_norm`` output for ``inverse``.

    ``inverse`` adds the DC term unscaled and weights the rest by
    2 * cos(...), so the orthonormal coefficients are divided by
    sqrt(N) (DC) and sqrt(2N) (all others).

    Args:
        coeffs: Coefficients (last axis is the frequency axis)
        size: Transform size N

    Returns:
        Rescaled float32 coefficients
    """
    if size <= 0:
        raise InvalidArgumentError(f"Transform size must be positive, got {size}")

    z = np.array(coeffs, dtype=COEFF_DTYPE)
    z /= COEFF_DTYPE(np.sqrt(2.0 * size))
    z[..., :1] *= COEFF_DTYPE(np.sqrt(2.0))
    return z


def unnormalized_gain(size: int) -> float:
    """Gain of ``inverse(direct(x))`` relative to ``x``: 2 * N."""
    if size <= 0:
        raise InvalidArgumentError(f"Transform size must be positive, got {size}")
    return 2.0 * size
