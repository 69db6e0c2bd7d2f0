"""Error metrics for dctkit."""

from .quality import (
    calculate_rmse,
    calculate_max_error,
    calculate_energy,
    calculate_relative_error,
    calculate_snr,
)

__all__ = [
    'calculate_rmse',
    'calculate_max_error',
    'calculate_energy',
    'calculate_relative_error',
    'calculate_snr',
]
