"""Error metrics for checking transform reconstructions."""

import numpy as np


def calculate_rmse(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Root Mean Squared Error (RMSE).

    Args:
        original: Original signal
        reconstructed: Reconstructed signal

    Returns:
        RMSE value
    """
    diff = np.asarray(original, np.float64) - np.asarray(reconstructed, np.float64)
    return float(np.sqrt(np.mean(diff ** 2)))


def calculate_max_error(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Largest absolute sample difference."""
    diff = np.asarray(original, np.float64) - np.asarray(reconstructed, np.float64)
    if diff.size == 0:
        return 0.0
    return float(np.abs(diff).max())


def calculate_energy(signal: np.ndarray) -> float:
    """Sum of squared samples."""
    x = np.asarray(signal, np.float64)
    return float(np.sum(x ** 2))


def calculate_relative_error(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate relative L2 error.

        rel = ||original - reconstructed|| / ||original||

    Returns 0 for two all-zero signals and inf when only the original is zero.
    """
    diff = np.asarray(original, np.float64) - np.asarray(reconstructed, np.float64)
    num = np.sqrt(np.sum(diff ** 2))
    den = np.sqrt(calculate_energy(original))

    if den == 0:
        return 0.0 if num == 0 else float('inf')
    return float(num / den)


def calculate_snr(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Calculate Signal-to-Noise Ratio (SNR) of a reconstruction.

    SNR = 10 * log10(energy(original) / energy(original - reconstructed))

    Returns:
        SNR in dB (inf for a perfect reconstruction)
    """
    diff = np.asarray(original, np.float64) - np.asarray(reconstructed, np.float64)
    noise = np.sum(diff ** 2)

    if noise == 0:
        return float('inf')

    return float(10 * np.log10(calculate_energy(original) / noise))
