#!/usr/bin/env python3
"""
Run experiments for the DCT-II engine.

Measures round-trip error and transform time across transform sizes and
writes metrics.json for the report.
"""

import sys
import os
import json
import time
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from dctkit.constants import ROUNDTRIP_TOLERANCE
from dctkit.metrics import (
    calculate_rmse,
    calculate_max_error,
    calculate_relative_error,
    calculate_snr,
)
from dctkit.transform import (
    Dct2,
    split_into_frames,
    merge_frames,
    transform_frames,
    rescale_normalized,
)


def run_experiment(signal: np.ndarray, size: int, repeats: int = 20):
    """Run a framed DirectNorm -> Inverse round trip at one transform size."""
    start = time.perf_counter()
    dct = Dct2(size)
    setup_time = time.perf_counter() - start

    frames, pad_info = split_into_frames(signal, size)

    start = time.perf_counter()
    for _ in range(repeats):
        coeffs = transform_frames(frames, dct.direct_norm)
    forward_time = (time.perf_counter() - start) / repeats

    start = time.perf_counter()
    for _ in range(repeats):
        recovered_frames = transform_frames(rescale_normalized(coeffs, size), dct.inverse)
    inverse_time = (time.perf_counter() - start) / repeats

    recovered = merge_frames(recovered_frames, pad_info)
    rel_error = calculate_relative_error(signal, recovered)

    return {
        'size': size,
        'n_frames': pad_info['n_frames'],
        'rmse': calculate_rmse(signal, recovered),
        'max_error': calculate_max_error(signal, recovered),
        'relative_error': rel_error,
        'snr_db': round(calculate_snr(signal, recovered), 2),
        'within_tolerance': rel_error < ROUNDTRIP_TOLERANCE,
        'setup_ms': round(setup_time * 1000, 4),
        'forward_ms': round(forward_time * 1000, 4),
        'inverse_ms': round(inverse_time * 1000, 4),
    }


def main():
    """Run all experiments."""
    print("=" * 60)
    print("DCT-II ENGINE - EXPERIMENT RUNNER")
    print("=" * 60)

    # Configuration
    sizes = [8, 16, 32, 64, 128, 256, 512]
    signal_length = 4096
    sample_rate = 8000
    results_dir = "results"

    os.makedirs(results_dir, exist_ok=True)

    # Test signal: two tones plus noise
    rng = np.random.default_rng(0)
    t = np.arange(signal_length) / sample_rate
    signal = (np.sin(2 * np.pi * 440 * t)
              + 0.5 * np.sin(2 * np.pi * 1250 * t)
              + 0.1 * rng.standard_normal(signal_length)).astype(np.float32)

    print(f"\nSignal: {signal_length} samples at {sample_rate} Hz")

    print("\n" + "=" * 60)
    print("ROUND-TRIP EXPERIMENTS")
    print("=" * 60)

    all_results = []
    for size in sizes:
        print(f"\n--- Size = {size} ---")
        result = run_experiment(signal, size)
        all_results.append(result)

        print(f"  Relative error: {result['relative_error']:.2e}")
        print(f"  Max error:      {result['max_error']:.2e}")
        print(f"  SNR:            {result['snr_db']:.2f} dB")
        print(f"  Forward:        {result['forward_ms']:.3f} ms")
        print(f"  Inverse:        {result['inverse_ms']:.3f} ms")

    output = {
        "experiment_date": datetime.now().isoformat(),
        "signal_info": {
            "length": signal_length,
            "sample_rate": sample_rate,
            "dtype": str(signal.dtype),
        },
        "engine_info": {
            "transform": "DCT-II (direct matrix multiplication)",
            "normalization": "orthonormal forward, rescaled unnormalized inverse",
            "tolerance": ROUNDTRIP_TOLERANCE,
        },
        "round_trip_results": all_results,
    }

    output_path = os.path.join(results_dir, "metrics.json")
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False)

    print("\n" + "=" * 60)
    print("EXPERIMENT COMPLETE")
    print("=" * 60)
    print(f"\nResults saved to: {output_path}")

    # Summary table
    print("\n" + "-" * 60)
    print("SUMMARY TABLE")
    print("-" * 60)
    print(f"{'Size':>6} {'Rel. error':>12} {'SNR (dB)':>10} {'Fwd (ms)':>10} {'Inv (ms)':>10}")
    print("-" * 60)
    for r in all_results:
        print(f"{r['size']:>6} {r['relative_error']:>12.2e} {r['snr_db']:>10.2f} "
              f"{r['forward_ms']:>10.3f} {r['inverse_ms']:>10.3f}")
    print("-" * 60)

    return 0 if all(r['within_tolerance'] for r in all_results) else 1


if __name__ == "__main__":
    sys.exit(main())
