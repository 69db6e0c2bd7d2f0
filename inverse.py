#!/usr/bin/env python3
"""
IDCT-II Inverse Transform CLI

Usage:
    python inverse.py --input <path> --output <path> [--normalized] [--length L]

Example:
    python inverse.py --input coeffs.npy --output recovered.npy --normalized
"""

import argparse
import logging
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import numpy as np
from dctkit.io import read_signal, write_signal
from dctkit.log import setup_logging
from dctkit.transform import (
    Dct2, transform_frames, rescale_normalized, unnormalized_gain
)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='IDCT-II Inverse Transform - Cosine coefficients to signal',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Invert unnormalized coefficients
  python inverse.py --input coeffs.npy --output recovered.npy

  # Invert orthonormal coefficients produced with --norm
  python inverse.py --input coeffs.npy --output recovered.npy --normalized

  # Merge framed coefficients back into a 1000-sample signal
  python inverse.py --input frames.npy --output recovered.raw --length 1000
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input coefficient path (.npy, .raw or .txt)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output signal path (.npy, .raw or .txt)')

    # Optional arguments
    parser.add_argument('--normalized', action='store_true',
                        help='Coefficients were produced by DirectNorm')
    parser.add_argument('--length', '-l', type=int,
                        help='Crop the merged signal to this length')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(level=logging.DEBUG)

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.verbose:
            print(f"Reading coefficients: {args.input}")

        start_time = time.time()
        coeffs = np.atleast_2d(read_signal(args.input))
        size = coeffs.shape[1]

        if args.verbose:
            print(f"  Frames: {coeffs.shape[0]}")
            print(f"  Transform size: {size}")

        dct = Dct2(size)

        if args.normalized:
            signal = transform_frames(rescale_normalized(coeffs, size), dct.inverse)
        else:
            signal = transform_frames(coeffs, dct.inverse)
            signal /= unnormalized_gain(size)

        signal = signal.reshape(-1)
        if args.length is not None:
            if not 0 <= args.length <= len(signal):
                raise ValueError(
                    f"Length must be in range [0, {len(signal)}], got {args.length}")
            signal = signal[:args.length]

        path = write_signal(signal, args.output)
        elapsed = time.time() - start_time

        if args.verbose:
            print(f"\nReconstructed signal:")
            print(f"  Length: {len(signal)}")
            print(f"  Range: [{signal.min() if len(signal) else 0}, "
                  f"{signal.max() if len(signal) else 0}]")
            print(f"  Inverse time: {elapsed:.4f}s")
            print(f"\nOutput written to: {path}")
        else:
            print(f"Inverted: {args.input} -> {path} ({len(signal)} samples)")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
