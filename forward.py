#!/usr/bin/env python3
"""
DCT-II Forward Transform CLI

Usage:
    python forward.py --input <path> --output <path> [--size N] [--norm] [--frame]

Example:
    python forward.py --input data/signal.npy --output coeffs.npy --norm
"""

import argparse
import logging
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dctkit.constants import DEFAULT_SIZE
from dctkit.io import read_signal, write_signal
from dctkit.log import setup_logging
from dctkit.transform import Dct2, split_into_frames, transform_frames


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='DCT-II Forward Transform - Signal to cosine coefficients',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Transform a whole signal (size = signal length)
  python forward.py --input data/signal.npy --output coeffs.npy

  # Orthonormal coefficients
  python forward.py --input data/signal.npy --output coeffs.npy --norm

  # Cut a long signal into 64-sample frames and transform each one
  python forward.py --input data/long.raw --output frames.npy --size 64 --frame --verbose
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input signal path (.npy, .raw or .txt)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output coefficient path (.npy, .raw or .txt)')

    # Optional arguments
    parser.add_argument('--size', '-n', type=int,
                        help=f'Transform size (default: signal length, '
                             f'or {DEFAULT_SIZE} with --frame)')
    parser.add_argument('--norm', action='store_true',
                        help='Apply orthonormal scaling (DirectNorm)')
    parser.add_argument('--frame', action='store_true',
                        help='Split the signal into size-N frames')
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
            print(f"Reading input: {args.input}")

        start_time = time.time()
        signal = read_signal(args.input)

        if signal.ndim != 1:
            raise ValueError(f"Expected a 1D signal, got shape {signal.shape}")

        if args.frame:
            size = args.size if args.size is not None else DEFAULT_SIZE
        else:
            size = args.size if args.size is not None else len(signal)

        if args.verbose:
            print(f"  Length: {len(signal)}")
            print(f"  Transform size: {size}")
            print(f"  Normalized: {args.norm}")

        dct = Dct2(size)
        transform = dct.direct_norm if args.norm else dct.direct

        if args.frame:
            frames, pad_info = split_into_frames(signal, size)
            coeffs = transform_frames(frames, transform)
            if args.verbose:
                print(f"  Frames: {pad_info['n_frames']} (padding {pad_info['pad']})")
        else:
            coeffs = transform(signal)

        path = write_signal(coeffs, args.output)
        elapsed = time.time() - start_time

        if args.verbose:
            print(f"\nResults:")
            print(f"  Coefficient shape: {coeffs.shape}")
            print(f"  Transform time: {elapsed:.4f}s")
            print(f"\nOutput written to: {path}")
        else:
            print(f"Transformed: {args.input} -> {path} "
                  f"(size {size}, {'normalized' if args.norm else 'unnormalized'})")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
