"""Checkpoint 1: Basis Matrix Precomputation."""

import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import numpy as np
import pytest

from dctkit import Dct2, InvalidArgumentError
from dctkit.transform import create_forward_basis, create_inverse_basis


def test_basis_shapes():
    """Test that both bases are N x N float32."""
    print("=" * 60)
    print("Test 1: Basis Shapes")
    print("=" * 60)

    for size in [1, 2, 4, 8, 33, 256]:
        dct = Dct2(size)

        assert dct.size == size, f"Expected size {size}, got {dct.size}"
        assert dct.forward_basis.shape == (size, size), \
            f"Forward basis has wrong shape: {dct.forward_basis.shape}"
        assert dct.inverse_basis.shape == (size, size), \
            f"Inverse basis has wrong shape: {dct.inverse_basis.shape}"
        assert dct.forward_basis.dtype == np.float32
        assert dct.inverse_basis.dtype == np.float32

        print(f"   ✓ size {size}: {dct.forward_basis.shape}")

    print("✅ Basis shape test passed")


def test_forward_basis_values():
    """Test forward basis against the closed-form cosine formula."""
    print("\n" + "=" * 60)
    print("Test 2: Forward Basis Values")
    print("=" * 60)

    size = 16
    F = create_forward_basis(size)

    for k in range(size):
        for n in range(size):
            expected = 2 * np.cos(np.pi * (2 * n + 1) * k / (2 * size))
            assert abs(F[k, n] - expected) < 1e-6, \
                f"F[{k}, {n}] = {F[k, n]}, expected {expected}"

    # Row 0 is the constant basis function
    assert np.allclose(F[0], 2.0), "DC row should be all 2s"
    assert np.abs(F).max() <= 2.0 + 1e-6, "Coefficients must be bounded by 2"

    print("   ✓ All entries match 2*cos(pi*(2n+1)*k/(2N))")
    print("✅ Forward basis test passed")


def test_inverse_basis_values():
    """Test inverse basis, including its empty DC column."""
    print("\n" + "=" * 60)
    print("Test 3: Inverse Basis Values")
    print("=" * 60)

    size = 12
    G = create_inverse_basis(size)

    assert np.all(G[:, 0] == 0), "Column 0 of the inverse basis must stay zero"
    print("   ✓ Column 0 is zero")

    for k in range(size):
        for n in range(1, size):
            expected = 2 * np.cos(np.pi * (2 * k + 1) * n / (2 * size))
            assert abs(G[k, n] - expected) < 1e-6, \
                f"G[{k}, {n}] = {G[k, n]}, expected {expected}"

    # Apart from column 0, the inverse basis is the forward basis transposed
    F = create_forward_basis(size)
    assert np.allclose(G[:, 1:], F.T[:, 1:], atol=1e-6), \
        "Inverse basis should mirror the transposed forward basis"

    print("   ✓ Columns 1..N-1 match 2*cos(pi*(2k+1)*n/(2N))")
    print("✅ Inverse basis test passed")


def test_bases_are_read_only():
    """Test that precomputed bases cannot be mutated."""
    print("\n" + "=" * 60)
    print("Test 4: Read-only Bases")
    print("=" * 60)

    dct = Dct2(8)
    before = dct.forward_basis.copy()

    with pytest.raises(ValueError):
        dct.forward_basis[0, 0] = 123.0
    with pytest.raises(ValueError):
        dct.inverse_basis[1, 1] = 123.0
    with pytest.raises(AttributeError):
        dct.size = 16

    assert np.array_equal(dct.forward_basis, before), "Basis changed after failed write"
    assert dct.size == 8

    print("   ✓ Bases and size are immutable")
    print("✅ Read-only test passed")


def test_invalid_sizes():
    """Test that bad transform sizes are rejected."""
    print("\n" + "=" * 60)
    print("Test 5: Invalid Sizes")
    print("=" * 60)

    for bad in [0, -1, -64, 2.5, 8.0, True, "8", None]:
        with pytest.raises(InvalidArgumentError):
            Dct2(bad)
        print(f"   ✓ {bad!r} rejected")

    # InvalidArgumentError is a ValueError
    with pytest.raises(ValueError):
        Dct2(0)
    with pytest.raises(InvalidArgumentError):
        create_forward_basis(0)

    # numpy integers are accepted
    assert Dct2(np.int64(8)).size == 8

    print("✅ Invalid size test passed")


def main():
    """Run all Checkpoint 1 tests."""
    from _runner import run_checkpoint

    return run_checkpoint("CHECKPOINT 1: BASIS PRECOMPUTATION", [
        ("Basis Shapes", test_basis_shapes),
        ("Forward Basis Values", test_forward_basis_values),
        ("Inverse Basis Values", test_inverse_basis_values),
        ("Read-only Bases", test_bases_are_read_only),
        ("Invalid Sizes", test_invalid_sizes),
    ])


if __name__ == "__main__":
    sys.exit(main())
