#!/usr/bin/env python3
"""
Unit tests for the compact 18-bit float codec.
"""

import sys
from pathlib import Path
import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from floatpack.bits import float_to_bits, bits_to_float
from floatpack.compact18 import compress18, decompress18, Compact18Codec


def random_in_range(n: int) -> np.ndarray:
    """Random binary32 values whose exponent fits the 5-bit field."""
    sign = np.random.randint(0, 2, n).astype(np.int64) << 31
    exponent = np.random.randint(0x70, 0x70 + 32, n).astype(np.int64) << 23
    mantissa = np.random.randint(0, 1 << 23, n).astype(np.int64)
    return bits_to_float(sign | exponent | mantissa)


def test_layout():
    """Test [sign:1][exponent:5][mantissa:12] packing."""
    assert compress18(1.0) == 0xF000
    assert compress18(-1.0) == 0x2F000
    assert compress18(1.5) == 0xF800
    assert compress18(2.0 ** -15) == 0x00000
    assert compress18(1.0).dtype == np.uint32

    assert decompress18(0xF000) == 1.0
    assert decompress18(0x2F800) == -1.5

    print("✓ Bit layout")


def test_reference_value():
    """-724.99 keeps sign and exponent, mantissa truncated to 12 bits."""
    x = np.float32(-724.99)
    restored = decompress18(compress18(x))

    assert restored == np.float32(-724.875)
    assert float_to_bits(restored) == float_to_bits(x) & 0xFFFFF800

    print("✓ Reference value")


def test_roundtrip_truncates_mantissa():
    """In-range values lose only the low 11 mantissa bits."""
    np.random.seed(42)
    values = random_in_range(10000)

    codes = compress18(values)
    assert np.all(codes < (1 << 18))

    restored = decompress18(codes)
    assert np.array_equal(float_to_bits(restored), float_to_bits(values) & 0xFFFFF800)

    print("✓ Mantissa truncation")


def test_idempotent():
    """Re-compressing a decompressed value is stable."""
    np.random.seed(42)
    codes = compress18(random_in_range(10000))
    assert np.array_equal(compress18(decompress18(codes)), codes)

    print("✓ Idempotent")


def test_out_of_range_exponent_wraps():
    """Exponents below the bias wrap silently; only low 18 bits are read back."""
    code = int(compress18(0.0))
    assert code == 0xFFF90000
    assert decompress18(code) == decompress18(code & 0x3FFFF)

    print("✓ Exponent wrap")


def test_codec_object():
    """Test Compact18Codec wrapper."""
    codec = Compact18Codec()
    assert codec.bits == 18
    assert codec.decompress(codec.compress(3.0)) == 3.0

    print("✓ Compact18Codec")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print(" Compact-18 Codec Tests")
    print("="*60)

    test_layout()
    test_reference_value()
    test_roundtrip_truncates_mantissa()
    test_idempotent()
    test_out_of_range_exponent_wraps()
    test_codec_object()

    print("\n" + "="*60)
    print(" All tests passed!")
    print("="*60)


if __name__ == "__main__":
    run_all_tests()
