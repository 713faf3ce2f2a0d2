#!/usr/bin/env python3
"""
Unit tests for bit reinterpretation helpers.
"""

import sys
from pathlib import Path
import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from floatpack.bits import (
    float_to_bits, bits_to_float, as_signed, wrap_int32, wrap_uint32,
    select, unwrap_scalar
)


def test_float_to_bits_known_patterns():
    """Test known binary32 bit patterns."""
    assert float_to_bits(1.0) == 0x3F800000
    assert float_to_bits(-2.0) == 0xC0000000
    assert float_to_bits(0.0) == 0
    assert float_to_bits(-0.0) == 0x80000000
    assert float_to_bits(np.inf) == 0x7F800000
    assert float_to_bits(1.0).dtype == np.uint32

    print("✓ float_to_bits known patterns")


def test_bits_to_float_inverse():
    """Test bits_to_float on patterns and shapes."""
    np.random.seed(42)
    values = (np.random.randn(4, 8) * 1000).astype(np.float32)

    restored = bits_to_float(float_to_bits(values))

    assert restored.shape == values.shape
    assert restored.dtype == np.float32
    assert np.array_equal(restored, values)
    assert np.isnan(bits_to_float(-1))  # 0xFFFFFFFF
    assert bits_to_float(0x1_3F800000) == 1.0  # high bits ignored

    print("✓ bits_to_float inverse")


def test_signed_view():
    """Test signed int32 interpretation."""
    assert as_signed(1.0) == 0x3F800000
    assert as_signed(-0.0) == -2 ** 31
    assert as_signed(-1.0) == 0xBF800000 - 2 ** 32
    assert wrap_int32(0x80000000) == -2 ** 31
    assert wrap_int32(0x7FFFFFFF) == 2 ** 31 - 1
    assert wrap_int32(2 ** 32 + 5) == 5
    assert wrap_uint32(-1) == 0xFFFFFFFF

    print("✓ signed view")


def test_select_and_unwrap():
    """Test element-wise select and scalar unwrapping."""
    v = np.array([1, 2, 3, 4])
    out = select(v > 2, 0, v)
    assert out.tolist() == [1, 2, 0, 0]

    s = unwrap_scalar(np.asarray(7, dtype=np.uint32))
    assert np.ndim(s) == 0
    assert s == 7
    assert unwrap_scalar(v).shape == (4,)

    print("✓ select / unwrap_scalar")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print(" Bit Helper Tests")
    print("="*60)

    test_float_to_bits_known_patterns()
    test_bits_to_float_inverse()
    test_signed_view()
    test_select_and_unwrap()

    print("\n" + "="*60)
    print(" All tests passed!")
    print("="*60)


if __name__ == "__main__":
    run_all_tests()
