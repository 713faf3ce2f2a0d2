"""
Compact 18-bit float format.

Layout (low 18 bits of a uint32):
    [sign:1] [exponent:5] [mantissa:12]

The exponent is the binary32 biased exponent minus 0x70. There is no
special handling of zero, subnormals, infinity or NaN: exponents outside
[0x70, 0x8F] wrap in 32-bit unsigned arithmetic.
"""

import numpy as np

from .bits import as_unsigned, bits_to_float, wrap_uint32, unwrap_scalar


EXPONENT_BIAS = 0x70

MANTISSA_MASK = 0x7FF800    # top 12 binary32 mantissa bits
EXPONENT_MASK = 0x7F800000
SIGN_MASK = 0x80000000


def compress18(value):
    """
    Pack binary32 values into the 18-bit format.

    Returns:
        uint32 codes (numpy scalar for scalar input)
    """
    n = as_unsigned(value)
    t = (n & MANTISSA_MASK) >> 11
    t = t | wrap_uint32((((n & EXPONENT_MASK) >> 23) - EXPONENT_BIAS) << 12)
    t = t | ((n & SIGN_MASK) >> 14)
    return unwrap_scalar(np.asarray(t, dtype=np.uint32))


def decompress18(value):
    """Unpack 18-bit codes back to binary32 values."""
    n = wrap_uint32(value)
    t = (n & 0xFFF) << 11
    t = t | ((((n & 0x1F000) >> 12) + EXPONENT_BIAS) << 23)
    t = t | ((n & 0x20000) << 14)
    return unwrap_scalar(bits_to_float(t))


class Compact18Codec:
    """18-bit codec with the common compress/decompress interface."""

    bits = 18

    def compress(self, value):
        return compress18(value)

    def decompress(self, value):
        return decompress18(value)
