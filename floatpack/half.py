"""
IEEE-754 binary32 <-> binary16 conversion.

Works on the magnitude bits of the binary32 pattern: subnormals are
rescaled with a float multiply, overflow is clamped to infinity, NaNs are
clamped to the smallest NaN, and the exponent is rebiased by subtracting
a constant from the 13-bit-shifted pattern. The mantissa is truncated,
not rounded.

Layout of the result: [sign:1][exponent:5][mantissa:10]
"""

import numpy as np

from .bits import as_unsigned, bits_to_float, select, unwrap_scalar, SIGN_BIT


# ============================================================================
# Constants
# ============================================================================

SHIFT = 13              # mantissa bits dropped (23 - 10)
SHIFT_SIGN = 16         # sign moves from bit 31 to bit 15

N_INF = 0x7F800000      # binary32 infinity
N_MAX = 0x477FE000      # max binary16 normal (65504) as binary32
N_MIN = 0x38800000      # min binary16 normal (2**-14) as binary32

C_INF = N_INF >> SHIFT
N_NAN = (C_INF + 1) << SHIFT   # min binary16 NaN as binary32
C_MAX = N_MAX >> SHIFT
C_MIN = N_MIN >> SHIFT
C_SIGN = SIGN_BIT >> SHIFT_SIGN

N_MUL = 2.0 ** 37       # 0x52000000, (1 << 23) / N_MIN
C_MUL = 2.0 ** -24      # 0x33800000, N_MIN / (1 << (23 - SHIFT))

C_SUB = 0x003FF         # max binary16 subnormal mantissa
C_NOR = 0x00400         # min binary16 normal, shifted

D_MAX = C_INF - C_MAX - 1
D_MIN = C_MIN - C_SUB - 1


# ============================================================================
# Codec
# ============================================================================

def compress_half(value):
    """
    Convert binary32 values to binary16 bit patterns.

    Args:
        value: Scalar or array-like of floats

    Returns:
        uint16 bit patterns (numpy scalar for scalar input)
    """
    v = as_unsigned(value)
    sign = v & SIGN_BIT
    v = v ^ sign
    sign = sign >> SHIFT_SIGN

    # Subnormals: scale so the truncating shift lands on the right mantissa
    small = v < N_MIN
    magnitude = np.where(small, bits_to_float(v), 0).astype(np.float64)
    scaled = (magnitude * N_MUL).astype(np.int64)
    v = select(small, scaled, v)

    v = select((N_INF > v) & (v > N_MAX), N_INF, v)
    v = select((N_NAN > v) & (v > N_INF), N_NAN, v)
    v = v >> SHIFT

    v = select(v > C_MAX, v - D_MAX, v)
    v = select(v > C_SUB, v - D_MIN, v)
    return unwrap_scalar((v | sign).astype(np.uint16))


def decompress_half(value):
    """
    Expand binary16 bit patterns back to binary32 values.

    Only the low 16 bits of each input are read.
    """
    v = np.asarray(value, dtype=np.int64) & 0xFFFF
    sign = v & C_SIGN
    v = v ^ sign
    sign = sign << SHIFT_SIGN

    v = select(v > C_SUB, v + D_MIN, v)
    v = select(v > C_MAX, v + D_MAX, v)

    subnormal = as_unsigned(v.astype(np.float32) * np.float32(C_MUL))
    v = select(C_NOR > v, subnormal, v << SHIFT)
    return unwrap_scalar(bits_to_float(v | sign))


class HalfCodec:
    """binary16 codec with the common compress/decompress interface."""

    bits = 16

    def compress(self, value):
        return compress_half(value)

    def decompress(self, value):
        return decompress_half(value)
