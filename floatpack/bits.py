"""
Bit reinterpretation helpers shared by all codecs.

Codecs do their arithmetic on int64 numpy arrays holding 32-bit patterns,
then wrap back into 32 bits. Keeping the intermediate wider than 32 bits
means subtractions and shifts never overflow inside numpy.
"""

import numpy as np


# ============================================================================
# Constants
# ============================================================================

SIGN_BIT = 0x80000000       # binary32 sign bit
ABS_MASK = 0x7FFFFFFF       # everything but the sign bit
WORD_MASK = 0xFFFFFFFF      # 32-bit word


# ============================================================================
# Bit casts
# ============================================================================

def float_to_bits(value) -> np.ndarray:
    """
    Reinterpret binary32 values as unsigned 32-bit integers.

    Args:
        value: Scalar or array-like, converted to float32 first

    Returns:
        uint32 array (0-d for scalar input) with the raw bit patterns
    """
    return np.asarray(value, dtype=np.float32).view(np.uint32)


def bits_to_float(bits) -> np.ndarray:
    """
    Reinterpret 32-bit patterns as binary32 values.

    Only the low 32 bits of each integer are used, so signed patterns
    (e.g. -1 for 0xFFFFFFFF) are accepted as well.
    """
    words = np.asarray(bits, dtype=np.int64) & WORD_MASK
    return np.asarray(words, dtype=np.uint32).view(np.float32)


def as_unsigned(value) -> np.ndarray:
    """Bit patterns of ``value`` as non-negative int64 in [0, 2**32)."""
    return float_to_bits(value).astype(np.int64)


def as_signed(value) -> np.ndarray:
    """Bit patterns of ``value`` as signed int32 values, widened to int64."""
    return wrap_int32(as_unsigned(value))


# ============================================================================
# Integer helpers
# ============================================================================

def wrap_int32(x) -> np.ndarray:
    """Wrap int64 values into the signed 32-bit range (two's complement)."""
    x = np.asarray(x, dtype=np.int64)
    return ((x ^ SIGN_BIT) & WORD_MASK) - SIGN_BIT


def wrap_uint32(x) -> np.ndarray:
    """Wrap int64 values into the unsigned 32-bit range."""
    return np.asarray(x, dtype=np.int64) & WORD_MASK


def select(predicate, replacement, value) -> np.ndarray:
    """
    Element-wise ``replacement if predicate else value``.

    Stands in for the masked-select ``v ^= (r ^ v) & -(pred)``.
    """
    return np.where(predicate, replacement, value)


def unwrap_scalar(arr):
    """Turn a 0-d array into a numpy scalar; leave n-d arrays alone."""
    return np.asarray(arr)[()]
