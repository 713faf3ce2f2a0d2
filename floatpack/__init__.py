"""
Bit-level floating-point quantization codecs.

Packs IEEE-754 binary32 values into narrower fixed-width integers:
binary16, a configurable range/precision quantizer, and a compact
18-bit float format.
"""

__version__ = "0.1.0"

from .bits import float_to_bits, bits_to_float
from .half import compress_half, decompress_half, HalfCodec
from .quantizer import QuantizerConfig, BiasTable, FloatQuantizer
from .compact18 import compress18, decompress18, Compact18Codec
from .analysis import (
    CodecReport, analyze_codec, compute_sqnr, max_abs_error,
    roundtrip, verify_roundtrip
)

__all__ = [
    'float_to_bits',
    'bits_to_float',
    'compress_half',
    'decompress_half',
    'HalfCodec',
    'QuantizerConfig',
    'BiasTable',
    'FloatQuantizer',
    'compress18',
    'decompress18',
    'Compact18Codec',
    'CodecReport',
    'analyze_codec',
    'compute_sqnr',
    'max_abs_error',
    'roundtrip',
    'verify_roundtrip',
    '__version__',
]
