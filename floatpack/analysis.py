"""
Error and size metrics for the codecs.

Every codec exposes ``compress``, ``decompress`` and an integer ``bits``
attribute, so the helpers here work on any of them.
"""

import numpy as np
from dataclasses import dataclass, asdict
from typing import Optional


def compute_sqnr(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """
    Compute Signal-to-Quantization-Noise Ratio in dB.

    SQNR = 10 * log10(signal_power / noise_power)
    """
    original = np.asarray(original, dtype=np.float64)
    reconstructed = np.asarray(reconstructed, dtype=np.float64)

    signal_power = np.var(original)
    noise_power = np.mean((original - reconstructed) ** 2)

    if noise_power == 0:
        return float('inf')

    return float(10 * np.log10(signal_power / noise_power))


def max_abs_error(original: np.ndarray, reconstructed: np.ndarray) -> float:
    """Largest absolute difference between two arrays."""
    original = np.asarray(original, dtype=np.float64)
    reconstructed = np.asarray(reconstructed, dtype=np.float64)
    if original.size == 0:
        return 0.0
    return float(np.max(np.abs(original - reconstructed)))


def roundtrip(codec, values) -> np.ndarray:
    """decompress(compress(values))"""
    return codec.decompress(codec.compress(values))


def verify_roundtrip(codec, values) -> bool:
    """
    Check that re-quantizing a quantized value does not drift.

    Holds when compress(decompress(compress(x))) == compress(x) for every
    element.
    """
    codes = codec.compress(values)
    again = codec.compress(codec.decompress(codes))
    return bool(np.array_equal(codes, again))


@dataclass
class CodecReport:
    """Round-trip statistics of one codec over one dataset."""
    name: str
    bits: int
    n_values: int
    sqnr: float
    max_error: float
    idempotent: bool

    @property
    def compression_ratio(self) -> float:
        return 32 / self.bits

    def to_dict(self) -> dict:
        d = asdict(self)
        d['compression_ratio'] = self.compression_ratio
        return d


def analyze_codec(codec, values, name: Optional[str] = None) -> CodecReport:
    """
    Measure round-trip error and size of a codec on float32 data.

    Args:
        codec: Object with compress/decompress and a ``bits`` attribute
        values: Float array to run through the codec
        name: Label for the report (defaults to the codec class name)

    Returns:
        CodecReport
    """
    values = np.asarray(values, dtype=np.float32)
    reconstructed = roundtrip(codec, values)

    return CodecReport(
        name=name or type(codec).__name__,
        bits=int(codec.bits),
        n_values=int(values.size),
        sqnr=compute_sqnr(values, reconstructed),
        max_error=max_abs_error(values, reconstructed),
        idempotent=verify_roundtrip(codec, values),
    )
