"""
Generic float quantizer.

Clamps values to a [min, max] range with an epsilon dead-zone, drops
mantissa bits down to the configured precision and renormalizes the
result so the packed codes form one contiguous integer range.
"""

import numpy as np
from dataclasses import dataclass

from .bits import (
    as_signed, bits_to_float, wrap_int32, wrap_uint32, select, unwrap_scalar,
    SIGN_BIT, ABS_MASK, WORD_MASK
)


MANTISSA_BITS = 23


def _int32(x: int) -> int:
    """Wrap a Python int into the signed 32-bit range."""
    return int(wrap_int32(x))


@dataclass(frozen=True)
class QuantizerConfig:
    """Range and precision of a FloatQuantizer."""
    min_value: float = -65504.0
    epsilon: float = 6.103515625e-05
    max_value: float = 65504.0
    precision: int = 12

    def validate(self) -> None:
        """Raise ValueError unless min <= 0 < epsilon < max and 0 <= precision <= 23."""
        if not 0 <= self.precision <= MANTISSA_BITS:
            raise ValueError(
                f"precision must be in [0, {MANTISSA_BITS}], got {self.precision}"
            )
        if not self.min_value <= 0 < self.epsilon < self.max_value:
            raise ValueError(
                f"Expected min <= 0 < epsilon < max, got min={self.min_value}, "
                f"epsilon={self.epsilon}, max={self.max_value}"
            )

    @property
    def shift(self) -> int:
        return MANTISSA_BITS - self.precision

    @property
    def lossless(self) -> bool:
        return self.shift == 0

    @property
    def negatives(self) -> bool:
        # Signed compare on the bit pattern, so -0.0 counts as negative
        return int(as_signed(self.min_value)) < 0

    @property
    def bits(self) -> int:
        """Nominal width of the packed codes."""
        return 32 - self.shift


@dataclass(frozen=True)
class BiasTable:
    """
    Precomputed integer constants for a QuantizerConfig.

    All values are signed 32-bit integers. ``c_max``/``c_zero`` are the
    codes of max and zero before renormalization; ``p_delta``/``n_delta``
    are the widths of the unreachable gaps above zero and between the
    positive and negative ranges.
    """
    f_min: int
    f_eps: int
    f_max: int
    c_max: int
    c_zero: int
    p_delta: int
    n_delta: int

    @classmethod
    def from_config(cls, config: QuantizerConfig) -> 'BiasTable':
        """Derive the constants once per configuration."""
        shift = config.shift
        f_min = int(as_signed(config.min_value))
        f_eps = int(as_signed(config.epsilon))
        f_max = int(as_signed(config.max_value))

        if config.lossless:
            neps = f_eps
            peps = _int32(f_eps ^ SIGN_BIT)
            c_max = _int32(f_max ^ SIGN_BIT)
            c_zero = _int32(SIGN_BIT)
        else:
            neps = ((f_eps ^ SIGN_BIT) & WORD_MASK) >> shift
            peps = (f_eps & WORD_MASK) >> shift
            c_max = (f_max & WORD_MASK) >> shift
            c_zero = 0

        return cls(
            f_min=f_min,
            f_eps=f_eps,
            f_max=f_max,
            c_max=c_max,
            c_zero=c_zero,
            p_delta=_int32(peps - c_zero - 1),
            n_delta=_int32(neps - c_max - 1),
        )


class FloatQuantizer:
    """
    Range-bounded, epsilon-gated float quantizer.

    Example:
        >>> q = FloatQuantizer(-65504, 6.103515625e-05, 65504, 12)
        >>> int(q.compress(-724.99))
        218789
        >>> float(q.decompress(q.compress(-724.99)))
        -724.875
    """

    def __init__(
        self,
        min_value: float,
        epsilon: float,
        max_value: float,
        precision: int
    ):
        """
        Args:
            min_value: Lower clamp bound (<= 0; negative enables the negative range)
            epsilon: Magnitudes below this become zero
            max_value: Upper clamp bound
            precision: Mantissa bits kept, 23 is lossless
        """
        config = QuantizerConfig(min_value, epsilon, max_value, precision)
        config.validate()
        self.config = config
        self.table = BiasTable.from_config(config)
        self.shift = config.shift
        self.negatives = config.negatives
        self.lossless = config.lossless

    @classmethod
    def from_config(cls, config: QuantizerConfig) -> 'FloatQuantizer':
        return cls(config.min_value, config.epsilon, config.max_value, config.precision)

    @property
    def bits(self) -> int:
        return self.config.bits

    def __repr__(self) -> str:
        c = self.config
        return (f"FloatQuantizer(min_value={c.min_value}, epsilon={c.epsilon}, "
                f"max_value={c.max_value}, precision={c.precision})")

    def _clamp_bits(self, value) -> np.ndarray:
        t = self.table
        v = as_signed(value)

        bound = t.f_max
        if self.negatives:
            bound = select(v < 0, t.f_min, t.f_max)
        v = select(v > bound, bound, v)

        # Dead-zone
        return select(t.f_eps <= (v & ABS_MASK), v, 0)

    def clamp(self, value):
        """
        Restrict values to [min, max] and zero magnitudes below epsilon.

        Comparisons are made on the signed bit patterns, so infinities and
        NaNs are bounded like any other pattern of the same sign. Without a
        negative range, negative inputs are left unbounded.
        """
        return unwrap_scalar(bits_to_float(self._clamp_bits(value)))

    def compress(self, value):
        """
        Quantize values to packed codes.

        Returns:
            uint32 codes in [0, 2**bits)
        """
        t = self.table
        v = self._clamp_bits(value)

        if self.lossless:
            v = wrap_int32(v ^ SIGN_BIT)
        else:
            v = (v & WORD_MASK) >> self.shift

        if self.negatives:
            v = select(v > t.c_max, wrap_int32(v - t.n_delta), v)
        v = select(v > t.c_zero, wrap_int32(v - t.p_delta), v)

        if self.lossless:
            v = v ^ SIGN_BIT
        return unwrap_scalar(np.asarray(wrap_uint32(v), dtype=np.uint32))

    def decompress(self, value):
        """Expand packed codes back to quantized float32 values."""
        t = self.table
        v = wrap_int32(value)

        if self.lossless:
            v = wrap_int32(v ^ SIGN_BIT)

        v = select(v > t.c_zero, wrap_int32(v + t.p_delta), v)
        if self.negatives:
            v = select(v > t.c_max, wrap_int32(v + t.n_delta), v)

        if self.lossless:
            v = v ^ SIGN_BIT
        else:
            v = v << self.shift
        return unwrap_scalar(bits_to_float(v))
