"""Quantized values that combine a normalizer with a quantizer."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from functools import total_ordering

from numquant.linear import Normalize
from numquant.quantizer import Quantize


def _to_f32(v: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", v))[0]
    except OverflowError:
        return math.copysign(math.inf, v)


@dataclass(frozen=True)
class ValueType:
    """A kind of quantized value: how it is normalized and how it is quantized."""

    quantizer: Quantize
    normalizer: Normalize

    def from_f64(self, v: float) -> Value:
        """Quantize a float into a value of this type."""
        return Value(self.quantizer.quantize(self.normalizer.normalize(v)), self)

    def from_f32(self, v: float) -> Value:
        """Quantize a float after rounding it to single precision."""
        return self.from_f64(_to_f32(v))

    def from_raw(self, raw: int) -> Value:
        """Wrap an already quantized integer."""
        return Value(raw, self)

    def default(self) -> Value:
        """The value whose raw integer is zero."""
        return Value(0, self)

    def max_error(self) -> float:
        """Largest round-trip error for an input inside the range."""
        return self.normalizer.max_error(self.quantizer.max_error())


@total_ordering
@dataclass(frozen=True, eq=False)
class Value:
    """A normalized and quantized number, ordered by its raw integer."""

    raw: int
    value_type: ValueType

    def __post_init__(self) -> None:
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise TypeError(f"raw value must be an integer, not {self.raw!r}")
        if self.raw < 0:
            raise ValueError(f"raw value must not be negative, got {self.raw}")

    def to_f64(self) -> float:
        """Convert back into a float."""
        normalized = self.value_type.quantizer.dequantize(self.raw)
        return self.value_type.normalizer.denormalize(normalized)

    def to_f32(self) -> float:
        """Convert back into a float rounded to single precision."""
        return _to_f32(self.to_f64())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.value_type == other.value_type and self.raw == other.raw

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value) or self.value_type != other.value_type:
            return NotImplemented
        return self.raw < other.raw

    def __hash__(self) -> int:
        return hash((self.value_type, self.raw))