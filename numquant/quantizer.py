"""Linear quantization of normalized values into unsigned integers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Quantize(ABC):
    """Converts a value between 0.0 and 1.0 into an integer and back again."""

    @abstractmethod
    def quantize(self, value: float) -> int:
        """Quantize a value in 0.0..1.0; values outside are clamped."""

    @abstractmethod
    def dequantize(self, quantized: int) -> float:
        """Restore the floating point value from a quantized value."""

    @abstractmethod
    def max_error(self) -> float:
        """Largest absolute error of a round trip for an in-range value."""


@dataclass(frozen=True, order=True)
class Quantizer(Quantize):
    """Quantizes linearly so that 0.0 maps to 0 and 1.0 maps to ``q_max``."""

    q_max: int

    def __post_init__(self) -> None:
        if isinstance(self.q_max, bool) or not isinstance(self.q_max, int):
            raise TypeError(f"q_max must be an integer, not {self.q_max!r}")
        if self.q_max < 1:
            raise ValueError(f"q_max must be positive, got {self.q_max}")

    def quantize(self, value: float) -> int:
        return quantize(value, self.q_max)

    def dequantize(self, quantized: int) -> float:
        return dequantize(quantized, self.q_max)

    def max_error(self) -> float:
        return max_error(self.q_max)


def quantize(value: float, q_max: int) -> int:
    """Linearly quantize ``value`` (clamped to 0.0..1.0) into 0..q_max."""
    if math.isnan(value):
        return q_max
    clamped = min(max(value, 0.0), 1.0)
    # Scaling by q_max + 1 gives every integer an equally wide input interval;
    # only exactly 1.0 would land past q_max.
    return int(min((q_max + 1) * clamped, q_max))


def dequantize(quantized: int, q_max: int) -> float:
    """Linearly dequantize ``quantized`` back into 0.0..1.0."""
    return quantized / q_max


def max_error(q_max: float) -> float:
    """Maximum round-trip error when quantizing linearly into 0..q_max."""
    return 1.0 / (q_max + 1.0)


U8 = Quantizer(0xFF)
U16 = Quantizer(0xFFFF)
U32 = Quantizer(0xFFFFFFFF)