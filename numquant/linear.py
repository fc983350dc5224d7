"""Normalization of values into the range 0.0..1.0 and back."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Normalize(ABC):
    """Maps a value of some range into 0.0..1.0 and back again."""

    @abstractmethod
    def normalize(self, value: float) -> float:
        """Convert a value into a float between 0.0 and 1.0."""

    @abstractmethod
    def denormalize(self, n: float) -> float:
        """Convert a float between 0.0 and 1.0 back into the range."""

    @abstractmethod
    def max_error(self, quantization_error: float) -> float:
        """Largest round-trip error given the quantizer's maximum error."""


def _clamp_unit(value: float) -> float:
    if math.isnan(value):
        return value
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True, order=True)
class Linear(Normalize):
    """Normalizes linearly between ``minimum`` and ``maximum``."""

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum == self.maximum:
            raise ValueError(
                f"range must not be empty: minimum and maximum are both {self.minimum}"
            )

    @property
    def span(self) -> int:
        """Distance from ``minimum`` to ``maximum``."""
        return self.maximum - self.minimum

    def normalize(self, value: float) -> float:
        return _clamp_unit((value - self.minimum) / self.span)

    def denormalize(self, n: float) -> float:
        return self.span * n + self.minimum

    def max_error(self, quantization_error: float) -> float:
        return quantization_error * self.span