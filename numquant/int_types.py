"""Value types that use the full range of an unsigned integer width."""

from __future__ import annotations

from numquant.linear import Linear
from numquant.quantizer import U8, U16, U32
from numquant.value import ValueType


def q8(minimum: int, maximum: int) -> ValueType:
    """A value in ``minimum..maximum`` quantized to fit in 8 bits."""
    return ValueType(U8, Linear(minimum, maximum))


def q16(minimum: int, maximum: int) -> ValueType:
    """A value in ``minimum..maximum`` quantized to fit in 16 bits."""
    return ValueType(U16, Linear(minimum, maximum))


def q32(minimum: int, maximum: int) -> ValueType:
    """A value in ``minimum..maximum`` quantized to fit in 32 bits."""
    return ValueType(U32, Linear(minimum, maximum))