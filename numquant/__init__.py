"""Quantize numbers over a fixed range into small unsigned integers and back."""

__version__ = "0.2.0"
__all__ = ["int_types", "linear", "quantizer", "value"]