# numquant

Lossy conversion from floating-point numbers to small unsigned integers over a
fixed range, and back again. Use it to shrink values that you send over a network
or keep in memory, when a known loss of precision is acceptable.

## Installation

```
pip install numquant
```

## Quick start

Quantize a number between 0 and 1000 into a single byte (0–255):

```python
from numquant.int_types import q8

T = q8(0, 1000)
quantized = T.from_f64(500.0)
print(quantized.raw)              # the stored integer, between 0 and 255
dequantized = quantized.to_f64()  # close to 500.0

assert abs(dequantized - 500.0) <= T.max_error()
```

`q16(minimum, maximum)` and `q32(minimum, maximum)` build the same kind of value
type, with the stored integer ranging over `0..0xFFFF` and `0..0xFFFFFFFF`.
Inputs outside `[minimum, maximum]` are clamped to the nearest bound, and a range
whose two bounds are equal raises `ValueError`.

Values of one type compare equal, order and hash by their stored integer:

```python
T = q8(0, 32)
assert T.from_f64(31.0) < T.from_f64(32.0)
```

Ordering values of two different types raises `TypeError`; they never compare
equal.

## Building blocks

A value type (`numquant.value.ValueType`) puts two pieces together:

- a **normalizer** (`numquant.linear.Linear`) that maps a number in
  `[minimum, maximum]` onto `[0.0, 1.0]` and back, clamping inputs that fall
  outside the range;
- a **quantizer** (`numquant.quantizer.Quantizer`) that maps `[0.0, 1.0]` onto
  the integers `0..q_max` and back. `q_max` must be a positive integer. The
  ready-made quantizers `U8`, `U16` and `U32` use the full range of each width.

You can combine them yourself:

```python
from numquant.linear import Linear
from numquant.quantizer import Quantizer
from numquant.value import ValueType

T = ValueType(Quantizer(0xFF), Linear(0, 1000))
v = T.from_f64(250.0).to_f64()    # within 1.0 of 250.0
```

Your own normalizers and quantizers can subclass the abstract bases
`numquant.linear.Normalize` and `numquant.quantizer.Quantize`.

The module-level functions `numquant.quantizer.quantize`, `dequantize` and
`max_error` do the same linear quantization for any `q_max`:

```python
from numquant.quantizer import quantize, dequantize, max_error

q = quantize(0.5, 1000)         # 500
x = dequantize(q, 1000)         # 0.5
eps = max_error(1000)           # largest round-trip error for q_max=1000
```

A `ValueType` also offers:

- `from_f32(v)`: rounds `v` to single precision before quantizing;
- `from_raw(raw)`: wraps an already quantized integer (a negative or non-integer
  raw value raises an error; it is not checked against `q_max`);
- `default()`: the value whose stored integer is zero;
- `max_error()`: the largest round-trip error for an input inside the range.

Each `Value` has `to_f64()` and `to_f32()`, the latter rounded to single
precision.

## What it does not do

The package does not encode values into bytes or any serialization format. A
`Value` holds its stored integer in `raw`; writing that integer out and reading it
back (then passing it to `from_raw`) is up to you.

## Running the tests

```
pip install -e ".[test]"
pytest
```