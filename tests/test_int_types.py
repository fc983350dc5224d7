import pytest

from numquant.int_types import q8, q16, q32


def test_equal():
    a = q8(0, 32).from_f64(32.0)
    b = q8(0, 32).from_f64(31.0)
    assert a == a
    assert not a == b


def test_order():
    a = q8(0, 32).from_f64(32.0)
    b = q8(0, 32).from_f64(31.0)
    assert b < a
    assert a > b
    assert a <= a
    assert a >= a


def test_byte_round_trip_example():
    original = 500.0
    t = q8(0, 1000)
    dequantized = t.from_f64(original).to_f64()
    assert abs(original - dequantized) <= t.max_error()


def test_q8_full_range():
    t = q8(0, 1000)
    assert t.from_f64(0.0).raw == 0x00
    assert t.from_f64(1000.0).raw == 0xFF


def test_q16_full_range():
    t = q16(-100, 100)
    assert t.from_f64(-100.0).raw == 0x0000
    assert t.from_f64(100.0).raw == 0xFFFF


def test_q32_full_range():
    t = q32(-100, 100)
    assert t.from_f64(-100.0).raw == 0x00000000
    assert t.from_f64(100.0).raw == 0xFFFFFFFF


def test_wider_types_are_more_precise():
    assert q32(0, 1000).max_error() < q16(0, 1000).max_error() < q8(0, 1000).max_error()


def test_empty_range_rejected():
    with pytest.raises(ValueError):
        q8(7, 7)