import pytest

from miniprintf.conversions import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_string,
    format_uint,
)


def test_char_from_string():
    assert format_char("A") == "A"


def test_char_from_int():
    assert format_char(65) == chr(65)


def test_char_int_wraps_to_one_byte():
    assert format_char(ord("z") + 256) == "z"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_char_rejects_float():
    with pytest.raises(TypeError):
        format_char(1.5)


def test_string_none_is_null():
    assert format_string(None) == "(null)"


@pytest.mark.parametrize("text", ["hello", "", "with spaces\tand tabs"])
def test_string_passthrough(text):
    assert format_string(text) == text


def test_string_stops_at_nul():
    assert format_string("ab\0cd") == "ab"


def test_string_rejects_non_str():
    with pytest.raises(TypeError):
        format_string(5)


@pytest.mark.parametrize("address", [None, 0])
def test_pointer_null(address):
    assert format_pointer(address) == "(nil)"


@pytest.mark.parametrize("address", [1, 255, 0xDEADBEEF, 2**63 + 7])
def test_pointer_round_trip(address):
    text = format_pointer(address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address
    assert text == text.lower()


def test_pointer_pinned_value():
    assert format_pointer(255) == "0xff"


def test_pointer_negative_wraps_to_64_bits():
    text = format_pointer(-1)
    assert int(text[2:], 16) == 2**64 - 1


def test_pointer_of_object_uses_identity():
    obj = object()
    assert int(format_pointer(obj)[2:], 16) == id(obj) % 2**64


@pytest.mark.parametrize("value", [0, 7, 42, -42, 36789, 2147483647, -2147483647])
def test_int_round_trip(value):
    assert int(format_int(value)) == value


def test_int_minimum():
    assert format_int(-2147483648) == "-2147483648"


def test_int_wraps_past_maximum():
    assert format_int(2147483648) == "-2147483648"


def test_int_rejects_str():
    with pytest.raises(TypeError):
        format_int("1")


@pytest.mark.parametrize("value", [0, 9, 10, 36789, 2**32 - 1])
def test_uint_round_trip(value):
    assert int(format_uint(value)) == value


def test_uint_negative_wraps():
    assert int(format_uint(-1)) == 2**32 - 1


def test_uint_never_negative():
    assert not format_uint(-12345).startswith("-")


@pytest.mark.parametrize("value", [0, 1, 15, 16, 255, 0xABCDEF, 2**32 - 1])
def test_hex_round_trip(value):
    assert int(format_hex(value, "x"), 16) == value
    assert int(format_hex(value, "X"), 16) == value


@pytest.mark.parametrize("value", [10, 0xABCDEF, 2**32 - 1])
def test_hex_case(value):
    lower = format_hex(value, "x")
    upper = format_hex(value, "X")
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_hex_zero():
    assert format_hex(0, "x") == "0"


def test_hex_pinned_upper():
    assert format_hex(255, "X") == "FF"


def test_hex_negative_wraps():
    assert int(format_hex(-1, "x"), 16) == 2**32 - 1


def test_hex_rejects_other_spec():
    with pytest.raises(ValueError):
        format_hex(10, "q")