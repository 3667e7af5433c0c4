import pytest

from literal import I64_MAX, I64_MIN, Radix, parse_int, split_radix


@pytest.mark.parametrize(
    "text,expected",
    [("0", 0), ("00", 0), ("1", 1), ("01", 1), ("101", 101), ("255", 255)],
)
def test_parse_int_no_prefix(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize(
    "prefix,values",
    [
        ("b", [0, 1, 1, 5]),
        ("o", [0, 1, 1, 65]),
        ("d", [0, 1, 1, 101]),
        ("x", [0, 1, 1, 257]),
    ],
)
def test_parse_int_prefixed(prefix, values):
    got = [parse_int(prefix + digits) for digits in ("0", "1", "01", "101")]
    assert got == values
    assert parse_int("0" + prefix + "101") == values[-1]


def test_parse_int_hex_digits():
    assert parse_int("xff") == 255
    assert parse_int("xFF") == 255
    assert parse_int("0x7fffffffffffffff") == I64_MAX


def test_parse_int_zeros_stripped_before_prefix():
    assert parse_int("0x101") == 257
    assert parse_int("000x101") == 257
    assert parse_int("x0101") == 257


def test_parse_int_signs():
    assert parse_int("-1") == -1
    assert parse_int("-128") == -128
    assert parse_int("+5") == 5
    assert parse_int("x-ff") == -255
    assert parse_int("-0") == 0
    assert parse_int("-9223372036854775808") == I64_MIN


@pytest.mark.parametrize(
    "text",
    [
        "", "-", "+", "b", "0b", "x", "b2", "o8", "xg", "abc", "D5",
        "xx1", "0x0x1", "bb1", "-x5", "--5", " 5", "5 ", "1_000", "5\n", "1.5",
        "9223372036854775808", "-9223372036854775809", "x8000000000000000",
        "٣",
    ],
)
def test_parse_int_errors(text):
    assert parse_int(text) is None


@pytest.mark.parametrize("value", [0, 1, 7, 10, 255, 65536, 123456789, I64_MAX])
def test_parse_int_round_trip(value):
    assert parse_int(str(value)) == value


def test_split_radix():
    assert split_radix("b101") == (Radix.BINARY, "101")
    assert split_radix("o17") == (Radix.OCTAL, "17")
    assert split_radix("d9") == (Radix.DECIMAL, "9")
    assert split_radix("xff") == (Radix.HEX, "ff")
    assert split_radix("42") == (Radix.DECIMAL, "42")
    assert split_radix("xxf") == (Radix.HEX, "xf")


def test_parse_int_too_many_digits():
    assert parse_int("1" * 5000) is None
    assert parse_int("-" + "9" * 5000) is None
    assert parse_int("x" + "f" * 65) is None
    assert parse_int("b1" + "0" * 64) is None


def test_parse_int_long_but_in_range():
    assert parse_int("b" + "1" * 63) == I64_MAX
    assert parse_int("b-1" + "0" * 63) == I64_MIN
    assert parse_int("x" + "0" * 100 + "ff") == 255
