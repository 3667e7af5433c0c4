import pytest

from charfunc import ascii_name, char_of, codepoint_of
from errors import InvalidCodepoint


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "[null]"), (7, "[bell]"), (9, "[horizontal tab]"), (10, "[line feed]"),
        (13, "[carriage return]"), (27, "[escape]"), (31, "[unit separator]"),
        (32, "[space]"), (33, "!"), (48, "0"), (65, "A"), (126, "~"), (127, "[del]"),
    ],
)
def test_ascii_name(value, expected):
    assert ascii_name(value) == expected


@pytest.mark.parametrize("value", [-1, 128, 255, 1 << 40])
def test_ascii_name_out_of_range(value):
    assert ascii_name(value) is None


def test_codepoint_of():
    assert codepoint_of("A") == "U+0041"
    assert codepoint_of("é") == "U+00E9"
    assert codepoint_of("\U0001F600") == "U+1F600"


def test_char_of():
    assert char_of(0x41) == "A"
    assert char_of(0x263A) == "☺"
    assert char_of(0x10FFFF) == "\U0010ffff"


@pytest.mark.parametrize("codepoint", [-1, 0xD800, 0xDFFF, 0x110000])
def test_char_of_invalid(codepoint):
    with pytest.raises(InvalidCodepoint):
        char_of(codepoint)
