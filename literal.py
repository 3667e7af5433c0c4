import re
from enum import Enum

# literal.py
# integer literals with an optional one-letter radix prefix: b101, o17, d42, xFF

I64_MIN = -(1 << 63)
I64_MAX = (1 << 63) - 1
MAX_DIGITS = 64


class Radix(Enum):
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16


PREFIXES = {
    "b": Radix.BINARY,
    "o": Radix.OCTAL,
    "d": Radix.DECIMAL,
    "x": Radix.HEX,
}

# optional sign, then at least one digit of the radix
DIGITS = {
    Radix.BINARY: re.compile(r"[+-]?[01]+"),
    Radix.OCTAL: re.compile(r"[+-]?[0-7]+"),
    Radix.DECIMAL: re.compile(r"[+-]?[0-9]+"),
    Radix.HEX: re.compile(r"[+-]?[0-9a-fA-F]+"),
}


def split_radix(text):
    """
    Pick the radix from the first character and strip it (once).

    No recognised prefix means decimal and the text comes back unchanged.
    """
    radix = PREFIXES.get(text[:1])
    if radix is None:
        return Radix.DECIMAL, text
    return radix, text[1:]


def parse_int(text):
    """
    Parse a binary, octal, decimal or hex literal into a signed 64-bit int.

    Leading zeros go first, so "0x101", "x101" and "00x101" all read as 257,
    and a string of only zeros is 0. Returns None on an empty string, a bad
    digit for the radix, too many digits, or a value outside the i64 range.
    """
    if not text:
        return None

    trimmed = text.lstrip("0")
    if not trimmed:
        return 0

    radix, digits = split_radix(trimmed)
    if not DIGITS[radix].fullmatch(digits):
        return None
    # no i64 needs more than 64 significant digits in any radix
    if len(digits.lstrip("+-").lstrip("0")) > MAX_DIGITS:
        return None

    value = int(digits, radix.value)
    if not I64_MIN <= value <= I64_MAX:
        return None
    return value
