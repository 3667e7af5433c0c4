import logging

from bitsfunc import MAX_BITS, add_spacers, bin_string, min_bits, std_bits
from charfunc import ascii_name, char_of, codepoint_of
from errors import (
    InsufficientWidth,
    InvalidCodepoint,
    InvalidInput,
    ParseFailure,
    UnsupportedWidth,
)
from literal import parse_int
from twos import encode

# coreapi.py
# thin API: literal in, report fields out

log = logging.getLogger(__name__)

MAX_CODEPOINT_INPUT = 0xFFFFFFFF
FIELDS = ("req", "hex", "dec", "oct", "bin", "asc")


def _plural(n):
    return "" if n == 1 else "s"


def uint_info(value, num_bits):
    return {
        "hex": add_spacers(f"{value:X}", " ", 2),
        "dec": add_spacers(str(value), ",", 3),
        "oct": f"{value:o}",
        "bin": bin_string(value, num_bits),
    }


def int_info(value, user_bits=None):
    """
    Report fields for a signed 64-bit value.

    Without `user_bits`, non-negative values are shown at their minimum
    width and negative values at the next standard width (8/16/32/64),
    so -1 shows as 1111_1111 rather than 1.

    Raises UnsupportedWidth for a width of 0 or over 64 and
    InsufficientWidth when `user_bits` is below min_bits(value).
    """
    need = min_bits(value)
    if user_bits is not None:
        num_bits = user_bits
    elif value >= 0:
        num_bits = need
    else:
        num_bits = std_bits(value)

    if num_bits == 0 or num_bits > MAX_BITS:
        raise UnsupportedWidth(num_bits)
    if num_bits < need:
        raise InsufficientWidth(value, need)

    shown = encode(value, num_bits)
    log.debug("value=%d min_bits=%d num_bits=%d encoding=%#x", value, need, num_bits, shown)

    if value >= 0:
        req = f"{need} bit{_plural(need)} (unsigned)"
    else:
        req = f"{need} bit{_plural(need)} (signed), showing {num_bits}-bit two's complement"

    info = {"req": req}
    info.update(uint_info(shown, num_bits))
    asc = ascii_name(value)
    if asc is not None:
        info["asc"] = asc
    return info


def format_report(info):
    return "\n".join(f"{key}: {info[key]}" for key in FIELDS if key in info)


def inspect_int(arg, user_bits=None):
    # one argument -> report text or a single "Error:" line
    try:
        value = parse_int(arg)
        if value is None:
            raise ParseFailure(arg)
        return format_report(int_info(value, user_bits))
    except (ParseFailure, InsufficientWidth, UnsupportedWidth) as e:
        log.debug("skipping %r: %s", arg, e)
        return f"Error: {e}"


def char_info(char):
    return {"lit": char, "uni": codepoint_of(char)}


def inspect_chars(args):
    """One "lit:/uni:" block per character of the joined arguments."""
    out = []
    for c in "".join(args):
        info = char_info(c)
        out.append(f"lit: {info['lit']}\nuni: {info['uni']}")
    return out


def codepoint_info(codepoint):
    """
    Code point -> {"uni", "lit"}.

    ASCII codes use the same names as the int report ("[space]", "[del]", ...);
    anything else must be a unicode scalar value or InvalidCodepoint is raised.
    """
    lit = ascii_name(codepoint)
    if lit is None:
        lit = char_of(codepoint)
    return {"uni": f"U+{codepoint:04X}", "lit": lit}


def inspect_codepoint(arg):
    # one argument -> "uni:/lit:" block or a single "Error:" line
    try:
        value = parse_int(arg)
        if value is None:
            raise ParseFailure(arg, "an integer")
        if value < 0 or value > MAX_CODEPOINT_INPUT:
            raise InvalidInput(arg)
        info = codepoint_info(value)
        return f"uni: {info['uni']}\nlit: {info['lit']}"
    except (ParseFailure, InvalidInput, InvalidCodepoint) as e:
        log.debug("skipping %r: %s", arg, e)
        return f"Error: {e}"
