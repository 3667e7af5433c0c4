from errors import InvalidCodepoint

# charfunc.py
# ascii names and unicode code points

# control codes 0..31, space and del have no glyph worth printing
CONTROL_NAMES = [
    "[null]",
    "[start of heading]",
    "[start of text]",
    "[end of text]",
    "[end of transmission]",
    "[enquiry]",
    "[acknowledge]",
    "[bell]",
    "[backspace]",
    "[horizontal tab]",
    "[line feed]",
    "[vertical tab]",
    "[form feed]",
    "[carriage return]",
    "[shift out]",
    "[shift in]",
    "[data link escape]",
    "[device control 1]",
    "[device control 2]",
    "[device control 3]",
    "[device control 4]",
    "[negative acknowledge]",
    "[synchronous idle]",
    "[end of transmission block]",
    "[cancel]",
    "[end of medium]",
    "[substitute]",
    "[escape]",
    "[file separator]",
    "[group separator]",
    "[record separator]",
    "[unit separator]",
    "[space]",
]
DEL_NAME = "[del]"

MAX_UNICODE = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def ascii_name(value):
    """
    Character for an ASCII code, or None outside 0..127.

    Printable codes give the character itself; control codes, space
    and del give a bracketed name such as "[line feed]".
    """
    if value < 0 or value > 127:
        return None
    if value == 127:
        return DEL_NAME
    if value < len(CONTROL_NAMES):
        return CONTROL_NAMES[value]
    return chr(value)


def codepoint_of(char):
    return f"U+{ord(char):04X}"


def char_of(codepoint):
    if codepoint < 0 or codepoint > MAX_UNICODE or codepoint in SURROGATES:
        raise InvalidCodepoint(codepoint)
    return chr(codepoint)
