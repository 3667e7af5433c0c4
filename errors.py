# errors.py
# error types raised by the engine and reported by coreapi


class IntspectorError(Exception):
    pass


class ParseFailure(IntspectorError, ValueError):
    def __init__(self, text, what="a 64-bit signed integer"):
        self.text = text
        self.what = what
        super().__init__(f"cannot parse '{text}' as {what}.")


class InsufficientWidth(IntspectorError, ValueError):
    def __init__(self, value, required):
        self.value = value
        self.required = required
        super().__init__(f"{value} requires at least {required} bits.")


class UnsupportedWidth(IntspectorError, ValueError):
    def __init__(self, num_bits):
        self.num_bits = num_bits
        super().__init__("unsupported bit size.")


class InvalidInput(IntspectorError, ValueError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"invalid input '{text}'.")


class InvalidCodepoint(IntspectorError, ValueError):
    def __init__(self, codepoint):
        self.codepoint = codepoint
        super().__init__(f"{codepoint} is not a valid unicode scalar value.")


class InvalidEncoding(IntspectorError, RuntimeError):
    """
    Two's complement asked for a magnitude that does not fit the width.

    Widths are validated against min_bits() before encoding, so this
    only shows up on a bug and is never turned into an "Error:" line.
    """

    def __init__(self, magnitude, num_bits):
        self.magnitude = magnitude
        self.num_bits = num_bits
        super().__init__(f"magnitude {magnitude} does not fit {num_bits}-bit two's complement")
