# bitsfunc.py
# bit widths and grouped numeral strings

STD_WIDTHS = (8, 16, 32, 64)
MAX_BITS = 64


def min_bits(value):
    """
    Minimum number of bits needed to hold `value`.

    value >= 0 -> bits of the unsigned binary form, floor(log2(v)) + 1
    value <  0 -> bits of the two's complement form incl. sign bit,
                  ceil(log2(|v|)) + 1

    0 still takes one bit.
    """
    if value == 0:
        return 1
    if value > 0:
        return value.bit_length()
    # ceil(log2(m)) == (m - 1).bit_length() for m >= 1
    return (-value - 1).bit_length() + 1


def std_bits(value):
    """min_bits() rounded up to 8, 16, 32 or 64."""
    need = min_bits(value)
    for width in STD_WIDTHS:
        if need <= width:
            return width
    return need


def add_spacers(digits, spacer, block_len):
    # group from the right, e.g. "123456" -> "123,456"
    if block_len < 1:
        raise ValueError(f"block_len must be >= 1, got {block_len}")
    out = []
    for i, ch in enumerate(reversed(digits)):
        if i and i % block_len == 0:
            out.append(spacer)
        out.append(ch)
    return "".join(reversed(out))


def bin_string(value, num_bits):
    """
    Low `num_bits` bits of `value` as a binary string, MSB first.

    Nibbles are split with "_" and bytes with " ", counted from the LSB:
        bin_string(256, 12) -> "0001 0000_0000"
    """
    out = []
    for i in range(num_bits):
        out.append("1" if (value >> i) & 1 else "0")
        if i < num_bits - 1:
            if i % 8 == 3:
                out.append("_")
            elif i % 8 == 7:
                out.append(" ")
    return "".join(reversed(out))
