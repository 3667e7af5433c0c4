from bitsfunc import MAX_BITS
from errors import InvalidEncoding

# twos.py
# n-bit two's complement of a magnitude (n <= 64)

U64_MAX = (1 << MAX_BITS) - 1


# twos_complement(magnitude, n) -> 2^n - magnitude
def twos_complement(magnitude, num_bits):
    if num_bits > MAX_BITS or not 0 <= magnitude <= U64_MAX:
        raise InvalidEncoding(magnitude, num_bits)
    if magnitude == 0:
        return 0
    if num_bits < MAX_BITS:
        cap = 1 << num_bits
        if magnitude >= cap:
            raise InvalidEncoding(magnitude, num_bits)
        return cap - magnitude
    # 2^64 itself is out of u64 range
    return (U64_MAX - magnitude) + 1


# encode(value, n) -> unsigned pattern shown for `value` at width n
def encode(value: int, num_bits: int):
    if value >= 0:
        return value
    return twos_complement(-value, num_bits)
