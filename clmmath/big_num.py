"""Fixed-width unsigned integers held as plain Python ints.

Values are little-endian sequences of 64-bit words when split into words.
Every operation checks that its operand fits the given bit width.
"""

WORD_BITS = 64


def _check_width(bits):
    if bits <= 0 or bits % WORD_BITS:
        raise ValueError(f"bit width must be a positive multiple of {WORD_BITS}, got {bits}")


def _check_value(value, bits):
    _check_width(bits)
    if value < 0:
        raise ValueError("unsigned integer can't be created from negative value")
    if value >> bits:
        raise OverflowError(f"value does not fit in {bits} bits")
    return value


def max_value(bits):
    """Return the largest unsigned value of the given width."""
    _check_width(bits)
    return (1 << bits) - 1


U64_MAX = max_value(64)
U128_MAX = max_value(128)
U256_MAX = max_value(256)
U512_MAX = max_value(512)
U1024_MAX = max_value(1024)


def to_words(value, bits):
    """Split ``value`` into little-endian 64-bit words."""
    _check_value(value, bits)
    return [(value >> shift) & U64_MAX for shift in range(0, bits, WORD_BITS)]


def from_words(words):
    """Join little-endian 64-bit words into one integer."""
    result = 0
    for word in reversed(list(words)):
        if not 0 <= word <= U64_MAX:
            raise ValueError(f"word out of range: {word}")
        result = (result << WORD_BITS) | word
    return result


def bit(value, index, bits):
    """Return whether bit ``index`` of ``value`` is set."""
    _check_value(value, bits)
    if not 0 <= index < bits:
        raise IndexError(f"bit index {index} out of range for {bits}-bit value")
    return bool((value >> index) & 1)


def leading_zeros(value, bits):
    """Number of leading zero bits in a ``bits``-wide representation."""
    _check_value(value, bits)
    return bits - value.bit_length()


def trailing_zeros(value, bits):
    """Number of trailing zero bits; ``bits`` for zero."""
    _check_value(value, bits)
    if value == 0:
        return bits
    return (value & -value).bit_length() - 1


def shl(value, shift, bits):
    """Shift left, discarding bits beyond the width."""
    _check_value(value, bits)
    if shift < 0:
        raise ValueError("shift must not be negative")
    return (value << shift) & max_value(bits)


def shr(value, shift, bits):
    """Shift right, filling with zeros."""
    _check_value(value, bits)
    if shift < 0:
        raise ValueError("shift must not be negative")
    return value >> shift