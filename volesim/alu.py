"""Arithmetic and logic operations on hexadecimal register values.

Values travel through the machine as upper-case hexadecimal strings.  The
floating-point helpers use an 8-bit format: one sign bit, a 3-bit exponent
with a bias of 4, and a 4-bit mantissa read as a fraction of 16.
"""

from __future__ import annotations

import math
import struct
from itertools import takewhile

_DECIMAL_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_WHITESPACE = " \t\n\v\f\r"

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_UNSIGNED_MAX = (1 << 64) - 1
_WORD_MASK = 0xFFFFFFFF


def _parse_int(text: str, base: int, *, unsigned: bool = False) -> int:
    """Parse the leading integer of ``text`` the way the C library does.

    Leading whitespace, a sign and (in base 16) a ``0x`` prefix are accepted;
    parsing stops at the first character that is not a digit.  A string with
    no digits raises ValueError, a value out of range raises OverflowError.
    """
    digits_allowed = _HEX_DIGITS if base == 16 else _DECIMAL_DIGITS
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest and rest[0] in "+-":
        negative = rest[0] == "-"
        rest = rest[1:]
    if base == 16 and rest[:2].lower() == "0x" and rest[2:3] and rest[2] in _HEX_DIGITS:
        rest = rest[2:]
    digits = "".join(takewhile(digits_allowed.__contains__, rest))
    if not digits:
        raise ValueError(f"invalid number: {text!r}")
    magnitude = int(digits, base)
    if unsigned:
        if magnitude > _UNSIGNED_MAX:
            raise OverflowError(f"number out of range: {text!r}")
        return -magnitude if negative else magnitude
    value = -magnitude if negative else magnitude
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"number out of range: {text!r}")
    return value


def _to_float32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    if not math.isfinite(value):
        raise ValueError(f"cannot encode non-finite value {value!r}")
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"value {value!r} is out of float range") from exc


def float_to_hex(value: float) -> str:
    """Encode ``value`` in the 8-bit floating-point format as hex digits."""
    value = _to_float32(value)
    sign = 1 if value < 0 else 0
    value = abs(value)
    if value == 0.0:
        return "00"
    exponent = 0
    while value >= 1.0:
        value /= 2
        exponent += 1
    while value < 0.5:
        value *= 2
        exponent -= 1
    mantissa = int((value - 1.0) * 16) & 0x0F
    exponent += 4
    return format(sign << 7 | (exponent & 0x07) << 4 | mantissa, "X")


def to_floating_point(hex_str: str) -> float:
    """Decode an 8-bit floating-point hex string into a float."""
    byte = _parse_int(hex_str, 16, unsigned=True) & 0xFF
    sign = byte >> 7
    exponent = ((byte >> 4) & 0x07) - 4
    mantissa = (byte & 0x0F) / 16.0
    return (-1.0 if sign else 1.0) * mantissa * 2.0**exponent


def hex_to_dec_twos_complement(hex_str: str, bits: int = 8) -> int:
    """Read ``hex_str`` as a two's complement integer of ``bits`` bits."""
    value = _parse_int(hex_str, 16)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def dec_to_hex_twos_complement(value: int, bits: int = 8) -> str:
    """Format ``value`` as zero-padded two's complement hex of ``bits`` bits."""
    if value < 0:
        value += 1 << bits
    if value < 0:
        value &= _WORD_MASK
    return format(value, f"0{bits // 4}X") if bits >= 4 else format(value, "X")


def hex_to_dec(hex_num: str) -> str:
    """Convert a hexadecimal string to its decimal string."""
    return str(_parse_int(hex_num, 16))


def dec_to_hex(num: str) -> str:
    """Convert a decimal string to upper-case hex (negatives as 32-bit words)."""
    return format(_parse_int(num, 10) & _WORD_MASK, "X")


def add_binary(hex_s: str, hex_t: str, bits: int = 8) -> str:
    """Add two two's complement hex values, wrapping at ``bits`` bits."""
    total = hex_to_dec_twos_complement(hex_s, bits) + hex_to_dec_twos_complement(hex_t, bits)
    return dec_to_hex_twos_complement(total & ((1 << bits) - 1), bits)


def _operands(num1: str, num2: str) -> tuple[int, int]:
    return int(hex_to_dec(num1)), int(hex_to_dec(num2))


def or_two_nums(num1: str, num2: str) -> str:
    """Bitwise OR of two hex values."""
    a, b = _operands(num1, num2)
    return dec_to_hex(str(a | b))


def and_two_nums(num1: str, num2: str) -> str:
    """Bitwise AND of two hex values."""
    a, b = _operands(num1, num2)
    return dec_to_hex(str(a & b))


def xor_two_nums(num1: str, num2: str) -> str:
    """Bitwise XOR of two hex values."""
    a, b = _operands(num1, num2)
    return dec_to_hex(str(a ^ b))


def hex_addition_custom_float(hex1: str, hex2: str) -> str:
    """Add two 8-bit floating-point values and encode the sum the same way."""
    total = to_floating_point(hex1) + to_floating_point(hex2)
    return float_to_hex(float(f"{total:.6f}"))


def rotate(hex1: str, hex2: str) -> str:
    """Rotate ``hex1`` right by ``hex2`` bits.

    A single hex digit rotates within 4 bits, anything longer within 32.
    """
    value = int(hex_to_dec(hex1))
    shift = int(hex_to_dec(hex2))
    if shift < 0:
        raise ValueError(f"negative rotation amount: {hex2!r}")
    width = 4 if len(hex1) == 1 else 32
    shift %= width
    mask = (1 << width) - 1
    rotated = ((value >> shift) | (value << (width - shift))) & mask
    return format(rotated, "X")