import pytest

from volesim import alu

ALL_BYTES = [f"{b:02X}" for b in range(256)]
NORMALIZED = [f"{b:02X}" for b in range(256) if b & 0x08]
EXACT_NORMALIZED = [c for c in NORMALIZED if (int(c, 16) >> 4) & 0x07 >= 2]
HEX_DIGITS = list("0123456789ABCDEF")


@pytest.mark.parametrize("code", NORMALIZED)
def test_float_round_trip(code):
    assert alu.float_to_hex(alu.to_floating_point(code)) == code.lstrip("0")


@pytest.mark.parametrize("value", [0.0, -0.0])
def test_float_zero_encodes_as_00(value):
    assert alu.float_to_hex(value) == "00"


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_float_non_finite_rejected(value):
    with pytest.raises(ValueError):
        alu.float_to_hex(value)


@pytest.mark.parametrize("b", range(0x80))
def test_sign_bit_negates(b):
    positive = alu.to_floating_point(f"{b:02X}")
    negative = alu.to_floating_point(f"{b | 0x80:02X}")
    assert negative == -positive


@pytest.mark.parametrize("code", ALL_BYTES)
def test_floating_point_bounded(code):
    assert abs(alu.to_floating_point(code)) < 8


@pytest.mark.parametrize("b", range(0, 256, 16))
def test_zero_mantissa_is_zero(b):
    assert alu.to_floating_point(f"{b:02X}") == 0.0


def test_floating_point_accepts_lower_case():
    assert alu.to_floating_point("4c") == alu.to_floating_point("4C")


def test_floating_point_uses_low_byte():
    assert alu.to_floating_point("148") == alu.to_floating_point("48")


@pytest.mark.parametrize("text", ["ZZ", "", "Invalid Index"])
def test_floating_point_invalid(text):
    with pytest.raises(ValueError):
        alu.to_floating_point(text)


@pytest.mark.parametrize("code", ALL_BYTES)
def test_twos_complement_round_trip(code):
    value = alu.hex_to_dec_twos_complement(code, 8)
    assert -128 <= value <= 127
    assert (value < 0) == (int(code, 16) >= 0x80)
    assert alu.dec_to_hex_twos_complement(value, 8) == code


@pytest.mark.parametrize("digit", HEX_DIGITS)
def test_twos_complement_four_bits(digit):
    value = alu.hex_to_dec_twos_complement(digit, 4)
    assert -8 <= value <= 7
    assert alu.dec_to_hex_twos_complement(value, 4) == digit


def test_twos_complement_pads():
    assert alu.dec_to_hex_twos_complement(5, 8) == "05"


@pytest.mark.parametrize("code", ["0", "1", "7F", "FF", "1A3", "7FFFFFFF"])
def test_hex_dec_round_trip(code):
    assert alu.dec_to_hex(alu.hex_to_dec(code)) == code


def test_hex_to_dec_overflow():
    with pytest.raises(OverflowError):
        alu.hex_to_dec("80000000")


def test_hex_to_dec_invalid():
    with pytest.raises(ValueError):
        alu.hex_to_dec("Invalid Index")


def test_hex_to_dec_stops_at_non_digit():
    assert alu.hex_to_dec("1G") == alu.hex_to_dec("1")


def test_dec_to_hex_negative_is_word():
    assert alu.dec_to_hex("-1") == "FFFFFFFF"


@pytest.mark.parametrize("code", ALL_BYTES)
def test_add_zero_identity(code):
    assert alu.add_binary(code, "00") == code


@pytest.mark.parametrize("code", ALL_BYTES)
def test_add_inverse(code):
    negated = alu.dec_to_hex_twos_complement(-alu.hex_to_dec_twos_complement(code))
    assert alu.add_binary(code, negated) == "00"


@pytest.mark.parametrize("a,b", [("12", "34"), ("FF", "7F"), ("80", "80"), ("0A", "F0")])
def test_add_commutative(a, b):
    assert alu.add_binary(a, b) == alu.add_binary(b, a)


def test_add_wraps():
    assert alu.add_binary("FF", "01") == "00"


PAIRS = [("12", "34"), ("FF", "0F"), ("A5", "5A"), ("0", "7C"), ("1A3", "FF")]


@pytest.mark.parametrize("a,b", PAIRS)
def test_xor_properties(a, b):
    assert alu.xor_two_nums(a, a) == alu.dec_to_hex("0")
    normalized_b = alu.dec_to_hex(alu.hex_to_dec(b))
    assert alu.xor_two_nums(a, alu.xor_two_nums(a, b)) == normalized_b


@pytest.mark.parametrize("a,b", PAIRS)
def test_and_or_absorption(a, b):
    normalized_a = alu.dec_to_hex(alu.hex_to_dec(a))
    assert alu.and_two_nums(a, a) == normalized_a
    assert alu.or_two_nums(a, a) == normalized_a
    assert alu.and_two_nums(a, alu.or_two_nums(a, b)) == normalized_a
    assert alu.or_two_nums(a, alu.and_two_nums(a, b)) == normalized_a


def test_bitwise_invalid():
    with pytest.raises(ValueError):
        alu.or_two_nums("Invalid Index", "01")


@pytest.mark.parametrize("code", EXACT_NORMALIZED)
def test_float_add_zero(code):
    assert alu.hex_addition_custom_float(code, "00") == code.lstrip("0")


@pytest.mark.parametrize("a,b", [("48", "4C"), ("5A", "3F"), ("C8", "6B")])
def test_float_add_commutative(a, b):
    assert alu.hex_addition_custom_float(a, b) == alu.hex_addition_custom_float(b, a)


def test_float_add_opposites_cancel():
    assert alu.hex_addition_custom_float("4C", "CC") == "00"


@pytest.mark.parametrize("digit", HEX_DIGITS)
def test_rotate_single_digit_cycles(digit):
    assert alu.rotate(digit, "0") == digit
    assert alu.rotate(digit, "4") == digit
    value = digit
    for _ in range(4):
        value = alu.rotate(value, "1")
    assert value == digit


def test_rotate_one_bit():
    assert alu.rotate("1", "1") == "8"


def test_rotate_word():
    assert alu.rotate("12345678", "20") == "12345678"
    value = "12345678"
    seen = []
    for _ in range(4):
        value = alu.rotate(value, "8")
        seen.append(value)
    assert seen[-1] == "12345678"
    assert len(set(seen)) == 4


def test_rotate_negative_shift():
    with pytest.raises(ValueError):
        alu.rotate("1", "-1")