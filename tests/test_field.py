import pytest

from curvegroup.field import P, SQRT_M1, FieldElement

A_BYTES = bytes([
    0x04, 0xfe, 0xdf, 0x98, 0xa7, 0xfa, 0x0a, 0x68, 0x84, 0x92, 0xbd, 0x59, 0x08, 0x07, 0xa7,
    0x03, 0x9e, 0xd1, 0xf6, 0xf2, 0xe1, 0xd9, 0xe2, 0xa4, 0xa4, 0x51, 0x47, 0x36, 0xf3, 0xc3,
    0xa9, 0x17,
])

ASQ_BYTES = bytes([
    0x75, 0x97, 0x24, 0x9e, 0xe6, 0x06, 0xfe, 0xab, 0x24, 0x04, 0x56, 0x68, 0x07, 0x91, 0x2d,
    0x5d, 0x0b, 0x0f, 0x3f, 0x1c, 0xb2, 0x6e, 0xf2, 0xe2, 0x63, 0x9c, 0x12, 0xba, 0x73, 0x0b,
    0xe3, 0x62,
])

AINV_BYTES = bytes([
    0x96, 0x1b, 0xcd, 0x8d, 0x4d, 0x5e, 0xa2, 0x3a, 0xe9, 0x36, 0x37, 0x93, 0xdb, 0x7b, 0x4d,
    0x70, 0xb8, 0x0d, 0xc0, 0x55, 0xd0, 0x4c, 0x1d, 0x7b, 0x90, 0x71, 0xd8, 0xe9, 0xb6, 0x18,
    0xe6, 0x30,
])

AP58_BYTES = bytes([
    0x6a, 0x4f, 0x24, 0x89, 0x1f, 0x57, 0x60, 0x36, 0xd0, 0xbe, 0x12, 0x3c, 0x8f, 0xf5, 0xb1,
    0x59, 0xe0, 0xf0, 0xb8, 0x1b, 0x20, 0xd2, 0xb5, 0x1f, 0x15, 0x21, 0xf9, 0xe3, 0xe1, 0x61,
    0x21, 0x55,
])

B_BYTES = bytes([
    113, 191, 169, 143, 91, 234, 121, 15, 241, 131, 217, 36, 230, 101, 92, 234, 8, 208, 170,
    251, 97, 127, 70, 210, 58, 23, 166, 87, 240, 169, 184, 178,
])


@pytest.fixture
def a():
    return FieldElement.from_bytes(A_BYTES)


@pytest.fixture
def asq():
    return FieldElement.from_bytes(ASQ_BYTES)


def test_a_mul_a_vs_a_squared_constant(a, asq):
    assert asq == a * a


def test_a_square_vs_a_squared_constant(a, asq):
    assert asq == a.square()


def test_a_square2_vs_a_squared_constant(a, asq):
    assert a.square2() == asq + asq


def test_a_invert_vs_inverse_of_a_constant(a):
    ainv = FieldElement.from_bytes(AINV_BYTES)
    should_be_inverse = a.invert()
    assert ainv == should_be_inverse
    assert FieldElement.ONE == a * should_be_inverse


def test_invert_zero_is_zero():
    assert FieldElement.ZERO.invert() == FieldElement.ZERO


def test_batch_invert_a_matches_nonbatched(a, asq):
    ap58 = FieldElement.from_bytes(AP58_BYTES)
    ainv = FieldElement.from_bytes(AINV_BYTES)
    a0 = a - a
    a2 = a + a
    a_list = [a, ap58, asq, ainv, a0, a2]
    ainv_list = FieldElement.batch_invert(a_list)
    assert len(ainv_list) == 6
    for original, inverted in zip(a_list, ainv_list):
        assert original.invert() == inverted


def test_batch_invert_empty():
    assert FieldElement.batch_invert([]) == []


def test_sqrt_ratio_behavior():
    zero = FieldElement.ZERO
    one = FieldElement.ONE
    i = SQRT_M1
    two = one + one
    four = two + two

    choice, sqrt = FieldElement.sqrt_ratio_i(zero, zero)
    assert choice is True
    assert sqrt == zero
    assert sqrt.is_negative() is False

    choice, sqrt = FieldElement.sqrt_ratio_i(one, zero)
    assert choice is False
    assert sqrt == zero
    assert sqrt.is_negative() is False

    choice, sqrt = FieldElement.sqrt_ratio_i(two, one)
    assert choice is False
    assert sqrt.square() == two * i
    assert sqrt.is_negative() is False

    choice, sqrt = FieldElement.sqrt_ratio_i(four, one)
    assert choice is True
    assert sqrt.square() == four
    assert sqrt.is_negative() is False

    choice, sqrt = FieldElement.sqrt_ratio_i(one, four)
    assert choice is True
    assert sqrt.square() * four == one
    assert sqrt.is_negative() is False


def test_invsqrt_of_four():
    four = FieldElement(4)
    ok, r = four.invsqrt()
    assert ok is True
    assert r.square() * four == FieldElement.ONE


def test_invsqrt_of_zero_fails():
    ok, r = FieldElement.ZERO.invsqrt()
    assert ok is False
    assert r == FieldElement.ZERO


def test_a_p58_vs_ap58_constant(a):
    assert FieldElement.from_bytes(AP58_BYTES) == a.pow_p58()


def test_equality(a):
    ainv = FieldElement.from_bytes(AINV_BYTES)
    assert a == a
    assert not (a == ainv)


def test_from_bytes_highbit_is_ignored():
    cleared = bytearray(B_BYTES)
    cleared[31] &= 127
    assert FieldElement.from_bytes(bytes(cleared)) == FieldElement.from_bytes(B_BYTES)


def test_negation_round_trip():
    one = FieldElement(1)
    minus_one = FieldElement(P - 1)
    assert minus_one == FieldElement.MINUS_ONE
    assert -one == minus_one
    assert (-(-one)).to_bytes() == one.to_bytes()
    assert one + minus_one == FieldElement(0)


def test_encoding_is_canonical():
    wrong = bytes([0xee] + [0xff] * 30 + [0x7f])
    one = FieldElement.from_bytes(wrong)
    encoded = one.to_bytes()
    assert encoded[0] == 1
    assert encoded[1:] == bytes(31)


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        FieldElement.from_bytes(bytes(31))


def test_to_bytes_round_trip(a):
    assert a.to_bytes() == A_BYTES
    assert FieldElement.from_bytes(a.to_bytes()) == a


def test_is_zero_and_is_negative():
    assert FieldElement.ZERO.is_zero() is True
    assert FieldElement.ONE.is_zero() is False
    assert FieldElement.ONE.is_negative() is True
    assert FieldElement(2).is_negative() is False


def test_pow2k_matches_repeated_square(a):
    assert a.pow2k(1) == a.square()
    assert a.pow2k(3) == a.square().square().square()


def test_pow2k_requires_positive_k(a):
    with pytest.raises(ValueError):
        a.pow2k(0)


def test_sqrt_m1_squares_to_minus_one():
    assert SQRT_M1.square() == FieldElement.MINUS_ONE
    assert SQRT_M1.is_negative() is False


def test_values_reduced_mod_p():
    assert FieldElement(P + 5) == FieldElement(5)
    assert hash(FieldElement(P + 5)) == hash(FieldElement(5))


def test_immutable(a):
    with pytest.raises(AttributeError):
        a._value = 3
    assert a.to_bytes() == A_BYTES
    assert a == FieldElement.from_bytes(A_BYTES)