import pytest

from curvegroup.basepoint_table import ED25519_BASEPOINT_TABLE, EdwardsBasepointTable
from curvegroup.edwards import (
    BASEPOINT_ORDER,
    ED25519_BASEPOINT_COMPRESSED,
    ED25519_BASEPOINT_POINT,
    CompressedEdwardsY,
)

A_SCALAR = int.from_bytes(
    bytes.fromhex("1a0e978a90f6622d3747023f8ad8264da758aa1b88e040d1589e7b7f2376ef09"),
    "little",
)
A_TIMES_BASEPOINT = CompressedEdwardsY(
    bytes.fromhex("ea27e26053df1b5956f14d5dec3c34c384a269b74cc3803ea8e2e7c9425e40a5")
)
BASE2_CMPRSSD = CompressedEdwardsY(
    bytes.fromhex("c9a3f86aae465f0e56513864510f3997561fa2c9e85ea21dc2292309f3cd6022")
)
UNREDUCED_SCALAR = (1 << 255) - 1


@pytest.fixture(scope="module")
def all_tables():
    return {
        radix: EdwardsBasepointTable(ED25519_BASEPOINT_POINT, radix)
        for radix in (16, 32, 64, 128, 256)
    }


def test_basepoint_mult_one_vs_basepoint():
    result = ED25519_BASEPOINT_TABLE.basepoint_mul(1)
    assert result.compress() == ED25519_BASEPOINT_COMPRESSED


def test_basepoint_table_basepoint_function_correct():
    assert ED25519_BASEPOINT_TABLE.basepoint().compress() == ED25519_BASEPOINT_COMPRESSED


def test_basepoint_mult_vs_ed25519py():
    assert (ED25519_BASEPOINT_TABLE * A_SCALAR).compress() == A_TIMES_BASEPOINT


def test_basepoint_mult_by_basepoint_order():
    result = ED25519_BASEPOINT_TABLE.basepoint_mul(BASEPOINT_ORDER)
    assert result.is_identity()
    assert result.compress() == CompressedEdwardsY.identity()


def test_precomputed_basepoint_mult():
    a_b1 = ED25519_BASEPOINT_TABLE * A_SCALAR
    a_b2 = ED25519_BASEPOINT_POINT * A_SCALAR
    assert a_b1.compress() == a_b2.compress()


def test_basepoint_mult_two_vs_basepoint2():
    assert (ED25519_BASEPOINT_TABLE * 2).compress() == BASE2_CMPRSSD


def test_zero_scalar_gives_identity():
    result = ED25519_BASEPOINT_TABLE.basepoint_mul(0)
    assert result.is_identity()
    assert result.compress() == CompressedEdwardsY.identity()


def test_rmul_matches_mul():
    assert (A_SCALAR * ED25519_BASEPOINT_TABLE) == (ED25519_BASEPOINT_TABLE * A_SCALAR)


@pytest.mark.parametrize("scalar", [A_SCALAR, UNREDUCED_SCALAR, 1, 2, 255, 2**252])
def test_basepoint_tables_agree(all_tables, scalar):
    expected = (ED25519_BASEPOINT_TABLE * scalar).compress()
    for radix, table in all_tables.items():
        assert (table * scalar).compress() == expected, radix


def test_all_tables_match_known_multiple(all_tables):
    for table in all_tables.values():
        assert (table * A_SCALAR).compress() == A_TIMES_BASEPOINT


def test_unreduced_scalar_matches_variable_base():
    expected = ED25519_BASEPOINT_POINT * UNREDUCED_SCALAR
    result = ED25519_BASEPOINT_TABLE.basepoint_mul(UNREDUCED_SCALAR)
    assert result.compress() == expected.compress()


def test_table_mul_is_additive():
    b = 123456789
    lhs = ED25519_BASEPOINT_TABLE * (A_SCALAR + b)
    rhs = (ED25519_BASEPOINT_TABLE * A_SCALAR) + (ED25519_BASEPOINT_TABLE * b)
    assert lhs == rhs


def test_with_radix_conversion_keeps_basepoint(all_tables):
    converted = all_tables[64].with_radix(128)
    assert converted.radix == 128
    assert converted.basepoint().compress() == ED25519_BASEPOINT_COMPRESSED
    assert (converted * A_SCALAR).compress() == A_TIMES_BASEPOINT


def test_table_for_other_basepoint():
    point = ED25519_BASEPOINT_POINT * 7
    table = EdwardsBasepointTable(point, 32)
    assert table.basepoint() == point
    assert table * 11 == ED25519_BASEPOINT_POINT * 77


def test_invalid_radix_raises():
    with pytest.raises(ValueError):
        EdwardsBasepointTable(ED25519_BASEPOINT_POINT, 8)


def test_negative_scalar_raises():
    with pytest.raises(ValueError):
        ED25519_BASEPOINT_TABLE.basepoint_mul(-1)


def test_oversized_scalar_raises():
    with pytest.raises(ValueError):
        ED25519_BASEPOINT_TABLE.basepoint_mul(1 << 255)


def test_non_integer_scalar_raises():
    table = ED25519_BASEPOINT_TABLE.with_radix(16)
    assert table.radix == 16
    with pytest.raises(TypeError):
        table * 1.5