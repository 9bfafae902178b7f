"""Scalar multiplication on the Montgomery form of Curve25519.

A MontgomeryPoint holds only the affine u-coordinate of a point on the
curve v^2 = u^3 + A u^2 + u or on its quadratic twist.  Sign information
is discarded, so P and -P share an encoding.  Scalar multiplication uses
the Montgomery ladder on the projective u-line.

Scalars are plain Python integers.
"""

from __future__ import annotations

import hashlib

from curvegroup.edwards import CompressedEdwardsY, EdwardsPoint
from curvegroup.field import (
    APLUS2_OVER_FOUR,
    MONTGOMERY_A,
    MONTGOMERY_A_NEG,
    FieldElement,
)


class MontgomeryPoint:
    """The 32-byte little-endian u-coordinate of a Montgomery point.

    Equality and hashing are defined modulo p, so unreduced encodings
    compare equal to their reduced forms.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        self._data = data

    @classmethod
    def identity(cls) -> MontgomeryPoint:
        """The point u = 0, which the ladder returns for the zero scalar."""
        return cls(bytes(32))

    def to_bytes(self) -> bytes:
        """Return the 32 encoded bytes as given."""
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def to_edwards(self, sign: int) -> EdwardsPoint | None:
        """Lift to an Edwards point with the given sign of x (0 positive, 1 negative).

        Returns None if u is the coordinate of a point on the twist.
        """
        if sign not in (0, 1):
            raise ValueError("sign must be 0 or 1")
        u = FieldElement.from_bytes(self._data)
        # u = -1 is exceptional for the birational map and lies on the twist.
        if u == FieldElement.MINUS_ONE:
            return None
        one = FieldElement.ONE
        y = (u - one) * (u + one).invert()
        y_bytes = bytearray(y.to_bytes())
        y_bytes[31] ^= sign << 7
        return CompressedEdwardsY(bytes(y_bytes)).decompress()

    def __mul__(self, scalar: int) -> MontgomeryPoint:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        # u(-P) = u(P), so the sign of the scalar does not matter.
        n = abs(scalar)
        affine_u = FieldElement.from_bytes(self._data)
        x0 = (FieldElement.ONE, FieldElement.ZERO)
        x1 = (affine_u, FieldElement.ONE)

        prev_bit = 0
        for position in reversed(range(n.bit_length())):
            bit = (n >> position) & 1
            if prev_bit ^ bit:
                x0, x1 = x1, x0
            x0, x1 = _differential_add_and_double(x0, x1, affine_u)
            prev_bit = bit
        if prev_bit:
            x0, x1 = x1, x0

        U, W = x0
        return MontgomeryPoint((U * W.invert()).to_bytes())

    def __rmul__(self, scalar: int) -> MontgomeryPoint:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MontgomeryPoint):
            return NotImplemented
        return FieldElement.from_bytes(self._data) == FieldElement.from_bytes(other._data)

    def __hash__(self) -> int:
        canonical = FieldElement.from_bytes(self._data).to_bytes()
        return hash(("MontgomeryPoint", canonical))

    def __repr__(self) -> str:
        return f"MontgomeryPoint({self._data.hex()})"


def _differential_add_and_double(
    P: tuple[FieldElement, FieldElement],
    Q: tuple[FieldElement, FieldElement],
    affine_PmQ: FieldElement,
) -> tuple[tuple[FieldElement, FieldElement], tuple[FieldElement, FieldElement]]:
    """Return (u([2]P), u(P + Q)) in projective form, given u(P - Q)."""
    U_P, W_P = P
    U_Q, W_Q = Q

    t0 = U_P + W_P
    t1 = U_P - W_P
    t2 = U_Q + W_Q
    t3 = U_Q - W_Q

    t4 = t0.square()
    t5 = t1.square()
    t6 = t4 - t5  # 4 U_P W_P

    t7 = t0 * t3
    t8 = t1 * t2
    t9 = t7 + t8
    t10 = t7 - t8

    t11 = t9.square()
    t12 = t10.square()

    t13 = APLUS2_OVER_FOUR * t6
    t14 = t4 * t5
    t15 = t13 + t5
    t16 = t6 * t15

    t17 = affine_PmQ * t12
    t18 = t11

    return (t14, t16), (t18, t17)


def elligator_encode(r_0: FieldElement) -> MontgomeryPoint:
    """Apply the Elligator 2 map to a field element, giving a Montgomery point."""
    one = FieldElement.ONE
    d_1 = one + r_0.square2()  # 1 + 2r^2
    d = MONTGOMERY_A_NEG * d_1.invert()  # -A / (1 + 2r^2)

    d_sq = d.square()
    au = MONTGOMERY_A * d
    inner = d_sq + au + one
    eps = d * inner  # d^3 + A d^2 + d

    eps_is_sq, _ = FieldElement.sqrt_ratio_i(eps, one)

    if eps_is_sq:
        u = d
    else:
        u = -(d + MONTGOMERY_A)
    return MontgomeryPoint(u.to_bytes())


def nonspec_map_to_curve(data: bytes) -> EdwardsPoint:
    """Map the SHA-512 digest of data onto the curve, clearing the cofactor.

    This is not a uniform hash-to-curve function: it applies Elligator 2
    once to the first half of the digest.
    """
    digest = hashlib.sha512(bytes(data)).digest()
    res = digest[:32]
    sign_bit = (res[31] & 0x80) >> 7
    fe = FieldElement.from_bytes(res)
    point = elligator_encode(fe).to_edwards(sign_bit)
    if point is None:
        raise ArithmeticError("Montgomery conversion to Edwards point in Elligator failed")
    return point.mul_by_cofactor()


X25519_BASEPOINT = MontgomeryPoint(b"\x09" + bytes(31))