"""Group operations on the twisted Edwards form of Curve25519.

Points are kept in extended twisted coordinates (X : Y : Z : T) with
x = X/Z, y = Y/Z and x*y = T/Z, and combined with the complete formulas
of Hisil, Wong, Carter and Dawson for the curve -x^2 + y^2 = 1 + d x^2 y^2.

Scalars are plain Python integers.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce

from curvegroup.field import EDWARDS_D, EDWARDS_D2, FieldElement

# Order of the prime-order subgroup generated by the Ed25519 basepoint.
BASEPOINT_ORDER = 2**252 + 27742317777372353535851937790883648493


class CompressedEdwardsY:
    """The 32-byte "Ed25519" encoding of a point.

    The low 255 bits hold the y-coordinate; the top bit of the last byte
    holds the sign of x.
    """

    __slots__ = ("_data",)

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        self._data = data

    @classmethod
    def identity(cls) -> CompressedEdwardsY:
        """The encoding of the identity point (y = 1, x = 0)."""
        return cls(b"\x01" + bytes(31))

    def to_bytes(self) -> bytes:
        """Return the 32 encoded bytes."""
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def decompress(self) -> EdwardsPoint | None:
        """Recover the point, or return None if y is not on the curve."""
        Y = FieldElement.from_bytes(self._data)
        Z = FieldElement.ONE
        YY = Y.square()
        u = YY - Z
        v = YY * EDWARDS_D + Z
        is_valid_y_coord, X = FieldElement.sqrt_ratio_i(u, v)
        if not is_valid_y_coord:
            return None
        # sqrt_ratio_i gives the nonnegative root; apply the encoded sign.
        if self._data[31] >> 7:
            X = -X
        return EdwardsPoint(X, Y, Z, X * Y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompressedEdwardsY):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(("CompressedEdwardsY", self._data))

    def __repr__(self) -> str:
        return f"CompressedEdwardsY({self._data.hex()})"


class EdwardsPoint:
    """A point on the Edwards form of Curve25519, in extended coordinates."""

    __slots__ = ("X", "Y", "Z", "T")

    def __init__(
        self, X: FieldElement, Y: FieldElement, Z: FieldElement, T: FieldElement
    ) -> None:
        self.X = X
        self.Y = Y
        self.Z = Z
        self.T = T

    @classmethod
    def identity(cls) -> EdwardsPoint:
        """The neutral element (0 : 1 : 1 : 0)."""
        return cls(FieldElement.ZERO, FieldElement.ONE, FieldElement.ONE, FieldElement.ZERO)

    def is_identity(self) -> bool:
        """True if this is the neutral element."""
        return self == EdwardsPoint.identity()

    def is_valid(self) -> bool:
        """Check the curve equation and the Segre relation XY = ZT."""
        XX = self.X.square()
        YY = self.Y.square()
        ZZ = self.Z.square()
        lhs = (YY - XX) * ZZ
        rhs = ZZ.square() + EDWARDS_D * XX * YY
        return lhs == rhs and self.X * self.Y == self.Z * self.T

    def compress(self) -> CompressedEdwardsY:
        """Encode this point as a CompressedEdwardsY."""
        recip = self.Z.invert()
        x = self.X * recip
        y = self.Y * recip
        encoded = bytearray(y.to_bytes())
        if x.is_negative():
            encoded[31] ^= 0x80
        return CompressedEdwardsY(bytes(encoded))

    def to_montgomery(self):
        """Map to the Montgomery u-line via u = (1+y)/(1-y).

        The identity is sent to the 2-torsion point u = 0.
        """
        from curvegroup.montgomery import MontgomeryPoint

        U = self.Z + self.Y
        W = self.Z - self.Y
        return MontgomeryPoint((U * W.invert()).to_bytes())

    def double(self) -> EdwardsPoint:
        """Return 2 * self."""
        A = self.X.square()
        B = self.Y.square()
        C = self.Z.square2()
        D = -A
        E = (self.X + self.Y).square() - A - B
        G = D + B
        F = G - C
        H = D - B
        return EdwardsPoint(E * F, G * H, F * G, E * H)

    def mul_by_pow_2(self, k: int) -> EdwardsPoint:
        """Return 2**k * self by k successive doublings; k must be positive."""
        if k < 1:
            raise ValueError("k must be positive")
        point = self
        for _ in range(k):
            point = point.double()
        return point

    def mul_by_cofactor(self) -> EdwardsPoint:
        """Return 8 * self."""
        return self.mul_by_pow_2(3)

    def is_small_order(self) -> bool:
        """True if this point lies in the 8-torsion subgroup."""
        return self.mul_by_cofactor().is_identity()

    def is_torsion_free(self) -> bool:
        """True if this point lies in the prime-order subgroup."""
        return (self * BASEPOINT_ORDER).is_identity()

    def __add__(self, other: EdwardsPoint) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        A = (self.Y - self.X) * (other.Y - other.X)
        B = (self.Y + self.X) * (other.Y + other.X)
        C = self.T * EDWARDS_D2 * other.T
        D = self.Z * other.Z
        D = D + D
        E = B - A
        F = D - C
        G = D + C
        H = B + A
        return EdwardsPoint(E * F, G * H, F * G, E * H)

    def __sub__(self, other: EdwardsPoint) -> EdwardsPoint:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> EdwardsPoint:
        return EdwardsPoint(-self.X, self.Y, self.Z, -self.T)

    def __mul__(self, scalar: int) -> EdwardsPoint:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        if scalar < 0:
            return (-self) * (-scalar)
        result = EdwardsPoint.identity()
        for bit in bin(scalar)[2:]:
            result = result.double()
            if bit == "1":
                result = result + self
        return result

    def __rmul__(self, scalar: int) -> EdwardsPoint:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return (
            self.X * other.Z == other.X * self.Z
            and self.Y * other.Z == other.Y * self.Z
        )

    def __hash__(self) -> int:
        return hash(("EdwardsPoint", self.compress().to_bytes()))

    def __repr__(self) -> str:
        return f"EdwardsPoint({self.compress().to_bytes().hex()})"


def sum_points(points: Iterable[EdwardsPoint]) -> EdwardsPoint:
    """Add up points, starting from the identity."""
    return reduce(lambda acc, point: acc + point, points, EdwardsPoint.identity())


ED25519_BASEPOINT_COMPRESSED = CompressedEdwardsY(b"\x58" + b"\x66" * 31)

_basepoint = ED25519_BASEPOINT_COMPRESSED.decompress()
if _basepoint is None:
    raise RuntimeError("basepoint failed to decompress")
ED25519_BASEPOINT_POINT: EdwardsPoint = _basepoint


def _order_eight_point() -> EdwardsPoint:
    # A point of order 8 doubles to (+-i, 0), so x^2 = -y^2, which gives
    # d*y^4 + 2*y^2 - 1 = 0 on the curve.
    one = FieldElement.ONE
    _, root = FieldElement.sqrt_ratio_i(one + EDWARDS_D, one)
    d_inv = EDWARDS_D.invert()
    for y_squared in ((root - one) * d_inv, (-root - one) * d_inv):
        is_square, y = FieldElement.sqrt_ratio_i(y_squared, one)
        if not is_square:
            continue
        point = CompressedEdwardsY(y.to_bytes()).decompress()
        if point is not None and not point.mul_by_pow_2(2).is_identity():
            return point
    raise RuntimeError("no point of order 8 found")


_torsion_generator = _order_eight_point()
EIGHT_TORSION: tuple[EdwardsPoint, ...] = tuple(
    _torsion_generator * i for i in range(8)
)