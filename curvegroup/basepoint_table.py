"""Precomputed tables of basepoint multiples for fixed-base scalar multiplication.

A table for radix 2**w holds, for i = 0..31, the multiples
1*P_i, ..., 2**(w-1)*P_i of P_i = 2**(2*w*i) * B.  A scalar is recoded into
signed radix-2**w digits.  Odd-indexed digits are summed first, the total is
multiplied by 2**w, and the even-indexed digits are then added.
"""

from __future__ import annotations

from curvegroup.edwards import ED25519_BASEPOINT_POINT, EdwardsPoint

# Number of signed digits (additions) needed for each supported radix.
RADIX_ADDITIONS: dict[int, int] = {16: 64, 32: 52, 64: 43, 128: 37, 256: 33}

_TABLE_COUNT = 32
_SCALAR_LIMIT = 1 << 255


def _radix_2w_digits(scalar: int, w: int, count: int) -> list[int]:
    """Recode scalar into `count` signed digits in [-2**(w-1), 2**(w-1)).

    The last digit absorbs the final carry and may reach 2**(w-1).
    """
    radix = 1 << w
    half = radix >> 1
    mask = radix - 1
    digits = [(scalar >> (w * i)) & mask for i in range(count)]
    carry = 0
    for i, digit in enumerate(digits[:-1]):
        digit += carry
        carry = (digit + half) >> w
        digits[i] = digit - (carry << w)
    digits[-1] += carry
    return digits


class EdwardsBasepointTable:
    """Multiples of a basepoint, precomputed to speed up scalar * basepoint."""

    __slots__ = ("_radix", "_width", "_additions", "_tables")

    def __init__(self, basepoint: EdwardsPoint, radix: int = 16) -> None:
        if radix not in RADIX_ADDITIONS:
            supported = ", ".join(str(r) for r in RADIX_ADDITIONS)
            raise ValueError(f"unsupported radix {radix}; expected one of {supported}")
        self._radix = radix
        self._width = radix.bit_length() - 1
        self._additions = RADIX_ADDITIONS[radix]
        half = radix >> 1

        tables: list[tuple[EdwardsPoint, ...]] = []
        point = basepoint
        for _ in range(_TABLE_COUNT):
            multiples = [point]
            for _ in range(half - 1):
                multiples.append(multiples[-1] + point)
            tables.append(tuple(multiples))
            point = point.mul_by_pow_2(2 * self._width)
        self._tables = tuple(tables)

    @property
    def radix(self) -> int:
        """The radix 2**w this table was built for."""
        return self._radix

    def basepoint(self) -> EdwardsPoint:
        """Return the basepoint this table was built from."""
        return EdwardsPoint.identity() + self._tables[0][0]

    def _select(self, index: int, digit: int) -> EdwardsPoint:
        if digit == 0:
            return EdwardsPoint.identity()
        multiple = self._tables[index][abs(digit) - 1]
        return -multiple if digit < 0 else multiple

    def basepoint_mul(self, scalar: int) -> EdwardsPoint:
        """Compute scalar * basepoint for 0 <= scalar < 2**255."""
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            raise TypeError("scalar must be an int")
        if not 0 <= scalar < _SCALAR_LIMIT:
            raise ValueError("scalar must satisfy 0 <= scalar < 2**255")

        digits = _radix_2w_digits(scalar, self._width, self._additions)
        result = EdwardsPoint.identity()
        for i in range(1, self._additions, 2):
            result = result + self._select(i // 2, digits[i])
        result = result.mul_by_pow_2(self._width)
        for i in range(0, self._additions, 2):
            result = result + self._select(i // 2, digits[i])
        return result

    def with_radix(self, radix: int) -> EdwardsBasepointTable:
        """Build a table for the same basepoint with a different radix."""
        return EdwardsBasepointTable(self.basepoint(), radix)

    def __mul__(self, scalar: int) -> EdwardsPoint:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        return self.basepoint_mul(scalar)

    def __rmul__(self, scalar: int) -> EdwardsPoint:
        return self.__mul__(scalar)

    def __repr__(self) -> str:
        return (
            f"EdwardsBasepointTable(radix={self._radix}, "
            f"basepoint={self.basepoint().compress().to_bytes().hex()})"
        )


ED25519_BASEPOINT_TABLE = EdwardsBasepointTable(ED25519_BASEPOINT_POINT, 16)