"""Arithmetic in the prime field of order p = 2**255 - 19."""

from __future__ import annotations

from collections.abc import Iterable

P = 2**255 - 19

_HIGH_BIT_MASK = (1 << 255) - 1


class FieldElement:
    """An immutable element of the field Z / (2**255 - 19)."""

    __slots__ = ("_value",)

    ZERO: FieldElement
    ONE: FieldElement
    MINUS_ONE: FieldElement

    def __init__(self, value: int) -> None:
        object.__setattr__(self, "_value", value % P)

    def __setattr__(self, name, value):
        raise AttributeError("FieldElement is immutable")

    @property
    def value(self) -> int:
        """The canonical integer representative in [0, p)."""
        return self._value

    def __int__(self) -> int:
        return self._value

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Load 32 little-endian bytes, ignoring the top bit and reducing mod p."""
        if len(data) != 32:
            raise ValueError(f"expected 32 bytes, got {len(data)}")
        return cls(int.from_bytes(data, "little") & _HIGH_BIT_MASK)

    def to_bytes(self) -> bytes:
        """Return the canonical 32-byte little-endian encoding."""
        return self._value.to_bytes(32, "little")

    def is_negative(self) -> bool:
        """True if the low bit of the canonical encoding is set."""
        return bool(self._value & 1)

    def is_zero(self) -> bool:
        """True if this element is zero."""
        return self._value == 0

    def square(self) -> FieldElement:
        """Return self squared."""
        return FieldElement(self._value * self._value)

    def square2(self) -> FieldElement:
        """Return twice self squared."""
        return FieldElement(2 * self._value * self._value)

    def pow2k(self, k: int) -> FieldElement:
        """Square this element k times (k must be positive)."""
        if k < 1:
            raise ValueError("k must be positive")
        return FieldElement(pow(self._value, 1 << k, P))

    def invert(self) -> FieldElement:
        """Return the multiplicative inverse, or zero for zero input."""
        return FieldElement(pow(self._value, P - 2, P))

    def pow_p58(self) -> FieldElement:
        """Raise this element to the power (p-5)/8."""
        return FieldElement(pow(self._value, (P - 5) // 8, P))

    @staticmethod
    def sqrt_ratio_i(u: FieldElement, v: FieldElement) -> tuple[bool, FieldElement]:
        """Compute sqrt(u/v) or sqrt(i*u/v), always returning the nonnegative root.

        Returns (True, +sqrt(u/v)) if v is nonzero and u/v is square,
        (True, 0) if u is zero, (False, 0) if v is zero and u is nonzero,
        and (False, +sqrt(i*u/v)) if u/v is nonsquare.
        """
        v3 = v.square() * v
        v7 = v3.square() * v
        r = (u * v3) * (u * v7).pow_p58()
        check = v * r.square()

        minus_u = -u
        correct_sign_sqrt = check == u
        flipped_sign_sqrt = check == minus_u
        flipped_sign_sqrt_i = check == minus_u * SQRT_M1

        if flipped_sign_sqrt or flipped_sign_sqrt_i:
            r = SQRT_M1 * r
        if r.is_negative():
            r = -r

        return correct_sign_sqrt or flipped_sign_sqrt, r

    def invsqrt(self) -> tuple[bool, FieldElement]:
        """Attempt to compute sqrt(1/self); see sqrt_ratio_i."""
        return FieldElement.sqrt_ratio_i(FieldElement.ONE, self)

    @staticmethod
    def batch_invert(inputs: Iterable[FieldElement]) -> list[FieldElement]:
        """Invert many elements with a single inversion; zeros stay zero."""
        elements = list(inputs)
        prefixes = []
        acc = FieldElement.ONE
        for element in elements:
            prefixes.append(acc)
            if not element.is_zero():
                acc = acc * element

        acc = acc.invert()

        inverses: list[FieldElement] = []
        for element, prefix in zip(reversed(elements), reversed(prefixes)):
            if element.is_zero():
                inverses.append(element)
                continue
            inverses.append(acc * prefix)
            acc = acc * element
        inverses.reverse()
        return inverses

    def __add__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self._value + other._value)

    def __sub__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self._value - other._value)

    def __mul__(self, other: FieldElement) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement(self._value * other._value)

    def __neg__(self) -> FieldElement:
        return FieldElement(-self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(("FieldElement", self._value))

    def __repr__(self) -> str:
        return f"FieldElement({self.to_bytes().hex()})"


FieldElement.ZERO = FieldElement(0)
FieldElement.ONE = FieldElement(1)
FieldElement.MINUS_ONE = FieldElement(-1)

# Nonnegative square root of -1.
SQRT_M1 = FieldElement(pow(2, (P - 1) // 4, P))

# Edwards curve parameter d = -121665/121666 and 2*d.
EDWARDS_D = FieldElement(-121665 * pow(121666, P - 2, P))
EDWARDS_D2 = EDWARDS_D + EDWARDS_D

# Montgomery curve parameter A = 486662, its negation, and (A+2)/4.
MONTGOMERY_A = FieldElement(486662)
MONTGOMERY_A_NEG = -MONTGOMERY_A
APLUS2_OVER_FOUR = FieldElement(121666)