"""Multiscalar multiplication on Edwards points.

Provides the constant-time Straus method, variable-time Straus and
Pippenger methods (chosen by input size), a precomputation for repeated
variable-time multiplications against a fixed set of points, and the
variable-time double-base multiplication a*A + b*B with B the Ed25519
basepoint.

Scalars are plain Python integers; negative scalars are allowed.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache

from curvegroup.edwards import ED25519_BASEPOINT_POINT, EdwardsPoint

# Below this many terms the variable-time path uses Straus, above it Pippenger.
_PIPPENGER_THRESHOLD = 190

# NAF widths for points whose tables are built on the fly and for
# points whose tables are precomputed once.
_DYNAMIC_NAF_WIDTH = 5
_STATIC_NAF_WIDTH = 8


def _check_scalar(scalar: object) -> int:
    if not isinstance(scalar, int) or isinstance(scalar, bool):
        raise TypeError(f"scalar must be an int, not {type(scalar).__name__}")
    return scalar


def _check_point(point: object) -> EdwardsPoint:
    if not isinstance(point, EdwardsPoint):
        raise TypeError(f"expected an EdwardsPoint, not {type(point).__name__}")
    return point


def _paired(scalars: Iterable[int], points: Iterable) -> tuple[list[int], list]:
    scalar_list = [_check_scalar(s) for s in scalars]
    point_list = list(points)
    if len(scalar_list) != len(point_list):
        raise ValueError(
            f"got {len(scalar_list)} scalars but {len(point_list)} points"
        )
    return scalar_list, point_list


def _signed_radix(scalar: int, width: int) -> list[int]:
    """Signed radix-2**width digits, least significant first.

    Each digit lies in [-2**(width-1), 2**(width-1)).  The digits of a
    negative scalar are the negated digits of its absolute value.
    """
    sign = -1 if scalar < 0 else 1
    n = abs(scalar)
    radix = 1 << width
    half = radix >> 1
    mask = radix - 1
    digits = []
    while n:
        digit = n & mask
        if digit >= half:
            digit -= radix
        digits.append(sign * digit)
        n = (n - digit) >> width
    return digits


def _non_adjacent_form(scalar: int, width: int) -> list[int]:
    """Width-w NAF digits, least significant first.

    Nonzero digits are odd and lie strictly between -2**(width-1) and
    2**(width-1); any width consecutive digits hold at most one nonzero.
    """
    sign = -1 if scalar < 0 else 1
    n = abs(scalar)
    radix = 1 << width
    half = radix >> 1
    mask = radix - 1
    digits = []
    while n:
        if n & 1:
            digit = n & mask
            if digit >= half:
                digit -= radix
            n -= digit
        else:
            digit = 0
        digits.append(sign * digit)
        n >>= 1
    return digits


def _multiples(point: EdwardsPoint, count: int) -> tuple[EdwardsPoint, ...]:
    """Return (1*P, 2*P, ..., count*P)."""
    result = [point]
    for _ in range(count - 1):
        result.append(result[-1] + point)
    return tuple(result)


def _odd_multiples(point: EdwardsPoint, count: int) -> tuple[EdwardsPoint, ...]:
    """Return (1*P, 3*P, 5*P, ..., (2*count-1)*P)."""
    doubled = point.double()
    result = [point]
    for _ in range(count - 1):
        result.append(result[-1] + doubled)
    return tuple(result)


def _odd_table_for(point: EdwardsPoint, width: int) -> tuple[EdwardsPoint, ...]:
    return _odd_multiples(point, 1 << (width - 2))


@lru_cache(maxsize=1)
def _basepoint_odd_table() -> tuple[EdwardsPoint, ...]:
    return _odd_table_for(ED25519_BASEPOINT_POINT, _STATIC_NAF_WIDTH)


def _vartime_naf_sum(
    terms: Sequence[tuple[list[int], Sequence[EdwardsPoint]]],
) -> EdwardsPoint:
    """Sum of NAF-digit expansions against odd-multiple tables."""
    length = max((len(digits) for digits, _ in terms), default=0)
    result = EdwardsPoint.identity()
    for i in reversed(range(length)):
        result = result.double()
        for digits, table in terms:
            if i >= len(digits):
                continue
            digit = digits[i]
            if digit > 0:
                result = result + table[digit // 2]
            elif digit < 0:
                result = result - table[(-digit) // 2]
    return result


def _straus_vartime(scalars: list[int], points: list[EdwardsPoint]) -> EdwardsPoint:
    terms = [
        (_non_adjacent_form(s, _DYNAMIC_NAF_WIDTH), _odd_table_for(p, _DYNAMIC_NAF_WIDTH))
        for s, p in zip(scalars, points)
    ]
    return _vartime_naf_sum(terms)


def _pippenger_window(size: int) -> int:
    if size < 500:
        return 6
    if size < 800:
        return 7
    return 8


def _pippenger_vartime(scalars: list[int], points: list[EdwardsPoint]) -> EdwardsPoint:
    width = _pippenger_window(len(scalars))
    bucket_count = 1 << (width - 1)
    digit_lists = [_signed_radix(s, width) for s in scalars]
    columns = max((len(d) for d in digit_lists), default=0)

    total = EdwardsPoint.identity()
    for column in reversed(range(columns)):
        buckets = [EdwardsPoint.identity() for _ in range(bucket_count)]
        for digits, point in zip(digit_lists, points):
            if column >= len(digits):
                continue
            digit = digits[column]
            if digit > 0:
                buckets[digit - 1] = buckets[digit - 1] + point
            elif digit < 0:
                buckets[-digit - 1] = buckets[-digit - 1] - point

        # sum_j j * bucket_j via running sums from the top bucket down.
        running = EdwardsPoint.identity()
        column_sum = EdwardsPoint.identity()
        for bucket in reversed(buckets):
            running = running + bucket
            column_sum = column_sum + running

        total = total.mul_by_pow_2(width) + column_sum
    return total


def multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Compute sum(s_i * P_i) with a fixed pattern of operations (Straus, radix 16)."""
    scalar_list, point_list = _paired(scalars, points)
    point_list = [_check_point(p) for p in point_list]

    digit_lists = [_signed_radix(s, 4) for s in scalar_list]
    tables = [_multiples(p, 8) for p in point_list]
    length = max((len(d) for d in digit_lists), default=0)

    result = EdwardsPoint.identity()
    for i in reversed(range(length)):
        result = result.mul_by_pow_2(4)
        for digits, table in zip(digit_lists, tables):
            digit = digits[i] if i < len(digits) else 0
            if digit == 0:
                selected = EdwardsPoint.identity()
            elif digit > 0:
                selected = table[digit - 1]
            else:
                selected = -table[-digit - 1]
            result = result + selected
    return result


def optional_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint | None]
) -> EdwardsPoint | None:
    """Variable-time sum(s_i * P_i); returns None if any point is None."""
    scalar_list, point_list = _paired(scalars, points)
    if any(p is None for p in point_list):
        return None
    point_list = [_check_point(p) for p in point_list]
    if len(scalar_list) < _PIPPENGER_THRESHOLD:
        return _straus_vartime(scalar_list, point_list)
    return _pippenger_vartime(scalar_list, point_list)


def vartime_multiscalar_mul(
    scalars: Iterable[int], points: Iterable[EdwardsPoint]
) -> EdwardsPoint:
    """Variable-time sum(s_i * P_i)."""
    scalar_list, point_list = _paired(scalars, points)
    point_list = [_check_point(p) for p in point_list]
    result = optional_multiscalar_mul(scalar_list, point_list)
    assert result is not None
    return result


def vartime_double_scalar_mul_basepoint(
    a: int, A: EdwardsPoint, b: int
) -> EdwardsPoint:
    """Compute a*A + b*B in variable time, where B is the Ed25519 basepoint."""
    _check_scalar(a)
    _check_scalar(b)
    _check_point(A)
    terms = [
        (_non_adjacent_form(a, _DYNAMIC_NAF_WIDTH), _odd_table_for(A, _DYNAMIC_NAF_WIDTH)),
        (_non_adjacent_form(b, _STATIC_NAF_WIDTH), _basepoint_odd_table()),
    ]
    return _vartime_naf_sum(terms)


class VartimeEdwardsPrecomputation:
    """Precomputed tables for variable-time multiplication against fixed points."""

    __slots__ = ("_tables",)

    def __init__(self, static_points: Iterable[EdwardsPoint]) -> None:
        self._tables = tuple(
            _odd_table_for(_check_point(p), _STATIC_NAF_WIDTH) for p in static_points
        )

    def __len__(self) -> int:
        return len(self._tables)

    def optional_mixed_multiscalar_mul(
        self,
        static_scalars: Iterable[int],
        dynamic_scalars: Iterable[int],
        dynamic_points: Iterable[EdwardsPoint | None],
    ) -> EdwardsPoint | None:
        """Compute sum(a_i * A_i) + sum(b_j * B_j) for static A_i and dynamic B_j.

        Returns None if any dynamic point is None.  Fewer static scalars
        than static points may be given; the rest count as zero.
        """
        static_list = [_check_scalar(s) for s in static_scalars]
        if len(static_list) > len(self._tables):
            raise ValueError(
                f"got {len(static_list)} static scalars for "
                f"{len(self._tables)} static points"
            )
        dynamic_list, point_list = _paired(dynamic_scalars, dynamic_points)
        if any(p is None for p in point_list):
            return None
        point_list = [_check_point(p) for p in point_list]

        terms = [
            (_non_adjacent_form(s, _STATIC_NAF_WIDTH), table)
            for s, table in zip(static_list, self._tables)
        ]
        terms.extend(
            (_non_adjacent_form(s, _DYNAMIC_NAF_WIDTH), _odd_table_for(p, _DYNAMIC_NAF_WIDTH))
            for s, p in zip(dynamic_list, point_list)
        )
        return _vartime_naf_sum(terms)

    def vartime_mixed_multiscalar_mul(
        self,
        static_scalars: Iterable[int],
        dynamic_scalars: Iterable[int],
        dynamic_points: Iterable[EdwardsPoint],
    ) -> EdwardsPoint:
        """Like optional_mixed_multiscalar_mul, with every dynamic point present."""
        point_list = [_check_point(p) for p in dynamic_points]
        result = self.optional_mixed_multiscalar_mul(
            static_scalars, dynamic_scalars, point_list
        )
        assert result is not None
        return result

    def __repr__(self) -> str:
        return f"VartimeEdwardsPrecomputation(points={len(self._tables)})"