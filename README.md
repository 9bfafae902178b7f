# curvegroup

Group arithmetic on Curve25519, written in plain Python with no dependencies.
Scalars are plain Python integers.

## Modules

- `curvegroup.field`: `FieldElement`, an immutable integer modulo 2^255 - 19.
  It supports `+`, `-`, `*` and unary `-`, along with `square`, `square2`,
  `pow2k`, `invert` (zero maps to zero), `pow_p58`, `sqrt_ratio_i` and
  `invsqrt`. Both of the last two return a `(bool, FieldElement)` pair and
  always give the nonnegative root. `batch_invert` returns a new list of
  inverses, and zeros stay zero. `from_bytes` reads 32 little-endian bytes,
  ignores the top bit and reduces mod p. `to_bytes` gives the canonical
  encoding. The module also defines `SQRT_M1`, `EDWARDS_D`, `EDWARDS_D2`,
  `MONTGOMERY_A`, `MONTGOMERY_A_NEG` and `APLUS2_OVER_FOUR`.
- `curvegroup.edwards`: `EdwardsPoint` in extended twisted Edwards coordinates
  and its 32-byte encoding `CompressedEdwardsY`.
  - Points support `+`, `-`, unary `-` and `*` by an integer on either side.
  - Equality works across projective scalings.
  - Other methods are `double`, `mul_by_pow_2`, `mul_by_cofactor`,
    `is_small_order`, `is_torsion_free`, `is_identity`, `is_valid`, `compress`
    and `to_montgomery`.
  - `sum_points` adds up an iterable of points, starting from the identity.
  - Constants: `ED25519_BASEPOINT_COMPRESSED`, `ED25519_BASEPOINT_POINT`,
    `BASEPOINT_ORDER`, and `EIGHT_TORSION`, the eight points of the torsion
    subgroup.
- `curvegroup.basepoint_table`: `EdwardsBasepointTable(basepoint, radix)`, a
  precomputed table for fixed-base multiplication with radix 16, 32, 64, 128 or
  256.
  - `table * scalar` and `table.basepoint_mul(scalar)` accept
    `0 <= scalar < 2**255`. Other values raise `ValueError`.
  - `with_radix` builds a table for the same basepoint with another radix.
  - `ED25519_BASEPOINT_TABLE` is the radix-16 table for the Ed25519 basepoint.
- `curvegroup.multiscalar`: `multiscalar_mul`, `vartime_multiscalar_mul`,
  `optional_multiscalar_mul`, `vartime_double_scalar_mul_basepoint`, and
  `VartimeEdwardsPrecomputation`.
  - `VartimeEdwardsPrecomputation` computes sums that mix precomputed static
    points with dynamic ones.
  - Mismatched numbers of scalars and points raise `ValueError`.
  - The `optional_*` functions return `None` if any point is `None`.
- `curvegroup.montgomery`: `MontgomeryPoint`, a 32-byte u-coordinate.
  - `*` by an integer runs the Montgomery ladder.
  - Equality and hashing are taken mod p.
  - `to_edwards(sign)` returns `None` for points on the twist.
  - `elligator_encode` applies the Elligator 2 map.
  - `nonspec_map_to_curve` hashes bytes with SHA-512 and maps the result onto
    the curve. It is not a uniform hash-to-curve.
  - `X25519_BASEPOINT` is u = 9.

## Install

    pip install .

## Example

```python
from curvegroup.edwards import CompressedEdwardsY
from curvegroup.basepoint_table import EdwardsBasepointTable

base = CompressedEdwardsY(bytes.fromhex(
    "5866666666666666666666666666666666666666666666666666666666666666"
)).decompress()

table = EdwardsBasepointTable(base, 16)
p = table * 12345
assert p == base * 12345
assert (p + p).compress() == (2 * p).compress()
assert p.is_torsion_free()

u = base.to_montgomery()
assert (u * 7) == (base * 7).to_montgomery()
```

`CompressedEdwardsY.decompress` returns `None` when the bytes do not encode a
curve point.

## What it does not do

Nothing here runs in constant time, so do not use it where side channels
matter. There is no scalar type: scalars are never reduced modulo the group
order unless you do it. The package does not provide signatures, key exchange
protocols, the Ristretto group, or any serialization format beyond the raw
32-byte encodings.

## Tests

    pip install ".[test]"
    pytest