# ecprims

Big-integer elliptic-curve primitives in plain Python, together with the
record types used to describe memory accesses and precompile calls.

## What is inside

- `ecprims.curve`: `CurveType`, the abstract `EllipticCurve` interface and
  the frozen `AffinePoint` dataclass. Points add with `+` (through the
  curve's `ec_add`), negate with `-`, and multiply by an integer with `*`
  or `scalar_mul`, which reduces the scalar modulo `2**nb_scalar_bits()`
  and uses double-and-add starting from the curve's affine neutral
  element. `from_words_le` and `to_words_le` convert to and from
  little-endian 32-bit words. The module also defines `WORD_SIZE`,
  `NUM_WORDS_FIELD_ELEMENT`, `NUM_BYTES_FIELD_ELEMENT`,
  `COMPRESSED_POINT_BYTES` and `NUM_WORDS_EC_POINT`.
- `ecprims.edwards`: `EdwardsCurve` and the ready-made `ED25519` curve
  (with `ED25519_BASE_FIELD`), plus `ed25519_sqrt`, `compress` and
  `decompress` for 32-byte compressed points.
- `ecprims.weierstrass`: `SwCurve`, `FieldType`, the ready-made `BN254`
  and `SECP256K1` curves (with their base fields), `modpow`,
  `secp256k1_sqrt` and `secp256k1_decompress`. `sw_add` raises
  `ValueError` when both points are the same, so `+` on a Weierstrass
  curve needs distinct points; use `sw_double` and `sw_scalar_mul` there.
  Weierstrass curves have no affine neutral element, so `ec_neutral()`
  returns `None` and `sw_scalar_mul` raises `ValueError` for a zero scalar.
- `ecprims.bls12_381`: the `BLS12381` curve and its base field,
  `bls12381_sqrt` and `bls12381_decompress` for 48-byte big-endian
  compressed G1 points.
- `ecprims.params`: the frozen `FieldParameters` dataclass, which gives a
  field's modulus, bit count, limb encoding and word sizes;
  `limbs_from_vec`; and `U256_FIELD`, which uses 2^256 as its modulus.
- `ecprims.utils`: `biguint_to_bits_le`, `biguint_to_limbs` and
  `biguint_from_limbs`.
- `ecprims.polynomial`: `Polynomial` with addition (of polynomials or of a
  constant), subtraction, negation, multiplication, zero-padding-aware
  equality, `eval`, `degree`, `root_quotient` and `as_field`.
- `ecprims.memory_events`: `MemoryRecord`, `MemoryAccessPosition`,
  `MemoryReadRecord` and `MemoryWriteRecord` (which raise `ValueError`
  unless they come strictly after their previous access),
  `MemoryInitializeFinalizeEvent` and `MemoryLocalEvent`.
- `ecprims.events`: `LookupId`, `SyscallEvent`, `create_alu_lookup_id`,
  `create_alu_lookups` and `sorted_table_lines`, which formats a table of
  counts largest first with right-justified counts and lower-cased labels.
- `ecprims.precompile_events`: `FieldOperation`, one dataclass per
  precompile event (`EllipticCurveAddEvent`, `EllipticCurveDoubleEvent`,
  `EllipticCurveDecompressEvent`, `EdDecompressEvent`, `FpOpEvent`,
  `Fp2AddSubEvent`, `Fp2MulEvent`, `KeccakPermuteEvent`,
  `ShaCompressEvent`, `ShaExtendEvent`, `Uint256MulEvent`),
  `PrecompileKind`, `PrecompileEvent` (which checks that the event matches
  its kind) and `local_mem_events`.

## Example

```python
from ecprims.edwards import ED25519, compress, decompress
from ecprims.weierstrass import BN254

g = ED25519.ec_generator()
p = g * 12345
assert decompress(compress(p)) == p
assert g + ED25519.neutral() == g

h = BN254.ec_generator()
assert BN254.sw_scalar_mul(h, 2) == BN254.sw_double(h)
```

## What it does not do

The event classes are plain records: the package does not execute
programs, read or write emulated memory, or run the precompiled
operations that would produce these events. It has no command-line tool.

## Installation and tests

```
pip install .
pip install ".[test]"
pytest
```

The package depends only on the Python standard library and needs
Python 3.10 or newer.