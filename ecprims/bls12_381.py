"""The BLS12-381 curve: parameters, point decompression and square roots."""

from __future__ import annotations

from .curve import AffinePoint, CurveType
from .params import FieldParameters
from .weierstrass import FieldType, SwCurve

# Flags carried in the top bits of the first byte of a compressed G1 point.
COMPRESSION_FLAG = 0b1000_0000
INFINITY_FLAG = 0b0100_0000
Y_IS_ODD_FLAG = 0b0010_0000
_FLAG_MASK = COMPRESSION_FLAG | INFINITY_FLAG | Y_IS_ODD_FLAG

G1_BYTES = 48

BLS12381_BASE_FIELD = FieldParameters(
    name="Bls12381",
    modulus_bytes=bytes(
        [
            171, 170, 255, 255, 255, 255, 254, 185, 255, 255, 83, 177, 254, 255, 171, 30,
            36, 246, 176, 246, 160, 210, 48, 103, 191, 18, 133, 243, 132, 75, 119, 100,
            215, 172, 75, 67, 182, 167, 27, 75, 154, 230, 127, 57, 234, 17, 1, 26,
        ]
    ),
    nb_limbs=48,
    nb_witness_limbs=94,
    witness_offset=1 << 15,
)

BLS12381_FIELD_TYPE = FieldType.BLS12381

BLS12381 = SwCurve(
    name="Bls12381",
    base_field=BLS12381_BASE_FIELD,
    curve_type=CurveType.BLS12381,
    a=bytes(48),
    b=bytes([4]) + bytes(47),
    generator_point=(
        3685416753713387016781088315183077757961620795782546409894578378688607592378376318836054947676345821548104185464507,
        1339506544944476473020471379941921221584933875938349620426543736416511423956333506472724655353366534992391756441569,
    ),
    prime_group_order=(
        52435875175126190479447740508185965837690552500527637822603658699938581184513
    ),
)


def bls12381_sqrt(a: int) -> int:
    """A square root of ``a`` in the BLS12-381 base field.

    Raises ValueError when ``a`` is not a square.
    """
    modulus = BLS12381_BASE_FIELD.modulus()
    a %= modulus
    # The modulus is 3 mod 4, so a^((p+1)/4) is a root whenever one exists.
    root = pow(a, (modulus + 1) // 4, modulus)
    if root * root % modulus != a:
        raise ValueError("a is not a square")
    return root


def bls12381_decompress(bytes_be: bytes, sign_bit: int) -> AffinePoint:
    """Recover a G1 point from its 48-byte big-endian compressed x.

    The y coordinate is the lexicographically larger root when ``sign_bit``
    is 1 or the y flag is already set in the encoding, the smaller otherwise.
    """
    if len(bytes_be) != G1_BYTES:
        raise ValueError(f"a compressed G1 point is {G1_BYTES} bytes long")
    data = bytearray(bytes_be)
    flags = COMPRESSION_FLAG
    if sign_bit == 1:
        flags |= Y_IS_ODD_FLAG
    data[0] |= flags

    if data[0] & INFINITY_FLAG:
        raise ValueError("the point at infinity has no affine form")
    y_is_larger = bool(data[0] & Y_IS_ODD_FLAG)
    data[0] &= ~_FLAG_MASK & 0xFF

    modulus = BLS12381_BASE_FIELD.modulus()
    x = int.from_bytes(data, "big")
    if x >= modulus:
        raise ValueError("x is not a canonical field element")

    rhs = (pow(x, 3, modulus) + BLS12381.b_int()) % modulus
    try:
        root = bls12381_sqrt(rhs)
    except ValueError as exc:
        raise ValueError("x is not the coordinate of a curve point") from exc
    other = (modulus - root) % modulus
    y = max(root, other) if y_is_larger else min(root, other)
    return AffinePoint(x, y, BLS12381)