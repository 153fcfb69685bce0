"""Twisted Edwards curves and the Ed25519 curve."""

from __future__ import annotations

from dataclasses import dataclass

from .curve import AffinePoint, CurveType, EllipticCurve
from .params import FieldParameters

NUM_LIMBS = 32
WORDS_FIELD_ELEMENT = NUM_LIMBS // 4
WORDS_CURVE_POINT = NUM_LIMBS // 2


@dataclass(frozen=True)
class EdwardsCurve(EllipticCurve):
    """A twisted Edwards curve -x^2 + y^2 = 1 + d x^2 y^2 over ``base_field``."""

    name: str
    base_field: FieldParameters
    curve_type: CurveType
    d: bytes
    generator_point: tuple[int, int]
    prime_group_order: int
    neutral_point: tuple[int, int] = (0, 1)

    def d_biguint(self) -> int:
        """The curve constant d as an integer."""
        return int.from_bytes(self.d, "little")

    def neutral(self) -> AffinePoint:
        """The neutral element of the group."""
        x, y = self.neutral_point
        return AffinePoint(x, y, self)

    def ec_add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        modulus = self.base_field.modulus()
        x_3n = (p.x * q.y + p.y * q.x) % modulus
        y_3n = (p.y * q.y + p.x * q.x) % modulus

        all_xy = (p.x * p.y * q.x * q.y) % modulus
        dxy = (self.d_biguint() * all_xy) % modulus
        den_x = pow((1 + dxy) % modulus, modulus - 2, modulus)
        den_y = pow((1 + modulus - dxy) % modulus, modulus - 2, modulus)

        return AffinePoint((x_3n * den_x) % modulus, (y_3n * den_y) % modulus, self)

    def ec_double(self, p: AffinePoint) -> AffinePoint:
        return self.ec_add(p, p)

    def ec_generator(self) -> AffinePoint:
        x, y = self.generator_point
        return AffinePoint(x, y, self)

    def ec_neutral(self) -> AffinePoint:
        return self.neutral()

    def ec_neg(self, p: AffinePoint) -> AffinePoint:
        return AffinePoint(self.base_field.modulus() - p.x, p.y, self)


ED25519_BASE_FIELD = FieldParameters(
    name="Ed25519",
    modulus_bytes=bytes([237]) + bytes([255] * 30) + bytes([127]),
    nb_limbs=32,
    nb_witness_limbs=62,
    witness_offset=1 << 14,
)

ED25519 = EdwardsCurve(
    name="Ed25519",
    base_field=ED25519_BASE_FIELD,
    curve_type=CurveType.ED25519,
    d=bytes(
        [
            163, 120, 89, 19, 202, 77, 235, 117, 171, 216, 65, 65, 77, 10, 112, 0,
            152, 232, 121, 119, 121, 64, 199, 140, 115, 254, 111, 43, 238, 108, 3, 82,
        ]
    ),
    generator_point=(
        15112221349535400772501151409588531511454012693041857206046113283949847762202,
        46316835694926478169428394003475163141307993866256225615783033603165251855960,
    ),
    prime_group_order=2**252 + 27742317777372353535851937790883648493,
)

# (p + 3) / 8 for the Ed25519 base field.
_SQRT_EXPONENT = 7237005577332262213973186563042994240829374041602535252466099000494570602494
# A square root of -1 in the Ed25519 base field.
_SQRT_M1 = 19681161376707505956807079304988542015446066515923890162744021073123829784752


def ed25519_sqrt(a: int) -> int:
    """Square root of ``a`` in the Ed25519 base field, always the even one.

    Raises ValueError when ``a`` is not a square.
    """
    modulus = ED25519_BASE_FIELD.modulus()
    beta = pow(a, _SQRT_EXPONENT, modulus)
    beta_squared = beta * beta % modulus
    neg_a = modulus - a

    if beta_squared == neg_a:
        beta = beta * _SQRT_M1 % modulus

    if beta_squared != a and beta_squared != neg_a:
        raise ValueError("a is not a square")

    if beta & 1:
        beta = (modulus - beta) % modulus
    return beta


def decompress(compressed_point: bytes) -> AffinePoint:
    """Recover an Ed25519 point from its 32-byte compressed form."""
    point_bytes = bytearray(compressed_point)
    if len(point_bytes) != 32:
        raise ValueError("a compressed point is 32 bytes long")
    sign = point_bytes[31] >> 7 == 1
    point_bytes[31] &= 0b0111_1111
    modulus = ED25519_BASE_FIELD.modulus()

    y = int.from_bytes(point_bytes, "little")
    yy = y * y % modulus
    u = (yy - 1) % modulus
    v = (yy * ED25519.d_biguint() + 1) % modulus

    v_inv = pow(v, modulus - 2, modulus)
    x = ed25519_sqrt(u * v_inv % modulus)

    # The root is the even one; the sign bit selects its negation.
    if sign:
        x = modulus - x
    return AffinePoint(x, y, ED25519)


def compress(point: AffinePoint) -> bytes:
    """Encode a point as y in little-endian with the parity of x in the top bit."""
    encoded = bytearray(point.y.to_bytes(32, "little"))
    encoded[31] |= (point.x & 1) << 7
    return bytes(encoded)