"""Short Weierstrass curves y^2 = x^3 + ax + b, with Bn254 and Secp256k1."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .curve import AffinePoint, CurveType, EllipticCurve
from .params import FieldParameters
from .utils import biguint_to_bits_le


class FieldType(Enum):
    """Base fields that support emulated field-operation precompiles."""

    BLS12381 = "Bls12381"
    BN254 = "Bn254"


def modpow(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent % modulus``; a modulus of 1 gives 0."""
    if modulus == 1:
        return 0
    return pow(base, exponent, modulus)


@dataclass(frozen=True)
class SwCurve(EllipticCurve):
    """A short Weierstrass curve over ``base_field``."""

    name: str
    base_field: FieldParameters
    curve_type: CurveType
    a: bytes
    b: bytes
    generator_point: tuple[int, int]
    prime_group_order: int

    def a_int(self) -> int:
        """The coefficient a as an integer."""
        return int.from_bytes(self.a, "little")

    def b_int(self) -> int:
        """The coefficient b as an integer."""
        return int.from_bytes(self.b, "little")

    def nb_scalar_bits(self) -> int:
        """Number of bits a scalar may use in double-and-add."""
        return self.base_field.nb_limbs * 16

    def ec_add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        return self.sw_add(p, q)

    def ec_double(self, p: AffinePoint) -> AffinePoint:
        return self.sw_double(p)

    def ec_generator(self) -> AffinePoint:
        x, y = self.generator_point
        return AffinePoint(x, y, self)

    def ec_neutral(self) -> Optional[AffinePoint]:
        # The point at infinity has no affine form.
        return None

    def ec_neg(self, p: AffinePoint) -> AffinePoint:
        return AffinePoint(p.x, self.base_field.modulus() - p.y, self)

    def sw_add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        """Add two distinct points.

        Raises ValueError when the points are the same; use ``sw_double``.
        """
        if p.x == q.x and p.y == q.y:
            raise ValueError("Points are the same. Use sw_double instead.")
        modulus = self.base_field.modulus()

        slope_numerator = (modulus + q.y - p.y) % modulus
        slope_denominator = (modulus + q.x - p.x) % modulus
        slope_denom_inverse = modpow(slope_denominator, modulus - 2, modulus)
        slope = slope_numerator * slope_denom_inverse % modulus

        x_3n = (slope * slope + modulus + modulus - p.x - q.x) % modulus
        y_3n = (slope * (modulus + p.x - x_3n) + modulus - p.y) % modulus
        return AffinePoint(x_3n, y_3n, self)

    def sw_double(self, p: AffinePoint) -> AffinePoint:
        """Double a point."""
        modulus = self.base_field.modulus()

        slope_numerator = (self.a_int() + p.x * p.x * 3) % modulus
        slope_denominator = p.y * 2 % modulus
        slope_denom_inverse = modpow(slope_denominator, modulus - 2, modulus)
        slope = slope_numerator * slope_denom_inverse % modulus

        x_3n = (slope * slope + modulus + modulus - p.x - p.x) % modulus
        y_3n = (slope * (modulus + p.x - x_3n) + modulus - p.y) % modulus
        return AffinePoint(x_3n, y_3n, self)

    def sw_scalar_mul(self, p: AffinePoint, scalar: int) -> AffinePoint:
        """Multiply ``p`` by a positive ``scalar`` by double-and-add.

        Raises ValueError for a zero scalar or one wider than ``nb_scalar_bits``.
        """
        result: Optional[AffinePoint] = None
        temp = p
        for bit in biguint_to_bits_le(scalar, self.nb_scalar_bits()):
            if bit:
                result = temp if result is None else self.sw_add(result, temp)
            temp = self.sw_double(temp)
        if result is None:
            raise ValueError("scalar multiplication by zero has no affine result")
        return result


BN254_BASE_FIELD = FieldParameters(
    name="Bn254",
    modulus_bytes=bytes(
        [
            71, 253, 124, 216, 22, 140, 32, 60, 141, 202, 113, 104, 145, 106, 129, 151,
            93, 88, 129, 129, 182, 69, 80, 184, 41, 160, 49, 225, 114, 78, 100, 48,
        ]
    ),
    nb_limbs=32,
    nb_witness_limbs=62,
    witness_offset=1 << 14,
)

BN254_FIELD_TYPE = FieldType.BN254

BN254 = SwCurve(
    name="Bn254",
    base_field=BN254_BASE_FIELD,
    curve_type=CurveType.BN254,
    a=bytes(32),
    b=bytes([3]) + bytes(31),
    generator_point=(1, 2),
    prime_group_order=(
        21888242871839275222246405745257275088548364400416034343698204186575808495617
    ),
)

SECP256K1_BASE_FIELD = FieldParameters(
    name="Secp256k1",
    modulus_bytes=bytes([0x2F, 0xFC, 0xFF, 0xFF, 0xFE]) + bytes([0xFF] * 27),
    nb_limbs=32,
    nb_witness_limbs=62,
    witness_offset=1 << 14,
)

SECP256K1 = SwCurve(
    name="Secp256k1",
    base_field=SECP256K1_BASE_FIELD,
    curve_type=CurveType.SECP256K1,
    a=bytes(32),
    b=bytes([7]) + bytes(31),
    generator_point=(
        55066263022277343669578718895168534326250603453777594175500187360389116729240,
        32670510020758816978083085130507043184471273380659243275938904335757337482424,
    ),
    prime_group_order=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
)


def secp256k1_sqrt(n: int) -> int:
    """Square root of ``n`` in the Secp256k1 base field.

    Raises ValueError when ``n`` is out of range or not a square.
    """
    modulus = SECP256K1_BASE_FIELD.modulus()
    if not 0 <= n < modulus:
        raise ValueError("n is not a canonical field element")
    root = pow(n, (modulus + 1) // 4, modulus)
    if root * root % modulus != n:
        raise ValueError("n is not a square")
    return root


def secp256k1_decompress(bytes_be: bytes, sign: int) -> AffinePoint:
    """Recover a Secp256k1 point from its big-endian x and the parity of y."""
    if len(bytes_be) != 32:
        raise ValueError("x must be 32 bytes long")
    if sign not in (0, 1):
        raise ValueError("sign must be 0 or 1")
    modulus = SECP256K1_BASE_FIELD.modulus()
    x = int.from_bytes(bytes_be, "big")
    if x >= modulus:
        raise ValueError("x is not a canonical field element")
    alpha = (pow(x, 3, modulus) + SECP256K1.b_int()) % modulus
    try:
        beta = secp256k1_sqrt(alpha)
    except ValueError as exc:
        raise ValueError("x is not the coordinate of a curve point") from exc
    y = beta if (beta & 1) == sign else (modulus - beta) % modulus
    return AffinePoint(x, y, SECP256K1)