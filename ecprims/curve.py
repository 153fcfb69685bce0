"""Affine points and the abstract elliptic-curve group interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .params import FieldParameters
from .utils import biguint_to_bits_le

WORD_SIZE = 4
NUM_WORDS_FIELD_ELEMENT = 8
NUM_BYTES_FIELD_ELEMENT = NUM_WORDS_FIELD_ELEMENT * WORD_SIZE
COMPRESSED_POINT_BYTES = 32
# A point holds two field elements: x and y.
NUM_WORDS_EC_POINT = 2 * NUM_WORDS_FIELD_ELEMENT


class CurveType(Enum):
    """The curves known to the package."""

    SECP256K1 = "Secp256k1"
    BN254 = "Bn254"
    ED25519 = "Ed25519"
    BLS12381 = "Bls12381"

    def __str__(self) -> str:
        return self.value


class EllipticCurve(ABC):
    """An elliptic curve group over a prime field."""

    base_field: FieldParameters
    curve_type: CurveType

    @property
    def nb_limbs(self) -> int:
        return self.base_field.nb_limbs

    @property
    def nb_witness_limbs(self) -> int:
        return self.base_field.nb_witness_limbs

    @abstractmethod
    def ec_add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        """Add two points, assumed to be different."""

    @abstractmethod
    def ec_double(self, p: AffinePoint) -> AffinePoint:
        """Double a point."""

    @abstractmethod
    def ec_generator(self) -> AffinePoint:
        """The generator of the prime-order group."""

    @abstractmethod
    def ec_neutral(self) -> Optional[AffinePoint]:
        """The neutral element if it is affine, otherwise None."""

    @abstractmethod
    def ec_neg(self, p: AffinePoint) -> AffinePoint:
        """The negation of a point."""

    def nb_scalar_bits(self) -> int:
        """Number of bits used to represent a scalar."""
        return self.base_field.nb_limbs * self.base_field.nb_bits_per_limb


@dataclass(frozen=True)
class AffinePoint:
    """A point (x, y) on ``curve``."""

    x: int
    y: int
    curve: EllipticCurve

    @classmethod
    def from_words_le(cls, curve: EllipticCurve, words: list[int]) -> AffinePoint:
        """Build a point from little-endian 32-bit words: x half first, then y."""
        half = len(words) // 2

        def to_int(chunk: list[int]) -> int:
            return int.from_bytes(b"".join(w.to_bytes(4, "little") for w in chunk), "little")

        return cls(to_int(words[:half]), to_int(words[half:]), curve)

    def to_words_le(self) -> list[int]:
        """Encode as little-endian 32-bit words sized for the curve's base field."""
        num_words = self.curve.base_field.words_curve_point()
        half_bytes = num_words * 2

        def to_words(value: int) -> list[int]:
            raw = (value % (1 << (8 * half_bytes))).to_bytes(half_bytes, "little")
            return [int.from_bytes(raw[i : i + 4], "little") for i in range(0, half_bytes, 4)]

        return to_words(self.x) + to_words(self.y)

    def scalar_mul(self, scalar: int) -> AffinePoint:
        """Multiply by ``scalar`` reduced modulo 2^nb_scalar_bits, by double-and-add."""
        nb_bits = self.curve.nb_scalar_bits()
        scalar %= 1 << nb_bits
        result = self.curve.ec_neutral()
        temp = self
        for bit in biguint_to_bits_le(scalar, nb_bits):
            if bit:
                result = temp if result is None else result + temp
            temp = temp + temp
        if result is None:
            raise ValueError("Scalar multiplication failed")
        return result

    def __add__(self, other: object) -> AffinePoint:
        if not isinstance(other, AffinePoint):
            return NotImplemented
        if other.curve != self.curve:
            raise ValueError("points lie on different curves")
        return self.curve.ec_add(self, other)

    def __neg__(self) -> AffinePoint:
        return self.curve.ec_neg(self)

    def __mul__(self, scalar: object) -> AffinePoint:
        if not isinstance(scalar, int):
            return NotImplemented
        return self.scalar_mul(scalar)

    __rmul__ = __mul__