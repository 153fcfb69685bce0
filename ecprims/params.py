"""Parameters of the prime fields that curve coordinates live in."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

from .utils import biguint_from_limbs

NB_BITS_PER_LIMB = 8

T = TypeVar("T")


@dataclass(frozen=True)
class FieldParameters:
    """A field described by its little-endian modulus bytes and limb counts."""

    name: str
    modulus_bytes: bytes
    nb_limbs: int
    nb_witness_limbs: int
    witness_offset: int
    nb_bits_per_limb: int = NB_BITS_PER_LIMB

    def modulus(self) -> int:
        """The modulus as an integer."""
        return biguint_from_limbs(self.modulus_bytes)

    def nb_bits(self) -> int:
        """Total number of bits held by the limbs."""
        return self.nb_bits_per_limb * self.nb_limbs

    def to_limbs(self, x: int) -> bytes:
        """Little-endian bytes of ``x``, zero-padded or truncated to ``nb_limbs``."""
        if x < 0:
            raise ValueError("x must be non-negative")
        return (x % (1 << (8 * self.nb_limbs))).to_bytes(self.nb_limbs, "little")

    def words_field_element(self) -> int:
        """Number of 32-bit words needed for one field element."""
        return self.nb_limbs // 4

    def words_curve_point(self) -> int:
        """Number of 32-bit words needed for a curve point (two elements)."""
        return self.nb_limbs // 2


def limbs_from_vec(limbs: Sequence[T], n: int) -> list[T]:
    """Return ``limbs`` as a list of exactly ``n`` entries."""
    if len(limbs) != n:
        raise ValueError(f"expected {n} limbs, got {len(limbs)}")
    return list(limbs)


# 2^256 is not a field modulus, but it serves as one for 256-bit mulmod.
U256_FIELD = FieldParameters(
    name="U256",
    modulus_bytes=bytes(32) + b"\x01",
    nb_limbs=32,
    # One extra witness limb is needed for mulmod with modulus 1 << 256.
    nb_witness_limbs=63,
    witness_offset=1 << 14,
)