"""Conversions between big integers, little-endian bits and byte limbs."""

from __future__ import annotations

from collections.abc import Iterable


def _byte_length(integer: int) -> int:
    """Number of bytes in the minimal little-endian encoding; zero takes one byte."""
    return max(1, (integer.bit_length() + 7) // 8)


def biguint_to_bits_le(integer: int, num_bits: int) -> list[bool]:
    """Return the little-endian bits of ``integer``, padded to ``num_bits``.

    Raises ValueError when the byte-wise encoding of ``integer`` needs more
    than ``num_bits`` bits.
    """
    if integer < 0:
        raise ValueError("integer must be non-negative")
    if _byte_length(integer) * 8 > num_bits:
        raise ValueError(f"Number too large to fit in {num_bits} digits")
    return [bool((integer >> i) & 1) for i in range(num_bits)]


def biguint_to_limbs(integer: int, n: int) -> bytes:
    """Return ``integer`` as exactly ``n`` little-endian byte limbs."""
    if integer < 0:
        raise ValueError("integer must be non-negative")
    if _byte_length(integer) > n:
        raise ValueError(f"Number too large to fit in {n} limbs")
    return integer.to_bytes(n, "little")


def biguint_from_limbs(limbs: Iterable[int]) -> int:
    """Interpret little-endian byte limbs as an unsigned integer."""
    return int.from_bytes(bytes(limbs), "little")