"""Dense univariate polynomials over any ring-like coefficient type."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from itertools import zip_longest
from typing import Any

_MISSING = object()


def _inverse(r: Any) -> Any:
    """Multiplicative inverse of ``r``, using its own ``inverse`` method when present."""
    inverse = getattr(r, "inverse", None)
    if callable(inverse):
        return inverse()
    return 1 / r


@dataclass(frozen=True, eq=False)
class Polynomial:
    """A polynomial held as its coefficients, lowest degree first."""

    coefficients: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "coefficients", tuple(self.coefficients))

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[Any]) -> Polynomial:
        """Build a polynomial from an iterable of coefficients."""
        return cls(tuple(coefficients))

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self):
        return iter(self.coefficients)

    def degree(self) -> int:
        """Number of coefficients minus one."""
        if not self.coefficients:
            raise ValueError("an empty polynomial has no degree")
        return len(self.coefficients) - 1

    def eval(self, x: Any) -> Any:
        """Evaluate the polynomial at ``x``."""
        result: Any = 0
        for c in reversed(self.coefficients):
            result = result * x + c
        return result

    def root_quotient(self, r: Any) -> Polynomial:
        """Divide by ``(X - r)``, assuming ``r`` is a root; the remainder is dropped."""
        if len(self.coefficients) < 2:
            raise ValueError("polynomial must have at least two coefficients")
        r_inv = _inverse(r)
        result = [-self.coefficients[0] * r_inv]
        for c in self.coefficients[1:-1]:
            result.append((result[-1] - c) * r_inv)
        return Polynomial(result)

    def as_field(self, convert: Callable[[Any], Any]) -> Polynomial:
        """Map every coefficient through ``convert``."""
        return Polynomial(convert(c) for c in self.coefficients)

    def __add__(self, other: Any) -> Polynomial:
        if isinstance(other, Polynomial):
            return Polynomial(
                a if b is _MISSING else b if a is _MISSING else a + b
                for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=_MISSING)
            )
        if not self.coefficients:
            raise IndexError("cannot add a constant to an empty polynomial")
        first, *rest = self.coefficients
        return Polynomial((first + other, *rest))

    def __radd__(self, other: Any) -> Polynomial:
        return self + other

    def __sub__(self, other: Any) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            -b if a is _MISSING else a if b is _MISSING else a - b
            for a, b in zip_longest(self.coefficients, other.coefficients, fillvalue=_MISSING)
        )

    def __neg__(self) -> Polynomial:
        return Polynomial(-c for c in self.coefficients)

    def __mul__(self, other: Any) -> Polynomial:
        if isinstance(other, Polynomial):
            size = len(self.coefficients) + len(other.coefficients) - 1
            if size < 0:
                raise ValueError("cannot multiply two empty polynomials")
            result: list[Any] = [0] * size
            for i, a in enumerate(self.coefficients):
                for j, b in enumerate(other.coefficients):
                    result[i + j] = result[i + j] + a * b
            return Polynomial(result)
        return Polynomial(c * other for c in self.coefficients)

    def __rmul__(self, other: Any) -> Polynomial:
        if isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(c * other for c in self.coefficients)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self.coefficients) == len(other.coefficients):
            return self.coefficients == other.coefficients
        shorter, longer = sorted((self.coefficients, other.coefficients), key=len)
        head, tail = longer[: len(shorter)], longer[len(shorter) :]
        return tuple(head) == tuple(shorter) and all(c == 0 for c in tail)