"""Lookup identifiers, syscall events and count-table formatting."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

_WORD_BITS = 32


@dataclass(frozen=True)
class LookupId:
    """A unique lookup identifier made of four 32-bit parts."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0


@dataclass(frozen=True)
class SyscallEvent:
    """What is needed to prove one syscall invocation from the CPU table."""

    shard: int
    clk: int
    lookup_id: LookupId
    syscall_id: int
    arg1: int
    arg2: int
    nonce: int


def create_alu_lookup_id(rng: random.Random) -> LookupId:
    """A fresh lookup id drawn from ``rng``."""
    return LookupId(*(rng.getrandbits(_WORD_BITS) for _ in range(4)))


def create_alu_lookups() -> tuple[LookupId, ...]:
    """Six fresh lookup ids drawn from a system random source."""
    rng = random.SystemRandom()
    return tuple(create_alu_lookup_id(rng) for _ in range(6))


def sorted_table_lines(
    table: Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]],
) -> Iterator[str]:
    """Format a table of counts as lines, largest count first, then by label.

    Counts are right-justified to the width of the first count; labels are
    lower-cased and follow after a single space.
    """
    entries = list(table.items() if isinstance(table, Mapping) else table)
    entries.sort(key=lambda entry: entry[0])
    entries.sort(key=lambda entry: entry[1], reverse=True)
    rows = [(str(label).lower(), str(count)) for label, count in entries]
    width = len(rows[0][1]) if rows else 0
    return (f"{count:>{width}} {label}" for label, count in rows)