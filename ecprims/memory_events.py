"""Records of memory accesses made during execution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union


@dataclass(frozen=True)
class MemoryRecord:
    """The shard, timestamp and value of one memory access."""

    shard: int
    timestamp: int
    value: int


class MemoryAccessPosition(IntEnum):
    """Where an access happens; registers are accessed in the order C, B, A."""

    MEMORY = 0
    C = 1
    B = 2
    A = 3


def _check_order(kind: str, shard: int, timestamp: int, prev_shard: int, prev_timestamp: int) -> None:
    if not (shard > prev_shard or (shard == prev_shard and timestamp > prev_timestamp)):
        raise ValueError(
            f"Invalid {kind} record: shard {shard} timestamp {timestamp} "
            f"prev_shard {prev_shard} prev_timestamp {prev_timestamp}"
        )


@dataclass(frozen=True)
class MemoryReadRecord:
    """A read, which must come strictly after the previous access."""

    value: int
    shard: int
    timestamp: int
    prev_shard: int
    prev_timestamp: int

    def __post_init__(self) -> None:
        _check_order("read", self.shard, self.timestamp, self.prev_shard, self.prev_timestamp)

    def current_record(self) -> MemoryRecord:
        """The state of memory after this access."""
        return MemoryRecord(self.shard, self.timestamp, self.value)

    def previous_record(self) -> MemoryRecord:
        """The state of memory before this access."""
        return MemoryRecord(self.prev_shard, self.prev_timestamp, self.value)


@dataclass(frozen=True)
class MemoryWriteRecord:
    """A write, which must come strictly after the previous access."""

    value: int
    shard: int
    timestamp: int
    prev_value: int
    prev_shard: int
    prev_timestamp: int

    def __post_init__(self) -> None:
        _check_order("write", self.shard, self.timestamp, self.prev_shard, self.prev_timestamp)

    def current_record(self) -> MemoryRecord:
        """The state of memory after this access."""
        return MemoryRecord(self.shard, self.timestamp, self.value)

    def previous_record(self) -> MemoryRecord:
        """The state of memory before this access."""
        return MemoryRecord(self.prev_shard, self.prev_timestamp, self.prev_value)


MemoryAccessRecord = Union[MemoryReadRecord, MemoryWriteRecord]


@dataclass(frozen=True)
class MemoryInitializeFinalizeEvent:
    """The initialisation or finalisation of one memory address."""

    addr: int
    value: int
    shard: int
    timestamp: int
    used: int

    @classmethod
    def initialize(cls, addr: int, value: int, used: bool) -> MemoryInitializeFinalizeEvent:
        """An initialisation event at shard 1, timestamp 1."""
        return cls(addr=addr, value=value, shard=1, timestamp=1, used=1 if used else 0)

    @classmethod
    def finalize_from_record(cls, addr: int, record: MemoryRecord) -> MemoryInitializeFinalizeEvent:
        """A finalisation event taking its state from the last access to ``addr``."""
        return cls(
            addr=addr,
            value=record.value,
            shard=record.shard,
            timestamp=record.timestamp,
            used=1,
        )


@dataclass(frozen=True)
class MemoryLocalEvent:
    """The first and last access to an address within one shard."""

    addr: int
    initial_mem_access: MemoryRecord
    final_mem_access: MemoryRecord