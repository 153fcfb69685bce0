"""Events emitted by precompiled operations, and their local memory accesses."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .curve import COMPRESSED_POINT_BYTES, NUM_BYTES_FIELD_ELEMENT
from .events import LookupId, SyscallEvent
from .memory_events import MemoryLocalEvent, MemoryReadRecord, MemoryWriteRecord

# Number of 64-bit lanes in the Keccak state.
STATE_SIZE = 25
# Number of 32-bit words in the SHA-256 hash state.
SHA_STATE_WORDS = 8


def _check_length(name: str, values: object, expected: int) -> None:
    size = len(values)  # type: ignore[arg-type]
    if size != expected:
        raise ValueError(f"{name} must hold {expected} entries, got {size}")


class FieldOperation(Enum):
    """An arithmetic operation of an emulated modular field."""

    ADD = "Add"
    MUL = "Mul"
    SUB = "Sub"
    DIV = "Div"


@dataclass
class EllipticCurveAddEvent:
    """An elliptic-curve addition: the point at ``q_ptr`` is added into ``p_ptr``."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    p_ptr: int = 0
    p: list[int] = field(default_factory=list)
    q_ptr: int = 0
    q: list[int] = field(default_factory=list)
    p_memory_records: list[MemoryWriteRecord] = field(default_factory=list)
    q_memory_records: list[MemoryReadRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)


@dataclass
class EllipticCurveDoubleEvent:
    """An elliptic-curve doubling of the point at ``p_ptr``."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    p_ptr: int = 0
    p: list[int] = field(default_factory=list)
    p_memory_records: list[MemoryWriteRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)


@dataclass
class EllipticCurveDecompressEvent:
    """A Weierstrass point decompression: y is recovered from x and a sign bit."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    ptr: int = 0
    sign_bit: bool = False
    x_bytes: bytes = b""
    decompressed_y_bytes: bytes = b""
    x_memory_records: list[MemoryReadRecord] = field(default_factory=list)
    y_memory_records: list[MemoryWriteRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)


@dataclass
class EdDecompressEvent:
    """An Edwards point decompression: x is recovered from compressed y."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    ptr: int = 0
    sign: bool = False
    y_bytes: bytes = bytes(COMPRESSED_POINT_BYTES)
    decompressed_x_bytes: bytes = bytes(NUM_BYTES_FIELD_ELEMENT)
    x_memory_records: list[MemoryWriteRecord] = field(default_factory=list)
    y_memory_records: list[MemoryReadRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_length("y_bytes", self.y_bytes, COMPRESSED_POINT_BYTES)
        _check_length("decompressed_x_bytes", self.decompressed_x_bytes, NUM_BYTES_FIELD_ELEMENT)


@dataclass
class FpOpEvent:
    """An emulated base-field operation applied to x and y."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    x_ptr: int = 0
    x: list[int] = field(default_factory=list)
    y_ptr: int = 0
    y: list[int] = field(default_factory=list)
    op: FieldOperation = FieldOperation.ADD
    x_memory_records: list[MemoryWriteRecord] = field(default_factory=list)
    y_memory_records: list[MemoryReadRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)


@dataclass
class Fp2AddSubEvent:
    """An emulated quadratic-extension addition or subtraction."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    op: FieldOperation = FieldOperation.ADD
    x_ptr: int = 0
    x: list[int] = field(default_factory=list)
    y_ptr: int = 0
    y: list[int] = field(default_factory=list)
    x_memory_records: list[MemoryWriteRecord] = field(default_factory=list)
    y_memory_records: list[MemoryReadRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)


@dataclass
class Fp2MulEvent:
    """An emulated quadratic-extension multiplication."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    x_ptr: int = 0
    x: list[int] = field(default_factory=list)
    y_ptr: int = 0
    y: list[int] = field(default_factory=list)
    x_memory_records: list[MemoryWriteRecord] = field(default_factory=list)
    y_memory_records: list[MemoryReadRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)


@dataclass
class KeccakPermuteEvent:
    """A Keccak-256 permutation of the state at ``state_addr``."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    pre_state: list[int] = field(default_factory=lambda: [0] * STATE_SIZE)
    post_state: list[int] = field(default_factory=lambda: [0] * STATE_SIZE)
    state_read_records: list[MemoryReadRecord] = field(default_factory=list)
    state_write_records: list[MemoryWriteRecord] = field(default_factory=list)
    state_addr: int = 0
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_length("pre_state", self.pre_state, STATE_SIZE)
        _check_length("post_state", self.post_state, STATE_SIZE)


@dataclass
class ShaCompressEvent:
    """A SHA-256 compression of the message schedule into the hash state."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    w_ptr: int = 0
    h_ptr: int = 0
    w: list[int] = field(default_factory=list)
    h: list[int] = field(default_factory=lambda: [0] * SHA_STATE_WORDS)
    h_read_records: list[MemoryReadRecord] = field(default_factory=list)
    w_i_read_records: list[MemoryReadRecord] = field(default_factory=list)
    h_write_records: list[MemoryWriteRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_length("h", self.h, SHA_STATE_WORDS)


@dataclass
class ShaExtendEvent:
    """A SHA-256 message-schedule extension."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    w_ptr: int = 0
    w_i_minus_15_reads: list[MemoryReadRecord] = field(default_factory=list)
    w_i_minus_2_reads: list[MemoryReadRecord] = field(default_factory=list)
    w_i_minus_16_reads: list[MemoryReadRecord] = field(default_factory=list)
    w_i_minus_7_reads: list[MemoryReadRecord] = field(default_factory=list)
    w_i_writes: list[MemoryWriteRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)


@dataclass
class Uint256MulEvent:
    """A 256-bit modular multiplication of x by y."""

    lookup_id: LookupId = field(default_factory=LookupId)
    shard: int = 0
    clk: int = 0
    x_ptr: int = 0
    x: list[int] = field(default_factory=list)
    y_ptr: int = 0
    y: list[int] = field(default_factory=list)
    modulus: list[int] = field(default_factory=list)
    x_memory_records: list[MemoryWriteRecord] = field(default_factory=list)
    y_memory_records: list[MemoryReadRecord] = field(default_factory=list)
    modulus_memory_records: list[MemoryReadRecord] = field(default_factory=list)
    local_mem_access: list[MemoryLocalEvent] = field(default_factory=list)


AnyPrecompileEvent = Union[
    EllipticCurveAddEvent,
    EllipticCurveDoubleEvent,
    EllipticCurveDecompressEvent,
    EdDecompressEvent,
    FpOpEvent,
    Fp2AddSubEvent,
    Fp2MulEvent,
    KeccakPermuteEvent,
    ShaCompressEvent,
    ShaExtendEvent,
    Uint256MulEvent,
]


class PrecompileKind(Enum):
    """One kind for every precompile syscall."""

    SHA_EXTEND = "ShaExtend"
    SHA_COMPRESS = "ShaCompress"
    KECCAK_PERMUTE = "KeccakPermute"
    ED_ADD = "EdAdd"
    ED_DECOMPRESS = "EdDecompress"
    SECP256K1_ADD = "Secp256k1Add"
    SECP256K1_DOUBLE = "Secp256k1Double"
    SECP256K1_DECOMPRESS = "Secp256k1Decompress"
    K256_DECOMPRESS = "K256Decompress"
    BN254_ADD = "Bn254Add"
    BN254_DOUBLE = "Bn254Double"
    BN254_FP = "Bn254Fp"
    BN254_FP2_ADD_SUB = "Bn254Fp2AddSub"
    BN254_FP2_MUL = "Bn254Fp2Mul"
    BLS12381_ADD = "Bls12381Add"
    BLS12381_DOUBLE = "Bls12381Double"
    BLS12381_DECOMPRESS = "Bls12381Decompress"
    BLS12381_FP = "Bls12381Fp"
    BLS12381_FP2_ADD_SUB = "Bls12381Fp2AddSub"
    BLS12381_FP2_MUL = "Bls12381Fp2Mul"
    UINT256_MUL = "Uint256Mul"

    @property
    def event_type(self) -> type:
        """The event class carried by this kind."""
        return _EVENT_TYPES[self]


_EVENT_TYPES: dict[PrecompileKind, type] = {
    PrecompileKind.SHA_EXTEND: ShaExtendEvent,
    PrecompileKind.SHA_COMPRESS: ShaCompressEvent,
    PrecompileKind.KECCAK_PERMUTE: KeccakPermuteEvent,
    PrecompileKind.ED_ADD: EllipticCurveAddEvent,
    PrecompileKind.ED_DECOMPRESS: EdDecompressEvent,
    PrecompileKind.SECP256K1_ADD: EllipticCurveAddEvent,
    PrecompileKind.SECP256K1_DOUBLE: EllipticCurveDoubleEvent,
    PrecompileKind.SECP256K1_DECOMPRESS: EllipticCurveDecompressEvent,
    PrecompileKind.K256_DECOMPRESS: EllipticCurveDecompressEvent,
    PrecompileKind.BN254_ADD: EllipticCurveAddEvent,
    PrecompileKind.BN254_DOUBLE: EllipticCurveDoubleEvent,
    PrecompileKind.BN254_FP: FpOpEvent,
    PrecompileKind.BN254_FP2_ADD_SUB: Fp2AddSubEvent,
    PrecompileKind.BN254_FP2_MUL: Fp2MulEvent,
    PrecompileKind.BLS12381_ADD: EllipticCurveAddEvent,
    PrecompileKind.BLS12381_DOUBLE: EllipticCurveDoubleEvent,
    PrecompileKind.BLS12381_DECOMPRESS: EllipticCurveDecompressEvent,
    PrecompileKind.BLS12381_FP: FpOpEvent,
    PrecompileKind.BLS12381_FP2_ADD_SUB: Fp2AddSubEvent,
    PrecompileKind.BLS12381_FP2_MUL: Fp2MulEvent,
    PrecompileKind.UINT256_MUL: Uint256MulEvent,
}


@dataclass(frozen=True)
class PrecompileEvent:
    """A precompile event tagged with the kind of syscall that produced it."""

    kind: PrecompileKind
    event: AnyPrecompileEvent

    def __post_init__(self) -> None:
        expected = self.kind.event_type
        if not isinstance(self.event, expected):
            raise TypeError(
                f"{self.kind.value} carries a {expected.__name__}, "
                f"not a {type(self.event).__name__}"
            )

    @property
    def local_mem_access(self) -> list[MemoryLocalEvent]:
        """The local memory accesses of the wrapped event."""
        return self.event.local_mem_access


def local_mem_events(
    events: Iterable[tuple[SyscallEvent, PrecompileEvent]],
) -> Iterator[MemoryLocalEvent]:
    """Every local memory event of ``events``, in order."""
    for _, precompile in events:
        yield from precompile.local_mem_access