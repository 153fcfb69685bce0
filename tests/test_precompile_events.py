import pytest

from ecprims.events import LookupId, SyscallEvent
from ecprims.memory_events import MemoryLocalEvent, MemoryRecord, MemoryWriteRecord
from ecprims.precompile_events import (
    STATE_SIZE,
    EdDecompressEvent,
    EllipticCurveAddEvent,
    EllipticCurveDecompressEvent,
    EllipticCurveDoubleEvent,
    FieldOperation,
    Fp2AddSubEvent,
    Fp2MulEvent,
    FpOpEvent,
    KeccakPermuteEvent,
    PrecompileEvent,
    PrecompileKind,
    ShaCompressEvent,
    ShaExtendEvent,
    Uint256MulEvent,
    local_mem_events,
)


def _local(addr):
    return MemoryLocalEvent(
        addr=addr,
        initial_mem_access=MemoryRecord(shard=1, timestamp=1, value=addr),
        final_mem_access=MemoryRecord(shard=1, timestamp=2, value=addr + 1),
    )


def _syscall():
    return SyscallEvent(shard=1, clk=4, lookup_id=LookupId(), syscall_id=0, arg1=0, arg2=0, nonce=0)


def test_field_operation_default_is_add():
    assert FpOpEvent().op is FieldOperation.ADD
    assert Fp2AddSubEvent().op is FieldOperation.ADD


def test_keccak_state_defaults_to_zeroes():
    event = KeccakPermuteEvent()
    assert event.pre_state == [0] * STATE_SIZE
    assert event.post_state == [0] * STATE_SIZE


def test_keccak_rejects_wrong_state_size():
    with pytest.raises(ValueError):
        KeccakPermuteEvent(pre_state=[0] * (STATE_SIZE - 1))


def test_sha_compress_requires_eight_state_words():
    assert ShaCompressEvent().h == [0] * 8
    with pytest.raises(ValueError):
        ShaCompressEvent(h=[1, 2, 3])


def test_ed_decompress_byte_sizes():
    event = EdDecompressEvent()
    assert event.y_bytes == bytes(32)
    assert event.decompressed_x_bytes == bytes(32)
    with pytest.raises(ValueError):
        EdDecompressEvent(y_bytes=bytes(31))


def test_default_lists_are_not_shared():
    first = EllipticCurveAddEvent()
    second = EllipticCurveAddEvent()
    first.p.append(7)
    assert second.p == []


def test_event_fields_keep_their_values():
    record = MemoryWriteRecord(value=9, shard=1, timestamp=5, prev_value=3, prev_shard=1, prev_timestamp=2)
    event = Uint256MulEvent(x_ptr=64, x=[1, 2], y=[3, 4], modulus=[5, 6], x_memory_records=[record])
    assert event.x_ptr == 64
    assert event.modulus == [5, 6]
    assert event.x_memory_records[0].prev_value == 3


def test_every_kind_has_an_event_type():
    assert len(PrecompileKind) == 21
    for kind in PrecompileKind:
        event = PrecompileEvent(kind, kind.event_type())
        assert event.kind is kind


@pytest.mark.parametrize(
    "kind, cls",
    [
        (PrecompileKind.SHA_EXTEND, ShaExtendEvent),
        (PrecompileKind.ED_ADD, EllipticCurveAddEvent),
        (PrecompileKind.BN254_DOUBLE, EllipticCurveDoubleEvent),
        (PrecompileKind.K256_DECOMPRESS, EllipticCurveDecompressEvent),
        (PrecompileKind.BLS12381_FP2_MUL, Fp2MulEvent),
        (PrecompileKind.UINT256_MUL, Uint256MulEvent),
    ],
)
def test_kind_event_type_mapping(kind, cls):
    assert kind.event_type is cls


def test_mismatched_kind_is_rejected():
    with pytest.raises(TypeError):
        PrecompileEvent(PrecompileKind.SHA_EXTEND, Fp2MulEvent())


def test_local_mem_events_flattens_in_order():
    events = [
        (_syscall(), PrecompileEvent(PrecompileKind.SHA_EXTEND, ShaExtendEvent(local_mem_access=[_local(0), _local(4)]))),
        (_syscall(), PrecompileEvent(PrecompileKind.BN254_FP, FpOpEvent(local_mem_access=[]))),
        (_syscall(), PrecompileEvent(PrecompileKind.ED_DECOMPRESS, EdDecompressEvent(local_mem_access=[_local(8)]))),
    ]
    assert [e.addr for e in local_mem_events(events)] == [0, 4, 8]


def test_local_mem_events_of_nothing_is_empty():
    assert list(local_mem_events([])) == []


def test_precompile_event_exposes_local_access():
    local = [_local(12)]
    wrapped = PrecompileEvent(PrecompileKind.KECCAK_PERMUTE, KeccakPermuteEvent(local_mem_access=local))
    assert wrapped.local_mem_access == local