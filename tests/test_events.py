import dataclasses
import random

import pytest

from ecprims.events import (
    LookupId,
    SyscallEvent,
    create_alu_lookup_id,
    create_alu_lookups,
    sorted_table_lines,
)


def test_lookup_id_is_deterministic_for_seed():
    first = create_alu_lookup_id(random.Random(7))
    second = create_alu_lookup_id(random.Random(7))
    assert first == second
    assert all(0 <= part < 2**32 for part in dataclasses.astuple(first))


def test_create_alu_lookups_gives_six_ids_in_range():
    ids = create_alu_lookups()
    assert len(ids) == 6
    for lookup in ids:
        assert all(0 <= part < 2**32 for part in dataclasses.astuple(lookup))
    assert len(set(ids)) == 6


def test_lookup_id_hashable_and_equal():
    assert {LookupId(1, 2, 3, 4), LookupId(1, 2, 3, 4)} == {LookupId(1, 2, 3, 4)}


def test_syscall_event_is_immutable():
    event = SyscallEvent(1, 2, LookupId(), 3, 4, 5, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.clk = 9
    assert event.clk == 2
    assert (event.shard, event.syscall_id, event.arg1, event.arg2, event.nonce) == (1, 3, 4, 5, 0)


def test_sorted_table_lines_worked_example():
    lines = list(sorted_table_lines({"ADD": 10, "SUB": 5, "MUL": 10}))
    assert lines == ["10 add", "10 mul", " 5 sub"]


def test_sorted_table_lines_empty():
    assert list(sorted_table_lines({})) == []