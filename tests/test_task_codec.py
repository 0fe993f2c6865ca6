# tests/test_task_codec.py

from __future__ import annotations

import struct
from pathlib import Path

import pytest

from stacktrack.tasks.bounded_stack import BoundedStack
from stacktrack.tasks.errors import CorruptDataError
from stacktrack.tasks.task_codec import (
    COUNT_STRUCT,
    RECORD_STRUCT,
    TaskFileStore,
    dumps,
    encode_record,
    loads,
)
from stacktrack.tasks.task_models import TaskStatus

from .fakes import make_task


def test_layout_sizes_match_file_format() -> None:
    assert COUNT_STRUCT.size == 4
    # 100-byte description + 5 x int32 + int64
    assert RECORD_STRUCT.size == 128


def test_encode_record_field_order() -> None:
    task = make_task(
        "Write report",
        due=(2026, 3, 14),
        importance=7,
        status=TaskStatus.IN_PROGRESS,
        created_at=1_760_000_000,
    )
    raw = encode_record(task)

    assert raw[:12] == b"Write report"
    assert raw[12:100] == b"\0" * 88
    assert struct.unpack("<5iq", raw[100:]) == (2026, 3, 14, 7, 1, 1_760_000_000)


def test_save_then_load_round_trips(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.dat")
    tasks = [
        make_task("A", due=(2026, 1, 2), importance=3, created_at=1),
        make_task("Bé ünïcode", due=(2025, 12, 31), importance=9, status=TaskStatus.COMPLETED, created_at=2),
        make_task("C", importance=-4, status=TaskStatus.IN_PROGRESS, created_at=2**40),
    ]

    assert store.save(BoundedStack.from_iterable(tasks)) is True
    loaded = store.load()

    assert loaded is not None
    assert loaded.to_list() == tasks


def test_save_and_load_empty_stack(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.dat")
    assert store.save(BoundedStack()) is True
    assert store.path.read_bytes() == b"\0\0\0\0"

    loaded = store.load()
    assert loaded is not None and loaded.size() == 0


def test_round_trip_full_stack(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.dat")
    tasks = [make_task(f"task {i}", importance=i % 10, created_at=i) for i in range(100)]

    store.save(tasks)
    loaded = store.load()

    assert loaded is not None
    assert loaded.is_full()
    assert loaded.to_list() == tasks


def test_save_overwrites_previous_content(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.dat")
    store.save([make_task("old 1"), make_task("old 2")])
    store.save([make_task("new")])

    loaded = store.load()
    assert [t.description for t in loaded] == ["new"]


def test_load_missing_file_returns_none(tmp_path: Path) -> None:
    assert TaskFileStore(tmp_path / "absent.dat").load() is None


def test_save_to_unwritable_target_returns_false(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    store = TaskFileStore(blocker / "tasks.dat")

    assert store.save([make_task("A")]) is False
    assert not (blocker / "tasks.dat").exists()


def test_save_with_oversize_field_returns_false_and_keeps_file(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.dat")
    store.save([make_task("kept")])

    assert store.save([make_task("ok"), make_task("big", importance=3_000_000_000)]) is False

    assert [t.description for t in store.load()] == ["kept"]
    assert not (tmp_path / "tasks.dat.tmp").exists()


def test_long_description_is_clipped_to_buffer() -> None:
    task = make_task("x" * 150)
    (decoded,) = loads(dumps([task]))
    assert decoded.description == "x" * 99


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"\x01\x00",
        struct.pack("<i", -1),
        struct.pack("<i", 101) + b"\0" * (101 * 128),
        struct.pack("<i", 2) + b"\0" * 128,
        struct.pack("<i", 0) + b"junk",
    ],
    ids=["empty", "short-header", "negative", "over-capacity", "truncated", "trailing"],
)
def test_malformed_data_fails_closed(data: bytes) -> None:
    with pytest.raises(CorruptDataError):
        loads(data)


def test_unknown_status_code_is_corrupt() -> None:
    raw = bytearray(dumps([make_task("A")]))
    struct.pack_into("<i", raw, 4 + 100 + 16, 7)
    with pytest.raises(CorruptDataError):
        loads(bytes(raw))


def test_store_load_raises_on_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.dat"
    path.write_bytes(struct.pack("<i", 5) + b"\0" * 10)
    with pytest.raises(CorruptDataError):
        TaskFileStore(path).load()
