# src/stacktrack/tasks/task_codec.py

from __future__ import annotations

import contextlib
import logging
import os
import struct
from collections.abc import Iterable
from pathlib import Path

from .bounded_stack import BoundedStack
from .errors import CorruptDataError
from .task_models import MAX_DESCRIPTION, MAX_TASKS, TaskRecord, TaskStatus, clip_description

logger = logging.getLogger(__name__)

# File layout (little-endian, no padding, no version tag):
#   int32 count
#   count x record:
#     char[100] description (UTF-8, NUL padded)
#     int32 year, int32 month, int32 day
#     int32 importance
#     int32 status (0 pending, 1 in progress, 2 completed)
#     int64 created_at
COUNT_STRUCT = struct.Struct("<i")
RECORD_STRUCT = struct.Struct(f"<{MAX_DESCRIPTION}s5iq")


def encode_record(task: TaskRecord) -> bytes:
    desc = clip_description(task.description).encode("utf-8")
    try:
        return RECORD_STRUCT.pack(
            desc,
            task.year,
            task.month,
            task.day,
            task.importance,
            int(task.status),
            task.created_at,
        )
    except struct.error as e:
        raise ValueError(f"task does not fit the record layout: {e}") from e


def decode_record(buf: bytes) -> TaskRecord:
    if len(buf) != RECORD_STRUCT.size:
        raise CorruptDataError(f"record must be {RECORD_STRUCT.size} bytes, got {len(buf)}")
    raw_desc, year, month, day, importance, status_code, created_at = RECORD_STRUCT.unpack(buf)
    try:
        status = TaskStatus(status_code)
    except ValueError:
        raise CorruptDataError(f"unknown status code {status_code}") from None
    return TaskRecord(
        description=raw_desc.split(b"\0", 1)[0].decode("utf-8", errors="replace"),
        year=year,
        month=month,
        day=day,
        importance=importance,
        status=status,
        created_at=created_at,
    )


def dumps(tasks: Iterable[TaskRecord]) -> bytes:
    """Serialize tasks given bottom-to-top."""
    body = [encode_record(t) for t in tasks]
    return COUNT_STRUCT.pack(len(body)) + b"".join(body)


def loads(data: bytes, *, capacity: int = MAX_TASKS) -> list[TaskRecord]:
    """
    Parse a serialized stack into a bottom-to-top list.

    Fails closed: any mismatch between the header count and the payload
    raises CorruptDataError instead of reading past the data.
    """
    if len(data) < COUNT_STRUCT.size:
        raise CorruptDataError("missing record count header")
    (count,) = COUNT_STRUCT.unpack_from(data, 0)
    if count < 0:
        raise CorruptDataError(f"negative record count {count}")
    if count > capacity:
        raise CorruptDataError(f"record count {count} exceeds capacity {capacity}")

    expected = COUNT_STRUCT.size + count * RECORD_STRUCT.size
    if len(data) != expected:
        raise CorruptDataError(
            f"payload size mismatch: header says {count} records ({expected} bytes), got {len(data)}"
        )

    out: list[TaskRecord] = []
    offset = COUNT_STRUCT.size
    for _ in range(count):
        out.append(decode_record(data[offset : offset + RECORD_STRUCT.size]))
        offset += RECORD_STRUCT.size
    return out


class TaskFileStore:
    """
    Binary file persistence for the task stack.

    - save() overwrites the whole file (tmp file + os.replace)
    - save() never raises on I/O errors or unencodable records: it logs
      and returns False, leaving the previous file in place
    - load() returns None when the file is absent and raises
      CorruptDataError when it is malformed
    """

    def __init__(self, path: str | Path = "tasks.dat") -> None:
        self._path = Path(path)
        logger.info("TaskFileStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def save(self, tasks: Iterable[TaskRecord]) -> bool:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            data = dumps(tasks)
        except ValueError:
            logger.exception("Tasks do not fit the file layout; %s left unchanged", self._path)
            return False
        count = (len(data) - COUNT_STRUCT.size) // RECORD_STRUCT.size
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink()
            return False
        logger.info("Saved %d tasks to %s", count, self._path)
        return True

    def load(self, *, capacity: int = MAX_TASKS) -> BoundedStack[TaskRecord] | None:
        if not self.exists():
            logger.info("No task file at %s", self._path)
            return None
        try:
            data = self._path.read_bytes()
        except OSError:
            logger.exception("Failed to read tasks from %s", self._path)
            return None

        records = loads(data, capacity=capacity)
        stack = BoundedStack.from_iterable(records, capacity)
        logger.info("Loaded %d tasks from %s", stack.size(), self._path)
        return stack
