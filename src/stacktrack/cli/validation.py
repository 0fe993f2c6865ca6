# src/stacktrack/cli/validation.py

"""Input parsing for the console layer. The task core never parses text."""

from __future__ import annotations

import re

from ..tasks.task_models import INT32_RANGE, TaskStatus

_DATE_RE = re.compile(r"^\s*(\d{1,4})[-/ .](\d{1,2})[-/ .](\d{1,2})\s*$")

_STATUS_ALIASES = {
    "0": TaskStatus.PENDING,
    "p": TaskStatus.PENDING,
    "pending": TaskStatus.PENDING,
    "todo": TaskStatus.PENDING,
    "1": TaskStatus.IN_PROGRESS,
    "ip": TaskStatus.IN_PROGRESS,
    "progress": TaskStatus.IN_PROGRESS,
    "in-progress": TaskStatus.IN_PROGRESS,
    "in_progress": TaskStatus.IN_PROGRESS,
    "2": TaskStatus.COMPLETED,
    "c": TaskStatus.COMPLETED,
    "d": TaskStatus.COMPLETED,
    "done": TaskStatus.COMPLETED,
    "completed": TaskStatus.COMPLETED,
}

_STATUS_NAMES = {
    "pending": TaskStatus.PENDING,
    "in-progress": TaskStatus.IN_PROGRESS,
    "in_progress": TaskStatus.IN_PROGRESS,
    "completed": TaskStatus.COMPLETED,
}


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_valid_date(year: int, month: int, day: int) -> bool:
    if not 1000 <= year <= 9999 or not 1 <= month <= 12 or not 1 <= day <= 31:
        return False
    if month in (4, 6, 9, 11) and day > 30:
        return False
    if month == 2:
        return day <= (29 if is_leap_year(year) else 28)
    return True


def parse_date(text: str) -> tuple[int, int, int]:
    """Parse 'YYYY-MM-DD' (also '/', '.' or space separated) into a valid date tuple."""
    m = _DATE_RE.match(text or "")
    if not m:
        raise ValueError(f"Invalid date format: {text!r} (expected YYYY-MM-DD).")
    year, month, day = (int(g) for g in m.groups())
    if not is_valid_date(year, month, day):
        raise ValueError(f"Invalid date: {text!r}.")
    return year, month, day


def parse_importance(text: str) -> int:
    try:
        value = int(text)
    except (TypeError, ValueError):
        raise ValueError(f"Importance must be an integer (1-10), got {text!r}.") from None
    lo, hi = INT32_RANGE
    if not lo <= value <= hi:
        raise ValueError(f"Importance {value} is out of range.")
    return value


def parse_status(text: str) -> TaskStatus:
    status = _STATUS_ALIASES.get((text or "").strip().lower())
    if status is None:
        raise ValueError(f"Unknown status {text!r} (use pending | in-progress | completed).")
    return status


def status_from_word(text: str) -> TaskStatus | None:
    """Match only full status names, so ordinary words stay in a description."""
    return _STATUS_NAMES.get((text or "").strip().lower())
