# src/stacktrack/cli/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.bounded_stack import BoundedStack
from ..tasks.task_api import display_id_for_index
from ..tasks.task_models import TaskRecord

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

DESC_WIDTH = 30
ROW_FMT = "| {id:>2} | {desc:<30} | {due:<17} | {imp:>10} | {status:<11} |"
HEADER = ROW_FMT.format(id="ID", desc="Description", due="Due Date", imp="Importance", status="Status")
LINE = "+" + "-" * (len(HEADER) - 2) + "+"


def format_due(task: TaskRecord) -> str:
    if 1 <= task.month <= 12:
        return f"{MONTH_NAMES[task.month - 1]} {task.day:02d}, {task.year:04d}"
    # Loaded data is not date-validated; show it raw rather than crash.
    return f"{task.year:04d}-{task.month:02d}-{task.day:02d}"


def _fit(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def render_row(task: TaskRecord, display_id: int) -> str:
    return ROW_FMT.format(
        id=display_id,
        desc=_fit(task.description, DESC_WIDTH),
        due=format_due(task),
        imp=task.importance,
        status=task.status.label,
    )


def _boxed(text: str) -> str:
    return "| " + text.ljust(len(LINE) - 4) + " |"


def _table(rows: Sequence[tuple[int, TaskRecord]], size: int) -> list[str]:
    lines = [LINE, HEADER, LINE]
    for index, task in rows:
        lines.append(render_row(task, display_id_for_index(size, index)))
    lines.append(LINE)
    return lines


def render_tasks(tasks: BoundedStack[TaskRecord], *, title: str | None = None) -> str:
    """Render the whole stack, top of the stack first (ID 1)."""
    size = tasks.size()
    lines = [_boxed(title or f"Current Tasks ({size}/{tasks.capacity}):")]
    if size == 0:
        lines.append(_boxed("No tasks available."))
        return "\n".join(lines)
    rows = list(enumerate(tasks))
    rows.reverse()
    lines.extend(_table(rows, size))
    return "\n".join(lines)


def render_search(hits: Sequence[tuple[int, TaskRecord]], size: int, keyword: str) -> str:
    lines = [_boxed(f"Search Results for '{keyword}':")]
    if not hits:
        lines.append(_boxed(f"No tasks matching '{keyword}' found."))
        return "\n".join(lines)
    lines.extend(_table(hits, size))
    return "\n".join(lines)
