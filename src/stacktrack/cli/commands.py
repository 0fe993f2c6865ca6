# src/stacktrack/cli/commands.py

from __future__ import annotations

import dataclasses
import inspect
import logging
import shlex
from collections.abc import Callable
from typing import Any, cast

from ..core.state import AppState
from ..tasks.errors import CapacityExceededError, TaskIndexError
from ..tasks.task_api import add_task, index_for_display_id, new_task, search_tasks
from ..tasks.task_models import TaskStatus, clip_description
from .render import render_row, render_search, render_tasks
from .validation import parse_date, parse_importance, parse_status, status_from_word

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


def split_args(text: str) -> list[str]:
    """Shell-like split (quotes group words); falls back to whitespace on bad quoting."""
    try:
        return shlex.split(text)
    except ValueError:
        return text.split()


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /push, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = split_args(line[1:])
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _index_from_id(state: AppState, raw: str) -> int:
    try:
        display_id = int(raw)
    except ValueError:
        raise ValueError(f"Invalid task ID: {raw!r}.") from None
    return index_for_display_id(state.board.size(), display_id)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    board = state.board
    settings = state.settings
    return (
        "Status:\n"
        f"  Tasks: {board.size()}/{board.capacity}\n"
        f"  Undo history: {board.undo_depth()}\n"
        f"  File: {getattr(settings, 'tasks_path', '?')}\n"
        f"  Autosave on exit: {'ON' if getattr(settings, 'autosave', False) else 'OFF'}\n"
        f"  Unsaved changes: {'yes' if state.dirty else 'no'}"
    )


def cmd_push(state: AppState, args: list[str]) -> str:
    """
    /push <YYYY-MM-DD> <importance> [status] <description...>

    The status word is either `status=<alias>` or a full status name
    (pending, in-progress, completed); anything else starts the description.
    """
    usage = "Usage: /push <YYYY-MM-DD> <importance> [status] <description...>"
    if len(args) < 3:
        return usage

    try:
        year, month, day = parse_date(args[0])
        importance = parse_importance(args[1])
        rest = args[2:]
        status = TaskStatus.PENDING
        if rest[0].lower().startswith("status="):
            status = parse_status(rest[0].partition("=")[2])
            rest = rest[1:]
        elif len(rest) > 1:
            word_status = status_from_word(rest[0])
            if word_status is not None:
                status = word_status
                rest = rest[1:]
    except ValueError as e:
        return f"{e}\n{usage}"

    try:
        task = new_task(
            description=" ".join(rest),
            year=year,
            month=month,
            day=day,
            importance=importance,
            status=status,
        )
        add_task(state.board, task)
    except CapacityExceededError:
        return "Task stack is full. Cannot push more tasks."
    except ValueError as e:
        return f"{e}\n{usage}"

    state.dirty = True
    return "Task pushed successfully!"


def cmd_pop(state: AppState, args: list[str]) -> str:
    task = state.board.pop()
    if task is None:
        return "Task stack is empty. Nothing to pop."
    state.dirty = True
    return f"Popped Task: {task.description}"


def cmd_peek(state: AppState, args: list[str]) -> str:
    task = state.board.peek()
    if task is None:
        return "Task stack is empty."
    return render_row(task, 1)


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_tasks(state.board.tasks)


_EDIT_KEYS = {
    "desc": "description",
    "description": "description",
    "due": "due",
    "date": "due",
    "imp": "importance",
    "importance": "importance",
    "status": "status",
}


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <id> [desc=..] [due=YYYY-MM-DD] [imp=N] [status=S]
    Fields not given keep their current value.
    """
    usage = "Usage: /edit <id> [desc=\"...\"] [due=YYYY-MM-DD] [imp=N] [status=S]"
    if len(args) < 2:
        return usage

    try:
        index = _index_from_id(state, args[0])
        changes: dict[str, Any] = {}
        for pair in args[1:]:
            key, sep, value = pair.partition("=")
            field = _EDIT_KEYS.get(key.lower())
            if not sep or field is None:
                return f"Unknown field {pair!r}.\n{usage}"
            if field == "description":
                if not value.strip():
                    return "Description cannot be empty."
                changes["description"] = clip_description(value.strip())
            elif field == "due":
                changes["year"], changes["month"], changes["day"] = parse_date(value)
            elif field == "importance":
                changes["importance"] = parse_importance(value)
            else:
                changes["status"] = parse_status(value)
    except ValueError as e:
        return f"{e}\n{usage}"

    current = state.board.element_at(index)
    if current is None:
        return "Invalid Task ID. Please try again."

    try:
        state.board.edit_at(index, dataclasses.replace(current, **changes))
    except TaskIndexError:
        return "Invalid Task ID. Please try again."
    except ValueError as e:
        return f"{e}\n{usage}"

    state.dirty = True
    return "Task updated successfully!"


def cmd_remove(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /rm <id>"
    try:
        index = _index_from_id(state, args[0])
        removed = state.board.remove_at(index)
    except (ValueError, TaskIndexError):
        return "Invalid Task ID or error removing task."
    state.dirty = True
    return f"Task removed: {removed.description}"


def cmd_search(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /search <keyword>"
    keyword = " ".join(args)
    hits = search_tasks(state.board.tasks, keyword)
    return render_search(hits, state.board.size(), keyword)


def cmd_sort(state: AppState, args: list[str]) -> str:
    key = args[0].lower() if args else ""
    if key in ("date", "due", "d"):
        state.board.sort_by_date()
        title = "Tasks sorted by date."
    elif key in ("importance", "imp", "i"):
        state.board.sort_by_importance()
        title = "Tasks sorted by importance."
    else:
        return "Usage: /sort date | /sort importance"
    state.dirty = True
    return render_tasks(state.board.tasks, title=title)


def cmd_undo(state: AppState, args: list[str]) -> str:
    try:
        restored = state.board.undo()
    except CapacityExceededError:
        return "Task stack is full. Pop or remove a task before undoing."
    if restored is None:
        return "Nothing to undo."
    state.dirty = True
    return f"Last operation undone: restored '{restored.description}' on top of the stack."


def cmd_save(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if emit:
        emit(f"Saving {state.board.size()} tasks...")
    if state.save():
        return "Tasks saved successfully!"
    return "Could not write the task file (see log)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show stack size, undo depth and file.")
registry.register(
    "push",
    cmd_push,
    help_text="Push a task: /push <YYYY-MM-DD> <importance> [status] <description>.",
    aliases=["add"],
)
registry.register("pop", cmd_pop, help_text="Pop the top task (undoable).")
registry.register("peek", cmd_peek, help_text="Show the top task.", aliases=["top"])
registry.register("list", cmd_list, help_text="View all tasks (ID 1 = top).", aliases=["ls", "view"])
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a task: /edit <id> [desc=..] [due=..] [imp=..] [status=..].",
)
registry.register("rm", cmd_remove, help_text="Remove a task by ID: /rm <id>.", aliases=["remove"])
registry.register("search", cmd_search, help_text="Search descriptions: /search <keyword>.", aliases=["find"])
registry.register("sort", cmd_sort, help_text="Sort tasks: /sort date | /sort importance.")
registry.register("undo", cmd_undo, help_text="Undo the last pop/edit/remove.")
registry.register("save", cmd_save, help_text="Save tasks to the task file.")
