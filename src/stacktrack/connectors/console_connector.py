# src/stacktrack/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.render import render_tasks
from ..core.state import AppState

logger = logging.getLogger(__name__)

BANNER = "TASK MANAGEMENT SYSTEM (STACK-BASED)"


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _clear_screen() -> None:
    # Only when attached to a terminal; piped output stays clean.
    if sys.stdout.isatty():
        print("\033[H\033[2J", end="", flush=True)


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState, *, clear: bool = False) -> None:
    logger.info("Console started (tasks=%d).", state.board.size())
    if clear:
        _clear_screen()
    _print_ts(f"[{BANNER}] Use /help for commands. Use /exit to quit.\n")
    print(render_tasks(state.board.tasks))

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            print("Commands start with '/'. Use /help to list available commands.")
            continue

        try:
            response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    logger.info("Console finished.")
