# src/todo_maker/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_view
from ..core.state import AppState
from ..errors import TodoError

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def ask_yes_no(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N]: ")
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    return answer.strip().lower() in ("y", "yes")


def run_console_loop(state: AppState) -> None:
    """
    Read commands until /exit or EOF.

    The task list is recomputed and printed after every command, so the
    screen always reflects the current store, search text and filter.
    """
    logger.info("Console started (tasks=%s).", state.store.count_tasks())
    state.confirm = ask_yes_no

    app_name = str(getattr(state.settings, "app_name", "todo"))
    _print_ts(f"[{app_name}] Use /help for commands. Use /exit to quit.\n")
    print(render_view(state))

    while True:
        try:
            user_input = input("\n> ").strip()
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

        try:
            cmd_response = command_registry.handle(state, user_input, emit=_print_ts)
        except TodoError as e:
            logger.info("Command rejected: %s", e)
            cmd_response = f"[ERROR] {e}"
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is None:
            cmd_response = "Commands start with '/'. Use /help to list them."

        _print_ts(cmd_response)
        print(render_view(state))

    logger.info("Console finished.")
