# src/todo_maker/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, cast

from ..core.state import AppState
from ..errors import NotFoundError, ValidationError
from ..storage.csv_export import CSV_SUFFIX
from ..storage.task_file import TASK_FILE_SUFFIX, ensure_suffix
from ..tasks import task_api
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

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
        Handlers get the argument text verbatim (inner whitespace kept).
        Returns a reply string or None if not a command.
        TodoError subclasses raised by handlers propagate to the caller.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].strip().split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
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
        lines.append("  /exit - Quit (unsaved changes are lost).")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering ----


def format_task_row(n: int, task: Task) -> str:
    mark = "x" if task.completed else " "
    meta = task.priority.value
    if task.due_date:
        meta += f" • Due: {task.due_date.isoformat()}"
    return f"{n:>3}. [{mark}] {task.title}  ({meta})"


def render_view(state: AppState) -> str:
    """Recompute the view, remember it for row numbers, and format it."""
    rows = task_api.compute_view(state)
    state.last_view = rows

    header = f"Filter: {state.status_filter.value}"
    if state.query:
        header += f" | Search: {state.query!r}"
    header += f" | {len(rows)} of {state.store.count_tasks()} tasks"

    if not rows:
        return header + "\n  (no tasks)"
    return "\n".join([header, *(format_task_row(i, t) for i, t in enumerate(rows, start=1))])


# ---- argument helpers ----


def _split_fields(text: str) -> list[str]:
    """'a  b | c | d' -> ['a  b', 'c', 'd']"""
    return [seg.strip() for seg in text.split("|")]


def resolve_task(state: AppState, ref: str) -> Task:
    """
    A task reference is a row number from the last rendered view
    or a unique prefix of the task id.
    """
    ref = ref.strip().rstrip(".")
    if ref.isdigit():
        rows = state.last_view or task_api.compute_view(state)
        idx = int(ref) - 1
        if 0 <= idx < len(rows):
            return rows[idx]
        raise NotFoundError(f"#{ref}")

    matches = [t for t in state.store.snapshot() if t.id.startswith(ref.lower())]
    if len(matches) > 1:
        raise ValidationError(f"ambiguous id prefix: {ref}")
    if not matches:
        raise NotFoundError(ref)
    return matches[0]


def _path_arg(args: str, fallback: Path, suffix: str) -> Path:
    return ensure_suffix(args.strip() or fallback, suffix)


# ---- commands ----


def cmd_help(state: AppState, args: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: str) -> str:
    return render_view(state)


def cmd_add(state: AppState, args: str) -> str:
    """
    /add <title> | <due YYYY-MM-DD> | <low|medium|high> | <description>
    Only the title is required.
    """
    if not args.strip():
        return "Usage: /add <title> | <due YYYY-MM-DD> | <priority> | <description>"

    segs = _split_fields(args) + ["", "", ""]
    title, due, priority, description = segs[0], segs[1], segs[2], " | ".join(segs[3:]).strip(" |")
    task = task_api.create_task(
        state,
        title=title,
        due_date=due or None,
        priority=priority or None,
        description=description,
    )
    return f'Added "{task.title}" ({task.priority.value}).'


def cmd_edit(state: AppState, args: str) -> str:
    """
    /edit <ref> <title> | <due> | <priority> | <description>
    Blank segments keep the current value; '-' clears due date or description.
    """
    parts = args.split(maxsplit=1)
    if len(parts) < 2:
        return "Usage: /edit <n|id> <title> | <due> | <priority> | <description>"

    task = resolve_task(state, parts[0])
    segs = _split_fields(parts[1])

    fields: dict[str, Any] = {}
    if segs[0]:
        fields["title"] = segs[0]
    if len(segs) > 1 and segs[1]:
        fields["due_date"] = None if segs[1] == "-" else segs[1]
    if len(segs) > 2 and segs[2]:
        fields["priority"] = segs[2]
    if len(segs) > 3:
        description = " | ".join(segs[3:]).strip(" |")
        if description:
            fields["description"] = "" if description == "-" else description

    if not fields:
        return "Nothing to change."
    task_api.edit_task(state, task.id, **fields)
    return f'Updated "{task.title}".'


def cmd_done(state: AppState, args: str) -> str:
    parts = args.split()
    if len(parts) != 1:
        return "Usage: /done <n|id>"
    task = task_api.toggle_task(state, resolve_task(state, parts[0]).id)
    return f'"{task.title}" marked {"completed" if task.completed else "active"}.'


def cmd_rm(state: AppState, args: str) -> str:
    parts = args.split()
    if len(parts) != 1:
        return "Usage: /rm <n|id>"
    task = resolve_task(state, parts[0])
    if getattr(state.settings, "confirm_delete", True) and not state.confirm(
        f'Delete "{task.title}"?'
    ):
        return "Cancelled."
    task_api.delete_task(state, task.id)
    return f'Deleted "{task.title}".'


def cmd_find(state: AppState, args: str) -> str:
    task_api.set_query(state, args)
    return f"Searching for {state.query!r}." if state.query else "Search cleared."


def cmd_filter(state: AppState, args: str) -> str:
    parts = args.split()
    if len(parts) != 1:
        return f"Filter is {state.status_filter.value}. Usage: /filter all|active|completed"
    status = task_api.set_status_filter(state, parts[0])
    return f"Filter set to {status.value}."


def cmd_save(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    fallback = state.current_path or getattr(state.settings, "tasks_path")
    path = _path_arg(args, fallback, TASK_FILE_SUFFIX)
    if emit:
        emit(f"Saving {state.store.count_tasks()} tasks to {path}...")
    path = task_api.save_all(state, path)
    return f"Saved {state.store.count_tasks()} tasks to {path}."


def cmd_load(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    raw = args.strip()
    path = Path(raw).expanduser() if raw else (state.current_path or getattr(state.settings, "tasks_path"))
    if emit:
        emit(f"Loading {path}...")
    n = task_api.load_all(state, path)
    return f"Loaded {n} tasks from {path}."


def cmd_export(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    path = _path_arg(args, getattr(state.settings, "export_path"), CSV_SUFFIX)
    if emit:
        emit(f"Exporting {state.store.count_tasks()} tasks to {path}...")
    path = task_api.export_csv(state, path)
    return f"Exported CSV to {path}."


def cmd_status(state: AppState, args: str) -> str:
    tasks = state.store.snapshot()
    done = sum(1 for t in tasks if t.completed)
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({len(tasks) - done} active, {done} completed)\n"
        f"  Filter: {state.status_filter.value}\n"
        f"  Search: {state.query or '-'}\n"
        f"  File: {state.current_path or '-'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add title | due | priority | description."
)
registry.register(
    "edit",
    cmd_edit,
    help_text="Edit a task: /edit n title | due | priority | description (blank keeps, - clears).",
)
registry.register("done", cmd_done, help_text="Toggle completed: /done n.", aliases=["toggle", "t"])
registry.register("rm", cmd_rm, help_text="Delete a task: /rm n.", aliases=["del", "delete"])
registry.register("find", cmd_find, help_text="Search title/description: /find text (empty clears).", aliases=["search"])
registry.register("filter", cmd_filter, help_text="Status filter: /filter all | active | completed.")
registry.register("save", cmd_save, help_text="Save tasks: /save [path.todo].")
registry.register("load", cmd_load, help_text="Load tasks: /load [path].", aliases=["open"])
registry.register("export", cmd_export, help_text="Export CSV: /export [path.csv].")
registry.register("status", cmd_status, help_text="Show counts, filter, search and file.")
