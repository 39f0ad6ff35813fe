# src/todo_maker/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from ..tasks.task_models import StatusFilter, Task
from ..tasks.task_store import TaskStore

Confirm = Callable[[str], bool]


def _always_yes(prompt: str) -> bool:
    return True


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: TaskStore

    # Current view inputs (search box + filter selector).
    query: str = ""
    status_filter: StatusFilter = StatusFilter.ALL

    # File the store was last loaded from / saved to.
    current_path: Path | None = None

    # Rows as last rendered; console row numbers index into this.
    last_view: list[Task] = field(default_factory=list)

    # Yes/no prompt used before destructive actions (console swaps in input()).
    confirm: Confirm = _always_yes
