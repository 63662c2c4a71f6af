# src/tasklist/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .config import Settings
from .engine.model import Task
from .engine.ops import save_tasks
from .engine.parse import load_tasks

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Session state threaded through every command."""

    settings: Settings
    tasks: list[Task] = field(default_factory=list)

    def save(self) -> None:
        save_tasks(self.settings.store_path, self.tasks)


def create_initial_state(settings: Settings) -> AppState:
    """Load the task store once, at startup."""
    tasks = load_tasks(settings.store_path, legacy_path=settings.legacy_store_path)
    logger.debug("Session started in %s with %d task(s)", settings.work_dir, len(tasks))
    return AppState(settings=settings, tasks=tasks)
