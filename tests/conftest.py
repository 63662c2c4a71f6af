# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from pathlib import Path

import pytest

from tasklist.config import Settings
from tasklist.engine import deadline
from tasklist.state import AppState

FROZEN_NOW = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def feed(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[str | BaseException]], None]:
    """
    Script console input.

    Each call to input() returns the next scripted line; running out of
    lines raises EOFError, like a closed stdin. A scripted exception is
    raised instead of returned.
    """

    def _feed(lines: Iterable[str | BaseException]) -> None:
        it = iter(list(lines))

        def fake_input(prompt: str = "") -> str:
            try:
                line = next(it)
            except StopIteration:
                raise EOFError from None
            if isinstance(line, BaseException):
                raise line
            return line

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed


@pytest.fixture()
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> datetime:
    """Pin "now" for urgency computation to 2024-01-01 00:00 UTC."""
    monkeypatch.setattr(deadline, "_now", lambda: FROZEN_NOW)
    return FROZEN_NOW


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(work_dir=tmp_path)


@pytest.fixture()
def state(settings: Settings) -> AppState:
    return AppState(settings=settings)
