# tests/test_cli.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.cli import dispatch, main, run_loop
from tasklist.config import STORE_FILE_NAME
from tasklist.engine.model import YELLOW, Priority
from tasklist.engine.parse import load_tasks
from tasklist.state import create_initial_state

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"


def test_add_then_print_end_to_end(state, feed, frozen_now, capsys) -> None:
    feed(["add", "H", "2024-01-01", "10:00", "Buy milk", "", "print", "end"])

    run_loop(state)

    out = capsys.readouterr().out.splitlines()
    row = f"| 1  | 2024-01-01 | 10:00 | {YELLOW} | {YELLOW} |Buy milk{' ' * 36}|"
    assert row in out
    assert out[-1] == "Tasklist exiting!"

    saved = load_tasks(state.settings.store_path)
    assert len(saved) == 1
    assert saved[0].priority is Priority.HIGH
    assert saved[0].text == ["Buy milk"]


def test_delete_last_task_then_print(state, feed, frozen_now, capsys) -> None:
    feed(["add", "L", "2024-01-01", "10:00", "only", "", "end"])
    run_loop(state)
    capsys.readouterr()

    reloaded = create_initial_state(state.settings)
    feed(["delete", "1", "print", "end"])
    run_loop(reloaded)

    out = capsys.readouterr().out.splitlines()
    assert "The task is deleted" in out
    assert "No tasks have been input" in out
    assert load_tasks(state.settings.store_path) == []


def test_edit_bad_date_end_to_end(state, feed, frozen_now, capsys) -> None:
    feed(["add", "N", "2024-01-01", "10:00", "x", "", "edit", "1", "date", "2024-13-40", "end"])

    run_loop(state)

    assert "The task is changed" in capsys.readouterr().out
    assert load_tasks(state.settings.store_path)[0].due_date is None


def test_unknown_action_reprompts(state, feed, capsys) -> None:
    feed(["list", "  end  "])

    run_loop(state)

    assert capsys.readouterr().out.splitlines() == [
        ACTION_PROMPT,
        "The input action is invalid",
        ACTION_PROMPT,
        "Tasklist exiting!",
    ]


def test_end_of_input_still_saves(state, feed, frozen_now) -> None:
    feed(["add", "C", "2024-01-01", "10:00", "keep me", ""])

    run_loop(state)

    assert load_tasks(state.settings.store_path)[0].text == ["keep me"]


def test_end_of_input_mid_add_drops_the_draft(state, feed) -> None:
    feed(["add", "C", "2024-01-01"])

    run_loop(state)

    assert state.tasks == []
    assert state.settings.store_path.exists()


def test_dispatch_end_stops(state) -> None:
    assert dispatch(state, "end") is False


def test_main_uses_work_dir(tmp_path: Path, feed, capsys) -> None:
    feed(["end"])

    assert main(["-C", str(tmp_path)]) == 0
    assert (tmp_path / STORE_FILE_NAME).exists()
    assert capsys.readouterr().out.endswith("Tasklist exiting!\n")


def test_main_reports_broken_store(tmp_path: Path, feed, capsys) -> None:
    store = tmp_path / STORE_FILE_NAME
    store.write_text("not: a list\n", encoding="utf-8")
    feed([])

    assert main(["-C", str(tmp_path)]) == 1
    assert "Error:" in capsys.readouterr().out
    assert store.read_text(encoding="utf-8") == "not: a list\n"


def test_main_no_color_prints_letters(tmp_path: Path, feed, frozen_now, capsys) -> None:
    feed(["add", "h", "2024-01-01", "10:00", "plain", "", "print", "end"])

    assert main(["-C", str(tmp_path), "--no-color"]) == 0

    assert "| H | T |plain" in capsys.readouterr().out


def _bad_bytes() -> UnicodeDecodeError:
    return UnicodeDecodeError("utf-8", b"\xff\xfe", 0, 1, "invalid start byte")


def test_undecodable_line_is_invalid_input(state, feed, frozen_now, capsys) -> None:
    feed(["add", "H", "2024-01-01", "10:00", "Buy milk", "", _bad_bytes(), "end"])

    run_loop(state)

    out = capsys.readouterr().out.splitlines()
    assert "The input action is invalid" in out
    assert out[-1] == "Tasklist exiting!"
    assert load_tasks(state.settings.store_path)[0].text == ["Buy milk"]


def test_unexpected_error_still_saves(state, feed, frozen_now) -> None:
    feed(["add", "L", "2024-01-01", "10:00", "keep", "", RuntimeError("boom")])

    with pytest.raises(RuntimeError):
        run_loop(state)

    assert load_tasks(state.settings.store_path)[0].text == ["keep"]
