# tests/test_commands.py

from __future__ import annotations

from datetime import datetime

import pytest

from sczl.core.commands import (
    AddDeadline,
    AddEvent,
    AddTodo,
    Delete,
    Exit,
    Find,
    ListTasks,
    Mark,
    Unmark,
    execute_command,
)
from sczl.tasks.task_list import TaskList
from sczl.tasks.task_models import Todo, render_task

from .fakes import FakeTaskStore


def _tasks(*descriptions: str) -> TaskList:
    return TaskList(Todo(d) for d in descriptions)


def test_add_todo_appends_and_saves(fake_store: FakeTaskStore) -> None:
    tasks = TaskList()

    result = execute_command(AddTodo("read book"), tasks, fake_store)

    assert result.ok and not result.is_exit
    assert "Got it" in result.text
    assert "Now you have 1 tasks" in result.text
    assert "[T][ ] read book" in result.text
    assert len(tasks) == 1
    assert fake_store.saves == [["T | 0 | read book"]]


def test_add_deadline_and_event_render_suffixes(fake_store: FakeTaskStore) -> None:
    tasks = TaskList()

    execute_command(AddDeadline("submit report", datetime(2024, 12, 1, 18, 0)), tasks, fake_store)
    execute_command(
        AddEvent("team sync", datetime(2024, 12, 1, 9, 0), datetime(2024, 12, 1, 10, 0)),
        tasks,
        fake_store,
    )

    assert render_task(tasks.get(0)).endswith("(by: Dec 01 2024, 18:00)")
    assert render_task(tasks.get(1)).endswith("(from: Dec 01 2024, 09:00 to: Dec 01 2024, 10:00)")
    assert fake_store.saves[-1] == [
        "D | 0 | submit report | 2024-12-01 18:00",
        "E | 0 | team sync | 2024-12-01 09:00 | 2024-12-01 10:00",
    ]


def test_list_numbers_from_one_and_does_not_save(fake_store: FakeTaskStore) -> None:
    tasks = _tasks("a", "b")

    result = execute_command(ListTasks(), tasks, fake_store)

    assert result.text == "Here are the tasks in your list:\n1. [T][ ] a\n2. [T][ ] b"
    assert fake_store.saves == []
    assert len(tasks) == 2


def test_mark_then_unmark_restores_task(fake_store: FakeTaskStore) -> None:
    tasks = _tasks("read book")
    before = render_task(tasks.get(0))

    marked = execute_command(Mark(0), tasks, fake_store)
    assert tasks.get(0).done is True
    assert marked.text == "Nice! I've marked this task as done:\n  [T][X] read book"
    assert fake_store.saves[-1] == ["T | 1 | read book"]

    unmarked = execute_command(Unmark(0), tasks, fake_store)
    assert unmarked.text == "OK, I've marked this task as not done yet:\n  [T][ ] read book"
    assert tasks.get(0).done is False
    assert render_task(tasks.get(0)) == before


@pytest.mark.parametrize("command_type", [Mark, Unmark, Delete])
def test_out_of_range_index_fails_without_changes(
    command_type, fake_store: FakeTaskStore
) -> None:
    tasks = _tasks("a", "b")

    for index in (-1, len(tasks)):
        result = execute_command(command_type(index), tasks, fake_store)
        assert result.text == "Invalid task number."
        assert result.ok is False

    assert [render_task(t) for t in tasks] == ["[T][ ] a", "[T][ ] b"]
    assert fake_store.saves == []


def test_delete_shifts_later_tasks_down(fake_store: FakeTaskStore) -> None:
    tasks = _tasks("a", "b", "c")
    b, c = tasks.get(1), tasks.get(2)

    result = execute_command(Delete(0), tasks, fake_store)

    assert result.text == (
        "Noted. I've removed this task:\n  [T][ ] a\nNow you have 2 tasks in the list."
    )
    assert len(tasks) == 2
    assert tasks.get(0) is b
    assert tasks.get(1) is c
    assert fake_store.saves[-1] == ["T | 0 | b", "T | 0 | c"]


def test_find_is_case_insensitive_and_renumbers(fake_store: FakeTaskStore) -> None:
    tasks = _tasks("return library book", "buy milk", "read BOOK again")

    result = execute_command(Find("book"), tasks, fake_store)

    assert result.text == (
        "Here are the matching tasks in your list:\n"
        "1. [T][ ] return library book\n"
        "2. [T][ ] read BOOK again"
    )
    assert fake_store.saves == []
    assert len(tasks) == 3


def test_find_matches_date_suffix(fake_store: FakeTaskStore) -> None:
    tasks = TaskList()
    execute_command(AddDeadline("submit report", datetime(2024, 12, 1, 18, 0)), tasks, fake_store)
    execute_command(AddTodo("read book"), tasks, fake_store)

    result = execute_command(Find("dec 01"), tasks, fake_store)

    assert "submit report" in result.text
    assert "read book" not in result.text


def test_find_without_matches(fake_store: FakeTaskStore) -> None:
    result = execute_command(Find("zzz"), _tasks("a"), fake_store)
    assert result.text == "No matching tasks found."


def test_exit_signals_and_does_not_save(fake_store: FakeTaskStore) -> None:
    result = execute_command(Exit(), _tasks("a"), fake_store)

    assert result.is_exit is True
    assert result.text == "Bye. Hope to see you again soon!"
    assert fake_store.saves == []


def test_failed_save_keeps_memory_state() -> None:
    store = FakeTaskStore(fail_saves=True)
    tasks = TaskList()

    result = execute_command(AddTodo("read book"), tasks, store)

    assert result.ok
    assert "Now you have 1 tasks" in result.text
    assert len(tasks) == 1
