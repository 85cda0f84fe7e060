# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from sczl.tasks.task_list import TaskList
from sczl.tasks.task_models import (
    Deadline,
    Event,
    TaskKind,
    Todo,
    parse_input_datetime,
    parse_storage_datetime,
    render_task,
    task_details,
)


def test_render_each_variant() -> None:
    todo = Todo("read book")
    deadline = Deadline("submit report", datetime(2024, 12, 1, 18, 0), done=True)
    event = Event("team sync", datetime(2024, 12, 1, 9, 0), datetime(2024, 12, 1, 10, 0))

    assert render_task(todo) == "[T][ ] read book"
    assert render_task(deadline) == "[D][X] submit report (by: Dec 01 2024, 18:00)"
    assert render_task(event) == (
        "[E][ ] team sync (from: Dec 01 2024, 09:00 to: Dec 01 2024, 10:00)"
    )
    assert task_details(todo) == "read book"
    assert [t.kind for t in (todo, deadline, event)] == [
        TaskKind.TODO,
        TaskKind.DEADLINE,
        TaskKind.EVENT,
    ]


def test_input_and_storage_formats_are_distinct() -> None:
    assert parse_input_datetime("2024-12-01 1800") == datetime(2024, 12, 1, 18, 0)
    assert parse_storage_datetime("2024-12-01 18:00") == datetime(2024, 12, 1, 18, 0)

    with pytest.raises(ValueError):
        parse_input_datetime("2024-12-01 18:00")
    with pytest.raises(ValueError):
        parse_storage_datetime("2024-12-01 1800")


@pytest.mark.parametrize(
    "text",
    ["notadate", "2024-1-5 0900", "2024-12-01 900", "2024-13-01 0900", "2024-12-01 2500", ""],
)
def test_input_datetime_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        parse_input_datetime(text)


def test_task_list_remove_shifts_indices() -> None:
    a, b, c = Todo("a"), Todo("b"), Todo("c")
    tasks = TaskList([a, b, c])

    removed = tasks.remove(0)

    assert removed is a
    assert len(tasks) == 2
    assert tasks.get(0) is b
    assert tasks.get(1) is c


def test_task_list_bounds() -> None:
    tasks = TaskList([Todo("only")])
    assert tasks.in_range(0)
    assert not tasks.in_range(-1)
    assert not tasks.in_range(1)
    with pytest.raises(IndexError):
        tasks.get(1)
    with pytest.raises(IndexError):
        tasks.remove(-1)
