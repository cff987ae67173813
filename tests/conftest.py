# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from todo.schema import Task
from todo.store import TaskStore


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.txt"


@pytest.fixture()
def store(tasks_path: Path) -> TaskStore:
    return TaskStore(tasks_path)


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        Task(id=1, title="Buy milk"),
        Task(id=2, title="Call dentist", deadline=date(2024, 3, 15)),
        Task(id=5, title="Water plants", done=True),
    ]
