# tests/test_store.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from todo.errors import DataCorruptionError, StorageWriteError
from todo.schema import Task
from todo.store import TaskStore


def test_load_missing_file_is_empty(store: TaskStore, tasks_path: Path) -> None:
    assert store.load() == []
    assert not tasks_path.exists()


def test_save_then_load_round_trip(store: TaskStore, sample_tasks) -> None:
    store.save(sample_tasks)
    assert store.load() == sample_tasks


def test_save_writes_pretty_json_in_stable_field_order(
    store: TaskStore, tasks_path: Path, sample_tasks
) -> None:
    store.save(sample_tasks)
    text = tasks_path.read_text(encoding="utf-8")

    assert text.startswith("[\n  {\n")
    records = json.loads(text)
    assert list(records[1]) == ["id", "title", "done", "deadline"]
    assert records[1]["deadline"] == "2024-03-15"
    assert "deadline" not in records[0]


def test_save_overwrites_whole_file(store: TaskStore, sample_tasks) -> None:
    store.save(sample_tasks)
    store.save([Task(id=9, title="only")])
    assert store.load() == [Task(id=9, title="only")]


def test_save_empty_collection(store: TaskStore, tasks_path: Path) -> None:
    store.save([])
    assert json.loads(tasks_path.read_text(encoding="utf-8")) == []
    assert store.load() == []


def test_save_creates_parent_directories(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "nested" / "dir" / "tasks.txt")
    store.save([Task(id=1, title="x")])
    assert store.load() == [Task(id=1, title="x")]


@pytest.mark.parametrize(
    "content",
    [
        "",
        "not json",
        '{"id": 1, "title": "x"}',
        '[{"id": 1}]',
        '[{"id": 0, "title": "x"}]',
        '[{"id": 1, "title": "x", "deadline": "someday"}]',
    ],
)
def test_load_corrupt_file(store: TaskStore, tasks_path: Path, content: str) -> None:
    tasks_path.write_text(content, encoding="utf-8")
    with pytest.raises(DataCorruptionError):
        store.load()


def test_load_null_document_is_empty(store: TaskStore, tasks_path: Path) -> None:
    tasks_path.write_text("null", encoding="utf-8")
    assert store.load() == []


def test_load_legacy_timestamp_deadlines(store: TaskStore, tasks_path: Path) -> None:
    tasks_path.write_text(
        json.dumps(
            [
                {"id": 1, "title": "Buy milk", "done": True, "deadline": "0001-01-01T00:00:00Z"},
                {"id": 2, "title": "Call dentist", "done": False, "deadline": "2024-03-15T00:00:00Z"},
            ],
            indent=2,
        ),
        encoding="utf-8",
    )

    tasks = store.load()

    assert tasks == [
        Task(id=1, title="Buy milk", done=True),
        Task(id=2, title="Call dentist", deadline=date(2024, 3, 15)),
    ]


def test_save_failure_raises_and_keeps_old_state(tmp_path: Path) -> None:
    # A directory in place of the file makes the write fail on any platform
    target = tmp_path / "tasks.txt"
    target.mkdir()

    with pytest.raises(StorageWriteError):
        TaskStore(target).save([Task(id=1, title="x")])
    assert target.is_dir()


@pytest.mark.parametrize(
    "content",
    [b"\xff\xfe garbage", b'[{"id": 1, "title": "\xff\xfe"}]'],
)
def test_load_invalid_utf8_is_corrupt(store: TaskStore, tasks_path: Path, content: bytes) -> None:
    tasks_path.write_bytes(content)
    with pytest.raises(DataCorruptionError, match="UTF-8"):
        store.load()


def test_load_legacy_empty_title(store: TaskStore, tasks_path: Path) -> None:
    tasks_path.write_text(
        '[{"id": 1, "title": "", "done": false, "deadline": "0001-01-01T00:00:00Z"}]',
        encoding="utf-8",
    )
    assert store.load() == [Task(id=1, title="")]
