"""
TODO - Command-Line To-Do List
==============================

Keeps a single list of tasks in a local JSON file.

Usage:
    from todo import TaskStore, add_task, mark_done

    store = TaskStore("tasks.txt")
    tasks = store.load()
    tasks, task_id = add_task(tasks, "Buy milk", "2024-03-15")
    tasks, found = mark_done(tasks, task_id)
    store.save(tasks)
"""

__version__ = "1.0.0"

from .schema import Task, TaskCollection
from .errors import (
    TodoError,
    UsageError,
    NotFoundError,
    StorageError,
    DataCorruptionError,
    StorageWriteError
)
from .operations import (
    next_id,
    parse_deadline,
    parse_task_id,
    add_task,
    remove_task,
    mark_done,
    clear_tasks
)
from .store import TaskStore, DEFAULT_TASKS_FILE

__all__ = [
    "Task",
    "TaskCollection",
    "TaskStore",
    "DEFAULT_TASKS_FILE",
    "TodoError",
    "UsageError",
    "NotFoundError",
    "StorageError",
    "DataCorruptionError",
    "StorageWriteError",
    "next_id",
    "parse_deadline",
    "parse_task_id",
    "add_task",
    "remove_task",
    "mark_done",
    "clear_tasks"
]
