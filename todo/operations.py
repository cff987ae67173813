"""
TODO - Task Operations
======================
Pure functions over a task collection. Every function returns a new list;
the caller's list is never modified.
"""

import logging
import re
from datetime import date, datetime
from typing import Optional, Tuple, Union

from .errors import UsageError
from .schema import DATE_FORMAT, Task, TaskCollection

logger = logging.getLogger(__name__)

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")


def next_id(tasks: TaskCollection) -> int:
    """Highest identifier plus one, or 1 for an empty collection"""
    if not tasks:
        return 1
    return max(task.id for task in tasks) + 1


def parse_deadline(raw: Optional[str]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD deadline.

    An unparseable value is dropped with a warning instead of failing
    the command.
    """
    if not raw:
        return None
    try:
        parsed = datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        parsed = None
    # strptime also takes unpadded fields such as 2024-3-5
    if parsed is None or parsed.strftime(DATE_FORMAT) != raw:
        logger.warning(f"Ignoring deadline {raw!r}: expected YYYY-MM-DD")
        return None
    return parsed


def parse_task_id(raw: Optional[str]) -> int:
    if raw is None:
        raise UsageError("Task ID is required")
    if not _TASK_ID_RE.fullmatch(raw):
        raise UsageError("ID must be a number")
    return int(raw)


def add_task(
    tasks: TaskCollection,
    title: str,
    deadline: Union[str, date, None] = None
) -> Tuple[TaskCollection, int]:
    """Append a new, not-done task and return it with its identifier"""
    if not title:
        raise UsageError("Task title is required")
    if isinstance(deadline, str) or deadline is None:
        deadline = parse_deadline(deadline)

    new_id = next_id(tasks)
    task = Task(id=new_id, title=title, deadline=deadline)

    logger.debug(f"Added task #{new_id}: {title}")
    return [*tasks, task], new_id


def remove_task(tasks: TaskCollection, task_id: int) -> Tuple[TaskCollection, bool]:
    """Drop the task with this identifier; found is False if there is none"""
    for i, task in enumerate(tasks):
        if task.id == task_id:
            logger.debug(f"Removed task #{task_id}")
            return tasks[:i] + tasks[i + 1:], True
    return list(tasks), False


def mark_done(tasks: TaskCollection, task_id: int) -> Tuple[TaskCollection, bool]:
    """Set the done flag on the matching task. Idempotent."""
    for i, task in enumerate(tasks):
        if task.id == task_id:
            updated = task.model_copy(update={"done": True})
            logger.debug(f"Marked task #{task_id} as done")
            return tasks[:i] + [updated] + tasks[i + 1:], True
    return list(tasks), False


def clear_tasks() -> TaskCollection:
    return []
