"""Human-readable output for the CLI."""

from typing import Iterable

from .schema import DATE_FORMAT, Task

GREEN = "\033[32m"
RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"

NO_TASKS = "No tasks found"


def paint(text: str, code: str, color: bool) -> str:
    if not color:
        return text
    return f"{code}{text}{RESET}"


def format_task(task: Task, color: bool = False) -> str:
    """One line: #<id>: <title> [Done|Not Done] (Deadline: YYYY-MM-DD)"""
    if task.done:
        status = paint("Done", GREEN, color)
    else:
        status = paint("Not Done", RED, color)
    deadline = ""
    if task.deadline is not None:
        deadline = f" (Deadline: {task.deadline.strftime(DATE_FORMAT)})"
    return f"#{task.id}: {task.title} [{status}]{deadline}"


def format_task_list(tasks: Iterable[Task], color: bool = False) -> str:
    lines = [format_task(task, color) for task in tasks]
    if not lines:
        return paint(NO_TASKS, YELLOW, color)
    return "\n".join(["Tasks:", *lines])


def added_message(task_id: int, title: str, color: bool = False) -> str:
    return f"{paint(f'Added task #{task_id}:', GREEN, color)} {title}"


def deleted_message(task_id: int, color: bool = False) -> str:
    return paint(f"Deleted task #{task_id}", RED, color)


def done_message(task_id: int, color: bool = False) -> str:
    return paint(f"Marked task #{task_id} as done", GREEN, color)


def cleared_message(color: bool = False) -> str:
    return paint("All tasks cleared!", YELLOW, color)
