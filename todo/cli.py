#!/usr/bin/env python3
"""
TODO - CLI Interface
====================
Command-line tool for a single local to-do list.

Usage:
    todo add "Buy milk"
    todo add "Call dentist" 2024-03-15
    todo list
    todo done 1
    todo delete 1
    todo clear
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import (
    DataCorruptionError, NotFoundError, StorageWriteError, UsageError
)
from .operations import (
    add_task, clear_tasks, mark_done, parse_task_id, remove_task
)
from .render import (
    added_message, cleared_message, deleted_message, done_message,
    format_task_list
)
from .store import DEFAULT_TASKS_FILE, TaskStore

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports bad input as UsageError instead of exiting"""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", default=DEFAULT_TASKS_FILE, help="Tasks file")
    common.add_argument("--no-color", action="store_true", help="Disable colored output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")

    parser = _Parser(
        prog="todo",
        description="Simple command-line to-do list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  todo add "Buy milk"                  Add a new task
  todo add "Call dentist" 2024-03-15   Add a task with a deadline (YYYY-MM-DD)
  todo list                            List all tasks
  todo done 1                          Mark task #1 as done
  todo delete 1                        Delete task #1
  todo clear                           Delete all tasks
  todo add -- "-5 degrees"            Use -- before a title that starts with a dash
        """
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", parents=[common], help="Add a new task")
    add_parser.add_argument("title", nargs="?", help="Task title")
    add_parser.add_argument("deadline", nargs="?", help="Optional deadline (YYYY-MM-DD)")

    # LIST command
    subparsers.add_parser("list", parents=[common], help="List all tasks")

    # DELETE command
    delete_parser = subparsers.add_parser("delete", parents=[common], help="Delete a task by ID")
    delete_parser.add_argument("id", nargs="?", help="Task ID")

    # DONE command
    done_parser = subparsers.add_parser("done", parents=[common], help="Mark a task as done by ID")
    done_parser.add_argument("id", nargs="?", help="Task ID")

    # CLEAR command
    subparsers.add_parser("clear", parents=[common], help="Delete all tasks")

    return parser


def run(args: argparse.Namespace, store: TaskStore, color: bool = False) -> int:
    """Execute one parsed command against the store"""
    # Argument checks come first so a usage error never touches the file
    if args.command == "add" and not args.title:
        raise UsageError("Task title is required")
    task_id = None
    if args.command in ("delete", "done"):
        task_id = parse_task_id(args.id)

    tasks = store.load()

    if args.command == "add":
        tasks, new_id = add_task(tasks, args.title, args.deadline)
        message = added_message(new_id, args.title, color)

    elif args.command == "list":
        print(format_task_list(tasks, color))
        return 0

    elif args.command == "delete":
        tasks, found = remove_task(tasks, task_id)
        if not found:
            raise NotFoundError(task_id)
        message = deleted_message(task_id, color)

    elif args.command == "done":
        tasks, found = mark_done(tasks, task_id)
        if not found:
            raise NotFoundError(task_id)
        message = done_message(task_id, color)

    elif args.command == "clear":
        tasks = clear_tasks()
        message = cleared_message(color)

    else:
        raise UsageError(f"unknown command: {args.command}")

    store.save(tasks)
    logger.info(f"{args.command} finished, {len(tasks)} task(s) stored")
    print(message)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}")
        parser.print_help()
        return 1

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    store = TaskStore(args.file)
    color = sys.stdout.isatty() and not args.no_color

    try:
        return run(args, store, color)
    except UsageError as e:
        print(f"Error: {e}")
        parser.print_help()
    except NotFoundError as e:
        print(f"Error: {e}")
    except DataCorruptionError as e:
        print(f"Error loading tasks: {e}")
    except StorageWriteError as e:
        print(f"Error saving tasks: {e}")
    return 1

