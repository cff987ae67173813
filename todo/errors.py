"""Error types raised by the store, the operations and the CLI."""


class TodoError(Exception):
    """Base class for every failure that ends an invocation."""


class UsageError(TodoError):
    """Malformed or missing command-line arguments."""


class NotFoundError(TodoError):
    """No task carries the requested identifier."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task #{task_id} not found")
        self.task_id = task_id


class StorageError(TodoError):
    """Base class for failures of the tasks file."""


class DataCorruptionError(StorageError):
    """The tasks file exists but cannot be read back."""


class StorageWriteError(StorageError):
    """The tasks file could not be written."""
