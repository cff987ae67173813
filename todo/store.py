"""
TODO - Task Store
=================
Reads and writes the whole task collection as one pretty-printed JSON file.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import TypeAdapter, ValidationError

from .errors import DataCorruptionError, StorageWriteError
from .schema import TaskCollection

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.txt"

_collection_adapter = TypeAdapter(TaskCollection)


class TaskStore:
    """
    File-backed task collection.

    The file holds a JSON array of task records. A missing file is an
    empty collection; there is no locking, the last writer wins.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_TASKS_FILE):
        self.path = Path(path)

    def load(self) -> TaskCollection:
        """Load the collection, or an empty one if the file does not exist"""
        if not self.path.exists():
            logger.info(f"No tasks file at {self.path}, starting empty")
            return []

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DataCorruptionError(f"{self.path} is not valid JSON: {e}") from e
        except UnicodeDecodeError as e:
            raise DataCorruptionError(f"{self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise DataCorruptionError(f"cannot read {self.path}: {e}") from e

        if data is None:
            data = []
        if not isinstance(data, list):
            raise DataCorruptionError(f"{self.path} does not contain a list of tasks")

        try:
            tasks = _collection_adapter.validate_python(data)
        except ValidationError as e:
            raise DataCorruptionError(f"{self.path} has invalid task records: {e}") from e

        logger.info(f"Loaded {len(tasks)} task(s) from {self.path}")
        return tasks

    def save(self, tasks: TaskCollection) -> None:
        """Overwrite the file with the full collection"""
        records = [task.model_dump(mode='json', exclude_none=True) for task in tasks]

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2)
                f.write("\n")
        except OSError as e:
            raise StorageWriteError(f"cannot write {self.path}: {e}") from e

        logger.info(f"Saved {len(tasks)} task(s) to {self.path}")
