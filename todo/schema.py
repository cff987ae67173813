"""
TODO - Task Schema Definition
=============================
A task is an id, a title, a done flag and an optional deadline.
The collection is a plain ordered list of tasks.
"""

from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DATE_FORMAT = "%Y-%m-%d"


class Task(BaseModel):
    """Individual to-do entry"""
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    # Older files may hold empty titles; new tasks are checked in add_task
    title: str
    done: bool = False
    deadline: Optional[date] = None

    @field_validator("deadline", mode="before")
    @classmethod
    def _legacy_deadline(cls, value: Any) -> Any:
        # Older files stored RFC 3339 timestamps, with year 1 meaning "no deadline"
        if isinstance(value, str):
            if not value:
                return None
            day = value.split("T", 1)[0]
            if day.startswith("0001-"):
                return None
            return day
        return value


TaskCollection = List[Task]
