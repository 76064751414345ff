# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

MAX_SUBTASKS = 5


class BoardError(StrEnum):
    """
    Why a board operation was rejected.

    Task-level problems are shown inline next to the task form;
    the rest are shown as an alert.
    """

    INVALID_DESCRIPTION = "invalid_description"
    INVALID_HOURS = "invalid_hours"
    MISSING_SUBTASK_FIELDS = "missing_subtask_fields"
    SUBTASK_LIMIT = "subtask_limit"
    INDEX_OUT_OF_RANGE = "index_out_of_range"

    @property
    def is_task_validation(self) -> bool:
        return self in (BoardError.INVALID_DESCRIPTION, BoardError.INVALID_HOURS)


@dataclass(slots=True, frozen=True)
class Subtask:
    name: str
    date: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "date": self.date}


@dataclass(slots=True)
class Task:
    description: str
    hours_to_complete: int
    completed: bool = False
    subtasks: tuple[Subtask, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "hours_to_complete": self.hours_to_complete,
            "completed": self.completed,
            "subtasks": [s.to_dict() for s in self.subtasks],
        }


@dataclass(slots=True, frozen=True)
class OpResult:
    """Outcome of a board mutation. Truthy on success."""

    ok: bool
    error: BoardError | None = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> OpResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: BoardError, message: str) -> OpResult:
        return cls(ok=False, error=error, message=message)
