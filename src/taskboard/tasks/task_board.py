# src/taskboard/tasks/task_board.py

from __future__ import annotations

import logging
import math
from typing import Any

from .task_models import MAX_SUBTASKS, BoardError, OpResult, Subtask, Task

logger = logging.getLogger(__name__)

MSG_INVALID_DESCRIPTION = "Task description is required and must be a string."
MSG_INVALID_HOURS = "Hours to complete must be a positive integer."
MSG_MISSING_SUBTASK_FIELDS = "Subtask name and date are required!"


def clean_text(value: Any) -> str | None:
    """Return stripped text, or None if value is not a non-blank string."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def parse_hours(value: Any) -> int | None:
    """
    Parse an hours estimate into a positive int.

    Accepts ints and numeric strings ("5", " 5 ", "5.0"). Integer text is
    kept exact; fractions are truncated toward zero and the result must
    still be >= 1. Returns None for anything else (bools included).
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value if value >= 1 else None

    if isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            hours = int(raw)
        except ValueError:
            pass
        else:
            return hours if hours >= 1 else None
        value = raw

    if not isinstance(value, (str, float)):
        return None

    try:
        number = float(value)
        if not math.isfinite(number) or number <= 0:
            return None
        hours = int(number)
    except (ValueError, OverflowError):
        return None
    return hours if hours >= 1 else None


def _as_index(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


class TaskBoard:
    """
    In-memory task board.

    Holds the ordered task list and the pending-subtask buffer. Every
    mutation validates its input and returns an OpResult instead of raising;
    a rejected call never changes state.

    Entities have no identity beyond their position, so all positional
    operations take a 0-based index and check it against the current length.
    """

    def __init__(self, *, max_subtasks: int = MAX_SUBTASKS) -> None:
        self._tasks: list[Task] = []
        self._buffer: list[Subtask] = []
        self._max_subtasks = max_subtasks

    # ---- read API ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    @property
    def subtasks_buffer(self) -> tuple[Subtask, ...]:
        return tuple(self._buffer)

    @property
    def max_subtasks(self) -> int:
        return self._max_subtasks

    def task_count(self) -> int:
        return len(self._tasks)

    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def snapshot(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_dict() for t in self._tasks],
            "subtasks_buffer": [s.to_dict() for s in self._buffer],
        }

    # ---- tasks ----

    def add_task(self, description: Any, hours_to_complete: Any) -> OpResult:
        """Create a task from the current buffer; clears the buffer on success."""
        desc = clean_text(description)
        if desc is None:
            logger.info("Task rejected: invalid description %r", description)
            return OpResult.failure(BoardError.INVALID_DESCRIPTION, MSG_INVALID_DESCRIPTION)

        hours = parse_hours(hours_to_complete)
        if hours is None:
            logger.info("Task rejected: invalid hours %r", hours_to_complete)
            return OpResult.failure(BoardError.INVALID_HOURS, MSG_INVALID_HOURS)

        task = Task(
            description=desc,
            hours_to_complete=hours,
            subtasks=tuple(self._buffer[: self._max_subtasks]),
        )
        self._tasks.append(task)
        self._buffer = []
        logger.debug(
            "Task added index=%d hours=%d subtasks=%d",
            len(self._tasks) - 1,
            hours,
            len(task.subtasks),
        )
        return OpResult.success()

    def remove_task(self, index: int) -> OpResult:
        idx = self._check_index(index, len(self._tasks))
        if idx is None:
            return self._out_of_range("task", index)
        removed = self._tasks.pop(idx)
        logger.debug("Task removed index=%d description=%r", idx, removed.description)
        return OpResult.success()

    def toggle_task(self, index: int) -> OpResult:
        idx = self._check_index(index, len(self._tasks))
        if idx is None:
            return self._out_of_range("task", index)
        task = self._tasks[idx]
        task.completed = not task.completed
        logger.debug("Task toggled index=%d completed=%s", idx, task.completed)
        return OpResult.success()

    # ---- subtask buffer ----

    def add_subtask_to_buffer(self, name: Any, date: Any) -> OpResult:
        clean_name = clean_text(name)
        clean_date = clean_text(date)
        if clean_name is None or clean_date is None:
            logger.info("Subtask rejected: missing name or date")
            return OpResult.failure(BoardError.MISSING_SUBTASK_FIELDS, MSG_MISSING_SUBTASK_FIELDS)

        if len(self._buffer) >= self._max_subtasks:
            logger.info("Subtask rejected: buffer full (%d)", len(self._buffer))
            return OpResult.failure(
                BoardError.SUBTASK_LIMIT,
                f"You can only add up to {self._max_subtasks} subtasks.",
            )

        self._buffer.append(Subtask(name=clean_name, date=clean_date))
        logger.debug("Subtask buffered size=%d", len(self._buffer))
        return OpResult.success()

    def remove_subtask_from_buffer(self, index: int) -> OpResult:
        idx = self._check_index(index, len(self._buffer))
        if idx is None:
            return self._out_of_range("subtask", index)
        self._buffer.pop(idx)
        logger.debug("Subtask unbuffered index=%d size=%d", idx, len(self._buffer))
        return OpResult.success()

    # ---- helpers ----

    @staticmethod
    def _check_index(index: Any, size: int) -> int | None:
        idx = _as_index(index)
        if idx is None or idx < 0 or idx >= size:
            return None
        return idx

    @staticmethod
    def _out_of_range(kind: str, index: Any) -> OpResult:
        logger.info("%s index out of range: %r", kind.capitalize(), index)
        return OpResult.failure(
            BoardError.INDEX_OUT_OF_RANGE,
            f"No {kind} at position {index}.",
        )
