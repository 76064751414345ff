# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the controllers.

Controllers depend on this Protocol instead of the concrete TaskBoard,
so tests can swap in fakes and the views stay decoupled from mutation.
"""

from typing import Any, Protocol

from ..tasks.task_models import OpResult, Subtask, Task


class BoardRepo(Protocol):
    @property
    def tasks(self) -> tuple[Task, ...]: ...

    @property
    def subtasks_buffer(self) -> tuple[Subtask, ...]: ...

    @property
    def max_subtasks(self) -> int: ...

    def task_count(self) -> int: ...
    def completed_count(self) -> int: ...
    def snapshot(self) -> dict[str, Any]: ...

    def add_task(self, description: Any, hours_to_complete: Any) -> OpResult: ...
    def remove_task(self, index: int) -> OpResult: ...
    def toggle_task(self, index: int) -> OpResult: ...

    def add_subtask_to_buffer(self, name: Any, date: Any) -> OpResult: ...
    def remove_subtask_from_buffer(self, index: int) -> OpResult: ...
