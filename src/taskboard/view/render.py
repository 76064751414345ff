# src/taskboard/view/render.py

"""
Stateless rendering.

Every function takes the current board contents and returns markup; nothing
here reads or mutates state on its own. Lists are regenerated in full on
every call.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from ..core.ports import BoardRepo
from ..tasks.task_models import Subtask, Task

DEFAULT_TITLE = "Task Manager"


@lru_cache(maxsize=1)
def _env() -> Environment:
    return Environment(
        loader=PackageLoader("taskboard", "view/templates"),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_task_list(tasks: Sequence[Task]) -> str:
    """Markup for the task list items, including nested subtask lists."""
    return _env().get_template("_task_list.html").render(tasks=tasks)


def render_subtask_buffer(subtasks: Sequence[Subtask]) -> str:
    """Markup for the pending-subtask list items."""
    return _env().get_template("_subtask_list.html").render(subtasks=subtasks)


def render_page(
    board: BoardRepo,
    *,
    error_message: str | None = None,
    alert_message: str | None = None,
    form: Mapping[str, str] | None = None,
    title: str = DEFAULT_TITLE,
) -> str:
    """
    Full page for the board.

    error_message fills the inline area under the task form; alert_message
    is shown above the subtask form. form re-populates the task and subtask inputs
    after a rejected submission.
    """
    tasks = board.tasks
    subtasks = board.subtasks_buffer
    form_values = {"description": "", "hours": "", "name": "", "date": ""}
    if form:
        form_values.update({k: str(v) for k, v in form.items() if k in form_values})

    return _env().get_template("page.html").render(
        title=title,
        error_message=error_message,
        alert_message=alert_message,
        form=form_values,
        subtasks=subtasks,
        max_subtasks=board.max_subtasks,
        task_count=len(tasks),
        completed_count=board.completed_count(),
        task_list=Markup(render_task_list(tasks)),
        subtask_list=Markup(render_subtask_buffer(subtasks)),
    )


def render_board_text(board: BoardRepo) -> str:
    """Plain-text rendition for the console."""
    tasks = board.tasks
    return (
        _env()
        .get_template("board.txt")
        .render(
            tasks=tasks,
            subtasks=board.subtasks_buffer,
            max_subtasks=board.max_subtasks,
            task_count=len(tasks),
            completed_count=board.completed_count(),
        )
        .rstrip("\n")
    )
