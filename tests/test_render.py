# tests/test_render.py

from __future__ import annotations

from taskboard.tasks.task_board import TaskBoard
from taskboard.view.render import (
    render_board_text,
    render_page,
    render_subtask_buffer,
    render_task_list,
)


def _board_with_one_task() -> TaskBoard:
    board = TaskBoard()
    board.add_subtask_to_buffer("Design", "2024-01-01")
    board.add_task("Write report", 5)
    return board


def test_task_list_markup() -> None:
    board = _board_with_one_task()
    board.toggle_task(0)

    html = render_task_list(board.tasks)

    assert html.count('<li class="list-group-item d-flex flex-column">') == 1
    assert "Write report (Hours: 5)" in html
    assert 'class="completed"' in html
    assert 'data-index="0"' in html
    assert "Design - Due: 2024-01-01" in html
    assert 'action="/tasks/0/toggle"' in html
    assert 'action="/tasks/0/remove"' in html


def test_empty_lists_render_nothing() -> None:
    assert render_task_list(()).strip() == ""
    assert render_subtask_buffer(()).strip() == ""


def test_subtask_buffer_markup_has_remove_buttons() -> None:
    board = TaskBoard()
    board.add_subtask_to_buffer("a", "d1")
    board.add_subtask_to_buffer("b", "d2")

    html = render_subtask_buffer(board.subtasks_buffer)

    assert "remove-subtask" in html
    assert 'action="/subtasks/1/remove"' in html
    assert "b - Due: d2" in html


def test_user_text_is_escaped() -> None:
    board = TaskBoard()
    board.add_task("<script>alert(1)</script>", 1)

    html = render_page(board)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html


def test_page_shows_inline_error_and_keeps_form_values() -> None:
    board = TaskBoard()

    html = render_page(
        board,
        error_message="Task description is required and must be a string.",
        form={"description": "", "hours": "3"},
    )

    assert 'id="errorMessage"' in html
    assert "Task description is required and must be a string." in html
    assert 'style="display: none;"' not in html
    assert 'value="3"' in html
    assert 'id="alertMessage"' not in html


def test_page_hides_error_area_by_default() -> None:
    html = render_page(TaskBoard())

    assert 'id="errorMessage" class="text-danger mb-3" style="display: none;"' in html
    for element_id in ("taskInput", "hoursInput", "subtaskName", "subtaskDate", "addTask", "addSubtask"):
        assert f'id="{element_id}"' in html
    assert "0 of 0 completed" in html


def test_page_alert_and_full_buffer_disables_add() -> None:
    board = TaskBoard()
    for i in range(board.max_subtasks):
        board.add_subtask_to_buffer(f"s{i}", "d")

    html = render_page(board, alert_message="You can only add up to 5 subtasks.")

    assert 'id="alertMessage"' in html
    assert "You can only add up to 5 subtasks." in html
    assert "disabled" in html


def test_page_counts_completed_tasks() -> None:
    board = TaskBoard()
    board.add_task("first", 1)
    board.add_task("second", 2)
    board.toggle_task(1)

    assert "1 of 2 completed" in render_page(board)


def test_page_keeps_subtask_form_values() -> None:
    html = render_page(
        TaskBoard(),
        alert_message="Subtask name and date are required!",
        form={"name": "Design", "date": "2024-01-01", "ignored": "x"},
    )

    assert 'id="subtaskName"' in html
    assert 'value="Design"' in html
    assert 'value="2024-01-01"' in html
    assert 'value="x"' not in html


def test_board_text() -> None:
    board = _board_with_one_task()
    board.add_subtask_to_buffer("Review", "2024-02-01")

    text = render_board_text(board)

    assert "Tasks (0/1 done):" in text
    assert "1. [ ] Write report (Hours: 5)" in text
    assert "- Design - Due: 2024-01-01" in text
    assert "Pending subtasks (1/5):" in text
    assert "1. Review - Due: 2024-02-01" in text


def test_board_text_empty() -> None:
    text = render_board_text(TaskBoard())

    assert "(no tasks)" in text
    assert "(none)" in text
