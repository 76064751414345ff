# src/taskboard/web/app.py

"""
Web controller.

Each route reads the submitted form values, calls one board operation under
the state lock and either redirects back to the page (success) or renders
the page with the failure message (inline error for task validation, alert
for everything else).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from .. import __version__
from ..core.state import AppState
from ..tasks.task_models import BoardError, OpResult
from ..view.render import DEFAULT_TITLE, render_page

logger = logging.getLogger(__name__)

_STATUS_FOR_ERROR: dict[BoardError, int] = {
    BoardError.INVALID_DESCRIPTION: 422,
    BoardError.INVALID_HOURS: 422,
    BoardError.MISSING_SUBTASK_FIELDS: 422,
    BoardError.SUBTASK_LIMIT: 422,
    BoardError.INDEX_OUT_OF_RANGE: 404,
}


def _title(state: AppState) -> str:
    app_name = getattr(state.settings, "app_name", None)
    return DEFAULT_TITLE if not app_name or app_name == "taskboard" else str(app_name)


def _at_position(op: Callable[[int], OpResult], raw: str, *, kind: str) -> OpResult:
    """Run a positional board operation on a path segment that may not be a number."""
    try:
        index = int(raw)
    except ValueError:
        logger.info("%s position is not a number: %r", kind.capitalize(), raw)
        return OpResult.failure(BoardError.INDEX_OUT_OF_RANGE, f"No {kind} at position {raw}.")
    return op(index)


def create_app(state: AppState) -> FastAPI:
    """Build the FastAPI app around an already constructed AppState."""
    app = FastAPI(
        title="Task Board",
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.debug(
            "%s %s - %s - %.3fs",
            request.method,
            request.url.path,
            response.status_code,
            process_time,
        )
        return response

    def _page(
        *,
        status_code: int = 200,
        error_message: str | None = None,
        alert_message: str | None = None,
        form: dict[str, str] | None = None,
    ) -> HTMLResponse:
        html = render_page(
            state.board,
            error_message=error_message,
            alert_message=alert_message,
            form=form,
            title=_title(state),
        )
        return HTMLResponse(html, status_code=status_code)

    def _respond(result: OpResult, *, form: dict[str, str] | None = None) -> HTMLResponse | RedirectResponse:
        if result.ok:
            return RedirectResponse("/", status_code=303)

        error = result.error
        status_code = _STATUS_FOR_ERROR.get(error, 400) if error else 400
        if error is not None and error.is_task_validation:
            return _page(status_code=status_code, error_message=result.message, form=form)
        return _page(status_code=status_code, alert_message=result.message, form=form)

    @app.get("/", response_class=HTMLResponse)
    def index() -> HTMLResponse:
        with state.lock:
            return _page()

    @app.post("/tasks")
    def add_task(description: str = Form(""), hours: str = Form("")):
        with state.lock:
            result = state.board.add_task(description, hours)
            return _respond(result, form={"description": description, "hours": hours})

    @app.post("/subtasks")
    def add_subtask(name: str = Form(""), date: str = Form("")):
        with state.lock:
            result = state.board.add_subtask_to_buffer(name, date)
            return _respond(result, form={"name": name, "date": date})

    @app.post("/subtasks/{index}/remove")
    def remove_subtask(index: str):
        with state.lock:
            return _respond(_at_position(state.board.remove_subtask_from_buffer, index, kind="subtask"))

    @app.post("/tasks/{index}/remove")
    def remove_task(index: str):
        with state.lock:
            return _respond(_at_position(state.board.remove_task, index, kind="task"))

    @app.post("/tasks/{index}/toggle")
    def toggle_task(index: str):
        with state.lock:
            return _respond(_at_position(state.board.toggle_task, index, kind="task"))

    @app.get("/api/board")
    def board_snapshot() -> dict[str, Any]:
        with state.lock:
            return state.board.snapshot()

    @app.get("/health")
    def health() -> JSONResponse:
        with state.lock:
            tasks = state.board.task_count()
        return JSONResponse(
            {
                "status": "ok",
                "service": "taskboard",
                "version": __version__,
                "tasks": tasks,
                "timestamp": time.time(),
            }
        )

    return app
