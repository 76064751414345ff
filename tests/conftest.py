# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from taskboard.core.state import AppState
from taskboard.tasks.task_board import TaskBoard
from taskboard.web.app import create_app


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the front ends.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard",
        log_level="INFO",
        data_dir=tmp_path / "data",
        console_enabled=False,
        web_enabled=False,
        web_host="127.0.0.1",
        web_port=8765,
    )


@pytest.fixture()
def board() -> TaskBoard:
    return TaskBoard()


@pytest.fixture()
def state(settings: SimpleNamespace, board: TaskBoard) -> AppState:
    return AppState(settings=settings, board=board)


@pytest.fixture()
def client(state: AppState) -> TestClient:
    """Web client that does not follow redirects, so 303s can be asserted."""
    return TestClient(create_app(state), follow_redirects=False)
