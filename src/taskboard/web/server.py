# src/taskboard/web/server.py

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

import uvicorn

from ..core.state import AppState
from .app import create_app

logger = logging.getLogger(__name__)


@dataclass
class WebBackgroundRunner:
    thread: threading.Thread
    server: uvicorn.Server

    def stop(self) -> None:
        self.server.should_exit = True

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def build_server(state: AppState) -> uvicorn.Server:
    settings = state.settings
    config = uvicorn.Config(
        create_app(state),
        host=str(getattr(settings, "web_host", "127.0.0.1")),
        port=int(getattr(settings, "web_port", 8000)),
        log_config=None,  # keep our own handlers from logging_setup
        access_log=True,
    )
    return uvicorn.Server(config)


def start_web_in_background(state: AppState) -> WebBackgroundRunner | None:
    """
    Start the web server in a background thread (so the console REPL can run in parallel).

    The REPL blocks on input(), while uvicorn wants its own event loop.
    """
    if not getattr(state.settings, "web_enabled", False):
        logger.info("Web server disabled, not starting.")
        return None

    server = build_server(state)
    # uvicorn installs signal handlers only in the main thread; main.py owns them.
    t = threading.Thread(target=server.run, name="taskboard-web", daemon=True)
    t.start()

    logger.info(
        "Web server thread started on http://%s:%s",
        server.config.host,
        server.config.port,
    )
    return WebBackgroundRunner(thread=t, server=server)
