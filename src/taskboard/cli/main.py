# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then starts the front ends:
- web server in a background thread (optional),
- console REPL in the main thread (optional).
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..web.server import WebBackgroundRunner, start_web_in_background

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logging.getLogger("uvicorn").setLevel(max(console_level, logging.INFO))

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    if not settings.console_enabled and not settings.web_enabled:
        logger.warning("Both console and web are disabled; nothing to run.")
        return

    web_runner: WebBackgroundRunner | None = None
    if settings.web_enabled:
        web_runner = start_web_in_background(state)

    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
        if not settings.console_enabled:
            # The console turns Ctrl+C into KeyboardInterrupt itself.
            signal.signal(signal.SIGINT, _handle_signal)
    except ValueError:
        logger.debug("Signal handlers not installed (not in main thread).")

    try:
        if settings.console_enabled:
            run_console_loop(state)
            stop_main.set()
        else:
            logger.info("Console disabled. Serving the web page only. Press Ctrl+C to stop.")
            stop_main.wait()
    finally:
        if web_runner is not None:
            web_runner.stop()
            web_runner.join(timeout=10.0)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
