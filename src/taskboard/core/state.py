# src/taskboard/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from .ports import BoardRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: object
    board: BoardRepo

    # Serializes actions when the console and the web server share the board.
    lock: threading.Lock = field(default_factory=threading.Lock)
