"""Session-scoped undo stack for rejected assets."""

from __future__ import annotations

import threading
from collections import deque
from typing import Optional

MAX_REJECT_UNDO_IDS = 128


class RejectUndoStack:
    """Thread-safe LIFO of asset ids; the oldest ids drop off past the cap."""

    def __init__(self, cap: int = MAX_REJECT_UNDO_IDS) -> None:
        self._lock = threading.Lock()
        self._ids: deque[int] = deque(maxlen=cap)

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)

    def push(self, asset_id: int) -> None:
        """Record a rejected asset id; non-positive ids are ignored."""
        if asset_id <= 0:
            return
        with self._lock:
            self._ids.append(asset_id)

    def pop(self) -> Optional[int]:
        """Remove and return the most recent id, or None when empty."""
        with self._lock:
            return self._ids.pop() if self._ids else None

    def clear(self) -> None:
        """Drop all undo state."""
        with self._lock:
            self._ids.clear()