"""Timed highlight of the most recently changed inventory row.

The reconciler only reports which item changed; the caller marks it here and
the highlight clears itself after ``duration`` seconds. Marking another item
cancels the pending clear.
"""
from threading import Lock, Timer
from typing import Optional

from inventory.utilities.constants import DEFAULT_HIGHLIGHT_SECONDS


class HighlightTracker:
    def __init__(self, duration: float = DEFAULT_HIGHLIGHT_SECONDS):
        self.duration = duration
        self._lock = Lock()
        self._item_id: Optional[int] = None
        self._timer: Optional[Timer] = None

    def mark(self, item_id: Optional[int]):
        if item_id is None:
            return
        with self._lock:
            self._cancel_timer()
            self._item_id = item_id
            self._timer = Timer(self.duration, self._expire, args=(item_id,))
            self._timer.daemon = True
            self._timer.start()

    def _expire(self, item_id: int):
        with self._lock:
            if self._item_id == item_id:
                self._item_id = None
                self._timer = None

    def _cancel_timer(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def current(self) -> Optional[int]:
        with self._lock:
            return self._item_id

    def cancel(self):
        with self._lock:
            self._cancel_timer()
            self._item_id = None
