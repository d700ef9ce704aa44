"""Debounced selection lookup for callers that fire on every selection change."""

import threading
from typing import Callable, Optional

from .models import SelectionRange, Verse, Word
from .resolver import find_word


# =============================================================================
# Configuration
# =============================================================================

DEFAULT_DEBOUNCE_SECONDS = 0.3


class SelectionDebouncer:
    """Run the resolver only once a selection has been stable for `delay` seconds.

    Each submit() cancels the pending lookup and schedules a new one. The
    callback receives (verse, selection, word) on the timer thread; word is
    None when nothing matched.
    """

    def __init__(
        self,
        callback: Callable[[Verse, SelectionRange, Optional[Word]], None],
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
    ):
        self.callback = callback
        self.delay = delay
        self.lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None

    def submit(self, verse: Verse, selection: SelectionRange):
        timer = threading.Timer(self.delay, self._fire, args=(verse, selection))
        timer.daemon = True
        with self.lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = timer
        timer.start()

    def cancel(self):
        with self.lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        with self.lock:
            return self._timer is not None

    def _fire(self, verse: Verse, selection: SelectionRange):
        with self.lock:
            if self._timer is None or self._timer is not threading.current_thread():
                return  # superseded
            self._timer = None
        self.callback(verse, selection, find_word(verse, selection))
