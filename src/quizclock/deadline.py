import logging
import queue
import threading
from typing import Optional

from .models import EventKind, QuizEvent

logger = logging.getLogger(__name__)


class Deadline:
    """One-shot countdown that posts a single DEADLINE event when it expires."""

    def __init__(self, seconds: float, events: "queue.Queue[QuizEvent]"):
        self.seconds = seconds
        self._events = events
        self._expired = threading.Event()
        self._timer: Optional[threading.Timer] = None

    @property
    def expired(self) -> bool:
        return self._expired.is_set()

    def start(self):
        if self._timer is not None:
            raise RuntimeError("deadline already started")
        self._timer = threading.Timer(self.seconds, self._fire)
        self._timer.daemon = True
        self._timer.start()
        logger.info(f"Deadline armed for {self.seconds}s")

    def cancel(self):
        if self._timer is not None:
            self._timer.cancel()

    def _fire(self):
        self._expired.set()
        # The queue is unbounded, so this never waits on a listener.
        self._events.put_nowait(QuizEvent(kind=EventKind.DEADLINE))
        logger.info("Deadline expired")
