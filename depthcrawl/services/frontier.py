from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Deque, Optional

from depthcrawl.domain.visited_tracker import VisitedTracker
from depthcrawl.domain.work_item import WorkItem

logger = logging.getLogger(__name__)


class Frontier:
    """Shared crawl state: which URLs were admitted and which items are still pending.

    Workers pull items with `dequeue()` and must call `task_done()` once per
    item they received. When the queue is empty and no item is in flight the
    crawl is quiescent and every blocked `dequeue()` returns None.
    """

    def __init__(
        self,
        visited_tracker: Optional[VisitedTracker] = None,
        stop_event: Optional[threading.Event] = None,
        poll_interval: float = 0.1,
    ):
        self.visited_tracker = visited_tracker if visited_tracker is not None else VisitedTracker()
        # caller-owned; only read here
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self._cancelled = False
        self._poll_interval = poll_interval
        self._cond = threading.Condition()
        self._pending: Deque[WorkItem] = deque()
        self._in_flight = 0

    def try_admit(self, url: str, depth: int) -> bool:
        """Atomically claim `url` for a visit. Returns False if it was already admitted."""
        if depth < 0:
            raise ValueError(f"cannot admit {url} at negative depth {depth}")
        admitted = self.visited_tracker.try_mark(url)
        if not admitted:
            logger.debug("Skipping (visited) %s", url)
        return admitted

    def enqueue(self, item: WorkItem) -> None:
        with self._cond:
            self._pending.append(item)
            self._cond.notify()

    def dequeue(self) -> Optional[WorkItem]:
        """Block until an item is available; None at quiescence or after cancellation."""
        with self._cond:
            while True:
                if self.is_cancelled():
                    return None
                if self._pending:
                    self._in_flight += 1
                    return self._pending.popleft()
                if self._in_flight == 0:
                    self._cond.notify_all()
                    return None
                # the stop event can be set without notifying us
                self._cond.wait(self._poll_interval)

    def task_done(self) -> None:
        with self._cond:
            if self._in_flight <= 0:
                raise ValueError("task_done() called more times than items were dequeued")
            self._in_flight -= 1
            if self._in_flight == 0 and not self._pending:
                self._cond.notify_all()

    def cancel(self) -> None:
        """Stop handing out work and wake every waiting worker."""
        with self._cond:
            self._cancelled = True
            self._cond.notify_all()

    def is_cancelled(self) -> bool:
        return self._cancelled or self.stop_event.is_set()

    def is_drained(self) -> bool:
        with self._cond:
            return not self._pending and self._in_flight == 0

    def pending_count(self) -> int:
        with self._cond:
            return len(self._pending)

    def in_flight_count(self) -> int:
        with self._cond:
            return self._in_flight

    def visited_count(self) -> int:
        return len(self.visited_tracker)
