from __future__ import annotations

import logging
import sys
import threading
from typing import List, Optional, Protocol, TextIO, Tuple

from depthcrawl.exceptions import FetchError

logger = logging.getLogger(__name__)


class ResultSink(Protocol):
    """Receives crawl events from worker threads; must tolerate concurrent calls."""

    def on_found(self, url: str) -> None: ...

    def on_fetch_error(self, url: str, error: FetchError) -> None: ...


class ConsoleResultSink:
    """Prints each discovered URL as `Found URL: <url>` and logs fetch errors."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._lock = threading.Lock()

    def on_found(self, url: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        with self._lock:
            stream.write(f"Found URL: {url}\n")
            stream.flush()

    def on_fetch_error(self, url: str, error: FetchError) -> None:
        logger.warning("Fetch failed for %s: %s", url, error)


class CollectingResultSink:
    """Keeps every event in memory, in arrival order."""

    def __init__(self):
        self._lock = threading.Lock()
        self.found: List[str] = []
        self.errors: List[Tuple[str, FetchError]] = []

    def on_found(self, url: str) -> None:
        with self._lock:
            self.found.append(url)

    def on_fetch_error(self, url: str, error: FetchError) -> None:
        with self._lock:
            self.errors.append((url, error))
