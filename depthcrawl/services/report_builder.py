import threading
from typing import Dict, List

from depthcrawl.domain.crawl_report import CrawlReport, FetchFailure
from depthcrawl.exceptions import FetchError


class ReportBuilder:
    """Thread-safe accumulator for what workers find during a run."""

    def __init__(self):
        self._lock = threading.Lock()
        # dict keeps first-reported order
        self._discovered: Dict[str, None] = {}
        self._failures: List[FetchFailure] = []
        self._pages_fetched = 0

    def record_found(self, url: str) -> bool:
        """Record a discovered URL. Returns True only the first time it is seen."""
        with self._lock:
            if url in self._discovered:
                return False
            self._discovered[url] = None
            return True

    def record_failure(self, url: str, error: FetchError) -> None:
        with self._lock:
            self._failures.append(FetchFailure(url=url, error=error))

    def record_fetched(self) -> None:
        with self._lock:
            self._pages_fetched += 1

    def build(self, cancelled: bool = False) -> CrawlReport:
        with self._lock:
            return CrawlReport(
                discovered=tuple(self._discovered),
                failures=tuple(self._failures),
                pages_fetched=self._pages_fetched,
                cancelled=cancelled,
            )
