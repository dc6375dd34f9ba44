import threading
from typing import Set


class VisitedTracker:
    """
    Tracks which URLs have been admitted during a crawl.

    Safe to share between worker threads: `try_mark` checks and inserts under
    one lock, so two workers racing on the same URL cannot both win. The set
    only grows for the lifetime of a run.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def try_mark(self, url: str) -> bool:
        """Mark `url` as visited. Returns False if it was already marked."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
