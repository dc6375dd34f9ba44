"""Crawl report data model."""
from typing import NamedTuple, Tuple

from depthcrawl.exceptions import FetchError


class FetchFailure(NamedTuple):
    """A URL that could not be fetched during the crawl."""
    url: str
    error: FetchError


class CrawlReport(NamedTuple):
    """Result of a crawl run.

    Lets callers distinguish a drained crawl from a cancelled one and see
    which URLs failed along the way.
    """
    discovered: Tuple[str, ...]
    """URLs found on fetched pages, in the order first reported, each once"""

    failures: Tuple[FetchFailure, ...]
    """Fetch failures recorded during the run"""

    pages_fetched: int
    """Number of pages fetched successfully"""

    cancelled: bool
    """True if the run was stopped via its stop event before draining"""

    @classmethod
    def empty(cls) -> "CrawlReport":
        return cls(discovered=(), failures=(), pages_fetched=0, cancelled=False)
