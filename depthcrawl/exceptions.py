"""Custom exceptions for DepthCrawl."""
from typing import Optional


class FetchError(Exception):
    """Raised when fetching a single URL fails (transport error or non-success status)."""

    def __init__(self, url: str, original: Optional[Exception] = None, status_code: Optional[int] = None):
        self.url = url
        self.original = original
        self.status_code = status_code
        if status_code is not None:
            detail = f"status {status_code}"
        else:
            detail = str(original) if original is not None else "unknown error"
        super().__init__(f"Fetch failed for {url}: {detail}")


class ExtractionError(Exception):
    """Raised by a link extractor when content cannot be parsed for links."""


class ConfigurationError(ValueError):
    """Raised when crawl settings are invalid; the run never starts."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class WorkerPoolError(RuntimeError):
    """Raised when the crawl cannot start its worker threads."""
