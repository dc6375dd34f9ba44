from __future__ import annotations

from typing import Protocol

from depthcrawl.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Fetch a URL and return its document, or raise FetchError.

    Called concurrently from every crawl worker, so implementations must be
    thread-safe. Any timeout policy belongs here, not in the crawl engine.
    """

    def fetch(self, url: str) -> HttpResponse: ...


class HttpServiceFetcher:
    def __init__(self, http_service):
        self._http_service = http_service

    def fetch(self, url: str) -> HttpResponse:
        return self._http_service.fetch(url)
