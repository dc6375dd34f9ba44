import requests
from typing import Callable

from depthcrawl.domain.http_response import HttpResponse
from depthcrawl.exceptions import FetchError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection.
    This enables easy testing without patching and allows swapping HTTP libraries.
    `requests.get` opens a fresh session per call, so one instance can be
    shared by every crawl worker.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        """Fetch URL and return response with status code, body text, and Content-Type.

        Raises FetchError on transport failures and non-2xx responses.
        """
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout, allow_redirects=True)
        except requests.exceptions.RequestException as e:
            raise FetchError(url, original=e) from e

        if resp.status_code < 200 or resp.status_code >= 300:
            raise FetchError(url, status_code=resp.status_code)

        # Extract Content-Type if response has headers; let real exceptions bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        return HttpResponse(resp.status_code, resp.text, ct)
