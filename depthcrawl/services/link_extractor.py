from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

from depthcrawl.exceptions import ExtractionError

logger = logging.getLogger(__name__)

CRAWLABLE_SCHEMES = ("http", "https")


class LinkExtractor(Protocol):
    """Pull candidate URLs out of a fetched document.

    Must be pure and deterministic: same content in, same finite sequence out.
    """

    def extract(self, content: str, base_url: Optional[str] = None) -> Iterable[str]: ...


class SoupLinkExtractor:
    """Collects `<a href>` targets in document order using BeautifulSoup."""

    def __init__(self, parser: str = "html.parser"):
        self.parser = parser

    def extract(self, content: str, base_url: Optional[str] = None) -> List[str]:
        try:
            soup = BeautifulSoup(content, self.parser)
        except Exception as e:
            raise ExtractionError(f"could not parse document from {base_url}: {e}") from e

        urls = []
        for a in soup.find_all("a", href=True):
            href = a.get("href").strip()
            if not href:
                continue
            url = urldefrag(urljoin(base_url, href) if base_url else href).url
            if not url:
                continue
            # relative hrefs kept raw when there is no base to resolve them against
            scheme = urlparse(url).scheme
            if scheme and scheme.lower() not in CRAWLABLE_SCHEMES:
                continue
            urls.append(url)
        logger.debug("Extracted %d links from %s", len(urls), base_url)
        return urls
