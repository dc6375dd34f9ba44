from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from depthcrawl.exceptions import ConfigurationError


@dataclass(frozen=True)
class CrawlSettings:
    """Validated settings for one crawl run: where to start, how deep, how many workers."""

    seed_url: str
    max_depth: int
    worker_count: int

    @classmethod
    def create(
        cls,
        seed_url: Optional[str],
        max_depth,
        worker_count,
    ) -> CrawlSettings:
        """Build settings from loosely typed inputs (CLI, YAML, env).

        Raises ConfigurationError before anything is fetched.
        """
        if not seed_url or not isinstance(seed_url, str):
            raise ConfigurationError("seed_url", "a seed URL is required")
        seed_url = seed_url.strip()
        parsed = urlparse(seed_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError("seed_url", f"{seed_url!r} is not an absolute http(s) URL")

        depth = _as_int("max_depth", max_depth)
        if depth < 0:
            raise ConfigurationError("max_depth", f"must be >= 0, got {depth}")

        workers = _as_int("worker_count", worker_count)
        if workers < 1:
            raise ConfigurationError("worker_count", f"must be >= 1, got {workers}")

        return cls(seed_url=seed_url, max_depth=depth, worker_count=workers)


def _as_int(field: str, value) -> int:
    # bool is an int subclass; "depth: true" in a YAML file is a mistake
    if isinstance(value, bool):
        raise ConfigurationError(field, f"expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(field, f"expected an integer, got {value!r}") from None
