"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from depthcrawl import config as env
from depthcrawl.services.crawl_coordinator import CrawlCoordinator
from depthcrawl.services.fetcher import HttpServiceFetcher
from depthcrawl.services.http_service import HttpService
from depthcrawl.services.link_extractor import SoupLinkExtractor
from depthcrawl.services.result_sink import ConsoleResultSink


# Environment variables used by the container (read once in `depthcrawl.config`).
#
# USER_AGENT (str, default: "DepthCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for each outbound HTTP request. The crawl engine itself never times out a fetch.
#
# DEFAULT_DEPTH (int, default: 1)
#   Max depth used when neither the CLI nor a settings file gives one.
#
# DEPTHCRAWL_WORKERS (int, default: 1)
#   Worker threads per crawl. 1 crawls strictly sequentially.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
    "DEFAULT_DEPTH": env.DEFAULT_DEPTH,
    "DEPTHCRAWL_WORKERS": env.DEFAULT_WORKERS,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for DepthCrawl."""

    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    page_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    link_extractor = providers.Singleton(
        SoupLinkExtractor,
    )

    result_sink = providers.Singleton(
        ConsoleResultSink,
    )

    crawl_coordinator = providers.Factory(
        CrawlCoordinator,
        fetcher=page_fetcher,
        link_extractor=link_extractor,
        result_sink=result_sink,
        default_worker_count=config.DEPTHCRAWL_WORKERS.as_(int),
    )
