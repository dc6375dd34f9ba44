import argparse
import logging
import signal
import sys
import threading
from typing import Optional, Sequence

from depthcrawl.configs import load_crawl_settings
from depthcrawl.container import Container
from depthcrawl.domain import CrawlSettings
from depthcrawl.exceptions import ConfigurationError

logger = logging.getLogger("depthcrawl")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_CANCELLED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Crawl links from a seed URL down to a bounded depth and print every URL found."
    )
    parser.add_argument("seed_url", nargs="?", help="Seed URL (e.g. https://example.com)")
    parser.add_argument("--depth", type=int, help="Max depth below the seed (default: DEFAULT_DEPTH or 1)")
    parser.add_argument("--workers", type=int, help="Concurrent fetch workers (default: DEPTHCRAWL_WORKERS or 1)")
    parser.add_argument("--config", help="YAML file with seed_url, max_depth and workers")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    return parser


def resolve_settings(args: argparse.Namespace, container: Container) -> CrawlSettings:
    """Merge CLI flags over the settings file over environment defaults."""
    file_values = load_crawl_settings(args.config) if args.config else {}
    seed_url = args.seed_url or file_values.get("seed_url")
    max_depth = args.depth if args.depth is not None else file_values.get("max_depth", container.config.DEFAULT_DEPTH())
    workers = args.workers if args.workers is not None else file_values.get("workers", container.config.DEPTHCRAWL_WORKERS())
    return CrawlSettings.create(seed_url, max_depth, workers)


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        logger.error("Unknown log level: %s", args.log_level)
        return EXIT_CONFIG_ERROR
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    container = container or Container()
    try:
        settings = resolve_settings(args, container)
    except ConfigurationError as e:
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    stop_event = threading.Event()

    def _on_sigint(signum, frame):
        logger.info("Interrupt received; finishing in-flight pages")
        stop_event.set()

    # signal handlers can only be installed from the main thread
    on_main_thread = threading.current_thread() is threading.main_thread()
    if on_main_thread:
        previous_handler = signal.signal(signal.SIGINT, _on_sigint)
    try:
        coordinator = container.crawl_coordinator()
        report = coordinator.run(
            settings.seed_url,
            settings.max_depth,
            worker_count=settings.worker_count,
            stop_event=stop_event,
        )
    finally:
        if on_main_thread:
            signal.signal(signal.SIGINT, previous_handler)

    logger.info(
        "Pages fetched: %s | URLs found: %s | Fetch failures: %s",
        report.pages_fetched,
        len(report.discovered),
        len(report.failures),
    )
    for failure in report.failures:
        logger.info("  failed: %s (%s)", failure.url, failure.error)

    if report.cancelled:
        return EXIT_CANCELLED
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
