import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import List, Optional

from depthcrawl.domain.crawl_report import CrawlReport
from depthcrawl.domain.http_response import HttpResponse
from depthcrawl.domain.work_item import WorkItem
from depthcrawl.exceptions import ConfigurationError, ExtractionError, FetchError, WorkerPoolError
from depthcrawl.services.fetcher import Fetcher
from depthcrawl.services.frontier import Frontier
from depthcrawl.services.link_extractor import LinkExtractor
from depthcrawl.services.report_builder import ReportBuilder
from depthcrawl.services.result_sink import ResultSink

logger = logging.getLogger(__name__)


def is_html(content_type: Optional[str]) -> bool:
    """True unless the response declares a non-HTML Content-Type."""
    if not content_type:
        return True
    return "html" in content_type.lower()


class CrawlCoordinator:
    """Runs a depth-bounded crawl on a fixed pool of worker threads.

    The coordinator owns the control flow (worker loop, depth cutoff, failure
    recording, termination). It does NOT construct its collaborators; the
    container or the caller injects the fetcher, extractor and sink.
    """

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        link_extractor: LinkExtractor,
        result_sink: ResultSink,
        default_worker_count: int = 1,
    ):
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.result_sink = result_sink
        self.default_worker_count = default_worker_count

    def run(
        self,
        seed_url: str,
        max_depth: int,
        worker_count: Optional[int] = None,
        stop_event: Optional[threading.Event] = None,
    ) -> CrawlReport:
        """Crawl from `seed_url`, fetching pages at most `max_depth` hops below the seed.

        The seed is fetched at depth `max_depth`; links found on a page at depth
        `d` are reported and, while `d - 1 >= 0`, admitted for fetching at
        `d - 1`. A negative `max_depth` fetches nothing.

        Setting `stop_event` cancels cooperatively: in-flight pages finish,
        nothing new is dequeued, and the partial report has `cancelled=True`.
        """
        workers = worker_count if worker_count is not None else self.default_worker_count
        self._validate(seed_url, max_depth, workers)

        if max_depth < 0:
            logger.info("Nothing to crawl for %s at depth %s", seed_url, max_depth)
            return CrawlReport.empty()

        frontier = Frontier(stop_event=stop_event)
        report = ReportBuilder()

        frontier.try_admit(seed_url, max_depth)
        frontier.enqueue(WorkItem(seed_url, max_depth))
        logger.info("Starting crawl of %s (max_depth=%s, workers=%s)", seed_url, max_depth, workers)

        self._run_workers(frontier, report, workers)

        cancelled = frontier.is_cancelled() and not frontier.is_drained()
        result = report.build(cancelled=cancelled)
        logger.info(
            "Crawl of %s %s: %s pages fetched, %s URLs found, %s failures",
            seed_url,
            "cancelled" if cancelled else "finished",
            result.pages_fetched,
            len(result.discovered),
            len(result.failures),
        )
        return result

    def _validate(self, seed_url, max_depth, worker_count) -> None:
        if not isinstance(seed_url, str) or not seed_url.strip():
            raise ConfigurationError("seed_url", f"expected a non-empty string, got {seed_url!r}")
        if not isinstance(max_depth, int) or isinstance(max_depth, bool):
            raise ConfigurationError("max_depth", f"expected an integer, got {max_depth!r}")
        if not isinstance(worker_count, int) or isinstance(worker_count, bool) or worker_count < 1:
            raise ConfigurationError("worker_count", f"expected a positive integer, got {worker_count!r}")

    def _run_workers(self, frontier: Frontier, report: ReportBuilder, worker_count: int) -> None:
        futures: List[Future] = []
        with ThreadPoolExecutor(max_workers=worker_count, thread_name_prefix="crawl-worker") as pool:
            for _ in range(worker_count):
                try:
                    futures.append(pool.submit(self._worker_loop, frontier, report))
                except RuntimeError as e:
                    frontier.cancel()
                    raise WorkerPoolError(f"could not start crawl worker: {e}") from e
        # re-raise the first unexpected worker error, if any
        for future in futures:
            future.result()

    def _worker_loop(self, frontier: Frontier, report: ReportBuilder) -> None:
        while True:
            item = frontier.dequeue()
            if item is None:
                return
            try:
                self.process_item(item, frontier, report)
            except Exception:
                logger.error("Crawl worker failed on %s", item.url, exc_info=True)
                frontier.cancel()
                raise
            finally:
                frontier.task_done()

    def process_item(self, item: WorkItem, frontier: Frontier, report: ReportBuilder) -> None:
        """Fetch one page, report its links and admit the ones still within depth."""
        logger.debug("Processing %s at depth %s", item.url, item.depth)
        response = self.fetch(item.url, report)
        if response is None:
            return
        if not is_html(response.content_type):
            logger.debug("Skipping link extraction for %s (Content-Type %s)", item.url, response.content_type)
            return

        for link_url in self.extract(response.text, item.url):
            if report.record_found(link_url):
                self.result_sink.on_found(link_url)
            next_depth = item.depth - 1
            if next_depth >= 0 and frontier.try_admit(link_url, next_depth):
                frontier.enqueue(WorkItem(link_url, next_depth))

    def fetch(self, url: str, report: ReportBuilder) -> Optional[HttpResponse]:
        """Fetch a URL, recording any failure. Returns None on failure."""
        try:
            response = self.fetcher.fetch(url)
        except FetchError as e:
            error = e
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            error = FetchError(url, original=e)
        else:
            report.record_fetched()
            logger.info("Fetched %s -> status %s", url, response.status_code)
            return response

        logger.debug("Recording fetch failure for %s", url)
        report.record_failure(url, error)
        self.result_sink.on_fetch_error(url, error)
        return None

    def extract(self, content: str, base_url: str) -> List[str]:
        try:
            return list(self.link_extractor.extract(content, base_url=base_url))
        except ExtractionError as e:
            logger.warning("No links extracted from %s: %s", base_url, e)
            return []
