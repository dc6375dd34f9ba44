"""Domain objects for DepthCrawl - explicit re-exports to satisfy linters."""
from .work_item import WorkItem as WorkItem
from .crawl_report import CrawlReport as CrawlReport
from .crawl_report import FetchFailure as FetchFailure
from .crawl_settings import CrawlSettings as CrawlSettings
from .http_response import HttpResponse as HttpResponse
from .visited_tracker import VisitedTracker as VisitedTracker

__all__ = ["WorkItem", "CrawlReport", "FetchFailure", "CrawlSettings", "HttpResponse", "VisitedTracker"]
