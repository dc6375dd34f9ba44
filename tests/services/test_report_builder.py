from depthcrawl.exceptions import FetchError
from depthcrawl.services.report_builder import ReportBuilder


def test_record_found_is_first_time_only():
    builder = ReportBuilder()
    assert builder.record_found("http://a")
    assert not builder.record_found("http://a")
    assert builder.record_found("http://b")
    assert builder.build().discovered == ("http://a", "http://b")


def test_build_collects_failures_and_counts():
    builder = ReportBuilder()
    error = FetchError("http://x", status_code=502)
    builder.record_fetched()
    builder.record_fetched()
    builder.record_failure("http://x", error)

    report = builder.build(cancelled=True)

    assert report.pages_fetched == 2
    assert report.failures[0].url == "http://x"
    assert report.failures[0].error is error
    assert report.cancelled


def test_empty_builder_matches_empty_report():
    from depthcrawl.domain.crawl_report import CrawlReport
    assert ReportBuilder().build() == CrawlReport.empty()
