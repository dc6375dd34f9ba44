import pytest

from depthcrawl.domain.crawl_settings import CrawlSettings
from depthcrawl.exceptions import ConfigurationError


def test_create_accepts_valid_settings():
    settings = CrawlSettings.create("https://example.com", 2, 4)
    assert settings == CrawlSettings(seed_url="https://example.com", max_depth=2, worker_count=4)


def test_create_coerces_numeric_strings():
    settings = CrawlSettings.create(" https://example.com/start ", "1", "3")
    assert settings.seed_url == "https://example.com/start"
    assert settings.max_depth == 1
    assert settings.worker_count == 3


def test_zero_depth_is_allowed():
    assert CrawlSettings.create("http://example.com", 0, 1).max_depth == 0


@pytest.mark.parametrize("seed", [None, "", "example.com", "ftp://example.com", "http://"])
def test_invalid_seed_rejected(seed):
    with pytest.raises(ConfigurationError) as exc:
        CrawlSettings.create(seed, 1, 1)
    assert exc.value.field == "seed_url"


def test_negative_depth_rejected():
    with pytest.raises(ConfigurationError) as exc:
        CrawlSettings.create("https://example.com", -1, 1)
    assert exc.value.field == "max_depth"


@pytest.mark.parametrize("workers", [0, -3, "many", None, True])
def test_invalid_worker_count_rejected(workers):
    with pytest.raises(ConfigurationError) as exc:
        CrawlSettings.create("https://example.com", 1, workers)
    assert exc.value.field == "worker_count"


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        CrawlSettings.create("https://example.com", "deep", 1)
