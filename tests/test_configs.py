import pytest

from depthcrawl.configs import load_crawl_settings
from depthcrawl.exceptions import ConfigurationError


def test_load_all_keys(tmp_path):
    path = tmp_path / "crawl.yml"
    path.write_text("seed_url: https://example.com\nmax_depth: 2\nworkers: 4\nname: ignored\n")
    assert load_crawl_settings(str(path)) == {
        "seed_url": "https://example.com",
        "max_depth": 2,
        "workers": 4,
    }


def test_missing_keys_are_omitted(tmp_path):
    path = tmp_path / "crawl.yml"
    path.write_text("max_depth: 0\n")
    assert load_crawl_settings(str(path)) == {"max_depth": 0}


def test_empty_file_gives_no_settings(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_crawl_settings(str(path)) == {}


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        load_crawl_settings(str(tmp_path / "nope.yml"))


def test_malformed_yaml_raises(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("seed_url: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_crawl_settings(str(path))


def test_non_mapping_raises(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- https://example.com\n")
    with pytest.raises(ConfigurationError):
        load_crawl_settings(str(path))
