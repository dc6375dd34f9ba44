import os

import yaml

from depthcrawl.exceptions import ConfigurationError

SETTINGS_KEYS = ("seed_url", "max_depth", "workers")


def load_crawl_settings(path: str) -> dict:
    """Load crawl settings from a YAML file and return the keys it sets.

    Recognized keys:
      - seed_url: string
      - max_depth: integer
      - workers: integer

    Unknown keys are ignored. Values are validated later by `CrawlSettings.create`.
    """
    if not os.path.isfile(path):
        raise ConfigurationError("config", f"settings file {path!r} not found")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError("config", f"could not parse {path!r}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("config", f"{path!r} must contain a mapping")
    return {key: data[key] for key in SETTINGS_KEYS if data.get(key) is not None}
