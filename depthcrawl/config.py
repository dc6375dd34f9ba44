import os
import logging
from pathlib import Path

from dotenv import load_dotenv

loaded = load_dotenv()
if not loaded and Path(".env").exists():
	raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except ValueError:
		logging.exception("Invalid %s: %r", name, raw)
		return default


USER_AGENT = get_str_env("USER_AGENT", "DepthCrawl/0.1")
HTTP_TIMEOUT = get_int_env("HTTP_TIMEOUT", 10)
DEFAULT_DEPTH = get_int_env("DEFAULT_DEPTH", 1)
DEFAULT_WORKERS = get_int_env("DEPTHCRAWL_WORKERS", 1)
