import os
import logging
from pathlib import Path

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	return raw.strip()


def _get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def _get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


DEFAULT_URL = get_str_env("LINKCRAWL_URL", "https://www.example.com/")
DEFAULT_DEPTH = _get_int_env("LINKCRAWL_DEPTH", 3)
USER_AGENT = get_str_env("USER_AGENT", "linkcrawl/0.1")
HTTP_TIMEOUT = _get_float_env("HTTP_TIMEOUT", 10.0)
CHUNK_SIZE = _get_int_env("CHUNK_SIZE", 8192)


def log_level() -> str:
	return get_str_env("LINKCRAWL_LOG_LEVEL", "INFO").upper()
