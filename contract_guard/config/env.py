"""
Environment variable loading for Contract Guard.

- API_HOST / API_PORT: bind address for the HTTP server
- LOG_LEVEL / LOG_FORMAT: structured logging level and renderer
- MAX_SOURCE_CHARS: largest contract source the adapters will accept
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

# Project root: config is contract_guard/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_MAX_SOURCE_CHARS = 2_000_000


def load_guard_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    from dotenv import load_dotenv

    load_dotenv(_ENV_PATH)


def _int_env(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_api_host() -> str:
    load_guard_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    load_guard_env()
    return _int_env("API_PORT", DEFAULT_API_PORT)


def get_log_level() -> str:
    load_guard_env()
    return (os.getenv("LOG_LEVEL") or "INFO").strip().upper()


def get_log_format() -> str:
    load_guard_env()
    return (os.getenv("LOG_FORMAT") or "json").strip().lower()


def get_max_source_chars() -> int:
    """
    Return MAX_SOURCE_CHARS from env.
    Zero or negative disables the adapter-side size check.
    """
    load_guard_env()
    return _int_env("MAX_SOURCE_CHARS", DEFAULT_MAX_SOURCE_CHARS)
