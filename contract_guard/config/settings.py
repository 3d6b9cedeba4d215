"""
Application settings.

Typed, read-only view of the environment (see config.env) shared by the
HTTP server and the CLI. The scoring engine itself reads no configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from contract_guard.config.env import (
    get_api_host,
    get_api_port,
    get_log_format,
    get_log_level,
    get_max_source_chars,
)


@dataclass(frozen=True)
class Settings:
    api_host: str
    api_port: int
    log_level: str
    log_format: str
    max_source_chars: int


def get_settings() -> Settings:
    """
    Return the current application settings.

    Read fresh on every call so tests can monkeypatch the environment.
    Raises ValueError when a numeric variable is malformed.
    """
    return Settings(
        api_host=get_api_host(),
        api_port=get_api_port(),
        log_level=get_log_level(),
        log_format=get_log_format(),
        max_source_chars=get_max_source_chars(),
    )
