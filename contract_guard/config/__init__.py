"""
Configuration management for Contract Guard.

Loads settings from environment variables and an optional project-root
.env file. Exposes a single source of truth for adapter configuration.
"""

from contract_guard.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
