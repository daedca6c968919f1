"""
Configuration management for Backend Reputation.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for provider endpoints, timeouts and the
static token list.
"""

from backend_reputation.config.settings import (  # noqa: F401
    Settings,
    TokenContract,
    get_settings,
    reset_settings_cache,
)

__all__ = ["Settings", "TokenContract", "get_settings", "reset_settings_cache"]
