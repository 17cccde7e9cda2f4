"""Shared CLI dependency helpers."""

from __future__ import annotations

from functools import lru_cache

from mixpanel_bridge.config import BridgeSettings


@lru_cache(maxsize=1)
def get_settings() -> BridgeSettings:
    """Return cached settings for CLI commands."""

    return BridgeSettings.from_env()


def reset_settings() -> None:
    """Clear the cached settings (useful for tests)."""

    get_settings.cache_clear()
