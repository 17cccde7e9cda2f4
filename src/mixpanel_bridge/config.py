"""Lightweight bridge configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass

from mixpanel_bridge.clients.exceptions import ConfigurationError


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        msg = f"{name} must be a number of seconds, got {raw!r}"
        raise ConfigurationError(msg) from exc


def _env_optional_bool(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return _env_bool(name, False)


@dataclass(frozen=True)
class BridgeSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    token: str | None = None
    opt_out_tracking_default: bool | None = None
    mocked: bool = True
    bridge_url: str | None = None
    request_timeout: float = 10.0
    identify_sends_distinct_id: bool = False

    @classmethod
    def from_env(cls) -> BridgeSettings:
        return cls(
            environment=os.getenv("MIXPANEL_ENV", cls.environment),
            token=os.getenv("MIXPANEL_TOKEN") or None,
            opt_out_tracking_default=_env_optional_bool("MIXPANEL_OPT_OUT_DEFAULT"),
            mocked=_env_bool("MIXPANEL_MOCKED", cls.mocked),
            bridge_url=os.getenv("MIXPANEL_BRIDGE_URL") or None,
            request_timeout=_env_float("MIXPANEL_BRIDGE_TIMEOUT", cls.request_timeout),
            identify_sends_distinct_id=_env_bool(
                "MIXPANEL_IDENTIFY_SENDS_DISTINCT_ID", cls.identify_sends_distinct_id
            ),
        )


__all__ = ["BridgeSettings"]
