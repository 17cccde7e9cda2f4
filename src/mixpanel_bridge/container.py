"""Wiring from settings to channels and clients."""

from __future__ import annotations

import logging
from dataclasses import replace

from mixpanel_bridge.clients import AnalyticsClient, ConfigurationError, get_instance
from mixpanel_bridge.config import BridgeSettings
from mixpanel_bridge.dispatch import HttpMethodChannel, MethodChannel

logger = logging.getLogger(__name__)


def build_channel(settings: BridgeSettings) -> MethodChannel:
    """Construct the HTTP channel described by ``settings``."""

    if not settings.bridge_url:
        raise ConfigurationError("MIXPANEL_BRIDGE_URL is not configured")
    return HttpMethodChannel(base_url=settings.bridge_url, timeout=settings.request_timeout)


async def create_client(
    settings: BridgeSettings | None = None,
    *,
    channel: MethodChannel | None = None,
    mocked: bool | None = None,
) -> AnalyticsClient:
    """Resolve a client from settings, building the channel when live."""

    resolved = settings or BridgeSettings.from_env()
    if mocked is not None:
        resolved = replace(resolved, mocked=mocked)
    if not resolved.token:
        raise ConfigurationError("MIXPANEL_TOKEN is not configured")

    if not resolved.mocked and channel is None:
        channel = build_channel(resolved)
    logger.debug(
        "Creating %s client for environment %s",
        "mocked" if resolved.mocked else "live",
        resolved.environment,
    )
    return await get_instance(
        resolved.token,
        opt_out_tracking_default=resolved.opt_out_tracking_default,
        mocked=resolved.mocked,
        channel=channel,
        identify_sends_distinct_id=resolved.identify_sends_distinct_id,
    )


__all__ = ["build_channel", "create_client"]
