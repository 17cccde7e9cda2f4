"""Client factory resolving mocked or live analytics clients."""

from __future__ import annotations

import logging

from mixpanel_bridge.dispatch import MethodChannel
from mixpanel_bridge.domain import ClientConfiguration, InstanceHandle, Operation

from .base import AnalyticsClient
from .exceptions import ConfigurationError, RegistrationError
from .live import LiveClient
from .mocked import MockedClient

logger = logging.getLogger(__name__)


async def register_instance(
    channel: MethodChannel,
    configuration: ClientConfiguration,
) -> InstanceHandle:
    """Register a transport instance for ``configuration`` and return its handle.

    Every call issues a fresh ``getInstance`` dispatch; prior registrations for
    the same token are not reused.
    """

    try:
        result = await channel.invoke(Operation.GET_INSTANCE, configuration.to_arguments())
    except Exception as exc:
        msg = f"Unable to register analytics instance: {exc}"
        raise RegistrationError(msg) from exc
    if isinstance(result, bool) or not isinstance(result, int):
        msg = f"getInstance returned {result!r}, expected an integer registration id"
        raise RegistrationError(msg)

    logger.info("Registered analytics instance %s", result)
    return InstanceHandle(
        token=configuration.project_token,
        registration_id=result,
        opt_out_tracking_default=configuration.opt_out_tracking_default,
    )


async def get_instance(
    token: str,
    *,
    opt_out_tracking_default: bool | None = None,
    mocked: bool = False,
    channel: MethodChannel | None = None,
    identify_sends_distinct_id: bool = False,
) -> AnalyticsClient:
    """Return an analytics client for the project identified by ``token``.

    With ``mocked=True`` an in-memory :class:`MockedClient` is returned without
    touching any channel. Otherwise the instance is registered through
    ``channel`` and a :class:`LiveClient` bound to the resulting handle is
    returned; a failed registration raises :class:`RegistrationError`.
    """

    if not token:
        raise ValueError("token must be a non-empty string")
    if mocked:
        return MockedClient(opt_out_tracking_default=opt_out_tracking_default)
    if channel is None:
        raise ConfigurationError("A method channel is required for a live client")

    configuration = ClientConfiguration(
        project_token=token,
        opt_out_tracking_default=opt_out_tracking_default,
    )
    handle = await register_instance(channel, configuration)
    return LiveClient(
        channel,
        handle,
        identify_sends_distinct_id=identify_sends_distinct_id,
    )


__all__ = ["get_instance", "register_instance"]
