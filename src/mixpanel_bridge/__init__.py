"""Mixpanel analytics bridge with interchangeable live and mocked clients."""

from .clients import (
    AnalyticsClient,
    ConfigurationError,
    LiveClient,
    MockedClient,
    RegistrationError,
    get_instance,
)
from .config import BridgeSettings
from .container import build_channel, create_client
from .dispatch import (
    BridgeError,
    HttpMethodChannel,
    MethodChannel,
    RecordingMethodChannel,
    TransportError,
)
from .domain import ConsentState, EventRecord, InstanceHandle, Operation

__all__ = [
    "AnalyticsClient",
    "BridgeError",
    "BridgeSettings",
    "ConfigurationError",
    "ConsentState",
    "EventRecord",
    "HttpMethodChannel",
    "InstanceHandle",
    "LiveClient",
    "MethodChannel",
    "MockedClient",
    "Operation",
    "RecordingMethodChannel",
    "RegistrationError",
    "TransportError",
    "build_channel",
    "create_client",
    "get_instance",
]
