"""Method dispatch boundary public exports."""

from .base import ChannelCall, MethodChannel
from .exceptions import BridgeError, TransportError
from .http import HttpMethodChannel
from .memory import RecordingMethodChannel

__all__ = [
    "BridgeError",
    "ChannelCall",
    "HttpMethodChannel",
    "MethodChannel",
    "RecordingMethodChannel",
    "TransportError",
]
