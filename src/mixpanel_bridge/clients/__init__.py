"""Analytics client layer public exports."""

from .base import AnalyticsClient
from .exceptions import ConfigurationError, RegistrationError
from .factory import get_instance, register_instance
from .live import LiveClient
from .mocked import MOCKED_DEVICE_INFO, MOCKED_DISTINCT_ID, OPT_IN_EVENT, MockedClient

__all__ = [
    "MOCKED_DEVICE_INFO",
    "MOCKED_DISTINCT_ID",
    "OPT_IN_EVENT",
    "AnalyticsClient",
    "ConfigurationError",
    "LiveClient",
    "MockedClient",
    "RegistrationError",
    "get_instance",
    "register_instance",
]
