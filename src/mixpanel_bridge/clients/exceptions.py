"""Client-layer exceptions."""

from __future__ import annotations

from mixpanel_bridge.dispatch.exceptions import BridgeError


class RegistrationError(BridgeError):
    """Raised when a live client instance could not be registered."""


class ConfigurationError(BridgeError):
    """Raised when settings cannot produce a usable client."""


__all__ = ["ConfigurationError", "RegistrationError"]
