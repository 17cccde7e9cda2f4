"""Dispatch boundary exceptions."""

from __future__ import annotations


class BridgeError(RuntimeError):
    """Base class for analytics bridge failures."""


class TransportError(BridgeError):
    """Raised when the transport is unreachable or rejects a call."""


__all__ = ["BridgeError", "TransportError"]
