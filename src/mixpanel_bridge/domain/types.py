"""Shared type aliases for the bridge models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

PropertyScalar = str | int | float | bool
EventProperties = Mapping[str, Any]
ArgumentBag = Mapping[str, Any]
DeviceInfo = dict[str, str]

__all__ = [
    "ArgumentBag",
    "DeviceInfo",
    "EventProperties",
    "PropertyScalar",
]
