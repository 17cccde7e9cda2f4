"""Bridge domain models and enums."""

from .base import DomainModel
from .enums import ConsentState, Operation
from .models import ClientConfiguration, EventRecord, InstanceHandle
from .types import ArgumentBag, DeviceInfo, EventProperties, PropertyScalar

__all__ = [
    "ArgumentBag",
    "ClientConfiguration",
    "ConsentState",
    "DeviceInfo",
    "DomainModel",
    "EventProperties",
    "EventRecord",
    "InstanceHandle",
    "Operation",
    "PropertyScalar",
]
