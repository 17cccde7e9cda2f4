"""Value objects exchanged between clients and the dispatch boundary."""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from typing import Any

from pydantic import Field, field_validator

from .base import DomainModel
from .types import ArgumentBag, PropertyScalar


def _check_property_value(key: str, value: Any) -> None:
    if isinstance(value, PropertyScalar):
        return
    if isinstance(value, Mapping):
        for nested_key, nested_value in value.items():
            if not isinstance(nested_key, str):
                msg = f"property {key!r} has a non-string nested key {nested_key!r}"
                raise ValueError(msg)
            _check_property_value(f"{key}.{nested_key}", nested_value)
        return
    msg = f"property {key!r} has unsupported value type {type(value).__name__}"
    raise ValueError(msg)


class ClientConfiguration(DomainModel):
    """Registration parameters for a live client."""

    project_token: str = Field(min_length=1)
    opt_out_tracking_default: bool | None = None

    def to_arguments(self) -> ArgumentBag:
        arguments: dict[str, Any] = {"token": self.project_token}
        if self.opt_out_tracking_default is not None:
            arguments["optOutTrackingDefault"] = self.opt_out_tracking_default
        return arguments


class InstanceHandle(DomainModel):
    """Opaque reference to a registered transport instance.

    Returned by registration and bound to the live client, so that every
    dispatch names the instance it targets instead of relying on whichever
    token was registered last.
    """

    token: str = Field(min_length=1)
    registration_id: int
    opt_out_tracking_default: bool | None = None


class EventRecord(DomainModel):
    """A single tracked event; built per ``track`` call and not retained."""

    event_name: str = Field(min_length=1)
    properties: dict[str, Any] | None = None

    @field_validator("properties")
    @classmethod
    def _validate_properties(cls, value: dict[str, Any] | None) -> dict[str, Any] | None:
        if value is None:
            return None
        for key, item in value.items():
            _check_property_value(key, item)
        return deepcopy(value)

    def to_arguments(self) -> ArgumentBag:
        arguments: dict[str, Any] = {"eventName": self.event_name}
        if self.properties is not None:
            arguments["properties"] = deepcopy(self.properties)
        return arguments


__all__ = ["ClientConfiguration", "EventRecord", "InstanceHandle"]
