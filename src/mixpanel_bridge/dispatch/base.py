"""Method dispatch boundary contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from mixpanel_bridge.domain import ArgumentBag, InstanceHandle, Operation


@runtime_checkable
class MethodChannel(Protocol):
    """Invokes named operations on the transport collaborator.

    Implementations perform no retries: a failure surfaces as
    :class:`~mixpanel_bridge.dispatch.exceptions.TransportError`.
    """

    async def invoke(
        self,
        operation: Operation,
        arguments: ArgumentBag | None = None,
        *,
        handle: InstanceHandle | None = None,
    ) -> Any: ...


@dataclass(slots=True, frozen=True)
class ChannelCall:
    """One invocation as seen by a recording channel or mocked client."""

    operation: Operation
    arguments: ArgumentBag = field(default_factory=dict)
    handle: InstanceHandle | None = None


__all__ = ["ChannelCall", "MethodChannel"]
