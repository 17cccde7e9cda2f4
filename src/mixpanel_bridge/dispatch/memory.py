"""In-memory method channel for unit testing and local runs."""

from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any

from mixpanel_bridge.domain import ArgumentBag, InstanceHandle, Operation

from .base import ChannelCall, MethodChannel
from .exceptions import TransportError

_DEFAULT_RESULTS: Mapping[Operation, Any] = {
    Operation.GET_DEVICE_INFO: {},
    Operation.GET_DISTINCT_ID: "",
}


@dataclass
class RecordingMethodChannel(MethodChannel):
    """Records every invocation and answers with scripted results.

    ``getInstance`` answers with an increasing registration id unless a result
    is scripted for it. Operations listed in ``failures`` raise
    :class:`TransportError` instead of answering.
    """

    results: dict[Operation, Any] = field(default_factory=dict)
    failures: dict[Operation, str] = field(default_factory=dict)
    calls: list[ChannelCall] = field(default_factory=list)
    _next_registration: int = field(default=1, init=False, repr=False)

    def respond(self, operation: Operation, result: Any) -> None:
        self.results[operation] = result
        self.failures.pop(operation, None)

    def fail(self, operation: Operation, message: str = "transport unavailable") -> None:
        self.failures[operation] = message

    def calls_for(self, operation: Operation) -> list[ChannelCall]:
        return [call for call in self.calls if call.operation is operation]

    async def invoke(
        self,
        operation: Operation,
        arguments: ArgumentBag | None = None,
        *,
        handle: InstanceHandle | None = None,
    ) -> Any:
        recorded = deepcopy(dict(arguments or {}))
        self.calls.append(ChannelCall(operation=operation, arguments=recorded, handle=handle))
        if operation in self.failures:
            raise TransportError(self.failures[operation])
        if operation in self.results:
            return deepcopy(self.results[operation])
        if operation is Operation.GET_INSTANCE:
            registration_id = self._next_registration
            self._next_registration += 1
            return registration_id
        return deepcopy(_DEFAULT_RESULTS.get(operation))


__all__ = ["RecordingMethodChannel"]
