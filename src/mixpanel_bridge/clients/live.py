"""Transport-backed analytics client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from mixpanel_bridge.dispatch import MethodChannel, TransportError
from mixpanel_bridge.domain import (
    ArgumentBag,
    DeviceInfo,
    EventProperties,
    EventRecord,
    InstanceHandle,
    Operation,
)

from .base import AnalyticsClient

logger = logging.getLogger(__name__)


def _as_device_value(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value)
    msg = f"device info entry {key!r} has non-string value of type {type(value).__name__}"
    raise TypeError(msg)


class LiveClient(AnalyticsClient):
    """Delegates every operation to the transport through a method channel.

    Write operations are fire-and-forget: the dispatch is scheduled on the
    running event loop and the call returns immediately. Their transport
    failures are logged and never reach the caller; use :meth:`drain` to wait
    for them to settle. Read operations await the channel and propagate
    :class:`TransportError`.
    """

    def __init__(
        self,
        channel: MethodChannel,
        handle: InstanceHandle,
        *,
        identify_sends_distinct_id: bool = False,
    ) -> None:
        self._channel = channel
        self._handle = handle
        self._identify_sends_distinct_id = identify_sends_distinct_id
        self._pending: set[asyncio.Task[Any]] = set()

    @property
    def handle(self) -> InstanceHandle:
        return self._handle

    @property
    def pending(self) -> int:
        """Number of fire-and-forget dispatches still in flight."""

        return len(self._pending)

    def _dispatch(self, operation: Operation, arguments: ArgumentBag | None = None) -> None:
        loop = asyncio.get_running_loop()
        task = loop.create_task(
            self._channel.invoke(operation, arguments or {}, handle=self._handle),
            name=f"mixpanel-{operation.value}",
        )
        self._pending.add(task)
        task.add_done_callback(self._settle)

    def _settle(self, task: asyncio.Task[Any]) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning(
                "Dropped %s for token %s: %s",
                task.get_name(),
                self._handle.token,
                exc,
            )

    async def _call(self, operation: Operation) -> Any:
        return await self._channel.invoke(operation, {}, handle=self._handle)

    def track(self, event_name: str, properties: EventProperties | None = None) -> None:
        record = EventRecord(
            event_name=event_name,
            properties=dict(properties) if properties is not None else None,
        )
        self._dispatch(Operation.TRACK, record.to_arguments())

    def flush(self) -> None:
        self._dispatch(Operation.FLUSH)

    def identify(self, distinct_id: str) -> None:
        """Associate future ``track`` calls with ``distinct_id``.

        The native bridge this client talks to historically received no
        arguments for ``identify``, so the id never reached the transport.
        That wire format is kept by default. Pass
        ``identify_sends_distinct_id=True`` when building the client to send
        ``{"distinctId": ...}`` instead; whether the transport honours it is
        up to the transport.
        """

        if not distinct_id:
            raise ValueError("distinct_id must be a non-empty string")
        arguments = {"distinctId": distinct_id} if self._identify_sends_distinct_id else {}
        self._dispatch(Operation.IDENTIFY, arguments)

    def opt_in_tracking(self) -> None:
        self._dispatch(Operation.OPT_IN_TRACKING)

    def opt_out_tracking(self) -> None:
        self._dispatch(Operation.OPT_OUT_TRACKING)

    def reset(self) -> None:
        self._dispatch(Operation.RESET)

    async def get_device_info(self) -> DeviceInfo:
        result = await self._call(Operation.GET_DEVICE_INFO)
        if not isinstance(result, Mapping):
            msg = f"getDeviceInfo returned {type(result).__name__}, expected a mapping"
            raise TransportError(msg)
        device_info: DeviceInfo = {}
        for key, value in result.items():
            if not isinstance(key, str):
                raise TypeError(f"device info key {key!r} is not a string")
            device_info[key] = _as_device_value(key, value)
        return device_info

    async def get_distinct_id(self) -> str:
        result = await self._call(Operation.GET_DISTINCT_ID)
        if not isinstance(result, str):
            msg = f"getDistinctId returned {type(result).__name__}, expected str"
            raise TransportError(msg)
        return result

    async def drain(self) -> None:
        """Wait for in-flight fire-and-forget dispatches; failures stay logged only."""

        while self._pending:
            await asyncio.gather(*tuple(self._pending), return_exceptions=True)


__all__ = ["LiveClient"]
