"""In-memory analytics client used for tests and local development."""

from __future__ import annotations

from dataclasses import dataclass, field

from mixpanel_bridge.dispatch import ChannelCall
from mixpanel_bridge.domain import (
    ArgumentBag,
    ConsentState,
    DeviceInfo,
    EventProperties,
    EventRecord,
    Operation,
)

from .base import AnalyticsClient

MOCKED_DISTINCT_ID = "mocked-distinct-id"
MOCKED_DEVICE_INFO: DeviceInfo = {
    "$os": "mocked",
    "$os_version": "0",
    "$app_version_string": "0.0.0",
    "$manufacturer": "mocked",
    "$model": "mocked",
}
OPT_IN_EVENT = "$opt_in"


@dataclass
class MockedClient(AnalyticsClient):
    """Applies every operation to local state; never touches a transport.

    ``events`` holds everything tracked while opted in, ``queued`` the part not
    yet flushed and ``flushed`` what ``flush`` drained. ``calls`` records each
    operation with its logical arguments.
    """

    opt_out_tracking_default: bool | None = None
    consent: ConsentState = field(default=ConsentState.OPTED_IN, init=False)
    distinct_id: str | None = field(default=None, init=False)
    events: list[EventRecord] = field(default_factory=list, init=False)
    queued: list[EventRecord] = field(default_factory=list, init=False)
    flushed: list[EventRecord] = field(default_factory=list, init=False)
    calls: list[ChannelCall] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if self.opt_out_tracking_default is True:
            self.consent = ConsentState.OPTED_OUT

    @property
    def opted_out(self) -> bool:
        return self.consent is ConsentState.OPTED_OUT

    def _record(self, operation: Operation, arguments: ArgumentBag | None = None) -> None:
        self.calls.append(ChannelCall(operation=operation, arguments=dict(arguments or {})))

    def _enqueue(self, record: EventRecord) -> None:
        self.events.append(record)
        self.queued.append(record)

    def track(self, event_name: str, properties: EventProperties | None = None) -> None:
        record = EventRecord(
            event_name=event_name,
            properties=dict(properties) if properties is not None else None,
        )
        self._record(Operation.TRACK, record.to_arguments())
        if self.opted_out:
            return
        self._enqueue(record)

    def flush(self) -> None:
        self._record(Operation.FLUSH)
        self.flushed.extend(self.queued)
        self.queued.clear()

    def identify(self, distinct_id: str) -> None:
        if not distinct_id:
            raise ValueError("distinct_id must be a non-empty string")
        self._record(Operation.IDENTIFY, {"distinctId": distinct_id})
        self.distinct_id = distinct_id

    def opt_in_tracking(self) -> None:
        self._record(Operation.OPT_IN_TRACKING)
        self.consent = ConsentState.OPTED_IN
        self._enqueue(EventRecord(event_name=OPT_IN_EVENT))

    def opt_out_tracking(self) -> None:
        self._record(Operation.OPT_OUT_TRACKING)
        self.consent = ConsentState.OPTED_OUT
        self.queued.clear()
        self.distinct_id = None

    def reset(self) -> None:
        self._record(Operation.RESET)
        self.distinct_id = None

    async def get_device_info(self) -> DeviceInfo:
        self._record(Operation.GET_DEVICE_INFO)
        return dict(MOCKED_DEVICE_INFO)

    async def get_distinct_id(self) -> str:
        self._record(Operation.GET_DISTINCT_ID)
        return self.distinct_id or MOCKED_DISTINCT_ID

    async def drain(self) -> None:
        return None


__all__ = ["MOCKED_DEVICE_INFO", "MOCKED_DISTINCT_ID", "OPT_IN_EVENT", "MockedClient"]
