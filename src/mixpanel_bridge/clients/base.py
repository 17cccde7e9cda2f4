"""Analytics client capability contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mixpanel_bridge.domain import DeviceInfo, EventProperties


@runtime_checkable
class AnalyticsClient(Protocol):
    """Operations every analytics client supports, live or mocked.

    Write operations return ``None`` and never report transport failures.
    Read operations are awaitable.
    """

    def track(self, event_name: str, properties: EventProperties | None = None) -> None: ...

    def flush(self) -> None: ...

    def identify(self, distinct_id: str) -> None: ...

    def opt_in_tracking(self) -> None: ...

    def opt_out_tracking(self) -> None: ...

    def reset(self) -> None: ...

    async def get_device_info(self) -> DeviceInfo: ...

    async def get_distinct_id(self) -> str: ...

    async def drain(self) -> None: ...


__all__ = ["AnalyticsClient"]
