from __future__ import annotations

import asyncio
import logging

import pytest
from pydantic import ValidationError

from mixpanel_bridge.clients import AnalyticsClient, LiveClient
from mixpanel_bridge.dispatch import HttpMethodChannel, RecordingMethodChannel, TransportError
from mixpanel_bridge.domain import InstanceHandle, Operation

HANDLE = InstanceHandle(token="tok", registration_id=5)


def _client(channel: RecordingMethodChannel, **kwargs: bool) -> LiveClient:
    return LiveClient(channel, HANDLE, **kwargs)


def test_live_client_satisfies_capability_protocol(channel: RecordingMethodChannel) -> None:
    assert isinstance(_client(channel), AnalyticsClient)


def test_write_operations_dispatch_in_order(channel: RecordingMethodChannel) -> None:
    client = _client(channel)

    async def _scenario() -> None:
        client.track("purchase", {"amount": 9.99})
        client.flush()
        client.opt_in_tracking()
        client.opt_out_tracking()
        client.reset()
        assert client.pending == 5
        await client.drain()

    asyncio.run(_scenario())

    assert client.pending == 0
    assert [call.operation for call in channel.calls] == [
        Operation.TRACK,
        Operation.FLUSH,
        Operation.OPT_IN_TRACKING,
        Operation.OPT_OUT_TRACKING,
        Operation.RESET,
    ]
    assert channel.calls[0].arguments == {
        "eventName": "purchase",
        "properties": {"amount": 9.99},
    }
    assert all(call.arguments == {} for call in channel.calls[1:])
    assert all(call.handle == HANDLE for call in channel.calls)


def test_track_without_properties_omits_key(channel: RecordingMethodChannel) -> None:
    client = _client(channel)

    async def _scenario() -> None:
        client.track("open")
        await client.drain()

    asyncio.run(_scenario())
    assert channel.calls[0].arguments == {"eventName": "open"}


def test_track_rejects_empty_event_name(channel: RecordingMethodChannel) -> None:
    client = _client(channel)

    async def _scenario() -> None:
        with pytest.raises(ValidationError):
            client.track("")

    asyncio.run(_scenario())
    assert channel.calls == []


def test_write_failures_are_logged_not_raised(
    channel: RecordingMethodChannel, caplog: pytest.LogCaptureFixture
) -> None:
    channel.fail(Operation.TRACK, "offline")
    client = _client(channel)

    async def _scenario() -> None:
        client.opt_out_tracking()
        client.track("after-opt-out")
        await client.drain()

    with caplog.at_level(logging.WARNING, logger="mixpanel_bridge.clients.live"):
        asyncio.run(_scenario())

    assert len(channel.calls_for(Operation.TRACK)) == 1
    assert "offline" in caplog.text


def test_identify_keeps_argumentless_wire_format_by_default(
    channel: RecordingMethodChannel,
) -> None:
    client = _client(channel)

    async def _scenario() -> None:
        client.identify("user-42")
        await client.drain()

    asyncio.run(_scenario())
    assert channel.calls_for(Operation.IDENTIFY)[0].arguments == {}


def test_identify_can_send_distinct_id(channel: RecordingMethodChannel) -> None:
    client = _client(channel, identify_sends_distinct_id=True)

    async def _scenario() -> None:
        client.identify("user-42")
        await client.drain()

    asyncio.run(_scenario())
    assert channel.calls_for(Operation.IDENTIFY)[0].arguments == {"distinctId": "user-42"}


def test_identify_requires_distinct_id(channel: RecordingMethodChannel) -> None:
    with pytest.raises(ValueError):
        _client(channel).identify("")


def test_write_operation_requires_running_loop(channel: RecordingMethodChannel) -> None:
    with pytest.raises(RuntimeError):
        _client(channel).flush()


def test_get_device_info_returns_string_mapping(channel: RecordingMethodChannel) -> None:
    channel.respond(Operation.GET_DEVICE_INFO, {"os": "android", "version": "12"})
    info = asyncio.run(_client(channel).get_device_info())
    assert info == {"os": "android", "version": "12"}
    assert channel.calls[0].arguments == {}
    assert channel.calls[0].handle == HANDLE


def test_get_device_info_coerces_scalars(channel: RecordingMethodChannel) -> None:
    channel.respond(Operation.GET_DEVICE_INFO, {"sdk": 21, "wifi": True, "dpi": 2.5})
    info = asyncio.run(_client(channel).get_device_info())
    assert info == {"sdk": "21", "wifi": "true", "dpi": "2.5"}


def test_get_device_info_rejects_non_scalar_values(channel: RecordingMethodChannel) -> None:
    channel.respond(Operation.GET_DEVICE_INFO, {"screens": ["a", "b"]})
    with pytest.raises(TypeError):
        asyncio.run(_client(channel).get_device_info())


def test_get_device_info_rejects_non_mapping_result(channel: RecordingMethodChannel) -> None:
    channel.respond(Operation.GET_DEVICE_INFO, None)
    with pytest.raises(TransportError):
        asyncio.run(_client(channel).get_device_info())


def test_get_device_info_propagates_transport_error(channel: RecordingMethodChannel) -> None:
    channel.fail(Operation.GET_DEVICE_INFO)
    with pytest.raises(TransportError):
        asyncio.run(_client(channel).get_device_info())


def test_get_distinct_id(channel: RecordingMethodChannel) -> None:
    channel.respond(Operation.GET_DISTINCT_ID, "abc-123")
    assert asyncio.run(_client(channel).get_distinct_id()) == "abc-123"


def test_get_distinct_id_failures(channel: RecordingMethodChannel) -> None:
    channel.respond(Operation.GET_DISTINCT_ID, None)
    with pytest.raises(TransportError):
        asyncio.run(_client(channel).get_distinct_id())

    channel.fail(Operation.GET_DISTINCT_ID)
    with pytest.raises(TransportError):
        asyncio.run(_client(channel).get_distinct_id())


def test_get_device_info_rejects_non_string_keys(channel: RecordingMethodChannel) -> None:
    channel.respond(Operation.GET_DEVICE_INFO, {1: "one"})
    with pytest.raises(TypeError):
        asyncio.run(_client(channel).get_device_info())


def test_reads_over_invalid_bridge_url_raise_transport_error() -> None:
    client = LiveClient(HttpMethodChannel(base_url="http://[::1"), HANDLE)
    with pytest.raises(TransportError):
        asyncio.run(client.get_distinct_id())
    with pytest.raises(TransportError):
        asyncio.run(client.get_device_info())


def test_track_sends_properties_as_of_the_call(channel: RecordingMethodChannel) -> None:
    client = _client(channel)
    properties = {"cart": {"items": 1}}

    async def _scenario() -> None:
        client.track("checkout", properties)
        properties["cart"]["items"] = 99
        await client.drain()

    asyncio.run(_scenario())
    assert channel.calls[0].arguments == {
        "eventName": "checkout",
        "properties": {"cart": {"items": 1}},
    }
