"""Typer CLI driving an analytics client."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import typer

from mixpanel_bridge.clients import AnalyticsClient
from mixpanel_bridge.container import create_client
from mixpanel_bridge.dispatch import BridgeError

from .deps import get_settings

T = TypeVar("T")

app = typer.Typer(help="Mixpanel analytics bridge command-line interface")

_MODE_OPTION = typer.Option(None, "--mocked/--live", help="Override MIXPANEL_MOCKED")


def _parse_properties(pairs: list[str] | None) -> dict[str, Any] | None:
    if not pairs:
        return None
    properties: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"property '{pair}' must look like key=value")
        try:
            properties[key] = json.loads(raw)
        except ValueError:
            properties[key] = raw
    return properties


def _run(mocked: bool | None, action: Callable[[AnalyticsClient], Awaitable[T]]) -> T:
    async def _main() -> T:
        client = await create_client(get_settings(), mocked=mocked)
        try:
            return await action(client)
        finally:
            await client.drain()

    try:
        return asyncio.run(_main())
    except BridgeError as exc:
        typer.echo(f"Analytics bridge error: {exc}")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved bridge settings."""

    try:
        settings = get_settings()
    except BridgeError as exc:
        typer.echo(f"Analytics bridge error: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Token:\t" + ("configured" if settings.token else "(missing)"))
    typer.echo("Mode:\t" + ("mocked" if settings.mocked else "live"))
    typer.echo("Bridge URL:\t" + (settings.bridge_url or "(none)"))
    typer.echo("Opt-out default:\t" + str(settings.opt_out_tracking_default))


@app.command("track")
def track(
    event_name: str,
    prop: list[str] | None = typer.Option(None, "--prop", "-p", help="Event property key=value"),
    flush: bool = typer.Option(False, "--flush", help="Flush the queue after tracking"),
    mocked: bool | None = _MODE_OPTION,
) -> None:
    """Track a single event."""

    properties = _parse_properties(prop)

    async def _action(client: AnalyticsClient) -> None:
        client.track(event_name, properties)
        if flush:
            client.flush()

    _run(mocked, _action)
    typer.echo(f"Tracked {event_name}")


@app.command("identify")
def identify(distinct_id: str, mocked: bool | None = _MODE_OPTION) -> None:
    """Associate future events with DISTINCT_ID."""

    async def _action(client: AnalyticsClient) -> None:
        client.identify(distinct_id)

    _run(mocked, _action)
    typer.echo(f"Identified as {distinct_id}")


@app.command("distinct-id")
def distinct_id(mocked: bool | None = _MODE_OPTION) -> None:
    """Print the distinct id currently in use."""

    async def _action(client: AnalyticsClient) -> str:
        return await client.get_distinct_id()

    typer.echo(_run(mocked, _action))


@app.command("device-info")
def device_info(mocked: bool | None = _MODE_OPTION) -> None:
    """Print the device description properties as JSON."""

    async def _action(client: AnalyticsClient) -> dict[str, str]:
        return await client.get_device_info()

    typer.echo(json.dumps(_run(mocked, _action), sort_keys=True, indent=2))


@app.command("opt-in")
def opt_in(mocked: bool | None = _MODE_OPTION) -> None:
    """Opt the current user in to tracking."""

    async def _action(client: AnalyticsClient) -> None:
        client.opt_in_tracking()

    _run(mocked, _action)
    typer.echo("Opted in to tracking")


@app.command("opt-out")
def opt_out(mocked: bool | None = _MODE_OPTION) -> None:
    """Opt the current user out of tracking and drop unflushed events."""

    async def _action(client: AnalyticsClient) -> None:
        client.opt_out_tracking()

    _run(mocked, _action)
    typer.echo("Opted out of tracking")


@app.command("reset")
def reset(mocked: bool | None = _MODE_OPTION) -> None:
    """Clear the distinct id and stored super properties."""

    async def _action(client: AnalyticsClient) -> None:
        client.reset()

    _run(mocked, _action)
    typer.echo("Reset analytics identity")
