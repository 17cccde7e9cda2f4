"""HTTP-backed method channel talking to a native transport bridge."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Any

import httpx

from mixpanel_bridge.domain import ArgumentBag, InstanceHandle, Operation

from .base import MethodChannel
from .exceptions import TransportError

TOKEN_HEADER = "X-Mixpanel-Token"
INSTANCE_HEADER = "X-Mixpanel-Instance"

logger = logging.getLogger(__name__)


class HttpMethodChannel(MethodChannel):
    """Posts ``{"arguments": ...}`` to ``{base_url}/{operation}`` and unwraps ``result``."""

    def __init__(
        self,
        *,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        if not base_url:
            raise ValueError("HttpMethodChannel requires a base_url")
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self, handle: InstanceHandle | None) -> Mapping[str, str]:
        if handle is None:
            return {}
        return {
            TOKEN_HEADER: handle.token,
            INSTANCE_HEADER: str(handle.registration_id),
        }

    async def invoke(
        self,
        operation: Operation,
        arguments: ArgumentBag | None = None,
        *,
        handle: InstanceHandle | None = None,
    ) -> Any:
        url = f"{self._base_url}/{operation.value}"
        body = {"arguments": dict(arguments or {})}
        logger.debug("Dispatching %s to %s", operation.value, url)
        async with self._client_scope() as client:
            try:
                response = await client.post(url, json=body, headers=self._headers(handle))
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                msg = f"{operation.value} rejected with status {exc.response.status_code}"
                raise TransportError(msg) from exc
            except httpx.HTTPError as exc:
                msg = f"{operation.value} could not reach the transport"
                raise TransportError(msg) from exc
            except (httpx.InvalidURL, httpx.StreamError) as exc:
                msg = f"{operation.value} could not be sent: {exc}"
                raise TransportError(msg) from exc

        if not response.content:
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            msg = f"{operation.value} returned a body that is not JSON"
            raise TransportError(msg) from exc
        if not isinstance(payload, dict):
            msg = f"{operation.value} returned an unexpected payload"
            raise TransportError(msg)
        return payload.get("result")

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client


__all__ = ["INSTANCE_HEADER", "TOKEN_HEADER", "HttpMethodChannel"]
