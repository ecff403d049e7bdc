# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request facilitator: default headers and host, per-call overrides, JSON-or-text results."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .config import FacilitatorSettings, load_settings
from .errors import categorize_exception
from .http.body import body_length, parse_body, serialize_body
from .http.headers import copy_headers, merge_headers
from .http.models import (
    DEFAULT_HOSTNAME,
    DEFAULT_METHOD,
    HTTP_METHODS,
    ConnectionDefaults,
    RequestDescriptor,
    RequestOptions,
)
from .http.url import normalize_path

logger = logging.getLogger(__name__)


class RequestFacilitator:
    """
    Issue requests against a single logical API host.

    The instance owns a default header mapping and connection defaults
    (``protocol``, ``hostname``). Every call merges its own options over those
    defaults without mutating them, opens one connection, buffers the whole
    response and returns it parsed as JSON when possible, else as text.

    Transport and stream errors propagate unmodified from the awaited call.
    HTTP status codes are not interpreted.
    """

    def __init__(
        self,
        connection_defaults: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._connection_defaults: dict[str, Any] = dict(connection_defaults or {})
        self._headers: dict[str, str] = copy_headers(headers)
        self._transport = transport

    @classmethod
    def create(
        cls,
        connection_defaults: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> RequestFacilitator:
        return cls(connection_defaults, headers)

    @classmethod
    def from_settings(
        cls,
        settings: FacilitatorSettings | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> RequestFacilitator:
        """Build a facilitator whose connection defaults come from settings (env by default)."""
        settings = settings or load_settings()
        return cls(settings.connection_defaults(), headers, transport=transport)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def connection_defaults(self) -> ConnectionDefaults:
        return dict(self._connection_defaults)  # type: ignore[return-value]

    def set_header(self, key: str, value: str | None = None) -> None:
        """Set a default header; an empty or missing value deletes it instead."""
        if value is None or value == "":
            self.delete_header(key)
            return
        self._headers[key] = value

    def delete_header(self, key: str) -> None:
        self._headers.pop(key, None)

    def resolve(self, request_options: RequestOptions | Mapping[str, Any], data: Any = "") -> RequestDescriptor:
        """Merge call options over the instance defaults into a RequestDescriptor."""
        method = request_options.get("method")
        if method not in HTTP_METHODS:
            method = DEFAULT_METHOD

        body = serialize_body(data)
        base_headers: dict[str, str] = {} if method == "GET" else {"Content-Length": str(body_length(body))}

        return RequestDescriptor(
            protocol=request_options.get("protocol") or self._connection_defaults.get("protocol") or "http",
            hostname=request_options.get("hostname") or self._connection_defaults.get("hostname") or DEFAULT_HOSTNAME,
            port=request_options.get("port"),
            path=normalize_path(request_options["path"]),
            method=method,
            headers=merge_headers(base_headers, self._headers, request_options.get("headers")),
            body=None if method == "GET" else body,
        )

    async def send(self, descriptor: RequestDescriptor) -> Any:
        """Transmit a resolved request and return the parsed (or raw) response body."""
        url = descriptor.url
        logger.debug("%s %s", descriptor.method, url)
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=None,
                follow_redirects=False,
            ) as client:
                # no client defaults; httpx still adds Host and Content-Length
                client.headers.clear()
                async with client.stream(
                    descriptor.method,
                    url,
                    headers=descriptor.headers,
                    content=descriptor.body if descriptor.has_body else None,
                ) as resp:
                    chunks: list[str] = []
                    async for chunk in resp.aiter_text():
                        chunks.append(chunk)
                    text = "".join(chunks)
        except Exception as exc:
            logger.debug("%s %s failed (%s): %s", descriptor.method, url, categorize_exception(exc).value, exc)
            raise

        logger.debug("%s %s -> %s (%d chars)", descriptor.method, url, resp.status_code, len(text))
        return parse_body(text)

    async def request(self, request_options: RequestOptions | Mapping[str, Any], data: Any = "") -> Any:
        """
        Issue one request and return the response body.

        ``request_options`` must carry ``path``; ``protocol``, ``hostname``,
        ``port``, ``method`` and ``headers`` override the instance defaults.
        Structured ``data`` is sent as JSON; GET requests never carry a body.
        The result is the decoded JSON value if the body parses, else the text.
        """
        return await self.send(self.resolve(request_options, data))

    async def _request_with_method(
        self, method: str, request_options: RequestOptions | Mapping[str, Any], data: Any
    ) -> Any:
        return await self.request({**request_options, "method": method}, data)

    async def get(self, request_options: RequestOptions | Mapping[str, Any], data: Any = "") -> Any:
        return await self._request_with_method("GET", request_options, data)

    async def post(self, request_options: RequestOptions | Mapping[str, Any], data: Any = "") -> Any:
        return await self._request_with_method("POST", request_options, data)

    async def patch(self, request_options: RequestOptions | Mapping[str, Any], data: Any = "") -> Any:
        return await self._request_with_method("PATCH", request_options, data)

    async def put(self, request_options: RequestOptions | Mapping[str, Any], data: Any = "") -> Any:
        return await self._request_with_method("PUT", request_options, data)

    async def delete(self, request_options: RequestOptions | Mapping[str, Any], data: Any = "") -> Any:
        return await self._request_with_method("DELETE", request_options, data)

    GET = get
    POST = post
    PATCH = patch
    PUT = put
    DELETE = delete

    def __repr__(self) -> str:
        return f"{type(self).__name__}(connection_defaults={self._connection_defaults!r}, headers={sorted(self._headers)!r})"


__all__ = ["RequestFacilitator"]
