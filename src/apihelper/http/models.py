# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request data models used by the facilitator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypedDict, Union

from .url import build_url

Headers = dict[str, str]

HTTP_METHODS = ("GET", "POST", "PATCH", "PUT", "DELETE")
DEFAULT_METHOD = "GET"
SUPPORTED_PROTOCOLS = ("http", "https")
DEFAULT_HOSTNAME = "localhost"


class ConnectionDefaults(TypedDict, total=False):
    protocol: str
    hostname: str


class RequestOptions(TypedDict, total=False):
    """Per-call options; only ``path`` is required in practice."""

    protocol: str
    hostname: str
    port: Union[int, str]
    path: str
    method: str
    headers: Mapping[str, str]


@dataclass
class RequestDescriptor:
    """A fully resolved request, built fresh for every call."""

    protocol: str
    hostname: str
    path: str
    method: str = DEFAULT_METHOD
    port: int | str | None = None
    headers: Headers = field(default_factory=dict)
    body: str | bytes | None = None

    @property
    def scheme(self) -> str:
        return "https" if self.protocol == "https" else "http"

    @property
    def has_body(self) -> bool:
        return self.body is not None

    @property
    def url(self) -> str:
        return build_url(self.scheme, self.hostname, self.port, self.path)


__all__ = [
    "DEFAULT_HOSTNAME",
    "DEFAULT_METHOD",
    "HTTP_METHODS",
    "SUPPORTED_PROTOCOLS",
    "ConnectionDefaults",
    "Headers",
    "RequestDescriptor",
    "RequestOptions",
]
