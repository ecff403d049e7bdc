# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP building blocks used by the facilitator."""

from .body import body_length, parse_body, serialize_body
from .headers import copy_headers, merge_headers
from .models import (
    DEFAULT_HOSTNAME,
    DEFAULT_METHOD,
    HTTP_METHODS,
    SUPPORTED_PROTOCOLS,
    ConnectionDefaults,
    Headers,
    RequestDescriptor,
    RequestOptions,
)
from .url import build_url, normalize_path

__all__ = [
    "DEFAULT_HOSTNAME",
    "DEFAULT_METHOD",
    "HTTP_METHODS",
    "SUPPORTED_PROTOCOLS",
    "ConnectionDefaults",
    "Headers",
    "RequestDescriptor",
    "RequestOptions",
    "body_length",
    "build_url",
    "copy_headers",
    "merge_headers",
    "normalize_path",
    "parse_body",
    "serialize_body",
]
