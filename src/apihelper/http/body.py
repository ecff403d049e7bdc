# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request body serialization and best-effort response parsing."""

from __future__ import annotations

import json
from typing import Any


def serialize_body(data: Any) -> str | bytes:
    """
    Serialize a request body.

    Strings and bytes are sent verbatim; ``None`` means no body was supplied.
    Anything else is encoded as compact JSON.
    """
    if data is None:
        return ""
    if isinstance(data, (str, bytes)):
        return data
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def body_length(body: str | bytes) -> int:
    """Byte length of a serialized body as transmitted (UTF-8)."""
    if isinstance(body, bytes):
        return len(body)
    return len(body.encode("utf-8"))


def _reject_constant(value: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {value}")


def parse_body(text: str) -> Any:
    """
    Best-effort JSON parse with raw string fallback.

    A body that is not valid JSON, or nests deeper than the decoder can
    recurse, is returned unchanged. The caller therefore
    cannot tell ``"abc"`` the raw text from ``"\\"abc\\""`` decoded JSON by type.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return text


__all__ = ["body_length", "parse_body", "serialize_body"]
