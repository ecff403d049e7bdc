# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header layering utilities.

Stored header names keep the caller's casing. When layers are merged, field names
are compared case-insensitively (RFC 9110): a later layer replaces any earlier
key of the same name, whatever its casing, and its own casing is kept.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers and iterables of pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        return dict(items())

    return dict(headers)


def copy_headers(headers: Any) -> dict[str, str]:
    """Return an owned ``str -> str`` copy of a header container; ``None`` values are dropped."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None or value is None:
            continue
        out[str(key)] = str(value)
    return out


def merge_headers(*layers: Any) -> dict[str, str]:
    """Overlay header layers left to right; later layers win on collisions."""
    merged: dict[str, str] = {}
    for layer in layers:
        for key, value in copy_headers(layer).items():
            lower = key.lower()
            for existing in [k for k in merged if k.lower() == lower]:
                del merged[existing]
            merged[key] = value
    return merged


__all__ = ["copy_headers", "merge_headers"]
