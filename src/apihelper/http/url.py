# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for resolved requests."""

from __future__ import annotations


def normalize_path(path: str) -> str:
    """Ensure the request path starts with exactly one added ``/`` when missing.

    Nothing else is touched: query strings embedded in ``path`` pass through.
    """
    raw_path = str(path)
    return raw_path if raw_path.startswith("/") else f"/{raw_path}"


def build_url(scheme: str, hostname: str, port: int | str | None, path: str) -> str:
    """
    Assemble ``scheme://host[:port]path``.

    An unset or empty port leaves the scheme default in place.
    """
    netloc = hostname
    if port is not None and str(port) != "":
        netloc = f"{hostname}:{port}"
    return f"{scheme}://{netloc}{path}"


__all__ = ["build_url", "normalize_path"]
