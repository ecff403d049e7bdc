# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for apihelper."""

from __future__ import annotations

import logging

from .config import load_settings


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for scripts embedding the facilitator."""
    effective_level = (level or load_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["setup_logging"]
