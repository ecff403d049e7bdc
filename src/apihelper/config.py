# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for apihelper."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .http.models import SUPPORTED_PROTOCOLS, ConnectionDefaults


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip()


def _protocol_env(name: str, default: str) -> str:
    value = _str_env(name, default).lower()
    return value if value in SUPPORTED_PROTOCOLS else default


@dataclass
class FacilitatorSettings:
    """Instance defaults for a RequestFacilitator."""

    protocol: str = "https"
    hostname: str = ""
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> FacilitatorSettings:
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            protocol=_protocol_env("APIHELPER_PROTOCOL", cls.protocol),
            hostname=_str_env("APIHELPER_HOSTNAME", cls.hostname),
            log_level=_str_env("APIHELPER_LOG_LEVEL", cls.log_level).upper() or cls.log_level,
        )

    def connection_defaults(self) -> ConnectionDefaults:
        defaults: ConnectionDefaults = {"protocol": self.protocol}
        if self.hostname:
            defaults["hostname"] = self.hostname
        return defaults


def load_settings() -> FacilitatorSettings:
    """Load facilitator settings from environment with sensible defaults."""
    return FacilitatorSettings.from_env()


__all__ = ["FacilitatorSettings", "load_settings"]
