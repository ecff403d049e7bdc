# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
apihelper package entrypoint.

A small async helper for calling one HTTP(S) API host: default headers and
connection options live on a RequestFacilitator, each call overlays its own
options, structured bodies are sent as JSON and responses come back parsed as
JSON when they can be, raw text otherwise.
"""

from .config import FacilitatorSettings, load_settings
from .errors import ErrorCategory, categorize_exception, error_category_to_reason
from .facilitator import RequestFacilitator
from .http import HTTP_METHODS, ConnectionDefaults, RequestDescriptor, RequestOptions
from .log import setup_logging
from .version import __version__

__all__ = [
    "ConnectionDefaults",
    "ErrorCategory",
    "FacilitatorSettings",
    "HTTP_METHODS",
    "RequestDescriptor",
    "RequestFacilitator",
    "RequestOptions",
    "__version__",
    "categorize_exception",
    "error_category_to_reason",
    "load_settings",
    "setup_logging",
]
