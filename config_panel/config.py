"""Configuration management for the configuration panel.

This module centralizes all configuration values including the backend
location, request defaults, and environment variable overrides.
"""

from __future__ import annotations

import os

DEFAULT_API_BASE_URL = "http://localhost:8000"
DEFAULT_REQUEST_TIMEOUT = 10.0

# Backend
API_BASE_URL = os.getenv("CONFIG_PANEL_API_URL", DEFAULT_API_BASE_URL).rstrip("/")

# Transport-level timeout in seconds, applied by the HTTP client only
_raw_timeout = os.getenv("CONFIG_PANEL_TIMEOUT")
try:
    REQUEST_TIMEOUT = float(_raw_timeout) if _raw_timeout else DEFAULT_REQUEST_TIMEOUT
except ValueError:
    REQUEST_TIMEOUT = DEFAULT_REQUEST_TIMEOUT

# Notifications close on their own after this many milliseconds
NOTIFICATION_DURATION_MS = 3000

LOG_LEVEL = os.getenv("CONFIG_PANEL_LOG_LEVEL", "INFO").upper()


def get_api_base_url() -> str:
    """Get the backend base URL, re-reading the environment."""
    return os.getenv("CONFIG_PANEL_API_URL", API_BASE_URL).rstrip("/")


def get_request_timeout() -> float:
    """Get the request timeout, falling back to the default on bad values."""
    raw = os.getenv("CONFIG_PANEL_TIMEOUT")
    if not raw:
        return REQUEST_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_REQUEST_TIMEOUT
    return value if value > 0 else DEFAULT_REQUEST_TIMEOUT
