"""Unified timeout configuration for image providers.

This module centralizes the timeout values used by the HTTP transport so no
adapter introduces ad-hoc numeric literals. Values are parsed from the
environment on first use and cached.

Supported environment variables (all optional):
    IMAGEGEN_TIMEOUT_HTTP_SECONDS
    IMAGEGEN_TIMEOUT_CONNECT_SECONDS

Design Constraints
------------------
1. No hard-coded ad-hoc timeouts outside this module.
2. Avoid per-call env parsing (cache after first read, refresh when the
   relevant variables change so tests can adjust them at runtime).
"""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Overall timeout for a single submit or status
            request (read/write/pool phases).
        connect_timeout_seconds: Timeout for establishing the TCP/TLS
            connection.
    """

    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float with a fallback default."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - intentional, documented module cache
    cur_guard = "/".join(
        [
            os.getenv("IMAGEGEN_TIMEOUT_HTTP_SECONDS", ""),
            os.getenv("IMAGEGEN_TIMEOUT_CONNECT_SECONDS", ""),
        ]
    )
    if _CACHED is not None and _ENV_GUARD == cur_guard:
        return _CACHED

    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("IMAGEGEN_TIMEOUT_HTTP_SECONDS", 30.0),
        connect_timeout_seconds=_parse_env_float("IMAGEGEN_TIMEOUT_CONNECT_SECONDS", 10.0),
    )
    _ENV_GUARD = cur_guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
