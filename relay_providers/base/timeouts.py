"""Timeout configuration for the HTTP transport.

Centralizes the timeout values used when the shared ``httpx.Client`` pool
creates clients. Values are read from the environment once and cached so
request paths never parse configuration.

Supported environment variables (all optional, seconds):
    RELAY_HTTP_TIMEOUT_SECONDS     single request/response calls
    RELAY_CONNECT_TIMEOUT_SECONDS  connection establishment
    RELAY_STREAM_TIMEOUT_SECONDS   idle read timeout between stream frames

Invalid or non-positive values fall back to the defaults.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for non-streaming calls.
        connect_timeout_seconds: Connection establishment timeout.
        stream_timeout_seconds: Idle timeout while waiting for the next frame.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0
    stream_timeout_seconds: float = 120.0

    def httpx_timeout(self, *, stream: bool = False) -> httpx.Timeout:
        """Return the ``httpx.Timeout`` for a request or a stream."""
        read = self.stream_timeout_seconds if stream else self.http_timeout_seconds
        return httpx.Timeout(read, connect=self.connect_timeout_seconds)


_CACHED: Optional[TimeoutConfig] = None


def _env_seconds(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def get_timeout_config(*, refresh: bool = False) -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`.

    Parameters:
        refresh: Re-read the environment (used by tests).
    """
    global _CACHED
    if _CACHED is None or refresh:
        defaults = TimeoutConfig()
        _CACHED = TimeoutConfig(
            http_timeout_seconds=_env_seconds("RELAY_HTTP_TIMEOUT_SECONDS", defaults.http_timeout_seconds),
            connect_timeout_seconds=_env_seconds("RELAY_CONNECT_TIMEOUT_SECONDS", defaults.connect_timeout_seconds),
            stream_timeout_seconds=_env_seconds("RELAY_STREAM_TIMEOUT_SECONDS", defaults.stream_timeout_seconds),
        )
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
