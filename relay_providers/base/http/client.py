"""Shared HTTP client pool for providers.

Purpose:
    Provide a centralized, thread-safe pool of reusable ``httpx.Client``
    instances to avoid per-call allocations and reduce connection overhead
    across provider adapters. Timeouts derive exclusively from
    :func:`get_timeout_config`.

External dependencies:
    - ``httpx`` for the underlying synchronous HTTP client.

Lifecycle & cleanup:
    - Clients are cached by ``purpose`` (``"request"`` or ``"stream"``), which
      selects the timeout profile. Requests always use absolute URLs, so no
      base URL is bound to a pooled client.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str = "request") -> httpx.Client:
    """Return a pooled ``httpx.Client`` for ``purpose``.

    Parameters:
        purpose: ``"stream"`` selects the streaming idle timeout; any other
            value uses the request timeout. Keep stable to maximize reuse.

    Thread-safety:
        Safe for concurrent use; per-key creation is guarded by a re-entrant lock.
    """
    client = _CLIENTS.get(purpose)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is not None:
            return client
        timeout = get_timeout_config().httpx_timeout(stream=purpose == "stream")
        client = httpx.Client(timeout=timeout)
        _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown; safe to ignore close errors
                pass
        _CLIENTS.clear()


def _cleanup_at_exit() -> None:
    """atexit hook to ensure clients are closed on interpreter exit."""
    close_all_clients()


atexit.register(_cleanup_at_exit)

__all__ = ["get_httpx_client", "close_all_clients"]
