"""
Normalized error codes attached to every ``ProviderError``.

HTTP failures get their code from the status (see ``classification``);
``ValidationError`` is always ``validation`` and ``ResponseDecodeError`` is
always ``decode``. Values are lowercase snake_case and appear verbatim in log
events and span attributes.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    DECODE = "decode"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
