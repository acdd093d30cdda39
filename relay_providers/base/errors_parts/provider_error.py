"""
Structured provider error exception types.

``ProviderError`` is the root of the taxonomy. Each subclass answers one
question a caller has to ask before deciding what to do next:

- :class:`ValidationError`: the caller's input was rejected before any request
  was built. Fix the input.
- :class:`TransportError`: the request never produced an HTTP response
  (connect, TLS, timeout). Possibly retry.
- :class:`HttpStatusError`: the provider answered with a non-success status.
  ``status`` and the provider's message are preserved.
- :class:`ProviderReportedError`: a success status whose body was the
  provider's error envelope.
- :class:`ResponseDecodeError`: the body matched no accepted shape or broke a
  structural invariant. The message carries the parse failure reason.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"tei"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class ValidationError(ProviderError):
    """Caller-supplied input violates a precondition; never reaches transport."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "invalid input"
    provider: str = "unknown"


@dataclass
class TransportError(ProviderError):
    """Connection, TLS or timeout failure raised by the HTTP transport."""

    code: ErrorCode = ErrorCode.TRANSIENT
    message: str = "transport failure"
    provider: str = "unknown"
    retryable: bool = True


@dataclass
class HttpStatusError(ProviderError):
    """Non-success HTTP status with a provider-supplied or fallback message."""

    code: ErrorCode = ErrorCode.UNKNOWN
    message: str = "Unknown error"
    provider: str = "unknown"
    status: int = 0

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} http {self.status}: {self.message}"


@dataclass
class ProviderReportedError(HttpStatusError):
    """Error envelope delivered inside a success-status response body."""


@dataclass
class ResponseDecodeError(ProviderError):
    """Response body did not match any accepted shape or failed an invariant."""

    code: ErrorCode = ErrorCode.DECODE
    message: str = "unable to decode response"
    provider: str = "unknown"
    attempts: dict = field(default_factory=dict)


__all__ = [
    "ProviderError",
    "ValidationError",
    "TransportError",
    "HttpStatusError",
    "ProviderReportedError",
    "ResponseDecodeError",
]
