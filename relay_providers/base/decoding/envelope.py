"""Generic success/error envelope handling.

Two situations are covered:

1. Failure status. The body is inspected for a provider error message. The
   order of preference is the error envelope's message, then the raw body
   text when it is not a JSON object, then ``UNKNOWN_ERROR_MESSAGE``. A
   failure status always produces :class:`HttpStatusError`; it is never
   decoded as success.
2. Success status with an untagged ``Ok | Err`` body. The success shape is
   tried first and the error envelope second, in that fixed order.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from ..constants import UNKNOWN_ERROR_MESSAGE
from ..errors import HttpStatusError, ProviderReportedError, code_for_status
from ..errors_parts.classification import RETRYABLE_CODES
from .shapes import ShapeCandidate, decode_first

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Inner error object, e.g. ``{"message": "...", "code": "..."}``."""

    model_config = ConfigDict(extra="allow")

    message: str
    code: Optional[Union[str, int]] = None
    type: Optional[str] = None


class ApiErrorResponse(BaseModel):
    """OpenAI-style error envelope ``{"error": {"message": ...}}``."""

    model_config = ConfigDict(extra="allow")

    error: ErrorDetail


def is_success(status: int) -> bool:
    return 200 <= status < 300


def extract_error_message(payload: Any) -> Optional[str]:
    """Return the human readable message from a parsed error body, if any.

    Recognised shapes, in order: ``{"error": {"message": str}}``,
    ``{"error": str}``, ``{"message": str}``, ``{"detail": str}``.
    """
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    if isinstance(error, str) and error:
        return error
    for key in ("message", "detail"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def error_message_from_body(body: Union[bytes, str], *, fallback: str = UNKNOWN_ERROR_MESSAGE) -> str:
    """Derive the message surfaced for a failed response body."""
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        payload = json.loads(text)
    except ValueError:
        return text.strip() or fallback
    if not isinstance(payload, dict):
        return text.strip() or fallback
    return extract_error_message(payload) or fallback


def http_status_error(
    status: int,
    body: Union[bytes, str],
    *,
    provider: str,
    model: Optional[str] = None,
    fallback: str = UNKNOWN_ERROR_MESSAGE,
) -> HttpStatusError:
    """Build the :class:`HttpStatusError` for a failed response."""
    code = code_for_status(status)
    return HttpStatusError(
        code=code,
        message=error_message_from_body(body, fallback=fallback),
        provider=provider,
        model=model,
        retryable=code in RETRYABLE_CODES,
        status=status,
    )


def raise_for_status(
    status: int,
    body: Union[bytes, str],
    *,
    provider: str,
    model: Optional[str] = None,
    fallback: str = UNKNOWN_ERROR_MESSAGE,
) -> None:
    """Raise :class:`HttpStatusError` when ``status`` is not 2xx."""
    if not is_success(status):
        raise http_status_error(status, body, provider=provider, model=model, fallback=fallback)


def decode_envelope(
    payload: Any,
    ok: Callable[[Any], T],
    *,
    provider: str,
    status: int,
    model: Optional[str] = None,
    what: str = "response",
) -> T:
    """Decode an untagged ``Ok | Err`` envelope.

    Parameters:
        payload: Parsed JSON body of a success-status response.
        ok: Parser for the success shape (tried first).
        provider: Provider key for errors.
        status: HTTP status recorded on a reported error.

    Raises:
        ProviderReportedError: The body matched the error envelope.
        ResponseDecodeError: The body matched neither shape.
    """
    name, value = decode_first(
        payload,
        [
            ShapeCandidate("ok", ok),
            ShapeCandidate.of("err", ApiErrorResponse),
        ],
        provider=provider,
        what=what,
    )
    if name == "err":
        raise ProviderReportedError(
            code=code_for_status(status),
            message=value.error.message,
            provider=provider,
            model=model,
            status=status,
        )
    return value


__all__ = [
    "ErrorDetail",
    "ApiErrorResponse",
    "is_success",
    "extract_error_message",
    "error_message_from_body",
    "http_status_error",
    "raise_for_status",
    "decode_envelope",
]
