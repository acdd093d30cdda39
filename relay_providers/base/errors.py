"""Unified provider error taxonomy public surface.

This module re-exports the implementations under
``relay_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
    HttpStatusError,
    ProviderError,
    ProviderReportedError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)
from .errors_parts.classification import RETRYABLE_CODES, classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ValidationError",
    "TransportError",
    "HttpStatusError",
    "ProviderReportedError",
    "ResponseDecodeError",
    "classify_exception",
    "code_for_status",
    "RETRYABLE_CODES",
]
