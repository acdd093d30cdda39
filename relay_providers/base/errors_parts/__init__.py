"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `relay_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    HttpStatusError,
    ProviderError,
    ProviderReportedError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)
from .classification import RETRYABLE_CODES, classify_exception, code_for_status

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
