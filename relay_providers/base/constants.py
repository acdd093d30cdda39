"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings and default numbers.

# pragma: allowlist secret
"""
from __future__ import annotations

# Message surfaced when a failed response carries no usable error text
UNKNOWN_ERROR_MESSAGE = "Unknown error"

# Maximum documents accepted in a single embedding call (provider-declared)
MAX_EMBEDDING_DOCUMENTS = 1024

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

JSON_CONTENT_TYPE = "application/json"

# Overlay applied last to OpenAI-compatible chat requests when streaming
STREAMING_FLAGS = {"stream": True, "stream_options": {"include_usage": True}}

# Server-sent events framing
SSE_DATA_PREFIX = "data:"
SSE_DONE_SENTINEL = "[DONE]"

__all__ = [
    "UNKNOWN_ERROR_MESSAGE",
    "MAX_EMBEDDING_DOCUMENTS",
    "MISSING_API_KEY_ERROR",
    "JSON_CONTENT_TYPE",
    "STREAMING_FLAGS",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
]
