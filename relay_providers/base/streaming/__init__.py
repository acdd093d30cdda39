"""Streaming package for provider layer.

Exposes the stream event type, the accumulator and the SSE line reader.
"""

from .streaming import ChatStreamEvent, accumulate_events
from .sse import iter_sse_data

__all__ = [
    "ChatStreamEvent",
    "accumulate_events",
    "iter_sse_data",
]
