"""HTTP utilities package for providers.

Exposes pooled httpx clients and the transport contract adapters use.
"""

from .client import get_httpx_client, close_all_clients
from .transport import HttpRequest, HttpResponse, HttpxTransport, StreamResponse, Transport

__all__ = [
    "get_httpx_client",
    "close_all_clients",
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "StreamResponse",
    "Transport",
]
