"""Transport collaborator contract and its ``httpx`` implementation.

Adapters never talk to ``httpx`` directly. They build an :class:`HttpRequest`
(method, absolute URL, headers, serialized JSON body) and hand it to a
:class:`Transport`, receiving either an :class:`HttpResponse` (status plus
raw bytes) or, for streaming, a :class:`StreamResponse` whose lines are read
incrementally.

Failures before a status line is available (connect, TLS, timeouts, broken
streams) are raised as :class:`TransportError` carrying the original
exception in ``raw``. Non-success statuses are *not* errors at this level;
interpreting them is the decoder's job. No retries happen here.
"""
from __future__ import annotations

import json
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, ContextManager, Dict, Iterator, Mapping, Optional, Protocol

import httpx

from ..constants import JSON_CONTENT_TYPE
from ..errors import TransportError, classify_exception
from .client import get_httpx_client


@dataclass(frozen=True)
class HttpRequest:
    """A fully built outbound request.

    ``provider`` and ``model`` only tag errors raised by the transport.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    provider: str = "unknown"
    model: Optional[str] = None

    @classmethod
    def post_json(
        cls,
        url: str,
        payload: Any,
        *,
        headers: Optional[Mapping[str, str]] = None,
        provider: str = "unknown",
        model: Optional[str] = None,
    ) -> "HttpRequest":
        """Serialize ``payload`` and build a JSON ``POST``."""
        merged: Dict[str, str] = {"Content-Type": JSON_CONTENT_TYPE}
        merged.update(headers or {})
        return cls(
            method="POST",
            url=url,
            headers=merged,
            body=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
            provider=provider,
            model=model,
        )

    def json(self) -> Any:
        """Decode the body back into Python values (diagnostics and tests)."""
        return json.loads(self.body) if self.body else None


@dataclass(frozen=True)
class HttpResponse:
    """Status code plus raw body bytes."""

    status: int
    body: bytes = b""

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class StreamResponse(Protocol):
    """An open streaming response."""

    status: int

    def iter_lines(self) -> Iterator[str]: ...

    def read(self) -> bytes: ...


class Transport(Protocol):
    """The outbound collaborator used by every adapter."""

    def send(self, request: HttpRequest) -> HttpResponse: ...

    def stream(self, request: HttpRequest) -> ContextManager[StreamResponse]: ...


def _transport_error(exc: Exception, request: HttpRequest) -> TransportError:
    code = classify_exception(exc)
    return TransportError(
        code=code,
        message=str(exc) or type(exc).__name__,
        provider=request.provider,
        model=request.model,
        raw=exc,
    )


class _HttpxStreamResponse:
    """Adapts an open ``httpx.Response`` to :class:`StreamResponse`."""

    def __init__(self, response: httpx.Response, request: HttpRequest) -> None:
        self._response = response
        self._request = request
        self.status = response.status_code

    def iter_lines(self) -> Iterator[str]:
        try:
            yield from self._response.iter_lines()
        except httpx.HTTPError as e:
            raise _transport_error(e, self._request) from e

    def read(self) -> bytes:
        try:
            return self._response.read()
        except httpx.HTTPError as e:
            raise _transport_error(e, self._request) from e


class HttpxTransport:
    """:class:`Transport` backed by ``httpx.Client``.

    Parameters:
        client: Client for request/response calls. Defaults to the pooled
            ``"request"`` client.
        stream_client: Client for streaming calls. Defaults to ``client`` when
            given, else the pooled ``"stream"`` client.
    """

    def __init__(self, client: Optional[httpx.Client] = None, stream_client: Optional[httpx.Client] = None) -> None:
        self._client = client
        self._stream_client = stream_client or client

    def _request_client(self) -> httpx.Client:
        return self._client or get_httpx_client("request")

    def _streaming_client(self) -> httpx.Client:
        return self._stream_client or get_httpx_client("stream")

    def send(self, request: HttpRequest) -> HttpResponse:
        try:
            resp = self._request_client().request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.body,
            )
        except httpx.HTTPError as e:
            raise _transport_error(e, request) from e
        return HttpResponse(status=resp.status_code, body=resp.content)

    @contextmanager
    def stream(self, request: HttpRequest) -> Iterator[StreamResponse]:
        with ExitStack() as stack:
            try:
                response = stack.enter_context(
                    self._streaming_client().stream(
                        request.method,
                        request.url,
                        headers=dict(request.headers),
                        content=request.body,
                    )
                )
            except httpx.HTTPError as e:
                raise _transport_error(e, request) from e
            yield _HttpxStreamResponse(response, request)


__all__ = [
    "HttpRequest",
    "HttpResponse",
    "StreamResponse",
    "Transport",
    "HttpxTransport",
]
