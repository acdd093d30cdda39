"""Tests for the httpx-backed transport.

Covers:
- JSON request building (headers, UTF-8 body)
- status and body are returned without interpretation
- connection failures and timeouts become TransportError
- streaming exposes status and lines
"""
from __future__ import annotations

import httpx
import pytest

from relay_providers.base.errors import ErrorCode, TransportError
from relay_providers.base.http import HttpRequest, HttpxTransport


def _transport(handler):
    return HttpxTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_post_json_builds_utf8_body_and_headers():
    req = HttpRequest.post_json(
        "http://x/embed", {"inputs": "héllo"}, headers={"Authorization": "Bearer k"}, provider="tei"
    )
    assert req.method == "POST"  # nosec B101
    assert req.headers["Content-Type"] == "application/json"  # nosec B101
    assert req.headers["Authorization"] == "Bearer k"  # nosec B101
    assert "héllo".encode("utf-8") in req.body  # nosec B101
    assert req.json() == {"inputs": "héllo"}  # nosec B101


def test_send_returns_status_and_raw_body_without_raising():
    transport = _transport(lambda request: httpx.Response(503, content=b"busy"))
    resp = transport.send(HttpRequest.post_json("http://x/embed", {}))
    assert resp.status == 503  # nosec B101
    assert resp.text() == "busy"  # nosec B101


def test_connect_error_becomes_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as ei:
        _transport(handler).send(HttpRequest.post_json("http://x/embed", {}, provider="tei", model="bge"))
    err = ei.value
    assert err.code is ErrorCode.TRANSIENT and err.retryable  # nosec B101
    assert (err.provider, err.model) == ("tei", "bge")  # nosec B101
    assert isinstance(err.raw, httpx.ConnectError)  # nosec B101


def test_timeout_becomes_timeout_code():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(TransportError) as ei:
        _transport(handler).send(HttpRequest.post_json("http://x/embed", {}))
    assert ei.value.code is ErrorCode.TIMEOUT  # nosec B101


def test_stream_yields_lines():
    body = b"data: one\n\ndata: two\n\n"
    transport = _transport(lambda request: httpx.Response(200, content=body))
    with transport.stream(HttpRequest.post_json("http://x/chat", {})) as resp:
        assert resp.status == 200  # nosec B101
        lines = [line for line in resp.iter_lines() if line]
    assert lines == ["data: one", "data: two"]  # nosec B101


def test_stream_open_failure_becomes_transport_error():
    def handler(request):
        raise httpx.ConnectError("down", request=request)

    with pytest.raises(TransportError):
        with _transport(handler).stream(HttpRequest.post_json("http://x/chat", {})):
            pass
