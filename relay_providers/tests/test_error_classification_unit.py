from __future__ import annotations

import types

import httpx

from relay_providers.base.errors import (
    ErrorCode,
    HttpStatusError,
    ProviderError,
    ValidationError,
    classify_exception,
    code_for_status,
)


def test_classify_provider_error_passthrough():
    e = ProviderError(code=ErrorCode.AUTH, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(ValidationError(message="bad")) is ErrorCode.VALIDATION  # nosec B101


def test_classify_http_status_mapping():
    # Direct attr
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101 - assert is appropriate in unit tests
    # response.status_code
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=503))
    assert classify_exception(e2) is ErrorCode.UNAVAILABLE  # nosec B101 - assert is appropriate in unit tests


def test_classify_httpx_transport_failures():
    req = httpx.Request("POST", "http://127.0.0.1:1/embed")
    assert classify_exception(httpx.ConnectError("refused", request=req)) is ErrorCode.TRANSIENT  # nosec B101
    assert classify_exception(httpx.ReadTimeout("slow", request=req)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101


def test_code_for_status_ranges():
    assert code_for_status(418) is ErrorCode.VALIDATION  # nosec B101
    assert code_for_status(599) is ErrorCode.SERVER_ERROR  # nosec B101
    assert code_for_status(200) is ErrorCode.UNKNOWN  # nosec B101
    assert code_for_status(429) is ErrorCode.RATE_LIMIT  # nosec B101


def test_http_status_error_defaults():
    e = HttpStatusError(status=502)
    assert e.message == "Unknown error"  # nosec B101
    assert isinstance(e, ProviderError)  # nosec B101


def test_classify_heuristics():
    assert classify_exception(Exception("rate limit exceeded")) is ErrorCode.RATE_LIMIT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("timed out waiting")) is ErrorCode.TIMEOUT  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("invalid api key")) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests
    assert classify_exception(Exception("random")) is ErrorCode.UNKNOWN  # nosec B101 - assert is appropriate in unit tests
