"""Span attributes emitted around adapter calls.

Covers:
- gen_ai attributes (operation, provider, model, system instructions)
- usage and response id recorded on success
- error status and ``error.type`` on failure
"""
from __future__ import annotations

import httpx
import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from relay_providers.base import tracing
from relay_providers.base.errors import HttpStatusError
from relay_providers.base.models import CompletionRequest, Message
from relay_providers.volcengine import Client


@pytest.fixture()
def spans(monkeypatch):
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(tracing, "get_tracer", lambda service_name=tracing.TRACER_NAME: provider.get_tracer(service_name))
    yield exporter
    provider.shutdown()


def _model(mock_http, status, payload):
    _, transport = mock_http(lambda r: httpx.Response(status, json=payload))
    return Client("k", transport=transport).completion_model("doubao")


def test_chat_span_attributes(mock_http, spans):
    payload = {
        "id": "resp-7",
        "model": "doubao-250615",
        "choices": [{"message": {"content": "ok"}}],
        "usage": {"prompt_tokens": 3, "total_tokens": 5},
    }
    _model(mock_http, 200, payload).completion(
        CompletionRequest(chat_history=[Message.user("hi")], preamble="Be brief.")
    )
    (span,) = spans.get_finished_spans()
    attrs = dict(span.attributes)
    assert span.name == "chat doubao"  # nosec B101
    assert attrs["gen_ai.operation.name"] == "chat"  # nosec B101
    assert attrs["gen_ai.provider.name"] == "volcengine"  # nosec B101
    assert attrs["gen_ai.request.model"] == "doubao"  # nosec B101
    assert attrs["gen_ai.system_instructions"] == "Be brief."  # nosec B101
    assert (attrs["gen_ai.usage.input_tokens"], attrs["gen_ai.usage.output_tokens"]) == (3, 2)  # nosec B101
    assert attrs["gen_ai.response.id"] == "resp-7"  # nosec B101
    assert attrs["gen_ai.response.model"] == "doubao-250615"  # nosec B101


def test_failed_call_marks_span_error(mock_http, spans):
    with pytest.raises(HttpStatusError):
        _model(mock_http, 503, {"error": {"message": "busy"}}).completion(
            CompletionRequest(chat_history=[Message.user("hi")])
        )
    (span,) = spans.get_finished_spans()
    assert span.status.status_code is StatusCode.ERROR  # nosec B101
    assert span.attributes["error.type"] == "unavailable"  # nosec B101
