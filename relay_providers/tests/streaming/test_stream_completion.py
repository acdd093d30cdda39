"""Streaming chat completion contract against a mocked SSE endpoint.

Covers:
- streaming flags merged over additional_params
- text deltas in order, then exactly one terminal event with usage
- tool-call fragments reassembled by accumulate_events
- failure status on open, mid-stream error frames and malformed frames
- validation errors raised before any connection
"""
from __future__ import annotations

import json

import httpx
import pytest

from relay_providers.base.errors import (
    HttpStatusError,
    ProviderReportedError,
    ResponseDecodeError,
    ValidationError,
)
from relay_providers.base.models import CompletionRequest, Message, ToolDefinition
from relay_providers.base.streaming import accumulate_events
from relay_providers.volcengine import Client


def _sse(*chunks) -> bytes:
    frames = [f"data: {json.dumps(c) if not isinstance(c, str) else c}\n\n" for c in chunks]
    return "".join(frames).encode("utf-8")


def _delta(content=None, *, tool_calls=None, finish_reason=None, cid="chunk-1"):
    delta = {}
    if content is not None:
        delta["content"] = content
    if tool_calls is not None:
        delta["tool_calls"] = tool_calls
    return {"id": cid, "model": "m", "choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}]}


USAGE_CHUNK = {"id": "chunk-1", "choices": [], "usage": {"prompt_tokens": 8, "completion_tokens": 3, "total_tokens": 11}}


def _stream_model(mock_http, body: bytes, status: int = 200):
    recorder, transport = mock_http(
        lambda r: httpx.Response(status, content=body, headers={"content-type": "text/event-stream"})
    )
    return recorder, Client("k", transport=transport).completion_model("doubao")


def test_flags_win_over_additional_params(mock_http):
    body = _sse(_delta("hi", finish_reason="stop"), USAGE_CHUNK, "[DONE]")
    recorder, model = _stream_model(mock_http, body)
    request = CompletionRequest(
        chat_history=[Message.user("hi")],
        additional_params={"stream": False, "stream_options": {"include_usage": False}, "top_p": 0.5},
    )
    list(model.stream(request))
    sent = recorder.json()
    assert sent["stream"] is True  # nosec B101
    assert sent["stream_options"] == {"include_usage": True}  # nosec B101
    assert sent["top_p"] == 0.5  # nosec B101


def test_text_deltas_then_single_terminal_event(mock_http):
    body = _sse(_delta("Hel"), _delta("lo"), _delta(finish_reason="stop"), USAGE_CHUNK, "[DONE]")
    _, model = _stream_model(mock_http, body)
    events = list(model.stream(CompletionRequest(chat_history=[Message.user("hi")])))

    assert [e.delta for e in events if e.delta] == ["Hel", "lo"]  # nosec B101
    finals = [e for e in events if e.finish]
    assert len(finals) == 1 and events[-1] is finals[0]  # nosec B101
    final = finals[0]
    assert final.delta is None and final.finish_reason == "stop"  # nosec B101
    assert (final.usage.input_tokens, final.usage.output_tokens, final.usage.total_tokens) == (8, 3, 11)  # nosec B101

    resp = accumulate_events(events)
    assert resp.text == "Hello"  # nosec B101
    assert resp.usage.total_tokens == 11  # nosec B101
    assert resp.meta.response_id == "chunk-1"  # nosec B101


def test_tool_call_fragments_accumulate(mock_http):
    body = _sse(
        _delta(tool_calls=[{"index": 0, "id": "call_9", "type": "function", "function": {"name": "get_", "arguments": ""}}]),
        _delta(tool_calls=[{"index": 0, "function": {"name": "weather", "arguments": "{\"city\":"}}]),
        _delta(tool_calls=[{"index": 0, "function": {"arguments": " \"Paris\"}"}}]),
        _delta(finish_reason="tool_calls"),
        "[DONE]",
    )
    _, model = _stream_model(mock_http, body)
    request = CompletionRequest(chat_history=[Message.user("weather")], tools=[ToolDefinition(name="get_weather")])
    resp = accumulate_events(model.stream(request))
    calls = resp.tool_calls()
    assert len(calls) == 1  # nosec B101
    assert calls[0].data == {"id": "call_9", "name": "get_weather", "arguments": "{\"city\": \"Paris\"}"}  # nosec B101
    assert json.loads(calls[0].data["arguments"]) == {"city": "Paris"}  # nosec B101
    assert resp.meta.extra["finish_reason"] == "tool_calls"  # nosec B101
    assert resp.usage is None  # nosec B101


def test_failure_status_on_open(mock_http):
    body = json.dumps({"error": {"message": "rate limited"}}).encode()
    _, model = _stream_model(mock_http, body, status=429)
    stream = model.stream(CompletionRequest(chat_history=[Message.user("hi")]))
    with pytest.raises(HttpStatusError) as ei:
        next(stream)
    assert (ei.value.status, ei.value.message) == (429, "rate limited")  # nosec B101
    assert ei.value.retryable  # nosec B101


def test_error_frame_mid_stream(mock_http):
    body = _sse(_delta("partial"), {"error": {"message": "upstream reset", "code": "InternalServiceError"}})
    _, model = _stream_model(mock_http, body)
    stream = model.stream(CompletionRequest(chat_history=[Message.user("hi")]))
    assert next(stream).delta == "partial"  # nosec B101
    with pytest.raises(ProviderReportedError, match="upstream reset"):
        next(stream)


@pytest.mark.parametrize(
    "frame, message",
    [
        ({"error": "rate limited"}, "rate limited"),
        ({"error": {"code": "InternalError"}}, "Unknown error"),
        ({"code": "Throttling", "message": "Requests rate limit exceeded", "request_id": "r-1"}, "Requests rate limit exceeded"),
    ],
)
def test_other_error_frame_shapes_raise(mock_http, relay_log_records, frame, message):
    body = _sse(_delta("partial"), frame, "[DONE]")
    _, model = _stream_model(mock_http, body)
    with pytest.raises(ProviderReportedError) as ei:
        list(model.stream(CompletionRequest(chat_history=[Message.user("hi")])))
    assert ei.value.message == message  # nosec B101
    assert not [r for r in relay_log_records if r.get("event") == "chat_streaming.end"]  # nosec B101


def test_malformed_frame(mock_http):
    _, model = _stream_model(mock_http, b"data: {not json\n\n")
    with pytest.raises(ResponseDecodeError):
        list(model.stream(CompletionRequest(chat_history=[Message.user("hi")])))


def test_validation_happens_before_connecting(mock_http):
    recorder, model = _stream_model(mock_http, _sse("[DONE]"))
    with pytest.raises(ValidationError):
        model.stream(CompletionRequest(chat_history=[Message.user("hi")], tool_choice="whenever"))
    assert recorder.calls == 0  # nosec B101


def test_stream_logs_start_and_end(mock_http, relay_log_records):
    body = _sse(_delta("a"), USAGE_CHUNK, "[DONE]")
    _, model = _stream_model(mock_http, body)
    list(model.stream(CompletionRequest(chat_history=[Message.user("hi")])))
    names = [r["event"] for r in relay_log_records if r.get("operation") == "chat_streaming"]
    assert names == ["chat_streaming.start", "chat_streaming.end"]  # nosec B101
    end = [r for r in relay_log_records if r.get("event") == "chat_streaming.end"][0]
    assert end["count"] == 1 and end["tokens"]["total_tokens"] == 11  # nosec B101
