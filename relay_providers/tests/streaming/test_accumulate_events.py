from __future__ import annotations

from relay_providers.base.models import TokenUsage
from relay_providers.base.streaming import ChatStreamEvent, accumulate_events


def _ev(**kw):
    kw.setdefault("provider", "tei")
    kw.setdefault("model", "m")
    kw.setdefault("delta", None)
    return ChatStreamEvent(**kw)


def test_empty_stream():
    resp = accumulate_events([])
    assert resp.text == "" and resp.parts is None  # nosec B101
    assert resp.meta.provider_name == "unknown"  # nosec B101


def test_text_and_parallel_tool_calls():
    events = [
        _ev(delta="Checking "),
        _ev(structured={"index": 1, "id": "b", "name": "lookup", "arguments": "{}"}),
        _ev(structured={"index": 0, "id": "a", "name": "search", "arguments": "{\"q\":"}),
        _ev(structured={"index": 0, "id": None, "name": None, "arguments": "\"x\"}"}),
        _ev(delta="now"),
        _ev(finish=True, finish_reason="tool_calls", usage=TokenUsage.from_totals(5, 9), response_id="r1"),
    ]
    resp = accumulate_events(events)
    assert resp.text == "Checking now"  # nosec B101
    assert [p.type for p in resp.parts] == ["text", "tool_call", "tool_call"]  # nosec B101
    assert [c.data for c in resp.tool_calls()] == [  # nosec B101
        {"id": "a", "name": "search", "arguments": "{\"q\":\"x\"}"},
        {"id": "b", "name": "lookup", "arguments": "{}"},
    ]
    assert resp.usage.output_tokens == 4  # nosec B101
    assert resp.meta.response_id == "r1"  # nosec B101
    assert resp.meta.extra == {"stream_events": 6, "finish_reason": "tool_calls"}  # nosec B101
