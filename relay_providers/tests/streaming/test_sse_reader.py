"""Server-sent-event reader tests.

Covers:
- one payload per event, bytes or str lines
- multi-line data joined with newlines
- comments and non-data fields skipped
- ``[DONE]`` ends the stream
"""
from __future__ import annotations

from relay_providers.base.streaming import iter_sse_data


def test_payload_per_event():
    lines = ["data: {\"a\":1}", "", b"data: {\"a\":2}", b"", ""]
    assert list(iter_sse_data(lines)) == ['{"a":1}', '{"a":2}']  # nosec B101


def test_multiline_data_joined():
    lines = ["data: first", "data: second", ""]
    assert list(iter_sse_data(lines)) == ["first\nsecond"]  # nosec B101


def test_comments_and_fields_ignored():
    lines = [": keep-alive", "event: message", "id: 7", "retry: 1000", "data:x", ""]
    assert list(iter_sse_data(lines)) == ["x"]  # nosec B101


def test_done_sentinel_stops_reading():
    lines = ["data: one", "", "data: [DONE]", "", "data: never", ""]
    assert list(iter_sse_data(lines)) == ["one"]  # nosec B101


def test_trailing_event_without_blank_line():
    assert list(iter_sse_data(["data: tail"])) == ["tail"]  # nosec B101
    assert list(iter_sse_data(["data: [DONE]"])) == []  # nosec B101
