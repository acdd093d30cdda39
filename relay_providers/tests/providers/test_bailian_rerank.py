"""Bailian (DashScope) rerank against a mocked text-rerank service.

Covers:
- nested request body and the verbatim absolute endpoint
- results keep provider order and input indices; top_n truncation
- invalid input never reaches the transport
- failure messages and the Bailian-specific fallback text
- usage and request id surfaced in logs
"""
from __future__ import annotations

import httpx
import pytest

from relay_providers.bailian import GTE_RERANK_V2, GTE_RERANK_V2_URL, Client
from relay_providers.base.errors import ErrorCode, HttpStatusError, ResponseDecodeError, ValidationError

DOCS = ["Paris is in France", "Bananas are yellow", "The Eiffel Tower is in Paris"]

RESPONSE = {
    "output": {
        "results": [
            {"index": 2, "relevance_score": 0.93, "document": {"text": DOCS[2]}},
            {"index": 0, "relevance_score": 0.71, "document": {"text": DOCS[0]}},
            {"index": 1, "relevance_score": 0.02, "document": {"text": DOCS[1]}},
        ]
    },
    "usage": {"total_tokens": 42},
    "request_id": "b7c1-req",
}


def _client(mock_http, responder, **kwargs):
    recorder, transport = mock_http(responder)
    return recorder, Client("dash-key", transport=transport, **kwargs)


def test_request_body_and_endpoint(mock_http):
    recorder, client = _client(mock_http, lambda r: httpx.Response(200, json=RESPONSE))
    client.rerank_model().rerank("Where is the Eiffel Tower?", DOCS, top_n=2)

    req = recorder.requests[0]
    assert str(req.url) == GTE_RERANK_V2_URL  # nosec B101
    assert req.headers["authorization"] == "Bearer dash-key"  # nosec B101
    assert recorder.json() == {  # nosec B101
        "model": GTE_RERANK_V2,
        "input": {"query": "Where is the Eiffel Tower?", "documents": DOCS},
        "parameters": {"return_documents": True, "top_n": 2},
    }


def test_top_n_omitted_when_unset(mock_http):
    recorder, client = _client(mock_http, lambda r: httpx.Response(200, json=RESPONSE))
    client.rerank_model().rerank("q", DOCS, return_documents=False)
    assert recorder.json()["parameters"] == {"return_documents": False}  # nosec B101


def test_results_order_and_truncation(mock_http):
    _, client = _client(mock_http, lambda r: httpx.Response(200, json=RESPONSE))
    model = client.rerank_model()

    full = model.rerank("q", DOCS)
    assert [r.index for r in full] == [2, 0, 1]  # nosec B101
    assert full[0].text == DOCS[2] and full[0].relevance_score == 0.93  # nosec B101

    top = model.rerank("q", DOCS, top_n=1)
    assert [r.index for r in top] == [2]  # nosec B101
    assert model.rerank("q", DOCS, top_n=0) == []  # nosec B101


def test_custom_endpoint_used_verbatim(mock_http):
    url = "https://dashscope-intl.example.com/api/v1/services/rerank/text-rerank/text-rerank"
    recorder, client = _client(mock_http, lambda r: httpx.Response(200, json=RESPONSE), rerank_url=url)
    client.rerank_model("gte-rerank").rerank("q", DOCS)
    assert str(recorder.requests[0].url) == url  # nosec B101
    assert recorder.json()["model"] == "gte-rerank"  # nosec B101


@pytest.mark.parametrize(
    "query,documents,top_n",
    [("", DOCS, None), ("   ", DOCS, None), ("q", [], None), ("q", DOCS, -1)],
)
def test_invalid_input_sends_nothing(mock_http, query, documents, top_n):
    recorder, client = _client(mock_http, lambda r: httpx.Response(200, json=RESPONSE))
    with pytest.raises(ValidationError):
        client.rerank_model().rerank(query, documents, top_n=top_n)
    assert recorder.calls == 0  # nosec B101


def test_failure_message_from_body(mock_http):
    body = {"code": "InvalidApiKey", "message": "Invalid API-key provided.", "request_id": "x"}
    _, client = _client(mock_http, lambda r: httpx.Response(401, json=body))
    with pytest.raises(HttpStatusError) as ei:
        client.rerank_model().rerank("q", DOCS)
    assert (ei.value.status, ei.value.code) == (401, ErrorCode.AUTH)  # nosec B101
    assert ei.value.message == "Invalid API-key provided."  # nosec B101


def test_failure_without_message_uses_fallback(mock_http):
    _, client = _client(mock_http, lambda r: httpx.Response(500, content=b""))
    with pytest.raises(HttpStatusError) as ei:
        client.rerank_model().rerank("q", DOCS)
    assert ei.value.message == "Unknown HTTP error"  # nosec B101


def test_index_out_of_range(mock_http):
    bad = {"output": {"results": [{"index": 7, "relevance_score": 0.5}]}}
    _, client = _client(mock_http, lambda r: httpx.Response(200, json=bad))
    with pytest.raises(ResponseDecodeError):
        client.rerank_model().rerank("q", DOCS)


def test_usage_and_request_id_logged(mock_http, relay_log_records):
    _, client = _client(mock_http, lambda r: httpx.Response(200, json=RESPONSE))
    client.rerank_model().rerank("q", DOCS, top_n=2)
    end = [r for r in relay_log_records if r.get("event") == "rerank.end"][-1]
    assert end["response_id"] == "b7c1-req"  # nosec B101
    assert end["tokens"] == {"input_tokens": 42, "output_tokens": 0, "total_tokens": 42}  # nosec B101
    assert end["count"] == 2  # nosec B101


def test_from_env_accepts_dashscope_alias(monkeypatch, mock_http):
    monkeypatch.setenv("DASHSCOPE_API_KEY", "sk-dash")
    _, transport = mock_http(lambda r: httpx.Response(200, json=RESPONSE))
    client = Client.from_env(transport=transport)
    assert client.api_key == "sk-dash"  # nosec B101
    assert client.rerank_url == GTE_RERANK_V2_URL  # nosec B101
