"""OpenAI-compatible embeddings (Volcengine and Bailian) against a mock.

Covers:
- request body with and without ``dimensions``
- vectors re-ordered by ``index`` and paired with their documents
- count mismatch and error envelopes
- input bounds checked before any request
"""
from __future__ import annotations

import httpx
import pytest

from relay_providers import bailian, volcengine
from relay_providers.base.errors import ProviderReportedError, ResponseDecodeError, ValidationError


def _embedding_response(n, *, reverse=False):
    data = [{"object": "embedding", "embedding": [float(i), 0.5], "index": i} for i in range(n)]
    if reverse:
        data.reverse()
    return {"object": "list", "model": "m", "data": data, "usage": {"prompt_tokens": 4, "total_tokens": 4}}


def test_volcengine_request_body_and_order(mock_http):
    recorder, transport = mock_http(lambda r: httpx.Response(200, json=_embedding_response(3, reverse=True)))
    model = volcengine.Client("k", transport=transport).embedding_model(volcengine.TEXT_DOUBAO_EMBEDDING, ndims=2048)
    out = model.embed_texts(["a", "b", "c"])

    body = recorder.json()
    assert body == {"model": "Doubao-embedding", "input": ["a", "b", "c"], "dimensions": 2048}  # nosec B101
    assert str(recorder.requests[0].url).endswith("/api/v3/embeddings")  # nosec B101
    assert [e.document for e in out] == ["a", "b", "c"]  # nosec B101
    assert [e.vec[0] for e in out] == [0.0, 1.0, 2.0]  # nosec B101


def test_bailian_omits_dimensions_by_default(mock_http):
    recorder, transport = mock_http(lambda r: httpx.Response(200, json=_embedding_response(1)))
    model = bailian.Client("k", transport=transport).embedding_model(bailian.TEXT_EMBEDDING_V4)
    emb = model.embed_text("hello")
    assert "dimensions" not in recorder.json()  # nosec B101
    assert str(recorder.requests[0].url) == f"{bailian.BAILIAN_API_BASE_URL}/embeddings"  # nosec B101
    assert emb.document == "hello" and emb.vec == [0.0, 0.5]  # nosec B101


def test_count_mismatch_is_decode_error(mock_http):
    _, transport = mock_http(lambda r: httpx.Response(200, json=_embedding_response(1)))
    model = volcengine.Client("k", transport=transport).embedding_model("m")
    with pytest.raises(ResponseDecodeError, match="does not match input length"):
        model.embed_texts(["a", "b"])


def test_error_envelope_with_success_status(mock_http):
    _, transport = mock_http(lambda r: httpx.Response(200, json={"error": {"message": "input too long"}}))
    model = volcengine.Client("k", transport=transport).embedding_model("m")
    with pytest.raises(ProviderReportedError, match="input too long"):
        model.embed_texts(["a"])


def test_bounds_checked_before_sending(mock_http):
    recorder, transport = mock_http(lambda r: httpx.Response(200, json=_embedding_response(1)))
    model = volcengine.Client("k", transport=transport).embedding_model("m")
    with pytest.raises(ValidationError):
        model.embed_texts([])
    with pytest.raises(ValidationError):
        model.embed_texts(["x"] * (model.MAX_DOCUMENTS + 1))
    assert recorder.calls == 0  # nosec B101
