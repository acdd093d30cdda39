"""Unit tests for endpoint resolution.

Covers:
- derived URLs are ``base + "/" + operation`` with trailing slashes trimmed
- overrides are used verbatim, including trailing slashes
- ``None`` overrides are ignored; unknown operations are rejected
- resolution is deterministic and the result is read-only
"""
from __future__ import annotations

import pytest

from relay_providers.base.endpoints import Endpoints, join_url, resolve_endpoints
from relay_providers.base.errors import ValidationError

OPS = ("embed", "rerank", "predict")


def test_derived_endpoints_trim_trailing_slashes():
    eps = resolve_endpoints("http://localhost:8080///", OPS)
    assert dict(eps) == {  # nosec B101
        "embed": "http://localhost:8080/embed",
        "rerank": "http://localhost:8080/rerank",
        "predict": "http://localhost:8080/predict",
    }
    assert eps.rerank == "http://localhost:8080/rerank"  # nosec B101


def test_override_used_verbatim():
    eps = resolve_endpoints(
        "http://localhost:8080",
        OPS,
        {"rerank": "https://reranker.internal/v2/rerank/", "embed": None},
    )
    assert eps["rerank"] == "https://reranker.internal/v2/rerank/"  # nosec B101
    assert eps["embed"] == "http://localhost:8080/embed"  # nosec B101


def test_unknown_override_rejected():
    with pytest.raises(ValidationError) as ei:
        resolve_endpoints("http://x", OPS, {"classify": "http://y"})
    assert "classify" in ei.value.message  # nosec B101


def test_resolution_is_deterministic_and_immutable():
    a = resolve_endpoints("http://x/", OPS)
    b = resolve_endpoints("http://x", OPS)
    assert a == b  # nosec B101
    assert hash(a) == hash(b)  # nosec B101
    with pytest.raises(TypeError):
        a.urls["embed"] = "http://evil"  # type: ignore[index]
    with pytest.raises(AttributeError):
        _ = a.classify


def test_join_url_single_slash():
    assert join_url("https://ark.example.com/api/v3/", "/chat/completions") == (  # nosec B101
        "https://ark.example.com/api/v3/chat/completions"
    )
    assert isinstance(resolve_endpoints("http://x", ()), Endpoints)  # nosec B101
