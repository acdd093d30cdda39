"""Unit tests for request preconditions.

Covers:
- document count bounds for embeddings
- rerank query, documents and top_n checks
- predict inputs normalization
"""
from __future__ import annotations

import pytest

from relay_providers.base.errors import ErrorCode, ValidationError
from relay_providers.base.validation import validate_documents, validate_inputs, validate_rerank


def test_documents_bounds():
    assert validate_documents(("a", "b"), provider="p") == ["a", "b"]  # nosec B101
    assert len(validate_documents(["x"] * 1024, provider="p")) == 1024  # nosec B101
    with pytest.raises(ValidationError, match="Documents cannot be empty"):
        validate_documents([], provider="p")
    with pytest.raises(ValidationError) as ei:
        validate_documents(["x"] * 1025, provider="p", model="m")
    assert "1025" in ei.value.message and ei.value.model == "m"  # nosec B101
    assert ei.value.code is ErrorCode.VALIDATION  # nosec B101


def test_documents_rejects_plain_string():
    with pytest.raises(ValidationError):
        validate_documents("abc", provider="p")


@pytest.mark.parametrize("query", ["", "   ", "\n\t"])
def test_rerank_blank_query(query):
    with pytest.raises(ValidationError, match="Query cannot be empty"):
        validate_rerank(query, ["a"], None, provider="bailian")


def test_rerank_documents_and_top_n():
    assert validate_rerank(" q ", ("a",), 0, provider="p") == ["a"]  # nosec B101
    with pytest.raises(ValidationError, match="Documents cannot be empty"):
        validate_rerank("q", [], None, provider="p")
    with pytest.raises(ValidationError, match="top_n must be >= 0"):
        validate_rerank("q", ["a"], -1, provider="p")


def test_rerank_rejects_plain_string():
    with pytest.raises(ValidationError, match="not a string"):
        validate_rerank("q", "abc", None, provider="tei")


def test_inputs_normalized():
    assert validate_inputs("one", provider="tei") == ["one"]  # nosec B101
    assert validate_inputs(["a", "b"], provider="tei") == ["a", "b"]  # nosec B101
    with pytest.raises(ValidationError, match="Inputs cannot be empty"):
        validate_inputs([], provider="tei")
