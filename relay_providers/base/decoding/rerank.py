"""Rerank response shapes.

Two provider conventions exist and are decoded separately:

- Nested (DashScope): ``{"output": {"results": [{"index", "relevance_score",
  "document": {"text"}?}]}, "usage"?, "request_id"?}``.
- Flat (TEI): a bare list ``[{"index", "score" | "relevance_score",
  "text"?}]``.

Both produce :class:`RerankResult` values whose ``index`` is the caller's
input position. An index outside the input list is a decode error.
``truncate_top_n`` runs only after decoding and validation.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, TypeAdapter

from ..errors import ResponseDecodeError
from ..models import RerankResult
from .shapes import Number, ShapeCandidate, decode_first


class RerankDocument(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: str


class NestedResultItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: StrictInt
    relevance_score: Number
    document: Optional[RerankDocument] = None


class NestedOutput(BaseModel):
    model_config = ConfigDict(extra="allow")

    results: List[NestedResultItem]


class NestedUsage(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_tokens: Optional[int] = None


class NestedRerankResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    output: NestedOutput
    usage: Optional[NestedUsage] = None
    request_id: Optional[str] = None


class FlatResultItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: StrictInt
    relevance_score: Number = Field(validation_alias=AliasChoices("relevance_score", "score"))
    text: Optional[str] = None


def _check_indices(results: List[RerankResult], document_count: int, *, provider: str) -> List[RerankResult]:
    for r in results:
        if not 0 <= r.index < document_count:
            raise ResponseDecodeError(
                message=f"Failed to parse rerank response: index {r.index} outside 0..{document_count - 1}",
                provider=provider,
            )
    return results


def decode_nested_rerank(payload: Any, document_count: int, *, provider: str) -> NestedRerankResponse:
    """Decode the nested convention; results are validated against the input size."""
    _, parsed = decode_first(
        payload,
        [ShapeCandidate.of("nested", NestedRerankResponse)],
        provider=provider,
        what="rerank response",
    )
    _check_indices(nested_results(parsed), document_count, provider=provider)
    return parsed


def nested_results(parsed: NestedRerankResponse) -> List[RerankResult]:
    return [
        RerankResult(
            index=item.index,
            relevance_score=float(item.relevance_score),
            text=item.document.text if item.document else None,
        )
        for item in parsed.output.results
    ]


FLAT_RERANK_SHAPES: Sequence[ShapeCandidate[Any]] = (
    ShapeCandidate("flat", TypeAdapter(List[FlatResultItem]).validate_python),
)


def decode_flat_rerank(payload: Any, document_count: int, *, provider: str) -> List[RerankResult]:
    """Decode the flat convention into canonical results."""
    _, items = decode_first(payload, FLAT_RERANK_SHAPES, provider=provider, what="rerank response")
    results = [RerankResult(index=i.index, relevance_score=float(i.relevance_score), text=i.text) for i in items]
    return _check_indices(results, document_count, provider=provider)


def truncate_top_n(results: List[RerankResult], top_n: Optional[int]) -> List[RerankResult]:
    """Return the first ``top_n`` results; ``None`` keeps all.

    Idempotent: truncating an already short list is a no-op. Items are not
    re-indexed.
    """
    if top_n is None:
        return list(results)
    return list(results[:top_n])


__all__ = [
    "NestedRerankResponse",
    "FlatResultItem",
    "FLAT_RERANK_SHAPES",
    "decode_nested_rerank",
    "nested_results",
    "decode_flat_rerank",
    "truncate_top_n",
]
