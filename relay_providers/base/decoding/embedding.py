"""Embedding response shapes.

Two families are accepted:

TEI style, tried in this order:
    ``multi``   ``{"embeddings": [[float, ...], ...]}``
    ``single``  ``{"embeddings": [float, ...]}`` (single-document responses)
    ``bare``    ``[[float, ...], ...]`` with no wrapping object

OpenAI style (inside the generic Ok/Err envelope):
    ``{"data": [{"embedding": [...], "index": 0}, ...], "usage": {...}}``
    Items are re-ordered by ``index`` so the output lines up with the input.

Only after a shape is accepted is the count invariant checked: the number of
vectors must equal the number of input documents. Mismatches are decode
errors; nothing is truncated or padded.
"""
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, StrictInt, TypeAdapter

from ..errors import ResponseDecodeError
from .shapes import NoMatch, Number, ShapeCandidate, decode_first

Vector = List[Number]


class MultiEmbeddings(BaseModel):
    model_config = ConfigDict(extra="allow")

    embeddings: List[Vector]


class SingleEmbedding(BaseModel):
    model_config = ConfigDict(extra="allow")

    embeddings: Vector


def _parse_bare(payload: Any) -> List[List[float]]:
    if not isinstance(payload, list):
        raise NoMatch("expected a bare list of vectors")
    return TypeAdapter(List[Vector]).validate_python(payload)


TEI_EMBEDDING_SHAPES: Sequence[ShapeCandidate[Any]] = (
    ShapeCandidate("multi", lambda p: MultiEmbeddings.model_validate(p).embeddings),
    ShapeCandidate("single", lambda p: [SingleEmbedding.model_validate(p).embeddings]),
    ShapeCandidate("bare", _parse_bare),
)


def decode_tei_embeddings(payload: Any, *, provider: str) -> List[List[float]]:
    """Decode a TEI embedding payload into a list of vectors (in order)."""
    _, vectors = decode_first(payload, TEI_EMBEDDING_SHAPES, provider=provider, what="embeddings")
    return [[float(x) for x in v] for v in vectors]


class EmbeddingData(BaseModel):
    model_config = ConfigDict(extra="allow")

    embedding: Vector
    index: StrictInt
    object: Optional[str] = None


class UsageShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    prompt_tokens: Optional[int] = None
    total_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None


class OpenAIEmbeddingResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    data: List[EmbeddingData]
    model: Optional[str] = None
    object: Optional[str] = None
    usage: Optional[UsageShape] = None


def ordered_vectors(response: OpenAIEmbeddingResponse, *, provider: str) -> List[List[float]]:
    """Return vectors of ``response.data`` sorted into input order by ``index``.

    Raises:
        ResponseDecodeError: When indices are duplicated or do not cover
            ``0..len(data)-1``.
    """
    indices = sorted(item.index for item in response.data)
    if indices != list(range(len(response.data))):
        raise ResponseDecodeError(
            message=f"Failed to parse embeddings: indices {indices} are not a permutation of 0..{len(response.data) - 1}",
            provider=provider,
        )
    return [[float(x) for x in item.embedding] for item in sorted(response.data, key=lambda d: d.index)]


def check_count(vectors: Sequence[Any], documents: Sequence[str], *, provider: str, model: Optional[str] = None) -> None:
    """Enforce one vector per input document."""
    if len(vectors) != len(documents):
        raise ResponseDecodeError(
            message=(
                "Response data length does not match input length "
                f"(got {len(vectors)} vectors for {len(documents)} documents)"
            ),
            provider=provider,
            model=model,
        )


__all__ = [
    "MultiEmbeddings",
    "SingleEmbedding",
    "TEI_EMBEDDING_SHAPES",
    "decode_tei_embeddings",
    "EmbeddingData",
    "UsageShape",
    "OpenAIEmbeddingResponse",
    "ordered_vectors",
    "check_count",
]
