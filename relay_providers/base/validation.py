"""Input preconditions checked before any request is built.

Every function raises :class:`ValidationError` and performs no I/O, so a
rejected call never reaches the transport.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Union

from .constants import MAX_EMBEDDING_DOCUMENTS
from .errors import ValidationError


def validate_documents(
    documents: Sequence[str],
    *,
    provider: str,
    model: Optional[str] = None,
    max_documents: int = MAX_EMBEDDING_DOCUMENTS,
) -> List[str]:
    """Return ``documents`` as a list after checking count bounds."""
    if isinstance(documents, str):
        raise ValidationError(message="documents must be a sequence of strings, not a string", provider=provider, model=model)
    docs = list(documents)
    if not docs:
        raise ValidationError(message="Documents cannot be empty", provider=provider, model=model)
    if len(docs) > max_documents:
        raise ValidationError(
            message=f"Too many documents: {len(docs)} exceeds the limit of {max_documents} per request",
            provider=provider,
            model=model,
        )
    return docs


def validate_rerank(
    query: str,
    documents: Sequence[str],
    top_n: Optional[int],
    *,
    provider: str,
    model: Optional[str] = None,
) -> List[str]:
    """Check rerank inputs; returns the documents as a list.

    The query is checked after stripping whitespace but sent unchanged.
    """
    if not query or not query.strip():
        raise ValidationError(message="Query cannot be empty", provider=provider, model=model)
    if isinstance(documents, str):
        raise ValidationError(message="documents must be a sequence of strings, not a string", provider=provider, model=model)
    docs = list(documents)
    if not docs:
        raise ValidationError(message="Documents cannot be empty", provider=provider, model=model)
    if top_n is not None and top_n < 0:
        raise ValidationError(message=f"top_n must be >= 0, got {top_n}", provider=provider, model=model)
    return docs


def validate_inputs(inputs: Union[str, Sequence[str]], *, provider: str) -> List[str]:
    """Normalize predict inputs to a non-empty list."""
    items = [inputs] if isinstance(inputs, str) else list(inputs)
    if not items:
        raise ValidationError(message="Inputs cannot be empty", provider=provider)
    return items


__all__ = ["validate_documents", "validate_rerank", "validate_inputs"]
