"""Canonical result values for embedding, rerank and predict operations."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Embedding:
    """One input document paired with its vector."""

    document: str
    vec: List[float]


@dataclass(frozen=True)
class RerankResult:
    """One reranked document.

    ``index`` always refers to the caller's input list, regardless of where
    the item sits in the (provider-ordered, possibly truncated) result list.
    """

    index: int
    relevance_score: float
    text: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LabelScore:
    """One classification label with its score."""

    label: str
    score: float


@dataclass(frozen=True)
class PredictResponse:
    """Classification output in provider order."""

    items: List[LabelScore] = field(default_factory=list)


__all__ = ["Embedding", "RerankResult", "LabelScore", "PredictResponse"]
