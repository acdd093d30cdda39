"""Predict/classify response shapes.

Candidates, tried in this order:
    ``items``        ``{"items": [{"label", "score"}]}``
    ``predictions``  ``{"predictions": [{"label", "score"}]}``
    ``arrays``       ``{"labels": [...], "scores": [...]}`` combined pairwise

For ``arrays`` a length mismatch is a decode error, never a truncation. A
bare list form is intentionally not accepted.
"""
from __future__ import annotations

from typing import Any, List, Sequence

from pydantic import BaseModel, ConfigDict

from ..errors import ResponseDecodeError
from ..models import LabelScore, PredictResponse
from .shapes import Number, ShapeCandidate, decode_first


class LabelScoreShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    label: str
    score: Number


class ItemsShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    items: List[LabelScoreShape]


class PredictionsShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    predictions: List[LabelScoreShape]


class ArraysShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    labels: List[str]
    scores: List[Number]


PREDICT_SHAPES: Sequence[ShapeCandidate[Any]] = (
    ShapeCandidate("items", lambda p: ItemsShape.model_validate(p).items),
    ShapeCandidate("predictions", lambda p: PredictionsShape.model_validate(p).predictions),
    ShapeCandidate.of("arrays", ArraysShape),
)


def decode_predict(payload: Any, *, provider: str) -> PredictResponse:
    """Decode a predict payload into a :class:`PredictResponse`."""
    name, value = decode_first(payload, PREDICT_SHAPES, provider=provider, what="predict response")
    if name == "arrays":
        if len(value.labels) != len(value.scores):
            raise ResponseDecodeError(
                message=(
                    "Failed to parse predict response: labels and scores length mismatch "
                    f"({len(value.labels)} labels, {len(value.scores)} scores)"
                ),
                provider=provider,
            )
        pairs = zip(value.labels, value.scores)
    else:
        pairs = ((item.label, item.score) for item in value)
    return PredictResponse(items=[LabelScore(label=label, score=float(score)) for label, score in pairs])


__all__ = ["ItemsShape", "PredictionsShape", "ArraysShape", "PREDICT_SHAPES", "decode_predict"]
