"""Server-sent-event frame decoding for OpenAI-compatible streams.

A frame's ``data`` is one JSON chunk. A chunk is either a delta
(``choices[].delta``), a usage-only chunk (``choices == []`` with ``usage``)
or an error envelope that some providers emit mid-stream.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constants import UNKNOWN_ERROR_MESSAGE
from ..errors import ProviderReportedError, code_for_status
from .embedding import UsageShape
from .envelope import extract_error_message
from .shapes import ShapeCandidate, decode_first, load_json


class FunctionDeltaShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    arguments: Optional[str] = None


class ToolCallDeltaShape(BaseModel):
    """One fragment of a tool call; fragments sharing ``index`` concatenate."""

    model_config = ConfigDict(extra="allow")

    index: int = 0
    id: Optional[str] = None
    type: Optional[str] = None
    function: Optional[FunctionDeltaShape] = None


class DeltaShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: Optional[str] = None
    content: Optional[str] = None
    tool_calls: List[ToolCallDeltaShape] = Field(default_factory=list)


class StreamChoiceShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int = 0
    delta: DeltaShape = Field(default_factory=DeltaShape)
    finish_reason: Optional[str] = None


class StreamChunkShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[StreamChoiceShape] = Field(default_factory=list)
    usage: Optional[UsageShape] = None


def _is_error_frame(payload: object) -> bool:
    """An object with a non-null ``error``, or a ``code``/``message`` body without ``choices``."""
    if not isinstance(payload, dict):
        return False
    if payload.get("error") is not None:
        return True
    return "choices" not in payload and ("code" in payload or "message" in payload)


def decode_stream_chunk(data: str, *, provider: str, model: Optional[str] = None) -> StreamChunkShape:
    """Decode one frame payload.

    Raises:
        ProviderReportedError: The frame carries an error envelope.
        ResponseDecodeError: The frame is not JSON or matches no chunk shape.
    """
    payload = load_json(data, provider=provider, what="stream chunk")
    if _is_error_frame(payload):
        raise ProviderReportedError(
            code=code_for_status(200),
            message=extract_error_message(payload) or UNKNOWN_ERROR_MESSAGE,
            provider=provider,
            model=model,
            status=200,
        )
    _, value = decode_first(payload, [ShapeCandidate.of("chunk", StreamChunkShape)], provider=provider, what="stream chunk")
    return value


__all__ = [
    "ToolCallDeltaShape",
    "DeltaShape",
    "StreamChoiceShape",
    "StreamChunkShape",
    "decode_stream_chunk",
]
