"""OpenAI-compatible chat completion response shape.

Only the fields the canonical response needs are declared; everything else is
kept as extra data so the raw payload survives for diagnostics.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import ContentPart, TokenUsage
from .embedding import UsageShape


class FunctionShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    arguments: str = "{}"


class ToolCallShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    type: str = "function"
    function: FunctionShape


class AssistantMessageShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str = "assistant"
    content: Optional[str] = None
    tool_calls: List[ToolCallShape] = Field(default_factory=list)


class ChoiceShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int = 0
    message: AssistantMessageShape
    finish_reason: Optional[str] = None


class CompletionResponseShape(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    model: Optional[str] = None
    object: Optional[str] = None
    choices: List[ChoiceShape] = Field(min_length=1)
    usage: Optional[UsageShape] = None

    def first_message(self) -> AssistantMessageShape:
        return self.choices[0].message

    def content_parts(self) -> List[ContentPart]:
        """Text and tool-call parts of the first choice, in order."""
        message = self.first_message()
        parts: List[ContentPart] = []
        if message.content:
            parts.append(ContentPart.text_part(message.content))
        for call in message.tool_calls:
            parts.append(ContentPart.tool_call(call.id, call.function.name, call.function.arguments))
        return parts

    def token_usage(self) -> Optional[TokenUsage]:
        return usage_from_shape(self.usage)


def usage_from_shape(usage: Optional[UsageShape]) -> Optional[TokenUsage]:
    """Map provider usage to :class:`TokenUsage`; output is ``total - prompt`` (>= 0)."""
    if usage is None:
        return None
    total = usage.total_tokens
    if total is None and usage.prompt_tokens is not None and usage.completion_tokens is not None:
        total = usage.prompt_tokens + usage.completion_tokens
    return TokenUsage.from_totals(usage.prompt_tokens, total)


def usage_from_payload(payload: Any) -> Optional[TokenUsage]:
    """Best-effort usage extraction from an arbitrary parsed JSON payload."""
    if not isinstance(payload, dict) or not isinstance(payload.get("usage"), dict):
        return None
    return usage_from_shape(UsageShape.model_validate(payload["usage"]))


__all__ = [
    "ToolCallShape",
    "AssistantMessageShape",
    "ChoiceShape",
    "CompletionResponseShape",
    "usage_from_shape",
    "usage_from_payload",
]
