"""
Assistant content parts.

A chat completion is normalized into an ordered list of parts: the assistant
text, followed by any tool calls the model requested. Tool-call parts keep
``arguments`` as the raw JSON string the provider sent; parsing it is left to
the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal, Optional


ContentPartType = Literal["text", "tool_call"]


@dataclass
class ContentPart:
    """A single piece of assistant output.

    Attributes:
        type: ``"text"`` or ``"tool_call"``.
        text: Assistant text for ``text`` parts.
        data: ``{"id", "name", "arguments"}`` for ``tool_call`` parts.
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def text_part(cls, text: str) -> "ContentPart":
        return cls(type="text", text=text)

    @classmethod
    def tool_call(cls, call_id: Optional[str], name: str, arguments: str) -> "ContentPart":
        return cls(type="tool_call", data={"id": call_id, "name": name, "arguments": arguments})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "ContentPart",
    "ContentPartType",
]
