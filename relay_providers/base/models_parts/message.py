"""
Message DTO used across providers.

Defines the `Message` dataclass, the `Role` literal representing the sender
role, and `ToolCall` for assistant tool invocations. Content may be either
plain text or a list of `ContentPart` objects. ``to_openai_dict`` renders the
OpenAI-compatible wire form used by chat completion endpoints.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Union

from .content_part import ContentPart


# Message roles used across providers.
Role = Literal["system", "user", "assistant", "tool"]


@dataclass(frozen=True)
class ToolCall:
    """A function call requested by the assistant.

    Attributes:
        id: Provider-assigned call identifier, echoed back by tool results.
        name: Function name.
        arguments: JSON-encoded argument string, as sent on the wire.
    """

    id: str
    name: str
    arguments: str = "{}"

    def to_openai_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.arguments},
        }


@dataclass
class Message:
    """A chat message used by provider-agnostic DTOs.

    Attributes:
        role: The role of the message author.
        content: Either a plain text string or a list of `ContentPart` items.
        tool_calls: Tool invocations carried by an assistant message.
        tool_call_id: For ``tool`` messages, the id of the answered call.
        name: Optional participant name.
    """

    role: Role
    content: Union[str, List[ContentPart]]
    tool_calls: List[ToolCall] = field(default_factory=list)
    tool_call_id: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def system(cls, text: str) -> "Message":
        return cls(role="system", content=text)

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role="user", content=text)

    @classmethod
    def assistant(cls, text: str, tool_calls: Optional[List[ToolCall]] = None) -> "Message":
        return cls(role="assistant", content=text, tool_calls=list(tool_calls or []))

    @classmethod
    def tool_result(cls, tool_call_id: str, text: str) -> "Message":
        return cls(role="tool", content=text, tool_call_id=tool_call_id)

    def is_structured(self) -> bool:
        """Return True if the message content is a structured list of parts."""
        return isinstance(self.content, list)

    def text_or_joined(self) -> str:
        """Return a flattened string representation of the message content.

        Structured content is joined with newlines; non-text parts are
        represented by bracketed type tokens.
        """
        if isinstance(self.content, str):
            return self.content
        parts: List[str] = []
        for p in self.content:
            if p.text:
                parts.append(p.text)
            else:
                parts.append(f"[{p.type}]")
        return "\n".join(parts)

    def to_openai_dict(self) -> Dict[str, Any]:
        """Render the OpenAI-compatible chat message object."""
        out: Dict[str, Any] = {"role": self.role, "content": self.text_or_joined()}
        if self.name:
            out["name"] = self.name
        if self.tool_calls:
            out["tool_calls"] = [c.to_openai_dict() for c in self.tool_calls]
        if self.tool_call_id is not None:
            out["tool_call_id"] = self.tool_call_id
        return out


__all__ = [
    "Message",
    "Role",
    "ToolCall",
]
