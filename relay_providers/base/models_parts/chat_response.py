"""
ChatResponse DTO representing normalized provider responses.

At least one of ``text`` or ``parts`` should be present. The ``raw`` field
holds the decoded provider payload for debugging but is excluded from default
serialization to prevent large object graphs from being logged unintentionally.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .content_part import ContentPart
from .provider_metadata import ProviderMetadata
from .token_usage import TokenUsage


@dataclass
class ChatResponse:
    """Provider-agnostic response from a chat completion.

    Attributes:
        text: Optional plain text completion.
        parts: Optional structured content parts (text and tool calls).
        raw: Optional decoded provider payload for diagnostics only.
        meta: Execution `ProviderMetadata` for observability.
        usage: Token accounting when the provider reported it.
    """

    text: Optional[str]
    parts: Optional[List[ContentPart]]
    raw: Optional[Any]
    meta: ProviderMetadata
    usage: Optional[TokenUsage] = None

    def tool_calls(self) -> List[ContentPart]:
        """Return the ``tool_call`` parts, in order."""
        return [p for p in (self.parts or []) if p.type == "tool_call"]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding raw provider objects."""
        return {
            "text": self.text,
            "parts": [p.to_dict() for p in self.parts] if self.parts else None,
            "raw": None,
            "meta": self.meta.to_dict(),
            "usage": self.usage.to_dict() if self.usage else None,
        }


__all__ = [
    "ChatResponse",
]
