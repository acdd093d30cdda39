"""Context documents attached to a completion request."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .message import Message


@dataclass(frozen=True)
class Document:
    """A reference document the model should ground its answer on."""

    id: str
    text: str
    additional_props: Dict[str, str] = field(default_factory=dict)

    def render(self) -> str:
        header = f"<file id: {self.id}>"
        if self.additional_props:
            meta = " ".join(f"{k}: {v}" for k, v in sorted(self.additional_props.items()))
            header = f"{header}\n<metadata {meta} />"
        return f"{header}\n{self.text}\n</file>"


def documents_message(documents: List[Document]) -> Optional[Message]:
    """Fold documents into one leading user message; ``None`` when empty."""
    if not documents:
        return None
    body = "\n".join(d.render() for d in documents)
    return Message(role="user", content=f"<attachments>\n{body}\n</attachments>")


__all__ = ["Document", "documents_message"]
