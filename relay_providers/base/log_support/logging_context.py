"""Structured logging context carried through one adapter call."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Fields shared by every event of one operation.

    ``operation`` is the adapter verb (``chat``, ``chat_streaming``, ``embeddings``,
    ``rerank``, ``predict``); ``endpoint`` the absolute URL called.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    operation: Optional[str] = None
    endpoint: Optional[str] = None
    response_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
