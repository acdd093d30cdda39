"""Streaming primitives for the provider layer.

Keeps streaming concerns separate from the request/response DTOs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..models import ChatResponse, ContentPart, ProviderMetadata, TokenUsage


@dataclass
class ChatStreamEvent:
    """An incremental delta from a streaming provider.

    Fields:
      provider: canonical provider name
      model: model id/name
      delta: textual delta (``None`` for control events)
      structured: tool-call fragment ``{"index", "id", "name", "arguments"}``;
        fragments sharing ``index`` concatenate into one call
      finish: True on the terminal event only
      finish_reason: provider finish reason, when reported
      usage: token usage, carried by the terminal event
      response_id: provider response id, when reported
      raw: decoded chunk (optional, for debugging)
    """

    provider: str
    model: str
    delta: str | None
    structured: Dict[str, Any] | None = None
    finish: bool = False
    finish_reason: str | None = None
    usage: TokenUsage | None = None
    response_id: str | None = None
    raw: Any | None = None


def _merge_tool_fragments(events: List[ChatStreamEvent]) -> List[ContentPart]:
    calls: Dict[int, Dict[str, Any]] = {}
    for event in events:
        fragment = event.structured
        if not fragment:
            continue
        call = calls.setdefault(int(fragment.get("index", 0)), {"id": None, "name": "", "arguments": ""})
        if fragment.get("id"):
            call["id"] = fragment["id"]
        call["name"] += fragment.get("name") or ""
        call["arguments"] += fragment.get("arguments") or ""
    ordered = [calls[i] for i in sorted(calls)]
    return [ContentPart.tool_call(c["id"], c["name"], c["arguments"]) for c in ordered]


def accumulate_events(events: Iterable[ChatStreamEvent]) -> ChatResponse:
    """Fold a stream into one :class:`ChatResponse`.

    Text deltas are concatenated; tool-call fragments are merged per index;
    usage, finish reason and response id come from the last event reporting
    them.
    """
    events_list: List[ChatStreamEvent] = list(events)
    if not events_list:
        meta = ProviderMetadata(provider_name="unknown", model_name="unknown")
        return ChatResponse(text="", parts=None, raw=None, meta=meta)

    provider = events_list[0].provider
    model = events_list[0].model
    full_text = "".join(e.delta for e in events_list if e.delta)
    parts: List[ContentPart] = [ContentPart.text_part(full_text)] if full_text else []
    parts.extend(_merge_tool_fragments(events_list))

    usage: Optional[TokenUsage] = None
    response_id: Optional[str] = None
    finish_reason: Optional[str] = None
    for e in events_list:
        usage = e.usage or usage
        response_id = e.response_id or response_id
        finish_reason = e.finish_reason or finish_reason

    meta = ProviderMetadata(
        provider_name=provider,
        model_name=model,
        response_id=response_id,
        extra={"stream_events": len(events_list), "finish_reason": finish_reason},
    )
    return ChatResponse(text=full_text, parts=parts or None, raw=None, meta=meta, usage=usage)


__all__ = [
    "ChatStreamEvent",
    "accumulate_events",
]
