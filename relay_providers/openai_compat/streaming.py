"""Streaming chat completion for OpenAI-compatible providers.

The body is the non-streaming request with
``{"stream": true, "stream_options": {"include_usage": true}}`` merged as the
final overlay, so those flags win over anything in ``additional_params``.
Frames are read as server-sent events; each ``data`` payload is one JSON
chunk. The generator yields text deltas and tool-call fragments as they
arrive and ends with exactly one ``finish=True`` event carrying the usage
reported by the provider's final chunk.

Failure modes:
    - Request validation happens when :func:`stream_completion` is called,
      before any connection is opened.
    - Non-2xx on open: the body is read and :class:`HttpStatusError` raised.
    - Malformed frame: :class:`ResponseDecodeError`.
    - Connection lost mid-stream: :class:`TransportError`.
    - Closing the generator early closes the HTTP stream.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional

from ..base.constants import STREAMING_FLAGS
from ..base.decoding import decode_stream_chunk, http_status_error, is_success, usage_from_shape
from ..base.models import CompletionRequest, TokenUsage
from ..base.observe import observed_operation
from ..base.streaming import ChatStreamEvent, iter_sse_data
from ..base.utils.merge import merge

if TYPE_CHECKING:
    from .completion import CompletionModel


def create_streaming_request(model: "CompletionModel", request: CompletionRequest) -> Dict[str, Any]:
    """Non-streaming body with the streaming flags merged last."""
    return merge(model.create_completion_request(request), STREAMING_FLAGS)


def stream_completion(model: "CompletionModel", request: CompletionRequest) -> Iterator[ChatStreamEvent]:
    """Start a streaming completion and return its event iterator.

    Raises:
        ValidationError: Raised immediately for an invalid request.
    """
    body = create_streaming_request(model, request)
    return _iter_events(model, body, request.preamble)


def _iter_events(model: "CompletionModel", body: Dict[str, Any], preamble: Optional[str]) -> Iterator[ChatStreamEvent]:
    client = model.client
    provider = model.provider_name
    url = client.url("/chat/completions")
    usage: Optional[TokenUsage] = None
    response_id: Optional[str] = None
    finish_reason: Optional[str] = None
    emitted = 0

    with observed_operation(
        client.logger,
        operation="chat_streaming",
        provider=provider,
        model=model.model,
        endpoint=url,
        system_instructions=preamble,
        activate_span=False,
        messages=len(body.get("messages") or []),
    ) as op:
        op.span.set_attribute("gen_ai.input.messages", json.dumps(body.get("messages") or [], ensure_ascii=False))
        with client.stream(url, body, model=model.model) as response:
            op.status = response.status
            if not is_success(response.status):
                raise http_status_error(response.status, response.read(), provider=provider, model=model.model)
            for data in iter_sse_data(response.iter_lines()):
                chunk = decode_stream_chunk(data, provider=provider, model=model.model)
                response_id = chunk.id or response_id
                if chunk.usage is not None:
                    usage = usage_from_shape(chunk.usage)
                for choice in chunk.choices:
                    finish_reason = choice.finish_reason or finish_reason
                    if choice.delta.content:
                        emitted += 1
                        yield ChatStreamEvent(
                            provider=provider,
                            model=model.model,
                            delta=choice.delta.content,
                            response_id=chunk.id,
                            raw=chunk,
                        )
                    for call in choice.delta.tool_calls:
                        fn = call.function
                        emitted += 1
                        yield ChatStreamEvent(
                            provider=provider,
                            model=model.model,
                            delta=None,
                            structured={
                                "index": call.index,
                                "id": call.id,
                                "name": fn.name if fn else None,
                                "arguments": fn.arguments if fn else None,
                            },
                            response_id=chunk.id,
                            raw=chunk,
                        )
        op.usage = usage
        op.response_id = response_id
        op.emitted = emitted

    yield ChatStreamEvent(
        provider=provider,
        model=model.model,
        delta=None,
        finish=True,
        finish_reason=finish_reason,
        usage=usage,
        response_id=response_id,
    )


__all__ = ["create_streaming_request", "stream_completion"]
