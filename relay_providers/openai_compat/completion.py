"""Chat completion over an OpenAI-compatible ``/chat/completions`` endpoint.

Request building:
    ``[system(preamble)] + [documents message] + chat_history`` become the
    ``messages`` array. ``model``, ``temperature`` and ``max_tokens`` are
    always present (``null`` when unset); ``tools`` and ``tool_choice`` only
    when tools were supplied. ``additional_params`` is merged last and wins.

Response handling:
    Non-2xx raises :class:`HttpStatusError`. A 2xx body is decoded as the
    untagged ``Ok | Err`` envelope: the completion shape first, then the
    ``{"error": {"message": ...}}`` shape, which raises
    :class:`ProviderReportedError`.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Union

from ..base.decoding import CompletionResponseShape, decode_envelope, load_json, raise_for_status
from ..base.errors import ValidationError
from ..base.models import ChatResponse, CompletionRequest, Message, ProviderMetadata, ToolChoice, documents_message
from ..base.observe import observed_operation
from ..base.streaming import ChatStreamEvent
from ..base.utils.merge import merge
from .streaming import stream_completion

if TYPE_CHECKING:
    from .client import Client


def tool_choice_value(choice: Union[ToolChoice, str], *, provider: str = "unknown") -> str:
    """Return the wire value for a tool choice.

    Raises:
        ValidationError: ``choice`` is not one of none/auto/required.
    """
    try:
        return ToolChoice(choice.value if isinstance(choice, ToolChoice) else str(choice).lower()).value
    except ValueError:
        raise ValidationError(message=f"Unsupported tool choice type: {choice!r}", provider=provider) from None


def build_messages(request: CompletionRequest) -> List[Dict[str, Any]]:
    """Ordered wire messages: preamble, documents, then the chat history."""
    history: List[Message] = []
    if request.preamble is not None:
        history.append(Message.system(request.preamble))
    if docs := documents_message(request.documents):
        history.append(docs)
    history.extend(request.chat_history)
    return [m.to_openai_dict() for m in history]


class CompletionModel:
    """Chat completion model bound to a :class:`Client`."""

    def __init__(self, client: "Client", model: str) -> None:
        self.client = client
        self.model = model

    @property
    def provider_name(self) -> str:
        return self.client.provider_name

    def create_completion_request(self, request: CompletionRequest) -> Dict[str, Any]:
        """Build the JSON body for ``request`` (no I/O).

        Raises:
            ValidationError: Unsupported ``tool_choice``.
        """
        tool_choice = (
            tool_choice_value(request.tool_choice, provider=self.provider_name)
            if request.tool_choice is not None
            else None
        )
        body: Dict[str, Any] = {
            "model": self.model,
            "messages": build_messages(request),
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.tools:
            body["tools"] = [t.to_openai_dict() for t in request.tools]
            body["tool_choice"] = tool_choice
        if request.additional_params:
            body = merge(body, request.additional_params)
        return body

    def completion(self, request: CompletionRequest) -> ChatResponse:
        """Run one non-streaming chat completion.

        Raises:
            ValidationError: Invalid request; nothing is sent.
            TransportError: No HTTP response was received.
            HttpStatusError: Non-success status.
            ProviderReportedError: Error envelope in a success body.
            ResponseDecodeError: Body matched neither envelope shape.
        """
        body = self.create_completion_request(request)
        url = self.client.url("/chat/completions")
        with observed_operation(
            self.client.logger,
            operation="chat",
            provider=self.provider_name,
            model=self.model,
            endpoint=url,
            system_instructions=request.preamble,
            messages=len(body.get("messages") or []),
        ) as op:
            op.span.set_attribute("gen_ai.input.messages", json.dumps(body.get("messages") or [], ensure_ascii=False))
            response = self.client.post(url, body, model=self.model)
            op.status = response.status
            raise_for_status(response.status, response.body, provider=self.provider_name, model=self.model)
            payload = load_json(response.body, provider=self.provider_name, what="chat completion")
            parsed: CompletionResponseShape = decode_envelope(
                payload,
                CompletionResponseShape.model_validate,
                provider=self.provider_name,
                status=response.status,
                model=self.model,
                what="chat completion",
            )
            op.usage = parsed.token_usage()
            op.response_id = parsed.id
            op.response_model = parsed.model
            return self._build_response(parsed, payload, response.status, op.latency_ms)

    def _build_response(
        self, parsed: CompletionResponseShape, payload: Any, status: int, latency_ms: Optional[float]
    ) -> ChatResponse:
        parts = parsed.content_parts()
        meta = ProviderMetadata(
            provider_name=self.provider_name,
            model_name=self.model,
            http_status=status,
            response_id=parsed.id,
            response_model=parsed.model,
            latency_ms=latency_ms,
            extra={"finish_reason": parsed.choices[0].finish_reason},
        )
        return ChatResponse(
            text=parsed.first_message().content,
            parts=parts or None,
            raw=payload,
            meta=meta,
            usage=parsed.token_usage(),
        )

    def stream(self, request: CompletionRequest) -> Iterator[ChatStreamEvent]:
        """Stream the completion; see :func:`~relay_providers.openai_compat.streaming.stream_completion`."""
        return stream_completion(self, request)


__all__ = ["CompletionModel", "build_messages", "tool_choice_value"]
