"""
Canonical completion request.

The provider-agnostic request handed to completion adapters. Adapters turn it
into a provider wire body; ``additional_params`` is always merged last so it
can override any key the adapter produced.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .document import Document
from .message import Message
from .tool import ToolChoice, ToolDefinition


@dataclass
class CompletionRequest:
    """Normalized completion request.

    Attributes:
        chat_history: Ordered, role-tagged messages. Non-emptiness is the
            caller's responsibility.
        preamble: Optional system instruction placed before the history.
        documents: Context documents rendered as a leading user message.
        tools: Tool definitions offered to the model.
        tool_choice: Optional selector; only sent when tools are present.
        temperature: Sampling temperature.
        max_tokens: Completion token cap.
        additional_params: Free-form document merged over the built body.
    """

    chat_history: List[Message]
    preamble: Optional[str] = None
    documents: List[Document] = field(default_factory=list)
    tools: List[ToolDefinition] = field(default_factory=list)
    tool_choice: Optional[Union[ToolChoice, str]] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    additional_params: Optional[Dict[str, Any]] = None


__all__ = ["CompletionRequest"]
