"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the implementations under
``relay_providers.base.models_parts`` to keep a single stable import path.
"""

from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.message import Message, Role, ToolCall
from .models_parts.tool import ToolChoice, ToolDefinition
from .models_parts.document import Document, documents_message
from .models_parts.completion_request import CompletionRequest
from .models_parts.token_usage import TokenUsage
from .models_parts.provider_metadata import ProviderMetadata
from .models_parts.chat_response import ChatResponse
from .models_parts.results import Embedding, LabelScore, PredictResponse, RerankResult

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "ToolCall",
    "ToolChoice",
    "ToolDefinition",
    "Document",
    "documents_message",
    "CompletionRequest",
    "TokenUsage",
    "ProviderMetadata",
    "ChatResponse",
    "Embedding",
    "LabelScore",
    "PredictResponse",
    "RerankResult",
]
