"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`relay_providers.base.models_parts` if needed, while `relay_providers.base.models`
remains the primary stable import path.
"""

from .content_part import ContentPart, ContentPartType
from .message import Message, Role, ToolCall
from .tool import ToolChoice, ToolDefinition
from .document import Document, documents_message
from .completion_request import CompletionRequest
from .token_usage import TokenUsage
from .provider_metadata import ProviderMetadata
from .chat_response import ChatResponse
from .results import Embedding, LabelScore, PredictResponse, RerankResult

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
