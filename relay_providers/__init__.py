"""relay_providers package

One client surface over several independently evolving HTTP model providers.

Purpose:
    Normalize request construction, response decoding, streaming and errors
    for chat completion, embedding, rerank and classification calls against
    Volcengine Ark, Alibaba Bailian (DashScope) and Text Embeddings Inference.

Public API (re-exported):
    - Version: ``__version__``
    - Provider packages: :mod:`volcengine`, :mod:`bailian`, :mod:`tei`
    - Exceptions: :class:`ProviderError` and its subclasses, :class:`ErrorCode`
    - Canonical models: :class:`CompletionRequest`, :class:`Message`,
      :class:`ChatResponse`, :class:`Embedding`, :class:`RerankResult`, ...
    - Configuration: :func:`load_provider_settings`
"""

from . import bailian, tei, volcengine
from .base.errors import (
    ErrorCode,
    HttpStatusError,
    ProviderError,
    ProviderReportedError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
)
from .base.models import (
    ChatResponse,
    CompletionRequest,
    Document,
    Embedding,
    LabelScore,
    Message,
    PredictResponse,
    RerankResult,
    TokenUsage,
    ToolChoice,
    ToolDefinition,
)
from .base.streaming import ChatStreamEvent, accumulate_events
from .config import ProviderSettings, load_provider_settings

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Providers
    "bailian",
    "tei",
    "volcengine",
    # Exceptions
    "ErrorCode",
    "ProviderError",
    "ValidationError",
    "TransportError",
    "HttpStatusError",
    "ProviderReportedError",
    "ResponseDecodeError",
    # Models
    "ChatResponse",
    "ChatStreamEvent",
    "CompletionRequest",
    "Document",
    "Embedding",
    "LabelScore",
    "Message",
    "PredictResponse",
    "RerankResult",
    "TokenUsage",
    "ToolChoice",
    "ToolDefinition",
    "accumulate_events",
    # Configuration
    "ProviderSettings",
    "load_provider_settings",
]
