"""
Providers Base Package

Provider-agnostic building blocks shared by every adapter:

- Models (DTOs): canonical requests, responses and result values
- Errors: the normalized error taxonomy and exception classification
- Endpoints and merge: request construction helpers
- Decoding: untagged shape candidates and the Ok/Err envelope
- HTTP: pooled ``httpx`` clients behind the ``Transport`` contract
- Observability: structured logging and OpenTelemetry spans
"""

from .endpoints import Endpoints, join_url, resolve_endpoints
from .errors import (
    ErrorCode,
    HttpStatusError,
    ProviderError,
    ProviderReportedError,
    ResponseDecodeError,
    TransportError,
    ValidationError,
    classify_exception,
)
from .http import HttpRequest, HttpResponse, HttpxTransport, Transport, close_all_clients
from .models import (
    ChatResponse,
    CompletionRequest,
    ContentPart,
    ContentPartType,
    Document,
    Embedding,
    LabelScore,
    Message,
    PredictResponse,
    ProviderMetadata,
    RerankResult,
    Role,
    TokenUsage,
    ToolCall,
    ToolChoice,
    ToolDefinition,
)
from .streaming import ChatStreamEvent, accumulate_events
from .timeouts import TimeoutConfig, get_timeout_config
from .utils.merge import merge, merge_layers

__all__ = [
    # Models
    "Role",
    "ContentPartType",
    "ContentPart",
    "Message",
    "ToolCall",
    "ToolChoice",
    "ToolDefinition",
    "Document",
    "CompletionRequest",
    "ProviderMetadata",
    "ChatResponse",
    "TokenUsage",
    "Embedding",
    "RerankResult",
    "LabelScore",
    "PredictResponse",
    # Errors
    "ErrorCode",
    "ProviderError",
    "ValidationError",
    "TransportError",
    "HttpStatusError",
    "ProviderReportedError",
    "ResponseDecodeError",
    "classify_exception",
    # Request construction
    "Endpoints",
    "join_url",
    "resolve_endpoints",
    "merge",
    "merge_layers",
    # Transport
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "Transport",
    "close_all_clients",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
    # Streaming
    "ChatStreamEvent",
    "accumulate_events",
]
