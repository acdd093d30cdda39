"""
Provider call metadata model.

Encapsulates diagnostic metadata for provider operations (HTTP codes, response
identifiers, latency). This object is attached to responses to support
observability.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional


@dataclass
class ProviderMetadata:
    """Execution metadata for a provider call.

    Attributes:
        provider_name: Canonical provider key (e.g., ``"volcengine"``).
        model_name: Model name used for the call.
        http_status: HTTP status code of the response.
        response_id: Provider-specific response identifier when available.
        response_model: Model name echoed by the provider, when present.
        latency_ms: End-to-end latency for the operation, in milliseconds.
        extra: Opaque, JSON-serializable map for adapter-specific diagnostics.
    """

    provider_name: str
    model_name: str
    http_status: Optional[int] = None
    response_id: Optional[str] = None
    response_model: Optional[str] = None
    latency_ms: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the metadata fields."""
        return asdict(self)


__all__ = [
    "ProviderMetadata",
]
