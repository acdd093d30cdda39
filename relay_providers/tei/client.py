"""TEI client.

The base URL is resolved once into three concrete endpoints
(``<base>/embed``, ``<base>/rerank``, ``<base>/predict``); any of them can be
replaced by an absolute URL, which is used verbatim. Self-hosted TEI needs no
auth, but when an API key is configured it is sent as a bearer token.

Reranking and classification come from :class:`TeiRerankMixin` and
:class:`TeiPredictMixin`; embeddings from :meth:`Client.embedding_model`.
"""
from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from ..base.endpoints import Endpoints, resolve_endpoints
from ..base.http import HttpRequest, HttpResponse, HttpxTransport, Transport
from ..base.logging import get_logger
from ..config import ProviderSettings, load_provider_settings
from ..config.defaults import TEI_DEFAULT_BASE_URL, TEI_OPERATIONS
from .embedding import EmbeddingModel
from .predict import TeiPredictMixin
from .rerank import TeiRerankMixin


class Client(TeiRerankMixin, TeiPredictMixin):
    """Client for one TEI deployment.

    Parameters:
        base_url: Server root; trailing slashes are ignored.
        embed_endpoint / rerank_endpoint / predict_endpoint: Absolute URL
            overrides for individual operations.
        api_key: Optional bearer token.
        transport: Outbound collaborator; defaults to the pooled httpx transport.
    """

    provider_name: ClassVar[str] = "tei"

    def __init__(
        self,
        base_url: str = TEI_DEFAULT_BASE_URL,
        *,
        embed_endpoint: Optional[str] = None,
        rerank_endpoint: Optional[str] = None,
        predict_endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self.endpoints: Endpoints = resolve_endpoints(
            base_url,
            TEI_OPERATIONS,
            {"embed": embed_endpoint, "rerank": rerank_endpoint, "predict": predict_endpoint},
        )
        self.api_key = api_key
        self.transport: Transport = transport or HttpxTransport()
        self._logger = get_logger("relay.tei")

    @classmethod
    def from_settings(cls, settings: ProviderSettings, *, transport: Optional[Transport] = None) -> "Client":
        return cls(
            settings.base_url,
            embed_endpoint=settings.endpoints.get("embed"),
            rerank_endpoint=settings.endpoints.get("rerank"),
            predict_endpoint=settings.endpoints.get("predict"),
            api_key=settings.api_key,
            transport=transport,
        )

    @classmethod
    def from_env(cls, *, transport: Optional[Transport] = None, **overrides: Any) -> "Client":
        """Build from ``TEI_BASE_URL`` (default ``http://127.0.0.1:8080``) and friends."""
        return cls.from_settings(load_provider_settings(cls.provider_name, overrides), transport=transport)

    @property
    def logger(self):
        return self._logger

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

    def post(self, url: str, payload: Any, *, model: Optional[str] = None) -> HttpResponse:
        request = HttpRequest.post_json(url, payload, headers=self.headers(), provider=self.provider_name, model=model)
        return self.transport.send(request)

    def embedding_model(self, model: str = "", ndims: Optional[int] = None) -> EmbeddingModel:
        return EmbeddingModel(self, model, ndims)

    def __repr__(self) -> str:
        return f"Client(endpoints={dict(self.endpoints)!r})"


__all__ = ["Client"]
