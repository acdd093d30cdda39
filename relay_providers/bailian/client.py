"""Bailian client.

Chat and embeddings go to the OpenAI-compatible base URL; reranking goes to
a separate absolute DashScope URL held in :attr:`Client.rerank_url`.
"""
from __future__ import annotations

from typing import ClassVar, Mapping, Optional

from ..base.http import Transport
from ..config import ProviderSettings
from ..config.defaults import BAILIAN_DEFAULT_BASE_URL, DASHSCOPE_RERANK_URL, GTE_RERANK_V2
from ..openai_compat import Client as OpenAICompatClient
from .rerank import RerankModel


class Client(OpenAICompatClient):
    """Bailian client.

    Parameters:
        rerank_url: Absolute rerank endpoint, used verbatim.
    """

    provider_name: ClassVar[str] = "bailian"
    default_base_url: ClassVar[Optional[str]] = BAILIAN_DEFAULT_BASE_URL

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        *,
        rerank_url: Optional[str] = None,
        transport: Optional[Transport] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(api_key, base_url, transport=transport, headers=headers)
        self.rerank_url = rerank_url or DASHSCOPE_RERANK_URL

    @classmethod
    def from_settings(cls, settings: ProviderSettings, *, transport: Optional[Transport] = None) -> "Client":
        return cls(
            settings.require_api_key(),
            settings.base_url,
            rerank_url=settings.endpoints.get("rerank"),
            transport=transport,
        )

    def rerank_model(self, model: str = GTE_RERANK_V2, endpoint: Optional[str] = None) -> RerankModel:
        return RerankModel(self, model, endpoint or self.rerank_url)


__all__ = ["Client"]
