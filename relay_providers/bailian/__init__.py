"""Alibaba Bailian (DashScope) provider.

Chat and embeddings use the OpenAI-compatible mode; reranking uses the
native DashScope text-rerank service.
"""

from ..config.defaults import (
    BAILIAN_DEFAULT_BASE_URL as BAILIAN_API_BASE_URL,
    DASHSCOPE_RERANK_URL as GTE_RERANK_V2_URL,
    GTE_RERANK_V2,
    QWEN3_MAX,
    TEXT_EMBEDDING_V4,
)
from .client import Client
from .rerank import RerankModel

__all__ = [
    "Client",
    "RerankModel",
    "BAILIAN_API_BASE_URL",
    "GTE_RERANK_V2",
    "GTE_RERANK_V2_URL",
    "QWEN3_MAX",
    "TEXT_EMBEDDING_V4",
]
