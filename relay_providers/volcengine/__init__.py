"""Volcengine Ark provider (OpenAI-compatible chat and embeddings)."""

from ..config.defaults import (
    DOUBAO_SEED,
    TEXT_DOUBAO_EMBEDDING,
    TEXT_DOUBAO_EMBEDDING_LARGE,
    VOLCENGINE_DEFAULT_BASE_URL as VOLCENGINE_API_BASE_URL,
)
from .client import Client

__all__ = [
    "Client",
    "VOLCENGINE_API_BASE_URL",
    "DOUBAO_SEED",
    "TEXT_DOUBAO_EMBEDDING",
    "TEXT_DOUBAO_EMBEDDING_LARGE",
]
