"""Text Embeddings Inference (TEI) provider: embed, rerank and predict."""

from ..config.defaults import TEI_DEFAULT_BASE_URL
from .client import Client
from .embedding import EmbeddingModel

__all__ = ["Client", "EmbeddingModel", "TEI_DEFAULT_BASE_URL"]
