"""relay_providers.config.defaults
================================

Default base URLs, endpoint overrides and model identifiers for the
supported providers. Plain constants only; nothing here performs I/O or
imports other provider packages.
"""

from __future__ import annotations

# ---- Volcengine Ark (OpenAI-compatible) ----
VOLCENGINE_DEFAULT_BASE_URL = "https://ark.cn-beijing.volces.com/api/v3"
# Chat model
DOUBAO_SEED = "Doubao-Seed-1.6"
# Embedding models
TEXT_DOUBAO_EMBEDDING = "Doubao-embedding"
TEXT_DOUBAO_EMBEDDING_LARGE = "doubao-embedding-large"
VOLCENGINE_DEFAULT_MODEL = DOUBAO_SEED

# ---- Alibaba Bailian / DashScope ----
BAILIAN_DEFAULT_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"
# Rerank lives outside the compatible-mode API, at a fixed absolute URL.
DASHSCOPE_RERANK_URL = "https://dashscope.aliyuncs.com/api/v1/services/rerank/text-rerank/text-rerank/"
QWEN3_MAX = "qwen3-max"
TEXT_EMBEDDING_V4 = "text-embedding-v4"
GTE_RERANK_V2 = "gte-rerank-v2"
BAILIAN_DEFAULT_MODEL = QWEN3_MAX

# ---- Text Embeddings Inference (self-hosted) ----
TEI_DEFAULT_BASE_URL = "http://127.0.0.1:8080"
TEI_OPERATIONS = ("embed", "rerank", "predict")


__all__ = [
    "VOLCENGINE_DEFAULT_BASE_URL",
    "DOUBAO_SEED",
    "TEXT_DOUBAO_EMBEDDING",
    "TEXT_DOUBAO_EMBEDDING_LARGE",
    "VOLCENGINE_DEFAULT_MODEL",
    "BAILIAN_DEFAULT_BASE_URL",
    "DASHSCOPE_RERANK_URL",
    "QWEN3_MAX",
    "TEXT_EMBEDDING_V4",
    "GTE_RERANK_V2",
    "BAILIAN_DEFAULT_MODEL",
    "TEI_DEFAULT_BASE_URL",
    "TEI_OPERATIONS",
]
