"""Volcengine Ark client.

Ark exposes an OpenAI-compatible API under ``/api/v3`` with bearer auth, so
this client only pins the provider key and base URL::

    client = Client.from_env()            # VOLCENGINE_API_KEY, VOLCENGINE_BASE_URL
    model = client.completion_model(DOUBAO_SEED)
"""
from __future__ import annotations

from typing import ClassVar, Optional

from ..config.defaults import VOLCENGINE_DEFAULT_BASE_URL
from ..openai_compat import Client as OpenAICompatClient


class Client(OpenAICompatClient):
    provider_name: ClassVar[str] = "volcengine"
    default_base_url: ClassVar[Optional[str]] = VOLCENGINE_DEFAULT_BASE_URL


__all__ = ["Client"]
