"""Adapters shared by providers exposing an OpenAI-compatible HTTP API.

Provider packages (``volcengine``, ``bailian``) subclass :class:`Client`
and only contribute their base URL, provider key and model constants.
"""

from .client import Client
from .completion import CompletionModel, build_messages, tool_choice_value
from .embedding import EmbeddingModel
from .streaming import stream_completion

__all__ = [
    "Client",
    "CompletionModel",
    "EmbeddingModel",
    "build_messages",
    "stream_completion",
    "tool_choice_value",
]
