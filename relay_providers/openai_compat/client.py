"""Base client for OpenAI-compatible providers.

A client holds the immutable connection facts (base URL, bearer key,
transport) and hands out model objects. It performs no I/O itself beyond
:meth:`post` and :meth:`stream`, which attach auth headers and delegate to the
injected :class:`~relay_providers.base.http.Transport`.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Any, ClassVar, Dict, Iterator, Mapping, Optional

from ..base.endpoints import join_url
from ..base.http import HttpRequest, HttpResponse, HttpxTransport, StreamResponse, Transport
from ..base.logging import get_logger
from ..config import ProviderSettings, load_provider_settings
from .completion import CompletionModel
from .embedding import EmbeddingModel


class Client:
    """Connection to one OpenAI-compatible API.

    Parameters:
        api_key: Bearer token sent on every request.
        base_url: API root; trailing slashes are ignored when joining paths.
        transport: Outbound collaborator; defaults to the pooled httpx transport.
        headers: Extra headers sent on every request.
    """

    provider_name: ClassVar[str] = "openai_compat"
    default_base_url: ClassVar[Optional[str]] = None

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        resolved = base_url or self.default_base_url
        if not resolved:
            raise ValueError(f"{type(self).__name__} requires a base_url")
        self.api_key = api_key
        self.base_url = resolved.rstrip("/")
        self.transport: Transport = transport or HttpxTransport()
        self._extra_headers: Dict[str, str] = dict(headers or {})
        self._logger = get_logger(f"relay.{self.provider_name}")

    @classmethod
    def from_settings(cls, settings: ProviderSettings, *, transport: Optional[Transport] = None) -> "Client":
        """Build from resolved settings; a missing key raises ``ProviderError(AUTH)``."""
        return cls(settings.require_api_key(), settings.base_url, transport=transport)

    @classmethod
    def from_env(cls, *, transport: Optional[Transport] = None, **overrides: Any) -> "Client":
        """Build from defaults, config file and ``<PROVIDER>_*`` environment variables."""
        return cls.from_settings(load_provider_settings(cls.provider_name, overrides), transport=transport)

    @property
    def logger(self):
        return self._logger

    def url(self, path: str) -> str:
        """Absolute URL for ``path`` under the base URL."""
        return join_url(self.base_url, path)

    def headers(self) -> Dict[str, str]:
        out = {"Authorization": f"Bearer {self.api_key}"}
        out.update(self._extra_headers)
        return out

    def build_request(self, url: str, payload: Any, *, model: Optional[str] = None) -> HttpRequest:
        return HttpRequest.post_json(url, payload, headers=self.headers(), provider=self.provider_name, model=model)

    def post(self, url: str, payload: Any, *, model: Optional[str] = None) -> HttpResponse:
        return self.transport.send(self.build_request(url, payload, model=model))

    @contextmanager
    def stream(self, url: str, payload: Any, *, model: Optional[str] = None) -> Iterator[StreamResponse]:
        with self.transport.stream(self.build_request(url, payload, model=model)) as response:
            yield response

    def completion_model(self, model: str) -> CompletionModel:
        return CompletionModel(self, model)

    def embedding_model(self, model: str, ndims: Optional[int] = None) -> EmbeddingModel:
        return EmbeddingModel(self, model, ndims)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r})"


__all__ = ["Client"]
