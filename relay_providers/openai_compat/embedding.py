"""Embeddings over an OpenAI-compatible ``/embeddings`` endpoint."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..base.constants import MAX_EMBEDDING_DOCUMENTS
from ..base.decoding import (
    OpenAIEmbeddingResponse,
    check_count,
    decode_envelope,
    load_json,
    ordered_vectors,
    raise_for_status,
    usage_from_shape,
)
from ..base.models import Embedding
from ..base.observe import observed_operation
from ..base.validation import validate_documents

if TYPE_CHECKING:
    from .client import Client


class EmbeddingModel:
    """Embedding model bound to a :class:`Client`.

    Parameters:
        client: Owning client.
        model: Model id.
        ndims: Requested output dimensions; sent as ``dimensions`` only when > 0.
    """

    MAX_DOCUMENTS = MAX_EMBEDDING_DOCUMENTS

    def __init__(self, client: "Client", model: str, ndims: Optional[int] = None) -> None:
        self.client = client
        self.model = model
        self.ndims = ndims or 0

    @property
    def provider_name(self) -> str:
        return self.client.provider_name

    def create_embedding_request(self, documents: List[str]) -> Dict[str, Any]:
        body: Dict[str, Any] = {"model": self.model, "input": documents}
        if self.ndims > 0:
            body["dimensions"] = self.ndims
        return body

    def embed_texts(self, documents: Sequence[str]) -> List[Embedding]:
        """Embed ``documents``; results are in input order, one per document.

        Raises:
            ValidationError: Empty input or more than ``MAX_DOCUMENTS`` documents.
            HttpStatusError / ProviderReportedError: Provider rejected the call.
            ResponseDecodeError: Unknown shape, bad indices or count mismatch.
        """
        docs = validate_documents(documents, provider=self.provider_name, model=self.model, max_documents=self.MAX_DOCUMENTS)
        url = self.client.url("/embeddings")
        with observed_operation(
            self.client.logger,
            operation="embeddings",
            provider=self.provider_name,
            model=self.model,
            endpoint=url,
            documents=len(docs),
        ) as op:
            response = self.client.post(url, self.create_embedding_request(docs), model=self.model)
            op.status = response.status
            raise_for_status(response.status, response.body, provider=self.provider_name, model=self.model)
            payload = load_json(response.body, provider=self.provider_name, what="embeddings")
            parsed: OpenAIEmbeddingResponse = decode_envelope(
                payload,
                OpenAIEmbeddingResponse.model_validate,
                provider=self.provider_name,
                status=response.status,
                model=self.model,
                what="embeddings",
            )
            check_count(parsed.data, docs, provider=self.provider_name, model=self.model)
            vectors = ordered_vectors(parsed, provider=self.provider_name)
            op.usage = usage_from_shape(parsed.usage)
            op.response_model = parsed.model
            op.emitted = len(vectors)
            return [Embedding(document=doc, vec=vec) for doc, vec in zip(docs, vectors)]

    def embed_text(self, document: str) -> Embedding:
        return self.embed_texts([document])[0]


__all__ = ["EmbeddingModel"]
