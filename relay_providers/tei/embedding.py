"""TEI ``/embed``.

A single document is sent as ``{"inputs": "text"}``, several as
``{"inputs": ["a", "b"]}``. The response is accepted in three shapes, tried
in order: ``{"embeddings": [[...], ...]}``, ``{"embeddings": [...]}`` and a
bare ``[[...], ...]`` array. Exactly one vector per document is required.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..base.constants import MAX_EMBEDDING_DOCUMENTS
from ..base.decoding import check_count, decode_tei_embeddings, load_json, raise_for_status
from ..base.models import Embedding
from ..base.observe import observed_operation
from ..base.validation import validate_documents

if TYPE_CHECKING:
    from .client import Client


def embed_payload(documents: List[str]) -> Dict[str, Any]:
    return {"inputs": documents[0]} if len(documents) == 1 else {"inputs": documents}


class EmbeddingModel:
    """Embedding model bound to a TEI :class:`Client`.

    TEI serves one model per deployment, so ``model`` is only a label for
    logs and spans. ``ndims`` is informational.
    """

    MAX_DOCUMENTS = MAX_EMBEDDING_DOCUMENTS

    def __init__(self, client: "Client", model: str = "", ndims: Optional[int] = None) -> None:
        self.client = client
        self.model = model
        self.ndims = ndims or 0

    def embed_texts(self, documents: Sequence[str]) -> List[Embedding]:
        """Embed ``documents``, returning one :class:`Embedding` per input in order.

        Raises:
            ValidationError: Empty input or more than ``MAX_DOCUMENTS`` documents.
            HttpStatusError: Non-success status.
            ResponseDecodeError: Unknown shape or vector count mismatch.
        """
        provider = self.client.provider_name
        model = self.model or None
        docs = validate_documents(documents, provider=provider, model=model, max_documents=self.MAX_DOCUMENTS)
        url = self.client.endpoints["embed"]
        with observed_operation(
            self.client.logger,
            operation="embeddings",
            provider=provider,
            model=model,
            endpoint=url,
            documents=len(docs),
        ) as op:
            response = self.client.post(url, embed_payload(docs), model=model)
            op.status = response.status
            raise_for_status(response.status, response.body, provider=provider, model=model)
            payload = load_json(response.body, provider=provider, what="embeddings")
            vectors = decode_tei_embeddings(payload, provider=provider)
            check_count(vectors, docs, provider=provider, model=model)
            op.emitted = len(vectors)
            return [Embedding(document=doc, vec=vec) for doc, vec in zip(docs, vectors)]

    def embed_text(self, document: str) -> Embedding:
        return self.embed_texts([document])[0]


__all__ = ["EmbeddingModel", "embed_payload"]
