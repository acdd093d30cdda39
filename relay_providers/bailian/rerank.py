"""DashScope text rerank (``gte-rerank-v2``).

Wire format (nested convention)::

    POST <rerank_url>
    {"model": ..., "input": {"query": ..., "documents": [...]},
     "parameters": {"return_documents": bool, "top_n"?: int}}

    200 {"output": {"results": [{"index", "relevance_score",
                                 "document"?: {"text"}}]},
         "usage"?: {"total_tokens"}, "request_id"?}

Failure bodies carry ``{"code", "message", "request_id"}``; the message is
surfaced, falling back to ``"Unknown HTTP error"``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

from ..base.decoding import decode_nested_rerank, load_json, nested_results, raise_for_status, truncate_top_n
from ..base.models import RerankResult, TokenUsage
from ..base.observe import observed_operation
from ..base.validation import validate_rerank

if TYPE_CHECKING:
    from .client import Client

UNKNOWN_HTTP_ERROR = "Unknown HTTP error"


class RerankModel:
    """Rerank model bound to a Bailian :class:`Client`.

    Parameters:
        client: Owning client (supplies the bearer key and transport).
        model: Rerank model id.
        endpoint: Absolute rerank URL, used verbatim.
    """

    def __init__(self, client: "Client", model: str, endpoint: str) -> None:
        self.client = client
        self.model = model
        self.endpoint = endpoint

    @property
    def provider_name(self) -> str:
        return self.client.provider_name

    def create_rerank_request(
        self, query: str, documents: List[str], top_n: Optional[int], return_documents: bool
    ) -> Dict[str, Any]:
        parameters: Dict[str, Any] = {"return_documents": return_documents}
        if top_n is not None:
            parameters["top_n"] = top_n
        return {
            "model": self.model,
            "input": {"query": query, "documents": documents},
            "parameters": parameters,
        }

    def rerank(
        self,
        query: str,
        documents: Sequence[str],
        top_n: Optional[int] = None,
        return_documents: bool = True,
    ) -> List[RerankResult]:
        """Rank ``documents`` against ``query``.

        Results keep the provider's order and the caller's original
        ``index``; with ``top_n`` only the first ``top_n`` are returned.

        Raises:
            ValidationError: Blank query, no documents or negative ``top_n``.
            HttpStatusError: Non-success status.
            ResponseDecodeError: Missing ``output`` or index out of range.
        """
        docs = validate_rerank(query, documents, top_n, provider=self.provider_name, model=self.model)
        body = self.create_rerank_request(query, docs, top_n, return_documents)
        with observed_operation(
            self.client.logger,
            operation="rerank",
            provider=self.provider_name,
            model=self.model,
            endpoint=self.endpoint,
            documents=len(docs),
            top_n=top_n,
        ) as op:
            response = self.client.post(self.endpoint, body, model=self.model)
            op.status = response.status
            raise_for_status(
                response.status,
                response.body,
                provider=self.provider_name,
                model=self.model,
                fallback=UNKNOWN_HTTP_ERROR,
            )
            payload = load_json(response.body, provider=self.provider_name, what="rerank response")
            parsed = decode_nested_rerank(payload, len(docs), provider=self.provider_name)
            results = truncate_top_n(nested_results(parsed), top_n)
            if parsed.usage is not None and parsed.usage.total_tokens is not None:
                op.usage = TokenUsage.from_totals(parsed.usage.total_tokens, parsed.usage.total_tokens)
            op.response_id = parsed.request_id
            op.emitted = len(results)
            return results


__all__ = ["RerankModel", "UNKNOWN_HTTP_ERROR"]
