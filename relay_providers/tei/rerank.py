"""TEI ``/rerank`` (flat convention).

Request ``{"query", "texts", "top_n"?}``; response is a bare list of
``{"index", "score" | "relevance_score", "text"?}`` in the server's order.
``top_n`` is forwarded and also applied client-side after decoding.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..base.decoding import decode_flat_rerank, load_json, raise_for_status, truncate_top_n
from ..base.models import RerankResult
from ..base.observe import observed_operation
from ..base.validation import validate_rerank


def rerank_payload(query: str, texts: List[str], top_n: Optional[int]) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"query": query, "texts": texts}
    if top_n is not None:
        payload["top_n"] = top_n
    return payload


class TeiRerankMixin:
    """Adds :meth:`rerank` to the TEI client."""

    def rerank(self, query: str, texts: Sequence[str], top_n: Optional[int] = None) -> List[RerankResult]:
        """Rank ``texts`` against ``query``; indices refer to ``texts``.

        Raises:
            ValidationError: Blank query, no texts or negative ``top_n``.
            HttpStatusError: Non-success status.
            ResponseDecodeError: Unknown shape or index out of range.
        """
        provider = self.provider_name
        docs = validate_rerank(query, texts, top_n, provider=provider)
        url = self.endpoints["rerank"]
        with observed_operation(
            self.logger,
            operation="rerank",
            provider=provider,
            model=None,
            endpoint=url,
            documents=len(docs),
            top_n=top_n,
        ) as op:
            response = self.post(url, rerank_payload(query, docs, top_n))
            op.status = response.status
            raise_for_status(response.status, response.body, provider=provider)
            payload = load_json(response.body, provider=provider, what="rerank response")
            results = truncate_top_n(decode_flat_rerank(payload, len(docs), provider=provider), top_n)
            op.emitted = len(results)
            return results


__all__ = ["TeiRerankMixin", "rerank_payload"]
