"""TEI ``/predict`` (sequence classification).

Request ``{"inputs": "text"}`` or ``{"inputs": [...]}``. Accepted response
shapes, tried in order: ``{"items": [{label, score}]}``,
``{"predictions": [{label, score}]}`` and ``{"labels": [...], "scores": [...]}``
whose arrays must have equal length.
"""
from __future__ import annotations

from typing import Sequence, Union

from ..base.decoding import decode_predict, load_json, raise_for_status
from ..base.models import PredictResponse
from ..base.observe import observed_operation
from ..base.validation import validate_inputs


class TeiPredictMixin:
    """Adds :meth:`predict` to the TEI client."""

    def predict(self, inputs: Union[str, Sequence[str]]) -> PredictResponse:
        """Classify ``inputs``; items keep the server's order.

        Raises:
            ValidationError: No inputs.
            HttpStatusError: Non-success status.
            ResponseDecodeError: Unknown shape or labels/scores length mismatch.
        """
        provider = self.provider_name
        items = validate_inputs(inputs, provider=provider)
        url = self.endpoints["predict"]
        body = {"inputs": items[0]} if len(items) == 1 else {"inputs": items}
        with observed_operation(self.logger, operation="predict", provider=provider, model=None, endpoint=url, inputs=len(items)) as op:
            response = self.post(url, body)
            op.status = response.status
            raise_for_status(response.status, response.body, provider=provider)
            payload = load_json(response.body, provider=provider, what="predict response")
            result = decode_predict(payload, provider=provider)
            op.emitted = len(result.items)
            return result


__all__ = ["TeiPredictMixin"]
