"""Per-operation logging and tracing wrapper shared by all adapters.

Every adapter call runs inside :func:`observed_operation`, which emits the
normalized ``<op>.start`` event, opens the gen_ai span, and on exit emits
either ``<op>.end`` (latency, http status, token usage) or ``<op>.error``
(normalized error code). Exceptions are always re-raised unchanged.
"""
from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from opentelemetry.trace import Span

from .errors import ProviderError, classify_exception
from .logging import LogContext, normalized_log_event
from .models import TokenUsage
from .tracing import record_response, record_usage, start_span


@dataclass
class OperationRecord:
    """Mutable outcome filled in by the adapter while the operation runs."""

    span: Span
    ctx: LogContext
    started: float = field(default_factory=time.perf_counter)
    status: Optional[int] = None
    usage: Optional[TokenUsage] = None
    response_id: Optional[str] = None
    response_model: Optional[str] = None
    emitted: Optional[int] = None

    @property
    def latency_ms(self) -> float:
        return round((time.perf_counter() - self.started) * 1000.0, 3)


@contextmanager
def observed_operation(
    logger: logging.Logger,
    *,
    operation: str,
    provider: str,
    model: Optional[str],
    endpoint: str,
    system_instructions: Optional[str] = None,
    activate_span: bool = True,
    **fields: Any,
) -> Iterator[OperationRecord]:
    """Wrap one remote operation with start/end/error events and a span.

    Parameters:
        logger: Adapter logger (child of ``relay``).
        operation: Verb used for event names and ``gen_ai.operation.name``.
        provider: Canonical provider key.
        model: Model id, when the operation has one.
        endpoint: Absolute URL called.
        system_instructions: Preamble attached to the span.
        activate_span: ``False`` inside generators (see ``start_span``).
        **fields: Extra keys for the start event (e.g. ``documents=3``).
    """
    ctx = LogContext(provider=provider, model=model, operation=operation, endpoint=endpoint)
    normalized_log_event(logger, f"{operation}.start", ctx, phase="start", **fields)
    with start_span(
        operation,
        provider=provider,
        model=model,
        system_instructions=system_instructions,
        activate=activate_span,
    ) as span:
        record = OperationRecord(span=span, ctx=ctx)
        try:
            yield record
        except Exception as e:
            code = e.code if isinstance(e, ProviderError) else classify_exception(e)
            normalized_log_event(
                logger,
                f"{operation}.error",
                ctx,
                phase="error",
                error_code=code.value,
                emitted=False,
                http_status=getattr(e, "status", None) or record.status,
                latency_ms=record.latency_ms,
                message=getattr(e, "message", None) or str(e),
            )
            raise
        record_usage(span, record.usage)
        record_response(span, response_id=record.response_id, response_model=record.response_model)
        ctx.response_id = record.response_id
        normalized_log_event(
            logger,
            f"{operation}.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=record.usage,
            http_status=record.status,
            latency_ms=record.latency_ms,
            count=record.emitted,
        )


__all__ = ["OperationRecord", "observed_operation"]
