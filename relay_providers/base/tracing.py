"""OpenTelemetry span helpers for adapter calls.

Adapters wrap each remote call in a span named ``<operation> <model>`` that
carries the GenAI semantic-convention attributes. Only ``opentelemetry-api``
is required: with no SDK configured the global tracer provider hands out
non-recording spans, so instrumentation costs nothing.

Usage::

    with start_span("chat", provider="volcengine", model=model) as span:
        ...
        record_usage(span, usage)
"""
from __future__ import annotations

from contextlib import contextmanager, nullcontext
from typing import Any, Iterator, Optional

from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind, Status, StatusCode

from .errors import ProviderError

TRACER_NAME = "relay_providers"


def get_tracer(service_name: str = TRACER_NAME) -> trace.Tracer:
    """Return a tracer from the globally configured provider."""
    return trace.get_tracer(service_name)


@contextmanager
def start_span(
    operation: str,
    *,
    provider: str,
    model: Optional[str] = None,
    system_instructions: Optional[str] = None,
    activate: bool = True,
    **attributes: Any,
) -> Iterator[Span]:
    """Open a client span for one adapter operation.

    Exceptions escaping the block are recorded on the span, mark it as an
    error and are re-raised unchanged. ``ProviderError`` codes are attached
    as ``error.type``. Pass ``activate=False`` from generators: the span is
    then not made current, since a suspended generator may be resumed or
    closed from a different context.
    """
    name = f"{operation} {model}" if model else operation
    span = get_tracer().start_span(name, kind=SpanKind.CLIENT)
    span.set_attribute("gen_ai.operation.name", operation)
    span.set_attribute("gen_ai.provider.name", provider)
    if model:
        span.set_attribute("gen_ai.request.model", model)
    if system_instructions:
        span.set_attribute("gen_ai.system_instructions", system_instructions)
    for key, value in attributes.items():
        if value is not None:
            span.set_attribute(key, value)
    scope = (
        trace.use_span(span, end_on_exit=False, record_exception=False, set_status_on_exception=False)
        if activate
        else nullcontext(span)
    )
    try:
        with scope:
            yield span
    except Exception as exc:
        span.record_exception(exc)
        error_type = exc.code.value if isinstance(exc, ProviderError) else type(exc).__name__
        span.set_attribute("error.type", error_type)
        span.set_status(Status(StatusCode.ERROR, str(exc)))
        raise
    finally:
        span.end()


def record_usage(span: Span, usage: Any) -> None:
    """Attach token counts from a ``TokenUsage`` to ``span`` (``None`` is ignored)."""
    if usage is None:
        return
    span.set_attribute("gen_ai.usage.input_tokens", usage.input_tokens)
    span.set_attribute("gen_ai.usage.output_tokens", usage.output_tokens)


def record_response(span: Span, *, response_id: Optional[str] = None, response_model: Optional[str] = None) -> None:
    if response_id:
        span.set_attribute("gen_ai.response.id", response_id)
    if response_model:
        span.set_attribute("gen_ai.response.model", response_model)


__all__ = ["TRACER_NAME", "get_tracer", "start_span", "record_usage", "record_response"]
