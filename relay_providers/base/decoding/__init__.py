"""Response decoding: untagged shape candidates, envelopes and invariants.

Each submodule declares the candidate shapes for one operation and the
structural checks applied once a shape is accepted. All functions are pure.
"""

from .shapes import NoMatch, ShapeCandidate, decode_first, load_json
from .envelope import (
    ApiErrorResponse,
    decode_envelope,
    error_message_from_body,
    extract_error_message,
    http_status_error,
    is_success,
    raise_for_status,
)
from .embedding import check_count, decode_tei_embeddings, OpenAIEmbeddingResponse, ordered_vectors
from .rerank import decode_flat_rerank, decode_nested_rerank, nested_results, truncate_top_n
from .predict import decode_predict
from .completion import CompletionResponseShape, usage_from_payload, usage_from_shape
from .stream import StreamChunkShape, decode_stream_chunk

__all__ = [
    "NoMatch",
    "ShapeCandidate",
    "decode_first",
    "load_json",
    "ApiErrorResponse",
    "decode_envelope",
    "error_message_from_body",
    "extract_error_message",
    "http_status_error",
    "is_success",
    "raise_for_status",
    "check_count",
    "decode_tei_embeddings",
    "OpenAIEmbeddingResponse",
    "ordered_vectors",
    "decode_flat_rerank",
    "decode_nested_rerank",
    "nested_results",
    "truncate_top_n",
    "decode_predict",
    "CompletionResponseShape",
    "usage_from_payload",
    "usage_from_shape",
    "StreamChunkShape",
    "decode_stream_chunk",
]
