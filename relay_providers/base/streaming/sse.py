"""Server-sent-event line reader.

Turns the lines of an ``text/event-stream`` body into the ``data`` payload of
each event. Lines may be ``str`` or ``bytes`` and may or may not carry the
``data:`` prefix, matching what ``httpx.Response.iter_lines()`` yields.

Rules:
- consecutive ``data:`` lines of one event are joined with ``"\\n"``;
- a blank line ends an event;
- comment lines (leading ``:``) and other fields (``event:``, ``id:``,
  ``retry:``) are ignored;
- a bare line without a field name is treated as a data line;
- the ``[DONE]`` sentinel ends the stream; nothing after it is yielded.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Union

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL

_IGNORED_FIELDS = ("event:", "id:", "retry:")


def _as_text(line: Union[str, bytes]) -> str:
    if isinstance(line, bytes):
        return line.decode("utf-8", errors="replace")
    return line


def iter_sse_data(lines: Iterable[Union[str, bytes]]) -> Iterator[str]:
    """Yield each event's data payload until ``[DONE]`` or the end of input."""
    buffer: List[str] = []
    for raw in lines:
        line = _as_text(raw).rstrip("\r\n")
        if not line.strip():
            if buffer:
                data = "\n".join(buffer)
                buffer = []
                if data.strip() == SSE_DONE_SENTINEL:
                    return
                yield data
            continue
        if line.startswith(":") or line.startswith(_IGNORED_FIELDS):
            continue
        if line.startswith(SSE_DATA_PREFIX):
            line = line[len(SSE_DATA_PREFIX):]
            if line.startswith(" "):
                line = line[1:]
        buffer.append(line)
    if buffer:
        data = "\n".join(buffer)
        if data.strip() != SSE_DONE_SENTINEL:
            yield data


__all__ = ["iter_sse_data"]
