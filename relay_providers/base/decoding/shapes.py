"""Priority-ordered decoding of untagged response shapes.

Providers disagree on how they wrap the same logical payload, and nothing in
the body says which wrapping was used. Decoding is therefore an explicit,
ordered list of candidates: each candidate either returns a value or raises,
and the first candidate that succeeds wins. Order is part of the contract
because shapes can overlap; callers list the most specific shape first.

Candidates are usually pydantic models validated against the already parsed
JSON value (``model_validate``), so a structural mismatch surfaces as a
``pydantic.ValidationError`` whose text is kept for diagnostics.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Sequence, Tuple, TypeVar, Union

from pydantic import BaseModel, StrictFloat, StrictInt, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..errors import ResponseDecodeError

# JSON number; numeric strings are rejected.
Number = Union[StrictFloat, StrictInt]

T = TypeVar("T")


class NoMatch(Exception):
    """Raised by a candidate parser when the payload is not its shape."""


@dataclass(frozen=True)
class ShapeCandidate(Generic[T]):
    """Named parse function tried by :func:`decode_first`."""

    name: str
    parse: Callable[[Any], T]

    @classmethod
    def of(cls, name: str, model: Union[type[BaseModel], Any]) -> "ShapeCandidate[Any]":
        """Build a candidate validating against a pydantic model or type."""
        if isinstance(model, type) and issubclass(model, BaseModel):
            return cls(name=name, parse=model.model_validate)
        adapter = TypeAdapter(model)
        return cls(name=name, parse=adapter.validate_python)


def load_json(body: Union[bytes, str], *, provider: str, what: str = "response") -> Any:
    """Parse a response body into Python JSON values.

    Raises:
        ResponseDecodeError: When the body is not valid JSON; the parser's
            reason is included in the message.
    """
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ResponseDecodeError(
            message=f"Failed to parse {what}: invalid JSON ({e})",
            provider=provider,
            raw=e,
        ) from e


def decode_first(
    payload: Any,
    candidates: Sequence[ShapeCandidate[Any]],
    *,
    provider: str,
    what: str = "response",
) -> Tuple[str, Any]:
    """Return ``(candidate_name, value)`` for the first candidate that parses.

    Parameters:
        payload: Parsed JSON value.
        candidates: Candidates in priority order.
        provider: Provider key used for the error when nothing matches.
        what: Human description of the payload used in the error message.

    Raises:
        ResponseDecodeError: When every candidate rejects the payload. The
            message lists each candidate with its first failure reason.
    """
    failures: Dict[str, str] = {}
    for candidate in candidates:
        try:
            return candidate.name, candidate.parse(payload)
        except PydanticValidationError as e:
            errors = e.errors()
            first = errors[0] if errors else {}
            loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
            failures[candidate.name] = f"{loc}: {first.get('msg', str(e))}"
        except (NoMatch, TypeError, ValueError) as e:
            failures[candidate.name] = str(e) or type(e).__name__
    reasons = "; ".join(f"{name}: {reason}" for name, reason in failures.items())
    raise ResponseDecodeError(
        message=f"Failed to parse {what}: no accepted shape matched ({reasons})",
        provider=provider,
        attempts=failures,
    )


__all__ = ["Number", "NoMatch", "ShapeCandidate", "load_json", "decode_first"]
