"""Endpoint resolution for multi-feature provider clients.

A client is built once with a base URL and optional per-feature overrides.
``resolve_endpoints`` turns those inputs into an immutable
operation-to-URL mapping that is shared read-only by every call made through
the client.

Rules:
    - Trailing slashes on the base URL are trimmed before joining.
    - Derived entries are ``base + "/" + operation``.
    - Overrides are absolute URLs used verbatim (no trimming, no joining).
    - No URL validation happens here; malformed URLs surface from the
      transport when a request is attempted.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from .errors import ValidationError


@dataclass(frozen=True)
class Endpoints(Mapping[str, str]):
    """Immutable mapping from logical operation name to absolute URL.

    Entries are also reachable as attributes (``endpoints.embed``).
    """

    urls: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "urls", MappingProxyType(dict(self.urls)))

    def __getitem__(self, operation: str) -> str:
        return self.urls[operation]

    def __iter__(self) -> Iterator[str]:
        return iter(self.urls)

    def __len__(self) -> int:
        return len(self.urls)

    def __getattr__(self, operation: str) -> str:
        try:
            return self.__dict__["urls"][operation]
        except KeyError:
            raise AttributeError(operation) from None

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.urls.items())))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Endpoints):
            return dict(self.urls) == dict(other.urls)
        if isinstance(other, Mapping):
            return dict(self.urls) == dict(other)
        return NotImplemented


def join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and a relative ``path`` with exactly one slash."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def resolve_endpoints(
    base_url: str,
    operations: Iterable[str],
    overrides: Optional[Mapping[str, Optional[str]]] = None,
) -> Endpoints:
    """Resolve concrete endpoint URLs for ``operations``.

    Parameters:
        base_url: Provider base URL; trailing slashes are ignored.
        operations: Logical operation names (e.g. ``("embed", "rerank")``).
        overrides: Optional ``operation -> absolute URL`` replacements.
            ``None`` values are ignored so callers can pass optional settings
            straight through.

    Returns:
        An :class:`Endpoints` mapping. Resolving twice with the same inputs
        yields equal results.

    Raises:
        ValidationError: When an override names an unknown operation.
    """
    ops = list(operations)
    base = base_url.rstrip("/")
    urls = {op: f"{base}/{op}" for op in ops}
    for op, url in (overrides or {}).items():
        if url is None:
            continue
        if op not in urls:
            raise ValidationError(
                message=f"unknown endpoint override '{op}'; expected one of {ops}",
            )
        urls[op] = url
    return Endpoints(urls)


__all__ = ["Endpoints", "join_url", "resolve_endpoints"]
