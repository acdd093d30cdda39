"""Canonical token usage counters."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class TokenUsage:
    """Token accounting for one call.

    ``output_tokens`` is derived as ``total - input`` and never negative.
    """

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_totals(cls, input_tokens: Optional[int], total_tokens: Optional[int]) -> "TokenUsage":
        prompt = max(0, int(input_tokens or 0))
        total = max(0, int(total_tokens or 0))
        return cls(input_tokens=prompt, output_tokens=max(0, total - prompt), total_tokens=total)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


__all__ = ["TokenUsage"]
