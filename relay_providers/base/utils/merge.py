"""Recursive merge over JSON-shaped request documents.

Every adapter composes its request body in layers: the canonical request,
then the caller's ``additional_params``, then any provider-required flags
(for example streaming switches). ``merge`` is the single rule used for each
layer:

- When both sides hold a mapping at the same key, merge them key by key.
- Otherwise (list, scalar, ``None`` or a type mismatch) the overlay value
  replaces the base value wholesale. Lists are never concatenated.
- Keys absent from the overlay keep the base value; nothing is deleted.

Both functions are pure: inputs are not mutated and the result does not
share mutable containers with either input.
"""
from __future__ import annotations

import copy
from typing import Any, Mapping, Optional


def merge(base: Any, overlay: Any) -> Any:
    """Return ``overlay`` merged on top of ``base``.

    Parameters:
        base: JSON-shaped value (mapping, list, str, number, bool, None).
        overlay: JSON-shaped value whose entries take precedence.

    Returns:
        A new value. Mappings are returned as plain ``dict`` preserving base
        key order, with new overlay keys appended in overlay order.
    """
    if isinstance(base, Mapping) and isinstance(overlay, Mapping):
        merged = {k: copy.deepcopy(v) for k, v in base.items()}
        for key, value in overlay.items():
            if key in merged:
                merged[key] = merge(merged[key], value)
            else:
                merged[key] = copy.deepcopy(value)
        return merged
    return copy.deepcopy(overlay)


def merge_layers(base: Mapping[str, Any], *overlays: Optional[Mapping[str, Any]]) -> dict:
    """Fold ``overlays`` onto ``base`` left to right; ``None`` layers are skipped.

    Later layers strictly dominate earlier ones on overlapping keys.
    """
    result: Any = merge({}, base)
    for layer in overlays:
        if layer is None:
            continue
        result = merge(result, layer)
    return result


__all__ = ["merge", "merge_layers"]
