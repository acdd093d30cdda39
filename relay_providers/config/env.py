"""relay_providers.config.env
==========================

Environment variable names for provider credentials and base URLs.

Design Notes
------------
- Canonical names live in ``ENV_MAP`` (API key), ``BASE_URL_ENV_MAP`` and
  ``MODEL_ENV_MAP``.
  Providers reachable under a second vendor name list every accepted
  variable in ``ENV_ALIASES``, canonical first, to fix precedence.
- Placeholder values (``changeme``, ``<example>`` ...) count as unset.

Failure Modes
-------------
Helpers never raise; they return ``None`` when nothing usable is set and
callers decide whether that is an error.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

# Canonical provider → API key env var
ENV_MAP: Dict[str, str] = {
    "volcengine": "VOLCENGINE_API_KEY",
    "bailian": "BAILIAN_API_KEY",
    "tei": "TEI_API_KEY",
}

# Provider → base URL env var
BASE_URL_ENV_MAP: Dict[str, str] = {
    "volcengine": "VOLCENGINE_BASE_URL",
    "bailian": "BAILIAN_BASE_URL",
    "tei": "TEI_BASE_URL",
}

# Provider → default model env var
MODEL_ENV_MAP: Dict[str, str] = {
    "volcengine": "VOLCENGINE_MODEL",
    "bailian": "BAILIAN_MODEL",
    "tei": "TEI_MODEL",
}

# Provider → ordered tuple of acceptable key env vars (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "bailian": ("BAILIAN_API_KEY", "DASHSCOPE_API_KEY"),
    "volcengine": ("VOLCENGINE_API_KEY", "ARK_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a credential."""
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_name(provider: str) -> Optional[str]:
    """Return the canonical API key env var for ``provider`` (case-insensitive)."""
    return ENV_MAP.get(provider.lower()) if provider else None


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API key env var names, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(
    provider: str, environ: Optional[Mapping[str, str]] = None
) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first usable key, else ``(None, None)``."""
    env = os.environ if environ is None else environ
    for name in get_env_var_candidates(provider):
        val = env.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def resolve_base_url(provider: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    name = BASE_URL_ENV_MAP.get((provider or "").lower())
    return (env.get(name) or None) if name else None


def resolve_model(provider: str, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    name = MODEL_ENV_MAP.get((provider or "").lower())
    return (env.get(name) or None) if name else None


__all__ = [
    "ENV_MAP",
    "BASE_URL_ENV_MAP",
    "MODEL_ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_name",
    "get_env_var_candidates",
    "resolve_provider_key",
    "resolve_base_url",
    "resolve_model",
]
