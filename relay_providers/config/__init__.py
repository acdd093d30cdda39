"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (base URLs, endpoint overrides, default models).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional JSON or YAML config file pointed to by
       ``RELAY_PROVIDERS_CONFIG_FILE`` (``.yaml``/``.yml`` use PyYAML)
    3. Environment variables (``<PROVIDER>_API_KEY`` with aliases,
       ``<PROVIDER>_BASE_URL``, ``<PROVIDER>_MODEL``)
    4. In-code overrides passed to the helper
* Hand clients an immutable :class:`ProviderSettings`; request-building code
  never reads the environment itself.

External Config File (Optional)
-------------------------------
Sections are keyed by provider; ``endpoints`` entries are merged
recursively with the defaults. JSON:

```
{
  "tei": {"base_url": "http://tei.internal:8080",
          "endpoints": {"rerank": "http://reranker.internal/rerank"}},
  "bailian": {"model": "qwen3-max"}
}
```

or the same document as YAML:

```
tei:
  base_url: http://tei.internal:8080
  endpoints:
    rerank: http://reranker.internal/rerank
```

Public API
----------
* get_provider_config(provider, overrides=None) -> dict
* load_provider_settings(provider, overrides=None) -> ProviderSettings
* get_model(provider) -> str | None
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml

from ..base.constants import MISSING_API_KEY_ERROR
from ..base.errors import ErrorCode, ProviderError, ValidationError
from ..base.utils.merge import merge_layers
from .defaults import (
    BAILIAN_DEFAULT_BASE_URL,
    BAILIAN_DEFAULT_MODEL,
    DASHSCOPE_RERANK_URL,
    TEI_DEFAULT_BASE_URL,
    VOLCENGINE_DEFAULT_BASE_URL,
    VOLCENGINE_DEFAULT_MODEL,
)
from .env import get_env_var_name, resolve_base_url, resolve_model, resolve_provider_key

CONFIG_FILE_ENV = "RELAY_PROVIDERS_CONFIG_FILE"

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "volcengine": {"base_url": VOLCENGINE_DEFAULT_BASE_URL, "model": VOLCENGINE_DEFAULT_MODEL},
    "bailian": {
        "base_url": BAILIAN_DEFAULT_BASE_URL,
        "model": BAILIAN_DEFAULT_MODEL,
        "endpoints": {"rerank": DASHSCOPE_RERANK_URL},
    },
    "tei": {"base_url": TEI_DEFAULT_BASE_URL},
}

_FILE_CACHE: Optional[Dict[str, Any]] = None


def _load_external_config() -> Dict[str, Any]:
    """Read the JSON or YAML config file once; a missing file yields ``{}``.

    Raises:
        ValidationError: The file exists but does not parse to a mapping.
    """
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        if Path(path).suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        else:
            data = json.loads(text)
    except (ValueError, yaml.YAMLError) as e:
        raise ValidationError(message=f"invalid config file {path}: {e}", provider="config") from e
    if not isinstance(data, dict):
        raise ValidationError(message=f"config file {path} must contain a mapping", provider="config")
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget the cached config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    key, _ = resolve_provider_key(provider)
    if key:
        out["api_key"] = key
    if base_url := resolve_base_url(provider):
        out["base_url"] = base_url
    if model := resolve_model(provider):
        out["model"] = model
    return out


def get_provider_config(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration dict for ``provider``.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    ``None`` values in ``overrides`` are ignored.
    """
    name = (provider or "").lower().strip()
    file_cfg = _load_external_config().get(name)
    return merge_layers(
        DEFAULTS.get(name, {}),
        file_cfg if isinstance(file_cfg, dict) else None,
        _env_overrides(name),
        {k: v for k, v in (overrides or {}).items() if v is not None},
    )


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


@dataclass(frozen=True)
class ProviderSettings:
    """Resolved, immutable settings for one provider client."""

    provider: str
    base_url: str
    api_key: Optional[str] = None
    model: Optional[str] = None
    endpoints: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "endpoints", MappingProxyType(dict(self.endpoints)))

    def require_api_key(self) -> str:
        """Return the API key or raise ``ProviderError(code=AUTH)``."""
        if not self.api_key:
            env_name = get_env_var_name(self.provider) or f"{self.provider.upper()}_API_KEY"
            raise ProviderError(
                code=ErrorCode.AUTH,
                message=f"{MISSING_API_KEY_ERROR}: set {env_name}",
                provider=self.provider,
            )
        return self.api_key


def load_provider_settings(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> ProviderSettings:
    """Resolve :class:`ProviderSettings` for ``provider`` from all layers.

    Raises:
        ValidationError: No base URL could be resolved.
    """
    name = (provider or "").lower().strip()
    cfg = get_provider_config(name, overrides)
    base_url = cfg.get("base_url")
    if not base_url:
        raise ValidationError(message=f"no base_url configured for provider '{name}'", provider=name)
    endpoints = cfg.get("endpoints") or {}
    return ProviderSettings(
        provider=name,
        base_url=str(base_url),
        api_key=cfg.get("api_key") or None,
        model=cfg.get("model"),
        endpoints={k: str(v) for k, v in endpoints.items() if v},
    )


__all__ = [
    "CONFIG_FILE_ENV",
    "DEFAULTS",
    "ProviderSettings",
    "get_provider_config",
    "get_model",
    "load_provider_settings",
    "reset_config_cache",
]
