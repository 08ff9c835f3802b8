"""Unified configuration layer for image providers.

Merge order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. Optional JSON config file pointed to by ``IMAGEGEN_CONFIG_FILE``
    3. Environment variables (``<PROVIDER>_<FIELD>``, e.g. ``MODELSCOPE_BASE_URL``)
    4. In-code overrides passed to :func:`get_provider_config`

A ``.env`` file (``DOTENV_FILE``, default ``.env``) is read once before the
environment is consulted; it only fills variables that are unset or hold
placeholder values.

External config file structure example::

    {
      "modelscope": {
        "base_url": "https://api-inference.modelscope.cn/v1",
        "model": "Tongyi-MAI/Z-Image-Turbo",
        "max_poll_attempts": 35
      }
    }

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .env import is_placeholder, resolve_provider_key
from .defaults import (
    MODELSCOPE_DEFAULT_BASE_URL,
    MODELSCOPE_DEFAULT_MODEL,
    MODELSCOPE_DEFAULT_STEPS,
    MODELSCOPE_MAX_POLL_ATTEMPTS,
    MODELSCOPE_POLL_INTERVAL_SECONDS,
)


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "modelscope": {
        "base_url": MODELSCOPE_DEFAULT_BASE_URL,
        "model": MODELSCOPE_DEFAULT_MODEL,
        "steps": MODELSCOPE_DEFAULT_STEPS,
        "max_poll_attempts": MODELSCOPE_MAX_POLL_ATTEMPTS,
        "poll_interval_seconds": MODELSCOPE_POLL_INTERVAL_SECONDS,
    },
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "steps": "STEPS",
    "max_poll_attempts": "MAX_POLL_ATTEMPTS",
    "poll_interval_seconds": "POLL_INTERVAL_SECONDS",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("IMAGEGEN_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except ValueError:
        data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file and ``.env`` state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None and val.strip():
            out[field] = val.strip()
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    The ``api_key`` entry falls back to the provider's aliased env vars.
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if not cfg.get("api_key"):
        key, _ = resolve_provider_key(name)
        if key:
            cfg["api_key"] = key

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
]
