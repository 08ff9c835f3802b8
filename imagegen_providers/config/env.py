"""imagegen_providers.config.env
=============================

Centralized environment variable mapping and helpers for provider credentials.

Design Notes
------------
- Canonical mapping is defined in ``ENV_MAP``. Providers that accept more than
  one variable name list them in ``ENV_ALIASES`` with the canonical name first.
- Helpers never raise on unknown providers or unset variables; callers decide
  how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Canonical provider -> env var mapping
ENV_MAP: Dict[str, str] = {
    "modelscope": "MODELSCOPE_API_KEY",
}

# Provider -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "modelscope": ("MODELSCOPE_API_KEY", "MODELSCOPE_API_TOKEN"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable environment variable names, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_name)`` for the first non-placeholder key found.

    Returns ``(None, None)`` when no candidate variable holds a usable value.
    """
    for name in get_env_var_candidates(provider):
        value = os.getenv(name)
        if value and value.strip() and not is_placeholder(value):
            return value.strip(), name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_provider_key",
]
