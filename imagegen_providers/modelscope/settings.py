"""Immutable configuration for the ModelScope adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..config import get_provider_config
from ..config.defaults import (
    MODELSCOPE_DEFAULT_BASE_URL,
    MODELSCOPE_DEFAULT_MODEL,
    MODELSCOPE_DEFAULT_STEPS,
    MODELSCOPE_MAX_POLL_ATTEMPTS,
    MODELSCOPE_POLL_INTERVAL_SECONDS,
    MODELSCOPE_PROVIDER_ID,
)


def _coerce_non_empty_str(candidate: Any, fallback: str) -> str:
    """Return ``candidate`` stripped, or ``fallback`` when missing or blank."""
    if candidate is None:
        return fallback
    coerced = str(candidate).strip()
    return coerced or fallback


@dataclass(frozen=True)
class ModelScopeSettings:
    """Static adapter configuration.

    Attributes:
        base_url: API root, without trailing slash.
        max_poll_attempts: Upper bound on status queries per task.
        poll_interval_seconds: Fixed wait between non-terminal status queries.
        default_model: Model used when the request names none.
        default_steps: Step count used when the request specifies none.
    """

    base_url: str = MODELSCOPE_DEFAULT_BASE_URL
    max_poll_attempts: int = MODELSCOPE_MAX_POLL_ATTEMPTS
    poll_interval_seconds: float = MODELSCOPE_POLL_INTERVAL_SECONDS
    default_model: str = MODELSCOPE_DEFAULT_MODEL
    default_steps: int = MODELSCOPE_DEFAULT_STEPS

    def __post_init__(self) -> None:
        if self.max_poll_attempts < 1:
            raise ValueError("max_poll_attempts must be at least 1")
        if self.poll_interval_seconds < 0:
            raise ValueError("poll_interval_seconds must not be negative")
        if self.default_steps < 1:
            raise ValueError("default_steps must be at least 1")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "ModelScopeSettings":
        """Build settings from a merged provider config mapping.

        Numeric values may be strings (as read from the environment).

        Raises:
            ValueError: If a numeric value cannot be parsed or is out of range.
        """
        return cls(
            base_url=_coerce_non_empty_str(cfg.get("base_url"), MODELSCOPE_DEFAULT_BASE_URL),
            max_poll_attempts=int(cfg.get("max_poll_attempts", MODELSCOPE_MAX_POLL_ATTEMPTS)),
            poll_interval_seconds=float(cfg.get("poll_interval_seconds", MODELSCOPE_POLL_INTERVAL_SECONDS)),
            default_model=_coerce_non_empty_str(cfg.get("model"), MODELSCOPE_DEFAULT_MODEL),
            default_steps=int(cfg.get("steps", MODELSCOPE_DEFAULT_STEPS)),
        )

    @classmethod
    def load(cls, overrides: Optional[Mapping[str, Any]] = None) -> "ModelScopeSettings":
        """Resolve settings through the layered provider configuration."""
        return cls.from_config(get_provider_config(MODELSCOPE_PROVIDER_ID, dict(overrides or {})))


__all__ = ["ModelScopeSettings"]
