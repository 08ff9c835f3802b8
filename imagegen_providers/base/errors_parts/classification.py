"""
Error classification helpers mapping remote failures to normalized errors.

``classify_error_payload`` turns a transport status code plus a best-effort
parsed error body into exactly one :class:`ProviderError`. Status checks are
OR'd with case-insensitive substring heuristics on the resolved message; the
first matching rule wins.
"""
from __future__ import annotations

import asyncio
from typing import Any, Mapping, Union

from ..dto.wire import ErrorPayload
from .error_code import ErrorCode
from .factories import (
    auth_expired,
    auth_invalid,
    provider_error,
    quota_exceeded,
    rate_limited,
)
from .provider_error import ProviderError

_AUTH_STATUSES = (401, 403)
_RATE_LIMIT_STATUSES = (429,)

_AUTH_PATTERNS = ("unauthorized", "invalid token")
_RATE_LIMIT_PATTERNS = ("rate limit", "too many")
_QUOTA_PATTERNS = ("quota", "exceeded", "insufficient")
_EXPIRED_PATTERNS = ("expired",)


def _contains_any(text: str, patterns: tuple[str, ...]) -> bool:
    return any(p in text for p in patterns)


def _coerce_payload(payload: Union[ErrorPayload, Mapping[str, Any], None]) -> ErrorPayload:
    if isinstance(payload, ErrorPayload):
        return payload
    if isinstance(payload, Mapping):
        return ErrorPayload.model_validate(dict(payload))
    return ErrorPayload()


def classify_error_payload(
    status: int,
    payload: Union[ErrorPayload, Mapping[str, Any], None],
    provider: str,
) -> ProviderError:
    """Classify a non-success response into a :class:`ProviderError`.

    Precedence:
        1. 401/403 or auth wording -> ``AUTH_INVALID`` (keeps the message).
        2. 429 or rate-limit wording -> ``RATE_LIMITED``.
        3. Quota wording -> ``QUOTA_EXCEEDED``.
        4. Expiry wording -> ``AUTH_EXPIRED``.
        5. ``PROVIDER_ERROR`` carrying the resolved message verbatim.

    This is a pure mapping and never raises.
    """
    message = _coerce_payload(payload).resolved_message(status)
    lowered = message.lower()

    if status in _AUTH_STATUSES or _contains_any(lowered, _AUTH_PATTERNS):
        return auth_invalid(provider, message, status_code=status)
    if status in _RATE_LIMIT_STATUSES or _contains_any(lowered, _RATE_LIMIT_PATTERNS):
        return rate_limited(provider, status_code=status)
    if _contains_any(lowered, _QUOTA_PATTERNS):
        return quota_exceeded(provider, status_code=status)
    if _contains_any(lowered, _EXPIRED_PATTERNS):
        return auth_expired(provider, status_code=status)
    return provider_error(provider, message, status_code=status)


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an arbitrary exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (sync/async).
        3. ``PROVIDER_ERROR`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    return ErrorCode.PROVIDER_ERROR


__all__ = ["classify_error_payload", "classify_exception"]
