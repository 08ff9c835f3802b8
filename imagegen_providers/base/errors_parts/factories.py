"""
Constructors for each error kind in the taxonomy.

Adapters raise through these helpers instead of building ``ProviderError``
instances by hand so default messages stay consistent across providers.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


def auth_required(provider: str) -> ProviderError:
    return ProviderError(
        code=ErrorCode.AUTH_REQUIRED,
        message=f"{provider} requires an API token",
        provider=provider,
    )


def auth_invalid(provider: str, message: Optional[str] = None, *, status_code: Optional[int] = None) -> ProviderError:
    return ProviderError(
        code=ErrorCode.AUTH_INVALID,
        message=message or "Invalid API token",
        provider=provider,
        status_code=status_code,
    )


def auth_expired(provider: str, *, status_code: Optional[int] = None) -> ProviderError:
    return ProviderError(
        code=ErrorCode.AUTH_EXPIRED,
        message="API token has expired",
        provider=provider,
        status_code=status_code,
    )


def rate_limited(provider: str, *, status_code: Optional[int] = None) -> ProviderError:
    return ProviderError(
        code=ErrorCode.RATE_LIMITED,
        message="Rate limit reached, please wait before retrying",
        provider=provider,
        status_code=status_code,
        retryable=True,
    )


def quota_exceeded(provider: str, *, status_code: Optional[int] = None) -> ProviderError:
    return ProviderError(
        code=ErrorCode.QUOTA_EXCEEDED,
        message="Usage quota exceeded",
        provider=provider,
        status_code=status_code,
    )


def generation_failed(provider: str, message: str) -> ProviderError:
    return ProviderError(code=ErrorCode.GENERATION_FAILED, message=message, provider=provider)


def timeout(provider: str) -> ProviderError:
    return ProviderError(
        code=ErrorCode.TIMEOUT,
        message="Generation did not finish before the polling budget ran out",
        provider=provider,
    )


def provider_error(
    provider: str,
    message: str,
    *,
    status_code: Optional[int] = None,
    retryable: bool = False,
    raw: Optional[Exception] = None,
) -> ProviderError:
    return ProviderError(
        code=ErrorCode.PROVIDER_ERROR,
        message=message,
        provider=provider,
        status_code=status_code,
        retryable=retryable,
        raw=raw,
    )


__all__ = [
    "auth_required",
    "auth_invalid",
    "auth_expired",
    "rate_limited",
    "quota_exceeded",
    "generation_failed",
    "timeout",
    "provider_error",
]
