"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``imagegen_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_error_payload, classify_exception
from .errors_parts.factories import (
    auth_expired,
    auth_invalid,
    auth_required,
    generation_failed,
    provider_error,
    quota_exceeded,
    rate_limited,
    timeout,
)

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_error_payload",
    "classify_exception",
    "auth_required",
    "auth_invalid",
    "auth_expired",
    "rate_limited",
    "quota_exceeded",
    "generation_failed",
    "timeout",
    "provider_error",
]
