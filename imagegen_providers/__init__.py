"""imagegen_providers package

Adapters for asynchronous, task-based remote image generation APIs.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Request/result types: :class:`GenerationRequest`, :class:`GenerationResult`
    - Factory: :func:`create`
    - Adapters: :class:`ModelScopeProvider`
"""

from typing import Any

from .base.dto import GenerationRequest
from .base.errors import ErrorCode, ProviderError
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import ImageProvider
from .base.models import GenerationResult, TaskStatus
from .modelscope import ModelScopeProvider, ModelScopeSettings

__version__ = "0.1.0"


def create(provider: str, **kwargs: Any) -> ImageProvider:
    """Return an adapter for ``provider`` (e.g., ``create("modelscope")``)."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = [
    "__version__",
    "ProviderError",
    "ErrorCode",
    "GenerationRequest",
    "GenerationResult",
    "TaskStatus",
    "ImageProvider",
    "ProviderFactory",
    "UnknownProviderError",
    "ModelScopeProvider",
    "ModelScopeSettings",
    "create",
]
