"""Provider Factory utilities.

Purpose
-------
Centralize creation of adapter instances implementing the ``ImageProvider``
interface. Adapters are imported lazily using ``importlib`` to keep side
effects out of the factory layer.

The factory performs no retries or fallbacks; it either returns an instance
or raises :class:`UnknownProviderError`.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, List, Type


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter constructor rejected the supplied keyword arguments.
    """


def create_provider(provider: str, **kwargs: Any) -> Any:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"modelscope"``)."""

    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "modelscope": {"module": "imagegen_providers.modelscope.client", "class": "ModelScopeProvider"},
    }

    @classmethod
    def supported(cls) -> List[str]:
        return sorted(cls._PROVIDERS)

    @classmethod
    def create(cls, provider: str, **kwargs: Any) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name (case-insensitive).
        **kwargs:
            Adapter-specific constructor kwargs.

        Raises
        ------
        UnknownProviderError
            If the provider is unknown, its module or class cannot be loaded,
            or the constructor rejects ``kwargs``.
        """
        name = (provider or "").lower().strip()
        entry = cls._PROVIDERS.get(name)
        if not entry:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = entry["module"], entry["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:  # pragma: no cover - registry mismatch
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        try:
            return klass(**kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for provider '{provider}': {exc}"
            ) from exc


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
