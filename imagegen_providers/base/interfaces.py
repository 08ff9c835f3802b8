"""Capability protocols used by image provider adapters.

Adapters depend on these structural interfaces rather than on concrete
implementations so tests can inject scripted transports, fake clocks and
fixed seed sources.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from .dto.generation import GenerationRequest
from .models import GenerationResult, TransportResponse


@runtime_checkable
class HttpTransport(Protocol):
    """Minimal request/response primitive."""

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        """Issue one HTTP request and return its status and body text.

        Implementations raise :class:`ProviderError` for connection-level
        failures; non-2xx responses are returned, not raised.
        """
        ...


@runtime_checkable
class Clock(Protocol):
    """Suspends the calling context between poll attempts."""

    def sleep(self, seconds: float) -> None:  # pragma: no cover - protocol
        ...


@runtime_checkable
class SeedSource(Protocol):
    """Produces a bounded random integer for generation seeds."""

    def next_seed(self) -> int:  # pragma: no cover - protocol
        """Return an integer in ``[0, 2**31 - 1)``."""
        ...


@runtime_checkable
class ImageProvider(Protocol):
    """Minimal interface for text-to-image providers."""

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g., ``"modelscope"``."""
        ...

    def generate(self, request: Union[GenerationRequest, Mapping[str, Any]]) -> GenerationResult:
        """Run one generation to completion and return the image URL and seed.

        Failures are raised as :class:`ProviderError` with a normalized code.
        """
        ...


__all__ = ["HttpTransport", "Clock", "SeedSource", "ImageProvider"]
