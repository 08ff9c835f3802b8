"""httpx-backed implementation of the ``HttpTransport`` capability.

Non-2xx responses are returned to the caller untouched; only connection-level
failures (DNS, TLS, resets, client-side timeouts) are raised, wrapped in a
``ProviderError`` with the ``PROVIDER_ERROR`` code so callers see a single
exception type.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from ..errors import provider_error
from ..models import TransportResponse
from .client import get_httpx_client


class HttpxTransport:
    """Send requests through a pooled ``httpx.Client``.

    Parameters:
        provider: Display name attached to wrapped transport errors.
        purpose: Pool discriminator passed to :func:`get_httpx_client`.
        client: Explicit client, mainly for tests using ``httpx.MockTransport``.
    """

    def __init__(
        self,
        provider: str,
        *,
        purpose: str = "images",
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._provider = provider
        self._purpose = purpose
        self._client = client

    def _get_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return get_httpx_client(self._purpose)

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[Mapping[str, Any]] = None,
    ) -> TransportResponse:
        try:
            resp = self._get_client().request(
                method,
                url,
                headers=dict(headers),
                json=dict(body) if body is not None else None,
            )
        except httpx.TimeoutException as exc:
            raise provider_error(
                self._provider, f"{method} {url} request timed out", retryable=True, raw=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise provider_error(
                self._provider, f"{method} {url} failed: {exc}", retryable=True, raw=exc
            ) from exc
        return TransportResponse(status_code=resp.status_code, text=resp.text)


__all__ = ["HttpxTransport"]
