"""ModelScope provider adapter.

Purpose:
    Drives ModelScope's asynchronous image-generation API: validates the
    caller's request, submits a task, polls it to a terminal state and
    returns the image URL together with the seed used.

External dependencies:
    - ``httpx`` through :class:`HttpxTransport` (default transport).
    - ``pydantic`` for request and wire payload validation.

Timeout strategy:
    - Individual HTTP calls are bounded by ``get_timeout_config()``.
    - The overall wait is bounded by ``max_poll_attempts`` x
      ``poll_interval_seconds``; exhausting it raises ``TIMEOUT``.

Retries and error handling:
    - No retries. Every failure is raised immediately as a ``ProviderError``
      with a normalized ``ErrorCode``; only malformed error bodies are
      recovered (into an empty payload) before classification.

Concurrency:
    - The adapter holds only immutable settings and stateless collaborators,
      so one instance may serve concurrent ``generate`` calls.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from ..base.clock import SystemClock
from ..base.dto import GenerationRequest
from ..base.errors import ProviderError, auth_invalid, auth_required
from ..base.http import HttpxTransport
from ..base.interfaces import Clock, HttpTransport, SeedSource
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import GenerationResult
from ..base.seeds import RandomSeedSource
from ..config.defaults import (
    MIN_TOKEN_LENGTH,
    MODELSCOPE_DISPLAY_NAME,
    MODELSCOPE_PROVIDER_ID,
)
from .poller import ResultPoller
from .settings import ModelScopeSettings
from .submitter import TaskSubmitter


class ModelScopeProvider:
    """Image provider for ModelScope's asynchronous generation API.

    Holds immutable settings and stateless collaborators only; every call to
    :meth:`generate` runs its own submit and poll sequence.
    """

    def __init__(
        self,
        settings: Optional[ModelScopeSettings] = None,
        *,
        transport: Optional[HttpTransport] = None,
        clock: Optional[Clock] = None,
        seed_source: Optional[SeedSource] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        """Initialize the adapter.

        Parameters
        ----------
        settings:
            Explicit settings. When omitted they are resolved from the layered
            configuration (defaults, config file, ``MODELSCOPE_*`` env vars)
            with ``base_url``/``model`` applied as overrides.
        transport:
            HTTP capability; defaults to a pooled :class:`HttpxTransport`.
        clock:
            Sleep capability used between polls; defaults to :class:`SystemClock`.
        seed_source:
            Seed generator used when the request has no seed; defaults to
            :class:`RandomSeedSource`.
        """
        if settings is None:
            settings = ModelScopeSettings.load({"base_url": base_url, "model": model})
        self._settings = settings
        self._logger = get_logger("imagegen.modelscope")
        self._seed_source = seed_source or RandomSeedSource()
        transport = transport or HttpxTransport(MODELSCOPE_DISPLAY_NAME, purpose=MODELSCOPE_PROVIDER_ID)
        self._submitter = TaskSubmitter(transport, settings.base_url, self._logger)
        self._poller = ResultPoller(
            transport,
            clock or SystemClock(),
            settings.base_url,
            settings.max_poll_attempts,
            settings.poll_interval_seconds,
            self._logger,
        )

    @property
    def provider_name(self) -> str:
        return MODELSCOPE_PROVIDER_ID

    @property
    def display_name(self) -> str:
        return MODELSCOPE_DISPLAY_NAME

    @property
    def settings(self) -> ModelScopeSettings:
        return self._settings

    def default_model(self) -> Optional[str]:
        return self._settings.default_model

    def generate(self, request: Union[GenerationRequest, Mapping[str, Any]]) -> GenerationResult:
        """Run one generation from submission to final image.

        Parameters:
            request: :class:`GenerationRequest` or a mapping validated into one.

        Returns:
            :class:`GenerationResult` with the image URL and the seed used.

        Raises:
            pydantic.ValidationError: malformed request mapping.
            ProviderError: ``AUTH_REQUIRED`` / ``AUTH_INVALID`` before any
                network call, or any classified submit/poll failure.
        """
        if not isinstance(request, GenerationRequest):
            request = GenerationRequest.model_validate(dict(request))

        token = self._validate_token(request.auth_token)
        seed = self.resolve_seed(request)
        body = self.build_request_body(request, seed)
        ctx = LogContext(provider=MODELSCOPE_PROVIDER_ID, model=body["model"])

        normalized_log_event(self._logger, "generate.start", ctx, phase="start", size=body["size"], seed=seed)
        try:
            task_id = self._submitter.submit(token, body, ctx)
            ctx.task_id = task_id
            url = self._poller.poll(token, task_id, ctx)
        except ProviderError as err:
            if err.model is None:
                err.model = body["model"]
            normalized_log_event(
                self._logger, "generate.error", ctx, phase="finalize", error_code=err.code.value
            )
            raise
        normalized_log_event(self._logger, "generate.end", ctx, phase="finalize")
        return GenerationResult(url=url, seed=seed)

    def resolve_seed(self, request: GenerationRequest) -> int:
        """Return the request's seed, or a fresh one in ``[0, 2**31 - 1)``."""
        return request.seed if request.seed is not None else self._seed_source.next_seed()

    def build_request_body(self, request: GenerationRequest, seed: int) -> Dict[str, Any]:
        """Assemble the JSON body for the task creation call.

        Optional fields appear only when the caller supplied them.
        """
        body: Dict[str, Any] = {
            "prompt": request.prompt,
            "model": request.model or self._settings.default_model,
            "size": request.size,
            "seed": seed,
            "steps": request.steps if request.steps is not None else self._settings.default_steps,
        }
        if request.negative_prompt:
            body["negative_prompt"] = request.negative_prompt
        if request.guidance_scale is not None:
            body["guidance"] = request.guidance_scale
        if request.loras is not None:
            body["loras"] = request.loras
        return body

    def _validate_token(self, raw: Optional[str]) -> str:
        if not raw:
            raise auth_required(MODELSCOPE_DISPLAY_NAME)
        token = raw.strip()
        if len(token) < MIN_TOKEN_LENGTH:
            raise auth_invalid(MODELSCOPE_DISPLAY_NAME, "Token is too short")
        return token


__all__ = ["ModelScopeProvider"]
