"""Task creation step of the ModelScope workflow.

A single POST creates the generation task; there are no retries at this
layer. Non-2xx responses are classified and raised, and a 2xx response without
a usable ``task_id`` is reported as a failed generation.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..base.dto import TaskSubmitResponse, load_json_object, parse_error_payload
from ..base.errors import classify_error_payload, generation_failed
from ..base.interfaces import HttpTransport
from ..base.logging import LogContext, normalized_log_event
from ..base.models import TaskHandle
from ..config.defaults import MODELSCOPE_DISPLAY_NAME

ASYNC_MODE_HEADER = "X-ModelScope-Async-Mode"


class TaskSubmitter:
    """Create a generation task in async mode and return its handle."""

    def __init__(self, transport: HttpTransport, base_url: str, logger: logging.Logger) -> None:
        self._transport = transport
        self._url = f"{base_url}/images/generations"
        self._logger = logger

    def submit(self, token: str, body: Mapping[str, Any], ctx: LogContext) -> TaskHandle:
        """Create a task and return its identifier.

        Raises:
            ProviderError: classified remote failure, or ``GENERATION_FAILED``
                when the response carries no ``task_id``.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
            ASYNC_MODE_HEADER: "true",
        }
        resp = self._transport.send("POST", self._url, headers, body)

        if not resp.ok:
            err = classify_error_payload(resp.status_code, parse_error_payload(resp.text), MODELSCOPE_DISPLAY_NAME)
            normalized_log_event(
                self._logger,
                "submit.error",
                ctx,
                phase="submit",
                error_code=err.code.value,
                http_status=resp.status_code,
            )
            raise err

        data = TaskSubmitResponse.model_validate(load_json_object(resp.text))
        if not data.task_id:
            normalized_log_event(
                self._logger, "submit.error", ctx, phase="submit", error_code="generation_failed"
            )
            raise generation_failed(MODELSCOPE_DISPLAY_NAME, "No task_id returned")

        normalized_log_event(self._logger, "submit.ok", ctx, phase="submit", task_id=data.task_id)
        return data.task_id


__all__ = ["TaskSubmitter", "ASYNC_MODE_HEADER"]
