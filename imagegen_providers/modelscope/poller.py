"""Status polling step of the ModelScope workflow.

Cadence
-------
Query, then wait ``poll_interval_seconds`` on the injected clock if the task
is not terminal, up to ``max_poll_attempts`` queries. The interval is fixed:
no backoff, no jitter, and no early exit on repeated statuses. Running out of
attempts raises ``TIMEOUT``; the remote task is not cancelled.
"""

from __future__ import annotations

import logging

from ..base.dto import TaskStatusResponse, load_json_object, parse_error_payload
from ..base.errors import classify_error_payload, generation_failed, timeout
from ..base.interfaces import Clock, HttpTransport
from ..base.logging import LogContext, normalized_log_event
from ..base.models import TaskHandle, TaskStatus
from ..config.defaults import MODELSCOPE_DISPLAY_NAME

TASK_TYPE_HEADER = "X-ModelScope-Task-Type"
TASK_TYPE = "image_generation"


class ResultPoller:
    """Poll a submitted task at a fixed interval until it resolves or the budget runs out."""

    def __init__(
        self,
        transport: HttpTransport,
        clock: Clock,
        base_url: str,
        max_attempts: int,
        interval_seconds: float,
        logger: logging.Logger,
    ) -> None:
        self._transport = transport
        self._clock = clock
        self._base_url = base_url
        self._max_attempts = max_attempts
        self._interval = interval_seconds
        self._logger = logger

    def poll(self, token: str, task_id: TaskHandle, ctx: LogContext) -> str:
        """Wait for ``task_id`` to finish and return the first image URL.

        Raises:
            ProviderError: classified remote failure, ``GENERATION_FAILED``
                for a failed task or a success without images, ``TIMEOUT``
                when the attempt budget is exhausted.
        """
        url = f"{self._base_url}/tasks/{task_id}"
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            TASK_TYPE_HEADER: TASK_TYPE,
        }

        for attempt in range(1, self._max_attempts + 1):
            resp = self._transport.send("GET", url, headers)

            if not resp.ok:
                err = classify_error_payload(
                    resp.status_code, parse_error_payload(resp.text), MODELSCOPE_DISPLAY_NAME
                )
                normalized_log_event(
                    self._logger,
                    "poll.error",
                    ctx,
                    phase="poll",
                    attempt=attempt,
                    error_code=err.code.value,
                    http_status=resp.status_code,
                )
                raise err

            data = TaskStatusResponse.model_validate(load_json_object(resp.text))
            status = TaskStatus.from_wire(data.task_status)
            normalized_log_event(
                self._logger, "poll.status", ctx, phase="poll", attempt=attempt, status=status.value
            )

            if status is TaskStatus.SUCCEEDED:
                image_url = data.output_images[0] if data.output_images else None
                if not image_url:
                    raise generation_failed(MODELSCOPE_DISPLAY_NAME, "No image in result")
                return image_url

            if status is TaskStatus.FAILED:
                raise generation_failed(MODELSCOPE_DISPLAY_NAME, data.error_message or "Task failed")

            self._clock.sleep(self._interval)

        normalized_log_event(
            self._logger,
            "poll.timeout",
            ctx,
            phase="poll",
            attempt=self._max_attempts,
            error_code="timeout",
        )
        raise timeout(MODELSCOPE_DISPLAY_NAME)


__all__ = ["ResultPoller", "TASK_TYPE_HEADER", "TASK_TYPE"]
