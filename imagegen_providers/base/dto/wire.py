"""
Pydantic models for the remote task API wire payloads.

Purpose
-------
Parse JSON bodies returned by task-based image APIs into typed objects while
tolerating the loosely-structured shapes these services emit. Unknown keys are
ignored and fields with an unexpected type are dropped instead of failing the
whole payload, so a single odd field never masks the rest of the body.

Fallback semantics
------------------
``parse_error_payload`` never raises: a body that is empty, not JSON, or not a
JSON object yields an empty :class:`ErrorPayload`. Callers then classify on
the HTTP status alone.
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


class ErrorDetail(BaseModel):
    """Nested error object (``{"errors": {"message": ...}}``)."""

    model_config = ConfigDict(extra="ignore")

    message: Optional[str] = None

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)


class ErrorPayload(BaseModel):
    """Best-effort view over a non-2xx response body.

    All fields are optional; any combination may be present.
    """

    model_config = ConfigDict(extra="ignore")

    errors: Optional[ErrorDetail] = None
    error: Optional[str] = None
    message: Optional[str] = None
    code: Optional[str] = None

    @field_validator("errors", mode="before")
    @classmethod
    def _coerce_errors(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else None

    @field_validator("error", "message", "code", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)

    def resolved_message(self, status: int) -> str:
        """Return the most specific message available, else ``"HTTP {status}"``."""
        nested = self.errors.message if self.errors is not None else None
        return nested or self.error or self.message or f"HTTP {status}"


class TaskSubmitResponse(BaseModel):
    """Success body of the task creation call."""

    model_config = ConfigDict(extra="ignore")

    task_id: Optional[str] = None

    @field_validator("task_id", mode="before")
    @classmethod
    def _coerce_task_id(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)


class TaskStatusResponse(BaseModel):
    """Success body of the task status query."""

    model_config = ConfigDict(extra="ignore")

    task_status: Optional[str] = None
    output_images: List[Optional[str]] = []
    error_message: Optional[str] = None

    @field_validator("task_status", "error_message", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return _str_or_none(value)

    @field_validator("output_images", mode="before")
    @classmethod
    def _coerce_images(cls, value: Any) -> List[Optional[str]]:
        # Positions are kept; only the first entry is the result.
        if not isinstance(value, list):
            return []
        return [_str_or_none(item) for item in value]


def load_json_object(text: Optional[str]) -> dict:
    """Decode ``text`` as a JSON object, returning ``{}`` for anything else."""
    if not text:
        return {}
    try:
        data = json.loads(text)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def parse_error_payload(text: Optional[str]) -> ErrorPayload:
    """Parse an error response body best-effort (never raises)."""
    try:
        return ErrorPayload.model_validate(load_json_object(text))
    except ValidationError:  # pragma: no cover - validators coerce every field
        return ErrorPayload()


__all__ = [
    "ErrorDetail",
    "ErrorPayload",
    "TaskSubmitResponse",
    "TaskStatusResponse",
    "load_json_object",
    "parse_error_payload",
]
