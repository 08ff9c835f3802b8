"""DTO validation package for providers."""

from .generation import GenerationRequest, MAX_SEED
from .wire import (
    ErrorDetail,
    ErrorPayload,
    TaskStatusResponse,
    TaskSubmitResponse,
    load_json_object,
    parse_error_payload,
)

__all__ = [
    "GenerationRequest",
    "MAX_SEED",
    "ErrorDetail",
    "ErrorPayload",
    "TaskStatusResponse",
    "TaskSubmitResponse",
    "load_json_object",
    "parse_error_payload",
]
