"""
Core value types shared by image provider adapters.

These objects are created per ``generate`` call and discarded when the call
returns; nothing here is persisted or shared across invocations.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

# Opaque identifier returned by the remote service for one in-flight job.
TaskHandle = str


class TaskStatus(str, Enum):
    """Task lifecycle states reported by the status endpoint.

    ``UNKNOWN`` covers missing or unrecognized values and is treated as
    non-terminal by pollers.
    """

    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_wire(cls, value: Optional[str]) -> "TaskStatus":
        """Map a raw ``task_status`` value onto the enum.

        The service reports success as ``SUCCEED``; ``SUCCEEDED`` is accepted
        as well.
        """
        if not value:
            return cls.UNKNOWN
        normalized = value.strip().upper()
        if normalized == "SUCCEED":
            return cls.SUCCEEDED
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_terminal(self) -> bool:
        return self in (TaskStatus.SUCCEEDED, TaskStatus.FAILED)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and raw body text returned by an ``HttpTransport``."""

    status_code: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON (raises ``ValueError`` on malformed input)."""
        return json.loads(self.text)


@dataclass(frozen=True)
class GenerationResult:
    """Final outcome of a generation.

    Attributes:
        url: URL of the generated image.
        seed: Seed actually used, echoing the caller's value or the generated one.
    """

    url: str
    seed: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["TaskHandle", "TaskStatus", "TransportResponse", "GenerationResult"]
