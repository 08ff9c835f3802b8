"""Unit tests for the status polling step."""
from __future__ import annotations

import logging

import pytest

from imagegen_providers.base.errors import ErrorCode, ProviderError
from imagegen_providers.base.logging import LogContext
from imagegen_providers.modelscope.poller import TASK_TYPE, TASK_TYPE_HEADER, ResultPoller

from .doubles import FakeClock, ScriptedTransport, respond

BASE = "https://api.example.test/v1"


def _poller(*script, max_attempts=35, interval=3.0):
    transport = ScriptedTransport(script)
    clock = FakeClock()
    poller = ResultPoller(
        transport, clock, BASE, max_attempts, interval, logging.getLogger("imagegen.test.poller")
    )
    return poller, transport, clock


def _status(value, **extra):
    return respond(200, {"task_status": value, **extra})


def test_returns_first_image_after_pending_states():
    poller, transport, clock = _poller(
        _status("PENDING"),
        _status("RUNNING"),
        _status("SUCCEED", output_images=["http://x/a.png", "http://x/b.png"]),
    )
    assert poller.poll("secret-token", "t-1", LogContext()) == "http://x/a.png"
    assert len(transport.calls) == 3
    assert clock.sleeps == [3.0, 3.0]


def test_sends_expected_request():
    poller, transport, _ = _poller(_status("SUCCEEDED", output_images=["u"]))
    poller.poll("secret-token", "t-9", LogContext())
    (call,) = transport.calls
    assert call["method"] == "GET"
    assert call["url"] == f"{BASE}/tasks/t-9"
    assert call["body"] is None
    assert call["headers"]["Authorization"] == "Bearer secret-token"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["headers"][TASK_TYPE_HEADER] == TASK_TYPE


def test_success_without_images_is_generation_failed():
    poller, _, _ = _poller(_status("SUCCEED", output_images=[]))
    with pytest.raises(ProviderError) as ei:
        poller.poll("secret-token", "t-1", LogContext())
    assert ei.value.code is ErrorCode.GENERATION_FAILED
    assert ei.value.message == "No image in result"


@pytest.mark.parametrize(
    "images",
    [[""], [None, "http://x/b.png"], [7, "http://x/b.png"]],
    ids=["empty-string", "null-first", "non-string-first"],
)
def test_success_with_unusable_first_image_is_generation_failed(images):
    poller, transport, _ = _poller(_status("SUCCEED", output_images=images))
    with pytest.raises(ProviderError) as ei:
        poller.poll("secret-token", "t-1", LogContext())
    assert ei.value.code is ErrorCode.GENERATION_FAILED
    assert ei.value.message == "No image in result"
    assert len(transport.calls) == 1


def test_failed_task_uses_service_message():
    poller, transport, clock = _poller(_status("PENDING"), _status("FAILED", error_message="NSFW content"))
    with pytest.raises(ProviderError) as ei:
        poller.poll("secret-token", "t-1", LogContext())
    assert ei.value.code is ErrorCode.GENERATION_FAILED
    assert ei.value.message == "NSFW content"
    assert len(transport.calls) == 2
    assert clock.sleeps == [3.0]


def test_failed_task_without_message():
    poller, _, _ = _poller(_status("FAILED"))
    with pytest.raises(ProviderError) as ei:
        poller.poll("secret-token", "t-1", LogContext())
    assert ei.value.message == "Task failed"


def test_error_response_stops_polling_immediately():
    poller, transport, _ = _poller(
        _status("PENDING"),
        respond(401, {"errors": {"message": "Invalid token"}}),
        _status("SUCCEED", output_images=["never"]),
    )
    with pytest.raises(ProviderError) as ei:
        poller.poll("secret-token", "t-1", LogContext())
    assert ei.value.code is ErrorCode.AUTH_INVALID
    assert ei.value.message == "Invalid token"
    assert len(transport.calls) == 2


def test_unknown_and_unparseable_statuses_keep_polling():
    poller, transport, _ = _poller(
        _status("QUEUED"),
        respond(200, "garbage"),
        respond(200, {}),
        _status("SUCCEED", output_images=["http://x/ok.png"]),
    )
    assert poller.poll("secret-token", "t-1", LogContext()) == "http://x/ok.png"
    assert len(transport.calls) == 4


def test_exhausting_attempts_raises_timeout_without_extra_call():
    poller, transport, clock = _poller(*[_status("PENDING") for _ in range(35)])
    with pytest.raises(ProviderError) as ei:
        poller.poll("secret-token", "t-1", LogContext())
    assert ei.value.code is ErrorCode.TIMEOUT
    assert len(transport.calls) == 35
    assert clock.sleeps == [3.0] * 35


def test_custom_attempt_budget_and_interval():
    poller, transport, clock = _poller(_status("RUNNING"), _status("RUNNING"), max_attempts=2, interval=0.5)
    with pytest.raises(ProviderError) as ei:
        poller.poll("secret-token", "t-1", LogContext())
    assert ei.value.code is ErrorCode.TIMEOUT
    assert len(transport.calls) == 2
    assert clock.sleeps == [0.5, 0.5]
