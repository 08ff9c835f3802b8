"""Unit tests for the task creation step."""
from __future__ import annotations

import logging

import pytest

from imagegen_providers.base.errors import ErrorCode, ProviderError
from imagegen_providers.base.logging import LogContext
from imagegen_providers.modelscope.submitter import ASYNC_MODE_HEADER, TaskSubmitter

from .doubles import ScriptedTransport, respond

BASE = "https://api.example.test/v1"
BODY = {"prompt": "p", "model": "m", "size": "1x1", "seed": 1, "steps": 9}


def _submitter(*script):
    transport = ScriptedTransport(script)
    return TaskSubmitter(transport, BASE, logging.getLogger("imagegen.test.submitter")), transport


def test_submit_returns_task_id_and_sends_expected_request():
    submitter, transport = _submitter(respond(200, {"task_id": "t-123"}))
    assert submitter.submit("secret-token", BODY, LogContext()) == "t-123"

    (call,) = transport.calls
    assert call["method"] == "POST"
    assert call["url"] == f"{BASE}/images/generations"
    assert call["headers"]["Authorization"] == "Bearer secret-token"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["headers"][ASYNC_MODE_HEADER] == "true"
    assert call["body"] == BODY


@pytest.mark.parametrize("body", [{}, {"task_id": ""}, {"task_id": None}, "not json"])
def test_missing_task_id_is_generation_failed(body):
    submitter, _ = _submitter(respond(200, body))
    with pytest.raises(ProviderError) as ei:
        submitter.submit("secret-token", BODY, LogContext())
    assert ei.value.code is ErrorCode.GENERATION_FAILED
    assert ei.value.message == "No task_id returned"


def test_error_response_is_classified():
    submitter, _ = _submitter(respond(400, {"error": "insufficient quota"}))
    with pytest.raises(ProviderError) as ei:
        submitter.submit("secret-token", BODY, LogContext())
    assert ei.value.code is ErrorCode.QUOTA_EXCEEDED
    assert ei.value.status_code == 400


def test_malformed_error_body_falls_back_to_status():
    submitter, transport = _submitter(respond(403, "<html>Forbidden</html>"))
    with pytest.raises(ProviderError) as ei:
        submitter.submit("secret-token", BODY, LogContext())
    assert ei.value.code is ErrorCode.AUTH_INVALID
    assert ei.value.message == "HTTP 403"
    assert len(transport.calls) == 1
