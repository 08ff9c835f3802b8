from __future__ import annotations

import pytest
from pydantic import ValidationError

from imagegen_providers.base.dto import GenerationRequest, MAX_SEED, TaskStatusResponse
from imagegen_providers.base.models import GenerationResult, TaskStatus, TransportResponse


def test_minimal_request_is_valid():
    req = GenerationRequest(prompt="a cat", width=512, height=768)
    assert req.size == "512x768"
    assert req.seed is None
    assert req.auth_token is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"prompt": ""},
        {"width": 0},
        {"height": -5},
        {"seed": -1},
        {"seed": MAX_SEED + 1},
        {"steps": 0},
    ],
)
def test_invalid_requests_raise(overrides):
    data = {"prompt": "a cat", "width": 512, "height": 512}
    data.update(overrides)
    with pytest.raises(ValidationError):
        GenerationRequest(**data)


def test_seed_upper_bound_is_inclusive():
    assert GenerationRequest(prompt="p", width=1, height=1, seed=MAX_SEED).seed == MAX_SEED


def test_token_is_not_validated_or_shown_in_repr():
    req = GenerationRequest(prompt="p", width=1, height=1, auth_token="x")
    assert req.auth_token == "x"
    assert "auth_token" not in repr(req)


def test_task_status_from_wire():
    assert TaskStatus.from_wire("SUCCEED") is TaskStatus.SUCCEEDED
    assert TaskStatus.from_wire("SUCCEEDED") is TaskStatus.SUCCEEDED
    assert TaskStatus.from_wire("running") is TaskStatus.RUNNING
    assert TaskStatus.from_wire("FAILED") is TaskStatus.FAILED
    assert TaskStatus.from_wire("QUEUED") is TaskStatus.UNKNOWN
    assert TaskStatus.from_wire(None) is TaskStatus.UNKNOWN
    assert TaskStatus.SUCCEEDED.is_terminal and TaskStatus.FAILED.is_terminal
    assert not TaskStatus.PENDING.is_terminal


def test_task_status_response_filters_odd_shapes():
    data = TaskStatusResponse.model_validate({"task_status": 3, "output_images": ["a", 1, "b"]})
    assert data.task_status is None
    assert data.output_images == ["a", None, "b"]
    assert TaskStatusResponse.model_validate({"output_images": "x"}).output_images == []


def test_transport_response_ok_range():
    assert TransportResponse(200).ok
    assert TransportResponse(204).ok
    assert not TransportResponse(301).ok
    assert not TransportResponse(429).ok
    assert TransportResponse(200, '{"a": 1}').json() == {"a": 1}


def test_generation_result_to_dict():
    assert GenerationResult(url="http://x/img.png", seed=7).to_dict() == {"url": "http://x/img.png", "seed": 7}
