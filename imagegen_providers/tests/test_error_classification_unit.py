from __future__ import annotations

import asyncio

import pytest

from imagegen_providers.base.dto import ErrorPayload, parse_error_payload
from imagegen_providers.base.errors import (
    ErrorCode,
    ProviderError,
    classify_error_payload,
    classify_exception,
)

PROVIDER = "ModelScope"


@pytest.mark.parametrize("status", [401, 403])
def test_auth_statuses_map_to_auth_invalid(status):
    err = classify_error_payload(status, {}, PROVIDER)
    assert err.code is ErrorCode.AUTH_INVALID
    assert err.message == f"HTTP {status}"
    assert err.provider == PROVIDER
    assert err.status_code == status


@pytest.mark.parametrize("text", ["Unauthorized request", "INVALID TOKEN supplied"])
def test_auth_wording_maps_to_auth_invalid_and_keeps_message(text):
    err = classify_error_payload(400, {"message": text}, PROVIDER)
    assert err.code is ErrorCode.AUTH_INVALID
    assert err.message == text


def test_status_429_is_rate_limited_regardless_of_message():
    err = classify_error_payload(429, {"error": "insufficient quota"}, PROVIDER)
    assert err.code is ErrorCode.RATE_LIMITED
    assert err.retryable is True


@pytest.mark.parametrize("text", ["Rate limit hit", "Too many requests"])
def test_rate_limit_wording(text):
    assert classify_error_payload(400, {"error": text}, PROVIDER).code is ErrorCode.RATE_LIMITED


@pytest.mark.parametrize("text", ["insufficient quota", "Monthly QUOTA reached", "limit exceeded"])
def test_quota_wording(text):
    assert classify_error_payload(400, {"error": text}, PROVIDER).code is ErrorCode.QUOTA_EXCEEDED


def test_expired_wording_maps_to_auth_expired():
    err = classify_error_payload(400, {"message": "token has Expired"}, PROVIDER)
    assert err.code is ErrorCode.AUTH_EXPIRED


def test_auth_rule_wins_over_expiry_wording():
    # 401 matches rule 1 before the "expired" heuristic is considered
    err = classify_error_payload(401, {"message": "token expired"}, PROVIDER)
    assert err.code is ErrorCode.AUTH_INVALID


def test_quota_rule_wins_over_expiry_wording():
    err = classify_error_payload(400, {"message": "trial expired: quota exceeded"}, PROVIDER)
    assert err.code is ErrorCode.QUOTA_EXCEEDED


def test_unmatched_message_is_generic_provider_error_verbatim():
    err = classify_error_payload(500, {"message": "Model Tongyi is warming up"}, PROVIDER)
    assert err.code is ErrorCode.PROVIDER_ERROR
    assert err.message == "Model Tongyi is warming up"


def test_message_resolution_order():
    payload = {"errors": {"message": "nested"}, "error": "top-error", "message": "top-message"}
    assert classify_error_payload(500, payload, PROVIDER).message == "nested"
    payload = {"errors": {}, "error": "top-error", "message": "top-message"}
    assert classify_error_payload(500, payload, PROVIDER).message == "top-error"
    assert classify_error_payload(500, {"message": "top-message"}, PROVIDER).message == "top-message"
    assert classify_error_payload(502, {"code": "E1"}, PROVIDER).message == "HTTP 502"


def test_accepts_parsed_payload_and_none():
    parsed = ErrorPayload(error="boom")
    assert classify_error_payload(500, parsed, PROVIDER).message == "boom"
    assert classify_error_payload(503, None, PROVIDER).message == "HTTP 503"


@pytest.mark.parametrize(
    "body",
    ["", "<html>Bad Gateway</html>", "[1, 2]", '"just a string"', "{not json"],
)
def test_parse_error_payload_degrades_to_empty(body):
    assert parse_error_payload(body) == ErrorPayload()


def test_parse_error_payload_drops_wrongly_typed_fields():
    payload = parse_error_payload('{"errors": "flat", "error": {"x": 1}, "message": "kept", "code": 7}')
    assert payload.errors is None
    assert payload.error is None
    assert payload.code is None
    assert payload.message == "kept"


def test_classify_exception():
    e = ProviderError(code=ErrorCode.QUOTA_EXCEEDED, message="nope", provider="x")
    assert classify_exception(e) is ErrorCode.QUOTA_EXCEEDED
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT
    assert classify_exception(RuntimeError("random")) is ErrorCode.PROVIDER_ERROR


def test_provider_error_str_is_compact():
    e = ProviderError(code=ErrorCode.TIMEOUT, message="slow", provider="ModelScope", model="m")
    assert str(e) == "ModelScope:m timeout: slow"
