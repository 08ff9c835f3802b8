"""Unit tests for the httpx client pool and the httpx-backed transport."""
from __future__ import annotations

import json

import httpx
import pytest

from imagegen_providers.base.errors import ErrorCode, ProviderError
from imagegen_providers.base.http import HttpxTransport, close_all_clients, get_httpx_client
from imagegen_providers.base.interfaces import HttpTransport
from imagegen_providers.base.timeouts import get_timeout_config


def _transport(handler) -> HttpxTransport:
    return HttpxTransport("ModelScope", client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_same_purpose_returns_same_instance():
    assert get_httpx_client("modelscope") is get_httpx_client("modelscope")


def test_different_purpose_returns_different_instance():
    assert get_httpx_client("modelscope") is not get_httpx_client("other")


def test_close_all_clients_resets_pool():
    c1 = get_httpx_client("modelscope")
    close_all_clients()
    assert c1.is_closed
    assert get_httpx_client("modelscope") is not c1


def test_timeout_config_env_override(monkeypatch):
    monkeypatch.setenv("IMAGEGEN_TIMEOUT_HTTP_SECONDS", "12.5")
    monkeypatch.setenv("IMAGEGEN_TIMEOUT_CONNECT_SECONDS", "-3")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 12.5
    assert cfg.connect_timeout_seconds == 10.0


def test_transport_satisfies_protocol():
    assert isinstance(HttpxTransport("ModelScope"), HttpTransport)


def test_send_post_encodes_json_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"task_id": "t-1"})

    resp = _transport(handler).send(
        "POST", "https://api.test/v1/images/generations", {"Authorization": "Bearer abc"}, {"prompt": "p"}
    )
    assert resp.ok and resp.json() == {"task_id": "t-1"}
    assert seen == {
        "method": "POST",
        "url": "https://api.test/v1/images/generations",
        "auth": "Bearer abc",
        "body": {"prompt": "p"},
    }


def test_non_2xx_is_returned_not_raised():
    resp = _transport(lambda request: httpx.Response(429, text="slow down")).send(
        "GET", "https://api.test/v1/tasks/t", {}
    )
    assert resp.status_code == 429
    assert resp.text == "slow down"
    assert not resp.ok


def test_get_sends_no_body():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.content == b""
        return httpx.Response(200, json={})

    assert _transport(handler).send("GET", "https://api.test/v1/tasks/t", {}).ok


@pytest.mark.parametrize(
    "exc",
    [httpx.ConnectError("refused"), httpx.ReadTimeout("slow")],
)
def test_connection_failures_are_wrapped(exc):
    def handler(request: httpx.Request) -> httpx.Response:
        raise exc

    with pytest.raises(ProviderError) as ei:
        _transport(handler).send("GET", "https://api.test/v1/tasks/t", {})
    assert ei.value.code is ErrorCode.PROVIDER_ERROR
    assert ei.value.retryable is True
    assert ei.value.raw is exc
    assert ei.value.provider == "ModelScope"
