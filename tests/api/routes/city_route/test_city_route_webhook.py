"""Testes para endpoints do webhook de seleção de rota."""

from __future__ import annotations

import json
from typing import Any

import pytest
from starlette.requests import Request

from api.routes.city_route import webhook
from app.domain.city_route import RequestMetadata
from config.settings import ConfiguredWebhook, N8nSettings, UnconfiguredWebhook

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def _build_request(
    *,
    method: str,
    body: bytes = b"",
    headers: dict[str, str] | None = None,
) -> Request:
    header_items = {"host": "relay.example.com", **(headers or {})}
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in header_items.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "https",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "headers": raw_headers,
        "client": ("203.0.113.7", 51234),
        "server": ("relay.example.com", 443),
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


class FakeRelayUseCase:
    """Use case fake que registra as chamadas."""

    def __init__(self, result: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self._result = result or {"success": True, "route_id": "ROUTE_x"}
        self._error = error
        self.calls: list[tuple[dict[str, Any], RequestMetadata]] = []

    async def execute(self, data: dict[str, Any], request_meta: RequestMetadata) -> dict[str, Any]:
        self.calls.append((data, request_meta))
        if self._error is not None:
            raise self._error
        return self._result


def _assert_cors(response: Any) -> None:
    for name, value in CORS.items():
        assert response.headers[name] == value


@pytest.fixture
def fake_use_case(monkeypatch: pytest.MonkeyPatch) -> FakeRelayUseCase:
    use_case = FakeRelayUseCase()
    monkeypatch.setattr(webhook, "_get_relay_use_case", lambda: use_case)
    return use_case


@pytest.mark.asyncio
async def test_preflight_returns_empty_body_with_cors() -> None:
    response = await webhook.preflight()

    assert response.status_code == 200
    assert response.body == b""
    _assert_cors(response)


@pytest.mark.asyncio
async def test_post_valid_selection_delegates_to_use_case(fake_use_case: FakeRelayUseCase) -> None:
    request = _build_request(
        method="POST",
        body=b'{"action": "route_selected"}',
        headers={"user-agent": "TelegramWebApp/1.0"},
    )

    response = await webhook.receive_city_selection(request)

    assert response.status_code == 200
    assert json.loads(response.body) == {"success": True, "route_id": "ROUTE_x"}
    _assert_cors(response)
    data, request_meta = fake_use_case.calls[0]
    assert data == {"action": "route_selected"}
    assert request_meta == RequestMetadata(
        remote_address="203.0.113.7",
        user_agent="TelegramWebApp/1.0",
        server_name="relay.example.com",
    )


@pytest.mark.asyncio
async def test_post_failure_body_is_still_200(monkeypatch: pytest.MonkeyPatch) -> None:
    failure = {"success": False, "error": "Failed to send city route to n8n", "n8n_error": "HTTP 500"}
    monkeypatch.setattr(webhook, "_get_relay_use_case", lambda: FakeRelayUseCase(result=failure))

    response = await webhook.receive_city_selection(
        _build_request(method="POST", body=b'{"a": 1}')
    )

    assert response.status_code == 200
    assert json.loads(response.body) == failure


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"not json", b"{}", b"[]", b""])
async def test_post_invalid_json_returns_400(
    fake_use_case: FakeRelayUseCase,
    body: bytes,
) -> None:
    response = await webhook.receive_city_selection(_build_request(method="POST", body=body))

    assert response.status_code == 400
    assert json.loads(response.body) == {"success": False, "error": "Invalid JSON data"}
    _assert_cors(response)
    assert fake_use_case.calls == []


@pytest.mark.asyncio
async def test_post_unexpected_error_returns_structured_failure(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        webhook,
        "_get_relay_use_case",
        lambda: FakeRelayUseCase(error=RuntimeError("boom")),
    )

    response = await webhook.receive_city_selection(
        _build_request(method="POST", body=b'{"action": "route_selected"}')
    )
    payload = json.loads(response.body)

    assert response.status_code == 200
    assert payload["success"] is False
    assert payload["error"] == "Failed to send city route to n8n"
    assert payload["n8n_error"] == "internal_error"
    assert payload["received_data"] == {"action": "route_selected"}
    _assert_cors(response)


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE"])
async def test_other_methods_return_405(method: str) -> None:
    response = await webhook.reject_method(_build_request(method=method, body=b'{"a": 1}'))

    assert response.status_code == 405
    assert json.loads(response.body) == {"success": False, "error": "Only POST method allowed"}
    _assert_cors(response)


@pytest.mark.asyncio
async def test_get_with_body_returns_405() -> None:
    response = await webhook.diagnostic_page(_build_request(method="GET", body=b'{"a": 1}'))

    assert response.status_code == 405
    assert json.loads(response.body)["error"] == "Only POST method allowed"


@pytest.mark.asyncio
async def test_get_without_body_renders_diagnostic_page(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        webhook,
        "get_n8n_settings",
        lambda: N8nSettings(webhook=ConfiguredWebhook(url="https://n8n.example.com/w")),
    )

    response = await webhook.diagnostic_page(_build_request(method="GET"))
    html = response.body.decode("utf-8")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Webhook Test Page - City Selection" in html
    assert 'class="status success"' in html


@pytest.mark.asyncio
async def test_get_page_warns_when_webhook_unconfigured(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        webhook,
        "get_n8n_settings",
        lambda: N8nSettings(webhook=UnconfiguredWebhook(reason="placeholder")),
    )

    response = await webhook.diagnostic_page(_build_request(method="GET"))

    assert 'class="status warning"' in response.body.decode("utf-8")
