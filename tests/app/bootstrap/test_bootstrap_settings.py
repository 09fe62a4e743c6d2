"""Testes do bootstrap: validação de settings e factories."""

from __future__ import annotations

from pathlib import Path

import pytest

import app.bootstrap as bootstrap
from app.bootstrap import (
    create_diagnostic_log,
    create_relay_city_route_use_case,
    validate_runtime_settings,
)
from app.infra.diagnostics import DiagnosticFileLog, NullDiagnosticLog
from app.use_cases.city_route import RelayCityRouteUseCase
from config.settings import (
    BaseSettings,
    ConfiguredWebhook,
    DiagnosticLogSettings,
    N8nSettings,
)
from utils.errors import ConfigurationError


def _patch_settings(
    monkeypatch: pytest.MonkeyPatch,
    *,
    environment: str,
    n8n: N8nSettings,
) -> None:
    monkeypatch.setattr(bootstrap, "get_base_settings", lambda: BaseSettings(environment=environment))
    monkeypatch.setattr(bootstrap, "get_n8n_settings", lambda: n8n)
    monkeypatch.setattr(bootstrap, "get_diagnostic_log_settings", DiagnosticLogSettings)


def test_validate_runtime_settings_allows_missing_webhook_in_development(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_settings(monkeypatch, environment="development", n8n=N8nSettings())

    validate_runtime_settings()


def test_validate_runtime_settings_fails_fast_in_production(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_settings(monkeypatch, environment="production", n8n=N8nSettings())

    with pytest.raises(ConfigurationError, match="N8N_WEBHOOK_URL"):
        validate_runtime_settings()


def test_validate_runtime_settings_passes_with_https_webhook(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _patch_settings(
        monkeypatch,
        environment="staging",
        n8n=N8nSettings(webhook=ConfiguredWebhook(url="https://n8n.example.com/webhook/x")),
    )

    validate_runtime_settings()


def test_create_diagnostic_log_disabled_returns_null() -> None:
    diagnostic_log = create_diagnostic_log(DiagnosticLogSettings(enabled=False))

    assert isinstance(diagnostic_log, NullDiagnosticLog)


def test_create_diagnostic_log_enabled_uses_path(tmp_path: Path) -> None:
    log_path = tmp_path / "city.log"

    diagnostic_log = create_diagnostic_log(DiagnosticLogSettings(path=str(log_path)))

    assert isinstance(diagnostic_log, DiagnosticFileLog)
    assert diagnostic_log.path == log_path


def test_create_relay_city_route_use_case(tmp_path: Path) -> None:
    use_case = create_relay_city_route_use_case(
        n8n_settings=N8nSettings(webhook=ConfiguredWebhook(url="https://n8n.example.com/w")),
        diagnostic_log_settings=DiagnosticLogSettings(path=str(tmp_path / "city.log")),
    )

    assert isinstance(use_case, RelayCityRouteUseCase)
