"""Testes do normalizer de seleção de cidades."""

from __future__ import annotations

from datetime import datetime

import pytest

from api.normalizers.city_selection import (
    CityRouteNormalizer,
    classify_route_scope,
    normalize_city_selection,
)
from app.domain.city_route import RequestMetadata

FIXED_NOW = datetime(2026, 10, 18, 10, 30, 0)

REQUEST_META = RequestMetadata(
    remote_address="203.0.113.7",
    user_agent="Mozilla/5.0 (Telegram)",
    server_name="relay.example.com",
)


def _selection(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "action": "route_selected",
        "route_type": "city_to_city",
        "origin": {
            "country": {"name": "Iran", "code": "IR"},
            "city": {"name": "Tehran", "code": "THR", "population": 8693706},
        },
        "destination": {
            "country": {"name": "Turkey", "code": "TR"},
            "city": {"name": "Istanbul", "code": "IST", "population": 15462452},
        },
        "display_text": "تهران ← استانبول",
        "display_text_en": "Tehran → Istanbul",
        "telegram_user": {"id": 42, "first_name": "Sara"},
    }
    data.update(overrides)
    return data


class TestNormalizeCitySelection:
    """Montagem do envelope canônico."""

    def test_full_selection_builds_flattened_route(self) -> None:
        event = normalize_city_selection(_selection(), REQUEST_META, FIXED_NOW)
        payload = event.to_dict()

        assert payload["event_type"] == "city_route_selection"
        assert payload["timestamp"] == "2026-10-18 10:30:00"
        assert payload["server_time"] == int(FIXED_NOW.timestamp())
        assert payload["source"] == "telegram_web_app"
        assert payload["action"] == "route_selected"
        assert payload["route_type"] == "city_to_city"
        assert payload["route"] == {
            "origin_country": "Iran",
            "origin_country_code": "IR",
            "origin_city": "Tehran",
            "origin_city_code": "THR",
            "origin_city_population": 8693706,
            "destination_country": "Turkey",
            "destination_country_code": "TR",
            "destination_city": "Istanbul",
            "destination_city_code": "IST",
            "destination_city_population": 15462452,
            "display_text": "تهران ← استانبول",
            "display_text_en": "Tehran → Istanbul",
        }
        assert payload["route_type_detailed"] == "international"
        assert payload["telegram_user"] == {"id": 42, "first_name": "Sara"}

    def test_key_order_matches_workflow_contract(self) -> None:
        payload = normalize_city_selection(_selection(), REQUEST_META, FIXED_NOW).to_dict()

        assert list(payload) == [
            "event_type",
            "timestamp",
            "server_time",
            "source",
            "action",
            "route_type",
            "route",
            "route_type_detailed",
            "telegram_user",
            "metadata",
        ]

    def test_metadata_uses_request_metadata(self) -> None:
        payload = normalize_city_selection(_selection(), REQUEST_META, FIXED_NOW).to_dict()

        assert payload["metadata"] == {
            "ip_address": "203.0.113.7",
            "user_agent": "Mozilla/5.0 (Telegram)",
            "server_name": "relay.example.com",
            "processed_at": "2026-10-18 10:30:00",
        }

    def test_client_ip_address_takes_precedence(self) -> None:
        event = normalize_city_selection(
            _selection(ip_address="198.51.100.1"), REQUEST_META, FIXED_NOW
        )

        assert event.metadata.ip_address == "198.51.100.1"

    def test_missing_request_metadata_defaults_to_unknown(self) -> None:
        event = normalize_city_selection(_selection(), RequestMetadata(), FIXED_NOW)

        assert event.metadata.ip_address == "unknown"
        assert event.metadata.user_agent == "unknown"
        assert event.metadata.server_name == "unknown"

    def test_minimal_selection_applies_defaults(self) -> None:
        payload = normalize_city_selection({"foo": "bar"}, REQUEST_META, FIXED_NOW).to_dict()

        assert payload["source"] == "telegram_web_app"
        assert payload["action"] == "unknown"
        assert payload["route_type"] == "unknown"
        assert "route" not in payload
        assert "route_type_detailed" not in payload
        assert "telegram_user" not in payload

    def test_client_source_is_preserved(self) -> None:
        event = normalize_city_selection(_selection(source="bot_menu"), REQUEST_META, FIXED_NOW)

        assert event.source == "bot_menu"

    def test_route_requires_both_endpoints(self) -> None:
        data = _selection()
        del data["destination"]

        payload = normalize_city_selection(data, REQUEST_META, FIXED_NOW).to_dict()

        assert "route" not in payload
        assert "route_type_detailed" not in payload

    def test_partial_endpoints_fill_unknown(self) -> None:
        data = _selection(origin={"city": {"name": "Shiraz"}}, destination={})

        route = normalize_city_selection(data, REQUEST_META, FIXED_NOW).to_dict()["route"]

        assert route["origin_city"] == "Shiraz"
        assert route["origin_city_code"] == "unknown"
        assert route["origin_city_population"] == "unknown"
        assert route["origin_country"] == "unknown"
        assert route["destination_country_code"] == "unknown"
        assert route["destination_city"] == "unknown"

    def test_non_object_nesting_is_treated_as_missing(self) -> None:
        data = _selection(origin="Tehran", destination={"country": "Turkey", "city": None})

        route = normalize_city_selection(data, REQUEST_META, FIXED_NOW).to_dict()["route"]

        assert route["origin_country"] == "unknown"
        assert route["origin_city"] == "unknown"
        assert route["destination_country"] == "unknown"
        assert route["destination_city"] == "unknown"

    def test_missing_display_texts_default_to_empty(self) -> None:
        data = _selection()
        del data["display_text"]
        del data["display_text_en"]

        route = normalize_city_selection(data, REQUEST_META, FIXED_NOW).to_dict()["route"]

        assert route["display_text"] == ""
        assert route["display_text_en"] == ""

    def test_telegram_user_is_copied(self) -> None:
        data = _selection()
        event = normalize_city_selection(data, REQUEST_META, FIXED_NOW)

        data["telegram_user"]["first_name"] = "Changed"  # type: ignore[index]

        assert event.to_dict()["telegram_user"]["first_name"] == "Sara"

    def test_same_input_same_clock_is_deterministic(self) -> None:
        first = normalize_city_selection(_selection(), REQUEST_META, FIXED_NOW).to_dict()
        second = normalize_city_selection(_selection(), REQUEST_META, FIXED_NOW).to_dict()

        assert first == second


class TestClassifyRouteScope:
    """Classificação domestic/international."""

    @pytest.mark.parametrize(
        ("origin_code", "destination_code", "expected"),
        [
            ("IR", "IR", "domestic"),
            ("IR", "TR", "international"),
            ("ir", "IR", "international"),
            ("1", 1, "international"),
        ],
    )
    def test_compares_codes_strictly(
        self, origin_code: object, destination_code: object, expected: str
    ) -> None:
        data = {
            "origin": {"country": {"code": origin_code}},
            "destination": {"country": {"code": destination_code}},
        }

        assert classify_route_scope(data) == expected

    def test_both_codes_missing_is_domestic(self) -> None:
        assert classify_route_scope({"origin": {}, "destination": {}}) == "domestic"

    def test_one_code_missing_is_international(self) -> None:
        data = {"origin": {"country": {"code": "IR"}}, "destination": {}}

        assert classify_route_scope(data) == "international"


class TestCityRouteNormalizer:
    """Adapter com relógio injetável."""

    def test_uses_injected_clock(self) -> None:
        normalizer = CityRouteNormalizer(clock=lambda: FIXED_NOW)

        event = normalizer.normalize(_selection(), REQUEST_META)

        assert event.timestamp == "2026-10-18 10:30:00"
        assert event.metadata.processed_at == "2026-10-18 10:30:00"
