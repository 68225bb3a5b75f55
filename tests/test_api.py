"""Tests for the HTTP / MCP tool endpoints."""

import pytest
from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

CSS = "a { color: oklch(1 0 0); }"


class TestHealth:
    def test_health(self):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestConvert:
    @pytest.mark.parametrize(
        "target, expected",
        [("rgb", "rgb(255, 255, 255)"), ("hex", "#ffffff"), ("hsl", "hsl(0deg, 0%, 100%)"), ("hwb", "hwb(0deg 100% 0%)")],
    )
    def test_targets(self, target, expected):
        response = client.post("/convert_oklch_code", json={"code": "oklch(100% 0 0)", "target": target})
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": expected}

    def test_not_a_color(self):
        response = client.post("/convert_oklch_code", json={"code": "rgb(1, 2, 3)", "target": "hex"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid OKLCH color"

    def test_malformed_number(self):
        response = client.post("/convert_oklch_code", json={"code": "oklch(. 0 0)", "target": "hex"})
        assert response.status_code == 400
        assert "Malformed number" in response.json()["detail"]

    def test_unsupported_target(self):
        response = client.post("/convert_oklch_code", json={"code": "oklch(1 0 0)", "target": "lab"})
        assert response.status_code == 422


class TestParse:
    def test_parse(self):
        response = client.post("/parse_oklch_code", json={"code": "oklch(50% 0.2 120 / 25%)"})
        assert response.status_code == 200
        assert response.json() == {"l": 0.5, "c": 0.2, "h": 120.0, "alpha": 0.25}

    def test_parse_invalid(self):
        response = client.post("/parse_oklch_code", json={"code": "oklch(1 2)"})
        assert response.status_code == 400


class TestScan:
    def test_scan(self):
        text = "oklch(0 0 0) and oklch(. 0 0)"
        response = client.post("/scan_oklch_literals", json={"text": text, "target": "hex"})
        assert response.status_code == 200
        literals = response.json()["literals"]
        assert literals[0] == {"literal": "oklch(0 0 0)", "start": 0, "end": 12, "converted": "#000000"}
        assert literals[1]["literal"] == "oklch(. 0 0)"
        assert literals[1]["converted"] is None

    def test_scan_default_target(self):
        response = client.post("/scan_oklch_literals", json={"text": CSS})
        assert response.json()["literals"][0]["converted"] == "rgb(255, 255, 255)"


class TestConvertAt:
    def test_replaces_literal(self):
        offset = CSS.index("oklch") + 2
        response = client.post("/convert_oklch_at", json={"text": CSS, "offset": offset, "target": "hex"})
        assert response.status_code == 200
        assert response.json()["message"] == "a { color: #ffffff; }"

    def test_no_literal_at_offset(self):
        response = client.post("/convert_oklch_at", json={"text": CSS, "offset": 0})
        assert response.status_code == 404

    def test_negative_offset_rejected(self):
        response = client.post("/convert_oklch_at", json={"text": CSS, "offset": -1})
        assert response.status_code == 422
