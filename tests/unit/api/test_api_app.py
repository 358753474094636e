"""HTTP API tests using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from infra.api.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestEstimateEndpoint:
    """POST /api/protein/estimate"""

    def test_custom_factor(self, client):
        resp = client.post("/api/protein/estimate", json={"weight": 80, "use_custom": True, "custom_factor": 1.6})
        body = resp.json()

        assert resp.status_code == 200
        assert body["ok"] is True
        est = body["data"]["estimate"]
        assert est["protein_g"] == 128.0
        assert est["selected_factor"] == 1.6
        assert est["invalid"] is False
        assert body["data"]["summary"] == "Protein recommendation: 128 g/day (42.7 g x 3), 20.5% of 2500 kcal/day"
        assert body["data"]["factor_label"] == "1.6 g/kg"

    def test_pounds_hint(self, client):
        resp = client.post("/api/protein/estimate", json={"weight": 176, "unit": "lb"})
        data = resp.json()["data"]
        assert data["weight_hint"] == "79.8 kg"
        assert data["estimate"]["protein_g"] == 63.9

    def test_defaults_with_empty_body(self, client):
        resp = client.post("/api/protein/estimate", json={})
        assert resp.json()["data"]["estimate"]["protein_g"] == 56.0

    def test_garbage_numbers_are_coerced(self, client):
        resp = client.post("/api/protein/estimate", json={"weight": "abc", "meals": None})
        body = resp.json()

        assert resp.status_code == 200
        assert body["data"]["estimate"]["invalid"] is True
        card = {row["label"]: row["value"] for row in body["data"]["card"]}
        assert card["Protein / day"] == "—"

    def test_zero_calories(self, client):
        resp = client.post("/api/protein/estimate", json={"calories": 0})
        est = resp.json()["data"]["estimate"]
        assert est["protein_percent"] == 0.0
        assert est["percent_applicable"] is False

    def test_huge_weight(self, client):
        resp = client.post("/api/protein/estimate", json={"weight": 1e30})

        assert resp.status_code == 200
        assert resp.json()["data"]["estimate"]["invalid"] is False

    def test_unknown_activity_rejected(self, client):
        resp = client.post("/api/protein/estimate", json={"activity": "couch"})
        assert resp.status_code == 422


class TestPresetEndpoints:
    """Preset catalogue and application."""

    def test_list(self, client):
        presets = client.get("/api/protein/presets").json()["data"]["presets"]
        assert len(presets) == 6
        assert presets[0] == {"key": "rda_adult", "label": "RDA (adult)", "factor": 0.8}

    def test_apply(self, client):
        resp = client.post(
            "/api/protein/preset",
            json={"form": {"weight": 90, "goal": "weight_loss", "activity": "athlete"}, "preset": "strength_hypertrophy"},
        )
        data = resp.json()["data"]

        assert data["form"]["goal"] == "maintenance"
        assert data["form"]["activity"] == "sedentary"
        assert data["form"]["use_custom"] is True
        assert data["result"]["estimate"]["selected_factor"] == 1.6
        assert data["result"]["estimate"]["protein_g"] == 144.0

    def test_unknown_preset(self, client):
        resp = client.post("/api/protein/preset", json={"preset": "mega"})
        body = resp.json()

        assert resp.status_code == 400
        assert body["ok"] is False
        assert body["error"]["code"] == "E_INVALID_INPUT"


class TestReferenceAndReport:
    def test_reference(self, client):
        data = client.get("/api/protein/reference").json()["data"]
        assert len(data["references"]) == 4
        assert data["disclaimer"].startswith("Disclaimer")

    def test_report(self, client):
        resp = client.post("/api/protein/report", json={"weight": 80, "goal": "pregnancy"})

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert "Goal: pregnancy" in resp.text
        assert "88 g" in resp.text
