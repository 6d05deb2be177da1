"""Tests for the insurance and deal snapshot HTTP routes."""

import pytest
from fastapi.testclient import TestClient

from dealroom.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestEstimateRoute:
    def test_valid_input(self, client, baseline_input):
        resp = client.post("/api/v1/insurance/estimate", json=baseline_input)
        assert resp.status_code == 200
        body = resp.json()
        assert body["replacementCost"] == 400000
        assert body["annual"] == pytest.approx(2000.0)
        assert body["monthly"] == pytest.approx(2000.0 / 12)
        assert body["breakdown"]["costPerSqft"] == 200
        assert body["breakdown"]["baseRateAdjustments"] == []

    def test_breakdown_keys(self, client, vintage_frame_input):
        resp = client.post("/api/v1/insurance/estimate", json=vintage_frame_input)
        assert resp.status_code == 200
        assert set(resp.json()["breakdown"]) == {
            "replacementCost",
            "costPerSqft",
            "baseRate",
            "baseRateAdjustments",
            "occupancyMultiplier",
            "deductibleMultiplier",
            "riskMultiplier",
            "annual",
            "monthly",
        }

    def test_invalid_sqft_is_400(self, client):
        resp = client.post("/api/v1/insurance/estimate", json={"sqft": -5})
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert detail["field"] == "sqft"
        assert detail["errors"][0]["field"] == "sqft"

    def test_invalid_deductible_is_400(self, client):
        resp = client.post("/api/v1/insurance/estimate", json={"sqft": 1000, "deductible": 3000})
        assert resp.status_code == 400
        assert resp.json()["detail"]["field"] == "deductible"

    def test_non_object_body_is_400(self, client):
        resp = client.post("/api/v1/insurance/estimate", json=[1, 2, 3])
        assert resp.status_code == 400
        assert resp.json()["detail"]["field"] == "input"

    def test_missing_body_is_400(self, client):
        resp = client.post("/api/v1/insurance/estimate")
        assert resp.status_code == 400
        assert resp.json()["detail"]["field"] == "input"

    def test_malformed_json_is_400(self, client):
        resp = client.post(
            "/api/v1/insurance/estimate",
            content=b"{sqft: 1000",
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert detail["field"] == "input"
        assert detail["errors"] == [{"field": "input", "message": detail["message"]}]

    def test_whole_number_float_year(self, client):
        resp = client.post(
            "/api/v1/insurance/estimate",
            content=b'{"sqft": 1500, "yearBuilt": 1940.0, "roofAgeYears": 20.0}',
            headers={"content-type": "application/json"},
        )
        assert resp.status_code == 200
        assert resp.json()["breakdown"]["costPerSqft"] == 230

    def test_null_occupancy_is_400(self, client):
        resp = client.post("/api/v1/insurance/estimate", json={"sqft": 1000, "occupancy": None})
        assert resp.status_code == 400
        assert resp.json()["detail"]["field"] == "occupancy"


class TestDealSnapshotRoute:
    def test_snapshot(self, client, deal_form):
        resp = client.post("/api/v1/deals/insurance-snapshot", json=deal_form)
        assert resp.status_code == 200
        snapshot = resp.json()["snapshot"]
        assert snapshot["monthly"] == pytest.approx(snapshot["annual"] / 12)
        assert snapshot["inputs"]["occupancy"] == "rental"
        assert snapshot["inputs"]["riskFlags"]["flood"] is True
        assert "updatedAt" in snapshot

    def test_no_square_footage(self, client):
        resp = client.post("/api/v1/deals/insurance-snapshot", json={"title": "Vacant lot"})
        assert resp.status_code == 200
        assert resp.json() == {"snapshot": None}


def test_health(client):
    resp = client.get("/health")
    assert resp.json() == {"status": "ok"}
