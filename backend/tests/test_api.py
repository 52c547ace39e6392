"""Tests for the FastAPI application."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from lcc_measure.api.app import create_app
from lcc_measure.config import Settings
from lcc_measure.measure import AddCostPerFloorAreaToBuilding
from lcc_measure.units import ft2_to_m2

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def client() -> TestClient:
    settings = Settings()
    app = create_app(measure=AddCostPerFloorAreaToBuilding(settings), settings=settings)
    return TestClient(app)


def _building_payload(existing: int = 0) -> dict[str, Any]:
    return {
        "name": "API Building",
        "floor_area_m2": ft2_to_m2(10_000.0),
        "cost_records": [
            {
                "name": f"Existing {i}",
                "category": "Replacement",
                "cost": 12.0,
                "repeat_period_years": 20,
                "years_from_start": 10,
            }
            for i in range(existing)
        ],
    }


# ---------------------------------------------------------------------------
# GET endpoints
# ---------------------------------------------------------------------------


class TestHealth:
    def test_ok(self, client: TestClient) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}


class TestDescribeMeasure:
    def test_arguments_listed(self, client: TestClient) -> None:
        data = client.get("/api/measure").json()
        assert data["name"] == "Add Cost per Floor Area to Building"
        by_name = {a["name"]: a for a in data["arguments"]}
        assert by_name["expected_life"]["default"] == 20
        assert by_name["material_cost_ip"]["units"] == "$/ft^2"
        assert by_name["remove_costs"]["kind"] == "bool"

    def test_lazy_measure_from_settings(self) -> None:
        app = create_app(settings=Settings(legacy_lifecycle_checks=True))
        with TestClient(app) as c:
            assert c.get("/api/measure").status_code == 200
        assert app.state.measure.settings.legacy_lifecycle_checks is True


class TestSampleRun:
    def test_reference_scenario(self, client: TestClient) -> None:
        data = client.get("/api/sample-run").json()
        assert data["result"]["outcome"] == "success"
        assert data["result"]["initial_condition"] == "The Building has 1 lifecycle cost objects."
        assert len(data["building"]["cost_records"]) == 3
        assert data["summary"]["final_condition"].endswith(
            "Material and Installation costs are $20,000."
        )


# ---------------------------------------------------------------------------
# POST /api/apply
# ---------------------------------------------------------------------------


class TestApply:
    def test_creates_records(self, client: TestClient) -> None:
        response = client.post(
            "/api/apply",
            json={
                "building": _building_payload(existing=1),
                "arguments": {"material_cost_ip": 2.0, "om_cost_ip": 0.5},
            },
        )
        assert response.status_code == 200
        data = response.json()
        records = data["building"]["cost_records"]
        assert sorted(r["category"] for r in records) == [
            "Construction",
            "Maintenance",
            "Salvage",
        ]
        construction = next(r for r in records if r["category"] == "Construction")
        assert construction["total_cost"] == pytest.approx(20_000.0)
        assert construction["name"] == "LCC_Mat - Building - Life Cycle Costs"

    def test_not_applicable(self, client: TestClient) -> None:
        response = client.post(
            "/api/apply",
            json={"building": _building_payload(), "arguments": {}},
        )
        assert response.status_code == 200
        assert response.json()["result"]["outcome"] == "not_applicable"

    def test_invalid_lifecycle_returns_422(self, client: TestClient) -> None:
        response = client.post(
            "/api/apply",
            json={
                "building": _building_payload(existing=1),
                "arguments": {"material_cost_ip": 1.0, "expected_life": 0},
            },
        )
        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["result"]["outcome"] == "fail"
        assert detail["summary"]["errors"] == [
            "Choose an integer greater than 0 and less than or equal to 100 for Expected Life."
        ]
        assert len(detail["building"]["cost_records"]) == 1

    def test_malformed_building_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/apply",
            json={"building": {"floor_area_m2": -5}, "arguments": {}},
        )
        assert response.status_code == 422
