"""Tests for the FastAPI routes."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from dhc_abox.api.app import create_app
from dhc_abox.core.config import OntologyConfig

DESIGN_ID = "DE-80331-MAR12-01"


@pytest.fixture
def client(config: OntologyConfig) -> TestClient:
    return TestClient(create_app(config))


class TestHealthRoutes:
    def test_health_returns_ok(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_liveness_returns_ok(self, client: TestClient) -> None:
        resp = client.get("/healthz/live")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestCompileRoute:
    def test_compile_returns_both_serializations(self, client: TestClient, house_workspace: dict[str, Any]) -> None:
        resp = client.post(f"/designs/{DESIGN_ID}/compile", json=house_workspace)
        assert resp.status_code == 200, resp.text
        body = resp.json()
        assert body["design_id"] == DESIGN_ID
        assert body["ttl"].startswith("@prefix dhc:")
        assert len(body["graph"]["nodes"]) == 7
        node_ids = {node["id"] for node in body["graph"]["nodes"]}
        assert all(link["target"] in node_ids for link in body["graph"]["links"])

    def test_compile_normalizes_design_id(self, client: TestClient, house_workspace: dict[str, Any]) -> None:
        resp = client.post(f"/designs/{DESIGN_ID.lower()}/compile", json=house_workspace)
        assert resp.status_code == 200
        assert resp.json()["design_id"] == DESIGN_ID

    def test_compile_rejects_invalid_design_id(self, client: TestClient, house_workspace: dict[str, Any]) -> None:
        resp = client.post("/designs/house-1/compile", json=house_workspace)
        assert resp.status_code == 422
        assert "CC-ZIPCODE-STR##-NN" in resp.json()["detail"]

    def test_compile_rejects_malformed_workspace(self, client: TestClient) -> None:
        resp = client.post(f"/designs/{DESIGN_ID}/compile", json={"blocks": "nope"})
        assert resp.status_code == 422


class TestValidateRoute:
    def test_clean_workspace(self, client: TestClient, house_workspace: dict[str, Any]) -> None:
        resp = client.post("/designs/validate", json=house_workspace)
        assert resp.status_code == 200
        assert resp.json() == {"violations": []}

    def test_violations_use_wire_keys(self, client: TestClient) -> None:
        workspace = [{"type": "dhc_nfc14100_nf14_energy_meter", "id": "m1"}]
        resp = client.post("/designs/validate", json=workspace)
        assert resp.status_code == 200
        violations = resp.json()["violations"]
        assert len(violations) == 3
        assert violations[0] == {
            "severity": "error",
            "message": "NFC 14-100 delivery chain incomplete: Energy Delivery block is required.",
            "nodeId": "m1",
            "ruleId": "nfc14100-delivery-chain",
        }

    def test_placement_is_opt_in(self, client: TestClient) -> None:
        workspace = [
            {
                "type": "dhc_floor",
                "id": "f1",
                "inputs": {"HASEQUIPMENT": {"block": {"type": "dhc_socket", "id": "s1"}}},
            }
        ]
        assert client.post("/designs/validate", json=workspace).json()["violations"] == []
        resp = client.post("/designs/validate", params={"placement": "true"}, json=workspace)
        assert [v["ruleId"] for v in resp.json()["violations"]] == ["placement"]

    def test_malformed_workspace(self, client: TestClient) -> None:
        resp = client.post("/designs/validate", json=[{"type": "dhc_space"}])
        assert resp.status_code == 422
