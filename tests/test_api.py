"""HTTP API tests."""
import pytest

from finplan.settings import settings


NEW_STRATEGY = {
    "id": "s1",
    "title": "Monthly Savings",
    "category": "Savings",
    "section": "buildNetWorth",
    "content": "Save {{amt}} per month.",
    "inputFields": [{"id": "amt", "label": "Amount", "type": "number", "defaultValue": 0}],
}


@pytest.fixture
def with_strategy(client):
    response = client.post("/api/strategies", json=NEW_STRATEGY)
    assert response.status_code == 201
    return response.json()


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_ready(self, client, with_strategy):
        response = client.get("/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["strategies"] == 1

    def test_request_id_echoed(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"


class TestStrategyRoutes:

    def test_create_and_get(self, client, with_strategy):
        assert with_strategy["id"] == "s1"
        assert with_strategy["isCustom"] is False

        response = client.get("/api/strategies/s1")

        assert response.status_code == 200
        assert response.json()["inputFields"][0]["defaultValue"] == 0

    def test_duplicate_id_conflict(self, client, with_strategy):
        response = client.post("/api/strategies", json=NEW_STRATEGY)

        assert response.status_code == 409

    def test_invalid_strategy_rejected(self, client):
        payload = dict(NEW_STRATEGY, inputFields=[{"id": "x", "label": "X", "type": "select"}])

        response = client.post("/api/strategies", json=payload)

        assert response.status_code == 422

    def test_unknown_strategy_404(self, client):
        assert client.get("/api/strategies/missing").status_code == 404
        assert client.put("/api/strategies/missing", json={"title": "X"}).status_code == 404
        assert client.delete("/api/strategies/missing").status_code == 404

    def test_update(self, client, with_strategy):
        response = client.put("/api/strategies/s1", json={"title": "Renamed"})

        assert response.status_code == 200
        assert response.json()["title"] == "Renamed"
        assert response.json()["content"] == NEW_STRATEGY["content"]

    def test_update_cannot_make_built_in_deletable(self, client, with_strategy):
        response = client.put("/api/strategies/s1", json={"isCustom": True})

        assert response.status_code == 200
        assert response.json()["isCustom"] is False
        assert client.delete("/api/strategies/s1").status_code == 409
        assert client.get("/api/strategies/s1").status_code == 200

    def test_update_with_empty_title_rejected(self, client, with_strategy):
        response = client.put("/api/strategies/s1", json={"title": ""})

        assert response.status_code == 422
        assert client.get("/api/strategies/s1").json()["title"] == "Monthly Savings"

    def test_built_in_delete_conflict(self, client, with_strategy):
        response = client.delete("/api/strategies/s1")

        assert response.status_code == 409
        assert client.get("/api/strategies/s1").status_code == 200

    def test_list_with_search(self, client, with_strategy):
        client.post("/api/strategies", json=dict(NEW_STRATEGY, id="s2", title="Will", content="Write a will.",
                                                 category="", section="leavingALegacy", inputFields=[]))

        all_ids = [s["id"] for s in client.get("/api/strategies").json()]
        found = [s["id"] for s in client.get("/api/strategies", params={"search": "WILL"}).json()]

        assert all_ids == ["s1", "s2"]
        assert found == ["s2"]

    def test_organized(self, client, with_strategy):
        client.post("/api/strategies", json=dict(NEW_STRATEGY, id="r1", title="Act Now",
                                                 section="recommendations", inputFields=[]))

        sections = client.get("/api/strategies/organized").json()["sections"]

        assert [s["section"] for s in sections] == ["recommendations", "buildNetWorth"]
        assert sections[1]["title"] == "BUILD NET WORTH"
        assert [s["id"] for s in sections[1]["direct"]] == ["s1"]

    def test_index_routes(self, client, with_strategy):
        assert [s["id"] for s in client.get("/api/strategies/section/buildNetWorth").json()] == ["s1"]
        assert [s["id"] for s in client.get("/api/strategies/category/Savings").json()] == ["s1"]
        assert client.get("/api/strategies/subsection/None").json() == []

    def test_export_and_import(self, client):
        created = client.post("/api/custom-strategies", json={
            "title": "Mine", "content": "Body.", "section": "buildNetWorth",
        }).json()

        exported = client.get("/api/strategies/export").json()
        assert [s["id"] for s in exported] == [created["id"]]

        response = client.post("/api/strategies/import", json={"strategies": exported})

        assert response.status_code == 200
        imported = response.json()
        assert imported[0]["id"] != created["id"]
        assert imported[0]["isCustom"] is True


class TestCustomStrategyRoutes:

    def test_lifecycle(self, client):
        response = client.post("/api/custom-strategies", json={
            "title": "Mine", "content": "Body.", "section": "buildNetWorth",
        })
        assert response.status_code == 201
        strategy_id = response.json()["id"]

        updated = client.put(f"/api/custom-strategies/{strategy_id}", json={
            "title": "Mine v2", "content": "Body v2.", "section": "leavingALegacy",
        })
        assert updated.json()["section"] == "leavingALegacy"

        assert [s["id"] for s in client.get("/api/custom-strategies").json()] == [strategy_id]

        deleted = client.delete(f"/api/custom-strategies/{strategy_id}")
        assert deleted.json() == {"message": "Custom strategy deleted successfully"}
        assert client.get("/api/custom-strategies").json() == []

    def test_missing_fields_rejected(self, client):
        response = client.post("/api/custom-strategies", json={"title": "Mine", "content": ""})

        assert response.status_code == 422

    def test_built_in_not_editable_here(self, client, with_strategy):
        response = client.put("/api/custom-strategies/s1", json={
            "title": "X", "content": "Y", "section": "buildNetWorth",
        })

        assert response.status_code == 404


class TestClientConfigRoutes:

    def test_save_and_read(self, client, with_strategy):
        configs = [
            {"strategyId": "s1", "isEnabled": True, "inputValues": {"amt": 50}},
            {"strategyId": "missing", "isEnabled": True},
        ]

        saved = client.post("/api/client-strategy-configs/client-1", json=configs).json()

        assert [c["strategyId"] for c in saved] == ["s1"]
        assert client.get("/api/client-strategy-configs/client-1").json() == saved
        assert client.get("/api/client-strategy-configs/other").json() == []

    def test_current_alias(self, client, with_strategy, catalog):
        client.post("/api/client-strategy-configs/current", json=[{"strategyId": "s1", "isEnabled": False}])

        assert catalog.get_client_ids() == [settings.DEFAULT_CLIENT_ID]

    def test_delete_cascades(self, client):
        created = client.post("/api/custom-strategies", json={
            "title": "Mine", "content": "Body.", "section": "buildNetWorth",
        }).json()
        client.post("/api/client-strategy-configs/client-1", json=[{"strategyId": created["id"], "isEnabled": True}])

        assert client.delete(f"/api/strategies/{created['id']}").status_code == 200

        assert client.get("/api/client-strategy-configs/client-1").json() == []


class TestReportRoutes:

    def test_generate_view_and_export(self, client, with_strategy):
        response = client.post("/api/reports/generate", json={
            "clientData": {"firstName": "Ada", "lastName": "Lovelace"},
            "strategyConfigurations": [{"strategyId": "s1", "isEnabled": True, "inputValues": {"amt": 250}}],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["report"] == "BUILD NET WORTH\n\nSave 250 per month."
        report_id = data["reportId"]

        stored = client.get(f"/api/reports/{report_id}").json()
        assert stored["generatedReport"] == data["report"]
        assert stored["strategyConfigurations"][0]["inputValues"] == {"amt": 250}

        listed = client.get("/api/reports").json()
        assert [r["id"] for r in listed] == [report_id]

        exported = client.get(f"/api/reports/{report_id}/export")
        assert exported.status_code == 200
        assert exported.headers["content-type"].startswith("text/plain")
        assert f"financial_plan_{report_id}.txt" in exported.headers["content-disposition"]
        assert exported.text.startswith("FINANCIAL PLAN - Ada Lovelace\n")

    def test_legacy_selection(self, client, with_strategy):
        response = client.post("/api/reports/generate", json={
            "clientData": {},
            "selectedStrategyIds": ["s1"],
        })

        assert response.json()["report"] == "BUILD NET WORTH\n\nSave 0 per month."

    def test_selection_required(self, client):
        response = client.post("/api/reports/generate", json={"clientData": {}})

        assert response.status_code == 422

    def test_invalid_client_data(self, client):
        response = client.post("/api/reports/generate", json={
            "clientData": {"monthlyExpenses": -10},
            "strategyConfigurations": [],
        })

        assert response.status_code == 422

    def test_unknown_report_404(self, client):
        assert client.get("/api/reports/missing").status_code == 404
        assert client.get("/api/reports/missing/export").status_code == 404
