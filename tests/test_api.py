"""
tests/test_api.py

HTTP API over a prebuilt store (the startup fetch is not run).
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from opsdash.api.dependencies import set_store
from opsdash.data.store import DataStore
from opsdash.main import create_app


@pytest.fixture()
def client(store):
    # No context manager: the lifespan (network fetch) is skipped
    set_store(store)
    yield TestClient(create_app())
    set_store(None)


@pytest.fixture()
def empty_client():
    set_store(DataStore())
    yield TestClient(create_app())
    set_store(None)


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class TestMeta:
    def test_health(self, client) -> None:
        body = client.get("/api/health").json()
        assert body["status"] == "ok"
        assert body["loaded"] is True
        assert body["loading"] is False
        assert body["records"] == 17
        assert body["counts"]["chargebacks"] == 2

    def test_health_before_load(self, empty_client) -> None:
        body = empty_client.get("/api/health").json()
        assert body["loaded"] is False
        assert body["records"] == 0

    def test_dates(self, client) -> None:
        body = client.get("/api/dates").json()
        assert body["dates"] == ["2024-03-01", "2024-03-02"]
        assert body["earliest"] == "2024-03-01"
        assert body["quickRanges"][0]["id"] == "today"

    def test_reload_runs_in_background(self, client, store, monkeypatch) -> None:
        calls = []

        async def fake_reload():
            calls.append(True)
            return store

        monkeypatch.setattr(store, "reload", fake_reload)
        resp = client.post("/api/reload")
        assert resp.status_code == 200
        assert resp.json()["status"] == "reloading"
        assert calls == [True]


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


class TestSummaries:
    @pytest.mark.parametrize("domain", ["qa", "productivity", "csat", "refunds", "chargebacks", "business"])
    def test_every_tab(self, client, domain) -> None:
        resp = client.get(f"/api/{domain}")
        assert resp.status_code == 200
        assert "kpis" in resp.json()

    def test_interval_changes_average(self, client) -> None:
        narrow = client.get("/api/qa", params={"start_date": "2024-03-01", "end_date": "2024-03-01"}).json()
        wide = client.get("/api/qa", params={"quick_range": "all"}).json()
        assert narrow["agents"] == [
            {"agent": "Ana", "avgScore": 80.0, "evaluations": 1, "violations": 0, "topGrade": "B"},
        ]
        assert wide["agents"][0]["avgScore"] == 85.0
        assert wide["rangeLabel"] == "2024-03-01 to 2024-03-02"

    def test_quick_range(self, client) -> None:
        body = client.get("/api/business", params={"quick_range": "yesterday"}).json()
        assert body["range"] == {"start": "2024-03-01", "end": "2024-03-01"}
        assert body["kpis"]["totalRevenue"] == 100

    def test_overview(self, client) -> None:
        body = client.get("/api/overview", params={"quick_range": "today"}).json()
        sections = {s["id"]: s["filteredCount"] for s in body["sections"]}
        assert sections["qa"] == 2
        assert body["range"] == {"start": "2024-03-02", "end": "2024-03-02"}


class TestRecords:
    def test_filtered_records_are_camel_case(self, client) -> None:
        body = client.get("/api/records/chargebacks", params={"quick_range": "today"}).json()
        assert body["count"] == 1
        assert body["records"][0]["caseId"] == "C-2"
        assert body["records"][0]["paymentMethod"] == ""

    def test_all_records(self, client) -> None:
        body = client.get("/api/records/productivity").json()
        assert body["count"] == 3
        assert {"agent", "ticketsHandled", "ticketsPerHour", "hoursWorked"} <= set(body["records"][0])


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_unknown_quick_range(self, client) -> None:
        assert client.get("/api/qa", params={"quick_range": "fortnight"}).status_code == 400

    def test_start_after_end(self, client) -> None:
        resp = client.get("/api/qa", params={"start_date": "2024-03-02", "end_date": "2024-03-01"})
        assert resp.status_code == 400

    def test_single_day_range_allowed(self, client) -> None:
        resp = client.get("/api/qa", params={"start_date": "2024-03-01", "end_date": "2024-03-01"})
        assert resp.status_code == 200

    def test_unknown_domain(self, client) -> None:
        assert client.get("/api/payroll").status_code == 404
        assert client.get("/api/records/payroll").status_code == 404

    def test_not_loaded(self, empty_client) -> None:
        assert empty_client.get("/api/qa").status_code == 503
        assert empty_client.get("/api/overview").status_code == 503

    def test_not_initialized(self) -> None:
        set_store(None)
        assert TestClient(create_app()).get("/api/health").status_code == 503


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


class TestExport:
    def test_excel_download(self, client, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr("opsdash.api.router_export.REPORTS_FOLDER", tmp_path)
        resp = client.get("/api/export/excel", params={"quick_range": "all"})
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith(
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
        assert resp.content[:2] == b"PK"
        assert (tmp_path / "Ops_Dashboard_2024-03-01_to_2024-03-02.xlsx").exists()
