"""
tests/test_excel.py

Summary workbook export.
"""
from __future__ import annotations

from openpyxl import load_workbook

from opsdash.data.schemas import DateRange
from opsdash.data.store import DataStore
from opsdash.reports.dashboard_report import generate_excel, generate_json


class TestWorkbook:
    def test_sheets(self, store, tmp_path) -> None:
        path = generate_excel(store, tmp_path / "out" / "dashboard.xlsx")
        assert path.exists()
        wb = load_workbook(path)
        assert wb.sheetnames[0] == "Overview"
        assert {"QA Agents", "Productivity", "CSAT", "Refunds", "Chargeback MIDs", "Business Products"} <= set(
            wb.sheetnames
        )

    def test_overview_kpis(self, store, tmp_path) -> None:
        ws = load_workbook(generate_excel(store, tmp_path / "d.xlsx"))["Overview"]
        assert ws["A1"].value == "AGENT & BUSINESS DASHBOARD"
        assert ws["A4"].value == "QA"
        assert ws["A6"].value == 3
        assert ws["A7"].value == "EVALUATIONS"

    def test_leaderboard_rows_and_total(self, store, tmp_path) -> None:
        ws = load_workbook(generate_excel(store, tmp_path / "d.xlsx"))["Productivity"]
        assert [c.value for c in ws[1]][:3] == ["Agent", "Tickets", "Hours"]
        assert ws["A2"].value == "Ana"
        assert ws["B2"].value == 70
        assert ws["A4"].value == "TOTAL"
        assert ws["B4"].value == 90

    def test_chargeback_risk_column_and_total_row(self, store, tmp_path) -> None:
        ws = load_workbook(generate_excel(store, tmp_path / "d.xlsx"))["Chargeback MIDs"]
        assert ws["A2"].value == "MID-A"
        assert ws["E2"].value == "warning"
        assert ws["E3"].value == "ok"
        assert ws["A6"].value == "Total/Avg"
        assert ws["B6"].value == 7
        assert ws.freeze_panes == "A2"

    def test_empty_range(self, store, tmp_path) -> None:
        rng = DateRange("2030-01-01", "2030-01-31")
        wb = load_workbook(generate_excel(store, tmp_path / "d.xlsx", rng))
        assert wb["QA Agents"]["A2"].value == "No data for this range"
        assert "2030-01-01 to 2030-01-31" in wb["Overview"]["A2"].value

    def test_empty_store(self, tmp_path) -> None:
        path = generate_excel(DataStore(), tmp_path / "d.xlsx")
        assert load_workbook(path)["Business Trend"]["A2"].value == "No data for this range"

    def test_json_matches_dashboard(self, store) -> None:
        data = generate_json(store)
        assert data["qa"]["kpis"]["evaluations"] == 3
