"""
Excel export endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from opsdash.config import REPORTS_FOLDER
from opsdash.data.store import DataStore
from opsdash.data.schemas import DateRange
from opsdash.api.dependencies import get_store, parse_range
from opsdash.reports import dashboard_report

router = APIRouter(prefix="/api/export", tags=["export"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _filename(date_range: DateRange) -> str:
    if date_range.is_bounded:
        return f"Ops_Dashboard_{date_range.start}_to_{date_range.end}.xlsx"
    return "Ops_Dashboard_All_Time.xlsx"


@router.get("/excel")
def export_excel(
    store: DataStore = Depends(get_store),
    date_range: DateRange = Depends(parse_range),
):
    """Summary workbook for the requested range."""
    filename = _filename(date_range)
    path = dashboard_report.generate_excel(store, REPORTS_FOLDER / filename, date_range)
    return FileResponse(path, filename=filename, media_type=XLSX_MEDIA_TYPE)
