"""
Dashboard endpoints — overview, one summary per tab, filtered records.
"""
from __future__ import annotations

import math

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from opsdash.data.store import DataStore
from opsdash.data.schemas import DateRange
from opsdash.api.dependencies import check_domain, get_store, parse_range
from opsdash.analytics.dashboard import domain_summary, overview

router = APIRouter(prefix="/api", tags=["dashboard"])


def _clean(obj):
    """Recursively replace NaN/Inf floats with 0.0 for JSON safety."""
    if isinstance(obj, dict):
        return {k: _clean(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_clean(v) for v in obj]
    if isinstance(obj, float) and (math.isnan(obj) or math.isinf(obj)):
        return 0.0
    return obj


def _safe_json(data: dict) -> JSONResponse:
    return JSONResponse(content=_clean(data))


@router.get("/overview")
def dashboard_overview(
    store: DataStore = Depends(get_store),
    date_range: DateRange = Depends(parse_range),
):
    """Section list with record counts for the active range."""
    return _safe_json(overview(store, date_range))


@router.get("/records/{domain}")
def domain_records(
    domain: str = Depends(check_domain),
    store: DataStore = Depends(get_store),
    date_range: DateRange = Depends(parse_range),
):
    """Date-filtered records for one tab (chargebacks → case details)."""
    records = store.records(domain, date_range)
    return _safe_json({
        "domain": domain,
        "range": date_range.to_dict(),
        "count": len(records),
        "records": [r.to_dict() for r in records],
    })


@router.get("/{domain}")
def summary(
    domain: str = Depends(check_domain),
    store: DataStore = Depends(get_store),
    date_range: DateRange = Depends(parse_range),
):
    """KPIs, leaderboards and trend for one tab."""
    return _safe_json(domain_summary(store, domain, date_range))
