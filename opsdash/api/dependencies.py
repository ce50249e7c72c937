"""
FastAPI dependencies — DataStore singleton, date-range parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, HTTPException, Query

from opsdash.config import DOMAINS
from opsdash.data.store import DataStore
from opsdash.data.schemas import DateRange, QuickRange

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore | None) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return _store


def get_store_or_empty() -> DataStore:
    """Return the store even if it has no data (for health/reload endpoints)."""
    if _store is None:
        raise HTTPException(503, "Server not initialized yet")
    return _store


def check_domain(domain: str) -> str:
    if domain not in DOMAINS:
        raise HTTPException(404, f"Unknown domain: {domain}. Valid: {DOMAINS}")
    return domain


# ---------------------------------------------------------------------------
# Date range parsing from query params
# ---------------------------------------------------------------------------

def parse_range(
    start_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, description="YYYY-MM-DD"),
    quick_range: Optional[str] = Query(None, description="today|yesterday|last7|last30|all|custom"),
    store: DataStore = Depends(get_store),
) -> DateRange:
    """Resolve query parameters into a DateRange against the loaded dates."""
    qr = None
    if quick_range is not None:
        try:
            qr = QuickRange(quick_range)
        except ValueError:
            raise HTTPException(400, f"Invalid quick_range: {quick_range}")
    if start_date and end_date and start_date > end_date:
        raise HTTPException(400, f"start_date {start_date} is after end_date {end_date}")
    return store.resolve_range(qr, start_date or "", end_date or "")
