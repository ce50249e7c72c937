"""
Meta endpoints: health, dates, reload.
"""
from __future__ import annotations

from fastapi import APIRouter, BackgroundTasks, Depends

from opsdash.data.store import DataStore
from opsdash.analytics.dashboard import date_options
from opsdash.api.dependencies import get_store_or_empty
from opsdash.api.response_models import HealthResponse, DatesResponse, ReloadResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store_or_empty)):
    return HealthResponse(
        status="ok",
        loading=store.loading,
        loaded=store.is_loaded,
        records=store.record_count(),
        counts=store.counts(),
    )


@router.get("/dates", response_model=DatesResponse)
def list_dates(store: DataStore = Depends(get_store_or_empty)):
    return DatesResponse(**date_options(store))


async def _do_reload(store: DataStore) -> None:
    await store.reload()
    print(f"  Reload complete — {store.record_count():,} records")


@router.post("/reload", response_model=ReloadResponse)
async def reload_data(background_tasks: BackgroundTasks, store: DataStore = Depends(get_store_or_empty)):
    """Re-fetch all six sources.

    Returns immediately, reload happens in background.
    """
    background_tasks.add_task(_do_reload, store)
    return ReloadResponse(
        status="reloading",
        message="Data reload started in background. Check /api/health for updated record counts.",
    )
