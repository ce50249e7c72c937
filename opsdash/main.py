"""
Ops Dashboard — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from opsdash.data.store import DataStore
from opsdash.api.dependencies import set_store
from opsdash.api.router_meta import router as meta_router
from opsdash.api.router_export import router as export_router
from opsdash.api.router_dashboard import router as dashboard_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load all six sources at startup."""
    from opsdash.config import REPORTS_FOLDER, SOURCE_DIR, SHEET_BASE
    REPORTS_FOLDER.mkdir(parents=True, exist_ok=True)

    # Diagnostic: show exactly where data comes from
    import os
    print(f"  OPSDASH_DATA_DIR = {os.environ.get('OPSDASH_DATA_DIR', '(not set)')}")
    print(f"  REPORTS_FOLDER = {REPORTS_FOLDER}")
    if SOURCE_DIR is not None:
        print(f"  SOURCE_DIR = {SOURCE_DIR} (exists = {SOURCE_DIR.exists()})")
    else:
        print(f"  SHEET_BASE = {SHEET_BASE}")

    store = DataStore()
    set_store(store)
    await store.reload()

    if store.record_count() > 0:
        counts = ", ".join(f"{n:,} {domain}" for domain, n in store.counts().items())
        print(f"\nOps Dashboard ready — {counts}\n")
    else:
        print("\nOps Dashboard ready — no data yet. Check the sheet URLs or POST /api/reload.\n")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ops Dashboard API",
        description="Agent performance and business analytics — QA, productivity, CSAT, refunds, chargebacks, P&L",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(export_router)
    app.include_router(dashboard_router)

    return app


app = create_app()
