"""
DataStore — in-memory session state for the six record streams.

Loaded once at startup (and on /api/reload), queried on every request.
All summaries are recomputed from the current Snapshot; nothing is cached.
"""
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable, Optional, TypeVar

from opsdash.config import SOURCE_DIR
from opsdash.data.loader import fetch_all, parse_sources, read_folder
from opsdash.data.normalize import is_iso_date
from opsdash.data.schemas import (
    ChargebackSheet, DateRange, QuickRange, Snapshot, quick_ranges,
)

T = TypeVar("T")


def filter_by_date(records: Iterable[T], date_range: DateRange | None) -> tuple[T, ...]:
    """Records whose date lies within the range (inclusive); undated records pass.

    An unbounded range returns every record.
    """
    records = tuple(records)
    if date_range is None or not date_range.is_bounded:
        return records
    return tuple(r for r in records if date_range.contains(getattr(r, "date", None)))


class DataStore:
    """Current Snapshot plus the date helpers derived from it."""

    def __init__(self, snapshot: Snapshot | None = None) -> None:
        self.snapshot: Snapshot = snapshot or Snapshot()
        self.loading = False
        self._loaded = snapshot is not None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def replace(self, snapshot: Snapshot) -> "DataStore":
        """Swap in a freshly parsed snapshot (the only mutation)."""
        self.snapshot = snapshot
        self._loaded = True
        return self

    async def reload(
        self,
        urls: dict[str, str] | None = None,
        source_dir: Path | None = SOURCE_DIR,
    ) -> "DataStore":
        """Re-read all six sources and replace the snapshot."""
        self.loading = True
        try:
            if source_dir is not None:
                print(f"Loading dashboard data from {source_dir}...")
                texts = read_folder(source_dir)
            else:
                print("Fetching dashboard data...")
                texts = await fetch_all(urls)
            self.replace(parse_sources(texts))
        finally:
            self.loading = False
        return self

    def load(
        self,
        urls: dict[str, str] | None = None,
        source_dir: Path | None = SOURCE_DIR,
    ) -> "DataStore":
        """Blocking reload for the CLI."""
        return asyncio.run(self.reload(urls, source_dir))

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def records(self, domain: str, date_range: DateRange | None = None) -> tuple:
        """Filtered records for one domain (chargebacks → case details)."""
        return filter_by_date(self.snapshot.dated()[domain], date_range)

    def chargebacks(self) -> ChargebackSheet:
        return self.snapshot.chargebacks

    def counts(self) -> dict[str, int]:
        return self.snapshot.counts()

    def record_count(self) -> int:
        return sum(self.counts().values())

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def all_dates(self) -> list[str]:
        """Distinct canonical dates across every domain, ascending."""
        dates = {
            r.date
            for records in self.snapshot.dated().values()
            for r in records
            if is_iso_date(r.date)
        }
        return sorted(dates)

    def quick_ranges(self) -> dict[QuickRange, DateRange]:
        return quick_ranges(self.all_dates())

    def default_range(self) -> DateRange:
        """Earliest → latest observed date ("All Time"); unbounded when empty."""
        return self.quick_ranges().get(QuickRange.ALL, DateRange())

    def resolve_range(
        self,
        quick_range: Optional[QuickRange] = None,
        start: str = "",
        end: str = "",
    ) -> DateRange:
        """Turn a quick-range id or explicit dates into a DateRange.

        Explicit dates win; a quick range with no observed data is unbounded.
        """
        if start or end:
            return DateRange(start, end)
        if quick_range is None or quick_range == QuickRange.CUSTOM:
            return self.default_range()
        return self.quick_ranges().get(quick_range, DateRange())
