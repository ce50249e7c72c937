"""
Record types for the six sheet domains, plus the date-range filter schema.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Optional


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


class Record:
    """Mixin for the frozen record dataclasses."""

    def to_dict(self) -> dict:
        """JSON-ready dict with camelCase keys (e.g. cb_pct → cbPct)."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


# ---------------------------------------------------------------------------
# Domain records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class QAEntry(Record):
    date: Optional[str]
    agent: str
    score: float = 0.0
    grade: str = ""
    soft_skills: float = 0.0
    issue_understanding: float = 0.0
    product_process: float = 0.0
    tools_utilization: float = 0.0
    violation: str = "No"


@dataclass(frozen=True)
class ProductivityEntry(Record):
    date: Optional[str]
    agent: str
    tickets_handled: float = 0.0
    tickets_per_hour: float = 0.0
    hours_worked: float = 0.0


@dataclass(frozen=True)
class CsatEntry(Record):
    date: Optional[str]
    agent: str
    score: float = 0.0


@dataclass(frozen=True)
class RefundEntry(Record):
    date: Optional[str]
    agent: str
    amount: float = 0.0
    reason: str = ""


@dataclass(frozen=True)
class ChargebackMidSummary(Record):
    mid: str
    chargebacks: int = 0
    payments: int = 0
    cb_pct: float = 0.0       # raw sheet value, not scaled


@dataclass(frozen=True)
class ChargebackDetail(Record):
    case_id: str
    filing_date: str = ""
    transaction_id: str = ""
    reason: str = ""
    amount: float = 0.0
    currency: str = ""
    payment_method: str = ""
    order_id: str = ""
    sku: str = ""
    product: str = ""
    country: str = ""
    date: Optional[str] = None


@dataclass(frozen=True)
class BusinessEntry(Record):
    date: Optional[str]
    store: str = ""
    product: str = ""
    revenue: float = 0.0
    units_sold: float = 0.0
    refunds: float = 0.0
    cogs: float = 0.0
    ad_spend: float = 0.0
    net_profit: float = 0.0
    orders: float = 0.0


@dataclass(frozen=True)
class ChargebackSheet:
    """Both regions of the chargebacks tab."""
    mid_summary: tuple[ChargebackMidSummary, ...] = ()
    mid_total: Optional[ChargebackMidSummary] = None
    details: tuple[ChargebackDetail, ...] = ()


# ---------------------------------------------------------------------------
# Date range
# ---------------------------------------------------------------------------

class QuickRange(str, Enum):
    TODAY = "today"
    YESTERDAY = "yesterday"
    LAST7 = "last7"
    LAST30 = "last30"
    ALL = "all"
    CUSTOM = "custom"


_QUICK_LABELS = {
    QuickRange.TODAY: "Today",
    QuickRange.YESTERDAY: "Yesterday",
    QuickRange.LAST7: "Last 7 Days",
    QuickRange.LAST30: "Last 30 Days",
    QuickRange.ALL: "All Time",
}


@dataclass(frozen=True)
class DateRange:
    """Inclusive (start, end) of YYYY-MM-DD strings.

    Either side empty means no filtering at all. Canonical dates are
    fixed-width, so plain string comparison is chronological.
    """
    start: str = ""
    end: str = ""

    @property
    def is_bounded(self) -> bool:
        return bool(self.start) and bool(self.end)

    def contains(self, date: Optional[str]) -> bool:
        """Undated records always pass."""
        if not self.is_bounded or not date:
            return True
        return self.start <= date <= self.end

    @property
    def label(self) -> str:
        if not self.is_bounded:
            return "All Time"
        if self.start == self.end:
            return self.start
        return f"{self.start} to {self.end}"

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


def _shift(iso: str, days: int) -> str:
    # Shape-valid but impossible dates ("2024-02-30") stay as they are
    try:
        return (dt.date.fromisoformat(iso) - dt.timedelta(days=days)).isoformat()
    except ValueError:
        return iso


def quick_ranges(dates: list[str]) -> dict[QuickRange, DateRange]:
    """Preset ranges relative to the latest observed date.

    `dates` must be sorted canonical dates; no dates → no presets.
    """
    if not dates:
        return {}
    earliest, latest = dates[0], dates[-1]
    yesterday = _shift(latest, 1)
    return {
        QuickRange.TODAY: DateRange(latest, latest),
        QuickRange.YESTERDAY: DateRange(yesterday, yesterday),
        QuickRange.LAST7: DateRange(_shift(latest, 7), latest),
        QuickRange.LAST30: DateRange(_shift(latest, 30), latest),
        QuickRange.ALL: DateRange(earliest, latest),
    }


def quick_range_options(dates: list[str]) -> list[dict]:
    """Quick ranges as {id, label, start, end} dicts for the date picker."""
    return [
        {"id": key.value, "label": _QUICK_LABELS[key], **rng.to_dict()}
        for key, rng in quick_ranges(dates).items()
    ]


# ---------------------------------------------------------------------------
# Session snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Snapshot:
    """Every parsed record from one reload, replaced wholesale on the next."""
    qa: tuple[QAEntry, ...] = ()
    productivity: tuple[ProductivityEntry, ...] = ()
    csat: tuple[CsatEntry, ...] = ()
    refunds: tuple[RefundEntry, ...] = ()
    chargebacks: ChargebackSheet = field(default_factory=ChargebackSheet)
    business: tuple[BusinessEntry, ...] = ()

    def dated(self) -> dict[str, tuple]:
        """The six date-filterable sequences, keyed by domain."""
        return {
            "qa": self.qa,
            "productivity": self.productivity,
            "csat": self.csat,
            "refunds": self.refunds,
            "chargebacks": self.chargebacks.details,
            "business": self.business,
        }

    def counts(self) -> dict[str, int]:
        return {domain: len(records) for domain, records in self.dated().items()}
