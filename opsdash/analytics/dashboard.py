"""
Dashboard analytics — one entry point per tab plus the cross-tab overview.
"""
from __future__ import annotations

from typing import Callable

from opsdash.data.store import DataStore
from opsdash.data.schemas import DateRange, quick_range_options
from opsdash.analytics.common import sanitize_for_json
from opsdash.analytics.business import business_summary
from opsdash.analytics.chargebacks import chargebacks_summary
from opsdash.analytics.csat import csat_summary
from opsdash.analytics.productivity import productivity_summary
from opsdash.analytics.qa import qa_summary
from opsdash.analytics.refunds import refunds_summary

SECTIONS = [
    ("qa", "QA"),
    ("productivity", "Productivity"),
    ("csat", "CSAT"),
    ("refunds", "Refunds"),
    ("chargebacks", "Chargebacks"),
    ("business", "Business"),
]

_SUMMARIES: dict[str, Callable[[DataStore, DateRange], dict]] = {
    "qa": lambda store, rng: qa_summary(store.records("qa", rng)),
    "productivity": lambda store, rng: productivity_summary(store.records("productivity", rng)),
    "csat": lambda store, rng: csat_summary(store.records("csat", rng)),
    "refunds": lambda store, rng: refunds_summary(store.records("refunds", rng)),
    "chargebacks": lambda store, rng: chargebacks_summary(
        store.records("chargebacks", rng), store.chargebacks(),
    ),
    "business": lambda store, rng: business_summary(store.records("business", rng)),
}


def domain_summary(store: DataStore, domain: str, date_range: DateRange | None = None) -> dict:
    """Summary payload for one tab; raises KeyError for an unknown domain."""
    rng = date_range or DateRange()
    data = _SUMMARIES[domain](store, rng)
    data["range"] = rng.to_dict()
    data["rangeLabel"] = rng.label
    data["empty"] = len(store.records(domain, rng)) == 0
    return data


def date_options(store: DataStore) -> dict:
    """Observed dates and the quick-range presets derived from them."""
    dates = store.all_dates()
    return {
        "dates": dates,
        "earliest": dates[0] if dates else None,
        "latest": dates[-1] if dates else None,
        "quickRanges": quick_range_options(dates),
    }


def overview(store: DataStore, date_range: DateRange | None = None) -> dict:
    """Tab list with full and in-range record counts."""
    rng = date_range or DateRange()
    counts = store.counts()
    sections = [
        {
            "id": domain,
            "label": label,
            "count": counts[domain],
            "filteredCount": len(store.records(domain, rng)),
        }
        for domain, label in SECTIONS
    ]
    return sanitize_for_json({
        "loading": store.loading,
        "range": rng.to_dict(),
        "rangeLabel": rng.label,
        "sections": sections,
        **date_options(store),
    })


def full_dashboard(store: DataStore, date_range: DateRange | None = None) -> dict:
    """Every tab's summary for one range (used by the CLI and the Excel export)."""
    return {domain: domain_summary(store, domain, date_range) for domain, _ in SECTIONS}
