"""
Chargeback analytics — MID risk table, product/reason breakdowns, case trend.

Case details are date-filtered like every other stream. The MID summary
block and its Total/Avg row come straight from the sheet and are not
recomputed; cbPct is used exactly as stored.
"""
from __future__ import annotations

from typing import Iterable, Optional

from opsdash.config import CB_HIGH_RISK, CB_WARNING
from opsdash.analytics.common import round_half_up, sanitize_for_json
from opsdash.analytics.rollup import count_by, date_trend, group_rollup
from opsdash.data.schemas import ChargebackDetail, ChargebackMidSummary, ChargebackSheet

UNKNOWN = "Unknown"


def cb_risk(cb_pct: float) -> str:
    """high ≥ 0.01, warning ≥ 0.005, else ok."""
    if cb_pct >= CB_HIGH_RISK:
        return "high"
    if cb_pct >= CB_WARNING:
        return "warning"
    return "ok"


def mid_table(summary: Iterable[ChargebackMidSummary]) -> list[dict]:
    """Sheet MID rows with a risk label, in sheet order."""
    return [
        {**m.to_dict(), "risk": cb_risk(m.cb_pct)}
        for m in summary
    ]


def by_mid(details: tuple[ChargebackDetail, ...], summary: Iterable[ChargebackMidSummary]) -> list[dict]:
    """Chargebacks per payment account.

    With case details in range, counts come from the details (grouped by
    payment method); otherwise the sheet's MID block is shown as-is.
    """
    if details:
        rows = group_rollup(
            details, "payment_method",
            {"count": ("case_id", "count"), "amount": ("amount", "sum")},
            label="mid", sort_by="count", fill_key=UNKNOWN,
        )
        for row in rows:
            row["amount"] = round_half_up(row["amount"], 2)
        return rows
    return [
        {
            "mid": m.mid,
            "count": m.chargebacks,
            "payments": m.payments,
            "cbPct": m.cb_pct,
            "amount": 0,
            "risk": cb_risk(m.cb_pct),
        }
        for m in summary if m.mid
    ]


def by_product(details: Iterable[ChargebackDetail]) -> list[dict]:
    rows = group_rollup(
        details, "product",
        {
            "count": ("case_id", "count"),
            "amount": ("amount", "sum"),
            "topReason": ("reason", "mode"),
        },
        sort_by="count", fill_key=UNKNOWN,
    )
    for row in rows:
        row["amount"] = round_half_up(row["amount"], 2)
    return rows


def by_reason(details: Iterable[ChargebackDetail]) -> list[dict]:
    return count_by(details, "reason", label="reason", fill_key=UNKNOWN)


def chargeback_trend(details: Iterable[ChargebackDetail]) -> list[dict]:
    rows = date_trend(details, {
        "chargebacks": ("case_id", "count"),
        "amount": ("amount", "sum"),
    })
    for row in rows:
        row["amount"] = round_half_up(row["amount"], 2)
    return rows


def chargeback_kpis(
    details: tuple[ChargebackDetail, ...],
    sheet: ChargebackSheet,
    products: list[dict],
) -> dict:
    total: Optional[ChargebackMidSummary] = sheet.mid_total
    return {
        "totalChargebacks": (total.chargebacks if total else 0) or len(details),
        "totalPayments": total.payments if total else 0,
        "cbRate": total.cb_pct if total else 0,
        "cbRisk": cb_risk(total.cb_pct) if total else "ok",
        "mids": len(sheet.mid_summary),
        "products": len(products),
    }


def chargebacks_summary(details: Iterable[ChargebackDetail], sheet: ChargebackSheet) -> dict:
    """`details` is the date-filtered case list; `sheet` supplies the MID block."""
    details = tuple(details)
    products = by_product(details)
    return sanitize_for_json({
        "kpis": chargeback_kpis(details, sheet, products),
        "midSummary": mid_table(sheet.mid_summary),
        "midTotal": sheet.mid_total.to_dict() if sheet.mid_total else None,
        "byMid": by_mid(details, sheet.mid_summary),
        "byProduct": products,
        "byReason": by_reason(details),
        "trend": chargeback_trend(details),
    })
