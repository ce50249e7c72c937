"""
Refund analytics — refunds processed per agent, daily amounts, top reasons.
"""
from __future__ import annotations

from typing import Iterable

from opsdash.config import REASON_LABEL_MAX, TOP_REASONS
from opsdash.analytics.common import round_half_up, safe_divide, sanitize_for_json
from opsdash.analytics.rollup import column_total, count_by, date_trend, group_rollup
from opsdash.data.schemas import RefundEntry

OTHER_REASON = "Other"


def reason_label(r: RefundEntry) -> str:
    """Reason text shortened for chart labels; blank reasons become "Other"."""
    reason = r.reason or OTHER_REASON
    if len(reason) > REASON_LABEL_MAX:
        return reason[:REASON_LABEL_MAX] + "..."
    return reason


def agent_refunds(records: Iterable[RefundEntry]) -> list[dict]:
    rows = group_rollup(
        records, "agent",
        {
            "refundsProcessed": ("agent", "count"),
            "totalAmount": ("amount", "sum"),
        },
        sort_by="refundsProcessed",
    )
    for row in rows:
        row["avgAmount"] = round_half_up(safe_divide(row["totalAmount"], row["refundsProcessed"]), 2)
        row["totalAmount"] = round_half_up(row["totalAmount"], 2)
    return rows


def refund_trend(records: Iterable[RefundEntry]) -> list[dict]:
    rows = date_trend(records, {
        "refunds": ("date", "count"),
        "amount": ("amount", "sum"),
    })
    for row in rows:
        row["amount"] = round_half_up(row["amount"], 2)
    return rows


def refunds_by_reason(records: Iterable[RefundEntry]) -> list[dict]:
    return count_by(records, reason_label, label="reason", limit=TOP_REASONS)


def refund_kpis(records: tuple[RefundEntry, ...], agents: list[dict]) -> dict:
    n = len(records)
    total = column_total(records, "amount")
    return {
        "totalRefunds": n,
        "totalAmount": round_half_up(total, 2),
        "avgRefund": round_half_up(total / max(n, 1), 2),
        "agents": len(agents),
    }


def refunds_summary(records: Iterable[RefundEntry]) -> dict:
    records = tuple(records)
    agents = agent_refunds(records)
    return sanitize_for_json({
        "kpis": refund_kpis(records, agents),
        "agents": agents,
        "trend": refund_trend(records),
        "reasons": refunds_by_reason(records),
    })
