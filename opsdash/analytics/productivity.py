"""
Productivity analytics — tickets and hours per agent and per day.
"""
from __future__ import annotations

from typing import Iterable

from opsdash.analytics.common import round_half_up, safe_divide, sanitize_for_json
from opsdash.analytics.rollup import date_trend, group_rollup
from opsdash.data.schemas import ProductivityEntry


def agent_output(records: Iterable[ProductivityEntry]) -> list[dict]:
    """Per-agent totals, most tickets first.

    Tickets/hour is recomputed from the totals rather than averaging the
    sheet's per-day ratios.
    """
    rows = group_rollup(
        records, "agent",
        {
            "ticketsHandled": ("tickets_handled", "sum"),
            "hoursWorked": ("hours_worked", "sum"),
            "days": ("agent", "count"),
        },
        sort_by="ticketsHandled",
    )
    for row in rows:
        tickets, hours = row["ticketsHandled"], row["hoursWorked"]
        row["ticketsPerHour"] = round_half_up(safe_divide(tickets, hours), 1) if hours > 0 else 0.0
        row["ticketsHandled"] = int(round_half_up(tickets))
        row["hoursWorked"] = round_half_up(hours, 1)
    return rows


def productivity_trend(records: Iterable[ProductivityEntry]) -> list[dict]:
    rows = date_trend(records, {
        "tickets": ("tickets_handled", "sum"),
        "hours": ("hours_worked", "sum"),
    })
    for row in rows:
        row["tickets"] = int(round_half_up(row["tickets"]))
        row["hours"] = round_half_up(row["hours"], 1)
    return rows


def productivity_kpis(agents: list[dict]) -> dict:
    """Cards are built from the per-agent rows (rounded tickets, 1dp hours)."""
    tickets = sum(a["ticketsHandled"] for a in agents)
    hours = sum(a["hoursWorked"] for a in agents)
    return {
        "totalTickets": tickets,
        "totalHours": round_half_up(hours),
        "avgTicketsPerHour": round_half_up(tickets / max(hours, 1), 1),
        "agents": len(agents),
    }


def productivity_summary(records: Iterable[ProductivityEntry]) -> dict:
    records = tuple(records)
    agents = agent_output(records)
    return sanitize_for_json({
        "kpis": productivity_kpis(agents),
        "agents": agents,
        "trend": productivity_trend(records),
    })
