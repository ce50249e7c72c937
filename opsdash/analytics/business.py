"""
Business P&L analytics — totals, product and store leaderboards, daily revenue.
"""
from __future__ import annotations

from typing import Iterable

from opsdash.analytics.common import sanitize_for_json
from opsdash.analytics.rollup import column_total, date_trend, group_rollup
from opsdash.data.schemas import BusinessEntry

UNKNOWN = "Unknown"

TOTAL_FIELDS = {
    "totalRevenue": "revenue",
    "totalOrders": "orders",
    "totalUnits": "units_sold",
    "totalRefunds": "refunds",
    "totalCogs": "cogs",
    "netProfit": "net_profit",
    "adSpend": "ad_spend",
}


def business_totals(records: tuple[BusinessEntry, ...]) -> dict:
    return {name: column_total(records, field) for name, field in TOTAL_FIELDS.items()}


def by_product(records: Iterable[BusinessEntry]) -> list[dict]:
    return group_rollup(
        records, "product",
        {
            "revenue": ("revenue", "sum"),
            "orders": ("orders", "sum"),
            "units": ("units_sold", "sum"),
            "profit": ("net_profit", "sum"),
            "adSpend": ("ad_spend", "sum"),
            "cogs": ("cogs", "sum"),
            "refunds": ("refunds", "sum"),
        },
        sort_by="revenue", fill_key=UNKNOWN,
    )


def by_store(records: Iterable[BusinessEntry]) -> list[dict]:
    return group_rollup(
        records, "store",
        {
            "revenue": ("revenue", "sum"),
            "orders": ("orders", "sum"),
            "profit": ("net_profit", "sum"),
        },
        sort_by="revenue", fill_key=UNKNOWN,
    )


def revenue_trend(records: Iterable[BusinessEntry]) -> list[dict]:
    return date_trend(records, {
        "revenue": ("revenue", "sum"),
        "orders": ("orders", "sum"),
        "profit": ("net_profit", "sum"),
    })


def business_summary(records: Iterable[BusinessEntry]) -> dict:
    records = tuple(records)
    return sanitize_for_json({
        "kpis": business_totals(records),
        "byProduct": by_product(records),
        "byStore": by_store(records),
        "trend": revenue_trend(records),
    })
