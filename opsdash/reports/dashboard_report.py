"""
Dashboard Summary workbook — KPI overview plus one sheet per leaderboard/trend.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from opsdash.data.store import DataStore
from opsdash.data.schemas import DateRange
from opsdash.analytics.dashboard import full_dashboard
from opsdash.excel.writer import ExcelWriter


QA_AGENT_COLS = [
    ("agent", "text", "Agent"),
    ("evaluations", "number", "Evals"),
    ("avgScore", "decimal", "Avg Score"),
    ("topGrade", "text", "Grade"),
    ("violations", "number", "Violations"),
]

QA_TREND_COLS = [
    ("date", "text", "Date"),
    ("avgScore", "decimal", "Avg Score"),
    ("evaluations", "number", "Evals"),
]

PRODUCTIVITY_COLS = [
    ("agent", "text", "Agent"),
    ("ticketsHandled", "number", "Tickets"),
    ("hoursWorked", "decimal", "Hours"),
    ("ticketsPerHour", "decimal", "Tickets/Hr"),
    ("days", "number", "Days"),
]

CSAT_COLS = [
    ("agent", "text", "Agent"),
    ("responses", "number", "Responses"),
    ("avgRating", "decimal2", "Avg Rating"),
    ("fiveStar", "number", "5★"),
    ("fourStar", "number", "4★"),
    ("threeStar", "number", "3★"),
    ("twoStar", "number", "2★"),
    ("oneStar", "number", "1★"),
    ("positiveRate", "percent", "Positive"),
]

REFUND_AGENT_COLS = [
    ("agent", "text", "Agent"),
    ("refundsProcessed", "number", "Refunds"),
    ("totalAmount", "currency", "Total"),
    ("avgAmount", "currency", "Avg"),
]

REFUND_REASON_COLS = [
    ("reason", "text", "Reason"),
    ("count", "number", "Refunds"),
]

CB_MID_COLS = [
    ("mid", "text", "MID"),
    ("chargebacks", "number", "Chargebacks"),
    ("payments", "number", "Payments"),
    ("cbPct", "ratio", "CB%"),
    ("risk", "text", "Status"),
]

CB_PRODUCT_COLS = [
    ("product", "text", "Product"),
    ("count", "number", "Chargebacks"),
    ("amount", "currency", "Amount"),
    ("topReason", "text", "Top Reason"),
]

BIZ_PRODUCT_COLS = [
    ("product", "text", "Product"),
    ("revenue", "currency", "Revenue"),
    ("orders", "number", "Orders"),
    ("units", "number", "Units"),
    ("cogs", "currency", "COGS"),
    ("adSpend", "currency", "Ad Spend"),
    ("refunds", "currency", "Refunds"),
    ("profit", "currency", "Net Profit"),
]

BIZ_STORE_COLS = [
    ("store", "text", "Store"),
    ("revenue", "currency", "Revenue"),
    ("orders", "number", "Orders"),
    ("profit", "currency", "Net Profit"),
]

BIZ_TREND_COLS = [
    ("date", "text", "Date"),
    ("revenue", "currency", "Revenue"),
    ("orders", "number", "Orders"),
    ("profit", "currency", "Net Profit"),
]


def generate_json(store: DataStore, date_range: DateRange | None = None) -> dict:
    return full_dashboard(store, date_range)


def generate_excel(
    store: DataStore,
    output_path: str | Path,
    date_range: DateRange | None = None,
) -> Path:
    data = generate_json(store, date_range)
    qa, prod, csat = data["qa"]["kpis"], data["productivity"]["kpis"], data["csat"]["kpis"]
    ref, cb, biz = data["refunds"]["kpis"], data["chargebacks"]["kpis"], data["business"]["kpis"]
    ew = ExcelWriter()

    # Overview
    ws = ew.add_sheet("Overview")
    ew.write_title(ws, "AGENT & BUSINESS DASHBOARD",
                   f"{data['qa']['rangeLabel']}  |  Generated {pd.Timestamp.now():%B %d, %Y}")

    row = ew.write_section(ws, 4, "QA")
    row = ew.write_kpi_row(ws, row, [
        (qa["evaluations"], "EVALUATIONS", "number"),
        (qa["avgScore"], "AVG SCORE", "decimal"),
        (qa["passRate"], "PASS RATE", "percent"),
        (qa["violations"], "VIOLATIONS", "number"),
    ])
    row = ew.write_section(ws, row, "PRODUCTIVITY")
    row = ew.write_kpi_row(ws, row, [
        (prod["totalTickets"], "TOTAL TICKETS", "number"),
        (prod["totalHours"], "TOTAL HOURS", "number"),
        (prod["avgTicketsPerHour"], "AVG TICKETS/HR", "decimal"),
        (prod["agents"], "AGENTS", "number"),
    ])
    row = ew.write_section(ws, row, "CSAT")
    row = ew.write_kpi_row(ws, row, [
        (csat["responses"], "RESPONSES", "number"),
        (csat["avgRating"], "AVG RATING", "decimal2"),
        (csat["fiveStarRate"], "5-STAR RATE", "percent"),
        (csat["positiveRate"], "POSITIVE RATE", "percent"),
    ])
    row = ew.write_section(ws, row, "REFUNDS")
    row = ew.write_kpi_row(ws, row, [
        (ref["totalRefunds"], "TOTAL REFUNDS", "number"),
        (ref["totalAmount"], "TOTAL AMOUNT", "currency"),
        (ref["avgRefund"], "AVG REFUND", "currency"),
        (ref["agents"], "AGENTS", "number"),
    ])
    row = ew.write_section(ws, row, "CHARGEBACKS")
    row = ew.write_kpi_row(ws, row, [
        (cb["totalChargebacks"], "TOTAL CHARGEBACKS", "number"),
        (cb["totalPayments"], "TOTAL PAYMENTS", "number"),
        (cb["cbRate"], "CB RATE", "ratio"),
        (cb["mids"], "MIDS", "number"),
    ])
    row = ew.write_section(ws, row, "BUSINESS")
    ew.write_kpi_row(ws, row, [
        (biz["totalRevenue"], "REVENUE", "currency"),
        (biz["totalOrders"], "ORDERS", "number"),
        (biz["totalCogs"], "COGS", "currency"),
        (biz["netProfit"], "NET PROFIT", "currency"),
    ])

    # Data sheets
    tables = [
        ("QA Agents", QA_AGENT_COLS, data["qa"]["agents"], None, False),
        ("QA Trend", QA_TREND_COLS, data["qa"]["trend"], None, False),
        ("Productivity", PRODUCTIVITY_COLS, data["productivity"]["agents"], None, True),
        ("CSAT", CSAT_COLS, data["csat"]["agents"], None, True),
        ("Refunds", REFUND_AGENT_COLS, data["refunds"]["agents"], None, True),
        ("Refund Reasons", REFUND_REASON_COLS, data["refunds"]["reasons"], None, False),
        ("Chargeback MIDs", CB_MID_COLS, data["chargebacks"]["midSummary"], "risk", False),
        ("Chargeback Products", CB_PRODUCT_COLS, data["chargebacks"]["byProduct"], None, True),
        ("Business Products", BIZ_PRODUCT_COLS, data["business"]["byProduct"], None, True),
        ("Business Stores", BIZ_STORE_COLS, data["business"]["byStore"], None, True),
        ("Business Trend", BIZ_TREND_COLS, data["business"]["trend"], None, False),
    ]
    mid_total = data["chargebacks"]["midTotal"]
    for sheet_name, cols, rows, highlight_key, show_total in tables:
        ws_d = ew.add_sheet(sheet_name)
        next_row = ew.write_table(ws_d, 1, cols, rows, highlight_key=highlight_key, show_total=show_total)
        # Sheet's own Total/Avg row sits under the MID block, not recomputed
        if sheet_name == "Chargeback MIDs" and mid_total:
            ew.write_table(ws_d, next_row + 1, CB_MID_COLS[:4], [mid_total])
            ws_d.freeze_panes = "A2"

    return ew.save(output_path)
