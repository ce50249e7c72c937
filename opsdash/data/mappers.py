"""
Per-domain record mappers: header-mapped sheet rows → typed records.

Each mapper renames columns via the maps in config, runs the normalisers and
applies that domain's inclusion rule. Rows are independent of each other.
"""
from __future__ import annotations

from typing import Callable, Iterable

from opsdash.config import (
    QA_COLUMNS, PRODUCTIVITY_COLUMNS, CSAT_COLUMNS, REFUND_COLUMNS, BUSINESS_COLUMNS,
    BROKEN_REF, DEFAULT_VIOLATION, CSAT_MIN_SCORE, CSAT_MAX_SCORE,
)
from opsdash.data.normalize import clean_text, parse_date, parse_number
from opsdash.data.schemas import (
    QAEntry, ProductivityEntry, CsatEntry, RefundEntry, BusinessEntry,
)

Row = dict[str, str]


def _text(row: Row, column: str | tuple[str, ...]) -> str:
    """Cleaned cell text; for a tuple of columns the first non-empty wins."""
    columns = (column,) if isinstance(column, str) else column
    for col in columns:
        value = clean_text(row.get(col))
        if value:
            return value
    return ""


def _number(row: Row, column: str | tuple[str, ...]) -> float:
    """Parsed cell number; for a tuple of columns the first non-zero wins."""
    columns = (column,) if isinstance(column, str) else column
    for col in columns:
        value = parse_number(row.get(col))
        if value:
            return value
    return 0.0


def _date(row: Row, column: str) -> str | None:
    return parse_date(row.get(column))


def _map(rows: Iterable[Row], build: Callable[[Row], object], keep: Callable[[object], bool]) -> tuple:
    records = (build(row) for row in rows)
    return tuple(r for r in records if keep(r))


# ---------------------------------------------------------------------------
# QA
# ---------------------------------------------------------------------------

def map_qa(rows: Iterable[Row]) -> tuple[QAEntry, ...]:
    c = QA_COLUMNS
    return _map(
        rows,
        lambda row: QAEntry(
            date=_date(row, c["date"]),
            agent=_text(row, c["agent"]),
            score=_number(row, c["score"]),
            grade=_text(row, c["grade"]),
            soft_skills=_number(row, c["softSkills"]),
            issue_understanding=_number(row, c["issueUnderstanding"]),
            product_process=_number(row, c["productProcess"]),
            tools_utilization=_number(row, c["toolsUtilization"]),
            violation=_text(row, c["violation"]) or DEFAULT_VIOLATION,
        ),
        lambda r: bool(r.agent),
    )


# ---------------------------------------------------------------------------
# Productivity
# ---------------------------------------------------------------------------

def map_productivity(rows: Iterable[Row]) -> tuple[ProductivityEntry, ...]:
    c = PRODUCTIVITY_COLUMNS
    return _map(
        rows,
        lambda row: ProductivityEntry(
            date=_date(row, c["date"]),
            agent=_text(row, c["agent"]),
            tickets_handled=_number(row, c["ticketsHandled"]),
            tickets_per_hour=_number(row, c["ticketsPerHour"]),
            hours_worked=_number(row, c["hoursWorked"]),
        ),
        lambda r: bool(r.agent) and r.agent != BROKEN_REF,
    )


# ---------------------------------------------------------------------------
# CSAT
# ---------------------------------------------------------------------------

def map_csat(rows: Iterable[Row]) -> tuple[CsatEntry, ...]:
    c = CSAT_COLUMNS
    return _map(
        rows,
        lambda row: CsatEntry(
            date=_date(row, c["date"]),
            agent=_text(row, c["agent"]),
            score=_number(row, c["score"]),
        ),
        lambda r: bool(r.agent) and CSAT_MIN_SCORE <= r.score <= CSAT_MAX_SCORE,
    )


# ---------------------------------------------------------------------------
# Refunds
# ---------------------------------------------------------------------------

def map_refunds(rows: Iterable[Row]) -> tuple[RefundEntry, ...]:
    c = REFUND_COLUMNS
    return _map(
        rows,
        lambda row: RefundEntry(
            date=_date(row, c["date"]),
            agent=_text(row, c["agent"]),
            amount=_number(row, c["amount"]),
            reason=_text(row, c["reason"]),
        ),
        lambda r: bool(r.agent),
    )


# ---------------------------------------------------------------------------
# Business P&L
# ---------------------------------------------------------------------------

def map_business(rows: Iterable[Row]) -> tuple[BusinessEntry, ...]:
    c = BUSINESS_COLUMNS
    return _map(
        rows,
        lambda row: BusinessEntry(
            date=_date(row, c["date"]),
            store=_text(row, c["store"]),
            product=_text(row, c["product"]),
            revenue=_number(row, c["revenue"]),
            units_sold=_number(row, c["unitsSold"]),
            refunds=_number(row, c["refunds"]),
            cogs=_number(row, c["cogs"]),
            ad_spend=_number(row, c["adSpend"]),
            net_profit=_number(row, c["netProfit"]),
            orders=_number(row, c["orders"]),
        ),
        lambda r: bool(r.date),
    )
