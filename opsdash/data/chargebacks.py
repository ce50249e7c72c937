"""
Chargebacks tab extractor.

The tab holds two unrelated tables stacked vertically:

    <title>
    MID, Chargebacks, Payments, CB%        ← summary header
    MID-A, 5, 1000, 0.005
    ...
    Total/Avg, 10, 2000, 0.005             ← sheet-computed total, kept verbatim
    <blank>
    Case ID, Filing Date, ...              ← detail header (first cell contains "Case")
    <one row per case>

Blank rows are kept while tokenizing since they separate the regions.
"""
from __future__ import annotations

from opsdash.config import (
    CHARGEBACK_DETAIL_FIELDS,
    CHARGEBACK_DETAIL_MARKER,
    CHARGEBACK_SUMMARY_SKIP_ROWS,
    CHARGEBACK_TOTAL_LABEL,
)
from opsdash.data.normalize import parse_date, parse_float, parse_int
from opsdash.data.schemas import ChargebackDetail, ChargebackMidSummary, ChargebackSheet
from opsdash.data.tokenizer import tokenize


def _cell(row: list[str], idx: int) -> str:
    return row[idx].strip() if idx < len(row) else ""


def _detail_header_index(rows: list[list[str]]) -> int:
    for idx, row in enumerate(rows):
        if row and CHARGEBACK_DETAIL_MARKER in row[0]:
            return idx
    return -1


def _summary_entry(row: list[str]) -> ChargebackMidSummary:
    return ChargebackMidSummary(
        mid=_cell(row, 0),
        chargebacks=parse_int(_cell(row, 1)),
        payments=parse_int(_cell(row, 2)),
        cb_pct=parse_float(_cell(row, 3)),
    )


def _detail_entry(row: list[str]) -> ChargebackDetail:
    values = {name: _cell(row, idx) for idx, name in enumerate(CHARGEBACK_DETAIL_FIELDS)}
    return ChargebackDetail(
        case_id=values["caseId"],
        filing_date=values["filingDate"],
        transaction_id=values["transactionId"],
        reason=values["reason"],
        amount=parse_float(values["amount"]),
        currency=values["currency"],
        payment_method=values["paymentMethod"],
        order_id=values["orderId"],
        sku=values["sku"],
        product=values["product"],
        country=values["country"],
        date=parse_date(values["filingDate"]),
    )


def parse_chargebacks(text: str | None) -> ChargebackSheet:
    """Split the chargebacks export into MID summary, total row and case details."""
    rows = tokenize(text, keep_blank=True)
    if not rows:
        return ChargebackSheet()

    detail_idx = _detail_header_index(rows)
    summary_end = detail_idx if detail_idx > 0 else len(rows)

    mid_summary = []
    mid_total = None
    for row in rows[CHARGEBACK_SUMMARY_SKIP_ROWS:summary_end]:
        label = row[0] if row else ""
        if not label or CHARGEBACK_DETAIL_MARKER in label:
            continue
        entry = _summary_entry(row)
        if label == CHARGEBACK_TOTAL_LABEL:
            mid_total = entry
        else:
            mid_summary.append(entry)

    details = []
    if detail_idx >= 0:
        for row in rows[detail_idx + 1:]:
            if row and row[0]:
                details.append(_detail_entry(row))

    return ChargebackSheet(
        mid_summary=tuple(mid_summary),
        mid_total=mid_total,
        details=tuple(details),
    )
