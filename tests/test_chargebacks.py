"""
tests/test_chargebacks.py

Two-region chargebacks extractor: MID summary block, Total/Avg row, case details.
"""
from __future__ import annotations

import pytest

from opsdash.data.chargebacks import parse_chargebacks
from opsdash.data.schemas import ChargebackSheet

from conftest import CHARGEBACKS_CSV

DETAIL_HEADER = (
    "Case ID,Filing Date,Transaction ID,Reason,Amount,Currency,"
    "Payment Method,Order ID,SKU,Product,Country"
)


class TestRegions:
    def test_summary_total_and_details(self) -> None:
        text = (
            "Chargebacks\n"
            "MID,Chargebacks,Payments,CB%\n"
            "MID-A,5,1000,0.005\n"
            "Total/Avg,10,2000,0.005\n"
            f"{DETAIL_HEADER}\n"
            "C-9,\"Jan 5, 2024\",T9\n"
        )
        sheet = parse_chargebacks(text)
        assert [m.mid for m in sheet.mid_summary] == ["MID-A"]
        assert sheet.mid_summary[0].chargebacks == 5
        assert sheet.mid_summary[0].payments == 1000
        assert sheet.mid_summary[0].cb_pct == pytest.approx(0.005)
        assert sheet.mid_total is not None
        assert sheet.mid_total.chargebacks == 10
        assert len(sheet.details) == 1
        assert sheet.details[0].case_id == "C-9"
        assert sheet.details[0].date == "2024-01-05"
        assert sheet.details[0].transaction_id == "T9"

    def test_blank_separator_rows_are_skipped(self) -> None:
        sheet = parse_chargebacks(CHARGEBACKS_CSV)
        assert [m.mid for m in sheet.mid_summary] == ["MID-A", "MID-B"]
        assert sheet.mid_total.mid == "Total/Avg"
        assert [d.case_id for d in sheet.details] == ["C-1", "C-2"]

    def test_detail_fields_are_positional(self) -> None:
        detail = parse_chargebacks(CHARGEBACKS_CSV).details[0]
        assert detail.filing_date == "3/1/24"
        assert detail.date == "2024-03-01"
        assert detail.transaction_id == "T1"
        assert detail.reason == "Fraud"
        assert detail.amount == pytest.approx(25.0)
        assert detail.currency == "EUR"
        assert detail.payment_method == "MID-A"
        assert detail.order_id == "O1"
        assert detail.sku == "S1"
        assert detail.product == "Widget"
        assert detail.country == "DE"

    def test_short_detail_rows_pad_with_empty(self) -> None:
        text = f"t\nh\n{DETAIL_HEADER}\nC-1,2024-01-02\n"
        detail = parse_chargebacks(text).details[0]
        assert detail.date == "2024-01-02"
        assert detail.amount == 0
        assert detail.product == ""

    def test_detail_rows_without_case_id_are_skipped(self) -> None:
        text = f"t\nh\n{DETAIL_HEADER}\n,2024-01-02,T1\nC-2,2024-01-03\n"
        assert [d.case_id for d in parse_chargebacks(text).details] == ["C-2"]


class TestEdgeCases:
    def test_last_total_row_wins(self) -> None:
        text = "t\nh\nTotal/Avg,1,10,0.1\nTotal/Avg,2,20,0.1\n"
        sheet = parse_chargebacks(text)
        assert sheet.mid_total.chargebacks == 2
        assert sheet.mid_summary == ()

    def test_no_detail_header_means_no_details(self) -> None:
        sheet = parse_chargebacks("t\nh\nMID-A,5,1000,0.005\nMID-B,1,10,0.1\n")
        assert len(sheet.mid_summary) == 2
        assert sheet.details == ()

    def test_leading_prefix_numbers(self) -> None:
        sheet = parse_chargebacks('t\nh\nMID-A,"1,234",12abc,0.5%\n')
        entry = sheet.mid_summary[0]
        assert entry.chargebacks == 1
        assert entry.payments == 12
        assert entry.cb_pct == pytest.approx(0.5)

    def test_unparsable_numbers_are_zero(self) -> None:
        entry = parse_chargebacks("t\nh\nMID-A,abc,,x\n").mid_summary[0]
        assert (entry.chargebacks, entry.payments, entry.cb_pct) == (0, 0, 0)

    @pytest.mark.parametrize("text", ["", None, "<!DOCTYPE html><html></html>"])
    def test_empty_or_markup_is_empty_sheet(self, text) -> None:
        assert parse_chargebacks(text) == ChargebackSheet()

    def test_to_dict_uses_camel_case(self) -> None:
        sheet = parse_chargebacks(CHARGEBACKS_CSV)
        assert sheet.mid_total.to_dict() == {
            "mid": "Total/Avg", "chargebacks": 7, "payments": 2000, "cbPct": 0.0035,
        }
        assert "paymentMethod" in sheet.details[0].to_dict()
