"""
Shared fixtures: one small export per tab and a store loaded from them.
"""
from __future__ import annotations

import pytest

from opsdash.data.loader import parse_sources
from opsdash.data.store import DataStore

QA_CSV = (
    "Date,Agent Name,Final Score,Grade,Soft Skills,Issue Understanding,"
    "Product & Process,Tools Utilization,Zero Tolerance Violation\n"
    "2024-03-01,Ana,80,B,20,20,20,20,No\n"
    "2024-03-02,Ana,90,A,22,23,22,23,\n"
    "2024-03-02,Ben,60,C,15,15,15,15,Yes\n"
    ",,,,,,,,\n"
)

PRODUCTIVITY_CSV = (
    "Date,Agent Name,Tickets replied,Ticket/hour,Hours Worked\r\n"
    "3/1/24,Ana,40,5,8\r\n"
    "3/2/24,Ana,30,5,6\r\n"
    "3/2/24,#REF!,0,0,0\r\n"
    "3/2/24,Ben,20,4,5\r\n"
)

CSAT_CSV = (
    "date,assignee,score\n"
    "2024-03-01,Ana,5\n"
    "2024-03-01,Ana,4\n"
    "2024-03-02,Ben,3\n"
    "2024-03-02,Ben,9\n"
)

REFUNDS_CSV = (
    "Refund Date,Refunded By,Refund Amt EUR,Refund Amount,Refund Reason 1\n"
    '2024-03-01,Ana,"€10.50",,Damaged item\n'
    "2024-03-02,Ana,,20,Customer changed their mind about it\n"
    "2024-03-02,Ben,5,,\n"
)

CHARGEBACKS_CSV = (
    "Chargeback Report,,,\n"
    "MID,Chargebacks,Payments,CB%\n"
    "MID-A,5,1000,0.005\n"
    "MID-B,2,1000,0.002\n"
    "Total/Avg,7,2000,0.0035\n"
    "\n"
    "Case ID,Filing Date,Transaction ID,Reason,Amount,Currency,Payment Method,"
    "Order ID,SKU,Product,Country\n"
    "C-1,3/1/24,T1,Fraud,25.00,EUR,MID-A,O1,S1,Widget,DE\n"
    "C-2,3/2/24,T2,Not received,15.50,EUR,,O2,S2,Widget,FR\n"
)

BUSINESS_CSV = (
    "date,store,friendly_name,revenue,units_sold,refunds,total_cogs,"
    "total_ad_spend,net_profit,n_orders\n"
    "2024-03-01,EU,Widget,100,10,0,40,10,50,8\n"
    "2024-03-02,EU,Gadget,200,5,10,80,20,90,4\n"
    "2024-03-02,US,Widget,50,5,0,20,5,25,3\n"
    ",EU,Widget,999,1,0,0,0,0,1\n"
)


@pytest.fixture()
def sources() -> dict[str, str]:
    return {
        "qa": QA_CSV,
        "productivity": PRODUCTIVITY_CSV,
        "csat": CSAT_CSV,
        "refunds": REFUNDS_CSV,
        "chargebacks": CHARGEBACKS_CSV,
        "business": BUSINESS_CSV,
    }


@pytest.fixture()
def store(sources) -> DataStore:
    """Loaded store over the sample exports (dates 2024-03-01 and 2024-03-02)."""
    return DataStore(parse_sources(sources))


@pytest.fixture()
def source_dir(tmp_path, sources):
    """The sample exports written as <domain>.csv files."""
    for domain, text in sources.items():
        (tmp_path / f"{domain}.csv").write_text(text, encoding="utf-8")
    return tmp_path
