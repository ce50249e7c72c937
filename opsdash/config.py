"""
Ops Dashboard — Configuration: sheet sources, column maps, thresholds.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Sources — published Google Sheet, one gid per tab
# ---------------------------------------------------------------------------
SHEET_BASE = os.environ.get(
    "OPSDASH_SHEET_BASE",
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vRXfIKIP4CFEUG6LGRhI6MPCSyvqwjOHFw-kn2VvJy4ZAmtBcVO9Z74g5mcaRuEPQrNGSitk0BWXemo"
    "/pub?output=csv",
)

SHEET_GIDS = {
    "qa": "0",
    "productivity": "1904474818",
    "csat": "2057552355",
    "refunds": "868787773",
    "chargebacks": "2061572475",
    "business": "2032573496",
}

SHEET_URLS = {domain: f"{SHEET_BASE}&gid={gid}" for domain, gid in SHEET_GIDS.items()}

DOMAINS = list(SHEET_GIDS)

# Local alternative: a folder holding qa.csv, productivity.csv, ...
_source_dir = os.environ.get("OPSDASH_SOURCE_DIR")
SOURCE_DIR = Path(_source_dir) if _source_dir else None

FETCH_TIMEOUT = float(os.environ.get("OPSDASH_FETCH_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Output paths — override with OPSDASH_DATA_DIR for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("OPSDASH_DATA_DIR", str(Path.home() / "Ops Dashboard")))
REPORTS_FOLDER = _data_dir / "reports"

# ---------------------------------------------------------------------------
# Column mapping from raw sheet headers → record fields
# A tuple lists fallbacks: the first non-empty value wins.
# ---------------------------------------------------------------------------
QA_COLUMNS = {
    "date": "Date",
    "agent": "Agent Name",
    "score": "Final Score",
    "grade": "Grade",
    "softSkills": "Soft Skills",
    "issueUnderstanding": "Issue Understanding",
    "productProcess": "Product & Process",
    "toolsUtilization": "Tools Utilization",
    "violation": "Zero Tolerance Violation",
}

PRODUCTIVITY_COLUMNS = {
    "date": "Date",
    "agent": ("Agent Name", "Agent"),
    "ticketsHandled": "Tickets replied",
    "ticketsPerHour": "Ticket/hour",
    "hoursWorked": "Hours Worked",
}

CSAT_COLUMNS = {
    "date": "date",
    "agent": ("Agent Name", "assignee"),
    "score": "score",
}

REFUND_COLUMNS = {
    "date": "Refund Date",
    "agent": "Refunded By",
    "amount": ("Refund Amt EUR", "Refund Amount"),
    "reason": "Refund Reason 1",
}

BUSINESS_COLUMNS = {
    "date": "date",
    "store": "store",
    "product": "friendly_name",
    "revenue": "revenue",
    "unitsSold": "units_sold",
    "refunds": "refunds",
    "cogs": "total_cogs",
    "adSpend": "total_ad_spend",
    "netProfit": "net_profit",
    "orders": "n_orders",
}

# Chargeback detail block is positional (no shared header with the summary block)
CHARGEBACK_DETAIL_FIELDS = [
    "caseId", "filingDate", "transactionId", "reason", "amount", "currency",
    "paymentMethod", "orderId", "sku", "product", "country",
]

# ---------------------------------------------------------------------------
# Sentinels found in the hand-edited sheets
# ---------------------------------------------------------------------------
BROKEN_REF = "#REF!"
CHARGEBACK_TOTAL_LABEL = "Total/Avg"
CHARGEBACK_DETAIL_MARKER = "Case"
CHARGEBACK_SUMMARY_SKIP_ROWS = 2   # title + header above the MID block
DEFAULT_VIOLATION = "No"

# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------
QA_PASS_SCORE = 70
CSAT_POSITIVE_SCORE = 4
CSAT_MIN_SCORE = 1
CSAT_MAX_SCORE = 5

# cbPct is kept exactly as the sheet stores it (a fraction, e.g. 0.005)
CB_HIGH_RISK = 0.01
CB_WARNING = 0.005

REASON_LABEL_MAX = 20
TOP_REASONS = 8
