"""
Field normalisation: free-form sheet text → clean text, ISO dates, numbers.

Every function here is total: bad input falls back to a safe default
("" / 0 / the original text) instead of raising.
"""
from __future__ import annotations

import re

MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_MONTH_DAY_YEAR_RE = re.compile(r"([A-Za-z]+)\s+(\d+),?\s+(\d+)")
_ISO_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def clean_text(value) -> str:
    """Drop newlines (real and literal backslash-n) and surrounding whitespace."""
    if value is None or value == "":
        return ""
    return str(value).replace("\n", "").replace("\\n", "").strip()


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def is_iso_date(value) -> bool:
    """True for an exact YYYY-MM-DD string."""
    return isinstance(value, str) and bool(ISO_DATE_RE.match(value))


def _from_month_name(text: str) -> str | None:
    if not any(text.startswith(m) for m in MONTH_ABBREVIATIONS):
        return None
    match = _MONTH_DAY_YEAR_RE.search(text)
    if not match or match.group(1) not in MONTH_ABBREVIATIONS:
        return None
    month = MONTH_ABBREVIATIONS.index(match.group(1)) + 1
    return f"{match.group(3)}-{month:02d}-{match.group(2).zfill(2)}"


def _from_slashes(text: str) -> str | None:
    parts = text.split("/")
    if len(parts) != 3:
        return None
    year_match = _LEADING_INT_RE.match(parts[2])
    if not year_match:
        return None
    year = int(year_match.group(1))
    if year < 100:
        year += 2000
    return f"{year}-{parts[0].zfill(2)}-{parts[1].zfill(2)}"


def parse_date(value) -> str | None:
    """Normalise a sheet date to YYYY-MM-DD.

    Accepts "Jan 5, 2024", "3/9/24" / "03/09/2024" and ISO timestamps.
    Anything else is returned cleaned but otherwise verbatim; empty → None.
    """
    if value is None or value == "":
        return None
    text = clean_text(value)

    iso = _from_month_name(text)
    if iso is not None:
        return iso
    if "/" in text:
        iso = _from_slashes(text)
        if iso is not None:
            return iso
    if _ISO_PREFIX_RE.match(text):
        return text[:10]
    return text


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def parse_float(value) -> float:
    """Leading-prefix float parse ("0.5%" → 0.5, "abc" → 0)."""
    if value is None:
        return 0.0
    match = _LEADING_FLOAT_RE.match(str(value))
    if not match:
        return 0.0
    try:
        return float(match.group(1))
    except ValueError:
        return 0.0


def parse_int(value) -> int:
    """Leading-prefix integer parse ("1,000" → 1, "" → 0)."""
    if value is None:
        return 0
    match = _LEADING_INT_RE.match(str(value))
    return int(match.group(1)) if match else 0


def parse_number(value) -> float:
    """Strip currency symbols/separators and parse ("€1,234.56" → 1234.56)."""
    if value is None or value == "" or value == "nan":
        return 0.0
    return parse_float(_NON_NUMERIC_RE.sub("", str(value)))
