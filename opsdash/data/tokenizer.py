"""
CSV tokenizer for published-sheet exports.

Hand-edited sheets come back with quoted multi-line cells, doubled quotes and
a mix of \\n / \\r\\n endings, so rows are built by a single character scan
instead of a line split. A Google error page (HTML) is treated as no data.
"""
from __future__ import annotations

_MARKUP_MARKERS = ("<!DOCTYPE", "<html")


def is_markup(text: str | None) -> bool:
    """True when the payload is an HTML page rather than CSV."""
    if not text:
        return False
    return any(marker in text for marker in _MARKUP_MARKERS)


def _keep(row: list[str], keep_blank: bool) -> bool:
    return keep_blank or len(row) > 1 or row[0] != ""


def tokenize(text: str | None, keep_blank: bool = False) -> list[list[str]]:
    """Split CSV text into rows of trimmed field strings.

    With keep_blank=False a wholly blank line (one empty field) is dropped;
    the chargebacks extractor passes keep_blank=True because blank lines
    separate its regions.
    """
    if not text or is_markup(text):
        return []

    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False
    i = 0
    n = len(text)

    while i < n:
        char = text[i]
        next_char = text[i + 1] if i + 1 < n else ""

        if in_quotes:
            if char == '"' and next_char == '"':
                field.append('"')
                i += 1
            elif char == '"':
                in_quotes = False
            else:
                field.append(char)
        elif char == '"':
            in_quotes = True
        elif char == ",":
            row.append("".join(field).strip())
            field = []
        elif char == "\n" or (char == "\r" and next_char == "\n"):
            row.append("".join(field).strip())
            if _keep(row, keep_blank):
                rows.append(row)
            row = []
            field = []
            if char == "\r":
                i += 1
        elif char != "\r":
            field.append(char)
        i += 1

    if field or row:
        row.append("".join(field).strip())
        if _keep(row, keep_blank):
            rows.append(row)

    return rows


def map_rows(rows: list[list[str]]) -> list[dict[str, str]]:
    """Zip data rows against the header row.

    Missing cells become "", embedded newlines are removed, and rows with
    every value empty are dropped.
    """
    if len(rows) < 2:
        return []

    headers = rows[0]
    mapped = []
    for row in rows[1:]:
        record = {}
        for idx, header in enumerate(headers):
            value = row[idx] if idx < len(row) else ""
            record[header] = value.replace("\n", "").strip()
        if any(v != "" for v in record.values()):
            mapped.append(record)
    return mapped


def parse_csv(text: str | None) -> list[dict[str, str]]:
    """Tokenize and header-map one sheet export."""
    return map_rows(tokenize(text))
