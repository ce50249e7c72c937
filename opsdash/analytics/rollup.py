"""
Generic group-by / rollup over record tuples.

Every domain summary goes through group_rollup(): pick a key (a field name
or a function of the record), name the aggregates, get back one dict per
distinct key sorted by a metric. Sums use exact_sum so results do not depend
on record order; ties on the sort metric fall back to the key, ascending.
"""
from __future__ import annotations

from dataclasses import asdict
from typing import Callable, Iterable, Optional, Union

import pandas as pd

from opsdash.analytics.common import exact_sum, safe_divide

KeySpec = Union[str, Callable[[object], Optional[str]]]
AggSpec = dict[str, tuple[str, str]]   # output name → (record field, op)

OPS = ("sum", "count", "mean", "mode")
NO_VALUE = "-"


def to_frame(records: Iterable) -> pd.DataFrame:
    """Records → DataFrame with one column per dataclass field."""
    return pd.DataFrame([asdict(r) for r in records])


def top_value(values: Iterable) -> str:
    """Most frequent non-empty value; ties go to the alphabetically first."""
    counts = pd.Series([v for v in values if v], dtype=object).value_counts()
    if counts.empty:
        return NO_VALUE
    best = counts.max()
    return sorted(str(v) for v in counts[counts == best].index)[0]


def _keys(records: tuple, key: KeySpec, fill_key: Optional[str]) -> list:
    if callable(key):
        return [key(r) for r in records]
    values = [getattr(r, key, None) for r in records]
    if fill_key is not None:
        return [v or fill_key for v in values]
    return values


def _aggregate(grouped, name: str, field: str, op: str) -> pd.Series:
    if op == "count":
        return grouped.size()
    if op == "sum":
        return grouped[field].agg(exact_sum)
    if op == "mean":
        return grouped[field].agg(lambda s: safe_divide(exact_sum(s), len(s)))
    if op == "mode":
        return grouped[field].agg(top_value)
    raise ValueError(f"Unknown aggregate op for {name!r}: {op}")


def group_rollup(
    records: Iterable,
    key: KeySpec,
    aggs: AggSpec,
    label: Optional[str] = None,
    sort_by: Optional[str] = None,
    ascending: bool = False,
    fill_key: Optional[str] = None,
    derive: Optional[dict[str, Callable[[object], object]]] = None,
) -> list[dict]:
    """One summary row per distinct key.

    Records whose key is empty are skipped unless fill_key supplies a
    stand-in (e.g. "Unknown"). `derive` adds per-record columns (flags like
    "is 5-star") that aggs can then sum. With no sort_by, rows come out by key.
    """
    records = tuple(records)
    label = label or (key if isinstance(key, str) else "key")
    if not records:
        return []

    keys = _keys(records, key, fill_key)
    df = to_frame(records)
    for column, fn in (derive or {}).items():
        df[column] = [fn(r) for r in records]
    df["_key"] = keys
    df = df[[bool(k) for k in keys]]
    if df.empty:
        return []

    grouped = df.groupby("_key", sort=True)
    out = pd.DataFrame({
        name: _aggregate(grouped, name, field, op)
        for name, (field, op) in aggs.items()
    })
    out.index.name = label
    out = out.reset_index()

    if sort_by and sort_by != label:
        out = out.sort_values([sort_by, label], ascending=[ascending, True], kind="mergesort")
    else:
        out = out.sort_values(label, ascending=True if sort_by is None else ascending, kind="mergesort")
    return out.to_dict("records")


def date_trend(
    records: Iterable,
    aggs: AggSpec,
    derive: Optional[dict[str, Callable[[object], object]]] = None,
) -> list[dict]:
    """Rollup keyed by date, oldest first; undated records are skipped."""
    return group_rollup(
        records, "date", aggs, label="date", sort_by="date", ascending=True, derive=derive,
    )


def count_by(
    records: Iterable,
    key: KeySpec,
    label: str,
    fill_key: Optional[str] = None,
    limit: Optional[int] = None,
) -> list[dict]:
    """Distribution of records over a key, most frequent first."""
    rows = group_rollup(
        records, key, {"count": (label, "count")},
        label=label, sort_by="count", fill_key=fill_key,
    )
    return rows[:limit] if limit is not None else rows


def column_total(records: Iterable, field: str) -> float:
    """Exact sum of one numeric field across records."""
    return exact_sum(getattr(r, field) for r in records)
