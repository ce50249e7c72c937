"""
CSAT analytics — ratings per agent, star breakdown, positive rate.
"""
from __future__ import annotations

from typing import Iterable

from opsdash.config import CSAT_POSITIVE_SCORE
from opsdash.analytics.common import round_half_up, safe_divide, sanitize_for_json, whole_pct
from opsdash.analytics.rollup import column_total, date_trend, group_rollup
from opsdash.data.schemas import CsatEntry

STAR_COLUMNS = {
    5: "fiveStar",
    4: "fourStar",
    3: "threeStar",
    2: "twoStar",
    1: "oneStar",
}


def _star_flag(stars: int):
    return lambda r: r.score == stars


def agent_ratings(records: Iterable[CsatEntry]) -> list[dict]:
    """Per-agent average rating with 1–5 star counts, best rated first."""
    derive = {f"is_{name}": _star_flag(stars) for stars, name in STAR_COLUMNS.items()}
    aggs = {
        "avgRating": ("score", "mean"),
        "responses": ("agent", "count"),
    }
    aggs.update({name: (f"is_{name}", "sum") for name in STAR_COLUMNS.values()})

    rows = group_rollup(records, "agent", aggs, sort_by="avgRating", derive=derive)
    for row in rows:
        for name in STAR_COLUMNS.values():
            row[name] = int(row[name])
        row["avgRating"] = round_half_up(row["avgRating"], 2)
        row["positiveRate"] = whole_pct(row["fiveStar"] + row["fourStar"], row["responses"])
    return rows


def rating_trend(records: Iterable[CsatEntry]) -> list[dict]:
    rows = date_trend(records, {
        "avgRating": ("score", "mean"),
        "responses": ("date", "count"),
    })
    for row in rows:
        row["avgRating"] = round_half_up(row["avgRating"], 2)
    return rows


def csat_kpis(records: tuple[CsatEntry, ...]) -> dict:
    n = len(records)
    return {
        "responses": n,
        "avgRating": round_half_up(safe_divide(column_total(records, "score"), max(n, 1)), 2),
        "fiveStarRate": whole_pct(sum(1 for r in records if r.score == 5), max(n, 1)),
        "positiveRate": whole_pct(
            sum(1 for r in records if r.score >= CSAT_POSITIVE_SCORE), max(n, 1),
        ),
    }


def csat_summary(records: Iterable[CsatEntry]) -> dict:
    records = tuple(records)
    return sanitize_for_json({
        "kpis": csat_kpis(records),
        "agents": agent_ratings(records),
        "trend": rating_trend(records),
    })
