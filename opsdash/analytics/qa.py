"""
QA analytics — evaluation KPIs, agent rankings, score trend, grade mix.
"""
from __future__ import annotations

from typing import Iterable

from opsdash.config import QA_PASS_SCORE
from opsdash.analytics.common import round_half_up, safe_divide, sanitize_for_json, whole_pct
from opsdash.analytics.rollup import column_total, count_by, date_trend, group_rollup
from opsdash.data.schemas import QAEntry

VIOLATION_FLAG = "Yes"


def _is_violation(r: QAEntry) -> bool:
    return r.violation == VIOLATION_FLAG


def qa_kpis(records: tuple[QAEntry, ...]) -> dict:
    n = len(records)
    passed = sum(1 for r in records if r.score >= QA_PASS_SCORE)
    return {
        "evaluations": n,
        "avgScore": round_half_up(safe_divide(column_total(records, "score"), n), 1),
        "passRate": whole_pct(passed, n),
        "violations": sum(1 for r in records if _is_violation(r)),
    }


def agent_rankings(records: Iterable[QAEntry]) -> list[dict]:
    """Per-agent average score, best first."""
    rows = group_rollup(
        records, "agent",
        {
            "avgScore": ("score", "mean"),
            "evaluations": ("agent", "count"),
            "violations": ("is_violation", "sum"),
            "topGrade": ("grade", "mode"),
        },
        sort_by="avgScore",
        derive={"is_violation": _is_violation},
    )
    for row in rows:
        row["avgScore"] = round_half_up(row["avgScore"], 1)
        row["violations"] = int(row["violations"])
    return rows


def score_trend(records: Iterable[QAEntry]) -> list[dict]:
    rows = date_trend(records, {
        "avgScore": ("score", "mean"),
        "evaluations": ("date", "count"),
    })
    for row in rows:
        row["avgScore"] = round_half_up(row["avgScore"], 1)
    return rows


def grade_distribution(records: Iterable[QAEntry]) -> list[dict]:
    return count_by(records, "grade", label="grade")


def qa_summary(records: Iterable[QAEntry]) -> dict:
    """Everything the QA tab shows for one date range."""
    records = tuple(records)
    return sanitize_for_json({
        "kpis": qa_kpis(records),
        "agents": agent_rankings(records),
        "trend": score_trend(records),
        "grades": grade_distribution(records),
    })
