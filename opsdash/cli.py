#!/usr/bin/env python3
"""
Ops Dashboard CLI — console summaries, Excel export, and the API server.

USAGE:
  python -m opsdash.cli summary                               # All tabs, all time
  python -m opsdash.cli summary --range last7                 # Quick range
  python -m opsdash.cli summary --start 2024-03-01 --end 2024-03-31
  python -m opsdash.cli summary --source-dir ./sheets         # Local <domain>.csv files

  python -m opsdash.cli export                                # Workbook to the reports folder
  python -m opsdash.cli export --output ./dashboard.xlsx --range last30

  python -m opsdash.cli serve                                 # Start API server
  python -m opsdash.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import os
from datetime import datetime
from pathlib import Path

from opsdash.config import REPORTS_FOLDER, SOURCE_DIR
from opsdash.data.store import DataStore
from opsdash.data.schemas import DateRange, QuickRange
from opsdash.analytics.dashboard import SECTIONS, full_dashboard


def _load(args) -> DataStore:
    source_dir = Path(args.source_dir) if getattr(args, "source_dir", None) else SOURCE_DIR
    return DataStore().load(source_dir=source_dir)


def _build_range(store: DataStore, args) -> DateRange:
    """Resolve --range / --start / --end against the loaded dates."""
    qr = QuickRange(args.range) if getattr(args, "range", None) else None
    return store.resolve_range(qr, args.start or "", args.end or "")


def _print_table(rows: list[dict], columns: list[tuple[str, str]], limit: int = 10) -> None:
    """Fixed-width leaderboard: columns are (key, header); first column left-aligned."""
    if not rows:
        print("      (no data for this range)")
        return
    header = f"      {columns[0][1]:<28}" + "".join(f"{h:>14}" for _, h in columns[1:])
    print(header)
    for row in rows[:limit]:
        line = f"      {str(row.get(columns[0][0], ''))[:26]:<28}"
        for key, _ in columns[1:]:
            val = row.get(key, "")
            line += f"{val:>14,}" if isinstance(val, (int, float)) else f"{str(val):>14}"
        print(line)


_LEADERBOARDS = {
    "qa": ("agents", [("agent", "Agent"), ("avgScore", "Avg Score"), ("evaluations", "Evals"),
                      ("violations", "Violations"), ("topGrade", "Grade")]),
    "productivity": ("agents", [("agent", "Agent"), ("ticketsHandled", "Tickets"),
                                ("hoursWorked", "Hours"), ("ticketsPerHour", "Tickets/Hr")]),
    "csat": ("agents", [("agent", "Agent"), ("avgRating", "Avg Rating"), ("responses", "Responses"),
                        ("positiveRate", "Positive %")]),
    "refunds": ("agents", [("agent", "Agent"), ("refundsProcessed", "Refunds"),
                           ("totalAmount", "Total"), ("avgAmount", "Avg")]),
    "chargebacks": ("byMid", [("mid", "MID"), ("count", "Chargebacks"), ("amount", "Amount")]),
    "business": ("byProduct", [("product", "Product"), ("revenue", "Revenue"),
                               ("orders", "Orders"), ("profit", "Net Profit")]),
}


def cmd_summary(args):
    """Print KPIs and the top of each leaderboard."""
    print("\n" + "=" * 70)
    print("  OPS DASHBOARD — SUMMARY")
    print("=" * 70)

    store = _load(args)
    date_range = _build_range(store, args)
    data = full_dashboard(store, date_range)

    print(f"\n  Range: {date_range.label}")
    for domain, label in SECTIONS:
        section = data[domain]
        print(f"\n  {label.upper()}")
        kpis = "  |  ".join(f"{k}: {v}" for k, v in section["kpis"].items())
        print(f"    {kpis}")
        key, columns = _LEADERBOARDS[domain]
        _print_table(section[key], columns)
    print("\n" + "=" * 70 + "\n")


def cmd_export(args):
    """Write the summary workbook."""
    from opsdash.reports.dashboard_report import generate_excel

    print("\n" + "=" * 70)
    print("  OPS DASHBOARD — EXCEL EXPORT")
    print("=" * 70)
    print(f"  Started: {datetime.now():%Y-%m-%d %H:%M:%S}")

    store = _load(args)
    date_range = _build_range(store, args)

    if args.output:
        out = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        out = REPORTS_FOLDER / f"Ops_Dashboard_{timestamp}.xlsx"

    print(f"\n  Range: {date_range.label}")
    path = generate_excel(store, out, date_range)
    print(f"\n  Workbook saved to: {path}")
    print("=" * 70 + "\n")


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Ops Dashboard API on port {args.port}...")
    uvicorn.run("opsdash.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def _add_range_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--range", choices=[q.value for q in QuickRange], help="Quick range")
    p.add_argument("--start", help="Start date (YYYY-MM-DD)")
    p.add_argument("--end", help="End date (YYYY-MM-DD)")
    p.add_argument("--source-dir", help="Folder of <domain>.csv files instead of the published sheet")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Ops Dashboard — agent performance and business analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # summary subcommand
    summary_parser = subparsers.add_parser("summary", help="Print tab summaries")
    _add_range_args(summary_parser)
    summary_parser.set_defaults(func=cmd_summary)

    # export subcommand
    export_parser = subparsers.add_parser("export", help="Export summary workbook")
    export_parser.add_argument("--output", help="Output .xlsx path (default: reports folder)")
    _add_range_args(export_parser)
    export_parser.set_defaults(func=cmd_export)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
