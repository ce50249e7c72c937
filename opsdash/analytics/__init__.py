"""Rollups and per-tab summaries over the parsed record streams."""
from .rollup import group_rollup, date_trend, count_by, top_value
from .dashboard import SECTIONS, domain_summary, full_dashboard, overview
