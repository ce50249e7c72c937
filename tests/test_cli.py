"""
tests/test_cli.py

CLI subcommands against a local folder of exports.
"""
from __future__ import annotations

import pytest
from openpyxl import load_workbook

from opsdash.cli import build_parser, main


class TestParser:
    def test_range_choices(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["summary", "--range", "fortnight"])

    def test_serve_defaults(self) -> None:
        args = build_parser().parse_args(["serve"])
        assert args.reload is False
        assert isinstance(args.port, int)

    def test_no_command_prints_help(self, capsys) -> None:
        main([])
        assert "summary" in capsys.readouterr().out


class TestSummary:
    def test_prints_every_tab(self, source_dir, capsys) -> None:
        main(["summary", "--source-dir", str(source_dir)])
        out = capsys.readouterr().out
        for heading in ("QA", "PRODUCTIVITY", "CSAT", "REFUNDS", "CHARGEBACKS", "BUSINESS"):
            assert f"\n  {heading}\n" in out
        assert "Range: 2024-03-01 to 2024-03-02" in out
        assert "Ana" in out

    def test_explicit_dates(self, source_dir, capsys) -> None:
        main(["summary", "--source-dir", str(source_dir), "--start", "2030-01-01", "--end", "2030-01-02"])
        out = capsys.readouterr().out
        assert "Range: 2030-01-01 to 2030-01-02" in out
        assert "(no data for this range)" in out


class TestExport:
    def test_writes_workbook(self, source_dir, tmp_path, capsys) -> None:
        out = tmp_path / "export" / "dash.xlsx"
        main(["export", "--source-dir", str(source_dir), "--output", str(out), "--range", "today"])
        assert out.exists()
        assert "Workbook saved to" in capsys.readouterr().out
        assert load_workbook(out)["Productivity"]["A2"].value == "Ana"
