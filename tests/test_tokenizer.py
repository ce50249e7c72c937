"""
tests/test_tokenizer.py

Character-scan CSV tokenizer and header mapping.
"""
from __future__ import annotations

import pytest

from opsdash.data.tokenizer import is_markup, map_rows, parse_csv, tokenize


# ---------------------------------------------------------------------------
# tokenize
# ---------------------------------------------------------------------------


class TestTokenize:
    def test_quoted_commas_and_doubled_quotes(self) -> None:
        assert tokenize('a,"b,c","d""e"') == [["a", "b,c", 'd"e']]

    def test_fields_are_trimmed(self) -> None:
        assert tokenize("  a , b  \n") == [["a", "b"]]

    def test_blank_lines_dropped_by_default(self) -> None:
        assert tokenize("a,b\n\nc,d\n") == [["a", "b"], ["c", "d"]]

    def test_blank_lines_kept_on_request(self) -> None:
        assert tokenize("a,b\n\nc,d\n", keep_blank=True) == [["a", "b"], [""], ["c", "d"]]

    def test_crlf_is_one_terminator(self) -> None:
        assert tokenize("a,b\r\nc,d\r\n") == [["a", "b"], ["c", "d"]]

    def test_bare_carriage_return_discarded(self) -> None:
        assert tokenize("a\rb,c\n") == [["ab", "c"]]

    def test_newline_inside_quotes_is_literal(self) -> None:
        assert tokenize('x,"line1\nline2"\ny,z') == [["x", "line1\nline2"], ["y", "z"]]

    def test_last_row_without_terminator_is_flushed(self) -> None:
        assert tokenize("a,b\nc,") == [["a", "b"], ["c", ""]]

    def test_comma_only_line_is_a_row_of_empty_fields(self) -> None:
        assert tokenize(",,\n") == [["", "", ""]]

    def test_empty_and_none(self) -> None:
        assert tokenize("") == []
        assert tokenize(None) == []

    def test_markup_page_is_no_data(self) -> None:
        page = "<!DOCTYPE html><html><body>Sign in</body></html>"
        assert is_markup(page)
        assert tokenize(page) == []
        assert tokenize("<html>error</html>") == []

    def test_plain_csv_is_not_markup(self) -> None:
        assert not is_markup("a,b\n1,2\n")
        assert not is_markup(None)


# ---------------------------------------------------------------------------
# map_rows / parse_csv
# ---------------------------------------------------------------------------


class TestMapRows:
    def test_header_zip(self) -> None:
        assert map_rows([["A", "B"], ["1", "2"]]) == [{"A": "1", "B": "2"}]

    def test_missing_cells_become_empty(self) -> None:
        assert map_rows([["A", "B", "C"], ["1"]]) == [{"A": "1", "B": "", "C": ""}]

    def test_all_empty_rows_dropped(self) -> None:
        assert parse_csv("A,B\n,,\n1,2\n") == [{"A": "1", "B": "2"}]

    def test_embedded_newlines_removed(self) -> None:
        assert parse_csv('A,B\n"x\ny",2\n') == [{"A": "xy", "B": "2"}]

    def test_header_only_is_empty(self) -> None:
        assert map_rows([["A", "B"]]) == []
        assert map_rows([]) == []
        assert parse_csv("A,B\n") == []


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


def _join(rows: list[list[str]], terminator: str = "\n", trailing: bool = True) -> str:
    text = terminator.join(",".join(row) for row in rows)
    return text + terminator if trailing else text


class TestRoundTrip:
    """Plain fields (no commas, quotes or newlines) come back unchanged after trim."""

    @pytest.mark.parametrize("rows", [
        [["a", "b", "c"], ["1", "2", "3"], ["x", "y", "z"]],
        [["  Agent ", "Score  "], [" Ana", "80 "], ["Ben  ", "  60"]],
        [["Date", "Agent Name", "Final Score"], ["2024-03-01", "Ana Smith", "80.5"]],
        [["only"]],
        [["a", ""], ["", "b"], ["", ""]],
    ])
    @pytest.mark.parametrize("terminator", ["\n", "\r\n"])
    @pytest.mark.parametrize("trailing", [True, False])
    def test_join_then_tokenize(self, rows, terminator, trailing) -> None:
        expected = [[field.strip() for field in row] for row in rows]
        assert tokenize(_join(rows, terminator, trailing)) == expected
