"""
Tests for the CSV row reader (ingestion/csv_reader.py).

Covers:
- Lenient score parsing
- Ignore-column handling with and without a configured column
- Multi-line content cells
- Missing columns and unreadable files
"""

import pytest

from responsive_text.ingestion.csv_reader import MissingColumnError, iter_rows, parse_score
from responsive_text.models.entities import Row


# ---------------------------------------------------------------------------
#  parse_score
# ---------------------------------------------------------------------------

class TestParseScore:
    @pytest.mark.parametrize("text, expected", [
        ("3.5", 3.5),
        ("-2", -2.0),
        ("+4.25", 4.25),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("  7.0  ", 7.0),
        ("3.5kg", 3.5),
        ("12abc", 12.0),
        ("1_000", 1000.0),
    ])
    def test_numeric_prefix(self, text, expected):
        assert parse_score(text) == expected

    @pytest.mark.parametrize("text", ["", None, "n/a", "abc", "-", ".", "nan", "inf"])
    def test_unparseable_is_zero(self, text):
        assert parse_score(text) == 0.0

    @pytest.mark.parametrize("text", ["1e999", "-1e999", "2E400kg"])
    def test_overflow_is_zero(self, text):
        assert parse_score(text) == 0.0

    def test_largest_finite_value_kept(self):
        assert parse_score("1e308") == 1e308


# ---------------------------------------------------------------------------
#  iter_rows
# ---------------------------------------------------------------------------

class TestIterRows:
    def test_reads_rows_in_order(self, foo_bar_baz_csv):
        rows = list(iter_rows(foo_bar_baz_csv, "token", "score"))
        assert rows == [
            Row(content="foo", score=1.0),
            Row(content="bar", score=5.0),
            Row(content="baz", score=10.0),
        ]

    def test_no_ignore_column_never_ignores(self, write_csv):
        path = write_csv([("a", "1", ""), ("b", "2", "")])
        assert not any(row.ignore for row in iter_rows(path, "token", "score"))

    def test_empty_ignore_value_marks_row(self, write_csv):
        path = write_csv([("a", "1", "y"), ("\n", "0", ""), ("b", "2", "keep")])
        flags = [row.ignore for row in iter_rows(path, "token", "score", "keep")]
        assert flags == [False, True, False]

    def test_short_row_counts_as_absent(self, tmp_path):
        path = tmp_path / "short.csv"
        path.write_text("token,score,keep\nword,1.5\n", encoding="utf-8")
        (row,) = iter_rows(path, "token", "score", "keep")
        assert row.ignore is True
        assert row.score == 1.5

    def test_bad_scores_coerce_to_zero(self, write_csv):
        path = write_csv([("a", "oops", "y"), ("b", "", "y")])
        assert [row.score for row in iter_rows(path, "token", "score")] == [0.0, 0.0]

    def test_overflowing_score_reads_as_zero(self, write_csv):
        path = write_csv([("a", "1e999", "y"), ("b", "4", "y")])
        assert [row.score for row in iter_rows(path, "token", "score")] == [0.0, 4.0]

    def test_multiline_content(self, write_csv):
        path = write_csv([("line one\nline two", "1", "y")])
        (row,) = iter_rows(path, "token", "score")
        assert row.content == "line one\nline two"

    def test_custom_delimiter(self, write_csv):
        path = write_csv([("a;b", "2.5", "y")], delimiter="\t")
        (row,) = iter_rows(path, "token", "score", delimiter="\t")
        assert row.content == "a;b"
        assert row.score == 2.5

    def test_reopens_file_for_each_pass(self, foo_bar_baz_csv):
        first = list(iter_rows(foo_bar_baz_csv, "token", "score"))
        second = list(iter_rows(foo_bar_baz_csv, "token", "score"))
        assert first == second


class TestIterRowsErrors:
    @pytest.mark.parametrize("columns", [
        ("word", "score", None),
        ("token", "salience", None),
        ("token", "score", "vtoken"),
    ])
    def test_missing_column(self, foo_bar_baz_csv, columns):
        with pytest.raises(MissingColumnError) as excinfo:
            list(iter_rows(foo_bar_baz_csv, *columns))
        assert "token, score, keep" in str(excinfo.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            list(iter_rows(tmp_path / "nope.csv", "token", "score"))
