"""Tests for cell-level parsing helpers."""

import pytest

from platequant.io.cells import (
    canonical_well,
    cell_text,
    detect_header_index,
    find_column,
    header_score,
    is_well_label,
    parse_number,
)


class TestParseNumber:
    @pytest.mark.parametrize("text,expected", [
        ("0.5", 0.5),
        (" 12 ", 12.0),
        ("-3", -3.0),
        ("1e-3", 0.001),
        (".5", 0.5),
        ("+2.", 2.0),
        (7, 7.0),
    ])
    def test_finite_numbers(self, text, expected):
        assert parse_number(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", [
        "", "   ", None, "OD", "nan", "inf", "-Infinity", "1e400",
        "1,5", "1_000", "\u0661\u0662", "0x10", "1.2.3",
    ])
    def test_not_numbers(self, text):
        assert parse_number(text) is None


class TestWellLabels:
    @pytest.mark.parametrize("label", ["A1", "h12", "B07", " C3 "])
    def test_valid(self, label):
        assert is_well_label(label)

    @pytest.mark.parametrize("label", ["", "I1", "A13", "A0", "AA1", "Well", None])
    def test_invalid(self, label):
        assert not is_well_label(label)

    def test_canonical_drops_padding(self):
        assert canonical_well("a01") == "A1"
        assert canonical_well("H12") == "H12"

    def test_canonical_rejects_garbage(self):
        with pytest.raises(ValueError):
            canonical_well("")
        with pytest.raises(ValueError):
            canonical_well("Axe")


class TestHeaderDetection:
    def test_header_score_counts_keywords(self):
        assert header_score(["Well", "Time", "OD600"]) == 3
        assert header_score(["A1", "0", "0.5"]) == 0

    def test_detect_header_after_preamble(self):
        grid = [
            ["Instrument", "Reader X"],
            ["Date", "2024-01-01"],
            ["Well", "Time", "RFU"],
            ["A1", "0", "10"],
        ]
        assert detect_header_index(grid) == 2

    def test_ties_go_to_first_row(self):
        grid = [["foo"], ["bar"], ["baz"]]
        assert detect_header_index(grid) == 0

    def test_empty_grid(self):
        assert detect_header_index([]) == 0

    def test_only_first_120_rows_scanned(self):
        grid = [["x"]] * 130 + [["Well", "Time", "Value"]]
        assert detect_header_index(grid) == 0


class TestColumnLookup:
    def test_find_column_substring(self):
        assert find_column(["Well", "Time (h)", "OD600"], ("od",)) == 2

    def test_find_column_missing(self):
        assert find_column(["Well", "Time"], ("group",)) == -1

    def test_cell_text_out_of_range(self):
        assert cell_text(["a"], 3) == ""
        assert cell_text([None], 0) == ""
        assert cell_text([" b "], 0) == "b"
