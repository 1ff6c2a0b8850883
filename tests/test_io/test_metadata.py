"""Tests for joining sample-sheet groups onto tidy records."""

from platequant.core.models import TidyRecord
from platequant.io.metadata import merge_metadata, read_group_map


def _records(*wells: str) -> list[TidyRecord]:
    return [TidyRecord(well=w, time=0.0, value=1.0) for w in wells]


class TestReadGroupMap:
    def test_canonical_keys(self):
        grid = [["Well", "Group"], ["A01", "ctrl"], ["b2", "drug"]]
        assert read_group_map(grid) == {"A1": "ctrl", "B2": "drug"}

    def test_condition_and_sample_headers(self):
        assert read_group_map([["Well", "Condition"], ["A1", "x"]]) == {"A1": "x"}
        assert read_group_map([["Well ID", "Sample name"], ["A1", "y"]]) == {"A1": "y"}

    def test_last_row_wins(self):
        grid = [["Well", "Group"], ["A1", "first"], ["A1", "second"]]
        assert read_group_map(grid) == {"A1": "second"}

    def test_invalid_rows_ignored(self):
        grid = [["Well", "Group"], ["Z1", "x"], ["A3", "ok"]]
        assert read_group_map(grid) == {"A3": "ok"}

    def test_empty_group_overrides_earlier_row(self):
        grid = [["Well", "Group"], ["A2", "x"], ["A2", ""]]
        assert read_group_map(grid) == {"A2": ""}

    def test_missing_columns(self):
        assert read_group_map([["Well", "Notes"], ["A1", "x"]]) is None
        assert read_group_map([]) is None


class TestMergeMetadata:
    def test_groups_joined_by_well(self):
        grid = [["Well", "Group"], ["A01", "ctrl"], ["B1", "drug"]]
        result = merge_metadata(_records("A1", "B1", "C1"), grid)
        assert [r.group for r in result.records] == ["ctrl", "drug", None]
        assert result.wells_mapped == 2
        assert result.records_annotated == 2
        assert result.notes == ["Metadata merged by Well."]

    def test_padded_record_wells_match(self):
        grid = [["Well", "Group"], ["A1", "ctrl"]]
        result = merge_metadata(_records("A01"), grid)
        assert result.records[0].group == "ctrl"
        assert result.records[0].well == "A01"

    def test_unmatched_records_keep_existing_group(self):
        records = [TidyRecord(well="C1", time=0.0, value=1.0, group="old")]
        grid = [["Well", "Group"], ["A1", "ctrl"]]
        result = merge_metadata(records, grid)
        assert result.records[0].group == "old"
        assert result.records_annotated == 0
        assert "No tidy rows matched a well in the metadata sheet." in result.notes

    def test_missing_columns_is_noop(self):
        records = _records("A1", "A2")
        result = merge_metadata(records, [["Well", "Notes"], ["A1", "x"]])
        assert result.records == records
        assert result.notes == ["Metadata requires Well + Group columns."]

    def test_preserves_values_and_order(self):
        records = [
            TidyRecord(well="B1", time=1.0, value=0.3),
            TidyRecord(well="A1", time=0.0, value=0.1),
        ]
        grid = [["Well", "Group"], ["A1", "g"], ["B1", "h"]]
        result = merge_metadata(records, grid)
        assert [(r.well, r.time, r.value) for r in result.records] == [
            ("B1", 1.0, 0.3), ("A1", 0.0, 0.1),
        ]

    def test_cleared_group_keeps_record_group(self):
        records = [
            TidyRecord(well="A1", time=0.0, value=1.0, group="old"),
            TidyRecord(well="A1", time=1.0, value=2.0),
            TidyRecord(well="B1", time=0.0, value=1.0),
        ]
        grid = [["Well", "Group"], ["A1", "ctrl"], ["B1", "drug"], ["A1", ""]]
        result = merge_metadata(records, grid)
        assert [r.group for r in result.records] == ["old", None, "drug"]
        assert result.records_annotated == 1
        assert result.wells_mapped == 1
