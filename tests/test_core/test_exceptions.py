"""Tests for platequant.core.exceptions."""

import pytest

from platequant.core.exceptions import (
    GridReadError,
    ImageReadError,
    PlateQuantError,
    UnsupportedFormatError,
)


class TestExceptionHierarchy:
    def test_all_inherit_from_platequant_error(self):
        for exc_cls in (GridReadError, ImageReadError, UnsupportedFormatError):
            assert issubclass(exc_cls, PlateQuantError)

    def test_catch_all_with_base(self):
        with pytest.raises(PlateQuantError):
            raise ImageReadError("plate.png", "truncated")

    def test_grid_read_error_message(self):
        exc = GridReadError("/data/plate.csv", "not UTF-8 text")
        assert "/data/plate.csv" in str(exc)
        assert "not UTF-8 text" in str(exc)
        assert exc.path == "/data/plate.csv"
        assert exc.reason == "not UTF-8 text"

    def test_image_read_error_without_reason(self):
        exc = ImageReadError("blot.tif")
        assert str(exc) == "Could not decode image: blot.tif"

    def test_unsupported_format_message(self):
        exc = UnsupportedFormatError("notes.docx")
        assert "notes.docx" in str(exc)
        assert exc.path == "notes.docx"

    def test_default_messages(self):
        assert "Could not read table" in str(GridReadError())
        assert "Unsupported" in str(UnsupportedFormatError())
