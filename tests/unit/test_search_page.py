"""
Unit tests for the search value types.
"""

import dataclasses

import pytest
from db.models.models import App
from db.models.search_page import AppRecord, PageWindow, SearchQuery


class TestSearchQuery:
    """Test building queries from request values."""

    def test_defaults(self):
        query = SearchQuery.from_raw()
        assert query == SearchQuery(term="", offset=0)

    def test_strips_term(self):
        assert SearchQuery.from_raw("  cam ", "10") == SearchQuery(term="cam", offset=10)

    @pytest.mark.parametrize("raw_offset", ["abc", "", "1.5", None, "-10"])
    def test_bad_offsets_become_zero(self, raw_offset):
        assert SearchQuery.from_raw("cam", raw_offset).offset == 0

    def test_negative_offset_rejected_on_construction(self):
        with pytest.raises(ValueError):
            SearchQuery(term="cam", offset=-1)

    def test_immutable(self):
        query = SearchQuery(term="cam", offset=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            query.offset = 10


class TestPageWindow:
    """Test window invariants."""

    def test_has_content(self):
        window = PageWindow(records=(AppRecord(id=1, name="Camera"),), total_count=1, offset=0, page_size=10)
        assert window.has_content is True

    def test_empty_window(self):
        window = PageWindow(records=(), total_count=0, offset=0, page_size=10)
        assert window.has_content is False

    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            PageWindow(records=(), total_count=0, offset=0, page_size=0)


class TestAppRecord:
    """Test that records mirror the apps table."""

    def test_fields_match_table_columns(self):
        assert {f.name for f in dataclasses.fields(AppRecord)} == set(App.__table__.columns.keys())

    def test_from_model_copies_every_column(self):
        app = App(id=3, name="Open Camera", category="PHOTOGRAPHY", rating=4.3, reviews=15000)

        record = AppRecord.from_model(app)

        assert record == AppRecord(id=3, name="Open Camera", category="PHOTOGRAPHY", rating=4.3, reviews=15000)
