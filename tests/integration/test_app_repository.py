"""
Integration tests for AppRepository against an in-memory SQLite store.
"""

import pytest

from db.repositories.app_repository import escape_like
from db.repositories.unit_of_work import get_unit_of_work
from db.services.search_service import SearchService
from tests.utils.seed import seed_apps, seed_camera_apps


class TestSearchByName:
    """Test the windowed substring search."""

    def test_window_and_count(self, app):
        seed_camera_apps(25)

        with get_unit_of_work() as uow:
            first = [a.name for a in uow.apps.search_by_name("cam", limit=10, offset=0)]
            last = [a.name for a in uow.apps.search_by_name("cam", limit=10, offset=20)]
            total = uow.apps.count_by_name("cam")

        assert first == [f"Camera {i:02d}" for i in range(1, 11)]
        assert last == [f"Camera {i:02d}" for i in range(21, 26)]
        assert total == 25

    def test_case_insensitive_substring(self, app):
        seed_apps(["Webcam Toy", "CAMSCANNER", "Open Camera", "Calculator"])

        with get_unit_of_work() as uow:
            names = [a.name for a in uow.apps.search_by_name("cAm", limit=10)]

        assert names == ["Webcam Toy", "CAMSCANNER", "Open Camera"]

    def test_count_ignores_window(self, app):
        seed_camera_apps(25)

        with get_unit_of_work() as uow:
            assert len(uow.apps.search_by_name("cam", limit=10, offset=10)) == 10
            assert uow.apps.count_by_name("cam") == 25

    def test_no_matches(self, app):
        seed_camera_apps(5)

        with get_unit_of_work() as uow:
            assert uow.apps.search_by_name("zzz", limit=10) == []
            assert uow.apps.count_by_name("zzz") == 0

    def test_empty_term_matches_everything(self, app):
        seed_apps(["Maps", "Notes"])

        with get_unit_of_work() as uow:
            assert uow.apps.count_by_name("") == 2


class TestWildcardsMatchLiterally:
    """Test that LIKE wildcards typed by users are not treated as patterns."""

    def test_percent(self, app):
        seed_apps(["100% Free Music", "1000 Free Stickers"])

        with get_unit_of_work() as uow:
            assert [a.name for a in uow.apps.search_by_name("0%", limit=10)] == ["100% Free Music"]

    def test_underscore(self, app):
        seed_apps(["snake_game", "snakegame", "snakeXgame"])

        with get_unit_of_work() as uow:
            assert uow.apps.count_by_name("e_g") == 1

    def test_quote_is_just_a_character(self, app):
        seed_apps(["Bob's Burgers", "Maps"])

        with get_unit_of_work() as uow:
            assert [a.name for a in uow.apps.search_by_name("b's", limit=10)] == ["Bob's Burgers"]
            assert uow.apps.count_by_name("'; DROP TABLE apps; --") == 0
            assert uow.apps.count() == 2

    @pytest.mark.parametrize("term, expected", [
        ("cam", "cam"),
        ("50%", "50\\%"),
        ("a_b", "a\\_b"),
        ("c:\\tmp", "c:\\\\tmp"),
    ])
    def test_escape_like(self, term, expected):
        assert escape_like(term) == expected


class TestSearchServiceScenarios:
    """End-to-end pagination scenarios against the store."""

    def test_twenty_five_matches(self, app):
        seed_camera_apps(25)
        service = SearchService()

        first = service.paginate("cam", 0)
        first_meta = service.pagination.compute_metadata(first)
        last = service.paginate("cam", 20)
        last_meta = service.pagination.compute_metadata(last)

        assert len(first.records) == 10
        assert first.total_count == 25
        assert first_meta.total_pages == 3
        assert first_meta.has_prev is False
        assert first_meta.has_next is True

        assert len(last.records) == 5
        assert last_meta.has_next is False
        assert last_meta.has_prev is True

    def test_zero_matches(self, app):
        seed_camera_apps(25)
        service = SearchService()

        window = service.paginate("zzz", 0)
        metadata = service.pagination.compute_metadata(window)

        assert window.records == ()
        assert window.total_count == 0
        assert metadata.total_pages == 0
        assert metadata.has_prev is False
        assert metadata.has_next is False

    def test_idempotent(self, app):
        seed_camera_apps(25)
        service = SearchService()

        assert service.paginate("cam", 10) == service.paginate("cam", 10)

    @pytest.mark.parametrize("offset", [0, 10, 20, 30, 100])
    def test_never_more_than_page_size(self, app, offset):
        seed_camera_apps(25)

        assert len(SearchService().paginate("cam", offset).records) <= 10
