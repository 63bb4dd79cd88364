"""
Integration tests for the unit of work's commit and release behaviour.
"""

import pytest

from db.repositories.unit_of_work import UnitOfWork, get_unit_of_work
from tests.utils.seed import create_app_row, seed_apps


def test_commits_when_block_succeeds(app):
    with get_unit_of_work() as uow:
        uow.session.add(create_app_row("Open Camera"))

    with get_unit_of_work() as uow:
        assert uow.apps.count() == 1


def test_discards_work_when_block_raises(app):
    seed_apps(["Maps"])

    with pytest.raises(RuntimeError):
        with get_unit_of_work() as uow:
            uow.session.add(create_app_row("Open Camera"))
            uow.session.flush()
            raise RuntimeError("boom")

    with get_unit_of_work() as uow:
        assert uow.apps.count() == 1


def test_session_released_on_every_exit_path(app, monkeypatch):
    released = []
    original_release = UnitOfWork.release

    def tracking_release(self):
        released.append(self._session is not None)
        original_release(self)

    monkeypatch.setattr(UnitOfWork, "release", tracking_release)

    with get_unit_of_work() as uow:
        uow.apps.count()
    with pytest.raises(RuntimeError):
        with get_unit_of_work() as uow:
            uow.apps.count()
            raise RuntimeError("boom")

    assert released == [True, True]


def test_no_session_opened_until_used(app):
    uow = UnitOfWork()

    uow.commit()
    uow.release()

    assert uow._session is None
