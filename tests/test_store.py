from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from todoapp.errors import NotFound, StoreError, ValidationError
from todoapp.models import db
from todoapp.store import TaskStore


def test_create_and_get(store) -> None:
    task = store.create(" Buy milk ", None)

    assert task.title == "Buy milk"
    assert task.description == ""
    assert task.completed is False
    assert store.get(task.id).to_dict() == task.to_dict()
    assert store.count() == 1


def test_ids_are_unique(store) -> None:
    ids = {store.create(f"t{i}").id for i in range(10)}
    assert len(ids) == 10


@pytest.mark.parametrize("title", ["", "   ", None, 3])
def test_create_rejects_bad_title(store, title) -> None:
    with pytest.raises(ValidationError):
        store.create(title)
    assert store.count() == 0


def test_update_partial(store) -> None:
    task = store.create("Read", "chapter 1")
    created_at = task.to_dict()["createdAt"]

    updated = store.update(task.id, {"completed": True})

    assert updated.completed is True
    assert updated.title == "Read"
    assert updated.description == "chapter 1"
    assert updated.to_dict()["createdAt"] == created_at


def test_update_missing_raises_not_found(store) -> None:
    with pytest.raises(NotFound):
        store.update("missing", {"title": "x"})


def test_delete(store) -> None:
    task = store.create("Gone soon")

    store.delete(task.id)

    assert store.list() == []
    with pytest.raises(NotFound):
        store.delete(task.id)


class _CommitFails:
    """Wraps the real session but refuses to commit."""

    def __init__(self, session):
        self._session = session

    def __getattr__(self, name):
        return getattr(self._session, name)

    def commit(self):
        raise OperationalError("INSERT", {}, Exception("database is locked"))


def test_sql_errors_become_store_error(store, monkeypatch) -> None:
    monkeypatch.setattr(TaskStore, "session", property(lambda self: _CommitFails(db.session)))

    with pytest.raises(StoreError):
        store.create("Never saved")

    monkeypatch.undo()
    assert store.count() == 0
