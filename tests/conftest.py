from __future__ import annotations

import pytest

from todo_server import create_app
from todoapp.config import Settings


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(database_url=f"sqlite:///{tmp_path / 'tasks.db'}")


@pytest.fixture()
def app(settings):
    app = create_app(settings)
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    with app.app_context():
        yield app.extensions["task_store"]
