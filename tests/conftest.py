from pathlib import Path

import pytest

from tasklist.models import db
from tasklist.repository import TaskRepository
from tasklist_app import create_app


@pytest.fixture()
def app_config(tmp_path: Path) -> dict:
    return {
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'tasks.db'}",
    }


@pytest.fixture()
def app(app_config):
    return create_app(app_config)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def repo(app):
    """A repository bound to a fresh app context for the whole test."""
    with app.app_context():
        yield TaskRepository(db.session)
