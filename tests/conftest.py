"""
Shared fixtures: a TestClient wired to in-memory collaborators through
FastAPI dependency overrides.
"""

import pytest
from fastapi.testclient import TestClient

from dependencies import get_content_store, get_current_user, get_directory, get_progress_store
from main import app
from models import CurrentUser
from tests.fakes import FakeContentStore, FakeDirectory, FakeProgressStore


@pytest.fixture
def directory():
    return FakeDirectory()


@pytest.fixture
def progress_store():
    return FakeProgressStore()


@pytest.fixture
def content_store():
    return FakeContentStore()


@pytest.fixture
def login():
    def _login(uid="user-1", admin=False):
        user = CurrentUser(uid=uid, email=f"{uid}@example.com", admin=admin)
        app.dependency_overrides[get_current_user] = lambda: user
        return user

    return _login


@pytest.fixture
def client(directory, progress_store, content_store, login):
    app.dependency_overrides[get_directory] = lambda: directory
    app.dependency_overrides[get_progress_store] = lambda: progress_store
    app.dependency_overrides[get_content_store] = lambda: content_store
    login()
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client, login):
    login("admin-1", admin=True)
    return client
