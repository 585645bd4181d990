"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- A fake database executor (records SQL, returns queued rows)
- FastAPI test client
- JWT tokens for a regular user and an admin
"""

import os

# Must be set before app settings are first loaded
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from app.core.auth import create_token
from app.main import app
from app.models import company as company_model
from app.models import job as job_model
from app.models import user as user_model


class FakeDB:
    """
    Stand-in for app.db.postgres.execute_sql.

    Each call is recorded as (sql, values); results queued with `queue()` are
    returned in order, and [] once the queue is empty.
    """

    def __init__(self):
        self.calls = []
        self._results = []

    def queue(self, *results):
        self._results.extend(results)

    def __call__(self, sql, values=()):
        self.calls.append((sql, list(values)))
        if self._results:
            return self._results.pop(0)
        return []

    @property
    def sql(self):
        return [call[0] for call in self.calls]

    @property
    def values(self):
        return [call[1] for call in self.calls]


@pytest.fixture
def fake_db(monkeypatch):
    """Route every data-access module's queries to one FakeDB."""
    db = FakeDB()
    for module in (company_model, job_model, user_model):
        monkeypatch.setattr(module, "execute_sql", db)
    return db


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def u1_headers():
    """Auth header for a regular user, u1."""
    token = create_token({"username": "u1", "isAdmin": False})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    """Auth header for an admin."""
    token = create_token({"username": "admin", "isAdmin": True})
    return {"Authorization": f"Bearer {token}"}


class ModelStub:
    """
    Replaces functions of a data-access module for route tests.

    stub("get", row) makes module.get return row (or raise it, if it is an
    exception); every call is recorded in .calls as (name, args, kwargs).
    """

    def __init__(self, monkeypatch, module):
        self._monkeypatch = monkeypatch
        self._module = module
        self.calls = []

    def __call__(self, name, result):
        def fake(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            if isinstance(result, Exception):
                raise result
            return result
        self._monkeypatch.setattr(self._module, name, fake)


@pytest.fixture
def company_stub(monkeypatch):
    return ModelStub(monkeypatch, company_model)


@pytest.fixture
def job_stub(monkeypatch):
    return ModelStub(monkeypatch, job_model)


@pytest.fixture
def user_stub(monkeypatch):
    return ModelStub(monkeypatch, user_model)
