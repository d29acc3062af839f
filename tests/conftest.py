"""Shared fixtures for the mock database tests."""

import random

import pytest
from fastapi.testclient import TestClient

from mock_database.app.core.db import init_store
from mock_database.app.main import create_app


@pytest.fixture
def store():
    return init_store()


@pytest.fixture
def app(store):
    return create_app(store=store, rng=random.Random(1234))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
