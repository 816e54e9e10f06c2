"""Shared pytest fixtures: an in-memory MongoDB and a Flask test client."""
import mongomock
import pytest

import app as app_module
from storage import mongo_client


class ClientFactory:
    """Stands in for MongoClient; hands out one mongomock client and counts calls."""

    def __init__(self):
        self.calls = 0
        self.client = mongomock.MongoClient()

    def __call__(self, uri, **kwargs):
        self.calls += 1
        return self.client


@pytest.fixture
def client_factory(monkeypatch):
    """Point the connection manager at mongomock with a fresh, unconnected state."""
    mongo_client.close_connection()
    factory = ClientFactory()
    monkeypatch.setattr(mongo_client, "MONGODB_URI", "mongodb://test-host:27017")
    monkeypatch.setattr(mongo_client, "_client_factory", factory)
    yield factory
    mongo_client.close_connection()


@pytest.fixture
def mongo(client_factory):
    """The mongomock client backing the API."""
    return client_factory.client


@pytest.fixture
def client(client_factory):
    app_module.app.config.update(TESTING=True)
    return app_module.app.test_client()
