"""
Root pytest configuration and fixtures for the Flair API client.

Provides a mocked API (token endpoint pre-registered) and a client bound to it.
"""

import os
from pathlib import Path
import sys

import pytest
import responses

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

BASE = "https://api.flair.co"

TOKEN_RESPONSE = {
    "access_token": "test_access_token",
    "token_type": "Bearer",
    "expires_in": 3600,
}


@pytest.fixture(autouse=True)
def clean_environment():
    """Clean environment variables before each test."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("FLAIR_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def base_url():
    return BASE


@pytest.fixture
def mock_api():
    """Mock HTTP requests with the token endpoint already registered."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.POST, f"{BASE}/oauth/token", json=TOKEN_RESPONSE, status=200)
        yield rsps


@pytest.fixture
def client():
    from flair_api import Client

    return Client(client_id="test_client_id", client_secret="test_client_secret")


@pytest.fixture
def test_resource_cls(monkeypatch):
    """A registered resource type used to exercise the generic machinery."""
    from flair_api.models import Resource, _registry

    class TestResource(Resource):
        type = "test-resources"

    monkeypatch.setitem(_registry._REGISTRY, "test-resources", TestResource)
    return TestResource


def resource_doc(id, type="test-resources", attributes=None, relationships=None):
    """JSON-API resource object."""
    doc = {"id": id, "type": type, "attributes": attributes or {}}
    if relationships is not None:
        doc["relationships"] = relationships
    return doc
