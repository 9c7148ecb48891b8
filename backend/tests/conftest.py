"""
Pytest configuration and shared fixtures for backend tests.

The generative provider is always mocked; no test reaches the network.
"""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from backend.services.search_service import TOOL_NAME, QueryService


def _tool_response(models):
    block = SimpleNamespace(type="tool_use", id="toolu_01", name=TOOL_NAME, input={"models": models})
    return SimpleNamespace(content=[block], stop_reason="tool_use")


def _text_response(text):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)], stop_reason="end_turn")


@pytest.fixture
def tool_response():
    """Factory for a Messages API response carrying the forced tool call."""
    return _tool_response


@pytest.fixture
def text_response():
    """Factory for a Messages API response with a single text block."""
    return _text_response


@pytest.fixture
def translation_models():
    """Two records in relevance order, with different pricing."""
    return [
        {
            "name": "T1",
            "description": "d",
            "longDescription": "ld",
            "primaryFunction": "Translation",
            "websiteUrl": "https://t1.example",
            "pricingModel": "Free",
        },
        {
            "name": "T2",
            "description": "d2",
            "longDescription": "ld2",
            "primaryFunction": "Translation",
            "websiteUrl": "https://t2.example",
            "pricingModel": "Freemium",
        },
    ]


@pytest.fixture
def api_key(monkeypatch):
    """Provide a fake provider credential."""
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-test-secret")
    return "sk-ant-test-secret"


@pytest.fixture
def mock_anthropic_client():
    """Mock Anthropic client returning an empty model list by default."""
    client = Mock()
    client.messages.create.return_value = _tool_response([])
    return client


@pytest.fixture
def query_service(mock_anthropic_client):
    """QueryService wired to the mock client."""
    return QueryService(client_factory=lambda _key: mock_anthropic_client)


@pytest.fixture
def client(query_service):
    """FastAPI test client with the query service overridden."""
    from backend.main import app
    from backend.services import get_query_service

    app.dependency_overrides[get_query_service] = lambda: query_service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _no_ambient_key(monkeypatch):
    """Start every test without a provider credential."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
