"""
Shared test fixtures for dokploy-cli tests.
Patches config module to avoid loading a real .env and making API calls.
"""

from unittest.mock import MagicMock

import pytest

from dokploy_cli import config


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Ensure every test starts with a clean config state.
    Prevents tests from reading the real .env or leaking runtime flags."""
    monkeypatch.setattr(config, "env", {})
    monkeypatch.setattr(config, "DOKPLOY_URL", "https://dokploy.example.com")
    monkeypatch.setattr(config, "DOKPLOY_API_KEY", "fake-api-key-123456")
    monkeypatch.setattr(config, "HTTP_TIMEOUT_SECONDS", 30)
    monkeypatch.setattr(config, "HTTP_MAX_RESPONSE_BYTES", 5_000_000)
    monkeypatch.setattr(config, "HTTP_LOG_ENABLED", False)
    monkeypatch.setattr(config, "HTTP_LOG_SAMPLE_RATE", 1.0)
    monkeypatch.setattr(config, "MCP_RESPONSE_MODE", "legacy")
    monkeypatch.setattr(config, "TRANSPORT_TYPE", "stdio")
    monkeypatch.setattr(config, "RUNTIME_QUIET", False)
    monkeypatch.setattr(config, "RUNTIME_VERBOSE", False)


@pytest.fixture
def fake_client():
    """A BackendClient stand-in recording get/post calls."""
    client = MagicMock()
    client.get.return_value = None
    client.post.return_value = None
    return client
