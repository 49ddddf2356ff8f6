"""Pytest configuration and shared fixtures for all tests."""

import os
from unittest.mock import Mock

import pytest
import requests

from pkgcurate._curation.config import CurationProviderConfig


@pytest.fixture(autouse=True)
def isolate_curation_environment(monkeypatch):
    """Remove CURATION_* variables so the developer's environment cannot leak into tests."""
    for name in list(os.environ):
        if name.startswith("CURATION_"):
            monkeypatch.delenv(name)


@pytest.fixture
def mock_session():
    """Create a mock requests session."""
    return Mock(spec=requests.Session)


@pytest.fixture
def fast_config():
    """Provider configuration with short timeouts and no caching."""
    return CurationProviderConfig(
        server_url="http://curations.test",
        connect_timeout=1.0,
        read_timeout=1.0,
        max_workers=4,
    )


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects returning `payload` from json()."""

    def _make(status_code=200, payload=None, json_error=None):
        response = Mock(spec=requests.Response)
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response

    return _make
