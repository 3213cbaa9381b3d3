"""Pytest fixtures for ocs_client tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from ocs_client import OcsClient


@pytest.fixture
def mock_transport() -> Any:
    """Patch the OCS transport used by OcsClient."""
    with patch("ocs_client.client.OcsTransport") as mock_class:
        mock_instance = MagicMock()
        mock_class.return_value = mock_instance
        yield mock_instance


@pytest.fixture
def mock_dav() -> Any:
    """Patch the WebDAV collaborator used by OcsClient."""
    with patch("ocs_client.client.WebDavClient") as mock_class:
        mock_instance = MagicMock()
        mock_class.return_value = mock_instance
        yield mock_instance


@pytest.fixture
def client(mock_transport: MagicMock, mock_dav: MagicMock) -> OcsClient:
    """Create an OcsClient with both collaborators mocked."""
    return OcsClient("https://cloud.example.com", "alice", "secret")
