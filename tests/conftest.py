"""Shared pytest fixtures for the Magnet MCP tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from magnet_mcp.magnet import MagnetFetcher
from magnet_mcp.magnet.config import MagnetConfig
from tests.fixtures.magnet_mocks import MOCK_API_KEY, MOCK_BASE_URL


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for the Magnet API."""
    with patch.dict(
        os.environ,
        {
            "MAGNET_API_KEY": MOCK_API_KEY,
            "MAGNET_WEB_API_BASE_URL": MOCK_BASE_URL,
        },
        clear=True,
    ):
        yield


@pytest.fixture
def magnet_config():
    """Create a MagnetConfig instance for tests."""
    return MagnetConfig(api_key=MOCK_API_KEY, url=MOCK_BASE_URL)


@pytest.fixture
def magnet_fetcher(magnet_config):
    """Create a MagnetFetcher with a mocked HTTP session."""
    fetcher = MagnetFetcher(config=magnet_config)
    fetcher.session = MagicMock()
    return fetcher
