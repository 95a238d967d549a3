"""Fixtures for the Magnet FastMCP server tests."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastmcp import Client, FastMCP
from fastmcp.client import FastMCPTransport

from magnet_mcp.magnet import MagnetFetcher
from magnet_mcp.magnet.config import MagnetConfig
from magnet_mcp.models.chat import MagnetChat
from magnet_mcp.models.issue import IssueList, MagnetIssue
from magnet_mcp.models.page import MagnetPage, PageList
from magnet_mcp.models.search import SearchResponse
from magnet_mcp.servers.chats import chats_mcp
from magnet_mcp.servers.context import MainAppContext
from magnet_mcp.servers.issues import issues_mcp
from magnet_mcp.servers.pages import pages_mcp
from magnet_mcp.servers.search import search_mcp
from tests.fixtures.magnet_mocks import (
    MOCK_API_KEY,
    MOCK_BASE_URL,
    MOCK_ISSUE,
    MOCK_ISSUE_MARKDOWN,
    MOCK_ISSUE_PREVIEW,
    MOCK_ISSUES_RESPONSE,
    MOCK_PAGE,
    MOCK_PAGE_MARKDOWN,
    MOCK_PAGE_PREVIEW,
    MOCK_PAGES_RESPONSE,
    MOCK_SEARCH_RESPONSE,
    MOCK_STORED_CHAT,
)


@pytest.fixture
def mock_magnet_fetcher():
    """Create a mock MagnetFetcher returning models built from fixture data."""
    mock_fetcher = MagicMock(spec=MagnetFetcher)
    mock_fetcher.config = MagicMock()
    mock_fetcher.config.url = MOCK_BASE_URL

    mock_fetcher.get_issue.return_value = MagnetIssue.from_api_response(MOCK_ISSUE)
    mock_fetcher.list_issues.return_value = IssueList.from_api_response(
        MOCK_ISSUES_RESPONSE
    )
    mock_fetcher.create_issue.return_value = MagnetIssue.from_api_response(MOCK_ISSUE)
    mock_fetcher.update_issue.return_value = MagnetIssue.from_api_response(MOCK_ISSUE)

    def mock_get_issue_markdown(issue_id, preview_only=False):
        payload = MOCK_ISSUE_PREVIEW if preview_only else MOCK_ISSUE_MARKDOWN
        return MagnetIssue.from_api_response({**payload, "id": issue_id})

    mock_fetcher.get_issue_markdown.side_effect = mock_get_issue_markdown
    mock_fetcher.list_issues_markdown.return_value = IssueList.from_api_response(
        MOCK_ISSUES_RESPONSE
    )

    def mock_create_issue_markdown(markdown, **kwargs):
        return MagnetIssue.from_api_response({**MOCK_ISSUE_MARKDOWN, "docContent": markdown})

    mock_fetcher.create_issue_markdown.side_effect = mock_create_issue_markdown
    mock_fetcher.update_issue_markdown.return_value = MagnetIssue.from_api_response(
        MOCK_ISSUE_MARKDOWN
    )

    mock_fetcher.get_page.return_value = MagnetPage.from_api_response(MOCK_PAGE)
    mock_fetcher.list_pages.return_value = PageList.from_api_response(MOCK_PAGES_RESPONSE)
    mock_fetcher.create_page.return_value = MagnetPage.from_api_response(MOCK_PAGE)
    mock_fetcher.update_page.return_value = MagnetPage.from_api_response(MOCK_PAGE)

    def mock_get_page_markdown(page_id, preview_only=False):
        payload = MOCK_PAGE_PREVIEW if preview_only else MOCK_PAGE_MARKDOWN
        return MagnetPage.from_api_response({**payload, "id": page_id})

    mock_fetcher.get_page_markdown.side_effect = mock_get_page_markdown
    mock_fetcher.list_pages_markdown.return_value = PageList.from_api_response(
        MOCK_PAGES_RESPONSE
    )
    mock_fetcher.create_page_markdown.return_value = MagnetPage.from_api_response(
        MOCK_PAGE_MARKDOWN
    )
    mock_fetcher.update_page_markdown.return_value = MagnetPage.from_api_response(
        MOCK_PAGE_MARKDOWN
    )

    def mock_upload_chat(export, organization_id=None):
        chat = MagnetChat.from_api_response(MOCK_STORED_CHAT)
        chat.view_url = f"{MOCK_BASE_URL}/chats/{chat.id}"
        return chat

    mock_fetcher.upload_chat.side_effect = mock_upload_chat
    mock_fetcher.search.return_value = SearchResponse.from_api_response(
        MOCK_SEARCH_RESPONSE
    )
    return mock_fetcher


def _build_test_mcp(read_only: bool) -> FastMCP:
    config = MagnetConfig(api_key=MOCK_API_KEY, url=MOCK_BASE_URL)

    @asynccontextmanager
    async def test_lifespan(app: FastMCP) -> AsyncGenerator[dict, None]:
        try:
            yield {
                "app_lifespan_context": MainAppContext(
                    magnet_config=config, read_only=read_only
                )
            }
        finally:
            pass

    test_mcp = FastMCP("TestMagnet", instructions="Test Magnet MCP Server", lifespan=test_lifespan)
    test_mcp.mount(issues_mcp)
    test_mcp.mount(pages_mcp)
    test_mcp.mount(chats_mcp)
    test_mcp.mount(search_mcp)
    return test_mcp


@asynccontextmanager
async def _patched_client(test_mcp: FastMCP, fetcher: MagicMock):
    with patch(
        "magnet_mcp.servers.dependencies.get_magnet_fetcher",
        AsyncMock(return_value=fetcher),
    ):
        async with Client(transport=FastMCPTransport(test_mcp)) as client_instance:
            yield client_instance


@pytest.fixture
async def magnet_client(mock_magnet_fetcher):
    """Create a FastMCP client with the Magnet fetcher mocked out."""
    async with _patched_client(_build_test_mcp(read_only=False), mock_magnet_fetcher) as client:
        yield client


@pytest.fixture
async def read_only_client(mock_magnet_fetcher):
    """Create a FastMCP client whose lifespan enables read-only mode."""
    async with _patched_client(_build_test_mcp(read_only=True), mock_magnet_fetcher) as client:
        yield client
