"""Unit tests for the Magnet search FastMCP tool."""

import json

import pytest
from fastmcp.exceptions import ToolError

from magnet_mcp.exceptions import MagnetResponseShapeError


@pytest.mark.anyio
async def test_search_defaults(magnet_client, mock_magnet_fetcher):
    response = await magnet_client.call_tool("search", {"query": "login"})
    content = json.loads(response.content[0].text)
    assert [result["type"] for result in content["results"]] == ["issue", "page"]
    assert "score" not in content["results"][0]
    assert content["users"][0]["username"] == "ada"
    mock_magnet_fetcher.search.assert_called_once_with(
        "login", types=None, organization_id=None
    )


@pytest.mark.anyio
async def test_search_with_types(magnet_client, mock_magnet_fetcher):
    await magnet_client.call_tool(
        "search", {"query": "sprint", "types": ["page"], "organizationId": "org_9"}
    )
    mock_magnet_fetcher.search.assert_called_once_with(
        "sprint", types=["page"], organization_id="org_9"
    )


@pytest.mark.anyio
async def test_search_rejects_unknown_type(magnet_client, mock_magnet_fetcher):
    with pytest.raises(ToolError):
        await magnet_client.call_tool("search", {"query": "x", "types": ["chat"]})
    mock_magnet_fetcher.search.assert_not_called()


@pytest.mark.anyio
async def test_search_rejects_empty_query(magnet_client, mock_magnet_fetcher):
    with pytest.raises(ToolError):
        await magnet_client.call_tool("search", {"query": ""})
    mock_magnet_fetcher.search.assert_not_called()


@pytest.mark.anyio
async def test_search_response_shape_error(magnet_client, mock_magnet_fetcher):
    mock_magnet_fetcher.search.side_effect = MagnetResponseShapeError(
        "Search response did not match the expected shape: results: Field required"
    )
    with pytest.raises(ToolError) as excinfo:
        await magnet_client.call_tool("search", {"query": "login"})
    assert "expected shape" in str(excinfo.value)


@pytest.mark.anyio
async def test_search_allowed_in_read_only_mode(read_only_client, mock_magnet_fetcher):
    response = await read_only_client.call_tool("search", {"query": "login"})
    assert json.loads(response.content[0].text)["results"]
