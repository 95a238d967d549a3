"""Magnet search FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from magnet_mcp.models.search import SearchType
from magnet_mcp.servers.dependencies import magnet_session, run_blocking
from magnet_mcp.utils.decorators import convert_empty_defaults_to_none

logger = logging.getLogger("magnet-mcp.servers.search")

search_mcp = FastMCP(
    name="Magnet Search",
    instructions="Provides full-text search across Magnet issues and pages.",
)


@search_mcp.tool(
    tags={"search", "read"},
    annotations={"title": "Search", "readOnlyHint": True},
)
@convert_empty_defaults_to_none
async def search(
    ctx: Context,
    query: Annotated[str, Field(description="Search text", min_length=1)],
    types: Annotated[
        list[SearchType] | None,
        Field(description="(Optional) Entity types to search. Defaults to ['issue', 'page']."),
    ] = None,
    organizationId: Annotated[
        str | None, Field(description="(Optional) Organization ID")
    ] = None,
) -> str:
    """Search Magnet issues and pages by text.

    Args:
        ctx: The FastMCP context.
        query: Search text.
        types: Optional entity types.
        organizationId: Optional organization ID.

    Returns:
        JSON string with 'results' (id, type, title, status, pageType,
        timestamps) and 'users' (id and display names only).
    """
    async with magnet_session(ctx) as magnet:
        response = await run_blocking(
            magnet.search,
            query, types=list(types) if types else None, organization_id=organizationId
        )
    return json.dumps(response.to_simplified_dict(), indent=2, ensure_ascii=False)
