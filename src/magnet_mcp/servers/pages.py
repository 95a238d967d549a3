"""Magnet pages FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from magnet_mcp.models.content import parse_document_content
from magnet_mcp.models.page import PageType, validate_page_properties
from magnet_mcp.servers.dependencies import magnet_session, run_blocking
from magnet_mcp.utils.decorators import check_write_access, convert_empty_defaults_to_none

logger = logging.getLogger("magnet-mcp.servers.pages")

PAGE_TYPE_DESCRIPTION = (
    "(Optional) Page type: 'note', 'context_doc_label' (context doc) or "
    "'sprint_planning'. Defaults to 'note'."
)
PROPERTIES_DESCRIPTION = (
    "(Optional) Page properties. Sprint planning pages accept 'startDate' and "
    "'endDate' as YYYY-MM-DD; other keys are stored as given."
)

pages_mcp = FastMCP(
    name="Magnet Pages",
    instructions="Provides tools for reading and writing Magnet pages (notes, context docs, sprint plans).",
)


@pages_mcp.tool(
    tags={"pages", "read"},
    annotations={"title": "Get Page By ID", "readOnlyHint": True},
)
async def get_page_by_id(
    ctx: Context,
    id: Annotated[str, Field(description="The page ID", min_length=1)],
) -> str:
    """Fetch a single page by its ID from Magnet, with its document content.

    Args:
        ctx: The FastMCP context.
        id: The page ID.

    Returns:
        JSON string representing the page.
    """
    async with magnet_session(ctx) as magnet:
        page = await run_blocking(magnet.get_page, id)
    return json.dumps(page.to_simplified_dict(), indent=2, ensure_ascii=False)


@pages_mcp.tool(
    tags={"pages", "read"},
    annotations={"title": "List Pages", "readOnlyHint": True},
)
@convert_empty_defaults_to_none
async def list_pages(
    ctx: Context,
    organizationId: Annotated[
        str | None, Field(description="(Optional) Organization ID")
    ] = None,
    cursor: Annotated[
        str | None,
        Field(description="(Optional) Cursor returned as 'nextCursor' by a previous call"),
    ] = None,
    limit: Annotated[
        int | None,
        Field(description="(Optional) Maximum number of pages to return", ge=1, le=100),
    ] = None,
) -> str:
    """List pages in Magnet, one page of results at a time.

    Args:
        ctx: The FastMCP context.
        organizationId: Optional organization ID.
        cursor: Optional pagination cursor.
        limit: Optional page size.

    Returns:
        JSON string with 'pages', 'users' and 'pagination'.
    """
    async with magnet_session(ctx) as magnet:
        page_list = await run_blocking(
            magnet.list_pages,
            organization_id=organizationId, cursor=cursor, limit=limit
        )
    return json.dumps(page_list.to_simplified_dict(), indent=2, ensure_ascii=False)


@pages_mcp.tool(
    tags={"pages", "write"},
    annotations={"title": "Create Page", "readOnlyHint": False, "destructiveHint": False},
)
@check_write_access
async def create_page(
    ctx: Context,
    title: Annotated[str, Field(description="The page title", min_length=1)],
    docContent: Annotated[
        dict[str, Any],
        Field(description="Page content as a document tree (editor JSON)"),
    ],
    pageType: Annotated[PageType | None, Field(description=PAGE_TYPE_DESCRIPTION)] = None,
    properties: Annotated[
        dict[str, Any] | None, Field(description=PROPERTIES_DESCRIPTION)
    ] = None,
    organizationId: Annotated[
        str | None, Field(description="(Optional) Organization ID")
    ] = None,
) -> str:
    """Create a new page in Magnet from a document tree.

    Args:
        ctx: The FastMCP context.
        title: The page title.
        docContent: The page content as a document tree.
        pageType: Optional page type.
        properties: Optional page properties.
        organizationId: Optional organization ID.

    Returns:
        JSON string representing the created page.

    Raises:
        ValueError: If in read-only mode.
        MagnetValidationError: If docContent or properties are invalid.
    """
    document = parse_document_content(docContent)
    validated_properties = validate_page_properties(pageType or "note", properties)
    async with magnet_session(ctx) as magnet:
        page = await run_blocking(
            magnet.create_page,
            title=title,
            doc_content=document,
            page_type=pageType,
            properties=validated_properties,
            organization_id=organizationId,
        )
    return json.dumps(
        {"message": "Page created successfully", "page": page.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )


@pages_mcp.tool(
    tags={"pages", "write"},
    annotations={"title": "Update Page", "readOnlyHint": False, "destructiveHint": True},
)
@check_write_access
async def update_page(
    ctx: Context,
    id: Annotated[str, Field(description="The page ID to update", min_length=1)],
    title: Annotated[str | None, Field(description="Updated page title")] = None,
    docContent: Annotated[
        dict[str, Any] | None,
        Field(description="Updated content as a document tree"),
    ] = None,
    properties: Annotated[
        dict[str, Any] | None, Field(description="Updated page properties")
    ] = None,
    pageType: Annotated[
        PageType | None,
        Field(
            description="(Optional) The page's current type, used only to validate 'properties'"
        ),
    ] = None,
) -> str:
    """Update an existing page in Magnet. Only provide the fields you want to update.

    Args:
        ctx: The FastMCP context.
        id: The page ID.
        title: Updated title.
        docContent: Updated document tree.
        properties: Updated properties.
        pageType: The page's type, for properties validation.

    Returns:
        JSON string representing the updated page.
    """
    document = parse_document_content(docContent) if docContent is not None else None
    validated_properties = validate_page_properties(pageType, properties)
    async with magnet_session(ctx) as magnet:
        page = await run_blocking(
            magnet.update_page,
            id, title=title, doc_content=document, properties=validated_properties
        )
    return json.dumps(
        {"message": "Page updated successfully", "page": page.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )


@pages_mcp.tool(
    tags={"pages", "read"},
    annotations={"title": "Get Page Markdown", "readOnlyHint": True},
)
async def get_page_markdown(
    ctx: Context,
    id: Annotated[str, Field(description="The page ID", min_length=1)],
    previewOnly: Annotated[
        bool,
        Field(
            description="Return only a short markdown preview (about 100 words) instead of the full content"
        ),
    ] = False,
) -> str:
    """Fetch a single page with its content rendered as markdown.

    Args:
        ctx: The FastMCP context.
        id: The page ID.
        previewOnly: Whether to return a preview only.

    Returns:
        JSON string with the page; 'docContent' holds the markdown, or
        'markdownPreview' holds the preview when previewOnly is set.
    """
    async with magnet_session(ctx) as magnet:
        page = await run_blocking(
            magnet.get_page_markdown, id, preview_only=previewOnly
        )
    return json.dumps(page.to_simplified_dict(), indent=2, ensure_ascii=False)


@pages_mcp.tool(
    tags={"pages", "read"},
    annotations={"title": "List Pages Markdown", "readOnlyHint": True},
)
@convert_empty_defaults_to_none
async def list_pages_markdown(
    ctx: Context,
    organizationId: Annotated[
        str | None, Field(description="(Optional) Organization ID")
    ] = None,
    previewOnly: Annotated[
        bool,
        Field(description="Return markdown previews instead of the full content"),
    ] = False,
    cursor: Annotated[
        str | None,
        Field(description="(Optional) Cursor returned as 'nextCursor' by a previous call"),
    ] = None,
    limit: Annotated[
        int | None,
        Field(description="(Optional) Maximum number of pages to return", ge=1, le=100),
    ] = None,
) -> str:
    """List pages with their content rendered as markdown."""
    async with magnet_session(ctx) as magnet:
        page_list = await run_blocking(
            magnet.list_pages_markdown,
            organization_id=organizationId,
            preview_only=previewOnly,
            cursor=cursor,
            limit=limit,
        )
    return json.dumps(page_list.to_simplified_dict(), indent=2, ensure_ascii=False)


@pages_mcp.tool(
    tags={"pages", "write"},
    annotations={"title": "Create Page From Markdown", "readOnlyHint": False, "destructiveHint": False},
)
@check_write_access
async def create_page_markdown(
    ctx: Context,
    title: Annotated[str, Field(description="The page title", min_length=1)],
    markdown: Annotated[str, Field(description="The page content in markdown")],
    pageType: Annotated[PageType | None, Field(description=PAGE_TYPE_DESCRIPTION)] = None,
    properties: Annotated[
        dict[str, Any] | None, Field(description=PROPERTIES_DESCRIPTION)
    ] = None,
    organizationId: Annotated[
        str | None, Field(description="(Optional) Organization ID")
    ] = None,
) -> str:
    """Create a new page in Magnet from markdown.

    Magnet converts the markdown into its document format.

    Args:
        ctx: The FastMCP context.
        title: The page title.
        markdown: The page content in markdown.
        pageType: Optional page type.
        properties: Optional page properties.
        organizationId: Optional organization ID.

    Returns:
        JSON string representing the created page.
    """
    validated_properties = validate_page_properties(pageType or "note", properties)
    async with magnet_session(ctx) as magnet:
        page = await run_blocking(
            magnet.create_page_markdown,
            title=title,
            markdown=markdown,
            page_type=pageType,
            properties=validated_properties,
            organization_id=organizationId,
        )
    return json.dumps(
        {"message": "Page created successfully", "page": page.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )


@pages_mcp.tool(
    tags={"pages", "write"},
    annotations={"title": "Update Page From Markdown", "readOnlyHint": False, "destructiveHint": True},
)
@check_write_access
async def update_page_markdown(
    ctx: Context,
    id: Annotated[str, Field(description="The page ID to update", min_length=1)],
    markdown: Annotated[str, Field(description="The new page content in markdown")],
    title: Annotated[str | None, Field(description="Updated page title")] = None,
    properties: Annotated[
        dict[str, Any] | None, Field(description="Updated page properties")
    ] = None,
    pageType: Annotated[
        PageType | None,
        Field(
            description="(Optional) The page's current type, used only to validate 'properties'"
        ),
    ] = None,
) -> str:
    """Replace a page's content with markdown and update the given fields."""
    validated_properties = validate_page_properties(pageType, properties)
    async with magnet_session(ctx) as magnet:
        page = await run_blocking(
            magnet.update_page_markdown,
            id, markdown=markdown, title=title, properties=validated_properties
        )
    return json.dumps(
        {"message": "Page updated successfully", "page": page.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )
