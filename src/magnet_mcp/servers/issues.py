"""Magnet issues FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated, Any, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from magnet_mcp.models.content import parse_document_content
from magnet_mcp.servers.dependencies import magnet_session, run_blocking
from magnet_mcp.utils.decorators import check_write_access, convert_empty_defaults_to_none

logger = logging.getLogger("magnet-mcp.servers.issues")

MarkdownIssueStatus = Literal["todo", "in_progress", "done", "blocked"]

DOC_CONTENT_DESCRIPTION = (
    "Issue content as a document tree (editor JSON). A simple example: "
    '{"type": "doc", "content": [{"type": "paragraph", "content": '
    '[{"type": "text", "text": "Issue description"}]}]}'
)

issues_mcp = FastMCP(
    name="Magnet Issues",
    instructions="Provides tools for reading and writing Magnet issues.",
)


@issues_mcp.tool(
    tags={"issues", "read"},
    annotations={"title": "Get Issue By ID", "readOnlyHint": True},
)
async def get_issue_by_id(
    ctx: Context,
    id: Annotated[str, Field(description="The issue ID", min_length=1)],
) -> str:
    """Fetch a single issue by its ID from Magnet.

    The issue includes a 'baseBranch' field which indicates the target
    branch for any pull requests related to this issue.

    Args:
        ctx: The FastMCP context.
        id: The issue ID.

    Returns:
        JSON string representing the issue with its document content.
    """
    async with magnet_session(ctx) as magnet:
        issue = await run_blocking(magnet.get_issue, id)
    return json.dumps(issue.to_simplified_dict(), indent=2, ensure_ascii=False)


@issues_mcp.tool(
    tags={"issues", "read"},
    annotations={"title": "List Issues", "readOnlyHint": True},
)
@convert_empty_defaults_to_none
async def list_issues(
    ctx: Context,
    organizationId: Annotated[
        str | None,
        Field(
            description="(Optional) Organization ID. Defaults to the API key's organization.",
            default=None,
        ),
    ] = None,
    cursor: Annotated[
        str | None,
        Field(
            description="(Optional) Cursor returned as 'nextCursor' by a previous call",
            default=None,
        ),
    ] = None,
    limit: Annotated[
        int | None,
        Field(description="(Optional) Maximum number of issues to return", ge=1, le=100),
    ] = None,
) -> str:
    """List issues in Magnet, one page at a time.

    Each issue includes a 'baseBranch' field which indicates the target
    branch for any pull requests related to that issue.

    Args:
        ctx: The FastMCP context.
        organizationId: Optional organization ID.
        cursor: Optional pagination cursor.
        limit: Optional page size.

    Returns:
        JSON string with 'issues', 'users' and 'pagination'.
    """
    async with magnet_session(ctx) as magnet:
        issue_list = await run_blocking(
            magnet.list_issues,
            organization_id=organizationId, cursor=cursor, limit=limit
        )
    return json.dumps(issue_list.to_simplified_dict(), indent=2, ensure_ascii=False)


@issues_mcp.tool(
    tags={"issues", "write"},
    annotations={"title": "Create Issue", "readOnlyHint": False, "destructiveHint": False},
)
@check_write_access
async def create_issue(
    ctx: Context,
    description: Annotated[str, Field(description="A brief description of the issue")],
    docContent: Annotated[dict[str, Any], Field(description=DOC_CONTENT_DESCRIPTION)],
    baseBranch: Annotated[
        str,
        Field(description="The base branch for pull requests (e.g., 'main', 'canary')"),
    ],
    title: Annotated[
        str | None,
        Field(
            description="(Optional) The issue title; generated by Magnet when omitted",
            default=None,
        ),
    ] = None,
    status: Annotated[
        str | None,
        Field(description="(Optional) Issue status (e.g., 'todo', 'in_progress', 'done')"),
    ] = None,
    organizationId: Annotated[
        str | None, Field(description="(Optional) Organization ID")
    ] = None,
) -> str:
    """Create a new issue in Magnet from a document tree.

    Args:
        ctx: The FastMCP context.
        description: A brief description of the issue.
        docContent: The issue content as a document tree.
        baseBranch: The base branch for pull requests.
        title: Optional title.
        status: Optional status.
        organizationId: Optional organization ID.

    Returns:
        JSON string representing the created issue.

    Raises:
        ValueError: If in read-only mode.
        MagnetValidationError: If docContent is not a valid document tree.
    """
    document = parse_document_content(docContent)
    async with magnet_session(ctx) as magnet:
        issue = await run_blocking(
            magnet.create_issue,
            description=description,
            doc_content=document,
            base_branch=baseBranch,
            title=title,
            status=status,
            organization_id=organizationId,
        )
    return json.dumps(
        {"message": "Issue created successfully", "issue": issue.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )


@issues_mcp.tool(
    tags={"issues", "write"},
    annotations={"title": "Update Issue", "readOnlyHint": False, "destructiveHint": True},
)
@check_write_access
async def update_issue(
    ctx: Context,
    id: Annotated[str, Field(description="The issue ID to update", min_length=1)],
    title: Annotated[str | None, Field(description="Updated issue title")] = None,
    docContent: Annotated[
        dict[str, Any] | None,
        Field(description="Updated content as a document tree"),
    ] = None,
    status: Annotated[str | None, Field(description="Updated issue status")] = None,
    assigneeClerkId: Annotated[
        str | None, Field(description="Updated assignee user ID")
    ] = None,
    baseBranch: Annotated[str | None, Field(description="Updated base branch")] = None,
) -> str:
    """Update an existing issue in Magnet.

    You can update the title, content (document tree), status, assignee, or
    base branch. Only provide the fields you want to update.

    Args:
        ctx: The FastMCP context.
        id: The issue ID.
        title: Updated title.
        docContent: Updated document tree.
        status: Updated status.
        assigneeClerkId: Updated assignee.
        baseBranch: Updated base branch.

    Returns:
        JSON string representing the updated issue.
    """
    document = parse_document_content(docContent) if docContent is not None else None
    async with magnet_session(ctx) as magnet:
        issue = await run_blocking(
            magnet.update_issue,
            id,
            title=title,
            doc_content=document,
            status=status,
            assignee_clerk_id=assigneeClerkId,
            base_branch=baseBranch,
        )
    return json.dumps(
        {"message": "Issue updated successfully", "issue": issue.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )


@issues_mcp.tool(
    tags={"issues", "read"},
    annotations={"title": "Get Issue Markdown", "readOnlyHint": True},
)
async def get_issue_markdown(
    ctx: Context,
    id: Annotated[str, Field(description="The issue ID", min_length=1)],
    previewOnly: Annotated[
        bool,
        Field(
            description="Return only a short markdown preview (about 100 words) instead of the full content",
            default=False,
        ),
    ] = False,
) -> str:
    """Fetch a single issue with its content rendered as markdown.

    Args:
        ctx: The FastMCP context.
        id: The issue ID.
        previewOnly: Whether to return a preview only.

    Returns:
        JSON string with the issue; 'docContent' holds the markdown, or
        'markdownPreview' holds the preview when previewOnly is set.
    """
    async with magnet_session(ctx) as magnet:
        issue = await run_blocking(
            magnet.get_issue_markdown, id, preview_only=previewOnly
        )
    return json.dumps(issue.to_simplified_dict(), indent=2, ensure_ascii=False)


@issues_mcp.tool(
    tags={"issues", "read"},
    annotations={"title": "List Issues Markdown", "readOnlyHint": True},
)
@convert_empty_defaults_to_none
async def list_issues_markdown(
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
        Field(description="(Optional) Maximum number of issues to return", ge=1, le=100),
    ] = None,
) -> str:
    """List issues with their content rendered as markdown."""
    async with magnet_session(ctx) as magnet:
        issue_list = await run_blocking(
            magnet.list_issues_markdown,
            organization_id=organizationId,
            preview_only=previewOnly,
            cursor=cursor,
            limit=limit,
        )
    return json.dumps(issue_list.to_simplified_dict(), indent=2, ensure_ascii=False)


@issues_mcp.tool(
    tags={"issues", "write"},
    annotations={"title": "Create Issue From Markdown", "readOnlyHint": False, "destructiveHint": False},
)
@check_write_access
async def create_issue_markdown(
    ctx: Context,
    description: Annotated[str, Field(description="A brief description of the issue")],
    markdown: Annotated[str, Field(description="The issue content in markdown")],
    baseBranch: Annotated[
        str,
        Field(description="The base branch for pull requests (e.g., 'main', 'canary')"),
    ],
    title: Annotated[
        str | None,
        Field(description="(Optional) The issue title; generated by Magnet when omitted"),
    ] = None,
    status: Annotated[
        MarkdownIssueStatus | None,
        Field(description="(Optional) Issue status: todo, in_progress, done or blocked"),
    ] = None,
    organizationId: Annotated[
        str | None, Field(description="(Optional) Organization ID")
    ] = None,
    properties: Annotated[
        dict[str, Any] | None, Field(description="(Optional) Additional issue properties")
    ] = None,
) -> str:
    """Create a new issue in Magnet from markdown.

    Magnet converts the markdown into its document format.

    Args:
        ctx: The FastMCP context.
        description: A brief description of the issue.
        markdown: The issue content in markdown.
        baseBranch: The base branch for pull requests.
        title: Optional title.
        status: Optional status.
        organizationId: Optional organization ID.
        properties: Optional additional properties.

    Returns:
        JSON string representing the created issue.
    """
    async with magnet_session(ctx) as magnet:
        issue = await run_blocking(
            magnet.create_issue_markdown,
            description=description,
            markdown=markdown,
            base_branch=baseBranch,
            title=title,
            status=status,
            organization_id=organizationId,
            properties=properties,
        )
    return json.dumps(
        {"message": "Issue created successfully", "issue": issue.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )


@issues_mcp.tool(
    tags={"issues", "write"},
    annotations={"title": "Update Issue From Markdown", "readOnlyHint": False, "destructiveHint": True},
)
@check_write_access
async def update_issue_markdown(
    ctx: Context,
    id: Annotated[str, Field(description="The issue ID to update", min_length=1)],
    markdown: Annotated[str, Field(description="The new issue content in markdown")],
    title: Annotated[str | None, Field(description="Updated issue title")] = None,
    status: Annotated[
        MarkdownIssueStatus | None,
        Field(description="Updated status: todo, in_progress, done or blocked"),
    ] = None,
    assigneeClerkId: Annotated[
        str | None, Field(description="Updated assignee user ID")
    ] = None,
) -> str:
    """Replace an issue's content with markdown and update the given fields."""
    async with magnet_session(ctx) as magnet:
        issue = await run_blocking(
            magnet.update_issue_markdown,
            id,
            markdown=markdown,
            title=title,
            status=status,
            assignee_clerk_id=assigneeClerkId,
        )
    return json.dumps(
        {"message": "Issue updated successfully", "issue": issue.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )
