"""Magnet chats FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from magnet_mcp.models.chat import ChatExport
from magnet_mcp.servers.dependencies import magnet_session, run_blocking
from magnet_mcp.utils.decorators import check_write_access
from magnet_mcp.utils.io import read_json_file

logger = logging.getLogger("magnet-mcp.servers.chats")

chats_mcp = FastMCP(
    name="Magnet Chats",
    instructions="Provides tools for uploading agent chat sessions to Magnet.",
)


@chats_mcp.tool(
    tags={"chats", "write"},
    annotations={"title": "Upload Chat", "readOnlyHint": False, "destructiveHint": False},
)
@check_write_access
async def upload_chat(
    ctx: Context,
    filePath: Annotated[
        str,
        Field(
            description=(
                "Path to a chat export JSON file written by a session exporter. "
                "It must contain 'source' (CLAUDE_CODE or CURSOR), 'sessionId', "
                "'projectPath', 'gitBranch' and either 'rawPayload' or "
                "'messages' with 'modelName'."
            ),
            min_length=1,
        ),
    ],
    organizationId: Annotated[
        str | None, Field(description="(Optional) Organization ID")
    ] = None,
) -> str:
    """Upload a Claude Code or Cursor chat session to Magnet.

    The export file is read from local storage, validated, and uploaded.
    The result includes a 'viewUrl' where the chat can be opened.

    Args:
        ctx: The FastMCP context.
        filePath: Path to the chat export file.
        organizationId: Optional organization ID.

    Returns:
        JSON string representing the stored chat.

    Raises:
        ValueError: If in read-only mode.
        MagnetValidationError: If the file cannot be read or is not a valid export.
    """
    export_data = await read_json_file(filePath)
    export = ChatExport.from_export(export_data)
    logger.debug(f"Read {export.source} chat export '{export.session_id}' from {filePath}")

    async with magnet_session(ctx) as magnet:
        chat = await run_blocking(
            magnet.upload_chat, export, organization_id=organizationId
        )
    return json.dumps(
        {"message": "Chat uploaded successfully", "chat": chat.to_simplified_dict()},
        indent=2,
        ensure_ascii=False,
    )
