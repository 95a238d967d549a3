"""Main FastMCP server setup for the Magnet integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from magnet_mcp.magnet.config import MagnetConfig
from magnet_mcp.utils.io import is_read_only_mode
from magnet_mcp.utils.logging import log_config_param

from .chats import chats_mcp
from .context import MainAppContext
from .issues import issues_mcp
from .pages import pages_mcp
from .search import search_mcp

logger = logging.getLogger("magnet-mcp.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Magnet MCP server lifespan starting...")
    read_only = is_read_only_mode()

    # Fails startup when MAGNET_API_KEY is missing
    magnet_config = MagnetConfig.from_env()
    log_config_param(logger, "Magnet", "URL", magnet_config.url)
    log_config_param(logger, "Magnet", "API key", magnet_config.api_key, sensitive=True)

    app_context = MainAppContext(magnet_config=magnet_config, read_only=read_only)
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")

    try:
        yield {"app_lifespan_context": app_context}
    except Exception as e:
        logger.error(f"Error during lifespan: {e}", exc_info=True)
        raise
    finally:
        logger.info("Main Magnet MCP server lifespan shutdown complete.")


main_mcp = FastMCP(name="Magnet MCP", lifespan=main_lifespan)
main_mcp.mount(issues_mcp)
main_mcp.mount(pages_mcp)
main_mcp.mount(chats_mcp)
main_mcp.mount(search_mcp)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)
