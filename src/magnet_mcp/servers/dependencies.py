"""Dependency providers for MagnetFetcher.

Provides get_magnet_fetcher, the magnet_session scope and run_blocking for
use in tool functions.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import anyio.to_thread
from fastmcp import Context

from magnet_mcp.exceptions import MagnetConfigurationError
from magnet_mcp.magnet import MagnetFetcher
from magnet_mcp.servers.context import MainAppContext

logger = logging.getLogger("magnet-mcp.servers.dependencies")

T = TypeVar("T")


async def get_magnet_fetcher(ctx: Context) -> MagnetFetcher:
    """Returns a fresh MagnetFetcher built from the lifespan configuration.

    Each tool invocation gets its own fetcher (and HTTP session); the
    immutable MagnetConfig is the only state shared between calls.
    """
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    app_lifespan_ctx: MainAppContext | None = (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )
    if app_lifespan_ctx and app_lifespan_ctx.magnet_config:
        logger.debug("get_magnet_fetcher: Creating MagnetFetcher from lifespan config.")
        return MagnetFetcher(config=app_lifespan_ctx.magnet_config)

    logger.error("Magnet configuration could not be resolved.")
    raise MagnetConfigurationError(
        "Magnet client (fetcher) not available. Ensure MAGNET_API_KEY is configured."
    )


@asynccontextmanager
async def magnet_session(ctx: Context) -> AsyncIterator[MagnetFetcher]:
    """Yields the fetcher for one tool invocation and closes its session on exit."""
    fetcher = await get_magnet_fetcher(ctx)
    try:
        yield fetcher
    finally:
        fetcher.close()


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Runs a blocking fetcher call in a worker thread so the event loop stays free."""
    return await anyio.to_thread.run_sync(functools.partial(func, *args, **kwargs))
