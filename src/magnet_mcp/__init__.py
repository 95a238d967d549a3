import asyncio
import os
import sys

import click
from dotenv import load_dotenv

__version__ = "0.1.0"

from .exceptions import MagnetConfigurationError
from .logging_config import log_operation, setup_logger

logger = setup_logger()


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse or streamable-http)",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind for HTTP transports",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for HTTP transports",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--magnet-url",
    help="Magnet base URL (default: https://www.magnet.run)",
)
@click.option("--magnet-api-key", help="Magnet API key")
@click.option(
    "--read-only",
    is_flag=True,
    default=False,
    help="Disable all write tools (create, update, upload)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    host: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    magnet_url: str | None,
    magnet_api_key: str | None,
    read_only: bool,
) -> None:
    """Magnet MCP Server - Magnet issues, pages, chats and search for MCP"""
    # Without -v the level comes from LOG_LEVEL (INFO when unset)
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(
        name="magnet-mcp",
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
    )

    with log_operation(logger, "application_startup", app_version=__version__):
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments override the environment
        if magnet_url:
            os.environ["MAGNET_WEB_API_BASE_URL"] = magnet_url
        if magnet_api_key:
            os.environ["MAGNET_API_KEY"] = magnet_api_key
        if read_only:
            os.environ["READ_ONLY_MODE"] = "true"
        if log_dir:
            os.environ["LOG_DIR"] = log_dir

        from .magnet.config import MagnetConfig

        try:
            MagnetConfig.from_env()
        except MagnetConfigurationError as e:
            logger.error(f"Configuration error: {e}")
            sys.exit(1)

        from .servers import main_mcp

        run_kwargs: dict = {"transport": transport}
        if transport != "stdio":
            run_kwargs.update(host=host, port=port)

        logger.info(f"Starting Magnet MCP v{__version__} with {transport} transport")

    asyncio.run(main_mcp.run_async(**run_kwargs))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
