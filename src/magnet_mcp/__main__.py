"""Entry point for running the Magnet MCP server."""

from magnet_mcp import main

if __name__ == "__main__":
    main()
