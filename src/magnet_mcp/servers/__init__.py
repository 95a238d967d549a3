"""MCP server for the Magnet issues, pages, chats and search API."""

from .main import main_mcp

__all__ = ["main_mcp"]
