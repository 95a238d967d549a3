"""Magnet API module for the Magnet MCP server.

This module provides the client and resource operations for the Magnet
issues, pages, chats and search API.
"""

from .chats import ChatsMixin
from .client import MagnetClient
from .config import MagnetConfig
from .issues import IssuesMixin
from .pages import PagesMixin
from .search import SearchMixin


class MagnetFetcher(IssuesMixin, PagesMixin, ChatsMixin, SearchMixin):
    """
    The main Magnet client class providing access to all Magnet operations.

    This class inherits from multiple mixins that provide specific functionality:
    - IssuesMixin: structured and markdown issue operations
    - PagesMixin: structured and markdown page operations
    - ChatsMixin: chat export upload
    - SearchMixin: search across issues and pages
    """

    pass


__all__ = ["MagnetFetcher", "MagnetConfig", "MagnetClient"]
