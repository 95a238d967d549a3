"""URL-related utility functions for Magnet MCP."""

from urllib.parse import quote


def quote_path_segment(segment: str) -> str:
    """Escape an identifier so it can be embedded as a single URL path segment.

    Args:
        segment: Raw identifier

    Returns:
        Percent-encoded segment ('/' included)
    """
    return quote(str(segment), safe="")


def build_chat_view_url(base_url: str | None, chat_id: str | None) -> str | None:
    """Build the web URL where an uploaded chat can be viewed.

    Args:
        base_url: Magnet web base URL
        chat_id: Identifier of the stored chat

    Returns:
        The view URL, or None when either part is missing
    """
    if not base_url or not chat_id:
        return None
    return f"{base_url.rstrip('/')}/chats/{quote_path_segment(chat_id)}"
