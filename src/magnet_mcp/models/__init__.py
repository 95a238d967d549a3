"""
Pydantic models for Magnet API responses and tool inputs.
"""

from .base import ApiModel
from .chat import ChatExport, ChatSource, CursorRawPayload, MagnetChat
from .content import (
    DocumentContent,
    DocumentMark,
    DocumentNode,
    MarkdownContent,
    PreviewContent,
    StructuredContent,
    content_from_api,
    content_to_api,
    parse_document_content,
)
from .issue import IssueList, MagnetIssue
from .page import (
    MagnetPage,
    PageList,
    PageType,
    get_page_type_display_name,
    validate_page_properties,
)
from .pagination import MagnetUser, PaginationInfo
from .search import SearchResponse, SearchResult, SearchType, SearchUser

__all__ = [
    "ApiModel",
    "ChatExport",
    "ChatSource",
    "CursorRawPayload",
    "DocumentContent",
    "DocumentMark",
    "DocumentNode",
    "IssueList",
    "MagnetChat",
    "MagnetIssue",
    "MagnetPage",
    "MagnetUser",
    "MarkdownContent",
    "PageList",
    "PageType",
    "PaginationInfo",
    "PreviewContent",
    "SearchResponse",
    "SearchResult",
    "SearchType",
    "SearchUser",
    "StructuredContent",
    "content_from_api",
    "content_to_api",
    "get_page_type_display_name",
    "parse_document_content",
    "validate_page_properties",
]
