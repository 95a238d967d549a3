"""
Utility functions for the Magnet MCP integration.
This package provides various utility functions used throughout the codebase.
"""

from .env import get_custom_headers, is_env_extended_truthy, is_env_ssl_verify
from .io import is_read_only_mode, read_json_file
from .logging import log_config_param, mask_sensitive
from .urls import build_chat_view_url, quote_path_segment

__all__ = [
    "build_chat_view_url",
    "get_custom_headers",
    "is_env_extended_truthy",
    "is_env_ssl_verify",
    "is_read_only_mode",
    "log_config_param",
    "mask_sensitive",
    "quote_path_segment",
    "read_json_file",
]
