"""Constants for the Magnet API integration."""

from typing import Final

# Environment variable names
ENV_MAGNET_API_KEY: Final[str] = "MAGNET_API_KEY"
ENV_MAGNET_URL: Final[str] = "MAGNET_WEB_API_BASE_URL"
ENV_MAGNET_REQUEST_TIMEOUT: Final[str] = "MAGNET_REQUEST_TIMEOUT"
ENV_MAGNET_SSL_VERIFY: Final[str] = "MAGNET_SSL_VERIFY"
ENV_MAGNET_CUSTOM_HEADERS: Final[str] = "MAGNET_CUSTOM_HEADERS"

# Default values
DEFAULT_MAGNET_URL: Final[str] = "https://www.magnet.run"
DEFAULT_REQUEST_TIMEOUT: Final[float] = 30.0

# Authentication header
API_KEY_HEADER: Final[str] = "x-api-key"

# API endpoints
ISSUES_ENDPOINT: Final[str] = "/api/issues"
PAGES_ENDPOINT: Final[str] = "/api/pages"
CHATS_ENDPOINT: Final[str] = "/api/chats"
SEARCH_ENDPOINT: Final[str] = "/api/search"
MARKDOWN_SUFFIX: Final[str] = "/markdown"
