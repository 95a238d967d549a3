"""Configuration module for Magnet API interactions."""

import logging
import os
from dataclasses import dataclass, field

from ..exceptions import MagnetConfigurationError
from ..utils.env import get_custom_headers, is_env_ssl_verify
from .constants import (
    DEFAULT_MAGNET_URL,
    DEFAULT_REQUEST_TIMEOUT,
    ENV_MAGNET_API_KEY,
    ENV_MAGNET_CUSTOM_HEADERS,
    ENV_MAGNET_REQUEST_TIMEOUT,
    ENV_MAGNET_SSL_VERIFY,
    ENV_MAGNET_URL,
)

logger = logging.getLogger("magnet-mcp.magnet")


@dataclass(frozen=True)
class MagnetConfig:
    """Configuration for Magnet API access.

    The API key is a static credential sent as the ``x-api-key`` header;
    it also scopes every request to the key's organization.
    """

    api_key: str
    url: str = DEFAULT_MAGNET_URL
    timeout: float = DEFAULT_REQUEST_TIMEOUT
    ssl_verify: bool = True
    custom_headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise MagnetConfigurationError(f"{ENV_MAGNET_API_KEY} is not set")
        if not self.url:
            raise MagnetConfigurationError("Magnet API base URL must not be empty")
        if self.timeout <= 0:
            raise MagnetConfigurationError(
                f"Request timeout must be positive, got {self.timeout}"
            )
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "url", self.url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "MagnetConfig":
        """Create configuration from environment variables.

        Environment variables:
            MAGNET_API_KEY: API key (required)
            MAGNET_WEB_API_BASE_URL: API/web base URL (default: https://www.magnet.run)
            MAGNET_REQUEST_TIMEOUT: Per-request timeout in seconds (default: 30)
            MAGNET_SSL_VERIFY: SSL verification setting (default: true)
            MAGNET_CUSTOM_HEADERS: Extra headers as ``Key=Value,Key2=Value2``

        Returns:
            MagnetConfig instance

        Raises:
            MagnetConfigurationError: If the API key is missing or a value is invalid
        """
        api_key = os.getenv(ENV_MAGNET_API_KEY, "").strip()
        if not api_key:
            raise MagnetConfigurationError(
                f"{ENV_MAGNET_API_KEY} is not set. Create an API key in Magnet and "
                f"export it as {ENV_MAGNET_API_KEY}."
            )

        url = os.getenv(ENV_MAGNET_URL, "").strip() or DEFAULT_MAGNET_URL

        timeout_raw = os.getenv(ENV_MAGNET_REQUEST_TIMEOUT, "").strip()
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_REQUEST_TIMEOUT
        except ValueError as e:
            raise MagnetConfigurationError(
                f"{ENV_MAGNET_REQUEST_TIMEOUT} must be a number, got '{timeout_raw}'"
            ) from e

        return cls(
            api_key=api_key,
            url=url,
            timeout=timeout,
            ssl_verify=is_env_ssl_verify(ENV_MAGNET_SSL_VERIFY),
            custom_headers=get_custom_headers(ENV_MAGNET_CUSTOM_HEADERS),
        )
