from typing import Any


class MagnetError(Exception):
    """Base exception for Magnet MCP errors."""

    pass


class MagnetConfigurationError(MagnetError):
    """Raised when required configuration (such as the API key) is missing or invalid."""

    pass


class MagnetValidationError(MagnetError):
    """Raised when input violates its declared contract or the API answers 400.

    Attributes:
        details: One entry per violated field, each a dict with ``field`` and ``message``.
    """

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.details = details or []


class MagnetApiError(MagnetError):
    """Base class for failures reported by the Magnet HTTP API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MagnetAuthenticationError(MagnetApiError):
    """Raised when Magnet API authentication fails (401/403)."""

    pass


class MagnetNotFoundError(MagnetApiError):
    """Raised when the requested identifier does not exist (404)."""

    pass


class MagnetUpstreamError(MagnetApiError):
    """Raised for any other non-success status, network failure or undecodable body."""

    pass


class MagnetResponseShapeError(MagnetError):
    """Raised when a decoded API payload does not match the expected result shape."""

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.details = details or []
