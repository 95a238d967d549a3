"""Base client module for Magnet API interactions."""

import json
import logging
from typing import Any

import requests
from requests import Response, Session

from ..exceptions import (
    MagnetApiError,
    MagnetAuthenticationError,
    MagnetNotFoundError,
    MagnetUpstreamError,
    MagnetValidationError,
)
from ..logging_config import log_context
from ..utils.logging import mask_sensitive
from ..utils.urls import quote_path_segment
from .config import MagnetConfig
from .constants import API_KEY_HEADER

logger = logging.getLogger("magnet-mcp.magnet")


class MagnetClient:
    """Base client for Magnet API interactions."""

    config: MagnetConfig
    session: Session

    def __init__(self, config: MagnetConfig | None = None) -> None:
        """Initialize the Magnet client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            MagnetConfigurationError: If required configuration is missing
        """
        self.config = config or MagnetConfig.from_env()

        self.session = Session()
        self.session.verify = self.config.ssl_verify
        self.session.headers.update(
            {
                API_KEY_HEADER: self.config.api_key,
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        if self.config.custom_headers:
            self.session.headers.update(self.config.custom_headers)

        logger.debug(
            f"Initialized Magnet client. URL: {self.config.url}, "
            f"API key (masked): {mask_sensitive(self.config.api_key)}"
        )

    def close(self) -> None:
        """Close the HTTP session and release its pooled connections."""
        self.session.close()

    def __enter__(self) -> "MagnetClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def _path(*segments: str) -> str:
        """Join endpoint segments, escaping each identifier segment."""
        return "/".join(quote_path_segment(segment) for segment in segments)

    @staticmethod
    def _drop_none(values: dict[str, Any]) -> dict[str, Any]:
        """Remove keys whose value was not supplied."""
        return {key: value for key, value in values.items() if value is not None}

    @staticmethod
    def _unwrap(data: Any, key: str) -> Any:
        """Return ``data[key]`` for enveloped responses, or ``data`` when it is bare.

        Some endpoints answer ``{"issue": {...}}`` (sometimes with siblings such
        as ``users``), others return the entity itself.
        """
        if isinstance(data, dict) and isinstance(data.get(key), dict):
            return data[key]
        return data

    def _request(
        self,
        method: str,
        endpoint: str,
        operation: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> Any:
        """Make a request to the Magnet API and decode the JSON body.

        Args:
            method: HTTP method (GET, POST, PUT)
            endpoint: API endpoint (relative to the base URL)
            operation: Human-readable operation name used in error messages
            params: Optional query parameters
            json_data: Optional JSON body

        Returns:
            The decoded JSON body (None for an empty body)

        Raises:
            MagnetValidationError: On HTTP 400
            MagnetAuthenticationError: On HTTP 401 or 403
            MagnetNotFoundError: On HTTP 404
            MagnetUpstreamError: On any other failure status, network error or non-JSON body
        """
        with log_context(operation=operation):
            return self._send(method, endpoint, operation, params, json_data)

    def _send(
        self,
        method: str,
        endpoint: str,
        operation: str,
        params: dict[str, Any] | None,
        json_data: dict[str, Any] | None,
    ) -> Any:
        url = f"{self.config.url}{endpoint}"
        logger.debug(f"Sending {method} request to {url} ({operation})")

        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json_data,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Network error during {operation}: {e}")
            raise MagnetUpstreamError(f"Failed to {operation}: {e}") from e

        if not response.ok:
            error = self._classify_error(response, operation)
            log_level = (
                logging.WARNING
                if isinstance(error, MagnetValidationError | MagnetNotFoundError)
                else logging.ERROR
            )
            logger.log(log_level, f"Magnet API error during {operation}: {error}")
            raise error

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Non-JSON response during {operation}: {response.text[:200]}")
            raise MagnetUpstreamError(
                f"Failed to {operation}: response body is not valid JSON",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _decode_error_body(response: Response) -> dict[str, Any]:
        """Decode an error body, falling back to the status text."""
        try:
            data = response.json()
        except ValueError:
            return {"error": response.reason or response.text}
        if isinstance(data, dict):
            return data
        return {"error": str(data)}

    def _classify_error(
        self, response: Response, operation: str
    ) -> MagnetValidationError | MagnetApiError:
        """Translate a failure status into the matching exception."""
        status = response.status_code
        error_data = self._decode_error_body(response)
        error_text = error_data.get("error")
        details = error_data.get("details")

        if status == 400:
            return MagnetValidationError(
                f"Validation error: {error_text or json.dumps(details)}",
                details=self._normalize_details(details),
            )
        if status == 401:
            return MagnetAuthenticationError(
                "Unauthorized: Invalid or missing API key", status_code=status
            )
        if status == 403:
            return MagnetAuthenticationError(
                "Forbidden: API key does not have access to this organization",
                status_code=status,
            )
        if status == 404:
            return MagnetNotFoundError(
                f"Not found: {error_data.get('message') or error_text or response.reason}",
                status_code=status,
            )

        reason = error_text or (json.dumps(details) if details else None) or response.reason
        return MagnetUpstreamError(
            f"Failed to {operation}: {status} {reason}", status_code=status
        )

    @staticmethod
    def _normalize_details(details: Any) -> list[dict[str, Any]]:
        """Coerce the API's field error details into ``[{field, message}]`` entries."""
        if not details:
            return []
        if isinstance(details, dict):
            # {"fieldErrors": {"title": ["Required"]}} or {"title": "Required"}
            field_errors = details.get("fieldErrors", details)
            normalized = []
            for field_name, messages in field_errors.items():
                if isinstance(messages, list):
                    normalized.extend(
                        {"field": field_name, "message": str(m)} for m in messages
                    )
                else:
                    normalized.append({"field": field_name, "message": str(messages)})
            return normalized
        if isinstance(details, list):
            normalized = []
            for item in details:
                if isinstance(item, dict):
                    path = item.get("path") or item.get("field")
                    if isinstance(path, list):
                        path = ".".join(str(p) for p in path)
                    normalized.append(
                        {"field": path or "", "message": str(item.get("message", item))}
                    )
                else:
                    normalized.append({"field": "", "message": str(item)})
            return normalized
        return [{"field": "", "message": str(details)}]

    def _get(
        self, endpoint: str, operation: str, params: dict[str, Any] | None = None
    ) -> Any:
        """Make a GET request to the Magnet API."""
        return self._request("GET", endpoint, operation, params=params)

    def _post(
        self, endpoint: str, operation: str, json_data: dict[str, Any] | None = None
    ) -> Any:
        """Make a POST request to the Magnet API."""
        return self._request("POST", endpoint, operation, json_data=json_data)

    def _put(
        self, endpoint: str, operation: str, json_data: dict[str, Any] | None = None
    ) -> Any:
        """Make a PUT request to the Magnet API."""
        return self._request("PUT", endpoint, operation, json_data=json_data)
