"""Test data factories for creating consistent test objects."""

from typing import Any
from unittest.mock import MagicMock

from tests.fixtures.magnet_mocks import MOCK_ISSUE


class ResponseFactory:
    """Factory for mock ``requests.Response`` objects."""

    @staticmethod
    def create(
        status_code: int = 200,
        json_data: Any = None,
        text: str | None = None,
        reason: str = "OK",
    ) -> MagicMock:
        """Create a response; without json_data the body is not JSON."""
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        response.reason = reason
        if json_data is not None:
            response.json.return_value = json_data
            response.content = b"{}"
            response.text = str(json_data)
        else:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1")
            response.text = text or ""
            response.content = (text or "").encode()
        return response

    @staticmethod
    def create_empty(status_code: int = 204) -> MagicMock:
        """Create a success response with no body."""
        response = ResponseFactory.create(status_code=status_code, reason="No Content")
        response.content = b""
        return response


class ErrorResponseFactory:
    """Factory for Magnet API error responses."""

    @staticmethod
    def create_api_error(
        status_code: int, error: str | None = None, **extra: Any
    ) -> MagicMock:
        body: dict[str, Any] = dict(extra)
        if error is not None:
            body["error"] = error
        return ResponseFactory.create(status_code=status_code, json_data=body, reason="Error")

    @staticmethod
    def create_field_validation_error() -> MagicMock:
        return ResponseFactory.create(
            status_code=400,
            json_data={
                "details": {
                    "fieldErrors": {
                        "title": ["Required"],
                        "baseBranch": ["Required", "Must not be empty"],
                    }
                }
            },
            reason="Bad Request",
        )


class MagnetIssueFactory:
    """Factory for creating Magnet issue payloads."""

    @staticmethod
    def create(issue_id: str = "iss_1", **overrides: Any) -> dict[str, Any]:
        return deep_merge({**MOCK_ISSUE, "id": issue_id}, overrides)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
