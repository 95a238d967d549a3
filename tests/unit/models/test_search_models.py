"""Tests for the search models."""

from unittest.mock import patch

import pytest

from magnet_mcp.exceptions import MagnetResponseShapeError
from magnet_mcp.models.search import SearchResponse
from tests.fixtures.magnet_mocks import MOCK_SEARCH_RESPONSE


def test_search_response_projection():
    response = SearchResponse.from_api_response(MOCK_SEARCH_RESPONSE)

    simplified = response.to_simplified_dict()
    assert simplified["results"][0] == {
        "id": "iss_1",
        "type": "issue",
        "title": "Login fails on Safari",
        "status": "todo",
        "createdAt": "2024-05-01T10:00:00.000Z",
        "updatedAt": "2024-05-02T11:30:00.000Z",
        "organizationId": "org_123",
    }
    assert simplified["results"][1]["pageType"] == "sprint_planning"
    assert simplified["users"] == [
        {"id": "user_1", "firstName": "Ada", "lastName": "Lovelace", "username": "ada"}
    ]


def test_search_users_emails_dropped_with_warning():
    data = {
        "results": [],
        "users": [{"id": "u", "firstName": "A", "lastName": "B", "username": "ab", "email": "a@b.c"}],
    }

    with patch("magnet_mcp.models.search.logger") as mock_logger:
        response = SearchResponse.from_api_response(data)

    assert "email" not in response.to_simplified_dict()["users"][0]
    mock_logger.warning.assert_called_once()


def test_search_response_missing_results_rejected():
    with pytest.raises(MagnetResponseShapeError) as exc_info:
        SearchResponse.from_api_response({"users": []})

    assert exc_info.value.details[0]["field"] == "results"


def test_search_result_with_unknown_type_rejected():
    data = {
        "results": [{**MOCK_SEARCH_RESPONSE["results"][0], "type": "chat"}],
        "users": [],
    }

    with pytest.raises(MagnetResponseShapeError, match="results.0.type"):
        SearchResponse.from_api_response(data)
