"""Tests for pagination and user projection models."""

from magnet_mcp.models.pagination import MagnetUser, PaginationInfo


def test_pagination_from_nested_object():
    info = PaginationInfo.from_api_response(
        {"pagination": {"nextCursor": "c2", "hasMore": True, "total": 40}}
    )

    assert info.next_cursor == "c2"
    assert info.has_more is True
    assert info.to_simplified_dict() == {"total": 40, "nextCursor": "c2", "hasMore": True}


def test_pagination_from_top_level_keys():
    info = PaginationInfo.from_api_response({"issues": [], "nextCursor": "c3"})

    assert info.next_cursor == "c3"
    assert info.has_more is True


def test_pagination_last_page():
    info = PaginationInfo.from_api_response({"pagination": {"nextCursor": None}})

    assert info.next_cursor is None
    assert info.has_more is False


def test_pagination_without_metadata():
    info = PaginationInfo.from_api_response({"issues": []})

    assert info.to_simplified_dict() == {"nextCursor": None, "hasMore": False}


def test_user_list_skips_malformed_entries():
    users = MagnetUser.list_from_api(
        [
            {"id": "u1", "firstName": "Ada", "email": "ada@example.com"},
            {"firstName": "no id"},
            "garbage",
        ]
    )

    assert [user.id for user in users] == ["u1"]
    assert users[0].to_simplified_dict() == {
        "id": "u1",
        "firstName": "Ada",
        "lastName": None,
        "username": None,
    }


def test_user_list_from_non_list():
    assert MagnetUser.list_from_api(None) == []
