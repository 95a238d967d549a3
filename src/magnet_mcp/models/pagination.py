"""
Pagination and user projection models shared by list endpoints.
"""

import logging
from typing import Any

from pydantic import ConfigDict, Field, ValidationError

from .base import ApiModel

logger = logging.getLogger("magnet-mcp.models")

_CURSOR_KEYS = ("nextCursor", "hasMore")


class MagnetUser(ApiModel):
    """
    Public projection of a Magnet user.

    Only identifier and display names are kept; contact details such as
    email are dropped on purpose.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    username: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "MagnetUser":
        return cls.model_validate(data)

    @classmethod
    def list_from_api(cls, data: Any) -> list["MagnetUser"]:
        """Leniently parse a ``users`` array, skipping entries without an id."""
        users: list[MagnetUser] = []
        if not isinstance(data, list):
            return users
        for item in data:
            if not isinstance(item, dict):
                continue
            try:
                users.append(cls.from_api_response(item))
            except ValidationError:
                logger.debug(f"Skipping malformed user entry: {item!r}")
        return users

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "username": self.username,
        }


class PaginationInfo(ApiModel):
    """
    Cursor descriptor of a list response.

    Any additional metadata the service returns (total, limit, ...) is kept
    in ``extra`` and passed through untouched.
    """

    next_cursor: str | None = None
    has_more: bool = False
    extra: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "PaginationInfo":
        """
        Read pagination from a ``pagination`` object or from top-level keys.

        Args:
            data: The full list envelope

        Returns:
            A PaginationInfo instance (no cursor when the service sent none)
        """
        if not isinstance(data, dict):
            return cls()

        source = data.get("pagination")
        if not isinstance(source, dict):
            source = {key: data[key] for key in _CURSOR_KEYS if key in data}

        next_cursor = source.get("nextCursor")
        has_more = source.get("hasMore")
        if has_more is None:
            has_more = next_cursor is not None

        return cls(
            next_cursor=str(next_cursor) if next_cursor is not None else None,
            has_more=bool(has_more),
            extra={k: v for k, v in source.items() if k not in _CURSOR_KEYS},
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "nextCursor": self.next_cursor,
            "hasMore": self.has_more,
        }
