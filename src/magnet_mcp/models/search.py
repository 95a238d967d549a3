"""
Magnet search models.

Search responses are re-validated strictly: a payload that does not match
these shapes is reported as a response shape error instead of being
passed through to the caller.
"""

import logging
from typing import Any, Literal

from pydantic import ConfigDict, Field, ValidationError

from ..exceptions import MagnetResponseShapeError
from .base import ApiModel, describe_details, validation_error_details
from .pagination import MagnetUser

logger = logging.getLogger("magnet-mcp.models")

SearchType = Literal["issue", "page"]


class SearchResult(ApiModel):
    """A single issue or page matching a search query."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    type: SearchType
    title: str
    status: str | None = None
    page_type: str | None = Field(default=None, alias="pageType")
    created_at: str = Field(alias="createdAt")
    updated_at: str = Field(alias="updatedAt")
    organization_id: str = Field(alias="organizationId")

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "SearchResult":
        return cls.model_validate(data)


class SearchUser(MagnetUser):
    """Contributor referenced by search results; never carries an email."""

    pass


class SearchResponse(ApiModel):
    """Search results together with the users they reference."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    results: list[SearchResult]
    users: list[SearchUser] = Field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "SearchResponse":
        """
        Strictly validate a search payload.

        Args:
            data: Decoded ``GET /api/search`` response

        Returns:
            A SearchResponse instance

        Raises:
            MagnetResponseShapeError: If the payload does not match the expected shape
        """
        if isinstance(data, dict):
            for user in data.get("users") or []:
                if isinstance(user, dict) and "email" in user:
                    logger.warning(
                        "Search response included user emails; dropping them from the result"
                    )
                    break
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            details = validation_error_details(e)
            logger.error(f"Unexpected search response shape: {describe_details(details)}")
            raise MagnetResponseShapeError(
                f"Search response did not match the expected shape: {describe_details(details)}",
                details=details,
            ) from e

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "results": [
                result.model_dump(by_alias=True, exclude_none=True)
                for result in self.results
            ],
            "users": [user.to_simplified_dict() for user in self.users],
        }
