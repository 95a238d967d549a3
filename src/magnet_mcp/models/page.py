"""
Magnet page models.

This module provides Pydantic models for Magnet pages and the
per-page-type properties contract.
"""

import datetime
import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import MagnetValidationError
from .base import ApiModel, describe_details, validation_error_details
from .constants import EMPTY_STRING, ISO_DATE_PATTERN, PAGE_TYPE_DISPLAY_NAMES
from .content import DocumentContent, content_from_api, content_to_api
from .pagination import MagnetUser, PaginationInfo

logger = logging.getLogger("magnet-mcp.models")

PageType = Literal["note", "context_doc_label", "sprint_planning"]


class PageProperties(BaseModel):
    """Properties shared by every page type; arbitrary keys pass through."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class SprintPlanningProperties(PageProperties):
    """Sprint planning pages may carry an ISO start and end date."""

    start_date: str | None = Field(
        default=None, alias="startDate", pattern=ISO_DATE_PATTERN
    )
    end_date: str | None = Field(default=None, alias="endDate", pattern=ISO_DATE_PATTERN)

    @field_validator("start_date", "end_date")
    @classmethod
    def _must_be_calendar_date(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            datetime.date.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"'{value}' is not a valid calendar date") from e
        return value


_PROPERTIES_MODELS: dict[str, type[PageProperties]] = {
    "sprint_planning": SprintPlanningProperties,
}


def get_page_type_display_name(page_type: str) -> str:
    """Human-readable name of a page type ('sprint_planning' -> 'Sprint Planning')."""
    return PAGE_TYPE_DISPLAY_NAMES.get(page_type, page_type)


def validate_page_properties(
    page_type: str | None, properties: dict[str, Any] | None
) -> dict[str, Any] | None:
    """
    Validate a properties bag against the contract of its page type.

    Args:
        page_type: The page type, or None when it is not known (updates); date
            keys are then checked as for sprint planning
        properties: The raw properties bag

    Returns:
        The validated properties with every provided key preserved, or None

    Raises:
        MagnetValidationError: Listing every violated property
    """
    if properties is None:
        return None

    if page_type is None:
        model: type[PageProperties] = SprintPlanningProperties
    else:
        model = _PROPERTIES_MODELS.get(page_type, PageProperties)
    try:
        validated = model.model_validate(properties)
    except ValidationError as e:
        details = validation_error_details(e, prefix="properties")
        logger.warning(
            f"Invalid {get_page_type_display_name(page_type or 'page')} properties: "
            f"{describe_details(details)}"
        )
        raise MagnetValidationError(
            f"Invalid page properties: {describe_details(details)}", details=details
        ) from e
    return validated.model_dump(by_alias=True, exclude_unset=True)


class MagnetPage(ApiModel):
    """
    Model representing a Magnet page.
    """

    id: str = EMPTY_STRING
    created_at: str | None = None
    updated_at: str | None = None
    title: str = EMPTY_STRING
    content: DocumentContent | None = None
    page_type: str | None = None
    properties: dict[str, Any] = Field(default_factory=dict)
    created_clerk_id: str | None = None
    organization_id: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "MagnetPage":
        """
        Create a MagnetPage from a Magnet API response.

        Args:
            data: The page data from the Magnet API

        Returns:
            A MagnetPage instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary page data")
            return cls()

        properties = data.get("properties")
        return cls(
            id=str(data.get("id", EMPTY_STRING)),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            title=data.get("title") or EMPTY_STRING,
            content=content_from_api(data),
            page_type=data.get("pageType"),
            properties=properties if isinstance(properties, dict) else {},
            created_clerk_id=data.get("createdClerkId"),
            organization_id=data.get("organizationId"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to the camelCase dictionary returned by the page tools."""
        result: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "pageType": self.page_type,
            "properties": self.properties,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        result.update(content_to_api(self.content))

        if self.created_clerk_id:
            result["createdClerkId"] = self.created_clerk_id
        if self.organization_id:
            result["organizationId"] = self.organization_id

        return result


class PageList(ApiModel):
    """A page of pages with the users they reference and the pagination cursor."""

    pages: list[MagnetPage] = Field(default_factory=list)
    users: list[MagnetUser] = Field(default_factory=list)
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "PageList":
        """Create a PageList from a ``{pages, users, pagination}`` envelope."""
        if isinstance(data, list):
            data = {"pages": data}
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            pages=[
                MagnetPage.from_api_response(item)
                for item in data.get("pages") or []
                if isinstance(item, dict)
            ],
            users=MagnetUser.list_from_api(data.get("users")),
            pagination=PaginationInfo.from_api_response(data),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "pages": [page.to_simplified_dict() for page in self.pages],
            "users": [user.to_simplified_dict() for user in self.users],
            "pagination": self.pagination.to_simplified_dict(),
        }
