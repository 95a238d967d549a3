"""
Magnet issue models.

This module provides Pydantic models for Magnet issues.
"""

import logging
from typing import Any

from pydantic import Field

from .base import ApiModel
from .constants import EMPTY_STRING
from .content import DocumentContent, content_from_api, content_to_api
from .pagination import MagnetUser, PaginationInfo

logger = logging.getLogger("magnet-mcp.models")


class MagnetIssue(ApiModel):
    """
    Model representing a Magnet issue.

    The content is whichever representation the endpoint returned: a
    document tree, a markdown string, or a markdown preview.
    """

    id: str = EMPTY_STRING
    created_at: str | None = None
    updated_at: str | None = None
    title: str = EMPTY_STRING
    content: DocumentContent | None = None
    status: str | None = None
    assignee_clerk_id: str | None = None
    created_clerk_id: str | None = None
    branch_name: str | None = None
    base_branch: str | None = None
    linear_issue_id: str | None = None
    organization_id: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "MagnetIssue":
        """
        Create a MagnetIssue from a Magnet API response.

        Args:
            data: The issue data from the Magnet API

        Returns:
            A MagnetIssue instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary issue data")
            return cls()

        return cls(
            id=str(data.get("id", EMPTY_STRING)),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            title=data.get("title") or EMPTY_STRING,
            content=content_from_api(data),
            status=data.get("status"),
            assignee_clerk_id=data.get("assigneeClerkId"),
            created_clerk_id=data.get("createdClerkId"),
            branch_name=data.get("branchName"),
            base_branch=data.get("baseBranch"),
            linear_issue_id=data.get("linearIssueId"),
            organization_id=data.get("organizationId"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to the camelCase dictionary returned by the issue tools."""
        result: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        result.update(content_to_api(self.content))

        if self.assignee_clerk_id:
            result["assigneeClerkId"] = self.assignee_clerk_id
        if self.created_clerk_id:
            result["createdClerkId"] = self.created_clerk_id
        # branchName is meaningful even when null (no branch created yet)
        result["branchName"] = self.branch_name
        if self.base_branch:
            result["baseBranch"] = self.base_branch
        if self.linear_issue_id:
            result["linearIssueId"] = self.linear_issue_id
        if self.organization_id:
            result["organizationId"] = self.organization_id

        return result


class IssueList(ApiModel):
    """A page of issues with the users they reference and the pagination cursor."""

    issues: list[MagnetIssue] = Field(default_factory=list)
    users: list[MagnetUser] = Field(default_factory=list)
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "IssueList":
        """
        Create an IssueList from a ``{issues, users, pagination}`` envelope.

        A bare JSON array is accepted as a list of issues without users.
        """
        if isinstance(data, list):
            data = {"issues": data}
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            issues=[
                MagnetIssue.from_api_response(item)
                for item in data.get("issues") or []
                if isinstance(item, dict)
            ],
            users=MagnetUser.list_from_api(data.get("users")),
            pagination=PaginationInfo.from_api_response(data),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {
            "issues": [issue.to_simplified_dict() for issue in self.issues],
            "users": [user.to_simplified_dict() for user in self.users],
            "pagination": self.pagination.to_simplified_dict(),
        }
