"""Module for Magnet issue operations."""

import logging
from typing import Any

from ..models.content import DocumentNode
from ..models.issue import IssueList, MagnetIssue
from .client import MagnetClient
from .constants import ISSUES_ENDPOINT, MARKDOWN_SUFFIX

logger = logging.getLogger("magnet-mcp.magnet")


class IssuesMixin(MagnetClient):
    """Mixin for Magnet issue operations.

    Every issue operation exists twice: the structured variant exchanges the
    document tree, the markdown variant lets the service convert to and from
    markdown.
    """

    def get_issue(self, issue_id: str) -> MagnetIssue:
        """
        Get a single issue with its structured document content.

        Args:
            issue_id: The issue identifier

        Returns:
            The MagnetIssue

        Raises:
            MagnetNotFoundError: If the issue does not exist
            MagnetApiError: If the API request fails
        """
        data = self._get(
            f"{ISSUES_ENDPOINT}/{self._path(issue_id)}", operation="get issue"
        )
        return MagnetIssue.from_api_response(self._unwrap(data, "issue"))

    def list_issues(
        self,
        organization_id: str | None = None,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> IssueList:
        """
        List one page of issues.

        Args:
            organization_id: Optional organization scope (defaults to the key's)
            cursor: Opaque cursor returned by a previous call
            limit: Maximum number of issues to return

        Returns:
            IssueList with the issues, referenced users and pagination cursor
        """
        params = self._drop_none(
            {"organizationId": organization_id, "cursor": cursor, "limit": limit}
        )
        data = self._get(ISSUES_ENDPOINT, operation="list issues", params=params)
        issue_list = IssueList.from_api_response(data)
        logger.debug(
            f"Listed {len(issue_list.issues)} issues "
            f"(has more: {issue_list.pagination.has_more})"
        )
        return issue_list

    def create_issue(
        self,
        description: str,
        doc_content: DocumentNode,
        base_branch: str,
        title: str | None = None,
        status: str | None = None,
        organization_id: str | None = None,
    ) -> MagnetIssue:
        """
        Create an issue from a document tree.

        Args:
            description: Brief description of the issue
            doc_content: The validated document tree
            base_branch: Target branch for pull requests related to the issue
            title: Optional title (generated by the service when omitted)
            status: Optional initial status
            organization_id: Optional organization scope

        Returns:
            The created MagnetIssue
        """
        payload = self._drop_none(
            {
                "title": title,
                "description": description,
                "docContent": doc_content.to_dict(),
                "status": status,
                "baseBranch": base_branch,
                "organizationId": organization_id,
            }
        )
        data = self._post(ISSUES_ENDPOINT, operation="create issue", json_data=payload)
        issue = MagnetIssue.from_api_response(self._unwrap(data, "issue"))
        logger.info(f"Created issue {issue.id}")
        return issue

    def update_issue(
        self,
        issue_id: str,
        title: str | None = None,
        doc_content: DocumentNode | None = None,
        status: str | None = None,
        assignee_clerk_id: str | None = None,
        base_branch: str | None = None,
    ) -> MagnetIssue:
        """
        Update an issue; only the supplied fields are sent.

        Args:
            issue_id: The issue identifier
            title: New title
            doc_content: New document tree
            status: New status
            assignee_clerk_id: New assignee user ID
            base_branch: New base branch

        Returns:
            The updated MagnetIssue
        """
        payload = self._drop_none(
            {
                "title": title,
                "docContent": doc_content.to_dict() if doc_content else None,
                "status": status,
                "assigneeClerkId": assignee_clerk_id,
                "baseBranch": base_branch,
            }
        )
        data = self._put(
            f"{ISSUES_ENDPOINT}/{self._path(issue_id)}",
            operation="update issue",
            json_data=payload,
        )
        return MagnetIssue.from_api_response(self._unwrap(data, "issue"))

    def get_issue_markdown(
        self, issue_id: str, preview_only: bool = False
    ) -> MagnetIssue:
        """
        Get an issue with its content rendered as markdown.

        Args:
            issue_id: The issue identifier
            preview_only: Return a truncated preview instead of the full markdown

        Returns:
            MagnetIssue whose content is markdown, or a preview when requested
        """
        params = {"previewOnly": "true"} if preview_only else None
        data = self._get(
            f"{ISSUES_ENDPOINT}/{self._path(issue_id)}{MARKDOWN_SUFFIX}",
            operation="get issue markdown",
            params=params,
        )
        return MagnetIssue.from_api_response(self._unwrap(data, "issue"))

    def list_issues_markdown(
        self,
        organization_id: str | None = None,
        preview_only: bool = False,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> IssueList:
        """
        List one page of issues with markdown content or previews.

        Args:
            organization_id: Optional organization scope
            preview_only: Return previews instead of the full markdown
            cursor: Opaque cursor returned by a previous call
            limit: Maximum number of issues to return

        Returns:
            IssueList with the issues, referenced users and pagination cursor
        """
        params = self._drop_none(
            {
                "organizationId": organization_id,
                "previewOnly": "true" if preview_only else None,
                "cursor": cursor,
                "limit": limit,
            }
        )
        data = self._get(
            f"{ISSUES_ENDPOINT}{MARKDOWN_SUFFIX}",
            operation="list issues markdown",
            params=params,
        )
        return IssueList.from_api_response(data)

    def create_issue_markdown(
        self,
        description: str,
        markdown: str,
        base_branch: str,
        title: str | None = None,
        status: str | None = None,
        organization_id: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> MagnetIssue:
        """
        Create an issue from markdown; the service converts it to a document tree.

        Args:
            description: Brief description of the issue
            markdown: Issue body as markdown
            base_branch: Target branch for pull requests related to the issue
            title: Optional title
            status: Optional initial status (todo, in_progress, done, blocked)
            organization_id: Optional organization scope
            properties: Optional extra properties

        Returns:
            The created MagnetIssue
        """
        payload = self._drop_none(
            {
                "title": title,
                "description": description,
                "markdown": markdown,
                "status": status,
                "organizationId": organization_id,
                "baseBranch": base_branch,
                "properties": properties,
            }
        )
        data = self._post(
            f"{ISSUES_ENDPOINT}{MARKDOWN_SUFFIX}",
            operation="create issue with markdown",
            json_data=payload,
        )
        issue = MagnetIssue.from_api_response(self._unwrap(data, "issue"))
        logger.info(f"Created issue {issue.id} from markdown")
        return issue

    def update_issue_markdown(
        self,
        issue_id: str,
        markdown: str,
        title: str | None = None,
        status: str | None = None,
        assignee_clerk_id: str | None = None,
    ) -> MagnetIssue:
        """
        Replace an issue's content with markdown and update the supplied fields.

        Args:
            issue_id: The issue identifier
            markdown: New issue body as markdown
            title: New title
            status: New status (todo, in_progress, done, blocked)
            assignee_clerk_id: New assignee user ID

        Returns:
            The updated MagnetIssue
        """
        payload = self._drop_none(
            {
                "title": title,
                "markdown": markdown,
                "status": status,
                "assigneeClerkId": assignee_clerk_id,
            }
        )
        data = self._put(
            f"{ISSUES_ENDPOINT}/{self._path(issue_id)}{MARKDOWN_SUFFIX}",
            operation="update issue with markdown",
            json_data=payload,
        )
        return MagnetIssue.from_api_response(self._unwrap(data, "issue"))
