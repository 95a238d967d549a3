"""Module for Magnet page operations."""

import logging
from typing import Any

from ..models.content import DocumentNode
from ..models.page import MagnetPage, PageList
from .client import MagnetClient
from .constants import MARKDOWN_SUFFIX, PAGES_ENDPOINT

logger = logging.getLogger("magnet-mcp.magnet")


class PagesMixin(MagnetClient):
    """Mixin for Magnet page operations (notes, context docs, sprint plans)."""

    def get_page(self, page_id: str) -> MagnetPage:
        """
        Get a single page with its structured document content.

        Args:
            page_id: The page identifier

        Returns:
            The MagnetPage

        Raises:
            MagnetNotFoundError: If the page does not exist
            MagnetApiError: If the API request fails
        """
        data = self._get(f"{PAGES_ENDPOINT}/{self._path(page_id)}", operation="get page")
        return MagnetPage.from_api_response(self._unwrap(data, "page"))

    def list_pages(
        self,
        organization_id: str | None = None,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> PageList:
        """
        List one page of pages.

        Args:
            organization_id: Optional organization scope
            cursor: Opaque cursor returned by a previous call
            limit: Maximum number of pages to return

        Returns:
            PageList with the pages, referenced users and pagination cursor
        """
        params = self._drop_none(
            {"organizationId": organization_id, "cursor": cursor, "limit": limit}
        )
        data = self._get(PAGES_ENDPOINT, operation="list pages", params=params)
        return PageList.from_api_response(data)

    def create_page(
        self,
        title: str,
        doc_content: DocumentNode,
        page_type: str | None = None,
        properties: dict[str, Any] | None = None,
        organization_id: str | None = None,
    ) -> MagnetPage:
        """
        Create a page from a document tree.

        Args:
            title: Page title
            doc_content: The validated document tree
            page_type: note, context_doc_label or sprint_planning
            properties: Validated page properties
            organization_id: Optional organization scope

        Returns:
            The created MagnetPage
        """
        payload = self._drop_none(
            {
                "title": title,
                "docContent": doc_content.to_dict(),
                "pageType": page_type,
                "properties": properties,
                "organizationId": organization_id,
            }
        )
        data = self._post(PAGES_ENDPOINT, operation="create page", json_data=payload)
        page = MagnetPage.from_api_response(self._unwrap(data, "page"))
        logger.info(f"Created page {page.id}")
        return page

    def update_page(
        self,
        page_id: str,
        title: str | None = None,
        doc_content: DocumentNode | None = None,
        properties: dict[str, Any] | None = None,
    ) -> MagnetPage:
        """
        Update a page; only the supplied fields are sent.

        Args:
            page_id: The page identifier
            title: New title
            doc_content: New document tree
            properties: New page properties

        Returns:
            The updated MagnetPage
        """
        payload = self._drop_none(
            {
                "title": title,
                "docContent": doc_content.to_dict() if doc_content else None,
                "properties": properties,
            }
        )
        data = self._put(
            f"{PAGES_ENDPOINT}/{self._path(page_id)}",
            operation="update page",
            json_data=payload,
        )
        return MagnetPage.from_api_response(self._unwrap(data, "page"))

    def get_page_markdown(self, page_id: str, preview_only: bool = False) -> MagnetPage:
        """
        Get a page with its content rendered as markdown.

        Args:
            page_id: The page identifier
            preview_only: Return a truncated preview instead of the full markdown

        Returns:
            MagnetPage whose content is markdown, or a preview when requested
        """
        params = {"previewOnly": "true"} if preview_only else None
        data = self._get(
            f"{PAGES_ENDPOINT}/{self._path(page_id)}{MARKDOWN_SUFFIX}",
            operation="get page markdown",
            params=params,
        )
        return MagnetPage.from_api_response(self._unwrap(data, "page"))

    def list_pages_markdown(
        self,
        organization_id: str | None = None,
        preview_only: bool = False,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> PageList:
        """
        List one page of pages with markdown content or previews.

        Args:
            organization_id: Optional organization scope
            preview_only: Return previews instead of the full markdown
            cursor: Opaque cursor returned by a previous call
            limit: Maximum number of pages to return

        Returns:
            PageList with the pages, referenced users and pagination cursor
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
            f"{PAGES_ENDPOINT}{MARKDOWN_SUFFIX}",
            operation="list pages markdown",
            params=params,
        )
        return PageList.from_api_response(data)

    def create_page_markdown(
        self,
        title: str,
        markdown: str,
        page_type: str | None = None,
        properties: dict[str, Any] | None = None,
        organization_id: str | None = None,
    ) -> MagnetPage:
        """
        Create a page from markdown; the service converts it to a document tree.

        Args:
            title: Page title
            markdown: Page body as markdown
            page_type: note, context_doc_label or sprint_planning
            properties: Validated page properties
            organization_id: Optional organization scope

        Returns:
            The created MagnetPage
        """
        payload = self._drop_none(
            {
                "title": title,
                "markdown": markdown,
                "pageType": page_type,
                "properties": properties,
                "organizationId": organization_id,
            }
        )
        data = self._post(
            f"{PAGES_ENDPOINT}{MARKDOWN_SUFFIX}",
            operation="create page with markdown",
            json_data=payload,
        )
        page = MagnetPage.from_api_response(self._unwrap(data, "page"))
        logger.info(f"Created page {page.id} from markdown")
        return page

    def update_page_markdown(
        self,
        page_id: str,
        markdown: str,
        title: str | None = None,
        properties: dict[str, Any] | None = None,
    ) -> MagnetPage:
        """
        Replace a page's content with markdown and update the supplied fields.

        Args:
            page_id: The page identifier
            markdown: New page body as markdown
            title: New title
            properties: New page properties

        Returns:
            The updated MagnetPage
        """
        payload = self._drop_none(
            {"title": title, "markdown": markdown, "properties": properties}
        )
        data = self._put(
            f"{PAGES_ENDPOINT}/{self._path(page_id)}{MARKDOWN_SUFFIX}",
            operation="update page with markdown",
            json_data=payload,
        )
        return MagnetPage.from_api_response(self._unwrap(data, "page"))
