"""Module for Magnet search operations."""

import logging

from ..exceptions import MagnetValidationError
from ..models.search import SearchResponse
from .client import MagnetClient
from .constants import SEARCH_ENDPOINT

logger = logging.getLogger("magnet-mcp.magnet")

DEFAULT_SEARCH_TYPES = ("issue", "page")


class SearchMixin(MagnetClient):
    """Mixin for full-text search across issues and pages."""

    def search(
        self,
        query: str,
        types: list[str] | None = None,
        organization_id: str | None = None,
    ) -> SearchResponse:
        """
        Search issues and pages.

        Args:
            query: Search text (must not be blank)
            types: Entity types to include; defaults to issues and pages
            organization_id: Optional organization scope

        Returns:
            SearchResponse with matching results and the users they reference

        Raises:
            MagnetValidationError: If the query is blank
            MagnetResponseShapeError: If the response does not match the result shape
        """
        if not query or not query.strip():
            raise MagnetValidationError(
                "Search query must not be empty",
                details=[{"field": "query", "message": "must not be empty"}],
            )

        params = self._drop_none(
            {
                "query": query,
                "types": ",".join(types or DEFAULT_SEARCH_TYPES),
                "organizationId": organization_id,
            }
        )
        data = self._get(SEARCH_ENDPOINT, operation="search", params=params)
        response = SearchResponse.from_api_response(data)
        logger.debug(f"Search '{query}' returned {len(response.results)} results")
        return response
