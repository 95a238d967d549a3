"""
Base models and utility classes for the Magnet API models.

This module provides base classes and mixins that are used by the
resource-specific models to ensure consistent behavior and reduce
code duplication.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


def validation_error_details(
    error: ValidationError, prefix: str | None = None
) -> list[dict[str, str]]:
    """
    Flatten a pydantic ValidationError into one entry per violated field.

    Args:
        error: The pydantic validation error
        prefix: Optional field path to prepend (e.g. the tool argument name)

    Returns:
        List of ``{"field": "a.b.0", "message": "..."}`` entries
    """
    details = []
    for item in error.errors():
        path = [str(part) for part in item.get("loc", ())]
        if prefix:
            path.insert(0, prefix)
        details.append(
            {"field": ".".join(path) or (prefix or "value"), "message": item["msg"]}
        )
    return details


def describe_details(details: list[dict[str, str]]) -> str:
    """Render validation details as a single human-readable line."""
    return "; ".join(f"{d['field']}: {d['message']}" for d in details)


class ApiModel(BaseModel):
    """
    Base model for all API models with common conversion methods.

    This provides a standard interface for converting API responses
    to models and for converting models back to the simplified
    dictionaries returned by the tools.
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Convert an API response to a model instance.

        Args:
            data: The API response data
            **kwargs: Additional context parameters

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary for API responses.

        Returns:
            A dictionary with only the essential fields, using the API's camelCase keys
        """
        return self.model_dump(by_alias=True, exclude_none=True)
