"""
Document content models.

Magnet stores rich text as a recursive document tree (the editor's JSON
format). The markdown endpoints render the same content as a markdown
string, and list/preview endpoints return a truncated markdown preview.
An entity carries exactly one of these representations, so they are
modelled as a tagged union instead of parallel optional fields.
"""

import logging
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import MagnetResponseShapeError, MagnetValidationError
from .base import describe_details, validation_error_details

logger = logging.getLogger("magnet-mcp.models")


class DocumentMark(BaseModel):
    """A mark annotation (bold, link, ...) applied to a text node."""

    model_config = ConfigDict(extra="allow")

    type: str
    attrs: dict[str, Any] | None = None


class DocumentNode(BaseModel):
    """
    A node of the document tree.

    Children use the same type, so nesting depth is unbounded. Unknown
    keys are preserved so editor extensions survive a round trip.
    """

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    attrs: dict[str, Any] | None = None
    content: list["DocumentNode"] | None = None
    marks: list[DocumentMark] | None = None
    text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the editor JSON, keeping only keys that were provided."""
        return self.model_dump(exclude_unset=True)


class StructuredContent(BaseModel):
    """Content as a document tree."""

    kind: Literal["structured"] = "structured"
    document: DocumentNode


class MarkdownContent(BaseModel):
    """Full content rendered as markdown."""

    kind: Literal["markdown"] = "markdown"
    markdown: str


class PreviewContent(BaseModel):
    """Truncated markdown rendering (about the first 100 words)."""

    kind: Literal["preview"] = "preview"
    preview: str


DocumentContent = Annotated[
    Union[StructuredContent, MarkdownContent, PreviewContent],
    Field(discriminator="kind"),
]


def parse_document_content(
    value: dict[str, Any], field_name: str = "docContent"
) -> DocumentNode:
    """
    Validate a raw argument as a document tree.

    Args:
        value: The raw document tree
        field_name: Argument name used as prefix in error details

    Returns:
        The validated DocumentNode

    Raises:
        MagnetValidationError: Listing every invalid field path
    """
    try:
        return DocumentNode.model_validate(value)
    except ValidationError as e:
        details = validation_error_details(e, prefix=field_name)
        logger.warning(f"Invalid document content: {describe_details(details)}")
        raise MagnetValidationError(
            f"Invalid {field_name}: {describe_details(details)}", details=details
        ) from e


def content_from_api(data: dict[str, Any]) -> StructuredContent | MarkdownContent | PreviewContent | None:
    """
    Pick the content representation present in an API payload.

    ``docContent`` holds either a tree (JSON endpoints) or a markdown string
    (markdown endpoints); ``markdownPreview`` is returned by preview requests.

    Args:
        data: Decoded entity payload

    Returns:
        The content variant, or None if the payload carries no content

    Raises:
        MagnetResponseShapeError: If docContent is a malformed document tree
    """
    doc_content = data.get("docContent")
    preview = data.get("markdownPreview")

    if isinstance(preview, str):
        if doc_content is not None:
            logger.debug("Payload carries docContent and markdownPreview; keeping preview")
        return PreviewContent(preview=preview)
    if isinstance(doc_content, str):
        return MarkdownContent(markdown=doc_content)
    if isinstance(doc_content, dict):
        try:
            return StructuredContent(document=DocumentNode.model_validate(doc_content))
        except ValidationError as e:
            details = validation_error_details(e, prefix="docContent")
            raise MagnetResponseShapeError(
                f"Malformed document content in API response: {describe_details(details)}",
                details=details,
            ) from e
    return None


def content_to_api(
    content: StructuredContent | MarkdownContent | PreviewContent | None,
) -> dict[str, Any]:
    """
    Serialize a content variant back to the API's key.

    Args:
        content: The content variant

    Returns:
        ``{"docContent": ...}`` or ``{"markdownPreview": ...}``, or an empty dict
    """
    if isinstance(content, StructuredContent):
        return {"docContent": content.document.to_dict()}
    if isinstance(content, MarkdownContent):
        return {"docContent": content.markdown}
    if isinstance(content, PreviewContent):
        return {"markdownPreview": content.preview}
    return {}
