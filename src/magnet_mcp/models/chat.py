"""
Magnet chat models.

A chat export is the JSON envelope an agent session exporter writes to
disk; the upload tool reads it, validates it here and posts it to Magnet.
Two payload protocols exist: the raw protocol ships the source's native
records (Claude Code JSONL lines, Cursor composer + bubbles) and the older
pre-parsed protocol ships a normalized ``messages`` array with the model name.
"""

import logging
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..exceptions import MagnetValidationError
from .base import ApiModel, describe_details, validation_error_details
from .constants import EMPTY_STRING

logger = logging.getLogger("magnet-mcp.models")

ChatSource = Literal["CLAUDE_CODE", "CURSOR"]


class CursorRawPayload(BaseModel):
    """Raw Cursor export: the composer record and its message bubbles."""

    model_config = ConfigDict(extra="allow")

    composer: dict[str, Any]
    bubbles: list[dict[str, Any]]


class ChatExport(BaseModel):
    """The chat export envelope read from local storage."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str | None = None
    source: ChatSource
    session_id: str = Field(alias="sessionId", min_length=1)
    project_path: str = Field(alias="projectPath")
    git_branch: str = Field(alias="gitBranch")
    raw_payload: list[str | dict[str, Any]] | CursorRawPayload | None = Field(
        default=None, alias="rawPayload"
    )
    messages: list[Any] | None = None
    model_name: str | None = Field(default=None, alias="modelName")

    @field_validator("raw_payload", mode="before")
    @classmethod
    def _split_jsonl_text(cls, value: Any) -> Any:
        # A JSONL transcript may arrive as one string
        if isinstance(value, str):
            return [line for line in value.splitlines() if line.strip()]
        return value

    @model_validator(mode="after")
    def _check_payload_matches_source(self) -> "ChatExport":
        if self.raw_payload is None and self.messages is None:
            raise ValueError("either rawPayload or messages must be provided")
        if self.raw_payload is not None:
            if self.source == "CLAUDE_CODE" and not isinstance(self.raw_payload, list):
                raise ValueError("CLAUDE_CODE rawPayload must be a list of JSONL lines")
            if self.source == "CURSOR" and not isinstance(
                self.raw_payload, CursorRawPayload
            ):
                raise ValueError(
                    "CURSOR rawPayload must be an object with 'composer' and 'bubbles'"
                )
        elif not self.model_name:
            raise ValueError("modelName is required when messages are provided")
        return self

    @classmethod
    def from_export(cls, data: Any) -> "ChatExport":
        """
        Validate a decoded export file.

        Args:
            data: The decoded JSON document

        Returns:
            The validated ChatExport

        Raises:
            MagnetValidationError: Listing every invalid field
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            details = validation_error_details(e)
            logger.warning(f"Invalid chat export: {describe_details(details)}")
            raise MagnetValidationError(
                f"Invalid chat export: {describe_details(details)}", details=details
            ) from e

    def to_upload_payload(self) -> dict[str, Any]:
        """Build the request body for ``POST /api/chats``."""
        payload: dict[str, Any] = {
            "source": self.source,
            "sessionId": self.session_id,
            "projectPath": self.project_path,
            "gitBranch": self.git_branch,
        }
        if self.title:
            payload["title"] = self.title
        if isinstance(self.raw_payload, CursorRawPayload):
            payload["rawPayload"] = self.raw_payload.model_dump()
        elif self.raw_payload is not None:
            payload["rawPayload"] = self.raw_payload
        else:
            payload["messages"] = self.messages
            payload["modelName"] = self.model_name
        return payload


class MagnetChat(ApiModel):
    """
    Model representing a chat stored in Magnet.
    """

    id: str = EMPTY_STRING
    created_at: str | None = None
    updated_at: str | None = None
    title: str = EMPTY_STRING
    source: str | None = None
    session_id: str | None = None
    project_path: str | None = None
    git_branch: str | None = None
    model_name: str | None = None
    organization_id: str | None = None
    uploaded_by_clerk_id: str | None = None
    view_url: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "MagnetChat":
        """
        Create a MagnetChat from a Magnet API response.

        Args:
            data: The chat data from the Magnet API

        Returns:
            A MagnetChat instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary chat data")
            return cls()

        return cls(
            id=str(data.get("id", EMPTY_STRING)),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            title=data.get("title") or EMPTY_STRING,
            source=data.get("source"),
            session_id=data.get("sessionId"),
            project_path=data.get("projectPath"),
            git_branch=data.get("gitBranch"),
            model_name=data.get("modelName"),
            organization_id=data.get("organizationId"),
            uploaded_by_clerk_id=data.get("uploadedByClerkId"),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "source": self.source,
            "sessionId": self.session_id,
            "projectPath": self.project_path,
            "gitBranch": self.git_branch,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.model_name:
            result["modelName"] = self.model_name
        if self.organization_id:
            result["organizationId"] = self.organization_id
        if self.uploaded_by_clerk_id:
            result["uploadedByClerkId"] = self.uploaded_by_clerk_id
        if self.view_url:
            result["viewUrl"] = self.view_url
        return result
