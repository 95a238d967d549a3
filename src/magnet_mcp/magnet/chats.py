"""Module for Magnet chat upload operations."""

import logging

from ..models.chat import ChatExport, MagnetChat
from ..utils.urls import build_chat_view_url
from .client import MagnetClient
from .constants import CHATS_ENDPOINT

logger = logging.getLogger("magnet-mcp.magnet")


class ChatsMixin(MagnetClient):
    """Mixin for uploading agent chat sessions to Magnet."""

    def upload_chat(
        self, export: ChatExport, organization_id: str | None = None
    ) -> MagnetChat:
        """
        Upload a validated chat export.

        Args:
            export: The chat export read from local storage
            organization_id: Optional organization scope

        Returns:
            The stored MagnetChat, with ``view_url`` pointing at the web app
        """
        payload = export.to_upload_payload()
        if organization_id:
            payload["organizationId"] = organization_id

        logger.debug(
            f"Uploading {export.source} chat session {export.session_id} "
            f"from {export.project_path}"
        )
        data = self._post(CHATS_ENDPOINT, operation="upload chat", json_data=payload)

        chat = MagnetChat.from_api_response(self._unwrap(data, "chat"))
        chat.view_url = build_chat_view_url(self.config.url, chat.id)
        logger.info(f"Uploaded chat {chat.id}")
        return chat
