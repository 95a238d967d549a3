"""Tests for the chat export and stored chat models."""

import pytest

from magnet_mcp.exceptions import MagnetValidationError
from magnet_mcp.models.chat import ChatExport, CursorRawPayload, MagnetChat
from tests.fixtures.magnet_mocks import (
    MOCK_CLAUDE_CODE_EXPORT,
    MOCK_CURSOR_EXPORT,
    MOCK_PREPARSED_EXPORT,
    MOCK_STORED_CHAT,
)


class TestChatExport:
    def test_claude_code_raw_payload(self):
        export = ChatExport.from_export(MOCK_CLAUDE_CODE_EXPORT)

        assert export.source == "CLAUDE_CODE"
        assert export.session_id == "sess_abc"
        assert export.to_upload_payload() == MOCK_CLAUDE_CODE_EXPORT

    def test_claude_code_jsonl_string_is_split_into_lines(self):
        data = {
            **MOCK_CLAUDE_CODE_EXPORT,
            "rawPayload": '{"type":"user"}\n\n{"type":"assistant"}\n',
        }

        export = ChatExport.from_export(data)

        assert export.raw_payload == ['{"type":"user"}', '{"type":"assistant"}']

    def test_cursor_raw_payload(self):
        export = ChatExport.from_export(MOCK_CURSOR_EXPORT)

        assert isinstance(export.raw_payload, CursorRawPayload)
        payload = export.to_upload_payload()
        assert payload["rawPayload"] == MOCK_CURSOR_EXPORT["rawPayload"]
        assert "title" not in payload

    def test_preparsed_messages_protocol(self):
        export = ChatExport.from_export(MOCK_PREPARSED_EXPORT)

        payload = export.to_upload_payload()
        assert payload["messages"] == MOCK_PREPARSED_EXPORT["messages"]
        assert payload["modelName"] == "claude-model"
        assert "rawPayload" not in payload

    def test_messages_without_model_name_rejected(self):
        data = {k: v for k, v in MOCK_PREPARSED_EXPORT.items() if k != "modelName"}

        with pytest.raises(MagnetValidationError, match="modelName"):
            ChatExport.from_export(data)

    def test_missing_payload_rejected(self):
        data = {
            k: v for k, v in MOCK_CLAUDE_CODE_EXPORT.items() if k != "rawPayload"
        }

        with pytest.raises(MagnetValidationError, match="rawPayload or messages"):
            ChatExport.from_export(data)

    def test_cursor_source_with_jsonl_payload_rejected(self):
        data = {**MOCK_CLAUDE_CODE_EXPORT, "source": "CURSOR"}

        with pytest.raises(MagnetValidationError, match="CURSOR rawPayload"):
            ChatExport.from_export(data)

    def test_claude_code_source_with_cursor_payload_rejected(self):
        data = {**MOCK_CURSOR_EXPORT, "source": "CLAUDE_CODE"}

        with pytest.raises(MagnetValidationError, match="CLAUDE_CODE rawPayload"):
            ChatExport.from_export(data)

    def test_reports_every_missing_field(self):
        with pytest.raises(MagnetValidationError) as exc_info:
            ChatExport.from_export({"source": "SLACK", "rawPayload": []})

        fields = {detail["field"] for detail in exc_info.value.details}
        assert {"source", "sessionId", "projectPath", "gitBranch"} <= fields

    def test_non_object_rejected(self):
        with pytest.raises(MagnetValidationError):
            ChatExport.from_export(["not", "an", "object"])


def test_stored_chat_simplified_dict():
    chat = MagnetChat.from_api_response(MOCK_STORED_CHAT)
    chat.view_url = "https://magnet.example.com/chats/chat_1"

    simplified = chat.to_simplified_dict()

    assert simplified["id"] == "chat_1"
    assert simplified["uploadedByClerkId"] == "user_1"
    assert simplified["viewUrl"] == "https://magnet.example.com/chats/chat_1"
    assert "modelName" not in simplified
