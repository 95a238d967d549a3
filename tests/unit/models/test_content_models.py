"""Tests for the document content models."""

import pytest

from magnet_mcp.exceptions import MagnetResponseShapeError, MagnetValidationError
from magnet_mcp.models.content import (
    MarkdownContent,
    PreviewContent,
    StructuredContent,
    content_from_api,
    content_to_api,
    parse_document_content,
)
from tests.fixtures.magnet_mocks import MOCK_DOC_CONTENT, build_nested_document


def _depth(node: dict) -> int:
    depth = 1
    while node.get("content"):
        node = node["content"][0]
        depth += 1
    return depth


class TestParseDocumentContent:
    def test_valid_document_is_preserved(self):
        document = parse_document_content(MOCK_DOC_CONTENT)

        assert document.to_dict() == MOCK_DOC_CONTENT

    def test_unknown_keys_pass_through(self):
        raw = {"type": "doc", "content": [{"type": "image", "src": "a.png"}], "version": 2}

        document = parse_document_content(raw)

        assert document.to_dict() == raw

    def test_child_order_is_preserved(self):
        raw = {
            "type": "paragraph",
            "content": [{"type": "text", "text": str(i)} for i in range(20)],
        }

        document = parse_document_content(raw)

        assert [child["text"] for child in document.to_dict()["content"]] == [
            str(i) for i in range(20)
        ]

    def test_fifty_levels_of_nesting_survive(self):
        raw = build_nested_document(50)

        document = parse_document_content(raw)
        result = document.to_dict()

        assert result == raw
        assert _depth(result) == 51

    def test_reports_every_invalid_field(self):
        raw = {
            "type": "doc",
            "content": [
                {"type": "text", "text": 42},
                {"type": "text", "marks": [{"attrs": {}}]},
            ],
        }

        with pytest.raises(MagnetValidationError) as exc_info:
            parse_document_content(raw)

        fields = [detail["field"] for detail in exc_info.value.details]
        assert "docContent.content.0.text" in fields
        assert "docContent.content.1.marks.0.type" in fields

    def test_field_name_prefix(self):
        with pytest.raises(MagnetValidationError) as exc_info:
            parse_document_content({"content": "not-a-list"}, field_name="body")

        assert exc_info.value.details[0]["field"].startswith("body.content")


class TestContentFromApi:
    def test_structured(self):
        content = content_from_api({"docContent": MOCK_DOC_CONTENT})

        assert isinstance(content, StructuredContent)
        assert content_to_api(content) == {"docContent": MOCK_DOC_CONTENT}

    def test_markdown(self):
        content = content_from_api({"docContent": "# Title"})

        assert isinstance(content, MarkdownContent)
        assert content_to_api(content) == {"docContent": "# Title"}

    def test_preview(self):
        content = content_from_api({"markdownPreview": "Title ..."})

        assert isinstance(content, PreviewContent)
        assert content_to_api(content) == {"markdownPreview": "Title ..."}

    def test_preview_wins_over_full_content(self):
        content = content_from_api({"docContent": "# Title", "markdownPreview": "Title"})

        assert isinstance(content, PreviewContent)
        assert content_to_api(content) == {"markdownPreview": "Title"}

    def test_preview_wins_over_tree(self):
        content = content_from_api(
            {"docContent": {"type": "doc", "content": []}, "markdownPreview": "Title"}
        )

        assert content_to_api(content) == {"markdownPreview": "Title"}

    def test_no_content(self):
        assert content_from_api({"id": "1"}) is None
        assert content_to_api(None) == {}

    def test_malformed_tree_in_response(self):
        with pytest.raises(MagnetResponseShapeError):
            content_from_api({"docContent": {"content": [{"text": ["x"]}]}})
