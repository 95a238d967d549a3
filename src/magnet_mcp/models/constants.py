"""
Constants and default values for the Magnet models.
"""

from typing import Final

EMPTY_STRING: Final[str] = ""

PAGE_TYPE_DISPLAY_NAMES: Final[dict[str, str]] = {
    "note": "Note",
    "context_doc_label": "Context Doc",
    "sprint_planning": "Sprint Planning",
}

# ISO calendar date used by sprint planning properties
ISO_DATE_PATTERN: Final[str] = r"^\d{4}-\d{2}-\d{2}$"
