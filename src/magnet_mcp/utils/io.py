"""I/O utility functions for Magnet MCP."""

import json
from typing import Any

import anyio

from ..exceptions import MagnetValidationError
from .env import is_env_extended_truthy


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode prevents all write operations (create, update, upload)
    while allowing all read operations.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    return is_env_extended_truthy("READ_ONLY_MODE", "false")


async def read_json_file(file_path: str, field: str = "filePath") -> Any:
    """Read and decode a JSON document from local storage without blocking the loop.

    Args:
        file_path: Path to the JSON file; a leading ``~`` is expanded
        field: Argument name reported in the error details

    Returns:
        The decoded JSON value

    Raises:
        MagnetValidationError: If the file cannot be read or is not valid JSON
    """
    path = await anyio.Path(file_path).expanduser()
    try:
        raw_text = await path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise MagnetValidationError(
            f"File not found: {file_path}",
            details=[{"field": field, "message": "file does not exist"}],
        ) from e
    except (IsADirectoryError, PermissionError, UnicodeDecodeError) as e:
        raise MagnetValidationError(
            f"Cannot read file {file_path}: {e}",
            details=[{"field": field, "message": str(e)}],
        ) from e

    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as e:
        raise MagnetValidationError(
            f"File {file_path} is not valid JSON: {e}",
            details=[{"field": field, "message": f"invalid JSON: {e.msg}"}],
        ) from e
