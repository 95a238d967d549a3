from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from magnet_mcp.magnet.config import MagnetConfig


@dataclass(frozen=True)
class MainAppContext:
    """Context holding the base Magnet config and server settings (no fetchers)."""

    magnet_config: MagnetConfig | None = None
    read_only: bool = False
