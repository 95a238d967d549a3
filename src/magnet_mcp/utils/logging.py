"""Logging helpers for Magnet MCP."""

import logging


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret for log output, keeping a few characters at each end.

    Args:
        value: The secret to mask
        keep_chars: Number of characters to keep at the start and end

    Returns:
        Masked representation of the value
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return value[:keep_chars] + "*" * (len(value) - keep_chars * 2) + value[-keep_chars:]


def log_config_param(
    logger: logging.Logger,
    service: str,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log a configuration parameter, masking it when sensitive.

    Args:
        logger: Logger to write to
        service: Service name (e.g. "Magnet")
        param: Parameter name
        value: Parameter value
        sensitive: Whether the value should be masked
    """
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"{service} {param}: {display_value}")
