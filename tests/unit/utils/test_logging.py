"""Tests for the logging helpers."""

from unittest.mock import MagicMock

import pytest

from magnet_mcp.utils.logging import log_config_param, mask_sensitive


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "Not Provided"),
        ("", "Not Provided"),
        ("short", "*****"),
        ("12345678", "********"),
        ("mgn_test_key_0123456789", "mgn_***************6789"),
    ],
)
def test_mask_sensitive(value, expected):
    assert mask_sensitive(value) == expected


def test_mask_sensitive_keep_chars():
    assert mask_sensitive("abcdefghij", keep_chars=2) == "ab******ij"


def test_log_config_param_masks_sensitive_values():
    logger = MagicMock()
    log_config_param(logger, "Magnet", "API key", "mgn_test_key_0123456789", sensitive=True)
    logger.info.assert_called_once_with("Magnet API key: mgn_***************6789")


def test_log_config_param_plain_and_missing():
    logger = MagicMock()
    log_config_param(logger, "Magnet", "URL", "https://magnet.example.com")
    log_config_param(logger, "Magnet", "URL", None)
    assert [call.args[0] for call in logger.info.call_args_list] == [
        "Magnet URL: https://magnet.example.com",
        "Magnet URL: Not Provided",
    ]
