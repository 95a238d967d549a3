"""Tests for the contextual logging configuration."""

import io
import logging
import sys

import anyio
import pytest

from magnet_mcp.logging_config import (
    ContextualLogger,
    current_context,
    log_context,
    log_operation,
    setup_logger,
)


@pytest.fixture
def contextual_logger():
    logger = setup_logger(name="magnet-mcp-test", level="DEBUG")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logger_writes_to_stderr(capsys, contextual_logger):
    contextual_logger.info("hello")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[INFO] [magnet-mcp-test] [no-context] hello" in captured.err


def test_console_handler_follows_replaced_stderr(monkeypatch, contextual_logger):
    replacement = io.StringIO()
    monkeypatch.setattr(sys, "stderr", replacement)

    contextual_logger.info("after swap")

    assert "[no-context] after swap" in replacement.getvalue()


def test_setup_logger_is_idempotent(contextual_logger):
    again = setup_logger(name="magnet-mcp-test", level="WARNING")

    assert again is contextual_logger
    assert isinstance(again, ContextualLogger)
    assert len(again.handlers) == 1
    assert again.level == logging.WARNING
    assert again.propagate is False


def test_setup_logger_file_handler(tmp_path, contextual_logger):
    logger = setup_logger(
        name="magnet-mcp-test", level="INFO", log_to_file=True, log_dir=str(tmp_path / "logs")
    )
    logger.info("to file")
    for handler in logger.handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "magnet-mcp-test.log"
    assert log_file.exists()
    assert "to file" in log_file.read_text()


def test_context_is_included_and_cleared(capsys, contextual_logger):
    contextual_logger.set_context(operation="sync")
    contextual_logger.info("with context")
    contextual_logger.clear_context()
    contextual_logger.info("without context")

    err = capsys.readouterr().err
    assert "[operation=sync] with context" in err
    assert "[no-context] without context" in err


def test_log_operation_sets_and_restores_context(capsys, contextual_logger):
    with log_operation(contextual_logger, "startup", trace_id="abc123", version="1"):
        contextual_logger.info("inside")
    contextual_logger.info("outside")

    err = capsys.readouterr().err
    assert "Operation started: startup" in err
    assert "[version=1,operation=startup,trace_id=abc123] inside" in err
    assert "Operation completed: startup" in err
    assert "[no-context] outside" in err


def test_log_operation_logs_failures(capsys, contextual_logger):
    with pytest.raises(RuntimeError):
        with log_operation(contextual_logger, "startup"):
            raise RuntimeError("boom")

    assert "Operation failed: startup" in capsys.readouterr().err


def test_child_loggers_get_default_context(capsys, contextual_logger):
    child = logging.getLogger("magnet-mcp-test.child")
    child.warning("from child")

    assert "[magnet-mcp-test.child] [no-context] from child" in capsys.readouterr().err


def test_log_context_nests_and_restores(capsys, contextual_logger):
    with log_context(operation="get issue") as outer:
        assert outer == {"operation": "get issue"}
        with log_context(attempt=1):
            contextual_logger.info("nested")
        contextual_logger.info("outer")
    assert current_context() == {}

    err = capsys.readouterr().err
    assert "[operation=get issue,attempt=1] nested" in err
    assert "[operation=get issue] outer" in err


@pytest.mark.anyio
async def test_log_context_is_isolated_between_tasks():
    seen = {}

    async def worker(name, delay):
        with log_context(tool=name):
            await anyio.sleep(delay)
            seen[name] = current_context()

    async with anyio.create_task_group() as tg:
        tg.start_soon(worker, "search", 0.02)
        tg.start_soon(worker, "list_pages", 0.01)

    assert seen == {"search": {"tool": "search"}, "list_pages": {"tool": "list_pages"}}
