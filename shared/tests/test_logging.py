"""
Unit tests for structlog configuration: renderer selection, handlers, context binding.
"""

from __future__ import annotations

import json
import logging

import structlog

from shared.logging import (
    _build_shared_processors,
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)


def test_build_shared_processors_renderer_by_format():
    assert isinstance(_build_shared_processors("json")[-1], structlog.processors.JSONRenderer)
    assert isinstance(_build_shared_processors("console")[-1], structlog.dev.ConsoleRenderer)


def test_bind_request_context_drops_none_values():
    clear_request_context()
    try:
        bound = bind_request_context(url="https://example.com", browser="webkit", theme=None)

        assert bound == {"url": "https://example.com", "browser": "webkit"}
        assert structlog.contextvars.get_contextvars() == bound
    finally:
        clear_request_context()


def test_bind_request_context_extra_fields():
    clear_request_context()
    try:
        bound = bind_request_context(viewport="mobile", attempt=2)

        assert bound == {"viewport": "mobile", "attempt": 2}
    finally:
        clear_request_context()


def test_configure_logging_json_file(tmp_path):
    log_file = tmp_path / "logs" / "capture.jsonl"
    configure_logging(level=logging.INFO, log_file=str(log_file), log_stdout=False, log_format="json")
    clear_request_context()
    try:
        bind_request_context(url="https://example.com", theme="dark")
        get_logger("test").info("capture.started", viewports=3)
        get_logger("test").debug("filtered.out")
    finally:
        clear_request_context()
        for handler in logging.getLogger().handlers:
            handler.flush()
        configure_logging()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["message"] == "capture.started"
    assert record["level"] == "info"
    assert record["url"] == "https://example.com"
    assert record["theme"] == "dark"
    assert record["viewports"] == 3
    assert "timestamp" in record


def test_configure_logging_always_has_a_handler():
    configure_logging(log_stdout=False, log_file=None)
    try:
        assert len(logging.getLogger().handlers) == 1
    finally:
        configure_logging()


def test_configure_logging_stdout_and_file_share_level_and_format(tmp_path):
    log_file = tmp_path / "capture.log"
    configure_logging(level=logging.WARNING, log_file=str(log_file), log_stdout=True)
    try:
        handlers = logging.getLogger().handlers

        assert [type(h) for h in handlers] == [logging.StreamHandler, logging.FileHandler]
        assert all(h.level == logging.WARNING for h in handlers)
        assert all(h.formatter._fmt == "%(message)s" for h in handlers)
    finally:
        configure_logging()
