"""Tests for centralized logging."""

import json
import logging
import sys
import pytest
from ybnode.infrastructure.logging import (
    configure_logging,
    level_from_name,
    node_context,
    ConsoleFormatter,
    JSONFormatter,
)


class TestConfigureLogging:
    def test_default_level(self):
        configure_logging(level=logging.INFO)
        logger = logging.getLogger("ybnode")
        assert logger.level == logging.INFO

    def test_debug_level(self):
        configure_logging(level=logging.DEBUG)
        logger = logging.getLogger("ybnode")
        assert logger.level == logging.DEBUG

    def test_json_format(self):
        configure_logging(level=logging.INFO, json_format=True)
        logger = logging.getLogger("ybnode")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_human_format(self):
        configure_logging(level=logging.INFO, json_format=False)
        logger = logging.getLogger("ybnode")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, ConsoleFormatter)

    def test_replaces_handlers(self):
        configure_logging(level=logging.INFO)
        configure_logging(level=logging.DEBUG)
        logger = logging.getLogger("ybnode")
        assert len(logger.handlers) == 1


class TestLevelFromName:
    def test_known(self):
        assert level_from_name("warning") == logging.WARNING
        assert level_from_name("DEBUG") == logging.DEBUG

    def test_unknown(self):
        with pytest.raises(ValueError):
            level_from_name("chatty")


class TestJSONFormatter:
    def test_format_basic(self):
        formatter = JSONFormatter()
        record = logging.LogRecord(
            name="ybnode.test",
            level=logging.INFO,
            pathname="test.py",
            lineno=1,
            msg="composed %s",
            args=("list",),
            exc_info=None,
        )
        data = json.loads(formatter.format(record))
        assert data["message"] == "composed list"
        assert data["level"] == "INFO"
        assert data["logger"] == "ybnode.test"
        assert "timestamp" in data

    def test_format_with_exception(self):
        formatter = JSONFormatter()
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="test",
            level=logging.ERROR,
            pathname="test.py",
            lineno=1,
            msg="error occurred",
            args=(),
            exc_info=exc_info,
        )
        data = json.loads(formatter.format(record))
        assert "ValueError" in data["exception"]


def _record(msg="running", **context):
    record = logging.LogRecord(
        name="ybnode.application.use_cases.run_node_command",
        level=logging.INFO,
        pathname="run_node_command.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in context.items():
        setattr(record, key, value)
    return record


class TestNodeContext:
    def test_builds_extra(self):
        assert node_context("n1", "provision", exit_code=0) == {
            "node_name": "n1",
            "verb": "provision",
            "exit_code": 0,
        }

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValueError, match="region"):
            node_context("n1", "list", region="us-west-1")

    def test_json_carries_context(self):
        record = _record(**node_context("n1", "destroy", exit_code=3, duration_seconds=1.5))
        data = json.loads(JSONFormatter().format(record))
        assert data["node_name"] == "n1"
        assert data["verb"] == "destroy"
        assert data["exit_code"] == 3
        assert data["duration_seconds"] == 1.5

    def test_json_without_context(self):
        data = json.loads(JSONFormatter().format(_record()))
        assert "node_name" not in data

    def test_console_appends_context(self):
        line = ConsoleFormatter().format(_record(**node_context("n1", "list")))
        assert line.endswith("running [node_name=n1 verb=list]")

    def test_console_without_context(self):
        assert ConsoleFormatter().format(_record()).endswith("running")

    def test_extra_reaches_handler(self, caplog):
        logger = logging.getLogger("ybnode.test_context")
        with caplog.at_level(logging.INFO, logger="ybnode.test_context"):
            logger.info("ran", extra=node_context("n2", "control", exit_code=0))
        assert caplog.records[-1].node_name == "n2"
        assert caplog.records[-1].verb == "control"
