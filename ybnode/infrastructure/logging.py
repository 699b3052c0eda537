"""
Centralized Logging

Architectural Intent:
- One logging setup for every ybnode component, rooted at the "ybnode" logger
- Node command context (node, verb, exit code, duration) travels on records via
  `extra=node_context(...)` and is rendered by both formatters
- Level comes from --verbose/--debug or the configured log_level
"""

import json
import logging
import sys
from datetime import datetime, UTC
from typing import Any

NODE_CONTEXT_FIELDS = ("node_name", "verb", "exit_code", "duration_seconds")

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def node_context(node_name: str, verb: str, **fields: Any) -> dict[str, Any]:
    """Build the `extra` mapping for a log call about one node command."""
    context = {"node_name": node_name, "verb": verb, **fields}
    unknown = set(context) - set(NODE_CONTEXT_FIELDS)
    if unknown:
        raise ValueError(f"Unknown node context fields: {', '.join(sorted(unknown))}")
    return context


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    return {
        name: getattr(record, name)
        for name in NODE_CONTEXT_FIELDS
        if getattr(record, name, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line; node command context becomes top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_record_context(record))
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class ConsoleFormatter(logging.Formatter):
    """Human-readable lines with a trailing [node_name=... verb=...] block."""

    def __init__(self) -> None:
        super().__init__(CONSOLE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _record_context(record)
        if not context:
            return line
        rendered = " ".join(f"{key}={value}" for key, value in context.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{rendered}]{sep}{tail}"


def configure_logging(level: int = logging.INFO, json_format: bool = False) -> None:
    """Route ybnode logs to stderr at the given level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, etc.)
        json_format: Emit JSON lines instead of console lines.
    """
    logger = logging.getLogger("ybnode")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_format else ConsoleFormatter())
    logger.addHandler(handler)


def level_from_name(name: str) -> int:
    """Map a configured level name such as "info" to its logging constant."""
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level
