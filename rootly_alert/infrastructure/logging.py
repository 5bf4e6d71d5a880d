"""
Centralized Logging

Architectural Intent:
- Provides structured JSON logging for all rootly-alert components
- Renders GitHub Actions workflow commands when running inside a runner,
  so warnings and errors show up as annotations
- Supports configurable log levels via CLI flags (--verbose, --debug)
"""

import json
import logging
import sys
from datetime import datetime, UTC

LOGGER_NAME = "rootly_alert"


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def escape_command_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsFormatter(logging.Formatter):
    """Formats records as GitHub Actions workflow commands.

    DEBUG -> ::debug::, WARNING -> ::warning::, ERROR and above -> ::error::.
    INFO is printed as plain text.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and record.exc_info[1]:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        if record.levelno >= logging.ERROR:
            return f"::error::{escape_command_data(message)}"
        if record.levelno >= logging.WARNING:
            return f"::warning::{escape_command_data(message)}"
        if record.levelno <= logging.DEBUG:
            return f"::debug::{escape_command_data(message)}"
        return message


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    github_actions: bool = False,
) -> None:
    """Configure logging for the rootly-alert application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, etc.)
        json_format: If True, use JSON structured output.
        github_actions: If True, emit workflow commands on stdout. Takes
            precedence over json_format.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    if github_actions:
        # The runner only parses workflow commands from stdout.
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ActionsFormatter())
    elif json_format:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JSONFormatter())
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )

    handler.setLevel(level)
    root.addHandler(handler)
