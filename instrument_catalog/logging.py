"""
Logging configuration for the instrument catalog.

Provides a consistent format across all modules with:
- Human-readable output for development
- JSON output for log collectors
- Output on stderr so stdout stays reserved for catalog text
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TextIO


class CatalogFormatter(logging.Formatter):
    """
    Custom formatter for catalog logs.

    Includes timestamp, level, module and message. With json_output the
    message is escaped so each line stays valid JSON.
    """

    def __init__(self, fmt: str | None = None, json_output: bool = False) -> None:
        super().__init__(fmt)
        self.json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        # Add timestamp in ISO format
        record.timestamp = datetime.now(UTC).isoformat()
        if self.json_output:
            # Escaped body of the JSON string literal, without the quotes
            record.json_message = json.dumps(record.getMessage())[1:-1]
        return super().format(record)


def setup_logging(
    level: str = "WARNING",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Configure logging for the instrument catalog.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON format
        stream: Destination stream. Defaults to stderr.

    Returns:
        Configured root logger
    """
    # Clear any existing handlers
    root = logging.getLogger()
    root.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    root.setLevel(numeric_level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)

    if json_output:
        fmt = (
            '{"timestamp": "%(timestamp)s", "level": "%(levelname)s", '
            '"module": "%(name)s", "message": "%(json_message)s"}'
        )
    else:
        fmt = "%(timestamp)s | %(levelname)-8s | %(name)s | %(message)s"

    handler.setFormatter(CatalogFormatter(fmt, json_output=json_output))
    root.addHandler(handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
