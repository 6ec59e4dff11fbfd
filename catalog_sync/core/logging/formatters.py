"""
Log formatters: JSON lines for log shippers, colored text for terminals
"""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional

_LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; structured context becomes top-level keys.

    ``include_process`` adds process/thread ids, useful when several workers
    write to the same file.
    """

    def __init__(self, include_process: bool = False):
        super().__init__()
        self.include_process = include_process

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if self.include_process:
            entry["process"] = record.process
            entry["thread"] = record.thread

        entry.update(getattr(record, "extra_fields", None) or {})

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable, colored by level"""

    def format(self, record: logging.LogRecord) -> str:
        color = _LEVEL_COLORS.get(record.levelname, _RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        line = f"{color}[{timestamp}] {record.levelname:8s} {record.name}: {record.getMessage()}{_RESET}"
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


class SimpleFormatter(logging.Formatter):
    """Plain ``logging`` format without colors"""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        super().__init__(
            fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt or "%Y-%m-%d %H:%M:%S",
        )


def build_formatter(formatter_type: str) -> logging.Formatter:
    """Formatter for a ``LOG_FORMAT`` value"""
    if formatter_type == "console":
        return ConsoleFormatter()
    if formatter_type == "json":
        return JSONFormatter()
    if formatter_type == "structured":
        return JSONFormatter(include_process=True)
    return SimpleFormatter()
