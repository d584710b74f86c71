"""Console logging with structured extras appended as JSON."""

import json
import logging
import sys

LOGGER_NAMESPACE = "ezhik"


class JSONExtrasFormatter(logging.Formatter):
    """Readable log line followed by any ``extra=`` fields as JSON.

    Output format:
        2026-03-01 10:30:45 | INFO     | ezhik.services.ideas | Idea generated {"category": "psx"}
    """

    RESERVED_ATTRS = frozenset(
        {
            "args",
            "asctime",
            "created",
            "exc_info",
            "exc_text",
            "filename",
            "funcName",
            "levelname",
            "levelno",
            "lineno",
            "message",
            "module",
            "msecs",
            "msg",
            "name",
            "pathname",
            "process",
            "processName",
            "relativeCreated",
            "stack_info",
            "taskName",
            "thread",
            "threadName",
        }
    )

    # Values under these keys are masked.
    REDACTED_KEYS = frozenset({"api_key", "authorization", "groq_api_key"})

    def format(self, record: logging.LogRecord) -> str:
        record.message = record.getMessage()
        timestamp = self.formatTime(record, self.datefmt)
        line = f"{timestamp} | {record.levelname:<8} | {record.name} | {record.message}"

        extras: dict[str, object] = {}
        for key, value in record.__dict__.items():
            if key in self.RESERVED_ATTRS or key.startswith("_"):
                continue
            extras[key] = "***" if key.lower() in self.REDACTED_KEYS else value

        if extras:
            try:
                line = f"{line} {json.dumps(extras, default=str, ensure_ascii=False)}"
            except (TypeError, ValueError):
                pass

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line = f"{line}\n{record.exc_text}"

        return line


def setup_logging(debug: bool = False) -> None:
    """Attach a stdout handler to the package logger once."""
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    if logger.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(JSONExtrasFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    # Root handlers are left to uvicorn.
    logger.propagate = False
