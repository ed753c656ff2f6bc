"""
Structured logging configuration for the pursuit ledger.

Provides JSON-formatted logs with a trace_id field (the identity an operation
acted on) for correlating ledger activity.

Usage:
    from pursuit.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="alice")
    logger.info("Pursuit inscribed", extra={"seq": 3})
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .config import Settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logger with structured logging.

    Logs go to stderr so command output on stdout stays machine-readable.
    """
    settings = settings or Settings.from_env()
    level = getattr(logging, settings.log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if settings.log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


class TraceAdapter(logging.LoggerAdapter):
    """LoggerAdapter that keeps call-site extra fields alongside the trace_id."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def get_logger(name: str, trace_id: Optional[str] = None) -> TraceAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Example:
        logger = get_logger(__name__, trace_id="alice")
        logger.info("Deadline established")
        # {"timestamp": "...", "level": "INFO", "message": "Deadline established", "trace_id": "alice"}
    """
    logger = logging.getLogger(name)
    return TraceAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """Ensures every record has a trace_id, even when logged without an adapter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
