"""
Logging — Package logging for smartenum.

The library only emits records; nothing is configured at import time.
Call configure_logging() to attach a handler to the "smartenum" logger.
"""

import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any


ROOT_LOGGER = "smartenum"


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for structured logging.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        
        # Structured fields passed as extra={"extra_data": {...}}
        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data, default=str)


class ReadableFormatter(logging.Formatter):
    """
    Human-readable formatter for development.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        base = f"{record.levelname:<7} {record.name}: {record.getMessage()}"
        
        extra = getattr(record, "extra_data", None)
        if extra:
            fields = " ".join(f"{k}={v}" for k, v in extra.items())
            base += f" ({fields})"
        
        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)
        
        return base


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Any = None,
) -> None:
    """
    Configure smartenum logging.
    
    Args:
        level: Logging level
        json_format: Use JSON format (for production)
        stream: Output stream (default: stderr)
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(ReadableFormatter())
    
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a smartenum component."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
