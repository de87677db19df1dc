"""
Observability — Logging for smartenum.
"""

from smartenum.observability.logging import (
    configure_logging,
    get_logger,
    JSONFormatter,
    ReadableFormatter,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "JSONFormatter",
    "ReadableFormatter",
]
