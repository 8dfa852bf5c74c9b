"""Observability – structured logging helpers."""
from optval.observability.logging import JsonLoggerFactory, Logger, configure_logging, get_logger

__all__ = ["JsonLoggerFactory", "Logger", "configure_logging", "get_logger"]
