"""Observability – structured logging helpers."""
from event_journal.observability.logging.factory import JsonLoggerFactory
from event_journal.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
