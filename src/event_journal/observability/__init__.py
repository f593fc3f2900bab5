"""Observability – structured logging for the journal and its adapters."""

from event_journal.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
