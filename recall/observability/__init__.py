"""Logging setup shared by the API and maintenance scripts."""

from recall.observability.logger import configure_logging

__all__ = ["configure_logging"]
