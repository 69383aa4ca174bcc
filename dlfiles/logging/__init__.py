"""Logging package with Rich-based event reporting."""

from .rich_logger import RichEventReporter, QuietEventReporter

__all__ = ["RichEventReporter", "QuietEventReporter"]
