"""
Utility modules for MoodTunes.

Provides structured logging and other supporting functionality.
"""

from .logging import StructuredLogger, LogContext, get_logger

__all__ = ['StructuredLogger', 'LogContext', 'get_logger']
