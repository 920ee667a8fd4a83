"""
Logging utilities for the application.

Provides middleware and setup functions for standardized logging.
"""
from .logging import LoggingMiddleware, sanitize_json_string, setup_logging

__all__ = ["LoggingMiddleware", "sanitize_json_string", "setup_logging"]
