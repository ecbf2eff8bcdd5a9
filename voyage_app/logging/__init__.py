"""
Logging configuration and utilities for the voyage forms core.
"""
from .config import configure_logging, get_form_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_form_logger"]
