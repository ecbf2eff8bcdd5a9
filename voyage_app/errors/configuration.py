"""
Configuration failure classifications.

These errors indicate the forms cannot be built at all and require
fixing the configuration rather than further user input.
"""

from typing import Optional, Dict, Any


class ConfigurationError(Exception):
    """Base class for invalid or inconsistent configuration."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class RateTableError(ConfigurationError):
    """Rate table is missing currencies or holds unusable rates."""

    def __init__(self, message: str, currency: Optional[str] = None,
                 rate: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.currency = currency
        self.rate = rate
