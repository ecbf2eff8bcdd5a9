"""
Configuration defaults, loading and validation.
"""
from .defaults import DefaultConfig, ExchangeParams, SignupParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "ExchangeParams",
    "SignupParams",
    "ValidationError",
    "get_default_config",
]
