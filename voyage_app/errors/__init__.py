"""
Error classification for the voyage forms core.

User-input validation never raises: invalid input is a value the UI
renders. These exceptions cover misuse of the form API by the calling
shell and broken configuration.
"""

from .form_input import (
    FormInputError,
    UnknownFieldError,
    UnknownOptionError,
    SubmissionBlockedError,
)
from .configuration import (
    ConfigurationError,
    RateTableError,
)

__all__ = [
    # Form Input Errors
    "FormInputError",
    "UnknownFieldError",
    "UnknownOptionError",
    "SubmissionBlockedError",
    # Configuration Failures
    "ConfigurationError",
    "RateTableError",
]
