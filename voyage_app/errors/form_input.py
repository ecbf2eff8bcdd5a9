"""
Form input error classifications.

Raised when the calling UI shell drives a form in a way the form does
not support. All of them leave the form state untouched, so the shell
can recover by issuing a correct event.
"""

from typing import Optional, Dict, Any


class FormInputError(Exception):
    """Base class for rejected form events."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class UnknownFieldError(FormInputError):
    """Event addressed a field the form does not have."""

    def __init__(self, message: str, field: Optional[str] = None,
                 known_fields: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.known_fields = known_fields or []


class UnknownOptionError(FormInputError):
    """Selection outside the fixed option set (cards, currencies)."""

    def __init__(self, message: str, option: Optional[str] = None,
                 allowed_options: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.option = option
        self.allowed_options = allowed_options or []


class SubmissionBlockedError(FormInputError):
    """Submit was triggered while the form is not valid."""

    def __init__(self, message: str, form: Optional[str] = None,
                 reason: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.form = form
        self.reason = reason
