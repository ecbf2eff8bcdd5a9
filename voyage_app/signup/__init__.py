"""
Crew signup form: validation rules, bounty formatting and form controller.
"""
from .form import SignupConfirmation, SignupForm
from .formatting import format_bounty
from .models import SignupField, SignupFormState
from .validator import SignupFormValidator

__all__ = [
    "SignupConfirmation",
    "SignupField",
    "SignupForm",
    "SignupFormState",
    "SignupFormValidator",
    "format_bounty",
]
