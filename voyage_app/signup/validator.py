"""
Validation rules for the crew signup form.

Every rule is a pure predicate over a SignupFormState. Rules never raise
on bad input and never look at touched flags: an untouched empty field
is just as invalid as a touched one, it is only displayed differently.
"""

import re
from typing import Optional

from ..config.defaults import SignupParams
from .models import SignupField, SignupFormState

# Searched, not full-matched: an address embedded in other text passes.
EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

ERROR_MESSAGES: dict[SignupField, Optional[str]] = {
    SignupField.PIRATE_NAME: "Name required",
    SignupField.EMAIL: "Invalid email format",
    SignupField.BOUNTY_ID: "Bounty ID required",
    SignupField.SECRET_POWER: None,                 # icon only
    SignupField.CONFIRM_POWER: "Powers don't match",
}

EAST_BLUE_LEVEL = "East Blue Level"
GRAND_LINE_LEVEL = "Grand Line Level"
NEW_WORLD_LEVEL = "New World Level"


class SignupFormValidator:
    """Pure validity predicates for the signup form."""

    def __init__(self, params: Optional[SignupParams] = None):
        self.params = params or SignupParams()

    @staticmethod
    def is_name_valid(state: SignupFormState) -> bool:
        return state.pirate_name != ""

    @staticmethod
    def is_email_valid(state: SignupFormState) -> bool:
        return EMAIL_PATTERN.search(state.email) is not None

    @staticmethod
    def is_bounty_id_valid(state: SignupFormState) -> bool:
        return state.bounty_id != ""

    @staticmethod
    def is_power_valid(state: SignupFormState) -> bool:
        return state.secret_power != ""

    @staticmethod
    def is_confirm_power_valid(state: SignupFormState) -> bool:
        return state.confirm_power != "" and state.confirm_power == state.secret_power

    def is_form_valid(self, state: SignupFormState) -> bool:
        """Submission gate. Toggles and the bounty amount never block it."""
        return (
            self.is_name_valid(state)
            and self.is_email_valid(state)
            and self.is_power_valid(state)
            and self.is_confirm_power_valid(state)
            and self.is_bounty_id_valid(state)
        )

    def is_field_valid(self, state: SignupFormState, field: SignupField) -> bool:
        """
        Validity of a single field.

        Toggle and slider fields have no rule and are always valid.
        """
        rules = {
            SignupField.PIRATE_NAME: self.is_name_valid,
            SignupField.EMAIL: self.is_email_valid,
            SignupField.BOUNTY_ID: self.is_bounty_id_valid,
            SignupField.SECRET_POWER: self.is_power_valid,
            SignupField.CONFIRM_POWER: self.is_confirm_power_valid,
        }
        rule = rules.get(SignupField(field))
        return rule(state) if rule else True

    def invalid_fields(self, state: SignupFormState) -> list[SignupField]:
        """Fields currently blocking submission, in form order."""
        return [field for field in ERROR_MESSAGES if not self.is_field_valid(state, field)]

    @staticmethod
    def error_message(field: SignupField) -> Optional[str]:
        return ERROR_MESSAGES.get(SignupField(field))

    def power_level(self, secret_power: str) -> str:
        """Strength hint shown under the secret power field."""
        if not secret_power:
            return ""
        length = len(secret_power)
        if length <= self.params.east_blue_max_length:
            return EAST_BLUE_LEVEL
        if length <= self.params.grand_line_max_length:
            return GRAND_LINE_LEVEL
        return NEW_WORLD_LEVEL
