"""
Crew signup data models.

This module defines the immutable signup form state, the field names the
UI shell addresses events to, and the render-ready status of a field.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional


class SignupField(str, Enum):
    """Fields of the crew signup form."""
    PIRATE_NAME = "pirate_name"
    EMAIL = "email"
    BOUNTY_ID = "bounty_id"
    SECRET_POWER = "secret_power"
    CONFIRM_POWER = "confirm_power"
    JOIN_FOREVER = "join_forever"
    TREASURE_UPDATES = "treasure_updates"
    BOUNTY_AMOUNT = "bounty_amount"


# Text fields touched on first focus
FOCUS_TOUCHED_FIELDS = (
    SignupField.PIRATE_NAME,
    SignupField.EMAIL,
    SignupField.BOUNTY_ID,
)

# Secure fields touched on first value change
CHANGE_TOUCHED_FIELDS = (
    SignupField.SECRET_POWER,
    SignupField.CONFIRM_POWER,
)

TEXT_FIELDS = FOCUS_TOUCHED_FIELDS + CHANGE_TOUCHED_FIELDS
TOGGLE_FIELDS = (SignupField.JOIN_FOREVER, SignupField.TREASURE_UPDATES)


@dataclass(frozen=True)
class SignupFormState:
    """Current values of the signup form. Defaults are the reset state."""

    pirate_name: str = ""
    email: str = ""
    bounty_id: str = ""                              # Never longer than the configured max
    secret_power: str = ""
    confirm_power: str = ""

    # Crew preferences, never gate submission
    join_forever: bool = False
    treasure_updates: bool = False
    bounty_amount: float = 0.0

    def value_of(self, field: SignupField) -> Any:
        return getattr(self, SignupField(field).value)

    def with_value(self, field: SignupField, value: Any) -> 'SignupFormState':
        """Create new state with one field replaced."""
        return replace(self, **{SignupField(field).value: value})


@dataclass(frozen=True)
class FieldStatus:
    """Everything the UI needs to render one text field."""

    field: SignupField
    value: str
    is_valid: bool
    touched: bool

    # Fixed message for this field; None when the field shows an icon only
    error_message: Optional[str] = None

    @property
    def show_indicator(self) -> bool:
        """Validity icon is shown once the field is touched."""
        return self.touched

    @property
    def visible_error(self) -> Optional[str]:
        """Error text to display right now, if any."""
        if self.touched and not self.is_valid:
            return self.error_message
        return None
