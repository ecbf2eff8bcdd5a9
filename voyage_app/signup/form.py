"""
Crew signup form controller.

Owns the current SignupFormState and the touched side table, applies
input events coming from the UI shell, and answers render queries. The
shell owns re-rendering; it reads back whatever it needs after each
event.
"""

import math
from dataclasses import dataclass
from typing import Optional

import structlog

from ..config.defaults import SignupParams
from ..errors import FormInputError, SubmissionBlockedError, UnknownFieldError
from ..logging.config import get_form_logger, log_field_validation, log_submission
from ..state.touched import TouchedFields
from .formatting import format_bounty, format_character_count
from .models import (
    CHANGE_TOUCHED_FIELDS,
    FOCUS_TOUCHED_FIELDS,
    TEXT_FIELDS,
    TOGGLE_FIELDS,
    FieldStatus,
    SignupField,
    SignupFormState,
)
from .validator import SignupFormValidator

logger = structlog.get_logger(__name__)
form_logger = get_form_logger(__name__)

FORM_NAME = "signup"
WELCOME_TITLE = "Welcome to the Crew! 🎉"
SUBMIT_LABEL = "⛵ Set Sail 🏴‍☠️"


@dataclass(frozen=True)
class SignupConfirmation:
    """Payload for the welcome alert shown after a successful signup."""

    pirate_name: str
    formatted_bounty: str
    join_forever: bool = False
    treasure_updates: bool = False

    @property
    def title(self) -> str:
        return WELCOME_TITLE

    @property
    def message(self) -> str:
        return f"You're now a Straw Hat Pirate with a {self.formatted_bounty} berry bounty!"


class SignupForm:
    """Event-driven controller for the crew signup screen."""

    def __init__(
        self,
        params: Optional[SignupParams] = None,
        validator: Optional[SignupFormValidator] = None
    ):
        self.params = params or SignupParams()
        self.validator = validator or SignupFormValidator(self.params)
        self._state = SignupFormState()
        self.touched = TouchedFields(TEXT_FIELDS)
        self.logger = logger
        self.form_logger = form_logger

    @property
    def state(self) -> SignupFormState:
        return self._state

    # Input events

    def set_text(self, field: SignupField, value: str) -> SignupFormState:
        """
        Apply a text change to one of the text fields.

        The bounty id is truncated to its maximum length. The secret
        power fields become touched on their first actual change.
        """
        field = self._text_field(field)
        if not isinstance(value, str):
            raise FormInputError(
                f"Text for '{field.value}' must be a string",
                context={"field": field.value, "type": type(value).__name__},
            )

        if field == SignupField.BOUNTY_ID:
            value = value[:self.params.bounty_id_max_length]

        previous = self._state
        if value == previous.value_of(field):
            return previous

        self._state = previous.with_value(field, value)

        if field in CHANGE_TOUCHED_FIELDS:
            self.touched.mark(field)

        self._log_validity_changes(previous)
        return self._state

    def focus(self, field: SignupField) -> None:
        """Focus gained on a text field."""
        field = self._text_field(field)
        if field in FOCUS_TOUCHED_FIELDS:
            self.touched.mark(field)

    def set_toggle(self, field: SignupField, enabled: bool) -> SignupFormState:
        field = _coerce_field(field, TOGGLE_FIELDS, "toggle")
        self._state = self._state.with_value(field, bool(enabled))
        return self._state

    def set_bounty(self, amount: float) -> SignupFormState:
        """Move the bounty slider; the amount is clamped and snapped to the step."""
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise FormInputError(
                "Bounty amount must be a number",
                context={"type": type(amount).__name__},
            )
        if not math.isfinite(amount):
            raise FormInputError("Bounty amount must be finite", context={"amount": amount})

        params = self.params
        clamped = min(max(amount, params.bounty_min), params.bounty_max)
        steps = round((clamped - params.bounty_min) / params.bounty_step)
        snapped = round(params.bounty_min + steps * params.bounty_step, 6)
        snapped = min(snapped, params.bounty_max)

        self._state = self._state.with_value(SignupField.BOUNTY_AMOUNT, snapped)
        return self._state

    # Render queries

    @property
    def is_form_valid(self) -> bool:
        return self.validator.is_form_valid(self._state)

    @property
    def can_submit(self) -> bool:
        return self.is_form_valid

    @property
    def formatted_bounty(self) -> str:
        return format_bounty(self._state.bounty_amount)

    @property
    def bounty_id_counter(self) -> str:
        return format_character_count(self._state.bounty_id, self.params.bounty_id_max_length)

    @property
    def power_level(self) -> str:
        return self.validator.power_level(self._state.secret_power)

    @property
    def submit_label(self) -> str:
        return SUBMIT_LABEL

    def field_status(self, field: SignupField) -> FieldStatus:
        field = self._text_field(field)
        return FieldStatus(
            field=field,
            value=self._state.value_of(field),
            is_valid=self.validator.is_field_valid(self._state, field),
            touched=self.touched.is_touched(field),
            error_message=self.validator.error_message(field),
        )

    # Submission

    def submit(self, reset: bool = True) -> SignupConfirmation:
        """
        Submit the signup.

        Args:
            reset: Reset the form once the confirmation is produced. Pass
                False when the user chooses to stay on the filled form.

        Raises:
            SubmissionBlockedError: If the form is not valid
        """
        if not self.is_form_valid:
            invalid = [f.value for f in self.validator.invalid_fields(self._state)]
            log_submission(self.form_logger, FORM_NAME, accepted=False,
                           reason="form_invalid", context={"invalid_fields": invalid})
            raise SubmissionBlockedError(
                "Signup form is not valid",
                form=FORM_NAME,
                reason="form_invalid",
                context={"invalid_fields": invalid},
            )

        state = self._state
        confirmation = SignupConfirmation(
            pirate_name=state.pirate_name,
            formatted_bounty=format_bounty(state.bounty_amount),
            join_forever=state.join_forever,
            treasure_updates=state.treasure_updates,
        )
        log_submission(self.form_logger, FORM_NAME, accepted=True, reason="form_valid",
                       context={"bounty": confirmation.formatted_bounty})

        if reset:
            self.reset()
        return confirmation

    def reset(self) -> None:
        """Restore every field to its default and clear touched flags."""
        self._state = SignupFormState()
        self.touched.reset()
        self.logger.debug("Signup form reset")

    def _text_field(self, field: SignupField) -> SignupField:
        return _coerce_field(field, TEXT_FIELDS, "text field")

    def _log_validity_changes(self, previous: SignupFormState) -> None:
        for field in TEXT_FIELDS:
            was_valid = self.validator.is_field_valid(previous, field)
            now_valid = self.validator.is_field_valid(self._state, field)
            if was_valid != now_valid:
                log_field_validation(self.form_logger, FORM_NAME, field.value,
                                     valid=now_valid, touched=self.touched.is_touched(field))


def _coerce_field(field: SignupField, allowed: tuple, kind: str) -> SignupField:
    """Resolve a field name and check it belongs to the allowed group."""
    try:
        resolved = SignupField(field)
    except ValueError:
        raise UnknownFieldError(
            f"Unknown signup field '{field}'",
            field=str(field),
            known_fields=[f.value for f in allowed],
        ) from None
    if resolved not in allowed:
        raise UnknownFieldError(
            f"'{resolved.value}' is not a {kind}",
            field=resolved.value,
            known_fields=[f.value for f in allowed],
        )
    return resolved
