"""Tests for the signup form controller."""

import math

import pytest

from voyage_app.errors import FormInputError, SubmissionBlockedError, UnknownFieldError
from voyage_app.signup.form import SignupConfirmation, SignupForm
from voyage_app.signup.models import SignupField, SignupFormState


class TestTextInput:
    """Test text field events."""

    def test_set_text_updates_state(self, signup_form):
        state = signup_form.set_text(SignupField.PIRATE_NAME, "Nami")
        assert state.pirate_name == "Nami"
        assert signup_form.state.pirate_name == "Nami"

    def test_field_names_accepted_as_strings(self, signup_form):
        signup_form.set_text("email", "nami@weather.sea")
        assert signup_form.state.email == "nami@weather.sea"

    def test_bounty_id_truncated_not_rejected(self, signup_form):
        signup_form.set_text(SignupField.BOUNTY_ID, "A" * 25)
        assert signup_form.state.bounty_id == "A" * 20
        assert signup_form.bounty_id_counter == "20/20"

    def test_bounty_id_at_limit_kept(self, signup_form):
        signup_form.set_text(SignupField.BOUNTY_ID, "B" * 20)
        assert signup_form.state.bounty_id == "B" * 20

    def test_non_text_field_rejected(self, signup_form):
        with pytest.raises(UnknownFieldError) as exc_info:
            signup_form.set_text(SignupField.JOIN_FOREVER, "yes")
        assert exc_info.value.field == "join_forever"
        assert exc_info.value.recoverable is True

    def test_unknown_field_rejected(self, signup_form):
        with pytest.raises(UnknownFieldError):
            signup_form.set_text("ship_name", "Going Merry")

    def test_non_string_value_rejected(self, signup_form):
        with pytest.raises(FormInputError):
            signup_form.set_text(SignupField.PIRATE_NAME, 42)
        assert signup_form.state == SignupFormState()


class TestTouchedFlags:
    """Test presentation timing of errors and icons."""

    def test_text_fields_touched_on_focus(self, signup_form):
        status = signup_form.field_status(SignupField.PIRATE_NAME)
        assert not status.touched
        assert status.visible_error is None

        signup_form.focus(SignupField.PIRATE_NAME)
        status = signup_form.field_status(SignupField.PIRATE_NAME)
        assert status.touched
        assert status.show_indicator
        assert status.visible_error == "Name required"

    def test_typing_without_focus_does_not_touch(self, signup_form):
        signup_form.set_text(SignupField.EMAIL, "bad")
        status = signup_form.field_status(SignupField.EMAIL)
        assert not status.touched
        assert not status.is_valid

    def test_power_fields_touched_on_change(self, signup_form):
        signup_form.focus(SignupField.SECRET_POWER)
        assert not signup_form.field_status(SignupField.SECRET_POWER).touched

        signup_form.set_text(SignupField.SECRET_POWER, "fire")
        assert signup_form.field_status(SignupField.SECRET_POWER).touched
        assert not signup_form.field_status(SignupField.CONFIRM_POWER).touched

    def test_same_value_is_not_a_change(self, signup_form):
        signup_form.set_text(SignupField.CONFIRM_POWER, "")
        assert not signup_form.field_status(SignupField.CONFIRM_POWER).touched

    def test_confirm_power_error_after_change(self, signup_form):
        signup_form.set_text(SignupField.SECRET_POWER, "fire")
        signup_form.set_text(SignupField.CONFIRM_POWER, "fir")
        status = signup_form.field_status(SignupField.CONFIRM_POWER)
        assert status.visible_error == "Powers don't match"

        signup_form.set_text(SignupField.CONFIRM_POWER, "fire")
        assert signup_form.field_status(SignupField.CONFIRM_POWER).visible_error is None

    def test_secret_power_shows_icon_only(self, signup_form):
        signup_form.set_text(SignupField.SECRET_POWER, "fire")
        signup_form.set_text(SignupField.SECRET_POWER, "")
        status = signup_form.field_status(SignupField.SECRET_POWER)
        assert status.touched
        assert not status.is_valid
        assert status.visible_error is None

    def test_validity_ignores_touched(self, filled_signup_form):
        """Nothing was focused, yet the form can be submitted."""
        assert not filled_signup_form.touched.is_touched(SignupField.PIRATE_NAME)
        assert filled_signup_form.is_form_valid
        assert filled_signup_form.can_submit


class TestPreferences:
    """Test toggles and the bounty slider."""

    def test_toggles(self, signup_form):
        signup_form.set_toggle(SignupField.JOIN_FOREVER, True)
        signup_form.set_toggle("treasure_updates", True)
        assert signup_form.state.join_forever is True
        assert signup_form.state.treasure_updates is True

    def test_toggle_rejects_text_field(self, signup_form):
        with pytest.raises(UnknownFieldError):
            signup_form.set_toggle(SignupField.EMAIL, True)

    @pytest.mark.parametrize("amount, expected", [
        (42.3, 42.3),
        (42.34, 42.3),
        (42.36, 42.4),
        (-5.0, 0.0),
        (600.0, 500.0),
        (500.0, 500.0),
    ])
    def test_bounty_clamped_and_snapped(self, signup_form, amount, expected):
        signup_form.set_bounty(amount)
        assert signup_form.state.bounty_amount == pytest.approx(expected)

    def test_formatted_bounty_follows_slider(self, signup_form):
        signup_form.set_bounty(42.3)
        assert signup_form.formatted_bounty == "42.3M฿"
        signup_form.set_bounty(150.7)
        assert signup_form.formatted_bounty == "150M฿"

    def test_non_finite_bounty_rejected(self, signup_form):
        with pytest.raises(FormInputError):
            signup_form.set_bounty(math.nan)
        assert signup_form.state.bounty_amount == 0.0

    @pytest.mark.parametrize("amount", ["42", None, True, [42]])
    def test_non_numeric_bounty_rejected(self, signup_form, amount):
        """The shell must pass the slider value as a number."""
        signup_form.set_bounty(30.0)
        with pytest.raises(FormInputError):
            signup_form.set_bounty(amount)
        assert signup_form.state.bounty_amount == 30.0

    def test_integer_bounty_accepted(self, signup_form):
        signup_form.set_bounty(42)
        assert signup_form.state.bounty_amount == 42.0

    def test_power_level(self, signup_form):
        assert signup_form.power_level == ""
        signup_form.set_text(SignupField.SECRET_POWER, "gomugomu")
        assert signup_form.power_level == "Grand Line Level"


class TestSubmission:
    """Test submit and reset."""

    def test_submit_blocked_when_invalid(self, signup_form):
        signup_form.set_text(SignupField.PIRATE_NAME, "Chopper")
        with pytest.raises(SubmissionBlockedError) as exc_info:
            signup_form.submit()

        error = exc_info.value
        assert error.form == "signup"
        assert "email" in error.context["invalid_fields"]
        assert "pirate_name" not in error.context["invalid_fields"]
        assert signup_form.state.pirate_name == "Chopper"

    def test_submit_produces_confirmation_and_resets(self, filled_signup_form):
        filled_signup_form.set_bounty(42.3)
        filled_signup_form.set_toggle(SignupField.JOIN_FOREVER, True)
        filled_signup_form.focus(SignupField.EMAIL)

        confirmation = filled_signup_form.submit()

        assert isinstance(confirmation, SignupConfirmation)
        assert confirmation.pirate_name == "Monkey D. Luffy"
        assert confirmation.formatted_bounty == "42.3M฿"
        assert confirmation.join_forever is True
        assert confirmation.title == "Welcome to the Crew! 🎉"
        assert confirmation.message == "You're now a Straw Hat Pirate with a 42.3M฿ berry bounty!"

        assert filled_signup_form.state == SignupFormState()
        assert filled_signup_form.state.bounty_amount == 0.0
        assert not any(filled_signup_form.touched.snapshot().values())
        assert not filled_signup_form.can_submit

    def test_submit_without_reset_keeps_values(self, filled_signup_form):
        before = filled_signup_form.state
        confirmation = filled_signup_form.submit(reset=False)
        assert confirmation.pirate_name == "Monkey D. Luffy"
        assert filled_signup_form.state == before

    def test_submit_label(self):
        assert SignupForm().submit_label == "⛵ Set Sail 🏴‍☠️"
