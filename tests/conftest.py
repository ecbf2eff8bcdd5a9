"""Pytest configuration and shared fixtures."""

import pytest

from voyage_app.exchange.calculator import ExchangeCalculator
from voyage_app.exchange.form import ExchangeForm
from voyage_app.exchange.models import RateTable
from voyage_app.signup.form import SignupForm
from voyage_app.signup.models import SignupField


@pytest.fixture
def signup_form() -> SignupForm:
    """Fresh signup form with default parameters."""
    return SignupForm()


@pytest.fixture
def filled_signup_form(signup_form: SignupForm) -> SignupForm:
    """Signup form with every gating field valid."""
    signup_form.set_text(SignupField.PIRATE_NAME, "Monkey D. Luffy")
    signup_form.set_text(SignupField.EMAIL, "luffy@grandline.sea")
    signup_form.set_text(SignupField.BOUNTY_ID, "StrawHat")
    signup_form.set_text(SignupField.SECRET_POWER, "gomugomu")
    signup_form.set_text(SignupField.CONFIRM_POWER, "gomugomu")
    return signup_form


@pytest.fixture
def default_rates() -> RateTable:
    """Rate table with the built-in USD-relative rates."""
    return RateTable.default()


@pytest.fixture
def calculator(default_rates: RateTable) -> ExchangeCalculator:
    return ExchangeCalculator(default_rates)


@pytest.fixture
def exchange_form() -> ExchangeForm:
    """Fresh exchange form with default parameters."""
    return ExchangeForm()
