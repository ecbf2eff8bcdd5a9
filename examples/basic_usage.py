#!/usr/bin/env python3
"""
Basic Usage Example - Voyage Forms Core

This script drives both screens the way a UI shell would, printing what
the shell would render after each event. It shows how to:
- Build the app from configuration
- Feed focus and text events into the signup form
- Read field status, bounty display and the submit gate
- Select currencies, enter an amount and complete an exchange

Run: python examples/basic_usage.py
"""

from voyage_app.app import VoyageApp
from voyage_app.logging.config import configure_logging
from voyage_app.signup.form import SignupForm
from voyage_app.signup.models import TEXT_FIELDS, SignupField


def print_signup_status(form: SignupForm) -> None:
    """Print every text field as the shell would render it."""
    for field in TEXT_FIELDS:
        status = form.field_status(field)
        icon = ("✅" if status.is_valid else "❗") if status.show_indicator else "  "
        error = f"  <- {status.visible_error}" if status.visible_error else ""
        print(f"  {icon} {field.value:<14} {status.value!r}{error}")
    print(f"  Bounty: {form.formatted_bounty}   ID: {form.bounty_id_counter}   "
          f"Power: {form.power_level or '-'}")
    print(f"  [{form.submit_label}] {'enabled' if form.can_submit else 'disabled'}")
    print()


def run_signup(app: VoyageApp) -> None:
    form = app.signup
    print("1. Signup: user taps the name field and moves on without typing")
    form.focus(SignupField.PIRATE_NAME)
    form.focus(SignupField.EMAIL)
    print_signup_status(form)

    print("2. Signup: user fills in the form")
    form.set_text(SignupField.PIRATE_NAME, "Monkey D. Luffy")
    form.set_text(SignupField.EMAIL, "luffy@grandline.sea")
    form.focus(SignupField.BOUNTY_ID)
    form.set_text(SignupField.BOUNTY_ID, "FutureKingOfThePirates")
    form.set_text(SignupField.SECRET_POWER, "gomugomu")
    form.set_text(SignupField.CONFIRM_POWER, "gomugomo")
    form.set_bounty(30.0)
    print_signup_status(form)

    print("3. Signup: user fixes the confirmation and submits")
    form.set_text(SignupField.CONFIRM_POWER, "gomugomu")
    form.set_toggle(SignupField.JOIN_FOREVER, True)
    confirmation = form.submit()
    print(f"  🎉 {confirmation.title}")
    print(f"     {confirmation.message}")
    print()


def run_exchange(app: VoyageApp) -> None:
    form = app.exchange
    print("4. Exchange: pay 1,000 EUR for JPY")
    form.select_pay_currency("EUR")
    form.select_target_currency("JPY")
    form.set_pay_amount("1,000")
    print(f"  Receive: {form.receive_amount} {form.state.target_currency}")
    print(f"  Error: {form.error_message}   [{form.action_label}] "
          f"{'enabled' if form.can_submit else 'disabled'}")
    print()

    print("5. Exchange: user retypes the amount without separators and sells")
    form.set_pay_amount("1000")
    form.toggle_direction()
    confirmation = form.submit()
    print(f"  🎉 {confirmation.title}")
    print(f"     {confirmation.message}")
    print(f"  Form reset to {form.state.direction.value} {form.state.pay_currency}"
          f" -> {form.state.target_currency}")


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("⛵ Voyage Forms Core - Basic Usage Demo")
    print("=" * 60)

    app = VoyageApp()
    run_signup(app)
    run_exchange(app)


if __name__ == "__main__":
    main()
