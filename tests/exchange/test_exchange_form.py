"""Tests for the exchange form controller."""

import pytest

from voyage_app.config.defaults import ExchangeParams
from voyage_app.errors import FormInputError, SubmissionBlockedError, UnknownOptionError
from voyage_app.exchange.calculator import TransactionIssue
from voyage_app.exchange.form import ExchangeForm
from voyage_app.exchange.models import ExchangeFormState, TradeDirection


class TestInitialState:
    """Test defaults of a fresh form."""

    def test_defaults(self, exchange_form):
        state = exchange_form.state
        assert state.direction == TradeDirection.BUY
        assert state.source_card_id == "5282 3456 7890 1289"
        assert state.target_currency == "USD"
        assert state.pay_currency == "USD"
        assert state.pay_amount == ""

    def test_empty_form(self, exchange_form):
        assert exchange_form.receive_amount == "0"
        assert not exchange_form.can_submit
        assert exchange_form.transaction_error is TransactionIssue.EMPTY_AMOUNT
        assert exchange_form.error_message == "Enter an amount"
        assert exchange_form.action_label == "💰 Buy Coins"


class TestSelections:
    """Test direction, card and currency events."""

    def test_direction(self, exchange_form):
        exchange_form.set_direction("sell")
        assert exchange_form.state.direction == TradeDirection.SELL
        assert exchange_form.action_label == "💸 Sell Coins"

        exchange_form.toggle_direction()
        assert exchange_form.state.direction == TradeDirection.BUY

    def test_unknown_direction(self, exchange_form):
        with pytest.raises(UnknownOptionError):
            exchange_form.set_direction("hold")

    def test_select_card(self, exchange_form):
        exchange_form.select_card("4444 3333 2222 1111")
        assert exchange_form.state.source_card_id == "4444 3333 2222 1111"

    def test_unknown_card(self, exchange_form):
        with pytest.raises(UnknownOptionError) as exc_info:
            exchange_form.select_card("0000 0000 0000 0000")
        assert "9876 5432 1098 7654" in exc_info.value.allowed_options
        assert exchange_form.state.source_card_id == "5282 3456 7890 1289"

    def test_unknown_currency(self, exchange_form):
        with pytest.raises(UnknownOptionError):
            exchange_form.select_target_currency("BTC")
        with pytest.raises(UnknownOptionError):
            exchange_form.select_pay_currency("BTC")

    def test_non_text_amount(self, exchange_form):
        with pytest.raises(FormInputError):
            exchange_form.set_pay_amount(100)


class TestDerivedValues:
    """Test receive amount and gating as input changes."""

    def test_receive_amount_tracks_inputs(self, exchange_form):
        exchange_form.set_pay_amount("100")
        assert exchange_form.receive_amount == "100.00"

        exchange_form.select_target_currency("EUR")
        assert exchange_form.receive_amount == "92.00"
        assert exchange_form.can_submit
        assert exchange_form.error_message is None

        exchange_form.select_pay_currency("JPY")
        assert exchange_form.receive_amount == "0.62"
        assert exchange_form.transaction_error is TransactionIssue.BELOW_MINIMUM_RECEIVE
        assert not exchange_form.can_submit

    def test_comma_amount_converts_but_blocks(self, exchange_form):
        exchange_form.set_pay_amount("1,000")
        exchange_form.select_target_currency("JPY")
        assert exchange_form.receive_amount == "149500.00"
        assert exchange_form.transaction_error is None
        assert not exchange_form.is_transaction_valid

    def test_non_positive_amount(self, exchange_form):
        exchange_form.set_pay_amount("0")
        assert exchange_form.error_message == "Amount must be greater than 0"


class TestSubmission:
    """Test submit and reset."""

    def test_buy_submission(self, exchange_form):
        exchange_form.select_card("9876 5432 1098 7654")
        exchange_form.select_target_currency("EUR")
        exchange_form.set_pay_amount("100")

        confirmation = exchange_form.submit()

        assert confirmation.direction == TradeDirection.BUY
        assert confirmation.receive_amount == "92.00"
        assert confirmation.target_currency == "EUR"
        assert confirmation.source_card_id == "9876 5432 1098 7654"
        assert confirmation.title == "Buy Complete 🎉"
        assert confirmation.message == "You bought 92.00 EUR."

    def test_sell_submission(self, exchange_form):
        exchange_form.set_direction(TradeDirection.SELL)
        exchange_form.select_target_currency("JPY")
        exchange_form.set_pay_amount("10")

        confirmation = exchange_form.submit()

        assert confirmation.title == "Sell Complete 🎉"
        assert confirmation.message == "You sold 1495.00 JPY."

    def test_submission_resets_form(self, exchange_form):
        exchange_form.set_direction(TradeDirection.SELL)
        exchange_form.select_card("4444 3333 2222 1111")
        exchange_form.select_pay_currency("GBP")
        exchange_form.select_target_currency("CAD")
        exchange_form.set_pay_amount("50")

        exchange_form.submit()

        assert exchange_form.state == ExchangeFormState.initial()
        assert exchange_form.state.direction == TradeDirection.BUY
        assert exchange_form.state.pay_currency == "USD"
        assert exchange_form.state.target_currency == "USD"

    @pytest.mark.parametrize("amount, reason", [
        ("", "empty_amount"),
        ("0", "non_positive_amount"),
        ("0.5", "below_minimum_receive"),
        ("abc", "unparseable_amount"),
    ])
    def test_blocked_submission(self, exchange_form, amount, reason):
        exchange_form.set_pay_amount(amount)
        with pytest.raises(SubmissionBlockedError) as exc_info:
            exchange_form.submit()
        assert exc_info.value.reason == reason
        assert exchange_form.state.pay_amount == amount


class TestCustomParams:
    """Test forms built from non-default parameters."""

    def test_custom_cards_and_default_currency(self):
        params = ExchangeParams(
            cards=("1111 2222 3333 4444",),
            currencies=("USD", "EUR"),
            default_currency="EUR",
            rates={"USD": 1.0, "EUR": 0.5},
        )
        form = ExchangeForm(params)
        assert form.state.source_card_id == "1111 2222 3333 4444"
        assert form.state.pay_currency == "EUR"

        form.set_pay_amount("10")
        form.select_target_currency("USD")
        assert form.receive_amount == "20.00"
