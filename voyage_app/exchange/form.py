"""
Coin exchange form controller.

Owns the current ExchangeFormState, applies selection and amount events
from the UI shell, and derives the receive amount and submit gating on
every query. Nothing derived is stored.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from ..config.defaults import ExchangeParams
from ..errors import FormInputError, SubmissionBlockedError, UnknownOptionError
from ..logging.config import get_form_logger, log_submission
from .calculator import ExchangeCalculator, TransactionIssue
from .models import ExchangeFormState, RateTable, TradeDirection

logger = structlog.get_logger(__name__)
form_logger = get_form_logger(__name__)

FORM_NAME = "exchange"

_ACTION_LABELS = {
    TradeDirection.BUY: "💰 Buy Coins",
    TradeDirection.SELL: "💸 Sell Coins",
}


@dataclass(frozen=True)
class ExchangeConfirmation:
    """Payload for the completion alert shown after a transaction."""

    direction: TradeDirection
    receive_amount: str
    target_currency: str
    source_card_id: Optional[str] = None

    @property
    def title(self) -> str:
        if self.direction == TradeDirection.BUY:
            return "Buy Complete 🎉"
        return "Sell Complete 🎉"

    @property
    def message(self) -> str:
        verb = "bought" if self.direction == TradeDirection.BUY else "sold"
        return f"You {verb} {self.receive_amount} {self.target_currency}."


class ExchangeForm:
    """Event-driven controller for the coin exchange screen."""

    def __init__(
        self,
        params: Optional[ExchangeParams] = None,
        calculator: Optional[ExchangeCalculator] = None
    ):
        self.params = params or ExchangeParams()
        self.calculator = calculator or ExchangeCalculator(
            RateTable.from_mapping(self.params.rates),
            min_receive_amount=self.params.min_receive_amount,
        )
        self._state = ExchangeFormState.initial(self.params)
        self.logger = logger
        self.form_logger = form_logger

    @property
    def state(self) -> ExchangeFormState:
        return self._state

    # Input events

    def set_direction(self, direction: TradeDirection) -> ExchangeFormState:
        try:
            direction = TradeDirection(direction)
        except ValueError:
            raise UnknownOptionError(
                f"Unknown trade direction '{direction}'",
                option=str(direction),
                allowed_options=[d.value for d in TradeDirection],
            ) from None
        self._state = self._state.with_changes(direction=direction)
        return self._state

    def toggle_direction(self) -> ExchangeFormState:
        """Flip between buy and sell, as tapping the switch does."""
        flipped = TradeDirection.SELL if self._state.direction == TradeDirection.BUY else TradeDirection.BUY
        return self.set_direction(flipped)

    def select_card(self, card_id: str) -> ExchangeFormState:
        self._check_option(card_id, self.params.cards, "card")
        self._state = self._state.with_changes(source_card_id=card_id)
        return self._state

    def select_target_currency(self, currency: str) -> ExchangeFormState:
        self._check_option(currency, self.params.currencies, "currency")
        self._state = self._state.with_changes(target_currency=currency)
        return self._state

    def select_pay_currency(self, currency: str) -> ExchangeFormState:
        self._check_option(currency, self.params.currencies, "currency")
        self._state = self._state.with_changes(pay_currency=currency)
        return self._state

    def set_pay_amount(self, text: str) -> ExchangeFormState:
        """Store the raw amount text; it is parsed only when derived values are read."""
        if not isinstance(text, str):
            raise FormInputError(
                "Pay amount must be text",
                context={"type": type(text).__name__},
            )
        self._state = self._state.with_changes(pay_amount=text)
        return self._state

    # Render queries

    @property
    def receive_amount(self) -> str:
        state = self._state
        return self.calculator.convert(state.pay_amount, state.pay_currency, state.target_currency)

    @property
    def is_transaction_valid(self) -> bool:
        return self.calculator.is_transaction_valid(self._state.pay_amount, self.receive_amount)

    @property
    def can_submit(self) -> bool:
        return self.is_transaction_valid

    @property
    def transaction_error(self) -> Optional[TransactionIssue]:
        return self.calculator.transaction_error(self._state.pay_amount, self.receive_amount)

    @property
    def error_message(self) -> Optional[str]:
        issue = self.transaction_error
        return issue.message if issue else None

    @property
    def action_label(self) -> str:
        return _ACTION_LABELS[self._state.direction]

    # Submission

    def submit(self) -> ExchangeConfirmation:
        """
        Complete the transaction and reset the form.

        Raises:
            SubmissionBlockedError: If the transaction is not valid
        """
        receive_amount = self.receive_amount
        if not self.calculator.is_transaction_valid(self._state.pay_amount, receive_amount):
            issue = self.calculator.transaction_error(self._state.pay_amount, receive_amount)
            reason = issue.value if issue else "unparseable_amount"
            log_submission(self.form_logger, FORM_NAME, accepted=False, reason=reason)
            raise SubmissionBlockedError(
                "Exchange transaction is not valid",
                form=FORM_NAME,
                reason=reason,
                context={"receive_amount": receive_amount},
            )

        state = self._state
        confirmation = ExchangeConfirmation(
            direction=state.direction,
            receive_amount=receive_amount,
            target_currency=state.target_currency,
            source_card_id=state.source_card_id,
        )
        log_submission(self.form_logger, FORM_NAME, accepted=True, reason="transaction_valid",
                       context={"direction": state.direction.value,
                                "receive_amount": receive_amount,
                                "target_currency": state.target_currency})

        self.reset()
        return confirmation

    def reset(self) -> None:
        self._state = ExchangeFormState.initial(self.params)
        self.logger.debug("Exchange form reset")

    @staticmethod
    def _check_option(option: str, allowed: tuple, kind: str) -> None:
        if option not in allowed:
            raise UnknownOptionError(
                f"Unknown {kind} '{option}'",
                option=option,
                allowed_options=list(allowed),
            )
