"""
Conversion and transaction gating for the coin exchange form.

Amounts are converted through a USD pivot: the paid amount is divided by
the pay currency's rate to get its USD value, which is then multiplied
by the target currency's rate.

Two parse paths exist on purpose. convert() strips thousands separators
before parsing, while the transaction checks parse the pay text as
typed, so "1,000" converts but never validates. Both are kept as the
app has always behaved.
"""

from enum import Enum
from typing import Optional

import structlog

from ..utils.numbers import parse_decimal, strip_group_separators
from .models import RateTable

logger = structlog.get_logger(__name__)

UNCONVERTIBLE = "0"
MIN_RECEIVE_AMOUNT = 1.0


class TransactionIssue(str, Enum):
    """Reasons a transaction cannot be submitted, shown inline under the amount."""
    EMPTY_AMOUNT = "empty_amount"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    BELOW_MINIMUM_RECEIVE = "below_minimum_receive"

    @property
    def message(self) -> str:
        return _ISSUE_MESSAGES[self]


_ISSUE_MESSAGES = {
    TransactionIssue.EMPTY_AMOUNT: "Enter an amount",
    TransactionIssue.NON_POSITIVE_AMOUNT: "Amount must be greater than 0",
    TransactionIssue.BELOW_MINIMUM_RECEIVE: "You must receive at least 1 coin",
}


def convert(
    pay_amount_text: str,
    pay_currency: str,
    target_currency: str,
    rate_table: RateTable
) -> str:
    """
    Convert a raw pay amount into the target currency.

    Args:
        pay_amount_text: Raw amount text, commas allowed ("1,000")
        pay_currency: Currency code of the paid amount
        target_currency: Currency code to receive
        rate_table: Rates relative to USD

    Returns:
        Converted amount with exactly two decimals, or "0" when the text
        does not parse or either currency has no rate
    """
    pay_value = parse_decimal(strip_group_separators(pay_amount_text))
    if pay_value is None:
        return UNCONVERTIBLE

    from_rate = rate_table.rate_for(pay_currency)
    to_rate = rate_table.rate_for(target_currency)
    if from_rate is None or to_rate is None:
        logger.debug("Currency missing from rate table",
                     pay_currency=pay_currency, target_currency=target_currency)
        return UNCONVERTIBLE

    usd_value = pay_value / from_rate
    return f"{usd_value * to_rate:.2f}"


class ExchangeCalculator:
    """Rate table holder plus the pure exchange computations."""

    def __init__(
        self,
        rate_table: Optional[RateTable] = None,
        min_receive_amount: float = MIN_RECEIVE_AMOUNT
    ):
        self.rate_table = rate_table or RateTable.default()
        self.min_receive_amount = min_receive_amount

    def convert(
        self,
        pay_amount_text: str,
        pay_currency: str,
        target_currency: str,
        rate_table: Optional[RateTable] = None
    ) -> str:
        return convert(pay_amount_text, pay_currency, target_currency,
                       rate_table or self.rate_table)

    def is_transaction_valid(self, pay_amount_text: str, receive_amount_text: str) -> bool:
        """True when the pay text is a positive number and enough is received."""
        pay_value = parse_decimal(pay_amount_text)
        receive_value = parse_decimal(receive_amount_text)
        if pay_value is None or receive_value is None:
            return False
        return pay_value > 0 and receive_value >= self.min_receive_amount

    def transaction_error(
        self,
        pay_amount_text: str,
        receive_amount_text: str
    ) -> Optional[TransactionIssue]:
        """
        Inline error for the amount field.

        Non-empty text that does not parse reports nothing here; the
        submit button stays disabled through is_transaction_valid.
        """
        if pay_amount_text == "":
            return TransactionIssue.EMPTY_AMOUNT

        pay_value = parse_decimal(pay_amount_text)
        receive_value = parse_decimal(receive_amount_text)
        if pay_value is not None and receive_value is not None:
            if pay_value <= 0:
                return TransactionIssue.NON_POSITIVE_AMOUNT
            if receive_value < self.min_receive_amount:
                return TransactionIssue.BELOW_MINIMUM_RECEIVE

        return None
