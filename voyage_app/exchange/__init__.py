"""
Coin exchange form: rate table, conversion and transaction gating.
"""
from .calculator import ExchangeCalculator, TransactionIssue, convert
from .form import ExchangeConfirmation, ExchangeForm
from .models import ExchangeFormState, RateTable, TradeDirection

__all__ = [
    "ExchangeCalculator",
    "ExchangeConfirmation",
    "ExchangeForm",
    "ExchangeFormState",
    "RateTable",
    "TradeDirection",
    "TransactionIssue",
    "convert",
]
