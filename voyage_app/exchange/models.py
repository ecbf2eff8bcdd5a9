"""
Coin exchange data models.

This module defines the immutable rate table used for USD-pivot
conversion and the exchange form state.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from ..config.defaults import ExchangeParams
from ..errors import RateTableError


class TradeDirection(str, Enum):
    """Whether the user buys or sells coins."""
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class RateTable:
    """Currency code to rate relative to one USD. Immutable once built."""

    rates: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, rates: Mapping[str, float]) -> 'RateTable':
        """
        Build a rate table, rejecting rates that would break conversion.

        Raises:
            RateTableError: If a rate is not a positive finite number
        """
        checked: dict[str, float] = {}
        for code, rate in rates.items():
            if isinstance(rate, bool) or not isinstance(rate, (int, float)):
                raise RateTableError(f"Rate for {code} is not a number", currency=code, rate=rate)
            if not math.isfinite(rate) or rate <= 0:
                raise RateTableError(f"Rate for {code} must be positive and finite",
                                     currency=code, rate=rate)
            checked[code] = float(rate)
        return cls(rates=MappingProxyType(checked))

    @classmethod
    def default(cls) -> 'RateTable':
        return cls.from_mapping(ExchangeParams().rates)

    def rate_for(self, currency: str) -> Optional[float]:
        return self.rates.get(currency)

    def __contains__(self, currency: object) -> bool:
        return currency in self.rates

    @property
    def currencies(self) -> tuple[str, ...]:
        return tuple(self.rates)


@dataclass(frozen=True)
class ExchangeFormState:
    """Current selections and raw amount text of the exchange form."""

    source_card_id: str
    direction: TradeDirection = TradeDirection.BUY
    target_currency: str = "USD"
    pay_currency: str = "USD"
    pay_amount: str = ""                             # Raw user text, parsed lazily

    @classmethod
    def initial(cls, params: Optional[ExchangeParams] = None) -> 'ExchangeFormState':
        """Reset state: buy, first card, default currency on both sides."""
        params = params or ExchangeParams()
        return cls(
            source_card_id=params.cards[0],
            direction=TradeDirection.BUY,
            target_currency=params.default_currency,
            pay_currency=params.default_currency,
            pay_amount="",
        )

    def with_changes(self, **changes) -> 'ExchangeFormState':
        return replace(self, **changes)
