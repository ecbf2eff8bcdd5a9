"""Default configuration parameters for the signup and exchange forms."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class SignupParams:
    """Crew signup form parameters."""
    bounty_id_max_length: int = 20                  # Hard truncation limit
    bounty_min: float = 0.0                         # Slider lower bound
    bounty_max: float = 500.0                       # Slider upper bound
    bounty_step: float = 0.1                        # Slider step

    # Secret power length thresholds for the level hint
    east_blue_max_length: int = 5
    grand_line_max_length: int = 8


@dataclass(frozen=True)
class ExchangeParams:
    """Coin exchange form parameters."""
    cards: tuple[str, ...] = (
        "5282 3456 7890 1289",
        "4444 3333 2222 1111",
        "9876 5432 1098 7654",
    )
    currencies: tuple[str, ...] = ("USD", "EUR", "JPY", "GBP", "CAD")
    default_currency: str = "USD"

    # Rates relative to one USD, read-only once built
    rates: Mapping[str, float] = field(default_factory=lambda: {
        "USD": 1.0,
        "EUR": 0.92,
        "JPY": 149.50,
        "GBP": 0.79,
        "CAD": 1.36,
    })

    min_receive_amount: float = 1.0                 # Smallest receivable coin amount

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict do not leak in
        object.__setattr__(self, "rates", MappingProxyType(dict(self.rates)))


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    signup: SignupParams
    exchange: ExchangeParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        signup=SignupParams(),
        exchange=ExchangeParams(),
    )
