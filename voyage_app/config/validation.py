"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_signup_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate signup form parameters."""
        errors = []

        if "bounty_id_max_length" in params:
            value = params["bounty_id_max_length"]
            if not _is_integer(value) or value <= 0:
                errors.append(ValidationError(
                    field="bounty_id_max_length",
                    message="Must be a positive integer",
                    value=value
                ))

        if "bounty_step" in params:
            value = params["bounty_step"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="bounty_step",
                    message="Must be a positive number",
                    value=value
                ))

        bounty_min = params.get("bounty_min", 0.0)
        bounty_max = params.get("bounty_max", 500.0)
        if not _is_number(bounty_min) or not _is_number(bounty_max):
            errors.append(ValidationError(
                field="bounty_min",
                message="Bounty bounds must be numbers",
                value=(bounty_min, bounty_max)
            ))
        elif bounty_min < 0 or bounty_min >= bounty_max:
            errors.append(ValidationError(
                field="bounty_min",
                message="Must be non-negative and below bounty_max",
                value=(bounty_min, bounty_max)
            ))

        east_blue = params.get("east_blue_max_length", 5)
        grand_line = params.get("grand_line_max_length", 8)
        if not _is_integer(east_blue) or not _is_integer(grand_line) or east_blue >= grand_line:
            errors.append(ValidationError(
                field="east_blue_max_length",
                message="Must be an integer below grand_line_max_length",
                value=(east_blue, grand_line)
            ))

        return errors

    @staticmethod
    def validate_exchange_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate exchange form parameters."""
        errors = []

        cards = params.get("cards", [])
        if not isinstance(cards, (list, tuple)) or not cards:
            errors.append(ValidationError(
                field="cards",
                message="Must be a non-empty list of card ids",
                value=cards
            ))
        else:
            for card in cards:
                if not isinstance(card, str) or not card.strip():
                    errors.append(ValidationError(
                        field="cards",
                        message="Card ids must be non-empty strings",
                        value=card
                    ))

        currencies = params.get("currencies", [])
        if not isinstance(currencies, (list, tuple)) or not currencies:
            errors.append(ValidationError(
                field="currencies",
                message="Must be a non-empty list of currency codes",
                value=currencies
            ))
            currencies = []
        elif not all(isinstance(code, str) and code for code in currencies):
            errors.append(ValidationError(
                field="currencies",
                message="Currency codes must be non-empty strings",
                value=currencies
            ))
            currencies = [code for code in currencies if isinstance(code, str) and code]

        rates = params.get("rates", {})
        if not isinstance(rates, dict):
            errors.append(ValidationError(
                field="rates",
                message="Must be a mapping of currency code to rate",
                value=rates
            ))
            rates = {}

        for code, rate in rates.items():
            if not _is_number(rate) or not math.isfinite(rate) or rate <= 0:
                errors.append(ValidationError(
                    field=f"rates.{code}",
                    message="Must be a positive finite number",
                    value=rate
                ))

        for code in currencies:
            if code not in rates:
                errors.append(ValidationError(
                    field=f"rates.{code}",
                    message="Currency has no rate",
                    value=None
                ))

        if "default_currency" in params and params["default_currency"] not in currencies:
            errors.append(ValidationError(
                field="default_currency",
                message="Must be one of the configured currencies",
                value=params["default_currency"]
            ))

        if "min_receive_amount" in params:
            value = params["min_receive_amount"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="min_receive_amount",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = (
            ("signup", ConfigValidator.validate_signup_params),
            ("exchange", ConfigValidator.validate_exchange_params),
        )
        for section, validate in sections:
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                # e.g. "signup:" with nothing under it loads as None
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of settings",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
