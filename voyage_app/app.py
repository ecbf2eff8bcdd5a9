"""
Application coordinator.

Builds both screens from merged configuration. The screens are
independent; the app only hands each its parameters and exposes them in
tab order for the UI shell.
"""

from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.defaults import ExchangeParams, SignupParams
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .exchange.form import ExchangeForm
from .signup.form import SignupForm

logger = structlog.get_logger(__name__)

SIGNUP_TAB = "Part 1"
EXCHANGE_TAB = "Part 2"


def _build_params(cls: type, section: str, values: dict[str, Any]) -> Any:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown {section} settings: {', '.join(unknown)}",
            context={"section": section, "unknown_keys": unknown},
        )
    converted = {
        key: tuple(value) if isinstance(value, list) else value
        for key, value in values.items()
    }
    return cls(**converted)


class VoyageApp:
    """
    Entry point for the UI shell.

    Loads configuration, validates it, and creates one SignupForm and
    one ExchangeForm.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> None:
        self.logger = logger
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.config = self.config_loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(self.config)
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError(
                "Invalid configuration",
                context={"errors": error_msgs},
            )

        self.signup = SignupForm(_build_params(SignupParams, "signup", self.config["signup"]))
        self.exchange = ExchangeForm(_build_params(ExchangeParams, "exchange", self.config["exchange"]))

        self.logger.info(
            "Voyage app initialized",
            config_dir=str(self.config_loader.config_dir),
            currencies=list(self.exchange.params.currencies),
        )

    @property
    def tabs(self) -> list[tuple[str, Union[SignupForm, ExchangeForm]]]:
        """Screens in display order."""
        return [(SIGNUP_TAB, self.signup), (EXCHANGE_TAB, self.exchange)]
