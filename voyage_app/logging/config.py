"""
Centralized logging configuration for the voyage forms core.

This module provides standardized logging configuration using structlog
for all components. Form controllers log validation changes and
submissions through the helpers below so that every screen emits the
same structured fields.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_form_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for form validation and submission events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for form events
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="forms",
        audit_trail=True
    )


def log_field_validation(
    logger: FilteringBoundLogger,
    form: str,
    field: str,
    valid: bool,
    touched: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a field validity change with standardized format.

    Field values are never logged.

    Args:
        logger: Structlog logger instance
        form: Name of the form the field belongs to
        field: Field name
        valid: Current validity of the field
        touched: Whether the field has been touched
        context: Additional context data
    """
    bound_logger = logger.bind(
        form=form,
        field=field,
        field_result="VALID" if valid else "INVALID",
        touched=touched,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Field validation changed")


def log_submission(
    logger: FilteringBoundLogger,
    form: str,
    accepted: bool,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a submission attempt with standardized format.

    Args:
        logger: Structlog logger instance
        form: Name of the submitting form
        accepted: Whether the submission went through
        reason: Why it was accepted or blocked
        context: Additional context data
    """
    bound_logger = logger.bind(
        form=form,
        submission_result="ACCEPTED" if accepted else "BLOCKED",
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if accepted:
        bound_logger.info("Form submitted")
    else:
        bound_logger.warning("Form submission blocked")
