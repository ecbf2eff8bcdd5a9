"""
Touched-field tracking for form presentation timing.

A field is "touched" once the user has interacted with it. Touched flags
only decide when a field's error text and validity icon are shown; they
never take part in validity itself, so they live in this side table
rather than on the form state.
"""

from enum import Enum
from typing import Iterable, Union

import structlog

from ..errors import UnknownFieldError

logger = structlog.get_logger(__name__)

FieldKey = Union[str, Enum]


def _key(field: FieldKey) -> str:
    if isinstance(field, Enum):
        return str(field.value)
    return field


class TouchedFields:
    """Per-field touched flags keyed by field name."""

    def __init__(self, fields: Iterable[FieldKey]):
        self._flags: dict[str, bool] = {_key(f): False for f in fields}

    def _check(self, field: FieldKey) -> str:
        key = _key(field)
        if key not in self._flags:
            raise UnknownFieldError(
                f"Unknown field '{key}'",
                field=key,
                known_fields=sorted(self._flags),
            )
        return key

    def mark(self, field: FieldKey) -> bool:
        """
        Mark a field touched.

        Returns:
            True if the field was untouched before this call
        """
        key = self._check(field)
        if self._flags[key]:
            return False
        self._flags[key] = True
        logger.debug("Field touched", field=key)
        return True

    def is_touched(self, field: FieldKey) -> bool:
        return self._flags[self._check(field)]

    def reset(self) -> None:
        """Clear every flag."""
        for key in self._flags:
            self._flags[key] = False

    def snapshot(self) -> dict[str, bool]:
        return dict(self._flags)
