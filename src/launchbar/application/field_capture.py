"""
Field capture once an intent or interest has been committed.

For each field not bound yet, the current token is turned into zero or one
``SingleValue`` (primitive fields) or filtered against the field's choice
list (enumerated fields). Results are installed as one option group per
field, keyed by the field name.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any, Collection, Optional, Sequence

from launchbar.application.expressions import ExpressionRegistry
from launchbar.application.selection import SelectionState
from launchbar.application.sources import Lookup
from launchbar.core.launch_config import FieldDefinition, LaunchConfig, Option
from launchbar.domain.protocols import OptionProvider
from launchbar.domain.types import FieldValue, OptionValue, SingleValue
from launchbar.logger import get_logger

logger = get_logger("field_capture")


def parse_number(text: str) -> int | float:
    """Parse ``text`` as an int or a finite float."""
    try:
        return int(text)
    except ValueError:
        value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text!r} is not a finite number")
    return value


def parse_date(text: str, formats: Optional[Sequence[str]] = None) -> datetime:
    """Parse ``text`` with the first matching ``strptime`` format, or as ISO 8601."""
    if not formats:
        return datetime.fromisoformat(text)
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"{text!r} matches none of the date formats {list(formats)}")


class FieldCapture:
    """Builds option groups for the unbound fields of the committed action."""

    def __init__(
        self,
        config: LaunchConfig,
        provider: OptionProvider,
        expressions: ExpressionRegistry,
        lookup: Lookup,
    ) -> None:
        self._config = config
        self._provider = provider
        self._expressions = expressions
        self._lookup = lookup

    def refresh(
        self,
        fields: Sequence[FieldDefinition],
        token: str,
        bound: Collection[str],
        state: SelectionState[FieldValue],
    ) -> None:
        for field in fields:
            state.register(field.name)
            if field.name in bound:
                state.remove(field.name)
                continue

            if field.is_primitive():
                value = self.capture(field, token)
                state.install(field.name, [value] if value is not None else [])
                continue

            choice = self._config.find_choice(field.type)
            if choice is None:
                logger.warning(f"Field {field.name!r} references unknown choice {field.type!r}")
                state.remove(field.name)
                continue

            self._lookup(
                f"field:{field.name}",
                lambda choice=choice: self._provider.filter_choice(choice, token),
                lambda options, field=field: self._install_options(field, options, state),
            )

    @staticmethod
    def _install_options(
        field: FieldDefinition,
        options: Sequence[Option],
        state: SelectionState[FieldValue],
    ) -> None:
        values = [OptionValue(value=option.value, display=option.display, body=option.body) for option in options]
        logger.debug(f"Field {field.name!r} offers {len(values)} option(s)")
        state.install(field.name, values)

    def capture(self, field: FieldDefinition, token: str) -> Optional[SingleValue]:
        """Validate ``token`` for a primitive field and build its value."""
        if not token or not self.accepts(field, token):
            return None

        if field.value_expression:
            ok, value = self._expressions.apply(field.value_expression, token)
            if not ok:
                return None
        else:
            value = self._coerce(field, token)
        return SingleValue(value=value, type=field.type.lower(), text=token)

    def accepts(self, field: FieldDefinition, token: str) -> bool:
        """Check ``token`` with the first configured validator.

        A match pattern takes precedence over a match expression, which in
        turn takes precedence over the built-in check for the field type.
        """
        if field.match_pattern:
            try:
                return re.search(field.match_pattern, token) is not None
            except re.error:
                logger.exception(f"Invalid match pattern {field.match_pattern!r} on field {field.name!r}")
                return False
        if field.match_expression:
            return self._expressions.matches(field.match_expression, token)
        return self._type_check(field, token)

    @staticmethod
    def _type_check(field: FieldDefinition, token: str) -> bool:
        kind = field.type.lower()
        try:
            if kind == "number":
                parse_number(token)
            elif kind == "date":
                parse_date(token, field.date_formats)
        except ValueError:
            return False
        return len(token) > 0

    @staticmethod
    def _coerce(field: FieldDefinition, token: str) -> Any:
        kind = field.type.lower()
        try:
            if kind == "number":
                return parse_number(token)
            if kind == "date":
                return parse_date(token, field.date_formats)
        except ValueError:
            # A custom pattern accepted text the built-in parser does not understand
            return token
        return token
