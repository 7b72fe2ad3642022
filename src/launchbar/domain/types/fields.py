"""Field value domain types.

Once an intent or interest is committed, the resolver offers values for its
fields. Enumerated fields offer ``OptionValue`` entries taken from a choice
list; primitive fields (number, string, date) offer a single synthesised
``SingleValue`` built from the typed token.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

__all__ = ["OptionValue", "SingleValue", "FieldValue", "BoundField"]


@dataclass(frozen=True, slots=True)
class OptionValue:
    """An enumerated option offered for a field."""

    value: str
    display: Optional[str] = None
    body: Optional[Any] = None

    @property
    def identity(self) -> Any:
        return self.value

    @property
    def label(self) -> str:
        return self.display if self.display is not None else self.value

    @property
    def text(self) -> str:
        """Text appended to the input when the option is committed."""
        return self.value


@dataclass(frozen=True, slots=True)
class SingleValue:
    """A value synthesised from the typed token for a primitive field.

    ``value`` holds the coerced value (number, datetime, transform result)
    while ``text`` keeps the literal token that produced it.
    """

    value: Any
    type: str
    text: str

    @property
    def identity(self) -> Any:
        return self.value

    @property
    def label(self) -> str:
        return self.text


FieldValue = Union[OptionValue, SingleValue]


@dataclass(frozen=True, slots=True)
class BoundField:
    """A payload key bound to the literal token that satisfied it."""

    name: str
    text: str
    value: Any
