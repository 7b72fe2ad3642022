"""
Position ledger for bound fields.

Each committed field value is recorded at the text length reached right
after its literal was appended. Shrinking the text to (or below) a recorded
position unbinds that field again, which is how backspacing undoes field
bindings without re-parsing the whole input.
"""

from __future__ import annotations

from typing import Any, Optional

from launchbar.domain.types import BoundField
from launchbar.logger import get_logger

logger = get_logger("ledger")


class PositionLedger:
    """Maps text positions to the fields bound there."""

    def __init__(self) -> None:
        self._entries: dict[int, BoundField] = {}
        self.max_position: Optional[int] = None

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def bound_names(self) -> set[str]:
        """Names of the fields currently bound."""
        return {entry.name for entry in self._entries.values()}

    def entries(self) -> list[tuple[int, BoundField]]:
        return sorted(self._entries.items())

    def bind(self, position: int, name: str, text: str, value: Any = None) -> None:
        """Record ``name`` as bound to ``text`` ending at ``position``."""
        self._entries[position] = BoundField(name=name, text=text, value=text if value is None else value)
        self.max_position = position if self.max_position is None else max(self.max_position, position)
        logger.debug(f"Bound field {name!r} to {text!r} at position {position}")

    def unbind_latest(self) -> Optional[BoundField]:
        """Remove the entry at ``max_position`` and recompute the maximum."""
        if self.max_position is None:
            return None
        # A maximum without an entry is treated as already unbound
        entry = self._entries.pop(self.max_position, None)
        self.max_position = max(self._entries) if self._entries else None
        if entry is not None:
            logger.debug(f"Unbound field {entry.name!r}")
        return entry

    def truncate(self, length: int) -> list[BoundField]:
        """Unbind every field whose recorded position is at or beyond ``length``."""
        removed: list[BoundField] = []
        while self.max_position is not None and length <= self.max_position:
            entry = self.unbind_latest()
            if entry is not None:
                removed.append(entry)
        return removed

    def bindings(self) -> dict[int, BoundField]:
        """Bound fields keyed by the text position they end at."""
        return dict(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self.max_position = None
