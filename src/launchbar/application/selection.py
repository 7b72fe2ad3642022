"""
Grouped selection state with cyclic navigation.

Candidates (or field options) are held in named groups. Groups keep the
order in which their keys were first registered, even when a group is
emptied and later re-installed, and that order drives cycling across
groups. Items compare by their ``identity`` attribute.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, Protocol, Sequence, TypeVar

from launchbar.domain.types import AdvanceDirection
from launchbar.logger import get_logger

logger = get_logger("selection")


class Identifiable(Protocol):
    @property
    def identity(self) -> Any: ...


T = TypeVar("T", bound=Identifiable)


class SelectionState(Generic[T]):
    """Named candidate groups plus the active group key and active item.

    Invariant: ``active_key`` is either ``None`` (and ``active`` too) or the
    key of a non-empty group containing ``active``.
    """

    def __init__(self, order: Iterable[str] = ()) -> None:
        self._order: list[str] = []
        self._groups: dict[str, list[T]] = {}
        self.active_key: Optional[str] = None
        self.active: Optional[T] = None
        for key in order:
            self.register(key)

    def register(self, key: str) -> None:
        """Reserve a position for ``key`` in the cycling order."""
        if key not in self._order:
            self._order.append(key)

    def keys(self) -> list[str]:
        """Keys of the non-empty groups in registration order."""
        return [key for key in self._order if key in self._groups]

    def get(self, key: str) -> list[T]:
        return list(self._groups.get(key, ()))

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __iter__(self) -> Iterator[tuple[str, list[T]]]:
        for key in self.keys():
            yield key, list(self._groups[key])

    def __len__(self) -> int:
        """Total number of items across all groups."""
        return sum(len(items) for items in self._groups.values())

    @property
    def is_empty(self) -> bool:
        return not self._groups

    def has_alternatives(self) -> bool:
        """True when the active group offers more than one item."""
        if self.active_key is None:
            return False
        return len(self._groups.get(self.active_key, ())) > 1

    def install(self, key: str, items: Sequence[T]) -> None:
        """Install (or remove, when ``items`` is empty) the group ``key``.

        A non-empty group becomes active, on its first item, when nothing is
        active yet or when it was already the active group.
        """
        if not items:
            self.remove(key)
            return

        self.register(key)
        self._groups[key] = list(items)
        if self.active_key is None or self.active_key == key:
            self.active_key = key
            self.active = self._groups[key][0]
        logger.debug(f"Installed group {key!r} with {len(items)} item(s)")

    def remove(self, key: str) -> None:
        """Remove group ``key``; an active removed group hands over to its neighbour."""
        if key not in self._groups:
            return
        del self._groups[key]
        logger.debug(f"Removed group {key!r}")
        if self.active_key == key:
            self.active_key = None
            self.active = None
            neighbour = self._adjacent_key(key, AdvanceDirection.NEXT)
            if neighbour is not None:
                self._activate_boundary(neighbour, AdvanceDirection.NEXT)

    def clear(self) -> None:
        """Drop every group and the active selection, keeping the registration order."""
        self._groups.clear()
        self.active_key = None
        self.active = None

    def select(self, key: str, item: T) -> None:
        """Make ``item`` of group ``key`` active."""
        if self._index_of(self._groups.get(key, []), item) == -1:
            raise KeyError(f"{item!r} is not a member of group {key!r}")
        self.active_key = key
        self.active = item

    def advance(self, direction: AdvanceDirection) -> Optional[T]:
        """Move to the adjacent item, spilling into the adjacent group at a boundary."""
        if self.active_key is not None and self.active_key in self._groups:
            items = self._groups[self.active_key]
            index = self._index_of(items, self.active)
            if index != -1:
                if direction is AdvanceDirection.NEXT and index < len(items) - 1:
                    self.active = items[index + 1]
                    return self.active
                if direction is AdvanceDirection.PREVIOUS and index > 0:
                    self.active = items[index - 1]
                    return self.active
            return self._jump(direction)
        return self._select_first()

    def advance_group(self, direction: AdvanceDirection) -> Optional[T]:
        """Jump straight to the boundary item of the adjacent group."""
        if self.active_key is not None and self.active_key in self._groups:
            return self._jump(direction)
        return self._select_first()

    def _jump(self, direction: AdvanceDirection) -> Optional[T]:
        assert self.active_key is not None
        key = self._adjacent_key(self.active_key, direction)
        if key is not None:
            self._activate_boundary(key, direction)
        return self.active

    def _select_first(self) -> Optional[T]:
        for key in self.keys():
            self._activate_boundary(key, AdvanceDirection.NEXT)
            return self.active
        return None

    def _activate_boundary(self, key: str, direction: AdvanceDirection) -> None:
        items = self._groups[key]
        self.active_key = key
        self.active = items[0] if direction is AdvanceDirection.NEXT else items[-1]

    def _adjacent_key(self, key: str, direction: AdvanceDirection) -> Optional[str]:
        """Next non-empty group after ``key`` in registration order, wrapping around."""
        if key not in self._order:
            keys = self.keys()
            return keys[0] if keys else None

        start = self._order.index(key)
        step = 1 if direction is AdvanceDirection.NEXT else -1
        count = len(self._order)
        for offset in range(1, count + 1):
            candidate = self._order[(start + step * offset) % count]
            if candidate in self._groups:
                return candidate
        return None

    @staticmethod
    def _index_of(items: Sequence[T], item: Optional[T]) -> int:
        if item is None:
            return -1
        for index, element in enumerate(items):
            if element.identity == item.identity:
                return index
        return -1
