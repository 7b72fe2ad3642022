"""
Option provider backed by the lists of the launch configuration.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from launchbar.core.launch_config import Choice, Interest, Option
from launchbar.logger import get_logger

logger = get_logger("static_options")


class StaticOptionProvider:
    """Prefix-filters configured lists on ``display`` (falling back to ``value``)."""

    def __init__(self, lists: Mapping[str, Sequence[Option]]) -> None:
        self._lists = {key: list(options) for key, options in lists.items()}

    def _filter(self, list_key: str | None, token: str, ignore_case: bool) -> list[Option]:
        if list_key is None:
            return []
        options = self._lists.get(list_key)
        if options is None:
            logger.warning(f"Lookup list {list_key!r} is not configured")
            return []
        if ignore_case:
            lowered = token.lower()
            return [option for option in options if option.label.lower().startswith(lowered)]
        return [option for option in options if option.label.startswith(token)]

    def filter_choice(self, choice: Choice, token: str) -> list[Option]:
        return self._filter(choice.list_key, token, choice.ignore_case)

    def filter_interest(self, interest: Interest, token: str) -> list[Option]:
        # Interest lists always match case-insensitively
        return self._filter(interest.list_key, token, True)
