"""
Candidate sources feeding the selection state.

Each source owns one or more groups of the candidate ``SelectionState`` and
re-installs them for every new token: applications under ``APPS``, one
group per intent keyed by its action, one group per interest keyed by its
topic. Empty results remove the group.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence

from launchbar.application.selection import SelectionState
from launchbar.core.launch_config import Application, Intent, Interest, Option
from launchbar.domain.protocols import OptionProvider
from launchbar.domain.types import (
    APPS_GROUP,
    ActionCandidate,
    AppCandidate,
    Candidate,
    TopicCandidate,
)
from launchbar.logger import get_logger

logger = get_logger("sources")

Lookup = Callable[[str, Callable[[], Any], Callable[[Sequence[Option]], None]], None]
"""``lookup(group, fetch, apply)`` as provided by the resolver."""


def starts_with(text: str, token: str, ignore_case: bool = True) -> bool:
    if ignore_case:
        return text.lower().startswith(token.lower())
    return text.startswith(token)


class CandidateSource(Protocol):
    """Contract implemented by all candidate sources."""

    def group_keys(self) -> list[str]:
        """Keys of the groups this source may install, in registration order."""
        ...

    def refresh(self, token: str, state: SelectionState[Candidate]) -> None:
        """Re-install this source's groups for ``token``."""
        ...


class ApplicationSource(CandidateSource):
    """Matches the application directory by title prefix."""

    def __init__(self, applications: Sequence[Application]) -> None:
        self._applications = list(applications)

    def group_keys(self) -> list[str]:
        return [APPS_GROUP]

    def refresh(self, token: str, state: SelectionState[Candidate]) -> None:
        matches = [
            AppCandidate(url=app.url, title=app.title)
            for app in self._applications
            if starts_with(app.label, token)
        ]
        logger.debug(f"ApplicationSource token={token!r} matches={len(matches)}")
        state.install(APPS_GROUP, matches)


class ActionSource(CandidateSource):
    """Matches intents whose trigger words start with the token."""

    def __init__(self, intents: Sequence[Intent]) -> None:
        self._intents = list(intents)

    def group_keys(self) -> list[str]:
        return [intent.action for intent in self._intents]

    def refresh(self, token: str, state: SelectionState[Candidate]) -> None:
        for intent in self._intents:
            trigger = self.matched_trigger(intent, token)
            if trigger is None:
                state.install(intent.action, [])
                continue
            candidate = ActionCandidate(
                action=intent.action,
                matched_trigger=trigger,
                domain=intent.domain,
                sub_domain=intent.sub_domain,
            )
            logger.debug(f"ActionSource token={token!r} matched trigger {trigger!r} of {intent.action!r}")
            state.install(intent.action, [candidate])

    @staticmethod
    def matched_trigger(intent: Intent, token: str) -> Optional[str]:
        """First trigger of ``intent`` starting with ``token``, if any."""
        for trigger in intent.triggers:
            if starts_with(trigger, token, intent.ignore_case):
                return trigger
        return None


class TopicSource(CandidateSource):
    """Matches interest lookup lists through the option provider."""

    def __init__(
        self,
        interests: Sequence[Interest],
        provider: OptionProvider,
        lookup: Lookup,
    ) -> None:
        self._interests = list(interests)
        self._provider = provider
        self._lookup = lookup

    def group_keys(self) -> list[str]:
        return [interest.topic for interest in self._interests]

    def refresh(self, token: str, state: SelectionState[Candidate]) -> None:
        for interest in self._interests:
            self._lookup(
                f"topic:{interest.topic}",
                lambda interest=interest: self._provider.filter_interest(interest, token),
                lambda options, interest=interest: self._install(interest, options, state),
            )

    @staticmethod
    def _install(interest: Interest, options: Sequence[Option], state: SelectionState[Candidate]) -> None:
        candidates = [
            TopicCandidate(
                topic=interest.topic,
                matched_text=option.value,
                domain=interest.domain,
                sub_domain=interest.sub_domain,
                body=option.body if option.body is not None else interest.body,
            )
            for option in options
        ]
        state.install(interest.topic, candidates)
