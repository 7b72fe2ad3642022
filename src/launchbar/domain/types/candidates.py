"""Candidate domain types.

A candidate is one selectable completion offered while the user is still
choosing what to do: an application to launch, an intent (action) to fill
in, or an interest topic. Each variant carries an explicit ``kind`` so the
resolver never has to guess the variant from the attributes present.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Optional, Union

__all__ = [
    "AdvanceDirection",
    "CandidateKind",
    "AppCandidate",
    "ActionCandidate",
    "TopicCandidate",
    "Candidate",
    "APPS_GROUP",
]

APPS_GROUP = "APPS"
"""Group key under which application candidates are installed."""


class AdvanceDirection(Enum):
    """Direction used when cycling through candidates."""

    NEXT = "next"
    PREVIOUS = "previous"


class CandidateKind(str, Enum):
    """Discriminant of the candidate variants."""

    APP = "app"
    ACTION = "action"
    TOPIC = "topic"


@dataclass(frozen=True, slots=True)
class AppCandidate:
    """A launchable application."""

    url: str
    title: Optional[str] = None
    kind: CandidateKind = field(default=CandidateKind.APP, init=False)

    @property
    def identity(self) -> Hashable:
        return (self.kind, self.url)

    @property
    def label(self) -> str:
        return self.title if self.title is not None else self.url


@dataclass(frozen=True, slots=True)
class ActionCandidate:
    """An intent whose trigger matched the current token.

    ``matched_trigger`` is the specific trigger string that matched, not the
    full trigger list; it becomes the input text when the action is committed.
    """

    action: str
    matched_trigger: str
    domain: Optional[str] = None
    sub_domain: Optional[str] = None
    kind: CandidateKind = field(default=CandidateKind.ACTION, init=False)

    @property
    def identity(self) -> Hashable:
        return (self.kind, self.action, self.domain, self.sub_domain, self.matched_trigger)

    @property
    def label(self) -> str:
        return self.matched_trigger


@dataclass(frozen=True, slots=True)
class TopicCandidate:
    """An entry of an interest's lookup list."""

    topic: str
    matched_text: str
    domain: Optional[str] = None
    sub_domain: Optional[str] = None
    body: Optional[Any] = field(default=None, compare=False)
    kind: CandidateKind = field(default=CandidateKind.TOPIC, init=False)

    @property
    def identity(self) -> Hashable:
        return (self.kind, self.topic, self.domain, self.sub_domain, self.matched_text)

    @property
    def label(self) -> str:
        return self.matched_text


Candidate = Union[AppCandidate, ActionCandidate, TopicCandidate]
