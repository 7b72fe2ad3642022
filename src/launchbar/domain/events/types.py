"""Event types for the event bus system.

The resolver publishes these events so the presentation layer can re-render
and the host can react to dispatches without direct coupling.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class ResolverRefreshed(Event):
    """Published after any mutation of the resolver state.

    Attributes:
        text: Input text the resolver now holds
        token: Current token extracted from the text
    """

    text: str
    token: str


@dataclass
class ApplicationLaunched(Event):
    """Published when the host is asked to launch an application."""

    url: str


@dataclass
class IntentDispatched(Event):
    """Published when an intent payload is dispatched to the host."""

    action: str
    domain: Optional[str]
    sub_domain: Optional[str]
    payload: dict[str, Any]


@dataclass
class InterestDispatched(Event):
    """Published when an interest is dispatched to the host."""

    topic: str
    domain: Optional[str]
    sub_domain: Optional[str]
    body: Any
