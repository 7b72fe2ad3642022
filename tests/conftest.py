"""Shared fixtures for resolver tests."""

import asyncio
from typing import Any, Optional

import pytest

from launchbar.application.resolver import Resolver
from launchbar.core.launch_config import LaunchConfig
from launchbar.domain.events import EventBus
from launchbar.infrastructure import StaticOptionProvider


TRADE_CONFIG = {
    "applications": [
        {"url": "https://mail.example.com", "title": "Mail"},
        {"url": "https://maps.example.com", "title": "Maps"},
        {"url": "https://bank.example.com", "title": "Bank"},
    ],
    "choices": [{"key": "pair", "list": "pairs"}],
    "interests": [
        {"topic": "instrument", "domain": "markets", "list": "instruments"},
    ],
    "intents": [
        {
            "triggers": ["BUY", "SELL"],
            "triggerField": "side",
            "action": "trade",
            "fields": [{"name": "pair", "type": "pair"}],
        }
    ],
    "lists": {
        "pairs": ["USD/GBP", "EUR/USD"],
        "instruments": [
            {"value": "BUND", "display": "Bund future", "body": {"ticker": "FGBL"}},
            {"value": "BTP", "display": "BTP future"},
        ],
    },
}


class RecordingDispatcher:
    """Host dispatcher double recording every call."""

    def __init__(self, fail: bool = False):
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail = fail

    def _record(self, name: str, *args: Any) -> None:
        if self.fail:
            raise RuntimeError(f"{name} unavailable")
        self.calls.append((name, args))

    def launch(self, url: str) -> None:
        self._record("launch", url)

    def dispatch_intent(self, action, domain, sub_domain, payload) -> None:
        self._record("dispatch_intent", action, domain, sub_domain, payload)

    def dispatch_interest(self, topic, domain, sub_domain, body) -> None:
        self._record("dispatch_interest", topic, domain, sub_domain, body)


class DelayedOptionProvider(StaticOptionProvider):
    """Answers lookups asynchronously after a per-token delay."""

    def __init__(self, lists, delays: Optional[dict[str, float]] = None):
        super().__init__(lists)
        self.delays = delays or {}

    def filter_choice(self, choice, token):
        return self._later(super().filter_choice(choice, token), token)

    def filter_interest(self, interest, token):
        return self._later(super().filter_interest(interest, token), token)

    async def _later(self, options, token):
        await asyncio.sleep(self.delays.get(token, 0))
        return options


def type_text(resolver: Resolver, text: str) -> None:
    """Feed ``text`` one keystroke at a time, appending to the current input."""
    current = resolver.text
    for char in text:
        current += char
        resolver.text_changed(current)


def backspace(resolver: Resolver, count: int = 1) -> None:
    current = resolver.text
    for _ in range(count):
        current = current[:-1]
        resolver.text_changed(current)


@pytest.fixture
def trade_config() -> LaunchConfig:
    return LaunchConfig(**TRADE_CONFIG)


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def resolver(trade_config, dispatcher, event_bus) -> Resolver:
    return Resolver(
        config=trade_config,
        provider=StaticOptionProvider(trade_config.lists),
        dispatcher=dispatcher,
        event_bus=event_bus,
    )
