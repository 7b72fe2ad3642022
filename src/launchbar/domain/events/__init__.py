"""Event system for decoupled component communication.

Example:
    ```python
    from launchbar.domain.events import EventBus, IntentDispatched

    event_bus = EventBus()

    def handle_intent(event: IntentDispatched):
        print(f"{event.action}: {event.payload}")

    event_bus.subscribe(IntentDispatched, handle_intent)
    ```
"""

from .bus import EventBus
from .types import (
    ApplicationLaunched,
    Event,
    IntentDispatched,
    InterestDispatched,
    ResolverRefreshed,
)

__all__ = [
    "EventBus",
    "Event",
    "ApplicationLaunched",
    "IntentDispatched",
    "InterestDispatched",
    "ResolverRefreshed",
]
