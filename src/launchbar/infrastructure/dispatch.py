"""
Host dispatcher that announces dispatches on the event bus.
"""

from __future__ import annotations

from typing import Any, Optional

from launchbar.domain.events import (
    ApplicationLaunched,
    EventBus,
    IntentDispatched,
    InterestDispatched,
)
from launchbar.logger import get_logger

logger = get_logger("dispatch")


class EventBusDispatcher:
    """Publishes launches and dispatches as events for whoever hosts the resolver."""

    def __init__(self, event_bus: EventBus) -> None:
        self._event_bus = event_bus

    def launch(self, url: str) -> None:
        logger.debug(f"Publishing launch of {url!r}")
        self._event_bus.publish(ApplicationLaunched(url=url))

    def dispatch_intent(
        self,
        action: str,
        domain: Optional[str],
        sub_domain: Optional[str],
        payload: dict[str, Any],
    ) -> None:
        logger.debug(f"Publishing intent {action!r} ({domain}/{sub_domain})")
        self._event_bus.publish(
            IntentDispatched(action=action, domain=domain, sub_domain=sub_domain, payload=dict(payload))
        )

    def dispatch_interest(
        self,
        topic: str,
        domain: Optional[str],
        sub_domain: Optional[str],
        body: Any,
    ) -> None:
        logger.debug(f"Publishing interest {topic!r} ({domain}/{sub_domain})")
        self._event_bus.publish(InterestDispatched(topic=topic, domain=domain, sub_domain=sub_domain, body=body))
