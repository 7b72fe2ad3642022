"""
Payload assembly for committed intents.
"""

from __future__ import annotations

from typing import Any, Mapping

from launchbar.core.launch_config import Intent
from launchbar.domain.types import BoundField


def build_payload(text: str, intent: Intent, bindings: Mapping[int, BoundField]) -> dict[str, Any]:
    """Rebuild the intent payload from the input text.

    Tokens before the first trigger word (compared case-insensitively) are
    ignored. The trigger itself fills ``intent.trigger_field`` when one is
    designated; every later token that ends at a bound position with the
    bound literal contributes that field's value.

    Args:
        text: Full input text
        intent: The committed intent
        bindings: Bound fields keyed by the text position they end at

    Returns:
        Mapping of field name to captured value
    """
    triggers = {trigger.lower() for trigger in intent.triggers}
    payload: dict[str, Any] = {}
    started = False
    start = 0

    for token in text.split(" "):
        end = start + len(token)
        start = end + 1
        if not token:
            continue
        if not started:
            if token.lower() in triggers:
                started = True
                if intent.trigger_field:
                    payload[intent.trigger_field] = token
            continue

        bound = bindings.get(end)
        if bound is not None and bound.text == token:
            payload[bound.name] = bound.value

    return payload
