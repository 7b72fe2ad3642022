"""
CommandInput - single-line input wired to the resolver.
"""

from textual.binding import Binding
from textual.widgets import Input

from launchbar.application.resolver import CommitOutcome, Resolver
from launchbar.domain.types import AdvanceDirection
from launchbar.logger import get_logger

logger = get_logger("command_input")


class CommandInput(Input):
    """
    Input field forwarding navigation and completion keys to the resolver.

    Text changes and Enter are delivered through the standard ``Input.Changed``
    and ``Input.Submitted`` messages, which the application handles.
    """

    BINDINGS = [
        Binding("tab", "complete", "Complete", show=False, priority=True),
        Binding("down", "advance('next')", "Next", show=False),
        Binding("up", "advance('previous')", "Previous", show=False),
        Binding("shift+down", "advance_group('next')", "Next group", show=False),
        Binding("shift+up", "advance_group('previous')", "Previous group", show=False),
    ]

    def __init__(self, resolver: Resolver, **kwargs):
        self.resolver = resolver
        super().__init__(
            placeholder="Type to search",
            **kwargs,
        )

    def sync_from_resolver(self) -> None:
        """Mirror the resolver text into the field with the cursor at the end."""
        text = self.resolver.text
        if self.value != text:
            self.value = text
        self.cursor_position = len(text)

    def action_complete(self) -> None:
        outcome = self.resolver.complete()
        logger.debug(f"Tab completion outcome: {outcome.value}")
        if outcome is not CommitOutcome.NOTHING:
            self.sync_from_resolver()

    def action_advance(self, direction: str) -> None:
        self.resolver.advance(AdvanceDirection(direction))

    def action_advance_group(self, direction: str) -> None:
        self.resolver.advance_group(AdvanceDirection(direction))
