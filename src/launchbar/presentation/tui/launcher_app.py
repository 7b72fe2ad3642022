"""
LauncherApp - Textual shell around the resolver.
"""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Input

from launchbar.application.resolver import Resolver
from launchbar.domain.events import (
    ApplicationLaunched,
    IntentDispatched,
    InterestDispatched,
    ResolverRefreshed,
)
from launchbar.logger import get_logger
from launchbar.presentation.widgets import CandidateBar, CommandInput

logger = get_logger("launcher_tui")


class LauncherApp(App):
    """
    The launchbar TUI.

    Layout:
    ┌──────────────────────────────┐
    │            Header            │
    ├──────────────────────────────┤
    │         Command input        │
    │         Candidate bar        │
    ├──────────────────────────────┤
    │            Footer            │
    └──────────────────────────────┘
    """

    TITLE = "launchbar"
    SUB_TITLE = "Type to search, Tab to complete, Enter to run"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("escape", "clear_input", "Clear", priority=True),
    ]

    def __init__(self, resolver: Resolver, **kwargs):
        super().__init__(**kwargs)
        self.resolver = resolver
        self.dispatched: list[object] = []

    def compose(self) -> ComposeResult:
        yield Header()
        yield CommandInput(self.resolver, id="command-input")
        yield CandidateBar(self.resolver, id="candidate-bar")
        yield Footer()

    @property
    def command_input(self) -> CommandInput:
        return self.query_one("#command-input", CommandInput)

    @property
    def candidate_bar(self) -> CandidateBar:
        return self.query_one("#candidate-bar", CandidateBar)

    def on_mount(self) -> None:
        bus = self.resolver.event_bus
        bus.subscribe(ResolverRefreshed, self._on_resolver_refreshed)
        bus.subscribe(ApplicationLaunched, self._on_dispatched)
        bus.subscribe(IntentDispatched, self._on_dispatched)
        bus.subscribe(InterestDispatched, self._on_dispatched)
        self.command_input.focus()
        self.candidate_bar.refresh_state()
        logger.info("Launcher TUI mounted")

    def on_unmount(self) -> None:
        bus = self.resolver.event_bus
        bus.unsubscribe(ResolverRefreshed, self._on_resolver_refreshed)
        bus.unsubscribe(ApplicationLaunched, self._on_dispatched)
        bus.unsubscribe(IntentDispatched, self._on_dispatched)
        bus.unsubscribe(InterestDispatched, self._on_dispatched)

    def on_input_changed(self, event: Input.Changed) -> None:
        self.resolver.text_changed(event.value, event.input.cursor_position)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        outcome = self.resolver.commit()
        logger.debug(f"Enter outcome: {outcome.value}")
        self.command_input.sync_from_resolver()

    def action_clear_input(self) -> None:
        self.resolver.reset()
        self.command_input.sync_from_resolver()

    def _on_resolver_refreshed(self, event: ResolverRefreshed) -> None:
        self.candidate_bar.refresh_state()

    def _on_dispatched(self, event) -> None:
        self.dispatched.append(event)
        if isinstance(event, ApplicationLaunched):
            message = f"Launching {event.url}"
        elif isinstance(event, IntentDispatched):
            message = f"{event.action}: {event.payload}"
        else:
            message = f"{event.topic}: {event.body}"
        self.notify(message, title="Dispatched")
