"""
CandidateBar - shows the highlighted candidate or field option.
"""

from rich.text import Text
from textual.widgets import Static

from launchbar.application.resolver import Resolver


class CandidateBar(Static):
    """One-line summary of what Tab/Enter would commit."""

    def __init__(self, resolver: Resolver, **kwargs):
        super().__init__("", **kwargs)
        self.resolver = resolver

    def render_state(self) -> Text:
        resolver = self.resolver
        active = resolver.active
        if active is None:
            return Text("No matches", style="dim")

        text = Text()
        text.append(active.label, style="bold")
        hint = resolver.hint()
        if hint and hint != active.label:
            text.append(f" (+{hint})", style="dim")
        text.append(f"  [{resolver.active_group}]", style="cyan")
        if resolver.has_alternatives():
            text.append("  ↑/↓ more", style="dim italic")
        return text

    def refresh_state(self) -> None:
        self.update(self.render_state())
