"""
launchbar presentation layer - the Textual shell around the resolver.

Rendering only: widgets forward keystrokes to the resolver and re-render
when it publishes ``ResolverRefreshed``.
"""

from .tui import LauncherApp

__all__ = ["LauncherApp"]
