"""Textual user interface for launchbar."""

from .launcher_app import LauncherApp

__all__ = ["LauncherApp"]
