"""launchbar - incremental, keystroke-driven command resolver."""

__version__ = "0.1.0"
