"""Host-side collaborators shipped with launchbar."""

from .config_provider import FileLaunchConfigProvider
from .dispatch import EventBusDispatcher
from .static_options import StaticOptionProvider

__all__ = ["FileLaunchConfigProvider", "EventBusDispatcher", "StaticOptionProvider"]
