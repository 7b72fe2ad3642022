"""Domain protocols - interfaces of the host collaborators."""

from launchbar.domain.protocols.collaborators import (
    HostDispatcher,
    LaunchConfigProvider,
    LookupResult,
    OptionProvider,
)

__all__ = [
    "HostDispatcher",
    "LaunchConfigProvider",
    "LookupResult",
    "OptionProvider",
]
