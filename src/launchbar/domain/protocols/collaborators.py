"""Host collaborator protocols.

The resolver never fetches directories, evaluates lookups or dispatches
anything by itself; the host supplies objects satisfying these protocols.
Lookup methods may answer synchronously with a list or asynchronously with
an awaitable resolving to a list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Optional, Protocol, Sequence, Union

if TYPE_CHECKING:
    from launchbar.core.launch_config import Choice, Interest, LaunchConfig, Option

__all__ = ["LookupResult", "OptionProvider", "HostDispatcher", "LaunchConfigProvider"]

LookupResult = Union[Sequence["Option"], Awaitable[Sequence["Option"]]]


class OptionProvider(Protocol):
    """Filters choice and interest lists by the typed token."""

    def filter_choice(self, choice: "Choice", token: str) -> LookupResult:
        """Return the options of ``choice`` matching ``token``."""
        ...

    def filter_interest(self, interest: "Interest", token: str) -> LookupResult:
        """Return the list entries of ``interest`` matching ``token``."""
        ...


class HostDispatcher(Protocol):
    """Side-effecting host operations triggered on commit."""

    def launch(self, url: str) -> None:
        ...

    def dispatch_intent(
        self,
        action: str,
        domain: Optional[str],
        sub_domain: Optional[str],
        payload: dict[str, Any],
    ) -> None:
        ...

    def dispatch_interest(
        self,
        topic: str,
        domain: Optional[str],
        sub_domain: Optional[str],
        body: Any,
    ) -> None:
        ...


class LaunchConfigProvider(Protocol):
    """Supplies the application directory and declarative configuration."""

    def fetch_launch_config(self) -> "LaunchConfig":
        ...
