"""
Lookup scheduling for synchronous and asynchronous option providers.

Every lookup is tagged with a per-group, monotonically increasing request
id. A response is applied only if its id is still the latest issued for its
group and the caller's context is still current; anything else is a stale
response and is dropped.
"""

from __future__ import annotations

import asyncio
import inspect
import itertools
from typing import Any, Awaitable, Callable, Optional, Sequence

from launchbar.logger import get_logger

logger = get_logger("lookups")


class LookupSequencer:
    """Issues request ids and answers whether a given id is still the latest."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest: dict[str, int] = {}

    def issue(self, group: str) -> int:
        request_id = next(self._counter)
        self._latest[group] = request_id
        return request_id

    def is_current(self, group: str, request_id: int) -> bool:
        return self._latest.get(group) == request_id

    def invalidate(self, group: Optional[str] = None) -> None:
        """Make every outstanding request (of ``group``, or of all groups) stale."""
        if group is None:
            self._latest.clear()
        else:
            self._latest.pop(group, None)


class LookupRunner:
    """Runs provider lookups and routes their results back to the caller.

    Synchronous results are applied immediately. Awaitable results are
    scheduled on the running event loop; there is no timeout, so a lookup
    that never resolves simply leaves the previous state in place.
    """

    def __init__(self) -> None:
        self.sequencer = LookupSequencer()
        self._pending: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run(
        self,
        group: str,
        fetch: Callable[[], Any],
        apply: Callable[[Sequence[Any]], None],
        is_context_current: Callable[[], bool] = lambda: True,
    ) -> None:
        """Fetch options for ``group`` and hand them to ``apply``.

        Failures raised by ``fetch`` (or by the awaitable it returns) are
        logged and leave the existing state untouched.
        """
        request_id = self.sequencer.issue(group)
        try:
            result = fetch()
        except Exception:
            logger.exception(f"Lookup for group {group!r} failed")
            return

        if not inspect.isawaitable(result):
            apply(list(result or ()))
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(f"Asynchronous lookup for group {group!r} issued without a running loop; ignoring")
            if inspect.iscoroutine(result):
                result.close()
            return

        task = loop.create_task(self._await(group, request_id, result, apply, is_context_current))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _await(
        self,
        group: str,
        request_id: int,
        result: Awaitable[Sequence[Any]],
        apply: Callable[[Sequence[Any]], None],
        is_context_current: Callable[[], bool],
    ) -> None:
        try:
            options = await result
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(f"Asynchronous lookup for group {group!r} failed")
            return

        if not self.sequencer.is_current(group, request_id):
            logger.warning(f"Discarding stale lookup response #{request_id} for group {group!r}")
            return
        if not is_context_current():
            logger.warning(f"Discarding lookup response #{request_id} for group {group!r}: context changed")
            return
        apply(list(options or ()))

    async def drain(self) -> None:
        """Wait for every scheduled lookup to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def cancel_all(self) -> None:
        """Cancel outstanding lookups and mark their responses stale."""
        self.sequencer.invalidate()
        for task in list(self._pending):
            task.cancel()
