"""
Keystroke-driven command resolver.

The resolver owns a single ``ResolverState`` and is the only thing allowed
to mutate it. The input-handling shell forwards three kinds of input:

- text changes (``text_changed``), which re-tokenize and refresh either the
  candidate groups or, once an intent/interest is committed, the field
  option groups;
- navigation (``advance`` / ``advance_group``), which cycles the active
  item of whichever state is currently in use;
- commits (``complete`` on Tab, ``commit`` on Enter).

After every mutation a ``ResolverRefreshed`` event is published so the shell
can re-render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from launchbar.application.expressions import ExpressionRegistry
from launchbar.application.field_capture import FieldCapture
from launchbar.application.ledger import PositionLedger
from launchbar.application.lookups import LookupRunner
from launchbar.application.payload import build_payload
from launchbar.application.selection import SelectionState
from launchbar.application.sources import (
    ActionSource,
    ApplicationSource,
    CandidateSource,
    TopicSource,
)
from launchbar.application.tokenizer import extract_token, last_space_boundary
from launchbar.core.launch_config import Intent, LaunchConfig, Option
from launchbar.domain.events import EventBus, ResolverRefreshed
from launchbar.domain.protocols import HostDispatcher, OptionProvider
from launchbar.domain.types import (
    ActionCandidate,
    AdvanceDirection,
    AppCandidate,
    Candidate,
    FieldValue,
    SingleValue,
    TopicCandidate,
)
from launchbar.logger import get_logger

logger = get_logger("resolver")


class CommitOutcome(Enum):
    """What a Tab or Enter press ended up doing."""

    NOTHING = "nothing"
    ACTION_SELECTED = "action_selected"
    TOPIC_SELECTED = "topic_selected"
    FIELD_BOUND = "field_bound"
    APP_LAUNCHED = "app_launched"
    INTENT_DISPATCHED = "intent_dispatched"
    INTEREST_DISPATCHED = "interest_dispatched"


@dataclass
class ResolverState:
    """Everything the resolver knows about the current input session."""

    candidates: SelectionState[Candidate]
    options: SelectionState[FieldValue] = field(default_factory=SelectionState)
    text: str = ""
    token: str = ""
    intent: Optional[Intent] = None
    interest: Optional[TopicCandidate] = None
    ledger: PositionLedger = field(default_factory=PositionLedger)
    selection_position: Optional[int] = None

    @property
    def max_position(self) -> Optional[int]:
        return self.ledger.max_position

    @property
    def bound_fields(self) -> set[str]:
        return self.ledger.bound_names

    @property
    def is_committed(self) -> bool:
        """True once an intent or interest has been chosen."""
        return self.intent is not None or self.interest is not None


def completion_hint(item: Candidate | FieldValue | None, token: str) -> str:
    """Remaining text of ``item`` beyond the typed ``token``.

    Single values show their full text; other items show their label with
    the typed prefix removed (or the whole label when it does not start with
    the token).
    """
    if item is None:
        return ""
    if isinstance(item, SingleValue):
        return item.text
    label = item.label
    if token and label.lower().startswith(token.lower()):
        return label[len(token):]
    return label


class Resolver:
    """Owns the resolver state and applies keystrokes to it."""

    def __init__(
        self,
        config: LaunchConfig,
        provider: OptionProvider,
        dispatcher: HostDispatcher,
        expressions: Optional[ExpressionRegistry] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._config = config
        self._dispatcher = dispatcher
        self._event_bus = event_bus or EventBus()
        self._runner = LookupRunner()
        self._context = 0
        self._refreshing = False

        self._sources: list[CandidateSource] = [
            ApplicationSource(config.applications),
            ActionSource(config.intents),
            TopicSource(config.interests, provider, self._lookup),
        ]
        self._fields = FieldCapture(
            config,
            provider,
            expressions or ExpressionRegistry.with_builtins(),
            self._lookup,
        )
        self.state = self._new_state()

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def text(self) -> str:
        return self.state.text

    @property
    def token(self) -> str:
        return self.state.token

    def _new_state(self) -> ResolverState:
        order = [key for source in self._sources for key in source.group_keys()]
        return ResolverState(candidates=SelectionState(order))

    def _navigable(self) -> SelectionState[Any]:
        return self.state.options if self.state.is_committed else self.state.candidates

    @property
    def active(self) -> Candidate | FieldValue | None:
        """The highlighted candidate, or highlighted field option once committed."""
        return self._navigable().active

    @property
    def active_group(self) -> Optional[str]:
        return self._navigable().active_key

    def has_alternatives(self) -> bool:
        return self._navigable().has_alternatives()

    def hint(self) -> str:
        return completion_hint(self.active, self.state.token)

    # ------------------------------------------------------------------
    # Text changes
    # ------------------------------------------------------------------

    def text_changed(self, text: str, cursor_position: Optional[int] = None) -> None:
        """Apply a new input text (and cursor position) to the state."""
        if text == self.state.text:
            return
        if not text:
            self.reset()
            return

        self.state.text = text
        self._reconcile_positions(len(text))
        self.state.token = extract_token(text, cursor_position)
        logger.debug(f"Text changed: text={text!r} token={self.state.token!r}")
        self._refresh_groups()
        self._publish()

    def _reconcile_positions(self, length: int) -> None:
        state = self.state
        if state.selection_position is not None and length <= state.selection_position:
            logger.debug("Text shrank past the committed selection; clearing it")
            self._context += 1
            state.intent = None
            state.interest = None
            state.selection_position = None
            state.ledger.clear()
            state.options = SelectionState()
        elif state.max_position is not None and length <= state.max_position:
            for entry in state.ledger.truncate(length):
                logger.debug(f"Unbound field {entry.name!r} after text shrank to {length}")

    def _refresh_groups(self) -> None:
        state = self.state
        self._refreshing = True
        try:
            if state.is_committed:
                state.candidates.clear()
                fields = state.intent.fields if state.intent is not None else []
                self._fields.refresh(fields, state.token, state.bound_fields, state.options)
            else:
                state.options.clear()
                if not state.token:
                    state.candidates.clear()
                    return
                for source in self._sources:
                    source.refresh(state.token, state.candidates)
        finally:
            self._refreshing = False

    def _lookup(
        self,
        group: str,
        fetch: Callable[[], Any],
        apply: Callable[[Sequence[Option]], None],
    ) -> None:
        context = self._context
        text = self.state.text

        def is_current() -> bool:
            return self._context == context and self.state.text == text

        def apply_and_publish(options: Sequence[Option]) -> None:
            apply(options)
            if not self._refreshing:
                self._publish()

        self._runner.run(group, fetch, apply_and_publish, is_current)

    async def wait_for_lookups(self) -> None:
        """Wait until every outstanding asynchronous lookup has been applied or dropped."""
        await self._runner.drain()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def advance(self, direction: AdvanceDirection = AdvanceDirection.NEXT) -> None:
        """Cycle item by item, spilling into the adjacent group at the ends."""
        self._navigable().advance(direction)
        logger.debug(f"Advanced {direction.value}: {self.active_group!r} -> {self.active!r}")
        self._publish()

    def advance_group(self, direction: AdvanceDirection = AdvanceDirection.NEXT) -> None:
        """Cycle group by group."""
        self._navigable().advance_group(direction)
        logger.debug(f"Jumped {direction.value}: {self.active_group!r} -> {self.active!r}")
        self._publish()

    # ------------------------------------------------------------------
    # Commits
    # ------------------------------------------------------------------

    def complete(self) -> CommitOutcome:
        """Commit the highlighted candidate or field option (Tab)."""
        state = self.state
        candidate = None if state.is_committed else state.candidates.active

        if isinstance(candidate, AppCandidate):
            return CommitOutcome.NOTHING
        if isinstance(candidate, ActionCandidate):
            intent = self._config.find_intent(candidate.action)
            if intent is None:
                logger.error(f"Action {candidate.action!r} has no configured intent")
                return CommitOutcome.NOTHING
            self._select(candidate.matched_trigger)
            state.intent = intent
            logger.info(f"Selected intent {intent.action!r} via trigger {candidate.matched_trigger!r}")
            self._set_text(candidate.matched_trigger + " ")
            return CommitOutcome.ACTION_SELECTED
        if isinstance(candidate, TopicCandidate):
            self._select(candidate.matched_text)
            state.interest = candidate
            logger.info(f"Selected interest {candidate.topic!r}: {candidate.matched_text!r}")
            self._set_text(candidate.matched_text + " ")
            return CommitOutcome.TOPIC_SELECTED

        option = state.options.active
        field_name = state.options.active_key
        if option is None or field_name is None:
            return CommitOutcome.NOTHING

        literal = option.text
        new_text = state.text[: last_space_boundary(state.text)] + literal
        state.ledger.bind(len(new_text), field_name, literal, option.value)
        state.options.clear()
        self._set_text(new_text + " ")
        return CommitOutcome.FIELD_BOUND

    def commit(self) -> CommitOutcome:
        """Complete and dispatch (Enter).

        Dispatcher errors are logged and re-raised without resetting the
        state, so the user can retry.
        """
        state = self.state
        candidate = None if state.is_committed else state.candidates.active
        if isinstance(candidate, AppCandidate):
            self._call_host("launch", self._dispatcher.launch, candidate.url)
            logger.info(f"Launched application {candidate.url!r}")
            self.reset()
            return CommitOutcome.APP_LAUNCHED

        completed = self.complete()

        if state.intent is not None:
            intent = state.intent
            payload = self.build_payload()
            self._call_host(
                "dispatch_intent",
                self._dispatcher.dispatch_intent,
                intent.action,
                intent.domain,
                intent.sub_domain,
                payload,
            )
            logger.info(f"Dispatched intent {intent.action!r} with payload {payload}")
            self.reset()
            return CommitOutcome.INTENT_DISPATCHED

        if state.interest is not None:
            interest = state.interest
            body = interest.body if interest.body is not None else interest.matched_text
            self._call_host(
                "dispatch_interest",
                self._dispatcher.dispatch_interest,
                interest.topic,
                interest.domain,
                interest.sub_domain,
                body,
            )
            logger.info(f"Dispatched interest {interest.topic!r}")
            self.reset()
            return CommitOutcome.INTEREST_DISPATCHED

        return completed

    def build_payload(self) -> dict[str, Any]:
        """Payload the committed intent would be dispatched with right now."""
        if self.state.intent is None:
            return {}
        return build_payload(self.state.text, self.state.intent, self.state.ledger.bindings())

    def reset(self) -> None:
        """Return to the empty state, dropping any outstanding lookups."""
        self._runner.cancel_all()
        self._context += 1
        self.state = self._new_state()
        logger.debug("Resolver state reset")
        self._publish()

    def _select(self, text: str) -> None:
        state = self.state
        self._context += 1
        state.candidates.clear()
        state.options = SelectionState()
        state.ledger.clear()
        state.intent = None
        state.interest = None
        state.selection_position = len(text)

    def _set_text(self, text: str) -> None:
        # The committed text replaces the input; the cursor sits at its end
        self.state.text = ""
        self.text_changed(text, len(text))

    @staticmethod
    def _call_host(operation: str, func: Callable[..., Any], *args: Any) -> None:
        try:
            func(*args)
        except Exception:
            logger.exception(f"Host {operation} failed")
            raise

    def _publish(self) -> None:
        self._event_bus.publish(ResolverRefreshed(text=self.state.text, token=self.state.token))
