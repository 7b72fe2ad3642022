"""Application layer - the resolver and the components it is built from."""

from .expressions import ExpressionRegistry
from .ledger import PositionLedger
from .payload import build_payload
from .resolver import CommitOutcome, Resolver, ResolverState, completion_hint
from .selection import SelectionState
from .tokenizer import extract_token

__all__ = [
    "ExpressionRegistry",
    "PositionLedger",
    "build_payload",
    "CommitOutcome",
    "Resolver",
    "ResolverState",
    "completion_hint",
    "SelectionState",
    "extract_token",
]
