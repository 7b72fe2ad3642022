"""Shared domain types."""

from launchbar.domain.types.candidates import (
    APPS_GROUP,
    ActionCandidate,
    AdvanceDirection,
    AppCandidate,
    Candidate,
    CandidateKind,
    TopicCandidate,
)
from launchbar.domain.types.fields import BoundField, FieldValue, OptionValue, SingleValue

__all__ = [
    "APPS_GROUP",
    "ActionCandidate",
    "AdvanceDirection",
    "AppCandidate",
    "Candidate",
    "CandidateKind",
    "TopicCandidate",
    "BoundField",
    "FieldValue",
    "OptionValue",
    "SingleValue",
]
